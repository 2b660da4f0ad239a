# wren/handle.py
from __future__ import annotations

from typing import Any, Generic, Optional, Type, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")


class WrenError(Exception):
    """Base class for errors raised by wren."""


class ReleasedHandleError(WrenError):
    """Raised when a released handle is read or cloned."""


class _SharedStore:
    """Storage block co-owned by every clone of a handle."""

    __slots__ = ("value", "asset_type", "count")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.asset_type: type = type(value)
        self.count = 1

    def drop(self) -> None:
        self.count -= 1
        if self.count == 0:
            # Handles held by the payload get released as it goes away.
            self.value = None


class AssetHandle(Generic[T]):
    """
    Reference-counted, shareable handle to one loaded asset.

    Every clone shares a single storage block and counter. The payload is
    dropped when the last clone is released, either explicitly via
    release(), by leaving a ``with`` block, or when the handle object is
    garbage collected.
    """

    __slots__ = ("_store", "_released", "__weakref__")

    def __init__(self, store: _SharedStore) -> None:
        self._store = store
        self._released = False

    @classmethod
    def wrap(cls, value: T) -> AssetHandle[T]:
        """Allocate shared storage for ``value``."""
        return cls(_SharedStore(value))

    def erase(self) -> AssetHandle[Any]:
        return cast(AssetHandle[Any], self)

    def downcast(self, asset_type: Type[U]) -> Optional[AssetHandle[U]]:
        """
        Return a clone typed as ``asset_type`` if the value is exactly that
        type, otherwise None. This handle stays valid either way.
        """
        self._check()
        if self._store.asset_type is not asset_type:
            return None
        return cast(AssetHandle[U], self.clone())

    def clone(self) -> AssetHandle[T]:
        self._check()
        self._store.count += 1
        return AssetHandle(self._store)

    def read(self) -> T:
        self._check()
        return cast(T, self._store.value)

    def release(self) -> None:
        """Drop this clone. Releasing twice is a no-op."""
        if self._released:
            return
        self._released = True
        self._store.drop()

    def same_asset(self, other: AssetHandle[Any]) -> bool:
        return self._store is other._store

    @property
    def reference_count(self) -> int:
        return self._store.count

    @property
    def asset_type(self) -> type:
        return self._store.asset_type

    @property
    def released(self) -> bool:
        return self._released

    def _check(self) -> None:
        if self._released:
            raise ReleasedHandleError(
                f"handle to {self._store.asset_type.__name__} was released"
            )

    def __enter__(self) -> AssetHandle[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        # __init__ may not have run if construction failed.
        if getattr(self, "_store", None) is not None:
            self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else f"refs={self._store.count}"
        return f"AssetHandle({self._store.asset_type.__name__}, {state})"
