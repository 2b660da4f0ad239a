# wren/loaders/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Self, Type, TypeVar

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle

if TYPE_CHECKING:
    from wren.loaders.cached import CachedLoader

T = TypeVar("T")


class AssetLoader(ABC):
    """Resolves an identifier to a handle with help from a creation delegate."""

    @abstractmethod
    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        """
        Load the asset named ``identifier``.

        Returns None if the asset could not be found or the delegate
        rejected its content.
        """
        pass

    def to_cached(self) -> CachedLoader:
        """Wrap this loader in a CachedLoader."""
        from wren.loaders.cached import CachedLoader

        return CachedLoader(self)

    def close(self) -> None:
        """Release backing resources such as open archives."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_typed(
    loader: AssetLoader,
    identifier: str,
    delegate: AssetCreationDelegate,
    asset_type: Type[T],
) -> Optional[AssetHandle[T]]:
    """
    Load an asset and narrow it to ``asset_type``.

    Returns None if the asset could not be found, failed to decode, or is
    not exactly of the requested type.
    """
    handle = loader.load(identifier, delegate)
    if handle is None:
        return None
    with handle:
        return handle.downcast(asset_type)
