# wren/loaders/combined.py
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle
from wren.loaders.base import AssetLoader


def _first_match(
    loaders: Iterable[AssetLoader],
    identifier: str,
    delegate: AssetCreationDelegate,
) -> Optional[AssetHandle[Any]]:
    for loader in loaders:
        asset = loader.load(identifier, delegate)
        if asset is not None:
            return asset
    return None


class CombinedLoader(AssetLoader):
    """
    Queries several child loaders, in order, for the same asset.

    Earlier children take priority: once one of them returns a handle,
    later children are not consulted.
    """

    def __init__(self, loaders: Optional[Iterable[AssetLoader]] = None) -> None:
        self._loaders: List[AssetLoader] = list(loaders or ())

    def with_loader(self, loader: AssetLoader) -> CombinedLoader:
        """Append a child loader. Returns self for chaining."""
        self._loaders.append(loader)
        return self

    @property
    def loaders(self) -> tuple[AssetLoader, ...]:
        return tuple(self._loaders)

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        return _first_match(self._loaders, identifier, delegate)

    def close(self) -> None:
        for loader in self._loaders:
            loader.close()


class LoaderList(list[AssetLoader], AssetLoader):
    """A plain list of loaders that is itself a loader (first match wins)."""

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        return _first_match(self, identifier, delegate)

    def close(self) -> None:
        for loader in self:
            loader.close()
