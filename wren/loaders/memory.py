# wren/loaders/memory.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle
from wren.loaders.base import AssetLoader


class MemoryLoader(AssetLoader):
    """Serves prebuilt handles from a fixed mapping. Never calls the delegate."""

    def __init__(self, assets: Mapping[str, AssetHandle[Any]]) -> None:
        self._assets: Dict[str, AssetHandle[Any]] = dict(assets)

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> MemoryLoader:
        return cls({key: AssetHandle.wrap(value) for key, value in values.items()})

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        handle = self._assets.get(identifier)
        if handle is None:
            return None
        return handle.clone()

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._assets
