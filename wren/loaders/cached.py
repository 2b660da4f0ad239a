# wren/loaders/cached.py
"""
Provides CachedLoader, which keeps assets loaded by its child loader in
memory and frees unused ones when garbage_collect() is called.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from wren.delegates.base import AssetCreationDelegate
from wren.handle import AssetHandle
from wren.loaders.base import AssetLoader

logger = logging.getLogger(__name__)


class CachedLoader(AssetLoader):
    """
    A loader that caches the assets it loads, so every request for the same
    identifier shares one asset.

    Each cached asset is held by one handle owned by the cache. Assets are
    only freed by garbage_collect(), once that handle is the last one left.
    """

    def __init__(self, child: AssetLoader) -> None:
        self._cache: Dict[str, AssetHandle[Any]] = {}
        self._loader = child

    @property
    def child(self) -> AssetLoader:
        return self._loader

    def load(
        self, identifier: str, delegate: AssetCreationDelegate
    ) -> Optional[AssetHandle[Any]]:
        handle = self._cache.get(identifier)
        if handle is not None:
            return handle.clone()

        loaded = self._loader.load(identifier, delegate)
        if loaded is None:
            return None

        # A delegate may have loaded this identifier through us already.
        handle = self._cache.setdefault(identifier, loaded)
        if handle is not loaded:
            loaded.release()
        else:
            logger.debug("Cached %s", identifier)
        return handle.clone()

    def garbage_collect(self) -> int:
        """
        Delete every cached asset whose only remaining reference is the one
        held by this cache. Returns the number of assets removed.

        Sweeps repeatedly, since freeing one asset can orphan assets it was
        holding handles to. Assets that only reference each other in a cycle
        are never freed.
        """
        removed = 0
        while True:
            orphaned: List[str] = [
                identifier
                for identifier, handle in self._cache.items()
                if handle.reference_count <= 1
            ]
            if not orphaned:
                break
            for identifier in orphaned:
                self._cache.pop(identifier).release()
            removed += len(orphaned)

        if removed:
            logger.info(
                "Garbage collected %d assets, %d still cached",
                removed,
                len(self._cache),
            )
        return removed

    def clear(self) -> None:
        """Drop the cache's handle to every asset, referenced or not."""
        handles = list(self._cache.values())
        self._cache.clear()
        for handle in handles:
            handle.release()

    def close(self) -> None:
        """Drop every cached handle and close the child loader."""
        self.clear()
        self._loader.close()

    def cached_identifiers(self) -> List[str]:
        return list(self._cache)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._cache

    def __len__(self) -> int:
        return len(self._cache)
