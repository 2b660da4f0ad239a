# wren/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from wren.loaders.base import AssetLoader
from wren.loaders.cached import CachedLoader
from wren.loaders.combined import LoaderList
from wren.loaders.directory import DirectoryLoader
from wren.loaders.zip import ZipLoader

logger = logging.getLogger(__name__)

ASSET_PATH_ENV = "WREN_ASSET_PATH"
ASSET_CACHE_ENV = "WREN_ASSET_CACHE"

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class LoaderSettings:
    """Where assets are searched for, in priority order, and whether to cache them."""

    search_paths: tuple[Path, ...] = ()
    cached: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> LoaderSettings:
        raw = environ.get(ASSET_PATH_ENV, "")
        paths = tuple(Path(p) for p in raw.split(os.pathsep) if p)
        cached = environ.get(ASSET_CACHE_ENV, "1").strip().lower() not in _FALSY
        return cls(search_paths=paths, cached=cached)


def loader_from_paths(*paths: str | Path) -> LoaderList:
    """
    Build a LoaderList searching ``paths`` in order. Directories become
    DirectoryLoaders, ``.zip`` files become ZipLoaders, and paths that do
    not exist are skipped.
    """
    loaders = LoaderList()
    for raw in paths:
        if not isinstance(raw, (str, Path)):
            raise TypeError(
                f"search path must be str or Path, not {type(raw).__name__}"
            )
        path = Path(raw)
        if path.is_dir():
            loaders.append(DirectoryLoader(path))
        elif path.is_file() and path.suffix.lower() == ".zip":
            loaders.append(ZipLoader.open(path))
        else:
            logger.warning("Skipping asset search path %s", path)
    return loaders


def build_loader(settings: LoaderSettings) -> AssetLoader:
    loader: AssetLoader = loader_from_paths(*settings.search_paths)
    if settings.cached:
        loader = CachedLoader(loader)
    return loader
