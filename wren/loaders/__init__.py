# wren/loaders/__init__.py
"""Basic kinds of AssetLoader, which can be composed with each other."""

from wren.loaders.base import AssetLoader, load_typed
from wren.loaders.cached import CachedLoader
from wren.loaders.combined import CombinedLoader, LoaderList
from wren.loaders.directory import DirectoryLoader
from wren.loaders.memory import MemoryLoader
from wren.loaders.zip import ZipLoader

__all__ = [
    "AssetLoader",
    "CachedLoader",
    "CombinedLoader",
    "DirectoryLoader",
    "LoaderList",
    "MemoryLoader",
    "ZipLoader",
    "load_typed",
]
