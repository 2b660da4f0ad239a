# wren/__init__.py
"""
Loading of named assets for, e.g., a game.

Loaders resolve an identifier to a shared AssetHandle; a creation delegate
turns the raw bytes into a value. Loaders compose:

- CachedLoader keeps loaded assets in memory between loads, freeing unused
  ones when garbage_collect() is called.
- CombinedLoader and LoaderList search several child loaders in order.
- DirectoryLoader and ZipLoader read assets from a directory or ZIP file.
- MemoryLoader serves prebuilt assets.

A minimal setup::

    loader = loader_from_paths("assets/", "/global_assets/").to_cached()
    delegate = default_delegate()

    handle = load_typed(loader, "my_string_asset.json", delegate, StringAsset)
    if handle is not None:
        print(handle.read().value)
"""

from wren.delegates import (
    AssetCreationDelegate,
    ExtensionDispatchDelegate,
    ObjDelegate,
    ShaderDelegate,
    TaggedJsonAsset,
    TaggedJsonDelegate,
    TextureDelegate,
    default_delegate,
)
from wren.handle import AssetHandle, ReleasedHandleError, WrenError
from wren.loaders import (
    AssetLoader,
    CachedLoader,
    CombinedLoader,
    DirectoryLoader,
    LoaderList,
    MemoryLoader,
    ZipLoader,
    load_typed,
)
from wren.settings import LoaderSettings, build_loader, loader_from_paths
from wren.types import MeshData, ShaderSource, TextureData, VertexLayout

__all__ = [
    "AssetCreationDelegate",
    "AssetHandle",
    "AssetLoader",
    "CachedLoader",
    "CombinedLoader",
    "DirectoryLoader",
    "ExtensionDispatchDelegate",
    "LoaderList",
    "LoaderSettings",
    "MemoryLoader",
    "MeshData",
    "ObjDelegate",
    "ReleasedHandleError",
    "ShaderDelegate",
    "ShaderSource",
    "TaggedJsonAsset",
    "TaggedJsonDelegate",
    "TextureData",
    "TextureDelegate",
    "VertexLayout",
    "WrenError",
    "ZipLoader",
    "build_loader",
    "default_delegate",
    "load_typed",
    "loader_from_paths",
]
