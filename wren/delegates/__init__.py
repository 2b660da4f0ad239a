# wren/delegates/__init__.py
from wren.delegates.base import AssetCreationDelegate
from wren.delegates.dispatch import ExtensionDispatchDelegate, extension_of
from wren.delegates.mesh import ObjDelegate
from wren.delegates.shader import ShaderDelegate
from wren.delegates.tagged_json import TaggedJsonAsset, TaggedJsonDelegate
from wren.delegates.texture import TextureDelegate


def default_delegate() -> ExtensionDispatchDelegate:
    """Extension dispatcher with every bundled delegate registered."""
    texture = TextureDelegate()
    shader = ShaderDelegate()
    return (
        ExtensionDispatchDelegate()
        .register("json", TaggedJsonDelegate())
        .register("obj", ObjDelegate())
        .register("png", texture)
        .register("jpg", texture)
        .register("jpeg", texture)
        .register("glsl", shader)
        .register("vert", shader)
        .register("frag", shader)
        .register("comp", shader)
    )


__all__ = [
    "AssetCreationDelegate",
    "ExtensionDispatchDelegate",
    "ObjDelegate",
    "ShaderDelegate",
    "TaggedJsonAsset",
    "TaggedJsonDelegate",
    "TextureDelegate",
    "default_delegate",
    "extension_of",
]
