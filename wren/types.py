# wren/types.py
from dataclasses import dataclass
from typing import List, Tuple

Point3 = Tuple[float, float, float]
Bounds = Tuple[Point3, Point3]  # (min corner, max corner)


@dataclass(frozen=True)
class VertexLayout:
    """Describes how an interleaved vertex buffer is laid out."""

    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # struct-like format string e.g. "3f 3f 2f"
    stride_bytes: int  # e.g. 32


@dataclass(frozen=True)
class MeshData:
    """Mesh geometry decoded from an asset file."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: Bounds

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // self.vertex_layout.stride_bytes


@dataclass(frozen=True)
class TextureData:
    """Raw texture pixels and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # always 4 (RGBA) for bundled delegates


@dataclass(frozen=True)
class ShaderSource:
    """Raw shader source code."""

    source: str
    path: str  # identifier the source was loaded from
