# wren/delegates/mesh.py
import logging
from typing import BinaryIO, List, Optional, Tuple

import numpy as np

from wren.delegates.base import AssetCreationDelegate
from wren.types import MeshData, VertexLayout

logger = logging.getLogger(__name__)

VERTEX_DTYPE = np.dtype("<f4")
FLOATS_PER_VERTEX = 8  # 3 pos + 3 normal + 2 uv


class ObjDelegate(AssetCreationDelegate):
    """
    Wavefront OBJ decoder.

    Supported:
      - v, vn, vt
      - triangular faces only
      - flat-expanded vertex buffer (no index buffer)
    """

    def create(self, identifier: str, reader: BinaryIO) -> Optional[MeshData]:
        try:
            return self._parse(reader.read().decode("utf-8").splitlines())
        except (ValueError, IndexError, UnicodeDecodeError) as e:
            logger.warning("Failed to decode OBJ %s: %s", identifier, e)
            return None

    def _parse(self, lines: List[str]) -> MeshData:
        positions: List[Tuple[float, float, float]] = []
        normals: List[Tuple[float, float, float]] = []
        uvs: List[Tuple[float, float]] = []
        vertices: List[Tuple[float, ...]] = []

        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            parts = line.split()
            tag = parts[0]

            if tag == "v":
                px, py, pz = map(float, parts[1:4])
                positions.append((px, py, pz))

            elif tag == "vn":
                nx, ny, nz = map(float, parts[1:4])
                normals.append((nx, ny, nz))

            elif tag == "vt":
                u, v = map(float, parts[1:3])
                uvs.append((u, v))

            elif tag == "f":
                if len(parts) != 4:
                    raise ValueError("Only triangular faces supported")

                for vert in parts[1:4]:
                    v_idx, vt_idx, vn_idx = self._parse_face_vertex(vert)

                    nx, ny, nz = (
                        normals[vn_idx] if vn_idx is not None else (0.0, 1.0, 0.0)
                    )
                    u, v = uvs[vt_idx] if vt_idx is not None else (0.0, 0.0)

                    vertices.append((*positions[v_idx], nx, ny, nz, u, v))

        if not vertices:
            raise ValueError("No geometry found in OBJ")

        buffer = np.asarray(vertices, dtype=VERTEX_DTYPE)
        points = np.asarray(positions, dtype=VERTEX_DTYPE)
        lo = points.min(axis=0)
        hi = points.max(axis=0)

        layout = VertexLayout(
            attributes=["in_pos", "in_normal", "in_uv"],
            format="3f 3f 2f",
            stride_bytes=FLOATS_PER_VERTEX * VERTEX_DTYPE.itemsize,
        )

        return MeshData(
            vertices=buffer.tobytes(),
            vertex_layout=layout,
            aabb=(
                (float(lo[0]), float(lo[1]), float(lo[2])),
                (float(hi[0]), float(hi[1]), float(hi[2])),
            ),
        )

    def _parse_index(self, val: str) -> int | None:
        if not val:
            return None
        idx = int(val)
        if idx == 0:
            raise ValueError("OBJ indices start at 1")
        # OBJ is 1-based; negative indices are relative to the end.
        return idx - 1 if idx > 0 else idx

    def _parse_face_vertex(
        self, token: str
    ) -> Tuple[int, int | None, int | None]:
        parts = token.split("/")
        v = self._parse_index(parts[0])
        vt = self._parse_index(parts[1]) if len(parts) > 1 else None
        vn = self._parse_index(parts[2]) if len(parts) > 2 else None

        if v is None:
            raise ValueError(f"Invalid vertex index in token: {token}")

        return v, vt, vn
