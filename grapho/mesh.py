"""Procedural meshes: sphere, cube and screen quad."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import ClassVar

from .vertexlayout import (
    DrawMode,
    Float2,
    Float3,
    Mesh,
    ValueType,
    VertexId,
    VertexLayout,
)


@dataclass
class Vertex:
    position: Float3
    normal: Float3
    uv: Float2

    FORMAT: ClassVar[str] = "<3f3f2f"
    POSITION_OFFSET: ClassVar[int] = 0
    NORMAL_OFFSET: ClassVar[int] = 12
    UV_OFFSET: ClassVar[int] = 24
    LAYOUTS: ClassVar[tuple[VertexLayout, ...]] = ()


_VERTEX_STRIDE = struct.calcsize(Vertex.FORMAT)

Vertex.LAYOUTS = (
    VertexLayout(VertexId(attribute_location=0, slot=0), ValueType.FLOAT, 3,
                 Vertex.POSITION_OFFSET, _VERTEX_STRIDE),
    VertexLayout(VertexId(attribute_location=1, slot=0), ValueType.FLOAT, 3,
                 Vertex.NORMAL_OFFSET, _VERTEX_STRIDE),
    VertexLayout(VertexId(attribute_location=2, slot=0), ValueType.FLOAT, 2,
                 Vertex.UV_OFFSET, _VERTEX_STRIDE),
)


@dataclass
class QuadVertex:
    position: Float3
    uv: Float2

    FORMAT: ClassVar[str] = "<3f2f"
    LAYOUTS: ClassVar[tuple[VertexLayout, ...]] = ()


# The quad layouts use the offsets and stride of Vertex.
QuadVertex.LAYOUTS = (
    VertexLayout(VertexId(attribute_location=0, slot=0), ValueType.FLOAT, 3,
                 Vertex.POSITION_OFFSET, _VERTEX_STRIDE),
    VertexLayout(VertexId(attribute_location=1, slot=0), ValueType.FLOAT, 2,
                 Vertex.UV_OFFSET, _VERTEX_STRIDE),
)

_INDEX_FORMAT = "<H"
_SPHERE_SEGMENTS = 64
_PI = 3.14159265359


def sphere() -> Mesh:
    """A unit UV sphere drawn as one triangle strip."""
    x_segments = y_segments = _SPHERE_SEGMENTS
    vertices = []
    for x in range(x_segments + 1):
        for y in range(y_segments + 1):
            x_segment = x / x_segments
            y_segment = y / y_segments
            point = Float3(
                math.cos(x_segment * 2.0 * _PI) * math.sin(y_segment * _PI),
                math.cos(y_segment * _PI),
                math.sin(x_segment * 2.0 * _PI) * math.sin(y_segment * _PI),
            )
            vertices.append(Vertex(point, point, Float2(x_segment, y_segment)))

    row = x_segments + 1
    indices: list[int] = []
    for y in range(y_segments):
        even = y % 2 == 0
        columns = range(row) if even else range(x_segments, -1, -1)
        for x in columns:
            upper = y * row + x
            lower = (y + 1) * row + x
            indices.extend((upper, lower) if even else (lower, upper))

    mesh = Mesh(mode=DrawMode.TRIANGLE_STRIP, layouts=list(Vertex.LAYOUTS))
    mesh.vertices.assign(Vertex.FORMAT, vertices)
    mesh.indices.assign(_INDEX_FORMAT, indices)
    return mesh


_CUBE_FACES = (
    # back
    ((0, 0, -1), (((-1, -1, -1), (0, 0)), ((1, 1, -1), (1, 1)), ((1, -1, -1), (1, 0)),
                  ((1, 1, -1), (1, 1)), ((-1, -1, -1), (0, 0)), ((-1, 1, -1), (0, 1)))),
    # front
    ((0, 0, 1), (((-1, -1, 1), (0, 0)), ((1, -1, 1), (1, 0)), ((1, 1, 1), (1, 1)),
                 ((1, 1, 1), (1, 1)), ((-1, 1, 1), (0, 1)), ((-1, -1, 1), (0, 0)))),
    # left
    ((-1, 0, 0), (((-1, 1, 1), (1, 0)), ((-1, 1, -1), (1, 1)), ((-1, -1, -1), (0, 1)),
                  ((-1, -1, -1), (0, 1)), ((-1, -1, 1), (0, 0)), ((-1, 1, 1), (1, 0)))),
    # right
    ((1, 0, 0), (((1, 1, 1), (1, 0)), ((1, -1, -1), (0, 1)), ((1, 1, -1), (1, 1)),
                 ((1, -1, -1), (0, 1)), ((1, 1, 1), (1, 0)), ((1, -1, 1), (0, 0)))),
    # bottom
    ((0, -1, 0), (((-1, -1, -1), (0, 1)), ((1, -1, -1), (1, 1)), ((1, -1, 1), (1, 0)),
                  ((1, -1, 1), (1, 0)), ((-1, -1, 1), (0, 0)), ((-1, -1, -1), (0, 1)))),
    # top
    ((0, 1, 0), (((-1, 1, -1), (0, 1)), ((1, 1, 1), (1, 0)), ((1, 1, -1), (1, 1)),
                 ((1, 1, 1), (1, 0)), ((-1, 1, -1), (0, 1)), ((-1, 1, 1), (0, 0)))),
)


def cube(s: float = 1.0) -> Mesh:
    """A cube of half extent ``s`` as 36 unindexed triangle vertices."""
    vertices = [
        Vertex(
            Float3(cx * s, cy * s, cz * s),
            Float3(float(nx), float(ny), float(nz)),
            Float2(float(u), float(v)),
        )
        for (nx, ny, nz), corners in _CUBE_FACES
        for (cx, cy, cz), (u, v) in corners
    ]
    mesh = Mesh(mode=DrawMode.TRIANGLES, layouts=list(Vertex.LAYOUTS))
    mesh.vertices.assign(Vertex.FORMAT, vertices)
    return mesh


def quad() -> Mesh:
    """A full-screen quad drawn as a triangle strip."""
    vertices = [
        QuadVertex(Float3(-1.0, 1.0, 0.0), Float2(0.0, 1.0)),
        QuadVertex(Float3(-1.0, -1.0, 0.0), Float2(0.0, 0.0)),
        QuadVertex(Float3(1.0, 1.0, 0.0), Float2(1.0, 1.0)),
        QuadVertex(Float3(1.0, -1.0, 0.0), Float2(1.0, 0.0)),
    ]
    mesh = Mesh(mode=DrawMode.TRIANGLE_STRIP, layouts=list(QuadVertex.LAYOUTS))
    mesh.vertices.assign(QuadVertex.FORMAT, vertices)
    return mesh