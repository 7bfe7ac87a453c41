"""Tangent-space quad geometry and texture settings for normal mapping."""

from __future__ import annotations

import struct
from enum import IntEnum

from .camera.transform import _ieee_div
from .vertexlayout import Float2, Float3, ValueType, VertexId, VertexLayout


class TextureFormat(IntEnum):
    """Pixel layout of an uploaded texture, valued as the GL enum."""

    RED = 0x1903
    RGB = 0x1907
    RGBA = 0x1908


class WrapMode(IntEnum):
    """Texture coordinate wrapping, valued as the GL enum."""

    REPEAT = 0x2901
    CLAMP_TO_EDGE = 0x812F


QUAD_FORMAT = "<14f"
_QUAD_STRIDE = struct.calcsize(QUAD_FORMAT)

# position, normal, texcoords, tangent, bitangent
QUAD_LAYOUTS = tuple(
    VertexLayout(VertexId(attribute_location=location, slot=0), ValueType.FLOAT,
                 count, offset, _QUAD_STRIDE)
    for location, (count, offset) in enumerate(
        ((3, 0), (3, 12), (2, 24), (3, 32), (3, 44))
    )
)


def tangent_bitangent(
    pos1: Float3, pos2: Float3, pos3: Float3, uv1: Float2, uv2: Float2, uv3: Float2
) -> tuple[Float3, Float3]:
    """Unnormalised tangent and bitangent of a textured triangle.

    Degenerate texture coordinates give non-finite vectors.
    """
    edge1 = (pos2.x - pos1.x, pos2.y - pos1.y, pos2.z - pos1.z)
    edge2 = (pos3.x - pos1.x, pos3.y - pos1.y, pos3.z - pos1.z)
    du1, dv1 = uv2.x - uv1.x, uv2.y - uv1.y
    du2, dv2 = uv3.x - uv1.x, uv3.y - uv1.y

    f = _ieee_div(1.0, du1 * dv2 - du2 * dv1)
    tangent = Float3(*(f * (dv2 * a - dv1 * b) for a, b in zip(edge1, edge2)))
    bitangent = Float3(*(f * (-du2 * a + du1 * b) for a, b in zip(edge1, edge2)))
    return tangent, bitangent


def quad_vertices() -> list[tuple[float, ...]]:
    """Six vertices of a 2x2 quad in NDC, 14 floats each.

    Each vertex holds position, normal, texcoords, tangent and bitangent.
    """
    pos1 = Float3(-1.0, 1.0, 0.0)
    pos2 = Float3(-1.0, -1.0, 0.0)
    pos3 = Float3(1.0, -1.0, 0.0)
    pos4 = Float3(1.0, 1.0, 0.0)
    uv1 = Float2(0.0, 1.0)
    uv2 = Float2(0.0, 0.0)
    uv3 = Float2(1.0, 0.0)
    uv4 = Float2(1.0, 1.0)
    normal = Float3(0.0, 0.0, 1.0)

    triangles = (
        ((pos1, uv1), (pos2, uv2), (pos3, uv3)),
        ((pos1, uv1), (pos3, uv3), (pos4, uv4)),
    )
    vertices = []
    for (p1, t1), (p2, t2), (p3, t3) in triangles:
        tangent, bitangent = tangent_bitangent(p1, p2, p3, t1, t2, t3)
        for pos, uv in ((p1, t1), (p2, t2), (p3, t3)):
            vertices.append((*pos, *normal, *uv, *tangent, *bitangent))
    return vertices


def texture_format(components: int) -> TextureFormat:
    """Texture format for an image with the given number of channels."""
    formats = {1: TextureFormat.RED, 3: TextureFormat.RGB, 4: TextureFormat.RGBA}
    try:
        return formats[components]
    except KeyError:
        raise ValueError(f"unsupported number of components: {components}") from None


def wrap_mode(fmt: TextureFormat) -> WrapMode:
    """Clamp textures with alpha so borders stay opaque; repeat the rest."""
    return WrapMode.CLAMP_TO_EDGE if fmt is TextureFormat.RGBA else WrapMode.REPEAT