"""A textured quad drawn with an identity transform, for GL and Direct3D 11."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from ..vertexlayout import (
    Float2,
    Float4x4,
    ValueType,
    VertexBuffer,
    VertexId,
    VertexLayout,
)

GL_WINDOW_NAME = "gl3window"
DX11_CLASS_NAME = "dx11class"
DX11_WINDOW_NAME = "dx11window"
WIDTH = 640
HEIGHT = 480

TEXTURE_WIDTH = 2
TEXTURE_HEIGHT = 2
FBO_SIZE = 512
FBO_CLEAR_COLOR = (0.0, 0.2, 0.0, 1.0)
DX11_CLEAR_COLOR = (0.2, 0.2, 0.2, 0.0)
UBO_BINDING_POINT = 1
INDEX_COUNT = 6

GL_VERTEX_SHADER = """#version 400
layout (std140) uniform Scene {
\tmat4 mvp;
} Mat;
in vec2 vPos;
in vec2 vUv;
out vec2 uv;
void main()
{
    gl_Position = Mat.mvp * vec4(vPos, 0.0, 1.0);
    uv = vUv;
};
"""

GL_FRAGMENT_SHADER = """#version 400
in vec2 uv;
out vec4 FragColor;
uniform sampler2D colorTexture;

void main()
{
    FragColor = texture(colorTexture, uv);
};
"""

HLSL_SHADER = """
#pragma pack_matrix(row_major)
cbuffer c0
{
    float4x4 mvp;
};
struct vs_in {
    float2 pos: POSITION;
    float2 uv: TEXCOORD;
};
struct vs_out {
    float4 position_clip: SV_POSITION;
    float2 uv: TEXCOORD;
};

vs_out vs_main(vs_in IN) {
  vs_out OUT = (vs_out)0; // zero the memory first
  OUT.position_clip = mul(mvp, float4(IN.pos.xy, 0, 1));
  OUT.uv = IN.uv;
  return OUT;
}

Texture2D colorTexture;
SamplerState colorSampler;

float4 ps_main(vs_out IN) : SV_TARGET {
  float4 texel = colorTexture.Sample(colorSampler, IN.uv);
  return texel;
}
"""


@dataclass(frozen=True)
class TexturedVertex:
    position: Float2
    uv: Float2

    FORMAT: ClassVar[str] = "<2f2f"
    POSITION_OFFSET: ClassVar[int] = 0
    UV_OFFSET: ClassVar[int] = 8


_STRIDE = struct.calcsize(TexturedVertex.FORMAT)
_S = 0.5

# Counter-clockwise:
# 3   2
# +---+
# |   |
# +---+
# 0   1
VERTICES = (
    TexturedVertex(Float2(-_S, -_S), Float2(0.0, 1.0)),
    TexturedVertex(Float2(_S, -_S), Float2(1.0, 1.0)),
    TexturedVertex(Float2(_S, _S), Float2(1.0, 0.0)),
    TexturedVertex(Float2(-_S, _S), Float2(0.0, 0.0)),
)

INDICES = (0, 1, 2, 2, 3, 0)

PIXELS = (
    (255, 0, 0, 255),
    (0, 255, 0, 255),
    (0, 0, 255, 255),
    (255, 255, 255, 255),
)

_INDEX_TYPES = (ValueType.UINT8, ValueType.UINT16, ValueType.UINT32)


def vertex_bytes() -> bytes:
    """The four quad vertices packed as position and uv floats."""
    buffer = VertexBuffer()
    buffer.assign(TexturedVertex.FORMAT, VERTICES)
    return buffer.data


def index_bytes(value_type: ValueType) -> bytes:
    """The six quad indices packed as unsigned integers of ``value_type``."""
    if value_type not in _INDEX_TYPES:
        raise ValueError(f"unsupported index type: {value_type.name}")
    return struct.pack(f"<{len(INDICES)}{value_type.value}", *INDICES)


def pixel_bytes() -> bytes:
    """The 2x2 RGBA texture: red, green, blue and white."""
    return bytes(channel for pixel in PIXELS for channel in pixel)


def identity_mvp() -> Float4x4:
    return Float4x4.identity()


def _layouts(position_id: VertexId, uv_id: VertexId) -> list[VertexLayout]:
    return [
        VertexLayout(position_id, ValueType.FLOAT, 2,
                     TexturedVertex.POSITION_OFFSET, _STRIDE),
        VertexLayout(uv_id, ValueType.FLOAT, 2, TexturedVertex.UV_OFFSET, _STRIDE),
    ]


def gl_layouts(position_location: int, uv_location: int) -> list[VertexLayout]:
    """Layouts bound to the shader's ``vPos`` and ``vUv`` attribute locations."""
    return _layouts(
        VertexId(attribute_location=position_location, slot=0, semantic_name="vPos"),
        VertexId(attribute_location=uv_location, slot=0, semantic_name="vUv"),
    )


def dx11_layouts() -> list[VertexLayout]:
    """Layouts bound to the POSITION and TEXCOORD semantics."""
    return _layouts(
        VertexId(slot=0, semantic_name="POSITION", semantic_index=0),
        VertexId(slot=0, semantic_name="TEXCOORD", semantic_index=0),
    )