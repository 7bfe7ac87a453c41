import struct

import pytest

from grapho.dx11format import DxgiFormat, InputClassification, input_elements
from grapho.examples.textured_quad import (
    TexturedVertex,
    dx11_layouts,
    gl_layouts,
    identity_mvp,
    index_bytes,
    pixel_bytes,
    vertex_bytes,
)
from grapho.vertexlayout import Float4x4, ValueType


def test_vertex_bytes_round_trip():
    data = vertex_bytes()
    stride = struct.calcsize(TexturedVertex.FORMAT)
    assert len(data) == 4 * stride
    values = [struct.unpack_from(TexturedVertex.FORMAT, data, i * stride) for i in range(4)]
    assert values[0] == (-0.5, -0.5, 0.0, 1.0)
    assert values[2] == (0.5, 0.5, 1.0, 0.0)


def test_vertex_positions_are_symmetric():
    data = vertex_bytes()
    floats = struct.unpack(f"<{len(data) // 4}f", data)
    xs = floats[0::4]
    ys = floats[1::4]
    assert sum(xs) == 0.0
    assert sum(ys) == 0.0


def test_index_bytes_uint8():
    assert index_bytes(ValueType.UINT8) == bytes([0, 1, 2, 2, 3, 0])


@pytest.mark.parametrize("value_type", [ValueType.UINT16, ValueType.UINT32])
def test_index_bytes_wider_types_round_trip(value_type):
    data = index_bytes(value_type)
    assert len(data) == 6 * value_type.size
    assert struct.unpack(f"<6{value_type.value}", data) == (0, 1, 2, 2, 3, 0)


@pytest.mark.parametrize("value_type", [ValueType.FLOAT, ValueType.INT8])
def test_index_bytes_rejects_other_types(value_type):
    with pytest.raises(ValueError):
        index_bytes(value_type)


def test_pixel_bytes():
    data = pixel_bytes()
    assert len(data) == 2 * 2 * 4
    assert data[:4] == bytes([255, 0, 0, 255])
    assert data[12:] == bytes([255, 255, 255, 255])
    assert all(data[i] == 255 for i in range(3, 16, 4))


def test_identity_mvp():
    m = identity_mvp()
    assert m == Float4x4.identity()
    assert sum(m) == 4.0


def test_gl_layouts_use_given_locations():
    position, uv = gl_layouts(3, 7)
    assert position.id.attribute_location == 3
    assert uv.id.attribute_location == 7
    assert (position.id.semantic_name, uv.id.semantic_name) == ("vPos", "vUv")
    assert position.offset == TexturedVertex.POSITION_OFFSET
    assert uv.offset == TexturedVertex.UV_OFFSET
    assert position.stride == uv.stride == struct.calcsize(TexturedVertex.FORMAT)
    assert position.count == uv.count == 2


def test_dx11_layouts_describe_input_elements():
    elements = input_elements(dx11_layouts())
    assert [e.semantic_name for e in elements] == ["POSITION", "TEXCOORD"]
    assert all(e.format is DxgiFormat.R32G32_FLOAT for e in elements)
    assert all(e.input_slot_class is InputClassification.PER_VERTEX_DATA for e in elements)
    assert [e.aligned_byte_offset for e in elements] == [
        TexturedVertex.POSITION_OFFSET,
        TexturedVertex.UV_OFFSET,
    ]