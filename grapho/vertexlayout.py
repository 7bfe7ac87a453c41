"""Vector value types, vertex layouts, vertex buffers and meshes."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Iterable, Iterator


@dataclass
class Float2:
    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Float3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


@dataclass
class Float4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass
class Float4x4:
    """A row-major 4x4 matrix of floats."""

    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 0.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 0.0
    m34: float = 0.0
    m41: float = 0.0
    m42: float = 0.0
    m43: float = 0.0
    m44: float = 0.0

    @classmethod
    def identity(cls) -> "Float4x4":
        return cls(m11=1.0, m22=1.0, m33=1.0, m44=1.0)

    def __iter__(self) -> Iterator[float]:
        for f in fields(self):
            yield getattr(self, f.name)

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        values = tuple(self)
        return tuple(values[i : i + 4] for i in range(0, 16, 4))


class ValueType(Enum):
    """Scalar component type; the value is its struct format code."""

    FLOAT = "f"
    DOUBLE = "d"
    INT8 = "b"
    INT16 = "h"
    INT32 = "i"
    UINT8 = "B"
    UINT16 = "H"
    UINT32 = "I"

    @property
    def size(self) -> int:
        return struct.calcsize("<" + self.value)


@dataclass(frozen=True)
class VertexId:
    attribute_location: int = 0
    slot: int = 0
    semantic_name: str = ""
    semantic_index: int = 0


@dataclass(frozen=True)
class VertexLayout:
    id: VertexId
    type: ValueType
    count: int
    offset: int
    stride: int
    divisor: int = 0


class DrawMode(Enum):
    TRIANGLES = "triangles"
    TRIANGLE_STRIP = "triangle_strip"


def _flatten(value: Any) -> Iterator[Any]:
    if isinstance(value, (int, float)):
        yield value
    elif is_dataclass(value):
        for f in fields(value):
            yield from _flatten(getattr(value, f.name))
    else:
        for item in value:
            yield from _flatten(item)


@dataclass
class VertexBuffer:
    """Packed element bytes together with the number of elements."""

    data: bytes = b""
    count: int = 0

    def assign(self, fmt: str, values: Iterable[Any]) -> None:
        """Pack each value with the struct format ``fmt``."""
        packer = struct.Struct(fmt)
        chunks = [packer.pack(*_flatten(value)) for value in values]
        self.data = b"".join(chunks)
        self.count = len(chunks)

    def size(self) -> int:
        return len(self.data)

    def stride(self) -> int:
        if self.count == 0:
            raise ValueError("stride of an empty buffer is undefined")
        return len(self.data) // self.count


@dataclass
class Mesh:
    mode: DrawMode = DrawMode.TRIANGLES
    layouts: list[VertexLayout] = field(default_factory=list)
    vertices: VertexBuffer = field(default_factory=VertexBuffer)
    indices: VertexBuffer = field(default_factory=VertexBuffer)

    def draw_count(self) -> int:
        return self.indices.count if self.indices.size() else self.vertices.count