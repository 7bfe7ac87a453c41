"""Input element descriptions for a Direct3D 11 style input layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable

from .vertexlayout import ValueType, VertexLayout


class DxgiFormat(IntEnum):
    R32G32B32A32_FLOAT = 2
    R32G32B32_FLOAT = 6
    R32G32_FLOAT = 16
    R32_UINT = 42


class InputClassification(Enum):
    PER_VERTEX_DATA = 0
    PER_INSTANCE_DATA = 1


@dataclass(frozen=True)
class InputElement:
    semantic_name: str
    semantic_index: int
    format: DxgiFormat
    input_slot: int
    aligned_byte_offset: int
    input_slot_class: InputClassification
    instance_data_step_rate: int


_FLOAT_FORMATS = {
    2: DxgiFormat.R32G32_FLOAT,
    3: DxgiFormat.R32G32B32_FLOAT,
    4: DxgiFormat.R32G32B32A32_FLOAT,
}


def dxgi_format(layout: VertexLayout) -> DxgiFormat:
    """Return the element format for a layout; raise ValueError if unsupported."""
    if layout.type is ValueType.FLOAT and layout.count in _FLOAT_FORMATS:
        return _FLOAT_FORMATS[layout.count]
    raise ValueError(
        f"unsupported vertex layout: {layout.type.name} x {layout.count}"
    )


def input_elements(layouts: Iterable[VertexLayout]) -> list[InputElement]:
    """Describe each layout as an input element."""
    return [
        InputElement(
            semantic_name=layout.id.semantic_name,
            semantic_index=layout.id.semantic_index,
            format=dxgi_format(layout),
            input_slot=layout.id.slot,
            aligned_byte_offset=layout.offset,
            input_slot_class=(
                InputClassification.PER_INSTANCE_DATA
                if layout.divisor
                else InputClassification.PER_VERTEX_DATA
            ),
            instance_data_step_rate=layout.divisor,
        )
        for layout in layouts
    ]