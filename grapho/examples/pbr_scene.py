"""Scene data of the physically based rendering example.

Four point lights, five textured spheres and a selectable object list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Generic, Sequence, TypeVar, Union

from ..imageloader import ColorSpace
from ..vertexlayout import Float3, Float4

StrPath = Union[str, "PathLike[str]"]

SCREEN_WIDTH = 1600
SCREEN_HEIGHT = 1200
CLEAR_COLOR = Float4(0.1, 0.1, 0.1, 1.0)
CAMERA_DISTANCE = 10.0
HDR_PATH = "resources/textures/hdr/newport_loft.hdr"
WORLD_UBO_BINDING = 0
LOCAL_UBO_BINDING = 1
FIRST_MATERIAL_TEXTURE_UNIT = 3
TEXTURE_FILES = ("albedo.png", "normal.png", "metallic.png", "roughness.png", "ao.png")
UNIFORM_COLUMNS = ("index", "location", "type", "name")

_LIGHT_POSITIONS = (
    (-10.0, 10.0, 10.0),
    (10.0, 10.0, 10.0),
    (-10.0, -10.0, 10.0),
    (10.0, -10.0, 10.0),
)
_LIGHT_COLOR = (300.0, 300.0, 300.0)

_MATERIALS = (
    ("rusted_iron", (-4.0, 0.0, 2.0)),
    ("gold", (-2.0, 0.0, 2.0)),
    ("grass", (-0.0, 0.0, 2.0)),
    ("plastic", (2.0, 0.0, 2.0)),
    ("wall", (4.0, 0.0, 2.0)),
)
_MATERIAL_DIR = "resources/textures/pbr"

T = TypeVar("T")


@dataclass
class Light:
    position: Float4
    color: Float4


def default_lights() -> list[Light]:
    """The four white point lights in front of the spheres."""
    return [
        Light(Float4(*position, 0.0), Float4(*_LIGHT_COLOR, 0.0))
        for position in _LIGHT_POSITIONS
    ]


@dataclass
class Material:
    """A textured sphere: its name, texture directory and position."""

    name: str
    base_dir: Path
    position: Float3 = field(default_factory=Float3)

    @property
    def textures(self) -> list[tuple[Path, ColorSpace]]:
        return material_textures(self.base_dir)


def material_textures(base_dir: StrPath) -> list[tuple[Path, ColorSpace]]:
    """Albedo, normal, metallic, roughness and ambient occlusion maps."""
    base = Path(base_dir)
    return [(base / name, ColorSpace.LINEAR) for name in TEXTURE_FILES]


def default_materials(resource_dir: StrPath) -> list[Material]:
    """The five spheres of the example, left to right."""
    root = Path(resource_dir) / _MATERIAL_DIR
    return [
        Material(name, root / name, Float3(*position))
        for name, position in _MATERIALS
    ]


def texture_unit(index: int) -> int:
    """Texture unit of a material's ``index``-th texture."""
    if index < 0:
        raise ValueError(f"texture index must not be negative: {index}")
    return index + FIRST_MATERIAL_TEXTURE_UNIT


@dataclass
class ObjectList(Generic[T]):
    """Items with one selected by index."""

    items: Sequence[T] = field(default_factory=list)
    selected: int = 0

    def select(self, index: int) -> None:
        self.selected = index

    def selected_item(self) -> T | None:
        """The selected item, or None when the selection is out of range."""
        if 0 <= self.selected < len(self.items):
            return self.items[self.selected]
        return None