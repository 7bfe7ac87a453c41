"""A scene of four cubes viewed by a mouse-driven turntable camera."""

from __future__ import annotations

from dataclasses import dataclass

from ..camera.camera import Camera, MouseState
from ..camera.transform import translation_matrix
from ..mesh import cube
from ..vertexlayout import Float3, Float4, Float4x4, Mesh

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
CLEAR_COLOR = Float4(0.1, 0.1, 0.1, 1.0)
CUBE_DRAW_COUNT = 36

VERTEX_SHADER = """#version 400
uniform mat4 model;
uniform mat4 view;
uniform mat4 projection;
in vec3 vPos;
void main()
{
    gl_Position = projection * view * model * vec4(vPos, 1.0);
};
"""

FRAGMENT_SHADER = """#version 400
out vec4 FragColor;
void main()
{
    FragColor = vec4(1,1,1,1);
};
"""

_CUBE_HALF_EXTENT = 0.5
_CUBE_SPACING = 5.0


@dataclass
class Drawable:
    mesh: Mesh
    matrix: Float4x4


def create_scene() -> list[Drawable]:
    """Four cubes placed at the corners of a square on the ground plane."""
    mesh = cube(_CUBE_HALF_EXTENT)
    d = _CUBE_SPACING
    corners = ((-d, -d), (d, -d), (d, d), (-d, d))
    return [Drawable(mesh, translation_matrix(x, 0.0, z)) for x, z in corners]


def create_camera() -> Camera:
    return Camera(translation=Float3(0.0, 5.0, 20.0))


def apply_mouse(
    camera: Camera, mouse: MouseState, is_active: bool, is_hovered: bool
) -> None:
    """Orbit with the right button, pan with the middle one, dolly on wheel."""
    if is_active:
        if mouse.right_down:
            camera.yaw_pitch(int(mouse.delta_x), int(mouse.delta_y))
        if mouse.middle_down:
            camera.shift(int(mouse.delta_x), int(mouse.delta_y))
    if is_hovered:
        camera.dolly(int(mouse.wheel))