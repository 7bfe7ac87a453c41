import pytest

from grapho.camera.camera import MouseState
from grapho.examples.camera_scene import (
    CUBE_DRAW_COUNT,
    apply_mouse,
    create_camera,
    create_scene,
)
from grapho.vertexlayout import DrawMode


def test_scene_has_four_cubes_at_corners():
    scene = create_scene()
    assert len(scene) == 4
    corners = {(d.matrix.m41, d.matrix.m42, d.matrix.m43) for d in scene}
    assert corners == {
        (-5.0, 0.0, -5.0), (5.0, 0.0, -5.0), (5.0, 0.0, 5.0), (-5.0, 0.0, 5.0)
    }


def test_scene_meshes_are_cubes():
    for drawable in create_scene():
        assert drawable.mesh.mode is DrawMode.TRIANGLES
        assert drawable.mesh.draw_count() == CUBE_DRAW_COUNT


def test_camera_start_position():
    camera = create_camera()
    assert tuple(camera.translation) == (0.0, 5.0, 20.0)
    assert tuple(camera.rotation) == (0.0, 0.0, 0.0, 1.0)


def test_idle_mouse_leaves_camera():
    camera = create_camera()
    mouse = MouseState(delta_x=10.0, delta_y=5.0, right_down=True, wheel=1.0)
    apply_mouse(camera, mouse, is_active=False, is_hovered=False)
    assert tuple(camera.translation) == (0.0, 5.0, 20.0)
    assert camera.gaze_distance == 5.0


def test_hover_wheel_dollies():
    camera = create_camera()
    apply_mouse(camera, MouseState(wheel=-1.0), is_active=False, is_hovered=True)
    assert camera.gaze_distance == pytest.approx(5.0 * 1.1)


def test_active_right_drag_rotates():
    camera = create_camera()
    mouse = MouseState(delta_x=10.0, right_down=True)
    apply_mouse(camera, mouse, is_active=True, is_hovered=False)
    assert tuple(camera.rotation) != pytest.approx((0.0, 0.0, 0.0, 1.0))
    assert camera.gaze_distance == 5.0


def test_active_middle_drag_pans():
    camera = create_camera()
    camera.projection.set_size(800.0, 600.0)
    mouse = MouseState(delta_x=0.0, delta_y=10.0, middle_down=True)
    apply_mouse(camera, mouse, is_active=True, is_hovered=False)
    assert camera.translation.y > 5.0
    assert camera.translation.z == pytest.approx(20.0)