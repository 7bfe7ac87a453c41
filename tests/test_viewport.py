import math

from grapho.camera.viewport import Viewport


def test_defaults():
    viewport = Viewport()
    assert viewport.color == (1.0, 0.0, 1.0, 0.0)
    assert viewport.depth == 1.0
    assert viewport.right() == 0.0


def test_right_and_bottom():
    viewport = Viewport(left=10.0, top=20.0, width=640.0, height=480.0)
    assert viewport.right() == 10.0 + 640.0
    assert viewport.bottom() == 20.0 + 480.0


def test_aspect_ratio_inverts_with_swap():
    a = Viewport(width=800.0, height=600.0).aspect_ratio()
    b = Viewport(width=600.0, height=800.0).aspect_ratio()
    assert math.isclose(a * b, 1.0)
    assert a * 600.0 == 800.0


def test_aspect_ratio_zero_height_is_infinite():
    assert Viewport(width=512.0, height=0.0).aspect_ratio() == math.inf


def test_aspect_ratio_of_empty_viewport_is_nan():
    assert str(Viewport().aspect_ratio()) == "nan"