import math

import pytest

from grapho.camera.transform import (
    EuclideanTransform,
    matrix_multiply,
    perspective_fov_rh,
    quaternion_inverse,
    quaternion_multiply,
    quaternion_rotation_axis,
    rotate_vector,
    rotation_matrix,
    transform_point,
    translation_matrix,
)
from grapho.vertexlayout import Float3, Float4, Float4x4

IDENTITY_Q = Float4(0.0, 0.0, 0.0, 1.0)


def _q():
    return quaternion_rotation_axis(Float3(1.0, 2.0, 3.0), 0.7)


def test_multiply_with_identity_is_noop():
    q = _q()
    assert tuple(quaternion_multiply(q, IDENTITY_Q)) == pytest.approx(tuple(q))
    assert tuple(quaternion_multiply(IDENTITY_Q, q)) == pytest.approx(tuple(q))


def test_inverse_undoes_rotation():
    q = _q()
    product = quaternion_multiply(q, quaternion_inverse(q))
    assert tuple(product) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_rotation_axis_is_unit():
    q = _q()
    assert math.sqrt(sum(c * c for c in q)) == pytest.approx(1.0)


def test_zero_axis_raises():
    with pytest.raises(ValueError):
        quaternion_rotation_axis(Float3(0.0, 0.0, 0.0), 1.0)


def test_rotate_about_y():
    q = quaternion_rotation_axis(Float3(0.0, 1.0, 0.0), math.pi / 2)
    assert tuple(rotate_vector(Float3(1.0, 0.0, 0.0), q)) == pytest.approx(
        (0.0, 0.0, -1.0), abs=1e-9
    )


def test_rotate_vector_matches_matrix():
    q = _q()
    v = Float3(0.3, -1.2, 2.5)
    assert tuple(rotate_vector(v, q)) == pytest.approx(
        tuple(transform_point(v, rotation_matrix(q)))
    )


def test_multiply_order_applies_first_rotation_first():
    a = quaternion_rotation_axis(Float3(0.0, 1.0, 0.0), 0.4)
    b = quaternion_rotation_axis(Float3(1.0, 0.0, 0.0), 1.1)
    v = Float3(1.0, 2.0, 3.0)
    assert tuple(rotate_vector(v, quaternion_multiply(a, b))) == pytest.approx(
        tuple(rotate_vector(rotate_vector(v, a), b))
    )


def test_translation_matrix_row():
    m = translation_matrix(1.0, 2.0, 3.0)
    assert (m.m41, m.m42, m.m43, m.m44) == (1.0, 2.0, 3.0, 1.0)
    assert tuple(transform_point(Float3(), m)) == (1.0, 2.0, 3.0)


def test_matrix_multiply_identity():
    m = rotation_matrix(_q())
    assert tuple(matrix_multiply(m, Float4x4.identity())) == pytest.approx(tuple(m))


def test_perspective_layout():
    m = perspective_fov_rh(math.radians(30.0), 2.0, 0.01, 1000.0)
    assert m.m34 == -1.0
    assert m.m44 == 0.0
    assert m.m11 == pytest.approx(m.m22 / 2.0)


def test_perspective_zero_aspect_gives_infinite_x_scale():
    m = perspective_fov_rh(1.0, 0.0, 0.01, 1000.0)
    assert abs(m.m11) == math.inf
    assert m.m34 == -1.0


def test_has_rotation():
    assert not EuclideanTransform().has_rotation()
    assert not EuclideanTransform(Float4(0.0, 0.0, 0.0, -1.0)).has_rotation()
    assert EuclideanTransform(_q()).has_rotation()


def test_matrix_times_inversed_matrix_is_identity():
    et = EuclideanTransform(_q(), Float3(1.0, -2.0, 3.0))
    product = matrix_multiply(et.matrix(), et.inversed_matrix())
    assert tuple(product) == pytest.approx(tuple(Float4x4.identity()), abs=1e-9)


def test_inversed_matches_inversed_matrix():
    et = EuclideanTransform(_q(), Float3(1.0, -2.0, 3.0))
    assert tuple(et.inversed().matrix()) == pytest.approx(
        tuple(et.inversed_matrix()), abs=1e-9
    )


def test_double_inverse_round_trip():
    et = EuclideanTransform(_q(), Float3(1.0, -2.0, 3.0))
    back = et.inversed().inversed()
    assert tuple(back.rotation) == pytest.approx(tuple(et.rotation))
    assert tuple(back.translation) == pytest.approx(tuple(et.translation))


def test_scaling_translation_matrix_scales_translation():
    et = EuclideanTransform(_q(), Float3(1.0, -2.0, 3.0))
    m = et.scaling_translation_matrix(2.0)
    assert (m.m41, m.m42, m.m43) == pytest.approx((2.0, -4.0, 6.0))


def test_rotate():
    q = _q()
    et = EuclideanTransform(IDENTITY_Q, Float3(1.0, 0.0, 0.0))
    rotated = et.rotate(q)
    assert tuple(rotated.rotation) == pytest.approx(tuple(q))
    assert tuple(rotated.translation) == pytest.approx(
        tuple(rotate_vector(Float3(1.0, 0.0, 0.0), q))
    )


def test_from_matrix_round_trip():
    et = EuclideanTransform(_q(), Float3(1.0, -2.0, 3.0))
    back = EuclideanTransform.from_matrix(et.matrix())
    assert tuple(back.matrix()) == pytest.approx(tuple(et.matrix()), abs=1e-9)


def test_from_matrix_drops_scale():
    et = EuclideanTransform(_q(), Float3(1.0, -2.0, 3.0))
    scale = Float4x4(m11=2.0, m22=2.0, m33=2.0, m44=1.0)
    back = EuclideanTransform.from_matrix(matrix_multiply(scale, et.matrix()))
    assert tuple(rotation_matrix(back.rotation)) == pytest.approx(
        tuple(rotation_matrix(et.rotation)), abs=1e-9
    )
    assert tuple(back.translation) == pytest.approx(tuple(et.translation))


def test_from_singular_matrix_raises():
    with pytest.raises(ValueError):
        EuclideanTransform.from_matrix(Float4x4())