"""Quaternion and row-major matrix helpers, and rigid transforms.

Vectors are row vectors: a point is transformed as ``v * M`` and the
translation lives in the fourth row of a matrix.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..vertexlayout import Float3, Float4, Float4x4


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE floats do instead of raising on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _hamilton(p: Float4, q: Float4) -> Float4:
    return Float4(
        p.w * q.x + p.x * q.w + p.y * q.z - p.z * q.y,
        p.w * q.y - p.x * q.z + p.y * q.w + p.z * q.x,
        p.w * q.z + p.x * q.y - p.y * q.x + p.z * q.w,
        p.w * q.w - p.x * q.x - p.y * q.y - p.z * q.z,
    )


def quaternion_multiply(a: Float4, b: Float4) -> Float4:
    """The rotation ``a`` followed by the rotation ``b``."""
    return _hamilton(b, a)


def quaternion_inverse(q: Float4) -> Float4:
    """Inverse of a quaternion; a zero quaternion yields zero."""
    norm = q.x * q.x + q.y * q.y + q.z * q.z + q.w * q.w
    if norm == 0:
        return Float4(0.0, 0.0, 0.0, 0.0)
    return Float4(-q.x / norm, -q.y / norm, -q.z / norm, q.w / norm)


def quaternion_rotation_axis(axis: Float3, angle: float) -> Float4:
    """Rotation by ``angle`` radians about ``axis``."""
    length = math.sqrt(axis.x * axis.x + axis.y * axis.y + axis.z * axis.z)
    if length == 0:
        raise ValueError("rotation axis must not be zero")
    s = math.sin(angle * 0.5) / length
    return Float4(axis.x * s, axis.y * s, axis.z * s, math.cos(angle * 0.5))


def rotation_matrix(q: Float4) -> Float4x4:
    """Row-major rotation matrix of a quaternion."""
    x, y, z, w = q.x, q.y, q.z, q.w
    return Float4x4(
        1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * z * w, 2 * x * z - 2 * y * w, 0.0,
        2 * x * y - 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * x * w, 0.0,
        2 * x * z + 2 * y * w, 2 * y * z - 2 * x * w, 1 - 2 * x * x - 2 * y * y, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def translation_matrix(x: float, y: float, z: float) -> Float4x4:
    m = Float4x4.identity()
    m.m41, m.m42, m.m43 = x, y, z
    return m


def matrix_multiply(a: Float4x4, b: Float4x4) -> Float4x4:
    """The product ``a * b``: apply ``a`` first, then ``b``."""
    columns = list(zip(*b.rows))
    return Float4x4(
        *(sum(p * q for p, q in zip(row, col)) for row in a.rows for col in columns)
    )


def rotate_vector(v: Float3, q: Float4) -> Float3:
    """Rotate a vector by a quaternion."""
    conjugate = Float4(-q.x, -q.y, -q.z, q.w)
    r = _hamilton(_hamilton(q, Float4(v.x, v.y, v.z, 0.0)), conjugate)
    return Float3(r.x, r.y, r.z)


def transform_point(v: Float3, m: Float4x4) -> Float3:
    """Transform ``(x, y, z, 1)`` by ``m`` and keep x, y and z."""
    point = (v.x, v.y, v.z, 1.0)
    columns = list(zip(*m.rows))[:3]
    x, y, z = (sum(p * c for p, c in zip(point, col)) for col in columns)
    return Float3(x, y, z)


def perspective_fov_rh(
    fov_y: float, aspect_ratio: float, near_z: float, far_z: float
) -> Float4x4:
    """Right-handed perspective projection with depth mapped to [0, 1]."""
    half = 0.5 * fov_y
    height = _ieee_div(math.cos(half), math.sin(half))
    width = _ieee_div(height, aspect_ratio)
    f_range = _ieee_div(far_z, near_z - far_z)
    return Float4x4(
        width, 0.0, 0.0, 0.0,
        0.0, height, 0.0, 0.0,
        0.0, 0.0, f_range, -1.0,
        0.0, 0.0, f_range * near_z, 0.0,
    )


def _quaternion_from_rotation(m: Float4x4) -> Float4:
    trace = m.m11 + m.m22 + m.m33
    if trace > 0:
        w = math.sqrt(trace + 1.0) * 0.5
        d = 4.0 * w
        return Float4((m.m23 - m.m32) / d, (m.m31 - m.m13) / d, (m.m12 - m.m21) / d, w)
    if m.m11 >= m.m22 and m.m11 >= m.m33:
        x = math.sqrt(max(0.0, 1.0 + m.m11 - m.m22 - m.m33)) * 0.5
        d = 4.0 * x
        return Float4(x, (m.m12 + m.m21) / d, (m.m13 + m.m31) / d, (m.m23 - m.m32) / d)
    if m.m22 >= m.m33:
        y = math.sqrt(max(0.0, 1.0 + m.m22 - m.m11 - m.m33)) * 0.5
        d = 4.0 * y
        return Float4((m.m12 + m.m21) / d, y, (m.m23 + m.m32) / d, (m.m31 - m.m13) / d)
    z = math.sqrt(max(0.0, 1.0 + m.m33 - m.m11 - m.m22)) * 0.5
    d = 4.0 * z
    return Float4((m.m13 + m.m31) / d, (m.m23 + m.m32) / d, z, (m.m12 - m.m21) / d)


@dataclass
class EuclideanTransform:
    """A rotation followed by a translation."""

    rotation: Float4 = field(default_factory=lambda: Float4(0.0, 0.0, 0.0, 1.0))
    translation: Float3 = field(default_factory=Float3)

    def has_rotation(self) -> bool:
        r = self.rotation
        return not (r.x == 0 and r.y == 0 and r.z == 0 and r.w in (1, -1))

    def matrix(self) -> Float4x4:
        t = self.translation
        return matrix_multiply(
            rotation_matrix(self.rotation), translation_matrix(t.x, t.y, t.z)
        )

    def scaling_translation_matrix(self, scaling: float) -> Float4x4:
        t = self.translation
        return matrix_multiply(
            rotation_matrix(self.rotation),
            translation_matrix(t.x * scaling, t.y * scaling, t.z * scaling),
        )

    def inversed_matrix(self) -> Float4x4:
        t = self.translation
        return matrix_multiply(
            translation_matrix(-t.x, -t.y, -t.z),
            rotation_matrix(quaternion_inverse(self.rotation)),
        )

    def inversed(self) -> "EuclideanTransform":
        r = quaternion_inverse(self.rotation)
        t = self.translation
        return EuclideanTransform(r, rotate_vector(Float3(-t.x, -t.y, -t.z), r))

    def rotate(self, r: Float4) -> "EuclideanTransform":
        return EuclideanTransform(
            quaternion_multiply(self.rotation, r),
            transform_point(self.translation, rotation_matrix(r)),
        )

    @classmethod
    def from_matrix(cls, m: Float4x4) -> "EuclideanTransform":
        """Decompose a matrix, dropping its scale; raise ValueError if singular."""
        basis = [list(row[:3]) for row in m.rows[:3]]
        scales = [math.sqrt(sum(c * c for c in row)) for row in basis]
        if any(s < 1e-12 for s in scales):
            raise ValueError("matrix cannot be decomposed")
        basis = [[c / s for c in row] for row, s in zip(basis, scales)]
        (a, b, c), (d, e, f), (g, h, i) = basis
        if a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g) < 0:
            basis[0] = [-v for v in basis[0]]
        rotation = Float4x4(
            *basis[0], 0.0, *basis[1], 0.0, *basis[2], 0.0, 0.0, 0.0, 0.0, 1.0
        )
        return cls(
            _quaternion_from_rotation(rotation), Float3(m.m41, m.m42, m.m43)
        )