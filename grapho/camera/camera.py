"""A turntable camera with a perspective projection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..vertexlayout import Float3, Float4, Float4x4
from .ray import Ray
from .transform import (
    EuclideanTransform,
    _ieee_div,
    matrix_multiply,
    perspective_fov_rh,
    quaternion_inverse,
    quaternion_multiply,
    quaternion_rotation_axis,
    rotate_vector,
    rotation_matrix,
)
from .viewport import Viewport


@dataclass
class Projection:
    viewport: Viewport = field(default_factory=Viewport)
    fov_y: float = math.radians(30.0)
    near_z: float = 0.01
    far_z: float = 1000.0

    def update(self) -> Float4x4:
        """Return the projection matrix for the current viewport."""
        return perspective_fov_rh(
            self.fov_y, self.viewport.aspect_ratio(), self.near_z, self.far_z
        )

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def set_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.set_viewport(Viewport(x, y, w, h))

    def set_size(self, w: float, h: float) -> None:
        self.set_rect(0.0, 0.0, w, h)


@dataclass
class MouseState:
    x: float = 0.0
    y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0
    left_down: bool = False
    middle_down: bool = False
    right_down: bool = False
    wheel: float = 0.0


def _normalize(v: Float3) -> Float3:
    length = math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
    if math.isnan(length) or math.isinf(length):
        return Float3(math.nan, math.nan, math.nan)
    if length == 0:
        return Float3(0.0, 0.0, 0.0)
    return Float3(v.x / length, v.y / length, v.z / length)


@dataclass
class Camera:
    projection: Projection = field(default_factory=Projection)
    rotation: Float4 = field(default_factory=lambda: Float4(0.0, 0.0, 0.0, 1.0))
    translation: Float3 = field(default_factory=Float3)
    view_matrix: Float4x4 = field(default_factory=Float4x4.identity)
    projection_matrix: Float4x4 = field(default_factory=Float4x4.identity)
    gaze_distance: float = 5.0
    tmp_yaw: float = 0.0
    tmp_pitch: float = 0.0

    def _transform(self) -> EuclideanTransform:
        return EuclideanTransform(self.rotation, self.translation)

    def yaw_pitch(self, dx: int, dy: int) -> None:
        """Orbit around the origin by pixel deltas, one degree per pixel."""
        inv = self._transform().inversed()
        m = rotation_matrix(self.rotation)
        x, y, z = m.m31, m.m32, m.m33

        yaw = math.atan2(x, z) - math.radians(float(dx))
        self.tmp_yaw = yaw
        q_yaw = quaternion_rotation_axis(Float3(0.0, 1.0, 0.0), yaw)

        half_pi = math.pi / 2 - 0.01
        pitch = math.atan2(y, math.sqrt(x * x + z * z)) + math.radians(float(dy))
        pitch = min(max(pitch, -half_pi), half_pi)
        self.tmp_pitch = pitch
        q_pitch = quaternion_rotation_axis(Float3(-1.0, 0.0, 0.0), pitch)

        q = quaternion_inverse(quaternion_multiply(q_pitch, q_yaw))
        dst = EuclideanTransform(q, inv.translation).inversed()
        self.rotation = dst.rotation
        self.translation = dst.translation

    def shift(self, dx: int, dy: int) -> None:
        """Pan in the view plane by pixel deltas."""
        factor = _ieee_div(
            math.tan(self.projection.fov_y * 0.5) * 2.0 * self.gaze_distance,
            self.projection.viewport.height,
        )
        m = rotation_matrix(self.rotation)
        t = self.translation
        self.translation = Float3(
            t.x + (-m.m11 * dx + m.m21 * dy) * factor,
            t.y + (-m.m12 * dx + m.m22 * dy) * factor,
            t.z + (-m.m13 * dx + m.m23 * dy) * factor,
        )

    def dolly(self, d: int) -> None:
        """Move toward (d > 0) or away from (d < 0) the gaze point."""
        if d == 0:
            return
        m = rotation_matrix(self.rotation)
        x, y, z = m.m31, m.m32, m.m33
        t = self.translation
        gaze = Float3(
            t.x - x * self.gaze_distance,
            t.y - y * self.gaze_distance,
            t.z - z * self.gaze_distance,
        )
        self.gaze_distance *= 0.9 if d > 0 else 1.1
        self.translation = Float3(
            gaze.x + x * self.gaze_distance,
            gaze.y + y * self.gaze_distance,
            gaze.z + z * self.gaze_distance,
        )

    def mouse_input_turntable(self, mouse: MouseState) -> None:
        if mouse.right_down:
            self.yaw_pitch(int(mouse.delta_x), int(mouse.delta_y))
        if mouse.middle_down:
            self.shift(int(mouse.delta_x), int(mouse.delta_y))
        self.dolly(int(mouse.wheel))

    def update(self) -> None:
        """Recompute the projection and view matrices."""
        self.projection_matrix = self.projection.update()
        self.view_matrix = self._transform().inversed_matrix()

    def view_projection(self) -> Float4x4:
        return matrix_multiply(self.view_matrix, self.projection_matrix)

    def fit(self, min_: Float3, max_: Float3) -> None:
        """Frame an axis-aligned box from the front."""
        self.rotation = Float4(0.0, 0.0, 0.0, 1.0)
        height = max_.y - min_.y
        if abs(height) < 1e-4:
            return
        distance = height * 0.5 / math.atan(self.projection.fov_y * 0.5)
        self.translation = Float3(
            (max_.x + min_.x) * 0.5, (max_.y + min_.y) * 0.5, distance * 1.2
        )
        self.gaze_distance = self.translation.z
        r = math.sqrt(
            (min_.x - max_.x) ** 2 + (min_.y - max_.y) ** 2 + (min_.z - max_.z) ** 2
        )
        self.projection.near_z = r * 0.01
        self.projection.far_z = r * 100.0

    def get_ray(self, pixel_from_left: float, pixel_from_top: float) -> Ray | None:
        """Ray through a pixel (origin top-left), or None if it is degenerate."""
        viewport = self.projection.viewport
        t = math.tan(self.projection.fov_y / 2)
        h = viewport.height / 2
        y = t * _ieee_div(h - pixel_from_top, h)
        w = viewport.width / 2
        x = t * viewport.aspect_ratio() * _ieee_div(pixel_from_left - w, w)

        direction = _normalize(rotate_vector(Float3(x, y, -1.0), self.rotation))
        t0 = self.translation
        ray = Ray(Float3(t0.x, t0.y, t0.z), direction)
        return ray if ray.is_valid() else None

    def get_ray_from_mouse(self, mouse: MouseState) -> Ray | None:
        return self.get_ray(mouse.x, mouse.y)

    def in_viewport(self, mouse: MouseState) -> bool:
        viewport = self.projection.viewport
        return 0 <= mouse.x <= viewport.width and 0 <= mouse.y <= viewport.height