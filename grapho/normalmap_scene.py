"""The normal mapping scene: shader declarations and per-frame transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .camera.transform import (
    matrix_multiply,
    quaternion_rotation_axis,
    rotation_matrix,
    translation_matrix,
)
from .shaders.normal_mapping import FS_MAIN, VS_MAIN
from .shadersnippet import ShaderTypes, VertexAndFragment
from .vertexlayout import Float3, Float4x4

DIFFUSE_MAP_PATH = "resources/textures/brickwall.jpg"
NORMAL_MAP_PATH = "resources/textures/brickwall_normal.jpg"
SAMPLER_UNITS = {"diffuseMap": 0, "normalMap": 1}

_ROTATION_AXIS = Float3(1.0, 0.0, 1.0)
_DEGREES_PER_SECOND = -10.0
_LIGHT_SCALE = 0.1

VS_ENTRY = VS_MAIN
FS_ENTRY = FS_MAIN

_ATTRIBUTES = [
    (ShaderTypes.VEC3, "aPos"),
    (ShaderTypes.VEC3, "aNormal"),
    (ShaderTypes.VEC2, "aTexCoords"),
    (ShaderTypes.VEC3, "aTangent"),
    (ShaderTypes.VEC3, "aBitangent"),
]

_VARYINGS = [
    (ShaderTypes.VEC3, "FragPos"),
    (ShaderTypes.VEC2, "TexCoords"),
    (ShaderTypes.VEC3, "TangentLightPos"),
    (ShaderTypes.VEC3, "TangentViewPos"),
    (ShaderTypes.VEC3, "TangentFragPos"),
]

_SHARED_UNIFORMS = [
    (ShaderTypes.MAT4, "projection"),
    (ShaderTypes.MAT4, "view"),
    (ShaderTypes.MAT4, "model"),
    (ShaderTypes.VEC3, "lightPos"),
    (ShaderTypes.VEC3, "viewPos"),
]

_SAMPLERS = [
    (ShaderTypes.SAMPLER2D, "diffuseMap"),
    (ShaderTypes.SAMPLER2D, "normalMap"),
]


def build_snippet() -> VertexAndFragment:
    """Declare the attributes, varyings, uniforms and entry points."""
    snippet = VertexAndFragment()
    for type_, name in _ATTRIBUTES:
        snippet.attribute(type_, name)
    for type_, name in _VARYINGS:
        snippet.vs_to_fs(type_, name)
    for type_, name in _SHARED_UNIFORMS:
        snippet.uniform(type_, name)
    snippet.vs_entry(VS_ENTRY)

    snippet.out(ShaderTypes.VEC4, "FragColor")
    for type_, name in _SAMPLERS:
        snippet.uniform(type_, name)
    snippet.fs_entry(FS_ENTRY)
    return snippet


def quad_model_matrix(time: float) -> Float4x4:
    """Model matrix of the quad, turning about (1, 0, 1) as time passes."""
    angle = math.radians(time * _DEGREES_PER_SECOND)
    return rotation_matrix(quaternion_rotation_axis(_ROTATION_AXIS, angle))


def light_model_matrix(light_pos: Float3) -> Float4x4:
    """Model matrix of the small quad drawn at the light's position."""
    scale = Float4x4(m11=_LIGHT_SCALE, m22=_LIGHT_SCALE, m33=_LIGHT_SCALE, m44=1.0)
    return matrix_multiply(
        scale, translation_matrix(light_pos.x, light_pos.y, light_pos.z)
    )


@dataclass
class Scene:
    """Light position and elapsed time of the normal mapping scene."""

    light_pos: Float3 = field(default_factory=lambda: Float3(0.5, 1.0, 0.3))
    time: float = 0.0

    def advance(self, delta_time: float) -> None:
        self.time += delta_time

    def model_matrices(self) -> tuple[Float4x4, Float4x4]:
        """Model matrices of the normal-mapped quad and of the light marker."""
        return quad_model_matrix(self.time), light_model_matrix(self.light_pos)