import math

import pytest

from grapho.camera.transform import transform_point
from grapho.normalmap_scene import (
    Scene,
    build_snippet,
    light_model_matrix,
    quad_model_matrix,
)
from grapho.shadersnippet import ShaderTypes, ShaderVariable
from grapho.vertexlayout import Float3, Float4x4


def _names(variables):
    return [v.name for v in variables]


def test_snippet_attributes_in_order():
    snippet = build_snippet()
    assert _names(snippet.vs.inputs) == [
        "aPos", "aNormal", "aTexCoords", "aTangent", "aBitangent"
    ]


def test_snippet_varyings_link_stages():
    snippet = build_snippet()
    assert snippet.vs.outputs == snippet.fs.inputs
    assert _names(snippet.vs.outputs) == [
        "FragPos", "TexCoords", "TangentLightPos", "TangentViewPos", "TangentFragPos"
    ]


def test_snippet_fragment_output_and_uniforms():
    snippet = build_snippet()
    assert snippet.fs.outputs == [ShaderVariable(ShaderTypes.VEC4, "FragColor")]
    assert snippet.fs.uniforms == snippet.vs.uniforms
    assert snippet.fs.uniforms[-2:] == [
        ShaderVariable(ShaderTypes.SAMPLER2D, "diffuseMap"),
        ShaderVariable(ShaderTypes.SAMPLER2D, "normalMap"),
    ]


def test_snippet_entry_points_per_stage():
    snippet = build_snippet()
    assert len(snippet.vs.codes) == 1 and len(snippet.fs.codes) == 1
    assert "gl_Position" in snippet.vs.codes[0]
    assert "FragColor" in snippet.fs.codes[0]


def test_quad_model_matrix_at_time_zero_is_identity():
    assert tuple(quad_model_matrix(0.0)) == pytest.approx(tuple(Float4x4.identity()))


@pytest.mark.parametrize("time", [0.5, 3.0, 27.0])
def test_quad_model_matrix_keeps_axis_and_lengths(time):
    m = quad_model_matrix(time)
    axis = Float3(1.0, 0.0, 1.0)
    assert tuple(transform_point(axis, m)) == pytest.approx(tuple(axis))
    v = transform_point(Float3(0.2, -0.7, 1.3), m)
    assert math.sqrt(sum(c * c for c in v)) == pytest.approx(
        math.sqrt(0.2 ** 2 + 0.7 ** 2 + 1.3 ** 2)
    )


def test_quad_model_matrix_quarter_turn():
    # nine seconds at ten degrees per second is a quarter turn
    v = transform_point(Float3(0.0, 1.0, 0.0), quad_model_matrix(9.0))
    assert v.y == pytest.approx(0.0, abs=1e-12)


def test_light_model_matrix_places_small_quad():
    light = Float3(0.5, 1.0, 0.3)
    m = light_model_matrix(light)
    assert tuple(transform_point(Float3(), m)) == pytest.approx(tuple(light))
    corner = transform_point(Float3(1.0, 0.0, 0.0), m)
    offset = [c - l for c, l in zip(corner, light)]
    assert math.sqrt(sum(c * c for c in offset)) == pytest.approx(0.1)


def test_scene_defaults_and_advance():
    scene = Scene()
    assert tuple(scene.light_pos) == pytest.approx((0.5, 1.0, 0.3))
    scene.advance(0.25)
    scene.advance(0.5)
    assert scene.time == pytest.approx(0.75)


def test_scene_model_matrices_follow_time_and_light():
    scene = Scene()
    scene.advance(2.0)
    quad, light = scene.model_matrices()
    assert quad == quad_model_matrix(2.0)
    assert light == light_model_matrix(scene.light_pos)