# grapho

Small, renderer-agnostic building blocks for 3D graphics programs. The
package holds plain Python data and math: vertex layouts and packed
vertex buffers, ready-made meshes, shader interface declarations, a
turntable camera, image loading and the data of a few demo scenes. The
results are meant to be handed to whatever graphics API you use.

## Modules

- `grapho.vertexlayout` — `Float2`, `Float3`, `Float4`, `Float4x4`
  (row-major, with `identity()` and `rows`), `ValueType` (whose value is a
  `struct` format code), `VertexId`, `VertexLayout`, `DrawMode`,
  `VertexBuffer` (`assign(fmt, values)`, `size()`, `stride()`) and `Mesh`
  (`draw_count()` is the index count when there are indices, otherwise the
  vertex count).
- `grapho.pixelformat` — the `PixelFormat` enumeration.
- `grapho.shadersnippet` — `ShaderTypes`, `shader_type_name()`,
  `ShaderVariable`, `ShaderSnippet` and `VertexAndFragment`, which records
  attributes, stage-to-stage variables, outputs, uniforms and code for a
  vertex and a fragment stage together.
- `grapho.mesh` — `sphere()` (64×64 segments, indexed triangle strip),
  `cube(s)` (36 unindexed triangle vertices, half extent `s`) and `quad()`
  (four-vertex triangle strip), with the `Vertex` and `QuadVertex` layouts.
- `grapho.camera.viewport` — `Viewport` with `aspect_ratio()`, `right()`
  and `bottom()`.
- `grapho.camera.ray` — `Ray` with `is_valid()`.
- `grapho.camera.transform` — quaternion and row-major matrix helpers
  (`quaternion_multiply`, `quaternion_inverse`, `quaternion_rotation_axis`,
  `rotation_matrix`, `translation_matrix`, `matrix_multiply`,
  `rotate_vector`, `transform_point`, `perspective_fov_rh`) and
  `EuclideanTransform`.
- `grapho.camera.camera` — `Projection`, `MouseState` and `Camera` with
  `yaw_pitch`, `shift`, `dolly`, `mouse_input_turntable`, `update`,
  `view_projection`, `fit`, `get_ray`, `get_ray_from_mouse` and
  `in_viewport`.
- `grapho.dx11format` — `dxgi_format()` and `input_elements()` turn vertex
  layouts into `DxgiFormat` values and `InputElement` descriptions; only
  2-, 3- and 4-component float layouts are supported, anything else raises
  `ValueError`.
- `grapho.imageloader` — `load_image(path)` reads 8-bit grayscale, RGB or
  RGBA images as sRGB; `load_hdr(path)` reads Radiance RGBE files (or 8-bit
  RGB images, converted with a 2.2 gamma) as linear floats flipped
  bottom-up. HDR results are tagged `PixelFormat.F16_RGB` while their
  `pixels` hold little-endian 32-bit floats. Failures raise
  `ImageLoadError`.
- `grapho.normalmap` — `tangent_bitangent()`, `quad_vertices()` (six
  vertices of 14 floats: position, normal, uv, tangent, bitangent),
  `texture_format()` and `wrap_mode()`.
- `grapho.shaders.normal_mapping` — the GLSL sources `NORMAL_MAPPING_VS`
  and `NORMAL_MAPPING_FS`.
- `grapho.normalmap_scene` — `build_snippet()`, `quad_model_matrix()`,
  `light_model_matrix()` and `Scene` (`advance`, `model_matrices`).
- `grapho.examples.camera_scene` — four cubes (`create_scene()`), a camera
  placed to look at them (`create_camera()`) and `apply_mouse()`.
- `grapho.examples.textured_quad` — vertex, index and pixel bytes of a
  textured quad and its layouts for GL attribute locations or D3D11
  semantics.
- `grapho.examples.pbr_scene` — `default_lights()`, `Material`,
  `material_textures()`, `default_materials()`, `texture_unit()` and
  `ObjectList`.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from grapho.mesh import cube
from grapho.camera.camera import Camera, MouseState

mesh = cube(0.5)
print(mesh.draw_count())          # 36 vertices, no index buffer

camera = Camera()
camera.projection.set_size(800, 600)
camera.mouse_input_turntable(MouseState(x=400, y=300, delta_x=10, right_down=True))
camera.update()
view_projection = camera.view_projection()
ray = camera.get_ray(400, 300)
```

Shader interfaces are described once and shared between stages:

```python
from grapho.shadersnippet import ShaderTypes, VertexAndFragment

snippet = VertexAndFragment()
snippet.attribute(ShaderTypes.VEC3, "aPos")
snippet.vs_to_fs(ShaderTypes.VEC2, "TexCoords")
snippet.uniform(ShaderTypes.MAT4, "model")
```

## What it does not do

grapho opens no windows, creates no graphics context and draws nothing:
there is no GPU upload, no shader compilation, no framebuffer handling and
no user interface. `ShaderSnippet` and `VertexAndFragment` only record
declarations; they do not generate GLSL text from them. The example
modules provide the data of their scenes, not runnable demos, and the
package installs no commands.