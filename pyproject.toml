[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grapho"
version = "0.1.0"
description = "Renderer-agnostic 3D graphics building blocks: vertex layouts, meshes, shader declarations, a turntable camera, image loading and example scene data."
requires-python = ">=3.10"
keywords = ["graphics", "3d", "mesh", "camera", "shader", "glsl", "vertex-layout", "hdr"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["grapho"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 88
