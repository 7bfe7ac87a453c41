"""Renderer-agnostic vertex layouts, meshes, shader declarations, camera math and image loading."""

__version__ = "0.1.0"