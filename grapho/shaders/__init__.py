"""GLSL shader sources."""