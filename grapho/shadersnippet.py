"""Declarations of shader inputs, outputs, uniforms and code."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ShaderTypes(Enum):
    VEC2 = "vec2"
    VEC3 = "vec3"
    VEC4 = "vec4"
    MAT4 = "mat4"
    SAMPLER2D = "sampler2D"


def shader_type_name(type_: ShaderTypes) -> str:
    """Return the GLSL name of a shader type."""
    return type_.value


@dataclass(frozen=True)
class ShaderVariable:
    type: ShaderTypes
    name: str

    def __str__(self) -> str:
        return f"{shader_type_name(self.type)} {self.name}"


@dataclass
class ShaderSnippet:
    inputs: list[ShaderVariable] = field(default_factory=list)
    outputs: list[ShaderVariable] = field(default_factory=list)
    uniforms: list[ShaderVariable] = field(default_factory=list)
    codes: list[str] = field(default_factory=list)

    def input(self, type_: ShaderTypes, name: str) -> None:
        self.inputs.append(ShaderVariable(type_, name))

    def output(self, type_: ShaderTypes, name: str) -> None:
        self.outputs.append(ShaderVariable(type_, name))

    def uniform(self, type_: ShaderTypes, name: str) -> None:
        self.uniforms.append(ShaderVariable(type_, name))

    def code(self, code: str) -> None:
        self.codes.append(code)


@dataclass
class VertexAndFragment:
    """A vertex and a fragment snippet declared together."""

    vs: ShaderSnippet = field(default_factory=ShaderSnippet)
    fs: ShaderSnippet = field(default_factory=ShaderSnippet)

    def attribute(self, type_: ShaderTypes, name: str) -> None:
        self.vs.input(type_, name)

    def vs_to_fs(self, type_: ShaderTypes, name: str) -> None:
        self.vs.output(type_, name)
        self.fs.input(type_, name)

    def out(self, type_: ShaderTypes, name: str) -> None:
        self.fs.output(type_, name)

    def uniform(self, type_: ShaderTypes, name: str) -> None:
        self.vs.uniform(type_, name)
        self.fs.uniform(type_, name)

    def code(self, code: str) -> None:
        self.vs.code(code)
        self.fs.code(code)

    def vs_entry(self, code: str) -> None:
        self.vs.code(code)

    def fs_entry(self, code: str) -> None:
        self.fs.code(code)