"""Loading, compiling and linking GLSL shader programs."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

StrPath = Union[str, PathLike]

SHADER_TYPES = ("vertex", "fragment", "geometry", "compute", "tesscontrol", "tessevaluation")


class ShaderError(RuntimeError):
    """A shader could not be read, compiled or linked."""


def load_shader_source(path: StrPath) -> str:
    """Return the text of the shader file at path."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderError(f"could not open shader file: {path}") from exc


def _compile(source: str, shader_type: str, label: str):
    if shader_type not in SHADER_TYPES:
        raise ShaderError(f"unknown shader type: {shader_type}")

    from pyglet.graphics.shader import Shader, ShaderException

    try:
        return Shader(source, shader_type)
    except ShaderException as exc:
        raise ShaderError(f"shader compilation failed: {label}\n{exc}") from exc


def create_shader(path: StrPath, shader_type: str):
    """Compile the shader file at path as the given shader type ("vertex", "fragment", ...)."""
    source = load_shader_source(path)
    return _compile(source, shader_type, str(path))


def create_shader_program(vertex_path: StrPath, fragment_path: StrPath):
    """Compile and link a vertex and a fragment shader into a program."""
    vertex_source = load_shader_source(vertex_path)
    fragment_source = load_shader_source(fragment_path)

    from pyglet.graphics.shader import ShaderException, ShaderProgram

    vertex = _compile(vertex_source, "vertex", str(vertex_path))
    fragment = _compile(fragment_source, "fragment", str(fragment_path))
    try:
        return ShaderProgram(vertex, fragment)
    except ShaderException as exc:
        raise ShaderError(f"shader program linking failed\n{exc}") from exc