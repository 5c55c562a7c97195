"""Reading vertex and fragment shader source files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class ShaderLoadError(OSError):
    """A shader source file could not be read."""


def read_shader_file(path: PathLike, kind: str) -> str:
    """Return the file's lines, each prefixed by a newline.

    ``kind`` names the shader stage for the error message.
    """
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            content = stream.read()
    except OSError as exc:
        raise ShaderLoadError(f"Cannot read {kind} shader file: {path}") from exc
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return "".join("\n" + line for line in lines)


def shader_paths(root: PathLike, name: str) -> tuple[Path, Path]:
    """Return the vertex and fragment file paths of shader ``name`` under ``root``."""
    base = Path(root) / "shaders"
    return base / f"{name}.vert", base / f"{name}.frag"


@dataclass(frozen=True)
class ShaderSources:
    """Source code of a vertex and fragment shader pair."""

    vertex: str
    fragment: str

    @classmethod
    def load(cls, vertex_path: PathLike, fragment_path: PathLike) -> "ShaderSources":
        """Read both shader files, vertex first."""
        vertex = read_shader_file(vertex_path, "vertex")
        fragment = read_shader_file(fragment_path, "fragment")
        return cls(vertex, fragment)