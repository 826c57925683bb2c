"""Unit cubes that make up the world's terrain."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

VERTICES: tuple[tuple[float, float, float], ...] = (
    (-0.5, -0.5, -0.5),
    (0.5, -0.5, -0.5),
    (0.5, 0.5, -0.5),
    (-0.5, 0.5, -0.5),
    (-0.5, -0.5, 0.5),
    (0.5, -0.5, 0.5),
    (0.5, 0.5, 0.5),
    (-0.5, 0.5, 0.5),
)

INDICES: tuple[int, ...] = (
    0, 1, 2, 2, 3, 0,
    4, 5, 6, 6, 7, 4,
    0, 3, 7, 7, 4, 0,
    1, 5, 6, 6, 2, 1,
    0, 1, 5, 5, 4, 0,
    3, 2, 6, 6, 7, 3,
)


def _vec3(value) -> np.ndarray:
    return np.array(value, dtype=float).reshape(3)


def _position_attribute(program) -> str:
    """Return the name of the program's vertex attribute bound to location 0."""
    for name, info in program.attributes.items():
        if info.get("location") == 0:
            return name
    raise ValueError("shader program has no vertex attribute at location 0")


@dataclass(eq=False)
class Cube:
    """An axis-aligned cube placed at a position in the world."""

    position: np.ndarray
    size: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.size = _vec3(self.size)

    def model_matrix(self) -> np.ndarray:
        """Return the 4x4 translation matrix that places the cube in the world."""
        matrix = np.identity(4)
        matrix[:3, 3] = self.position
        return matrix

    def draw(self, program) -> None:
        """Draw the cube with the given linked shader program in the current GL context."""
        from pyglet import gl

        flat = [coord for vertex in VERTICES for coord in vertex]
        attribute = _position_attribute(program)
        vertex_list = program.vertex_list_indexed(
            len(VERTICES),
            gl.GL_TRIANGLES,
            list(INDICES),
            **{attribute: ("f", flat)},
        )
        try:
            program.use()
            vertex_list.draw(gl.GL_TRIANGLES)
        finally:
            vertex_list.delete()