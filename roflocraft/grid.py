"""Collections of cubes forming pieces of terrain."""

from __future__ import annotations

from dataclasses import dataclass, field

from roflocraft.cube import Cube


@dataclass
class Grid:
    """A group of cubes that the player can collide with."""

    cubes: list[Cube] = field(default_factory=list)

    @classmethod
    def flat(cls, width: int, length: int) -> "Grid":
        """Build a flat layer of cubes at height zero, centred on the origin."""
        if width < 0 or length < 0:
            raise ValueError("grid dimensions must not be negative")
        half_w, half_l = width // 2, length // 2
        cubes = [
            Cube((float(i), 0.0, float(k)))
            for i in range(-half_w, half_w)
            for k in range(-half_l, half_l)
        ]
        return cls(cubes)