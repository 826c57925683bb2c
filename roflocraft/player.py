"""The player entity: movement, gravity and collision with cubes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence

import numpy as np

from roflocraft.camera import Camera
from roflocraft.cube import Cube

logger = logging.getLogger(__name__)

MOVE_SPEED = 0.06
GRAVITY = np.array([0.0, -9.8, 0.0])
HORIZONTAL = np.array([1.0, 0.0, 1.0])


class KeyAction(IntEnum):
    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True, eq=False)
class CollisionInfo:
    """Which cube was hit, by how much on each axis, and the axis to push out along."""

    index: int
    overlap: np.ndarray
    axis: int


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


class Player:
    """A box-shaped player with a camera at its position."""

    def __init__(self, position, size=(1.0, 2.0, 1.0)) -> None:
        self.position = np.array(position, dtype=float).reshape(3)
        self.size = np.array(size, dtype=float).reshape(3)
        self.speed = np.zeros(3)
        self.acceleration = GRAVITY.copy()
        self.camera = Camera(self.position)
        self.pressed: set[int] = set()

    def handle_key(self, key: int, action: int) -> None:
        """Record a key press or release; repeats are ignored."""
        if action == KeyAction.PRESS:
            self.pressed.add(key)
        elif action == KeyAction.RELEASE:
            self.pressed.discard(key)

    def update(self, dt: float, grids: Iterable) -> None:
        """Advance the player by dt seconds, colliding with the cubes of the grids."""
        forward = _normalize(self.camera.direction * HORIZONTAL)
        right = _normalize(np.cross(self.camera.direction, self.camera.up))

        if ord("W") in self.pressed:
            self.position += MOVE_SPEED * forward
        if ord("S") in self.pressed:
            self.position -= MOVE_SPEED * forward
        if ord("A") in self.pressed:
            self.position -= MOVE_SPEED * right
        if ord("D") in self.pressed:
            self.position += MOVE_SPEED * right

        self.position += self.speed * dt
        self.speed += self.acceleration * dt

        self.check_collision(grids)

        self.camera.position = self.position.copy()
        self.camera.update()

    def check_collision(self, grids: Iterable) -> None:
        """Push the player out of the first cube it overlaps in each grid."""
        for grid in grids:
            info = self.detect_collision(grid.cubes)
            if info is not None:
                self.separate_collision(info)
                self.resolve_impulse(info)
                logger.debug("collision with cube %d on axis %d", info.index, info.axis)

    def detect_collision(self, cubes: Sequence[Cube]) -> CollisionInfo | None:
        """Return the first cube the player's box overlaps, or None."""
        half = self.size / 2.0
        low = self.position - np.array([half[0], self.size[1] * 0.9, half[2]])
        high = self.position + np.array([half[0], self.size[1] * 0.2, half[2]])

        for index, cube in enumerate(cubes):
            # The cube's box extents are taken from its position.
            extent = cube.position / 2.0
            cube_low = cube.position - extent
            cube_high = cube.position + extent

            near_high = high * high < low * low
            own = np.where(near_high, high, low)
            other = np.where(near_high, cube_low, cube_high)
            overlap = own - other

            squares = overlap * overlap
            smallest = squares.min()
            axis = next(
                i for i, sq in enumerate(squares) if sq - 0.01 <= smallest <= sq + 0.01
            )

            if np.all(high >= cube_low) and np.all(cube_high >= low):
                return CollisionInfo(index, overlap, axis)
        return None

    def separate_collision(self, info: CollisionInfo) -> None:
        """Move the player back along the collision axis."""
        self.position[info.axis] -= info.overlap[info.axis]

    def resolve_impulse(self, info: CollisionInfo) -> None:
        """Stop the player's motion along the collision axis."""
        self.speed[info.axis] = 0.0