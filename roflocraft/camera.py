"""First-person camera driven by mouse movement."""

from __future__ import annotations

import math

import numpy as np

WIDTH, HEIGHT = 800, 600

PITCH_LIMIT = 89.0


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def front_vector(yaw: float, pitch: float) -> np.ndarray:
    """Return the unit view direction for the given yaw and pitch in degrees."""
    yaw_r, pitch_r = math.radians(yaw), math.radians(pitch)
    front = np.array(
        [
            math.cos(pitch_r) * math.cos(yaw_r),
            math.sin(pitch_r),
            math.cos(pitch_r) * math.sin(yaw_r),
        ]
    )
    return _normalize(front)


def look_at(eye, target, up) -> np.ndarray:
    """Return a right-handed 4x4 view matrix (row-major, acting on column vectors)."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(target, dtype=float) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    matrix = np.identity(4)
    matrix[0, :3] = s
    matrix[1, :3] = u
    matrix[2, :3] = -f
    matrix[0, 3] = -np.dot(s, eye)
    matrix[1, 3] = -np.dot(u, eye)
    matrix[2, 3] = np.dot(f, eye)
    return matrix


class Camera:
    """Camera with yaw/pitch orientation and a cached view matrix."""

    def __init__(self, position) -> None:
        self.position = np.array(position, dtype=float).reshape(3)
        self.last_x = float(WIDTH // 2)
        self.last_y = float(HEIGHT // 2)
        self.yaw = -90.0
        self.pitch = 0.0
        self.sensitivity = 0.05
        self.up = np.array([0.0, 1.0, 0.0])
        self.direction = front_vector(self.yaw, self.pitch)
        self.view_matrix = look_at(self.position, self.position + self.direction, self.up)

    def handle_mouse(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor movement since the previous call."""
        x_offset = (xpos - self.last_x) * self.sensitivity
        y_offset = (self.last_y - ypos) * self.sensitivity
        self.last_x = xpos
        self.last_y = ypos

        self.yaw += x_offset
        self.pitch = min(PITCH_LIMIT, max(-PITCH_LIMIT, self.pitch + y_offset))

    def update(self) -> None:
        """Recompute the view direction and matrix from the current state."""
        self.direction = front_vector(self.yaw, self.pitch)
        self.view_matrix = look_at(self.position, self.position + self.direction, self.up)