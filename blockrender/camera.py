"""First-person fly camera driven by keyboard and mouse."""

from __future__ import annotations

import math

import numpy as np

from .input import Input, Key
from .transforms import look_at, normalize

SPEED = 2.5
SENSITIVITY = 0.1

_WORLD_UP_STEP = np.array([0.0, 1.0, 0.0])


class Camera:
    """A camera described by a position and yaw/pitch angles in degrees."""

    def __init__(self, position, up, yaw: float, pitch: float) -> None:
        self.position = np.asarray(position, dtype=np.float64).copy()
        self.world_up = np.asarray(up, dtype=np.float64).copy()
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.locked = True
        self._last_cursor: tuple[float, float] | None = None
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """Return the view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def update(self, delta_time: float, input: Input) -> None:
        """Move and turn the camera from the current input state."""
        step = SPEED * float(delta_time)
        if input.key_down(Key.W):
            self.position = self.position + self.front * step
        if input.key_down(Key.S):
            self.position = self.position - self.front * step
        if input.key_down(Key.D):
            self.position = self.position + self.right * step
        if input.key_down(Key.A):
            self.position = self.position - self.right * step
        if input.key_down(Key.SPACE):
            self.position = self.position + _WORLD_UP_STEP * step
        if input.key_down(Key.LSHIFT):
            self.position = self.position - _WORLD_UP_STEP * step

        if input.key_down(Key.ESCAPE) and self.locked:
            self.locked = False
            input.set_lock_cursor(False)

        x, y = input.cursor_pos()
        last_x, last_y = self._last_cursor if self._last_cursor is not None else (x, y)
        self._last_cursor = (x, y)

        # Cursor y grows downward, so looking up means a negative y change.
        self.yaw += (x - last_x) * SENSITIVITY
        self.pitch += (last_y - y) * SENSITIVITY

        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(front)
        self.right = normalize(np.cross(self.front, self.world_up))
        self.up = normalize(np.cross(self.right, self.front))