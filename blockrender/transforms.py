"""Vector and matrix helpers for a right-handed, OpenGL-style pipeline.

Matrices are row-major numpy arrays meant to be applied as ``m @ v``.
"""

from __future__ import annotations

import math

import numpy as np


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    v = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at(eye, center, up) -> np.ndarray:
    """Build a view matrix looking from ``eye`` toward ``center``."""
    eye = np.asarray(eye, dtype=np.float64)
    f = normalize(np.asarray(center, dtype=np.float64) - eye)
    s = normalize(np.cross(f, np.asarray(up, dtype=np.float64)))
    u = np.cross(s, f)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Build a perspective projection; ``fovy`` is in radians, depth maps to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m