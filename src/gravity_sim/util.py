# MIT License (see LICENSE)
"""
Small 2D vector helpers.

All functions operate on 2D vectors represented as numpy arrays of shape (2,).
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets positions and velocities be passed as tuples or lists.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def clamped_distance(d: np.ndarray, min_distance: float) -> float:
    """Length of displacement d, never less than min_distance."""
    return max(norm(d), min_distance)


def direction(d: np.ndarray) -> np.ndarray:
    """
    Unit vector along d, built from its polar angle.

    Uses atan2 so that a zero displacement yields (1, 0) instead of NaN.
    """
    angle = np.arctan2(d[1], d[0])
    return np.array([np.cos(angle), np.sin(angle)], dtype=np.float64)
