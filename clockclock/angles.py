"""Circular angle math in degrees."""

import numpy as np

FULL_TURN = 360.0


def normalize_angle(angle):
    """Reduce an angle (scalar or array) into [0, 360)."""
    a = np.mod(angle, FULL_TURN)
    # Tiny negatives round up to exactly 360.0
    a = np.where(a >= FULL_TURN, a - FULL_TURN, a)
    if np.ndim(a) == 0:
        return float(a)
    return a


def forward_distance(start, end):
    """
    Rotation needed to go from start to end moving in the increasing-angle
    direction only.

    Returns a value in (0, 360] when the angles differ and exactly 0 when
    they are equal. Angles that differ by a whole turn give 360, never 0.
    """
    start = np.asarray(start, dtype=np.float64)
    end = np.asarray(end, dtype=np.float64)
    d = np.mod(end - start, FULL_TURN)
    d = np.where(d <= 0.0, d + FULL_TURN, d)
    d = np.where(start == end, 0.0, d)
    if np.ndim(d) == 0:
        return float(d)
    return d
