"""
Small stateless helpers used across the wmm_sim package.

Scalar clamping, planar distance, and polar offsets in either the y-up
arm frame or the y-down screen frame.
"""

from __future__ import annotations

import math
from typing import Tuple

Point = Tuple[float, float]


def clamp(value: float, lo: float, hi: float) -> float:
    """Return *value* clamped to the closed interval [*lo*, *hi*].

    Args:
        value: The scalar to clamp.
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).

    Returns:
        The clamped scalar.
    """
    return max(lo, min(hi, value))


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two planar points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def polar_offset(origin: Point, length: float, angle: float, y_down: bool = False) -> Point:
    """Return the point *length* away from *origin* along *angle*.

    Angles are measured counter-clockwise from +x.  In screen space
    (``y_down=True``) the vertical component is negated so that positive
    angles still point up on screen.

    Args:
        origin: Start point.
        length: Distance to travel.
        angle: Direction in radians.
        y_down: Whether *origin* lives in a y-down (screen) frame.

    Returns:
        The offset point.
    """
    dy = length * math.sin(angle)
    if y_down:
        dy = -dy
    return origin[0] + length * math.cos(angle), origin[1] + dy
