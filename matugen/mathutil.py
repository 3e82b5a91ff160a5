"""Small numeric helpers for angles, interpolation and 3x3 matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector3 = tuple[float, float, float]


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation: ``start`` at amount 0, ``stop`` at amount 1."""
    return (1.0 - amount) * start + amount * stop


def rotation_direction(from_deg: float, to_deg: float) -> float:
    """Sign of the shortest rotation from one angle to another.

    Returns 1.0 when increasing the angle is shortest (including the
    180 degree tie) and -1.0 otherwise.
    """
    increasing_difference = sanitize_degrees_double(to_deg - from_deg)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance between two angles on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def sanitize_degrees_int(degrees: int) -> int:
    """Bring an integer angle into the range [0, 360)."""
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    """Bring a floating-point angle into the range [0.0, 360.0)."""
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0.0:
        degrees += 360.0
    return degrees


def matrix_multiply(row: Sequence[float], matrix: Sequence[Sequence[float]]) -> Vector3:
    """Multiply a 3x3 matrix by a column vector."""
    x, y, z = row
    a, b, c = (m[0] * x + m[1] * y + m[2] * z for m in matrix)
    return (a, b, c)