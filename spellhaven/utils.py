"""Small numeric and vector helpers shared across the game."""

from __future__ import annotations

import math
from enum import Enum
from typing import Sequence, Tuple, Union

Number = Union[int, float]
Vec3 = Tuple[float, float, float]
IVec3 = Tuple[int, int, int]

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def div_floor(x: Number, y: Number) -> Number:
    """Divide ``x`` by ``y`` and step one down when the signs differ.

    Integers use truncating division first; floats use true division.
    The step applies whenever exactly one operand is negative, even for
    exact quotients.
    """
    if isinstance(x, int) and isinstance(y, int):
        if y == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient: Number = abs(x) // abs(y)
        if (x < 0) != (y < 0):
            quotient = -quotient
    else:
        quotient = x / y
    if (x < 0) != (y < 0):
        return quotient - 1
    return quotient


class RotationDirection(Enum):
    """Axis to rotate around."""

    X = "x"
    Y = "y"
    Z = "z"


def rotate_around(
    pos: Sequence[float],
    pivot: Sequence[float],
    angle: float,
    direction: RotationDirection,
) -> Vec3:
    """Rotate ``pos`` around ``pivot`` by ``angle`` degrees about an axis."""
    radians = math.radians(angle)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    x, y, z = (p - q for p, q in zip(pos, pivot))

    if direction is RotationDirection.X:
        x, y, z = x, y * cos_a - z * sin_a, y * sin_a + z * cos_a
    elif direction is RotationDirection.Y:
        x, y, z = x * cos_a + z * sin_a, y, -x * sin_a + z * cos_a
    elif direction is RotationDirection.Z:
        x, y, z = x * cos_a - y * sin_a, x * sin_a + y * cos_a, z
    else:
        raise ValueError(f"unknown rotation direction: {direction!r}")

    px, py, pz = pivot
    return (x + px, y + py, z + pz)


def _round_to_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return I32_MAX if value > 0 else I32_MIN
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += 1 if value > 0 else -1
    return max(I32_MIN, min(I32_MAX, truncated))


def vec_round_to_int(vec: Sequence[float]) -> IVec3:
    """Round each component half away from zero into the 32-bit integer range."""
    x, y, z = vec
    return (_round_to_i32(x), _round_to_i32(y), _round_to_i32(z))