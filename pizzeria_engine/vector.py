"""Two-dimensional vector maths used throughout the engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, TypeVar, Union

HALF_PI = math.pi / 2

_T = TypeVar("_T", int, float)


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector with float components."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, other: Union["Vector2", float]) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Vector2", float]) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        return Vector2(self.x / other, self.y / other)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return Vector2()
        return self / size

    def angle(self) -> float:
        """Angle of the vector from the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def rotated_about(self, center: "Vector2", radians: float) -> "Vector2":
        """This point rotated by ``radians`` around ``center``."""
        dx = self.x - center.x
        dy = self.y - center.y
        cos, sin = math.cos(radians), math.sin(radians)
        return Vector2(center.x + dx * cos - dy * sin, center.y + dx * sin + dy * cos)

    def boss_direction(self) -> "Vector2":
        """The dominant axis of the vector as a unit step (right, left, down or up)."""
        if self.x == 0 and self.y == 0:
            return Vector2()
        if abs(self.x) >= abs(self.y):
            return Vector2(math.copysign(1.0, self.x), 0.0)
        return Vector2(0.0, math.copysign(1.0, self.y))


def clamp(value: _T, low: _T, high: _T) -> _T:
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value