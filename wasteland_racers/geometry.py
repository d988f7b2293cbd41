"""Three-component vectors and interpolation used by the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

_SMALL_NUMBER = 1e-8

T = TypeVar("T")


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> "Vector":
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> "Vector":
        return Vector(self.x / scale, self.y / scale, self.z / scale)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> "Vector":
        """Unit vector in the same direction, or the zero vector if too short."""
        squared = self.x * self.x + self.y * self.y + self.z * self.z
        if squared < _SMALL_NUMBER:
            return Vector()
        return self / math.sqrt(squared)

    def distance(self, other: "Vector") -> float:
        return (self - other).length()

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0


def lerp(start, end, alpha: float):
    """Linear interpolation between two floats or two vectors."""
    return start + (end - start) * alpha