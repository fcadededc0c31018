"""Minimal three-component vector used by the force appliers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

SMALL_NUMBER = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def safe_normal(self, tolerance: float = SMALL_NUMBER) -> Vec3:
        """Return a unit vector in this direction, or the zero vector if too short."""
        square_sum = self.dot(self)
        if square_sum == 1.0:
            return self
        if square_sum < tolerance:
            return ZERO
        scale = 1.0 / math.sqrt(square_sum)
        return self * scale


ZERO = Vec3(0.0, 0.0, 0.0)
FORWARD = Vec3(1.0, 0.0, 0.0)
UP = Vec3(0.0, 0.0, 1.0)