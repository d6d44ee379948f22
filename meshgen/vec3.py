"""Immutable three-component vectors and tolerance-aware comparisons."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

TOLERANCE = 1e-12
_NORMALIZE_EPS = 1e-14


@dataclass(frozen=True, slots=True)
class Vec3:
    """A point or direction in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        """Scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product with ``other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if too short."""
        length = self.norm()
        if length > _NORMALIZE_EPS:
            return self / length
        return Vec3(0.0, 0.0, 0.0)


def vec3_less(a: Vec3, b: Vec3) -> bool:
    """Lexicographic ordering that treats components within tolerance as equal."""
    for ai, bi in zip(a, b):
        if abs(ai - bi) > TOLERANCE:
            return ai < bi
    return False


def vec3_equal(a: Vec3, b: Vec3) -> bool:
    """True when every component differs by less than the tolerance."""
    return all(abs(ai - bi) < TOLERANCE for ai, bi in zip(a, b))


def dist(a: Vec3, b: Vec3) -> float:
    """Euclidean distance between two points."""
    return (a - b).norm()