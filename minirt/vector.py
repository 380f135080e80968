"""Three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.quadratic import EPS


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return self.scale(-1)

    def __mul__(self, n: float) -> Vec3:
        return self.scale(n)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def scale(self, n: float) -> Vec3:
        """Return this vector multiplied by a scalar."""
        return Vec3(self.x * n, self.y * n, self.z * n)

    def dot(self, other: Vec3) -> float:
        """Return the dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return the cross product ``self x other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def sq(self) -> float:
        """Return the squared length."""
        return self.dot(self)

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.sq())

    def normalized(self) -> Vec3:
        """Return a unit vector in the same direction, or the zero vector if too short."""
        n = self.length()
        if n * n < EPS * EPS:
            return Vec3()
        return self.scale(1 / n)

    def hor(self, axis: Vec3) -> Vec3:
        """Return the component of this vector parallel to ``axis``."""
        den = axis.sq()
        if den < EPS * EPS:
            return Vec3()
        return axis.scale(self.dot(axis) / den)

    def ver(self, axis: Vec3) -> Vec3:
        """Return the component of this vector perpendicular to ``axis``."""
        return self - self.hor(axis)