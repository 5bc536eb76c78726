"""Small immutable two- and three-dimensional vectors of real numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real as _RealNumber
from typing import Iterator

Real = float


def _is_scalar(value: object) -> bool:
    return isinstance(value, _RealNumber)


@dataclass(frozen=True, slots=True)
class Vec3:
    """A three-dimensional vector."""

    x: Real = 0.0
    y: Real = 0.0
    z: Real = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def dot(self, other: Vec3) -> Real:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> Real:
        return math.sqrt(self.sqr_magnitude())

    def sqr_magnitude(self) -> Real:
        return self.dot(self)

    def normalized(self) -> Vec3:
        """Return the unit vector of the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self * (1.0 / self.magnitude())

    def project(self, v: Vec3) -> Vec3:
        """Project onto the direction of ``v``."""
        return v * (self.dot(v) / v.sqr_magnitude())

    def project_on_plane(self, plane_v0: Vec3, plane_v1: Vec3) -> Vec3:
        """Project onto the plane spanned by ``plane_v0`` and ``plane_v1``."""
        return self - self.project(plane_v0.cross(plane_v1))

    def __add__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: object) -> Vec3:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: object) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vec3:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __getitem__(self, index: int) -> Real:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[Real]:
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True, slots=True)
class Vec2:
    """A two-dimensional vector."""

    x: Real = 0.0
    y: Real = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def dot(self, other: Vec2) -> Real:
        """Scalar product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> Real:
        """The z component of the three-dimensional cross product."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> Real:
        return math.sqrt(self.sqr_magnitude())

    def sqr_magnitude(self) -> Real:
        return self.dot(self)

    def normalized(self) -> Vec2:
        """Return the unit vector of the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self * (1.0 / self.magnitude())

    def project(self, v: Vec2) -> Vec2:
        """Project onto the direction of ``v``."""
        return v * (self.dot(v) / v.sqr_magnitude())

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: object) -> Vec2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> Vec2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vec2:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __getitem__(self, index: int) -> Real:
        return (self.x, self.y)[index]

    def __iter__(self) -> Iterator[Real]:
        yield self.x
        yield self.y