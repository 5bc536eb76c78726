"""Immutable 3x3 matrices built from row vectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real as _RealNumber
from typing import Iterable, Iterator

from polymesher.vec import Real, Vec3


def _as_row(value: object) -> Vec3:
    if isinstance(value, Vec3):
        return value
    return Vec3(*value)  # type: ignore[misc]


@dataclass(frozen=True, slots=True)
class Mat3:
    """A 3x3 matrix stored as three row vectors."""

    row0: Vec3 = field(default_factory=Vec3)
    row1: Vec3 = field(default_factory=Vec3)
    row2: Vec3 = field(default_factory=Vec3)

    def __post_init__(self) -> None:
        object.__setattr__(self, "row0", _as_row(self.row0))
        object.__setattr__(self, "row1", _as_row(self.row1))
        object.__setattr__(self, "row2", _as_row(self.row2))

    @classmethod
    def identity(cls) -> Mat3:
        return cls(Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1))

    @classmethod
    def from_values(cls, values: Iterable[Real]) -> Mat3:
        """Build a matrix from nine values in row-major order."""
        v = list(values)
        if len(v) != 9:
            raise ValueError(f"expected 9 values, got {len(v)}")
        return cls(Vec3(*v[0:3]), Vec3(*v[3:6]), Vec3(*v[6:9]))

    def transposed(self) -> Mat3:
        return Mat3(*(Vec3(*column) for column in zip(*self)))

    def inversed(self) -> Mat3:
        """Return the inverse matrix.

        Raises ZeroDivisionError for a singular matrix.
        """
        (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = self

        b01 = a22 * a11 - a12 * a21
        b11 = -a22 * a10 + a12 * a20
        b21 = a21 * a10 - a11 * a20

        det = a00 * b01 + a01 * b11 + a02 * b21

        adjugate = Mat3(
            Vec3(b01, -a22 * a01 + a02 * a21, a12 * a01 - a02 * a11),
            Vec3(b11, a22 * a00 - a02 * a20, -a12 * a00 + a02 * a10),
            Vec3(b21, -a21 * a00 + a01 * a20, a11 * a00 - a01 * a10),
        )
        return adjugate / det

    def __add__(self, other: object) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(a - b for a, b in zip(self, other)))

    def __neg__(self) -> Mat3:
        return Mat3(*(-row for row in self))

    def __mul__(self, scalar: object) -> Mat3:
        if not isinstance(scalar, _RealNumber):
            return NotImplemented
        return Mat3(*(row * scalar for row in self))

    def __rmul__(self, scalar: object) -> Mat3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Mat3:
        if not isinstance(scalar, _RealNumber):
            return NotImplemented
        return Mat3(*(row / scalar for row in self))

    def __matmul__(self, other: object) -> Mat3 | Vec3:
        """Matrix product with another matrix or with a column vector."""
        if isinstance(other, Vec3):
            return Vec3(*(row.dot(other) for row in self))
        if isinstance(other, Mat3):
            columns = list(other.transposed())
            return Mat3(*(Vec3(*(row.dot(col) for col in columns)) for row in self))
        return NotImplemented

    def __getitem__(self, index: int) -> Vec3:
        return (self.row0, self.row1, self.row2)[index]

    def __iter__(self) -> Iterator[Vec3]:
        yield self.row0
        yield self.row1
        yield self.row2