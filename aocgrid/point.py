"""aocgrid.point
=================

Immutable 2D integer coordinates. Points order lexicographically by
``(x, y)`` so they can sit inside heap entries and sorted containers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .direction import Direction


@dataclass(frozen=True, order=True)
class Point:
    """A position (or offset) on the integer plane.

    Supports ``+`` with another point, a :class:`Direction` or a ``(dx, dy)``
    tuple; ``-`` with another point; ``*`` and ``//`` by an integer scalar.
    """

    x: int
    y: int

    @classmethod
    def from_index(cls, index: int, width: int) -> "Point":
        """Inverse of the row-major offset ``x + y * width``."""

        return cls(index % width, index // width)

    def manhattan(self) -> int:
        """Taxicab distance from the origin."""

        return abs(self.x) + abs(self.y)

    def abs(self) -> "Point":
        return Point(abs(self.x), abs(self.y))

    def __abs__(self) -> "Point":
        return self.abs()

    def rotate_right(self) -> "Point":
        """Rotate 90 degrees clockwise about the origin."""

        return Point(self.y, -self.x)

    def rotate_left(self) -> "Point":
        """Rotate 90 degrees counter-clockwise about the origin."""

        return Point(-self.y, self.x)

    def as_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    def __add__(self, other: Union["Point", Direction, Tuple[int, int]]) -> "Point":
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        if isinstance(other, Direction):
            dx, dy = other.deltas()
            return Point(self.x + dx, self.y + dy)
        if isinstance(other, tuple) and len(other) == 2:
            dx, dy = other
            return Point(self.x + dx, self.y + dy)
        return NotImplemented

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, scale: int) -> "Point":
        if not isinstance(scale, int):
            return NotImplemented
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> "Point":
        if not isinstance(divisor, int):
            return NotImplemented
        return Point(self.x // divisor, self.y // divisor)


ORIGIN = Point(0, 0)

__all__ = ["Point", "ORIGIN"]
