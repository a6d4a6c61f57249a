"""aocgrid.vectors
===================

Three- and four-dimensional integer points. They back the sparse
infinite-grid simulations in :mod:`aocgrid.conway`, where they serve as set
members, so both types are frozen and hashable.

``<`` and ``>`` follow the dataclass total ordering (lexicographic). For
bounding boxes use :meth:`boundary_min` / :meth:`boundary_max`, which work
component-wise instead:

>>> a = Vector3(-1, -1, -1)
>>> b = Vector3(0, -3, -1)
>>> a < b
True
>>> a.boundary_min(b)
Vector3(x=-1, y=-3, z=-1)
"""

from __future__ import annotations

import itertools
import re
from dataclasses import dataclass, fields
from re import Pattern
from typing import Any, Callable, ClassVar, Iterator, Tuple, Type, TypeVar

from .point import Point

V = TypeVar("V", bound="_VectorOps")


class _VectorOps:
    """Arithmetic shared by every fixed-dimension vector dataclass."""

    _pattern: ClassVar[Pattern[str]]

    def coords(self) -> Tuple[int, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    @classmethod
    def dimensions(cls) -> int:
        return len(fields(cls))  # type: ignore[arg-type]

    @classmethod
    def origin(cls: Type[V]) -> V:
        return cls(*([0] * cls.dimensions()))  # type: ignore[call-arg]

    @classmethod
    def from_point(cls: Type[V], point: Point) -> V:
        """Project a 2D point into this space; the extra axes are zero."""

        extra = [0] * (cls.dimensions() - 2)
        return cls(point.x, point.y, *extra)  # type: ignore[call-arg]

    @classmethod
    def inclusive_range(cls: Type[V], minimum: V, maximum: V) -> Iterator[V]:
        """Yield every point in the closed box between ``minimum`` and ``maximum``."""

        axes = [range(lo, hi + 1) for lo, hi in zip(minimum.coords(), maximum.coords())]
        for coords in itertools.product(*axes):
            yield cls(*coords)  # type: ignore[call-arg]

    @classmethod
    def parse(cls: Type[V], text: str) -> V:
        """Parse ``<x=1, y=-2, ...>``; the ``axis=`` labels are optional."""

        match = cls._pattern.search(text)
        if match is None:
            raise ValueError(f"no {cls.__name__} found in {text!r}")
        return cls(*(int(match.group(f.name)) for f in fields(cls)))  # type: ignore[arg-type, call-arg]

    def _map(self: V, fn: Callable[[int], int]) -> V:
        return type(self)(*(fn(c) for c in self.coords()))  # type: ignore[call-arg]

    def _zip(self: V, other: V, fn: Callable[[int, int], int]) -> V:
        return type(self)(*(fn(a, b) for a, b in zip(self.coords(), other.coords())))  # type: ignore[call-arg]

    def abs_sum(self) -> int:
        """Manhattan distance from the origin."""

        return sum(abs(c) for c in self.coords())

    def decr(self: V) -> V:
        """This point with every coordinate decremented by one."""

        return self._map(lambda c: c - 1)

    def incr(self: V) -> V:
        """This point with every coordinate incremented by one."""

        return self._map(lambda c: c + 1)

    def adjacent(self: V) -> Iterator[V]:
        """Yield every neighbour, diagonals included: 26 in 3D, 80 in 4D."""

        return (v for v in type(self).inclusive_range(self.decr(), self.incr()) if v != self)

    def boundary_min(self: V, other: V) -> V:
        """Smallest corner of a box containing both ``self`` and ``other``."""

        return self._zip(other, min)

    def boundary_max(self: V, other: V) -> V:
        """Largest corner of a box containing both ``self`` and ``other``."""

        return self._zip(other, max)

    def volume(self, numeric: Callable[[int], Any] = int) -> Any:
        """Product of the absolute coordinates, accumulated in ``numeric``.

        Pass ``numeric`` to widen the arithmetic, e.g. ``numpy.int64`` or
        ``fractions.Fraction``; it must accept an ``int`` and support ``*``.
        """

        values = [numeric(abs(c)) for c in self.coords()]
        total = values[0]
        for value in values[1:]:
            total = total * value
        return total

    def __add__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b)

    def __str__(self) -> str:
        body = ", ".join(f"{f.name}={getattr(self, f.name):3}" for f in fields(self))  # type: ignore[arg-type]
        return f"<{body}>"


def _vector_pattern(axes: str) -> Pattern[str]:
    parts = [rf"({axis}=\s*)?(?P<{axis}>-?\d+)" for axis in axes]
    return re.compile(r"(?i)<\s*" + r",\s*".join(parts) + r"\s*>")


@dataclass(frozen=True, order=True)
class Vector3(_VectorOps):
    """A point in 3-dimensional space."""

    x: int
    y: int
    z: int

    _pattern: ClassVar[Pattern[str]] = _vector_pattern("xyz")


@dataclass(frozen=True, order=True)
class Vector4(_VectorOps):
    """A point in 4-dimensional space."""

    x: int
    y: int
    z: int
    w: int

    _pattern: ClassVar[Pattern[str]] = _vector_pattern("xyzw")


__all__ = ["Vector3", "Vector4"]
