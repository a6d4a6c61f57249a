"""aocgrid.lines
=================

Straight lines on the integer plane, and the direction-plus-distance segments
that trace them out from the origin.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .direction import Direction
from .point import ORIGIN, Point


@dataclass(frozen=True, order=True)
class Line:
    """A segment between two points."""

    start: Point
    end: Point

    def manhattan_len(self) -> int:
        return (self.end - self.start).manhattan()


@dataclass(frozen=True)
class LineSegment:
    """A heading and a distance, e.g. ``R8`` or ``N3``.

    Classically this would be called a vector, but that word already means a
    point in N dimensions here.
    """

    direction: Direction
    distance: int

    @classmethod
    def parse(cls, text: str) -> "LineSegment":
        """Parse ``<direction char><distance>``; see :meth:`Direction.parse`."""

        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"segment needs a direction and a distance, got {text!r}")
        direction = Direction.parse(text[0])
        try:
            distance = int(text[1:])
        except ValueError as exc:
            raise ValueError(f"bad distance in segment {text!r}") from exc
        return cls(direction, distance)

    def offset(self) -> Point:
        """Displacement covered by this segment."""

        dx, dy = self.direction.deltas()
        return Point(dx * self.distance, dy * self.distance)


def follow(segments: Iterable[LineSegment], start: Point = ORIGIN) -> List[Line]:
    """Walk ``segments`` end to end from ``start``, returning the lines drawn."""

    cursor = start
    out = []
    for segment in segments:
        previous = cursor
        cursor = cursor + segment.offset()
        out.append(Line(previous, cursor))
    return out


# https://stackoverflow.com/a/1968345/504550
def intersect(a: Line, b: Line) -> Optional[Point]:
    """Point where ``a`` and ``b`` cross, or ``None``.

    Parallel (including collinear) lines report no intersection. The result is
    rounded to the nearest integer point.
    """

    p0, p1, p2, p3 = a.start, a.end, b.start, b.end
    s1_x, s1_y = p1.x - p0.x, p1.y - p0.y
    s2_x, s2_y = p3.x - p2.x, p3.y - p2.y

    denominator = -s2_x * s1_y + s1_x * s2_y
    if denominator == 0:
        return None

    s = (-s1_y * (p0.x - p2.x) + s1_x * (p0.y - p2.y)) / denominator
    t = (s2_x * (p0.y - p2.y) - s2_y * (p0.x - p2.x)) / denominator

    if 0 <= s <= 1 and 0 <= t <= 1:
        return Point(p0.x + round(t * s1_x), p0.y + round(t * s1_y))
    return None


def intersections_naive(a_lines: Iterable[Line], b_lines: Iterable[Line]) -> List[Point]:
    """Every crossing between a line of ``a_lines`` and a line of ``b_lines``."""

    b_lines = list(b_lines)
    crossings = []
    for a in a_lines:
        for b in b_lines:
            crossing = intersect(a, b)
            if crossing is not None:
                crossings.append(crossing)
    return crossings


__all__ = ["Line", "LineSegment", "follow", "intersect", "intersections_naive"]
