"""aocgrid.direction
=====================

Compass directions for a coordinate system whose origin is in the lower left:
``UP`` increases ``y`` and ``RIGHT`` increases ``x``.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple


class Direction(Enum):
    """One of the four orthogonal headings."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    def deltas(self) -> Tuple[int, int]:
        """``(dx, dy)`` unit step for this heading."""

        return _DELTAS[self]

    def turn_right(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def reverse(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    @classmethod
    def iter(cls) -> Iterator["Direction"]:
        """Yield every direction in the fixed order up, down, left, right."""

        return iter((cls.UP, cls.DOWN, cls.LEFT, cls.RIGHT))

    @classmethod
    def iter_diag(cls) -> Iterator[Tuple["Direction", "Direction"]]:
        """Yield the four diagonals as ``(vertical, horizontal)`` pairs.

        Adding both members of a pair to a point gives a diagonal neighbour, so
        ``iter`` followed by ``iter_diag`` covers all eight neighbours.
        """

        for vertical in (cls.UP, cls.DOWN):
            for horizontal in (cls.LEFT, cls.RIGHT):
                yield vertical, horizontal

    @classmethod
    def parse(cls, char: str) -> "Direction":
        """Interpret ``U/D/L/R`` or compass ``N/S/E/W`` (any case)."""

        try:
            return _ALIASES[char.lower()]
        except KeyError as exc:
            raise ValueError(f"unknown direction: {char!r}") from exc


_DELTAS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
}

# Clockwise ordering; turning right walks forward through it.
_CLOCKWISE = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)

_ALIASES = {
    "u": Direction.UP,
    "n": Direction.UP,
    "d": Direction.DOWN,
    "s": Direction.DOWN,
    "l": Direction.LEFT,
    "w": Direction.LEFT,
    "r": Direction.RIGHT,
    "e": Direction.RIGHT,
}


__all__ = ["Direction"]
