"""aocgrid.tiles
================

Tile-level building blocks: the traversability classification used by the
search algorithms, the :class:`Classifier` interface that maps arbitrary tile
types onto it, a ready-made two-glyph :class:`Bool` tile, and a helper that
splits input lines into fixed-width display chunks.

The grid engine never inspects tile semantics itself. A search receives a
classifier (and optionally a context value such as "maximum climbable
height") and asks it about each tile it touches.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, Protocol, TypeVar

from .constants import FALSE_GLYPH, TRUE_GLYPH

T_contra = TypeVar("T_contra", contravariant=True)
C_contra = TypeVar("C_contra", contravariant=True)
T = TypeVar("T")
C = TypeVar("C")


class Traversability(Enum):
    """Can a visitor move through a tile?"""

    OBSTRUCTED = "obstructed"
    """Cannot be entered."""
    FREE = "free"
    """Can be entered and moved through."""
    HALT = "halt"
    """Can be entered but not moved past."""


class Classifier(Protocol[T_contra, C_contra]):
    """Interface for objects that classify tiles for the search algorithms.

    ``context`` is whatever extra information the classification needs; it is
    ``None`` when a tile's own value is enough. Implementations must be pure:
    the same tile and context always give the same answer.
    """

    def classify(self, tile: T_contra, context: C_contra) -> Traversability:
        """Return the traversability of ``tile`` under ``context``."""


class FunctionClassifier(Generic[T, C]):
    """Adapt a plain ``fn(tile, context)`` callable to :class:`Classifier`."""

    def __init__(self, fn: Callable[[T, C], Traversability]) -> None:
        self._fn = fn

    def classify(self, tile: T, context: C) -> Traversability:
        return self._fn(tile, context)

    def __repr__(self) -> str:
        return f"FunctionClassifier({getattr(self._fn, '__name__', self._fn)!r})"


def always(traversability: Traversability) -> FunctionClassifier[Any, Any]:
    """Classifier that reports the same traversability for every tile."""

    return FunctionClassifier(lambda _tile, _context: traversability)


class Bool(Enum):
    """Two-state tile written as ``#`` (true) and ``.`` (false)."""

    TRUE = TRUE_GLYPH
    FALSE = FALSE_GLYPH

    @classmethod
    def from_bool(cls, value: bool) -> "Bool":
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def classifier(cls) -> FunctionClassifier["Bool", Optional[Any]]:
        """Classifier treating ``#`` as a wall and ``.`` as open floor."""

        return FunctionClassifier(_classify_bool)

    def __bool__(self) -> bool:
        return self is Bool.TRUE

    def __str__(self) -> str:
        return self.value


def _classify_bool(tile: Bool, _context: Any) -> Traversability:
    return Traversability.OBSTRUCTED if tile else Traversability.FREE


def chunks(line: str, width: int = 1) -> Iterator[str]:
    """Split ``line`` into consecutive chunks of ``width`` characters.

    Tiles with a constant display width wider than one character are parsed
    chunk by chunk. A trailing partial chunk is an error rather than being
    dropped or padded.
    """

    if width < 1:
        raise ValueError(f"chunk width must be positive, got {width}")
    if len(line) % width:
        raise ValueError(f"line of length {len(line)} does not split into chunks of {width}: {line!r}")
    for start in range(0, len(line), width):
        yield line[start:start + width]


__all__ = [
    "Traversability",
    "Classifier",
    "FunctionClassifier",
    "always",
    "Bool",
    "chunks",
]
