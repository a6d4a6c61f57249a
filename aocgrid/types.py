"""aocgrid.types
=================

Type aliases shared by the grid, search and parsing modules. Keeping them in
one place means every module spells a tile parser or a visitor callback the
same way.

Definitions only: importing this module never triggers runtime side effects.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple, TypeVar

# ---------------------------------------------------------------------------
# Tile payloads
# ---------------------------------------------------------------------------
T = TypeVar("T")
U = TypeVar("U")

# ``(x, y)`` with the origin in the lower left.
Coord = Tuple[int, int]

# Converts one display chunk (usually a single character) into a tile. Parsers
# signal bad input by raising; ``ValueError`` and ``KeyError`` are the usual
# choices and enum constructors already behave this way.
TileParser = Callable[[str], Any]

# Renders one tile back into its display chunk.
TileRenderer = Callable[[Any], str]

# Flood-fill callback: receives the tile and its point, returns ``True`` to stop.
Visitor = Callable[[Any, Any], Optional[bool]]


__all__ = [
    "T",
    "U",
    "Coord",
    "TileParser",
    "TileRenderer",
    "Visitor",
]
