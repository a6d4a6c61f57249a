"""aocgrid.map
===============

Dense rectangular tile grid.

A :class:`Map` stores its tiles in one flat list indexed by ``x + y * width``.
The origin is the lower left corner so that :class:`~aocgrid.direction.Direction`
deltas apply unchanged: ``UP`` increases ``y``. Text input is written the
other way round (first line on top), so the text constructors reverse the row
order on load and :meth:`Map.render` reverses it again on output.

Entry points
------------
- :meth:`Map.new` when the puzzle involves drawing a map from scratch.
- :meth:`Map.from_text` / :meth:`Map.from_file` when the map is the input.

Copying a map is supported but usually means a simulation step is being
computed the hard way; :meth:`Map.transform` builds a successor grid directly
from an unmodified predecessor.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from . import search
from .direction import Direction
from .grid_utils import copy_rows, dims, flatten, is_rectangular
from .logging_utils import get_logger
from .point import Point
from .tiles import Classifier, chunks
from .types import Coord, T, TileParser, TileRenderer, U, Visitor

logger = get_logger(__name__)

Key = Union[Point, Coord]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class MapConversionError(ValueError):
    """Text could not be turned into a map."""


class TileConversionError(MapConversionError):
    """A single display chunk did not convert into a tile.

    Attributes
    ----------
    chunk:
        The offending text.
    inner:
        The exception raised by the tile parser.
    """

    def __init__(self, chunk: str, inner: BaseException) -> None:
        super().__init__(f"cannot convert {chunk!r} into a tile: {inner}")
        self.chunk = chunk
        self.inner = inner


class NotRectangularError(MapConversionError):
    """Rows of the input have differing lengths."""

    def __init__(self, widths: Optional[Sequence[int]] = None) -> None:
        message = "maps must be rectangular"
        if widths:
            message += f" (row widths: {sorted(set(widths))})"
        super().__init__(message)
        self.widths = list(widths or [])


# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------
class Map(Generic[T]):
    """A ``width`` x ``height`` grid of tiles of type ``T``."""

    def __init__(self, tiles: List[T], width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"map dimensions must be non-negative, got {width}x{height}")
        if len(tiles) != width * height:
            raise ValueError(f"{len(tiles)} tiles cannot fill a {width}x{height} map")
        self._tiles = tiles
        self._width = width
        self._height = height

    # -- construction -------------------------------------------------------
    @classmethod
    def new(cls, width: int, height: int, fill: Any = None) -> "Map[Any]":
        """Create a map with every tile set to ``fill``.

        ``fill`` is shared, not copied; use an immutable value or populate the
        map afterwards with :meth:`for_each_point_mut`.
        """

        return cls([fill] * (width * height), width, height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Map[T]":
        """Build a map from rows that are already bottom-first.

        ``rows[0][0]`` becomes the lower left tile. Raises
        :class:`NotRectangularError` when the rows differ in length.
        """

        if not is_rectangular(rows):
            raise NotRectangularError([len(row) for row in rows])
        height, width = dims(rows)
        if width == 0:
            return cls([], 0, 0)
        return cls(flatten(rows), width, height)

    @classmethod
    def from_lines(cls, lines: Iterable[str], parse_tile: TileParser, tile_width: int = 1) -> "Map[Any]":
        """Build a map from text lines listed top row first.

        Blank lines are skipped. Each line is cut into ``tile_width``
        character chunks and every chunk goes through ``parse_tile``.

        Raises
        ------
        TileConversionError
            ``parse_tile`` rejected a chunk, or a line did not divide evenly
            into chunks.
        NotRectangularError
            The rows have differing numbers of tiles.
        """

        rows: List[List[Any]] = []
        for line in lines:
            line = line.rstrip("\r\n")
            if not line:
                continue
            try:
                pieces = list(chunks(line, tile_width))
            except ValueError as exc:
                raise TileConversionError(line, exc) from exc
            row = []
            for piece in pieces:
                try:
                    row.append(parse_tile(piece))
                except Exception as exc:
                    raise TileConversionError(piece, exc) from exc
            rows.append(row)

        if not is_rectangular(rows):
            raise NotRectangularError([len(row) for row in rows])

        # shift the origin to the lower left
        rows.reverse()
        grid = cls.from_rows(rows)
        logger.debug("parsed %dx%d map", grid.width, grid.height)
        return grid

    @classmethod
    def from_text(cls, text: str, parse_tile: TileParser, tile_width: int = 1) -> "Map[Any]":
        """Build a map from a string in natural reading order (top line first)."""

        return cls.from_lines(text.splitlines(), parse_tile, tile_width)

    @classmethod
    def from_file(cls, path: Union[str, Path], parse_tile: TileParser, tile_width: int = 1) -> "Map[Any]":
        """Build a map from a text file in natural reading order."""

        with Path(path).open() as handle:
            return cls.from_lines(handle, parse_tile, tile_width)

    # -- shape --------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bottom_left(self) -> Point:
        return Point(0, 0)

    @property
    def bottom_right(self) -> Point:
        return Point(self._width - 1, 0)

    @property
    def top_left(self) -> Point:
        return Point(0, self._height - 1)

    @property
    def top_right(self) -> Point:
        return Point(self._width - 1, self._height - 1)

    def in_bounds(self, point: Point) -> bool:
        """True when ``point`` addresses a tile of this map."""

        return 0 <= point.x < self._width and 0 <= point.y < self._height

    # -- indexing -----------------------------------------------------------
    def _offset(self, key: Key) -> int:
        if isinstance(key, Point):
            x, y = key.x, key.y
        else:
            x, y = key
        if x < 0 or y < 0:
            raise AssertionError(f"point must be in the positive quadrant, got ({x}, {y})")
        if x >= self._width or y >= self._height:
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} map")
        return x + y * self._width

    def __getitem__(self, key: Key) -> T:
        return self._tiles[self._offset(key)]

    def __setitem__(self, key: Key, tile: T) -> None:
        self._tiles[self._offset(key)] = tile

    # -- iteration ----------------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        return iter(self._tiles)

    def points(self) -> Iterator[Point]:
        """Yield every coordinate in storage order (row by row, bottom first)."""

        for y in range(self._height):
            for x in range(self._width):
                yield Point(x, y)

    def items(self) -> Iterator[Tuple[Point, T]]:
        """Yield ``(point, tile)`` pairs in storage order."""

        return zip(self.points(), self._tiles)

    def for_each(self, visit: Callable[[T], Any]) -> None:
        for tile in self._tiles:
            visit(tile)

    def for_each_mut(self, update: Callable[[T], T]) -> None:
        """Replace every tile with ``update(tile)``."""

        self._tiles = [update(tile) for tile in self._tiles]

    def for_each_point(self, visit: Callable[[T, Point], Any]) -> None:
        for point, tile in self.items():
            visit(tile, point)

    def for_each_point_mut(self, update: Callable[[T, Point], T]) -> None:
        """Replace every tile with ``update(tile, point)``.

        New values are collected first and swapped in afterwards, so ``update``
        may read other tiles of this map and will always see the old values.
        """

        self._tiles = [update(tile, point) for point, tile in self.items()]

    def transform(self, fn: Callable[[T, Point], U]) -> "Map[U]":
        """Return a new map of the same shape holding ``fn(tile, point)``."""

        return Map([fn(tile, point) for point, tile in self.items()], self._width, self._height)

    def orthogonal_neighbours(self, point: Point) -> List[Point]:
        """In-bounds points one step away in each :meth:`Direction.iter` direction."""

        return [n for n in (point + d for d in Direction.iter()) if self.in_bounds(n)]

    def neighbours(self, point: Point) -> List[Point]:
        """In-bounds points among the eight surrounding ``point``."""

        candidates = [point + d for d in Direction.iter()]
        candidates.extend(point + vertical + horizontal for vertical, horizontal in Direction.iter_diag())
        return [n for n in candidates if self.in_bounds(n)]

    # -- whole-map transforms -----------------------------------------------
    def copy(self) -> "Map[T]":
        return Map(list(self._tiles), self._width, self._height)

    def _remap(self, width: int, height: int, destination: Callable[[Point], Point]) -> "Map[T]":
        tiles: List[Any] = [None] * (width * height)
        for point, tile in self.items():
            moved = destination(point)
            tiles[moved.x + moved.y * width] = tile
        return Map(tiles, width, height)

    def rotate_left(self) -> "Map[T]":
        """Rotate 90 degrees counter-clockwise; width and height swap."""

        h = self._height
        return self._remap(self._height, self._width, lambda p: Point(h - 1 - p.y, p.x))

    def rotate_right(self) -> "Map[T]":
        """Rotate 90 degrees clockwise; width and height swap."""

        w = self._width
        return self._remap(self._height, self._width, lambda p: Point(p.y, w - 1 - p.x))

    def flip_vertical(self) -> "Map[T]":
        """Mirror top to bottom."""

        h = self._height
        return self._remap(self._width, self._height, lambda p: Point(p.x, h - 1 - p.y))

    def flip_horizontal(self) -> "Map[T]":
        """Mirror left to right."""

        w = self._width
        return self._remap(self._width, self._height, lambda p: Point(w - 1 - p.x, p.y))

    def edge(self, direction: Direction) -> List[T]:
        """Tiles along the side facing ``direction``, in increasing coordinate order."""

        if self._width == 0 or self._height == 0:
            return []
        if direction is Direction.UP:
            return [self[(x, self._height - 1)] for x in range(self._width)]
        if direction is Direction.DOWN:
            return [self[(x, 0)] for x in range(self._width)]
        if direction is Direction.LEFT:
            return [self[(0, y)] for y in range(self._height)]
        return [self[(self._width - 1, y)] for y in range(self._height)]

    # -- export -------------------------------------------------------------
    def rows(self) -> List[List[T]]:
        """Copy of the tiles as rows, bottom row first."""

        return copy_rows(
            [self._tiles[y * self._width:(y + 1) * self._width] for y in range(self._height)]
        )

    def as_array(self, dtype: Any = None) -> np.ndarray:
        """Return the tiles as a ``(height, width)`` array, top row first.

        Without ``dtype`` the array holds the tile objects themselves; pass a
        numeric dtype for tiles that numpy can convert.
        """

        top_down = list(reversed(self.rows()))
        if dtype is not None:
            return np.array(top_down, dtype=dtype).reshape(self._height, self._width)
        out = np.empty((self._height, self._width), dtype=object)
        for r, row in enumerate(top_down):
            for c, tile in enumerate(row):
                out[r, c] = tile
        return out

    def render(self, glyph: TileRenderer = str) -> str:
        """Text form with the top row first and a newline after every row."""

        lines = []
        for y in reversed(range(self._height)):
            row = self._tiles[y * self._width:(y + 1) * self._width]
            lines.append("".join(glyph(tile) for tile in row) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Map(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._tiles == other._tiles
        )

    def __hash__(self) -> int:
        return hash((self._width, self._height, tuple(self._tiles)))

    # -- graph search -------------------------------------------------------
    def reachable_from(
        self,
        start: Point,
        visit: Visitor,
        classifier: Classifier[Any, Any],
        context: Any = None,
    ) -> None:
        """Flood fill from ``start``; see :func:`aocgrid.search.reachable_from`."""

        search.reachable_from(self, start, visit, classifier, context)

    def navigate(
        self,
        start: Point,
        goal: Point,
        classifier: Classifier[Any, Any],
        context: Any = None,
    ) -> Optional[List[Direction]]:
        """Shortest path of steps; see :func:`aocgrid.search.navigate`."""

        return search.navigate(self, start, goal, classifier, context)


__all__ = [
    "Map",
    "MapConversionError",
    "TileConversionError",
    "NotRectangularError",
]
