"""aocgrid.encoders
====================

Text encodings for maps. :meth:`Map.from_text` and ``str(map)`` cover the
common one-glyph-per-tile case; the encoders here bundle a tile parser with its
renderer so a format can be passed around as one object, and add separated and
fenced variants for logs and fixtures.
"""

from __future__ import annotations

from typing import Protocol

from .constants import CODE_FENCE_LABEL
from .grid_utils import is_rectangular
from .map import Map, NotRectangularError, TileConversionError
from .types import TileParser, TileRenderer


class MapEncoder(Protocol):
    """Interface for components that convert maps to and from text.

    Text is always in natural reading order: the first line is the top row.
    """

    def to_text(self, grid: Map) -> str:
        """Serialise ``grid`` into text."""

    def to_map(self, text: str) -> Map:
        """Parse ``text`` back into a map."""


class GlyphEncoder:
    """Fixed-width glyph per tile, no separators.

    Parameters
    ----------
    parse_tile:
        Converts one ``tile_width``-character chunk into a tile.
    render_tile:
        Inverse of ``parse_tile``. Defaults to ``str``.
    tile_width:
        Display width of every tile.
    """

    def __init__(self, parse_tile: TileParser, render_tile: TileRenderer = str, tile_width: int = 1) -> None:
        self.parse_tile = parse_tile
        self.render_tile = render_tile
        self.tile_width = tile_width

    def to_text(self, grid: Map) -> str:
        return grid.render(self.render_tile)

    def to_map(self, text: str) -> Map:
        return Map.from_text(text, self.parse_tile, self.tile_width)


class SeparatedEncoder:
    """Tiles joined by ``split_symbol``, which allows variable-width tiles."""

    def __init__(self, parse_tile: TileParser, render_tile: TileRenderer = str, split_symbol: str = "|") -> None:
        self.parse_tile = parse_tile
        self.render_tile = render_tile
        self.split_symbol = split_symbol

    def to_text(self, grid: Map) -> str:
        lines = []
        for row in reversed(grid.rows()):
            lines.append(self.split_symbol.join(self.render_tile(tile) for tile in row))
        return "\n".join(lines) + ("\n" if lines else "")

    def to_map(self, text: str) -> Map:
        rows = []
        for line in text.splitlines():
            if not line.strip():
                continue
            row = []
            for part in line.split(self.split_symbol):
                try:
                    row.append(self.parse_tile(part))
                except Exception as exc:
                    raise TileConversionError(part, exc) from exc
            rows.append(row)
        if not is_rectangular(rows):
            raise NotRectangularError([len(row) for row in rows])
        rows.reverse()
        return Map.from_rows(rows)


class CodeBlockEncoder:
    """Wrap another encoder's output in a Markdown-style code fence."""

    def __init__(self, base_encoder: MapEncoder, label: str = CODE_FENCE_LABEL) -> None:
        self._encoder = base_encoder
        self._start = f"```{label}\n"

    def to_text(self, grid: Map) -> str:
        body = self._encoder.to_text(grid)
        if not body.endswith("\n"):
            body += "\n"
        return f"{self._start}{body}```"

    def to_map(self, text: str) -> Map:
        end_token = "\n```"
        if self._start not in text or end_token not in text.split(self._start, 1)[1]:
            raise ValueError("Input text does not contain a fenced map block")
        core = text.split(self._start, 1)[1].split(end_token, 1)[0]
        return self._encoder.to_map(core)


__all__ = [
    "MapEncoder",
    "GlyphEncoder",
    "SeparatedEncoder",
    "CodeBlockEncoder",
]
