"""aocgrid.constants
=====================

Module-level constants. Keeping them here avoids import cycles between the
geometry modules and makes the recognised glyphs easy to find.
"""

from __future__ import annotations

LOGGER_NAME = "aocgrid"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Two-glyph boolean tiles as they appear in puzzle input.
TRUE_GLYPH = "#"
FALSE_GLYPH = "."

# Code fence label used by ``CodeBlockEncoder``.
CODE_FENCE_LABEL = "map"

__all__ = ["LOGGER_NAME", "LOG_FORMAT", "TRUE_GLYPH", "FALSE_GLYPH", "CODE_FENCE_LABEL"]
