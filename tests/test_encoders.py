from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aocgrid.encoders import CodeBlockEncoder, GlyphEncoder, SeparatedEncoder
from aocgrid.logging_utils import configure_logging, get_logger, log_map
from aocgrid.map import Map, NotRectangularError, TileConversionError
from aocgrid.tiles import Bool


def make_example() -> Map:
    return Map.from_text("#..\n.##\n", Bool)


def test_glyph_encoder_round_trip():
    encoder = GlyphEncoder(Bool)
    grid = make_example()
    text = encoder.to_text(grid)
    assert text == "#..\n.##\n"
    assert encoder.to_map(text) == grid


def test_separated_encoder_handles_variable_widths():
    encoder = SeparatedEncoder(int)
    grid = encoder.to_map("10|2\n3|40\n")
    assert grid[(0, 1)] == 10
    assert grid[(1, 0)] == 40
    assert encoder.to_text(grid) == "10|2\n3|40\n"


def test_separated_encoder_errors():
    encoder = SeparatedEncoder(int, split_symbol=",")
    with pytest.raises(NotRectangularError):
        encoder.to_map("1,2\n3\n")
    with pytest.raises(TileConversionError):
        encoder.to_map("1,a\n")


def test_code_block_encoder():
    encoder = CodeBlockEncoder(GlyphEncoder(Bool))
    grid = make_example()
    text = encoder.to_text(grid)
    assert text == "```map\n#..\n.##\n```"
    assert encoder.to_map("some notes\n" + text + "\ntrailing") == grid
    with pytest.raises(ValueError):
        encoder.to_map("#..\n.##\n")


def test_get_logger_namespacing():
    assert get_logger().name == "aocgrid"
    assert get_logger("aocgrid.map").name == "aocgrid.map"
    assert get_logger("day17").name == "aocgrid.day17"


def test_log_map(caplog):
    logger = get_logger("tests")
    with caplog.at_level(logging.DEBUG, logger="aocgrid"):
        log_map(logger, "example", make_example())
    assert "example (3x2)" in caplog.text
    assert "#..\n.##" in caplog.text


def test_log_map_skips_disabled_levels(caplog):
    class Exploding:
        width = height = 1

        def __str__(self):
            raise AssertionError("should not render")

    logger = get_logger("tests")
    with caplog.at_level(logging.WARNING, logger="aocgrid"):
        log_map(logger, "quiet", Exploding())
    assert caplog.text == ""


def test_configure_logging_does_not_stack_handlers():
    logger = get_logger()
    previous_level = logger.level
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.INFO)
        installed = [h for h in logger.handlers if getattr(h, "_aocgrid_stream", False)]
        assert len(installed) == 1
        assert logger.level == logging.INFO
    finally:
        for handler in list(logger.handlers):
            if getattr(handler, "_aocgrid_stream", False):
                logger.removeHandler(handler)
        logger.setLevel(previous_level)


def test_separated_encoder_wraps_lookup_errors():
    table = [10, 20]
    encoder = SeparatedEncoder(lambda part: table[int(part)])
    assert encoder.to_map("0|1\n")[(1, 0)] == 20
    with pytest.raises(TileConversionError) as excinfo:
        encoder.to_map("0|5\n")
    assert isinstance(excinfo.value.inner, IndexError)
