from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aocgrid.inputs import InputParseError, comma_separated, iter_paragraphs, parse_lines, parse_paragraphs


def test_parse_lines_skips_blanks_and_trims(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1\n2\n\n 3 \n")
    assert list(parse_lines(path, int)) == [1, 2, 3]


def test_parse_lines_reports_location(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("1\nnope\n3\n")
    with pytest.raises(InputParseError) as excinfo:
        list(parse_lines(path, int))
    error = excinfo.value
    assert error.source == "numbers.txt"
    assert error.line == 2
    assert error.text == "nope"
    assert isinstance(error.inner, ValueError)
    assert "numbers.txt:2" in str(error)


def test_iter_paragraphs_keeps_line_endings():
    lines = ["a\r\n", "\r\n", "b\r\n", "c\r\n", "\r\n", "\r\n"]
    assert list(iter_paragraphs(lines)) == [(1, "a\r\n"), (3, "b\r\nc\r\n")]


def test_iter_paragraphs_preserves_inner_whitespace():
    lines = ["  x\n", " y \n", "\n", "z"]
    assert list(iter_paragraphs(lines)) == [(1, "  x\n y \n"), (4, "z")]


def test_parse_paragraphs(tmp_path):
    path = tmp_path / "groups.txt"
    path.write_text("abc\nde\n\n\nf\n")
    assert list(parse_paragraphs(path, str)) == ["abc\nde\n", "f\n"]
    assert list(parse_paragraphs(path, lambda block: len(block.split()))) == [2, 1]


def test_parse_paragraphs_error_points_at_block_start(tmp_path):
    path = tmp_path / "groups.txt"
    path.write_text("1\n\n2\nx\n")

    def total(block):
        return sum(int(item) for item in block.split())

    with pytest.raises(InputParseError) as excinfo:
        list(parse_paragraphs(path, total))
    assert excinfo.value.line == 3


def test_comma_separated():
    assert comma_separated("1, 2,3", int) == [1, 2, 3]
    assert comma_separated("R8,U5") == ["R8", "U5"]


def test_parse_lines_wraps_lookup_errors(tmp_path):
    path = tmp_path / "indices.txt"
    path.write_text("0\n7\n")
    names = ["first"]
    with pytest.raises(InputParseError) as excinfo:
        list(parse_lines(path, lambda text: names[int(text)]))
    assert excinfo.value.line == 2
    assert isinstance(excinfo.value.inner, IndexError)
