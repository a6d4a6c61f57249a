"""aocgrid.inputs
==================

Generic readers that turn a puzzle input file into a stream of parsed
records: one record per line, or one record per blank-line-separated
paragraph. What a record looks like is entirely up to the ``parser``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Tuple, TypeVar, Union

R = TypeVar("R")


class InputParseError(ValueError):
    """A record in an input file could not be parsed.

    Carries the file name, the (1-based) line number where the record starts
    and the offending text.
    """

    def __init__(self, source: str, line: int, text: str, inner: BaseException) -> None:
        super().__init__(f"{source}:{line}: {inner} for {text!r}")
        self.source = source
        self.line = line
        self.text = text
        self.inner = inner


def _parse_one(parser: Callable[[str], R], text: str, source: str, line: int) -> R:
    try:
        return parser(text)
    except Exception as exc:
        raise InputParseError(source, line, text, exc) from exc


def parse_lines(path: Union[str, Path], parser: Callable[[str], R]) -> Iterator[R]:
    """Yield ``parser(line)`` for every non-blank line of ``path``.

    Leading and trailing whitespace is trimmed before parsing. The first
    record that fails to parse raises :class:`InputParseError`.
    """

    path = Path(path)
    with path.open() as handle:
        for number, raw in enumerate(handle, start=1):
            text = raw.strip()
            if not text:
                continue
            yield _parse_one(parser, text, path.name, number)


def iter_paragraphs(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Group ``lines`` into blank-line-separated blocks.

    Yields ``(first_line_number, block)``. Lines inside a block keep their
    original whitespace and line endings; the separating blank lines are
    dropped.
    """

    block: List[str] = []
    start = 0
    for number, raw in enumerate(lines, start=1):
        if raw.strip("\r\n") == "":
            if block:
                yield start, "".join(block)
                block = []
            continue
        if not block:
            start = number
        block.append(raw)
    if block:
        yield start, "".join(block)


def parse_paragraphs(path: Union[str, Path], parser: Callable[[str], R]) -> Iterator[R]:
    """Yield ``parser(block)`` for every blank-line-separated block of ``path``.

    Whitespace may be significant, so blocks reach the parser unmodified.
    """

    path = Path(path)
    with path.open() as handle:
        for number, block in iter_paragraphs(handle):
            yield _parse_one(parser, block, path.name, number)


def comma_separated(text: str, parser: Callable[[str], R] = str) -> List[R]:
    """Split ``text`` on commas and parse each item."""

    return [parser(item.strip()) for item in text.split(",")]


__all__ = [
    "InputParseError",
    "parse_lines",
    "iter_paragraphs",
    "parse_paragraphs",
    "comma_separated",
]
