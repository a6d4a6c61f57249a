from __future__ import annotations

from typing import Any, List, Sequence, Tuple

# ---------------------------------------------------------------------------
# Row-list helpers used while building and exporting maps
# ---------------------------------------------------------------------------
def dims(rows: Sequence[Sequence[Any]]) -> Tuple[int, int]:
    """Return the height and width of a list of rows.

    Parameters
    ----------
    rows:
        Rows to measure. ``rows`` may be empty; ragged rows are measured by
        their first row only, so call :func:`is_rectangular` first when the
        shape matters.

    Returns
    -------
    tuple[int, int]
        ``(height, width)``. Empty input returns ``(0, 0)``.
    """

    if not rows:
        return 0, 0
    return len(rows), len(rows[0])


def is_rectangular(rows: Sequence[Sequence[Any]]) -> bool:
    """Check that every row has the same length as the first."""

    if not rows:
        return True
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def copy_rows(rows: Sequence[Sequence[Any]]) -> List[List[Any]]:
    """Return a structural copy of ``rows`` safe for mutation by callers.

    Only the row lists are copied; tiles themselves are shared.
    """

    return [list(row) for row in rows]


def flatten(rows: Sequence[Sequence[Any]]) -> List[Any]:
    """Concatenate ``rows`` into one list in row order."""

    return [tile for row in rows for tile in row]


__all__ = [
    "dims",
    "is_rectangular",
    "copy_rows",
    "flatten",
]
