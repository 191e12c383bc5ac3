from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from .grid import Grid

# ---------------------------------------------------------------------------
# Text shape helpers
# ---------------------------------------------------------------------------
def split_rows(text: str) -> List[str]:
    """Split grid text into rows.

    Parameters
    ----------
    text:
        Raw grid text. The final newline is optional and ``\\r\\n`` endings
        are accepted.

    Returns
    -------
    list[str]
        One string per row, unmodified otherwise. Leading or trailing spaces
        are kept because they may be meaningful tile characters.

    Notes
    -----
    Only ``\\n`` separates rows. ``str.splitlines`` would also break on
    characters such as ``\\x1c`` or ``\\x85``, which are valid tiles.
    """

    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]


def dims(rows: List[str]) -> Tuple[int, int]:
    """Return ``(height, width)`` measured from ``rows``.

    Width is taken from the first row only; pair this with
    :func:`first_ragged_row` before trusting it.
    """

    if not rows:
        return 0, 0
    return len(rows), len(rows[0])


def first_ragged_row(rows: List[str]) -> Optional[int]:
    """Return the 0-based index of the first row whose length differs from row 0."""

    if not rows:
        return None
    width = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width:
            return index
    return None


# ---------------------------------------------------------------------------
# Array conversion
# ---------------------------------------------------------------------------
def to_array(grid: "Grid", value: Callable[[object], int], dtype=int) -> np.ndarray:
    """Project ``grid`` onto a ``(height, width)`` numpy array.

    ``value`` maps each tile to the number stored in its cell.
    """

    flat = np.fromiter((value(tile) for tile in grid), dtype=dtype, count=len(grid))
    return flat.reshape((grid.height, grid.width))


__all__ = [
    "split_rows",
    "dims",
    "first_ragged_row",
    "to_array",
]
