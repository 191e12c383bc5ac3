"""trailmap.grid
================

Generic 2-D grid of single-character tiles.

A :class:`Grid` owns a flat, row-major list of tiles plus its two dimensions.
Cells are addressed by :class:`~trailmap.types.Coord` (column ``x``, row
``y``) or by flat index ``width * y + x``. Every lookup is bounds-checked and
answers ``None`` (or an empty list) rather than raising when it falls off the
grid, which lets traversal code treat the edge as "no further work" without
special cases.

Grids are immutable once built. There is no mutation API; consumers that need
a modified map build a new grid.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Sequence

from .errors import ParseGridError
from .grid_utils import dims, first_ragged_row, split_rows
from .types import DIRECTIONS, Coord, Direction, T, TileParser


class Grid(Generic[T]):
    """Rectangular grid of tiles stored row-major.

    Parameters
    ----------
    tiles:
        Flat row-major tile sequence. Copied on construction.
    width:
        Number of columns (length of each row).
    height:
        Number of rows.

    Raises
    ------
    ValueError
        If ``len(tiles) != width * height`` or either dimension is negative.
    """

    def __init__(self, tiles: Sequence[T], width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")
        if len(tiles) != width * height:
            raise ValueError(
                f"expected {width * height} tiles for a {width}x{height} grid, got {len(tiles)}"
            )
        self._tiles: List[T] = list(tiles)
        self.width = width
        self.height = height

    # ------------------------------------------------------------------
    # Text format
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, text: str, parse_tile: TileParser) -> "Grid[T]":
        """Build a grid from text, one character per tile.

        Parameters
        ----------
        text:
            Rows separated by newlines. All rows must have the same length;
            the trailing newline is optional.
        parse_tile:
            Callable mapping one character to a tile. It signals bad input by
            raising ``ValueError`` (``ParseTileError`` included).

        Raises
        ------
        ParseGridError
            For empty input, ragged rows, or any character ``parse_tile``
            rejects. No partially built grid escapes.
        """

        rows = split_rows(text)
        height, width = dims(rows)
        if height == 0:
            raise ParseGridError("grid text contains no lines")
        if width == 0:
            raise ParseGridError("first row is empty", line=1)
        ragged = first_ragged_row(rows)
        if ragged is not None:
            raise ParseGridError(
                f"row has {len(rows[ragged])} characters, expected {width}",
                line=ragged + 1,
            )

        tiles: List[T] = []
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                try:
                    tiles.append(parse_tile(char))
                except ValueError as exc:
                    raise ParseGridError(str(exc), line=y + 1, column=x + 1) from exc
        return cls(tiles, width, height)

    def render(self) -> str:
        """Inverse of :meth:`parse`: one row per line, newline after every row."""

        return "".join("".join(str(tile) for tile in row) + "\n" for row in self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"

    # ------------------------------------------------------------------
    # Coordinate / index mapping
    # ------------------------------------------------------------------
    def in_bounds(self, coord: Coord) -> bool:
        return coord.x < self.width and coord.y < self.height

    def coord_to_index(self, coord: Coord) -> Optional[int]:
        if not self.in_bounds(coord):
            return None
        return self.width * coord.y + coord.x

    def index_to_coord(self, index: int) -> Optional[Coord]:
        if not 0 <= index < len(self._tiles):
            return None
        return Coord(index % self.width, index // self.width)

    def tile_at(self, coord: Coord) -> Optional[T]:
        index = self.coord_to_index(coord)
        if index is None:
            return None
        return self._tiles[index]

    # ------------------------------------------------------------------
    # Neighbours
    # ------------------------------------------------------------------
    def neighbor_coord(self, coord: Coord, direction: Direction) -> Optional[Coord]:
        """Coordinate one step from ``coord`` in ``direction``, or ``None`` past an edge."""

        if not self.in_bounds(coord):
            return None
        if direction is Direction.NORTH and coord.y == 0:
            return None
        if direction is Direction.EAST and coord.x == self.width - 1:
            return None
        if direction is Direction.SOUTH and coord.y == self.height - 1:
            return None
        if direction is Direction.WEST and coord.x == 0:
            return None
        return coord + direction

    def neighbor_coords(self, coord: Coord) -> List[Coord]:
        """All in-bounds neighbours of ``coord`` in North, East, South, West order."""

        found = (self.neighbor_coord(coord, direction) for direction in DIRECTIONS)
        return [neighbor for neighbor in found if neighbor is not None]

    def neighbor_tile(self, coord: Coord, direction: Direction) -> Optional[T]:
        neighbor = self.neighbor_coord(coord, direction)
        if neighbor is None:
            return None
        return self.tile_at(neighbor)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------
    def coords(self) -> Iterator[Coord]:
        """Every coordinate in row-major order."""

        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def rows(self) -> Iterator[List[T]]:
        for y in range(self.height):
            start = y * self.width
            yield self._tiles[start:start + self.width]

    def find(self, predicate: Callable[[T], bool]) -> List[Coord]:
        """Coordinates of tiles matching ``predicate``, in row-major order."""

        return [
            Coord(index % self.width, index // self.width)
            for index, tile in enumerate(self._tiles)
            if predicate(tile)
        ]

    def __iter__(self) -> Iterator[T]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self._tiles) == (other.width, other.height, other._tiles)


__all__ = ["Grid"]
