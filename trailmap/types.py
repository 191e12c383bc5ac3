"""trailmap.types
=================

Foundational value types shared by the grid and its consumers: coordinates,
the four cardinal directions, and the capability every tile type must offer.
Like any definitions module it stays free of behaviour beyond the arithmetic
these small values need, so importing it never triggers runtime side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, Tuple, TypeVar, Union


class Direction(Enum):
    """The four cardinal directions.

    Iteration order is fixed at North, East, South, West. Every "all
    neighbours" enumeration in the package follows it, so anything built on a
    deterministic scan (path expansion, neighbour lists) inherits the same
    tie-break.
    """

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def offset(self) -> Tuple[int, int]:
        """``(dx, dy)`` for one step in this direction."""

        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)


@dataclass(frozen=True)
class Coord:
    """Zero-based ``(column, row)`` position of a grid cell.

    Parameters
    ----------
    x:
        Column index, counted from the left edge.
    y:
        Row index, counted from the top edge.

    Notes
    -----
    Coordinates never go negative. Any addition or subtraction whose result
    would leave the first quadrant raises :class:`ValueError`; grid code checks
    edges before stepping so callers only see this when they do raw
    arithmetic themselves.
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"coordinates must be non-negative, got ({self.x}, {self.y})")

    def __add__(self, other: Union["Coord", Direction]) -> "Coord":
        if isinstance(other, Direction):
            dx, dy = other.offset
            return Coord(self.x + dx, self.y + dy)
        if isinstance(other, Coord):
            return Coord(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: "Coord") -> "Coord":
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"Coord({self.x}, {self.y})"


class CharTile(Protocol):
    """Capability required of grid tiles.

    A tile type is parsed from exactly one character by a companion parser
    (see :data:`TileParser`) and renders back to that character through
    ``str()``. Rendering must be the inverse of parsing so that grids survive
    a text round trip.
    """

    def __str__(self) -> str:
        """Return the single-character form of the tile."""


T = TypeVar("T", bound=CharTile)

# Callable turning one character into a tile. Implementations raise
# ``ValueError`` (usually :class:`trailmap.errors.ParseTileError`) on bad input.
TileParser = Callable[[str], T]


__all__ = [
    "Coord",
    "Direction",
    "DIRECTIONS",
    "CharTile",
    "T",
    "TileParser",
]
