"""trailmap.tiles
=================

Concrete tile types for :class:`~trailmap.grid.Grid`.

:class:`Trail` is the elevation tile of a topographic trail map: a tagged
variant whose kind is derived from its elevation (0 is a trail head, 9 a
summit, anything between is path). :class:`Letter` wraps an arbitrary
character for grids such as word searches where every symbol is valid.

Each tile type exposes ``from_char`` as its parser, so a grid is built with
``Grid.parse(text, Trail.from_char)``.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from enum import Enum

from .errors import ParseTileError


class TrailKind(Enum):
    START = "start"
    PATH = "path"
    END = "end"


MIN_ELEVATION = 0
MAX_ELEVATION = 9


@functools.total_ordering
class Trail:
    """Elevation tile: ``START`` (0), ``PATH`` (1..8) or ``END`` (9).

    The kind is derived from the elevation, so the two can never disagree.
    Equality, hashing and ordering look at elevation only.
    """

    __slots__ = ("kind", "elevation")

    def __init__(self, elevation: int) -> None:
        if not MIN_ELEVATION <= elevation <= MAX_ELEVATION:
            raise ValueError(f"elevation must be within 0..9, got {elevation}")
        if elevation == MIN_ELEVATION:
            self.kind = TrailKind.START
        elif elevation == MAX_ELEVATION:
            self.kind = TrailKind.END
        else:
            self.kind = TrailKind.PATH
        self.elevation = elevation

    @classmethod
    def start(cls) -> "Trail":
        return cls(MIN_ELEVATION)

    @classmethod
    def end(cls) -> "Trail":
        return cls(MAX_ELEVATION)

    @classmethod
    def path(cls, elevation: int) -> "Trail":
        if not MIN_ELEVATION < elevation < MAX_ELEVATION:
            raise ValueError(f"path elevation must be within 1..8, got {elevation}")
        return cls(elevation)

    @classmethod
    def from_char(cls, char: str) -> "Trail":
        """Parse a single digit ``0``-``9``."""

        if len(char) != 1 or char not in "0123456789":
            raise ParseTileError(char, expected="a digit 0-9")
        return cls(int(char))

    @property
    def is_start(self) -> bool:
        return self.kind is TrailKind.START

    @property
    def is_end(self) -> bool:
        return self.kind is TrailKind.END

    def gradient(self, other: "Trail") -> int:
        """Signed elevation change when stepping from ``self`` onto ``other``."""

        return other.elevation - self.elevation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trail):
            return NotImplemented
        return self.elevation == other.elevation

    def __lt__(self, other: "Trail") -> bool:
        if not isinstance(other, Trail):
            return NotImplemented
        return self.elevation < other.elevation

    def __hash__(self) -> int:
        return hash(self.elevation)

    def __str__(self) -> str:
        return str(self.elevation)

    def __repr__(self) -> str:
        if self.kind is TrailKind.PATH:
            return f"Trail.path({self.elevation})"
        return f"Trail.{self.kind.value}()"


@dataclass(frozen=True)
class Letter:
    """Plain single-character tile."""

    char: str

    @classmethod
    def from_char(cls, char: str) -> "Letter":
        if len(char) != 1:
            raise ParseTileError(char, expected="exactly one character")
        return cls(char)

    def __str__(self) -> str:
        return self.char


__all__ = ["Trail", "TrailKind", "Letter", "MIN_ELEVATION", "MAX_ELEVATION"]
