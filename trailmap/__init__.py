"""Public package interface for trailmap."""

from .cli import main
from .errors import ParseGridError, ParseTileError
from .grid import Grid
from .solver import solve_text
from .tiles import Letter, Trail
from .types import DIRECTIONS, Coord, Direction

__all__ = [
    "main",
    "Grid",
    "Coord",
    "Direction",
    "DIRECTIONS",
    "Trail",
    "Letter",
    "ParseGridError",
    "ParseTileError",
    "solve_text",
]
