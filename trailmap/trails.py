"""trailmap.trails
==================

Hiking-trail analysis over a ``Grid[Trail]`` topographic map.

A trail starts at a trail head (elevation 0), ends at a summit (elevation 9),
and every step moves to an orthogonal neighbour exactly one unit higher. That
single movement rule, :func:`possible_steps`, drives everything else here.

Two measures are derived per trail head:

* **score** - how many distinct summits can be reached;
* **rating** - how many distinct trails lead from the head to any summit.

Both come from :func:`walk`, a depth-first expansion that deliberately does
not memoise: a cell is re-expanded every time a new path arrives at it. That
multiplicity is exactly what the rating counts, at the cost of exponential
worst-case work. The expansion uses an explicit stack so large maps cannot
exhaust the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Dict, Iterator, List

import numpy as np

from .grid import Grid
from .grid_utils import to_array
from .tiles import Trail
from .types import Coord


def trail_heads(grid: Grid[Trail]) -> List[Coord]:
    """Coordinates of every trail head, in row-major order."""

    return grid.find(lambda tile: tile.is_start)


def possible_steps(grid: Grid[Trail], coord: Coord) -> List[Coord]:
    """Neighbours of ``coord`` exactly one unit higher, in direction order.

    Summits and coordinates outside the grid have no steps.
    """

    tile = grid.tile_at(coord)
    if tile is None or tile.is_end:
        return []
    steps = []
    for neighbor in grid.neighbor_coords(coord):
        neighbor_tile = grid.tile_at(neighbor)
        if neighbor_tile is not None and tile.gradient(neighbor_tile) == 1:
            steps.append(neighbor)
    return steps


def walk(grid: Grid[Trail], start: Coord) -> Iterator[Coord]:
    """Yield every coordinate visited on all trails from ``start``.

    Visit order matches a recursive depth-first search that explores steps in
    North, East, South, West order. Cells reachable along several paths are
    yielded once per path.
    """

    stack = [start]
    while stack:
        coord = stack.pop()
        yield coord
        stack.extend(reversed(possible_steps(grid, coord)))


def reachable_graph(grid: Grid[Trail], start: Coord) -> Dict[Coord, List[Coord]]:
    """Step relation for every coordinate reachable from ``start``.

    Keys are inserted in first-visit order; each maps to that coordinate's
    :func:`possible_steps`. Summits map to an empty list.
    """

    graph: Dict[Coord, List[Coord]] = {}
    for coord in walk(grid, start):
        graph[coord] = possible_steps(grid, coord)
    return graph


def _is_summit(grid: Grid[Trail], coord: Coord) -> bool:
    tile = grid.tile_at(coord)
    return tile is not None and tile.is_end


def score(grid: Grid[Trail], start: Coord) -> int:
    """Number of distinct summits reachable from ``start``."""

    graph = reachable_graph(grid, start)
    return sum(1 for coord, steps in graph.items() if not steps and _is_summit(grid, coord))


def rating(grid: Grid[Trail], start: Coord) -> int:
    """Number of distinct trails from ``start`` to any summit."""

    return sum(1 for coord in walk(grid, start) if _is_summit(grid, coord))


def total_score(grid: Grid[Trail]) -> int:
    return sum(score(grid, head) for head in trail_heads(grid))


def total_rating(grid: Grid[Trail]) -> int:
    return sum(rating(grid, head) for head in trail_heads(grid))


def elevation_array(grid: Grid[Trail]) -> np.ndarray:
    return to_array(grid, lambda tile: tile.elevation)


def score_map(grid: Grid[Trail]) -> np.ndarray:
    """``(height, width)`` array of trail-head scores, zero on every other cell."""

    out = np.zeros((grid.height, grid.width), dtype=int)
    for head in trail_heads(grid):
        out[head.y, head.x] = score(grid, head)
    return out


__all__ = [
    "trail_heads",
    "possible_steps",
    "walk",
    "reachable_graph",
    "score",
    "rating",
    "total_score",
    "total_rating",
    "elevation_array",
    "score_map",
]
