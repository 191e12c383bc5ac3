from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from trailmap.errors import ParseGridError, ParseTileError
from trailmap.grid import Grid
from trailmap.solver import parse_map, solve_text
from trailmap.tiles import Trail, TrailKind
from trailmap.trails import (
    elevation_array,
    possible_steps,
    rating,
    reachable_graph,
    score,
    score_map,
    total_rating,
    total_score,
    trail_heads,
    walk,
)
from trailmap.types import Coord

FIXTURE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def make_grid(text: str = FIXTURE) -> Grid[Trail]:
    return Grid.parse(text, Trail.from_char)


def test_trail_tile_parsing():
    assert Trail.from_char("0").kind is TrailKind.START
    assert Trail.from_char("9").kind is TrailKind.END
    assert Trail.from_char("4").kind is TrailKind.PATH
    assert str(Trail.from_char("4")) == "4"
    for bad in ("x", " ", "-", "12", ""):
        with pytest.raises(ParseTileError):
            Trail.from_char(bad)


def test_trail_tile_ordering_and_gradient():
    assert Trail.start() < Trail.path(1) < Trail.path(8) < Trail.end()
    assert Trail.from_char("3") == Trail.path(3)
    assert Trail.path(2).gradient(Trail.path(3)) == 1
    assert Trail.end().gradient(Trail.start()) == -9
    with pytest.raises(ValueError):
        Trail.path(9)


def test_trail_kind_follows_elevation():
    assert Trail(0).is_start
    assert Trail(9).is_end
    assert Trail(5).kind is TrailKind.PATH
    assert not Trail(5).is_start
    with pytest.raises(ValueError):
        Trail(10)
    with pytest.raises(ValueError):
        Trail(-1)


def test_lists_all_trail_heads():
    assert trail_heads(make_grid()) == [
        Coord(2, 0),
        Coord(4, 0),
        Coord(4, 2),
        Coord(6, 4),
        Coord(2, 5),
        Coord(5, 5),
        Coord(0, 6),
        Coord(6, 6),
        Coord(1, 7),
    ]


def test_follows_a_single_trail_step_by_step():
    grid = make_grid()
    expected = [
        (Coord(6, 4), [Coord(6, 5)]),
        (Coord(6, 5), [Coord(7, 5)]),
        (Coord(7, 5), [Coord(7, 4)]),
        (Coord(7, 4), [Coord(7, 3)]),
        (Coord(7, 3), [Coord(7, 2)]),
        (Coord(7, 2), [Coord(6, 2)]),
        (Coord(6, 2), [Coord(6, 1), Coord(6, 3)]),
        (Coord(6, 1), [Coord(5, 1)]),
        (Coord(5, 1), [Coord(5, 2)]),
        (Coord(5, 2), []),
        (Coord(6, 3), [Coord(5, 3)]),
        (Coord(5, 3), [Coord(5, 2), Coord(5, 4), Coord(4, 3)]),
    ]
    for coord, steps in expected:
        assert possible_steps(grid, coord) == steps, coord


def test_every_step_climbs_by_one():
    grid = make_grid()
    for coord in grid.coords():
        here = grid.tile_at(coord)
        for step in possible_steps(grid, coord):
            assert grid.tile_at(step).elevation == here.elevation + 1


def test_no_steps_from_summit_or_outside():
    grid = make_grid()
    assert possible_steps(grid, Coord(1, 0)) == []
    assert possible_steps(grid, Coord(8, 8)) == []


def test_walk_revisits_converging_paths():
    grid = make_grid("01\n12\n")
    assert list(walk(grid, Coord(0, 0))) == [
        Coord(0, 0),
        Coord(1, 0),
        Coord(1, 1),
        Coord(0, 1),
        Coord(1, 1),
    ]


def test_reachable_graph_maps_each_cell_to_its_steps():
    grid = make_grid("01\n12\n")
    graph = reachable_graph(grid, Coord(0, 0))
    assert graph == {
        Coord(0, 0): [Coord(1, 0), Coord(0, 1)],
        Coord(1, 0): [Coord(1, 1)],
        Coord(1, 1): [],
        Coord(0, 1): [Coord(1, 1)],
    }


def test_score_of_a_trail_head():
    assert score(make_grid(), Coord(6, 4)) == 3


def test_total_score_of_the_map():
    assert total_score(make_grid()) == 36


def test_ratings():
    grid = make_grid()
    assert rating(grid, Coord(2, 0)) == 20
    assert rating(grid, Coord(6, 4)) == 4
    assert total_rating(grid) == 81


def test_straight_trail():
    grid = make_grid("0123456789\n")
    assert score(grid, Coord(0, 0)) == 1
    assert rating(grid, Coord(0, 0)) == 1
    assert score(grid, Coord(4, 0)) == 1
    assert score(make_grid("0123\n"), Coord(0, 0)) == 0
    assert rating(make_grid("0123\n"), Coord(0, 0)) == 0


def test_score_map_places_scores_on_trail_heads():
    grid = make_grid()
    scores = score_map(grid)
    assert scores.shape == (8, 8)
    assert scores[4, 6] == 3
    assert scores[0, 2] == 5
    assert scores[0, 0] == 0
    assert int(scores.sum()) == total_score(grid)


def test_elevation_array_matches_text():
    heights = elevation_array(make_grid("012\n345\n"))
    assert heights.shape == (2, 3)
    assert heights.tolist() == [[0, 1, 2], [3, 4, 5]]


def test_solve_text_strips_surrounding_whitespace():
    answers = solve_text("\n" + FIXTURE + "\n\n", with_score_map=True)
    assert (answers.total_score, answers.total_rating) == (36, 81)
    assert answers.score_map is not None
    assert answers.grid.render() == FIXTURE


def test_parse_map_reports_lines_of_the_original_text():
    with pytest.raises(ParseGridError) as excinfo:
        parse_map("\r\n\n012\n0x2\n")
    assert (excinfo.value.line, excinfo.value.column) == (4, 2)
    assert isinstance(excinfo.value.__cause__, ParseTileError)
    with pytest.raises(ParseGridError) as excinfo:
        parse_map("\n012\n01\n")
    assert (excinfo.value.line, excinfo.value.column) == (3, None)
