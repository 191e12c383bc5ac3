"""trailmap.solver
=================

Glue between raw puzzle text and the trail analysis. The command-line layer
builds a :class:`SolveConfig` and hands it to :func:`solve_file`; tests and
other callers can go straight to :func:`solve_text`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .constants import DEFAULT_INPUT, FAIL_LOG
from .errors import ParseGridError
from .grid import Grid
from .tiles import Trail
from .trails import score_map, total_rating, total_score


@dataclass
class SolveConfig:
    """Options for a single solver run."""

    input_path: str = DEFAULT_INPUT
    show_grid: bool = False
    score_map: bool = False
    fail_log: str = FAIL_LOG


@dataclass
class Answers:
    """Both puzzle answers plus the parsed grid they were computed from."""

    grid: Grid[Trail]
    total_score: int
    total_rating: int
    score_map: Optional[np.ndarray] = None


def parse_map(text: str) -> Grid[Trail]:
    """Parse a topographic map, ignoring surrounding whitespace.

    Error line numbers refer to ``text`` as given, leading blank lines
    included.
    """

    body = text.lstrip("\r\n")
    skipped = text[:len(text) - len(body)].count("\n")
    try:
        return Grid.parse(body.rstrip(), Trail.from_char)
    except ParseGridError as exc:
        if not skipped:
            raise
        raise exc.shifted(skipped) from exc.__cause__


def solve_text(text: str, with_score_map: bool = False) -> Answers:
    grid = parse_map(text)
    return Answers(
        grid=grid,
        total_score=total_score(grid),
        total_rating=total_rating(grid),
        score_map=score_map(grid) if with_score_map else None,
    )


def solve_file(cfg: SolveConfig) -> Answers:
    """Read ``cfg.input_path`` and solve it.

    Raises ``OSError`` if the file cannot be read and
    :class:`~trailmap.errors.ParseGridError` if it is not a valid map.
    """

    text = Path(cfg.input_path).read_text()
    return solve_text(text, with_score_map=cfg.score_map)


__all__ = ["SolveConfig", "Answers", "parse_map", "solve_text", "solve_file"]
