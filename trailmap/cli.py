"""trailmap.cli
===============

Command-line entry point: read a topographic map, print both answers.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .constants import DEFAULT_INPUT, FAIL_LOG
from .errors import ParseGridError
from .logging_utils import log_parse_failure
from .solver import SolveConfig, solve_file


def format_score_map(rows) -> str:
    width = max((len(str(value)) for row in rows for value in row), default=1)
    return "\n".join(" ".join(str(value).rjust(width) for value in row) for row in rows)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments and run the solver. Returns the process exit status."""

    parser = argparse.ArgumentParser("trailmap", description="Score hiking trails on a topographic map")
    parser.add_argument("infile", nargs="?", default=DEFAULT_INPUT, help="Map file, one digit per cell")
    parser.add_argument("--show-grid", action="store_true", help="Echo the parsed map before the answers")
    parser.add_argument("--score-map", action="store_true", help="Print each trail head's score in place")
    parser.add_argument("--fail-log", default=FAIL_LOG, help="JSONL file recording inputs that failed to parse")
    args = parser.parse_args(argv)

    cfg = SolveConfig(
        input_path=args.infile,
        show_grid=args.show_grid,
        score_map=args.score_map,
        fail_log=args.fail_log,
    )

    try:
        answers = solve_file(cfg)
    except OSError as exc:
        print(f"Could not read {cfg.input_path}: {exc}", file=sys.stderr)
        return 1
    except ParseGridError as exc:
        print(f"Invalid map in {cfg.input_path}: {exc}", file=sys.stderr)
        log_parse_failure(cfg.input_path, exc, cfg.fail_log)
        return 1

    if cfg.show_grid:
        print(answers.grid.render(), end="")
        print()
    if answers.score_map is not None:
        print(format_score_map(answers.score_map.tolist()))
        print()
    print(f"part 1 solution: {answers.total_score}")
    print(f"part 2 solution: {answers.total_rating}")
    return 0


__all__ = ["main", "format_score_map"]
