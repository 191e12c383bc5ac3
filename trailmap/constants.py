"""trailmap.constants
=====================

Default file locations used by the command-line tool. Keeping them here
avoids import cycles and makes the configurable paths easy to discover.
"""

from __future__ import annotations

DEFAULT_INPUT = "input"
FAIL_LOG = "parse_failures.jsonl"

__all__ = ["DEFAULT_INPUT", "FAIL_LOG"]
