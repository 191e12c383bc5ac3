"""trailmap.logging_utils
=========================

Records inputs that failed to parse so they can be inspected later.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from .constants import FAIL_LOG
from .errors import ParseGridError


def log_parse_failure(source: str, error: Exception, path: Optional[str] = None) -> None:
    """Append a JSON line describing ``error`` to ``path`` (default :data:`FAIL_LOG`)."""

    entry = {
        "source": source,
        "error": str(error),
        "kind": type(error).__name__,
        "line": error.line if isinstance(error, ParseGridError) else None,
        "column": error.column if isinstance(error, ParseGridError) else None,
    }
    with Path(path or FAIL_LOG).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["log_parse_failure"]
