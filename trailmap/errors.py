"""trailmap.errors
==================

Exceptions raised at the text parsing boundary. Both derive from
``ValueError`` so callers that only care about "bad input" can catch the
builtin.
"""

from __future__ import annotations

from typing import Optional


class ParseTileError(ValueError):
    """A single character does not map to a valid tile."""

    def __init__(self, char: str, expected: str = "") -> None:
        self.char = char
        message = f"invalid tile character {char!r}"
        if expected:
            message = f"{message} (expected {expected})"
        super().__init__(message)


class ParseGridError(ValueError):
    """Grid text is empty, ragged, or contains an unparseable character.

    ``line`` and ``column`` are 1-based positions of the offending input when
    the failure can be pinned to one, otherwise ``None``.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.reason = message
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"line {line}, column {column}: {message}"
        elif line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)

    def shifted(self, lines: int) -> "ParseGridError":
        """Copy of this error with ``line`` moved down by ``lines``."""

        line = None if self.line is None else self.line + lines
        return ParseGridError(self.reason, line=line, column=self.column)


__all__ = ["ParseTileError", "ParseGridError"]
