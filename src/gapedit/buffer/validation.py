"""Clamping helpers shared across buffer services."""

from __future__ import annotations

from .state import Cursor
from .text_buffer import TextBuffer


def clamp_line(buffer: TextBuffer, line: int) -> int:
    return max(0, min(line, buffer.line_count - 1))


def clamp_column(buffer: TextBuffer, line: int, column: int) -> int:
    return max(0, min(column, buffer.line_length(line)))


def clamp_cursor(buffer: TextBuffer, line: int, column: int) -> Cursor:
    """Return a cursor at the nearest valid position to ``(line, column)``."""

    line = clamp_line(buffer, line)
    column = clamp_column(buffer, line, column)
    return Cursor(line=line, column=column, desired_column=column)


__all__ = ["clamp_cursor", "clamp_line", "clamp_column"]
