"""Gap buffer storage, line index, and cursor state."""

from .gap_buffer import DEFAULT_CAPACITY, GapBuffer
from .line_index import LineIndex, LineSpan
from .state import Cursor, Position, Selection
from .sync import BufferMirror
from .text_buffer import EXTRA_CAPACITY, TextBuffer
from .validation import clamp_column, clamp_cursor, clamp_line

__all__ = [
    "GapBuffer",
    "DEFAULT_CAPACITY",
    "LineIndex",
    "LineSpan",
    "Cursor",
    "Position",
    "Selection",
    "BufferMirror",
    "TextBuffer",
    "EXTRA_CAPACITY",
    "clamp_cursor",
    "clamp_line",
    "clamp_column",
]
