"""Editor core: owns the text buffer, cursor, and selection."""

from __future__ import annotations

import math
from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from gapedit.buffer import (
    BufferMirror,
    Cursor,
    Position,
    Selection,
    TextBuffer,
    clamp_cursor,
)
from gapedit.buffer.line_index import NEWLINE
from gapedit.runtime import telemetry

from .viewport import TERMINAL_METRICS, GlyphMetrics


class EditorCore:
    """Single-document editor state with cursor-relative operations.

    Every operation leaves buffer, line index, and cursor consistent before
    returning. Boundary conditions clamp or do nothing; nothing here raises
    for positions the editor produced itself.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "default",
        metrics: GlyphMetrics = TERMINAL_METRICS,
        extra_capacity: Optional[int] = None,
    ) -> None:
        if extra_capacity is None:
            self._buffer = TextBuffer(text, name=name)
        else:
            self._buffer = TextBuffer(text, name=name, extra_capacity=extra_capacity)
        self._cursor = Cursor()
        self._selection = Selection()
        self._metrics = metrics
        self._modified = False
        self.logger = telemetry.get_logger("gapedit.editor")

    # queries

    @property
    def name(self) -> str:
        return self._buffer.name

    @property
    def line_count(self) -> int:
        return self._buffer.line_count

    def get_line(self, line: int) -> str:
        return self._buffer.get_line(line)

    def line_length(self, line: int) -> int:
        return self._buffer.line_length(line)

    @property
    def cursor_position(self) -> Position:
        return self._cursor.position

    @property
    def cursor(self) -> Cursor:
        return self._cursor.snapshot()

    @property
    def selection(self) -> Selection:
        return self._selection.snapshot()

    @property
    def modified(self) -> bool:
        return self._modified

    @property
    def text(self) -> str:
        return self._buffer.text

    @property
    def version(self) -> int:
        return self._buffer.version

    @property
    def metrics(self) -> GlyphMetrics:
        return self._metrics

    def mirror(self) -> BufferMirror:
        return self._buffer.mirror(
            self._cursor,
            self._selection,
            attributes={"modified": str(self._modified).lower()},
        )

    # edits

    def insert_char(self, codepoint: str) -> None:
        if len(codepoint) != 1:
            return
        if codepoint == NEWLINE:
            self.insert_newline()
            return
        with EditTransaction(self, "insert_char"):
            self._buffer.insert(self._offset(), codepoint)
            self._cursor.set_column(self._cursor.column + 1)

    def delete_char(self) -> None:
        cursor = self._cursor
        if cursor.line == 0 and cursor.column == 0:
            return
        with EditTransaction(self, "delete_char"):
            if cursor.column > 0:
                self._buffer.delete(self._offset() - 1)
                cursor.set_column(cursor.column - 1)
            else:
                # join with the previous line by removing its newline
                cursor.line -= 1
                cursor.column = self._buffer.line_length(cursor.line)
                self._buffer.delete(self._offset())
                cursor.set_column(cursor.column)

    def insert_newline(self) -> None:
        with EditTransaction(self, "insert_newline"):
            self._buffer.insert(self._offset(), NEWLINE)
            self._cursor.line += 1
            self._cursor.set_column(0)

    # navigation

    def move_left(self) -> None:
        cursor = self._cursor
        if cursor.column > 0:
            cursor.column -= 1
        elif cursor.line > 0:
            cursor.line -= 1
            cursor.column = self._buffer.line_length(cursor.line)
        cursor.set_column(cursor.column)

    def move_right(self) -> None:
        cursor = self._cursor
        if cursor.column < self._buffer.line_length(cursor.line):
            cursor.column += 1
        elif cursor.line < self._buffer.line_count - 1:
            cursor.line += 1
            cursor.column = 0
        cursor.set_column(cursor.column)

    def move_up(self) -> None:
        if self._cursor.line > 0:
            self._move_vertical(self._cursor.line - 1)

    def move_down(self) -> None:
        if self._cursor.line < self._buffer.line_count - 1:
            self._move_vertical(self._cursor.line + 1)

    def move_to_point(self, x: float, y: float) -> None:
        """Place the cursor under content-relative point ``(x, y)``.

        Rows are picked by floor division with the line height, columns by
        rounding to the nearest glyph boundary.
        """

        line = math.floor(y / self._metrics.line_height)
        column = math.floor(x / self._metrics.glyph_width + 0.5)
        self.place_cursor(line, column)

    def place_cursor(self, line: int, column: int) -> None:
        self._cursor = clamp_cursor(self._buffer, line, column)

    def _move_vertical(self, line: int) -> None:
        # desired_column is left alone so longer lines restore it
        self._cursor.line = line
        self._cursor.column = min(
            self._cursor.desired_column, self._buffer.line_length(line)
        )

    def _offset(self) -> int:
        return self._buffer.resolve_offset(self._cursor)


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Wraps one edit in a telemetry span and marks the document modified."""

    def __init__(self, editor: EditorCore, label: str) -> None:
        self.editor = editor
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "EditTransaction":
        self._span_cm = telemetry.span(
            name=f"editor::{self.label}",
            logger_name="gapedit.editor",
            component="editor",
            metadata={
                "buffer": self.editor.name,
                "cursor": self.editor.cursor_position,
            },
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.editor._modified = True
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditorCore", "EditTransaction"]
