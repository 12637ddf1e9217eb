"""Text buffer façade combining gap storage and the line index."""

from __future__ import annotations

from typing import Optional

from .gap_buffer import DEFAULT_CAPACITY, GapBuffer
from .line_index import LineIndex, LineSpan
from .state import Cursor, Selection
from .sync import BufferMirror

EXTRA_CAPACITY = 256


class TextBuffer:
    """Document content addressed by offset or by (line, column).

    Mutators update the gap buffer and rebuild the line index before
    returning, so line queries never observe a stale index.
    """

    def __init__(
        self,
        initial_content: str = "",
        *,
        name: str = "default",
        extra_capacity: int = EXTRA_CAPACITY,
    ) -> None:
        self.name = name
        self._content = GapBuffer(
            max(len(initial_content) + extra_capacity, DEFAULT_CAPACITY)
        )
        for pos, codepoint in enumerate(initial_content):
            self._content.insert(pos, codepoint)
        self._lines = LineIndex()
        self._version = 0
        self.rebuild_line_index()

    @property
    def content(self) -> GapBuffer:
        return self._content

    @property
    def lines(self) -> LineIndex:
        return self._lines

    @property
    def version(self) -> int:
        return self._version

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def length(self) -> int:
        return self._content.logical_length

    @property
    def text(self) -> str:
        return self._content.to_linear()

    def rebuild_line_index(self) -> None:
        self._lines.rebuild(self._content.to_linear())

    def line_span(self, line: int) -> Optional[LineSpan]:
        if line not in self._lines:
            return None
        return self._lines[line]

    def line_length(self, line: int) -> int:
        span = self.line_span(line)
        return span.length if span else 0

    def get_line(self, line: int) -> str:
        span = self.line_span(line)
        if span is None:
            return ""
        text = self._content.to_linear()
        if span.end > len(text):
            return ""
        return text[span.start : span.end]

    def resolve_offset(self, cursor: Cursor) -> int:
        span = self.line_span(cursor.line)
        if span is None:
            return 0
        return span.start + min(cursor.column, span.length)

    def insert(self, offset: int, codepoint: str) -> None:
        self._content.insert(offset, codepoint)
        self._after_mutation()

    def delete(self, offset: int) -> None:
        self._content.delete(offset)
        self._after_mutation()

    def mirror(
        self,
        cursor: Cursor,
        selection: Optional[Selection] = None,
        *,
        attributes: Optional[dict[str, str]] = None,
    ) -> BufferMirror:
        selected = None
        if selection is not None and selection.active:
            selected = (selection.anchor.position, selection.head.position)
        return BufferMirror(
            text=self.text,
            cursor=cursor.position,
            selection=selected,
            version=self._version,
            attributes=dict(attributes or {}),
        )

    def _after_mutation(self) -> None:
        self.rebuild_line_index()
        self._version += 1


__all__ = ["TextBuffer", "EXTRA_CAPACITY"]
