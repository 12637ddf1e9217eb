"""Line offset table derived from linear buffer content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence

NEWLINE = "\n"


@dataclass(frozen=True, slots=True)
class LineSpan:
    """Start offset and length of one line, newline excluded."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class LineIndex:
    """Ordered line spans covering a document.

    The index is a cache: it is rebuilt wholesale from the text every time the
    content changes and always holds at least one (possibly empty) line.
    """

    __slots__ = ("_spans",)

    def __init__(self) -> None:
        self._spans: List[LineSpan] = [LineSpan(0, 0)]

    @classmethod
    def from_text(cls, text: str) -> "LineIndex":
        index = cls()
        index.rebuild(text)
        return index

    def rebuild(self, text: str) -> None:
        spans: List[LineSpan] = []
        line_start = 0
        for pos, codepoint in enumerate(text):
            if codepoint == NEWLINE:
                spans.append(LineSpan(line_start, pos - line_start))
                line_start = pos + 1
        spans.append(LineSpan(line_start, len(text) - line_start))
        self._spans = spans

    @property
    def spans(self) -> Sequence[LineSpan]:
        return tuple(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[LineSpan]:
        return iter(self._spans)

    def __getitem__(self, line: int) -> LineSpan:
        return self._spans[line]

    def __contains__(self, line: object) -> bool:
        return isinstance(line, int) and 0 <= line < len(self._spans)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineIndex):
            return NotImplemented
        return self._spans == other._spans

    def __repr__(self) -> str:
        return f"LineIndex({self._spans!r})"


__all__ = ["LineIndex", "LineSpan", "NEWLINE"]
