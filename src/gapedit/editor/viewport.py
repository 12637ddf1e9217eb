"""Viewport bookkeeping and the read-only frame handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from gapedit.buffer import Cursor

if TYPE_CHECKING:  # pragma: no cover
    from .core import EditorCore


@dataclass(frozen=True, slots=True)
class GlyphMetrics:
    """Fixed monospace cell size supplied by the rendering host."""

    glyph_width: float = 1.0
    line_height: float = 1.0
    baseline: float = 1.0

    def __post_init__(self) -> None:
        if self.glyph_width <= 0 or self.line_height <= 0:
            raise ValueError("glyph_width and line_height must be positive")

    @classmethod
    def from_sample(cls, width: float, height: float) -> "GlyphMetrics":
        """Derive metrics from the measured size of a sample glyph."""

        return cls(glyph_width=width, line_height=height * 1.3, baseline=height * 0.8)


TERMINAL_METRICS = GlyphMetrics()


@dataclass(slots=True)
class Viewport:
    scroll_x: float = 0.0
    # sub-line vertical offset on top of first_visible_line
    scroll_y: float = 0.0
    visible_lines: int = 0
    first_visible_line: int = 0

    @property
    def rows(self) -> int:
        """Lines that fit completely; the extra visible line may be clipped."""

        return max(1, self.visible_lines - 1)

    def resize(self, screen_height: float, metrics: GlyphMetrics) -> None:
        self.visible_lines = max(0, int(screen_height / metrics.line_height)) + 1

    def visible_range(self, line_count: int) -> range:
        first = max(0, min(self.first_visible_line, line_count - 1))
        return range(first, min(first + self.visible_lines, line_count))

    def follow(self, line: int) -> None:
        """Scroll just enough for ``line`` to be fully visible."""

        if line < self.first_visible_line:
            self.first_visible_line = line
        elif line >= self.first_visible_line + self.rows:
            self.first_visible_line = line - self.rows + 1

    def to_content(
        self, x: float, y: float, metrics: GlyphMetrics, *, padding: float = 0.0
    ) -> Tuple[float, float]:
        """Translate screen coordinates into content-relative ones."""

        top = self.first_visible_line * metrics.line_height + self.scroll_y
        return (x - padding + self.scroll_x, y - padding + top)


def caret_origin(
    cursor: Cursor,
    metrics: GlyphMetrics,
    viewport: Viewport,
    *,
    padding: float = 0.0,
) -> Tuple[float, float]:
    x = padding + cursor.column * metrics.glyph_width - viewport.scroll_x
    row = cursor.line - viewport.first_visible_line
    y = padding + row * metrics.line_height - viewport.scroll_y
    return (x, y)


def status_line(cursor: Cursor, modified: bool) -> str:
    status = f"Line {cursor.line + 1}, Col {cursor.column + 1}"
    if modified:
        status += " [Modified]"
    return status


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything a renderer needs for one pass."""

    lines: Tuple[str, ...]
    first_line: int
    cursor: Tuple[int, int]
    caret: Tuple[float, float]
    status: str

    @property
    def caret_row(self) -> int:
        """Index into ``lines`` holding the caret, or -1 when scrolled away."""

        row = self.cursor[0] - self.first_line
        return row if 0 <= row < len(self.lines) else -1


def render_frame(
    editor: "EditorCore", viewport: Viewport, *, padding: float = 0.0
) -> Frame:
    cursor = editor.cursor
    viewport.follow(cursor.line)
    visible = viewport.visible_range(editor.line_count)
    return Frame(
        lines=tuple(editor.get_line(line) for line in visible),
        first_line=visible.start,
        cursor=cursor.position,
        caret=caret_origin(cursor, editor.metrics, viewport, padding=padding),
        status=status_line(cursor, editor.modified),
    )


__all__ = [
    "GlyphMetrics",
    "TERMINAL_METRICS",
    "Viewport",
    "Frame",
    "caret_origin",
    "status_line",
    "render_frame",
]
