from __future__ import annotations

import pytest

from gapedit.buffer import Cursor
from gapedit.editor import (
    TERMINAL_METRICS,
    EditorCore,
    GlyphMetrics,
    Viewport,
    caret_origin,
    render_frame,
    status_line,
)


def test_metrics_from_sample_glyph() -> None:
    metrics = GlyphMetrics.from_sample(10, 20)

    assert metrics.glyph_width == 10
    assert metrics.line_height == pytest.approx(26.0)
    assert metrics.baseline == pytest.approx(16.0)


def test_metrics_reject_non_positive_sizes() -> None:
    with pytest.raises(ValueError):
        GlyphMetrics(glyph_width=0, line_height=1)


def test_resize_counts_partially_visible_line() -> None:
    viewport = Viewport()

    viewport.resize(10, TERMINAL_METRICS)

    assert viewport.visible_lines == 11
    assert viewport.rows == 10


def test_follow_scrolls_both_directions() -> None:
    viewport = Viewport(visible_lines=4)

    viewport.follow(5)
    assert viewport.first_visible_line == 3

    viewport.follow(4)
    assert viewport.first_visible_line == 3

    viewport.follow(1)
    assert viewport.first_visible_line == 1


def test_visible_range_stops_at_document_end() -> None:
    viewport = Viewport(visible_lines=11)

    assert viewport.visible_range(2) == range(0, 2)


def test_status_line_text() -> None:
    assert status_line(Cursor(line=0, column=0), False) == "Line 1, Col 1"
    assert status_line(Cursor(line=4, column=2), True) == "Line 5, Col 3 [Modified]"


def test_caret_origin_applies_padding_and_scroll() -> None:
    viewport = Viewport(first_visible_line=1, scroll_x=4)
    metrics = GlyphMetrics(glyph_width=8, line_height=16)

    x, y = caret_origin(Cursor(line=2, column=3), metrics, viewport, padding=10)

    assert x == pytest.approx(30.0)
    assert y == pytest.approx(26.0)


def test_to_content_undoes_scroll_and_padding() -> None:
    viewport = Viewport(first_visible_line=3)

    assert viewport.to_content(5, 2, TERMINAL_METRICS, padding=1) == (4, 4)


def test_render_frame_follows_cursor() -> None:
    editor = EditorCore("\n".join(f"l{n}" for n in range(10)))
    editor.place_cursor(8, 1)
    viewport = Viewport(visible_lines=4)

    frame = render_frame(editor, viewport)

    assert frame.first_line == 6
    assert frame.lines == ("l6", "l7", "l8", "l9")
    assert frame.caret_row == 2
    assert frame.cursor == (8, 1)
    assert frame.status == "Line 9, Col 2"


def test_render_frame_reports_modified() -> None:
    editor = EditorCore("")
    editor.insert_char("a")

    frame = render_frame(editor, Viewport(visible_lines=3))

    assert frame.lines == ("a",)
    assert frame.status.endswith("[Modified]")


def test_vertical_sub_line_scroll_shifts_caret_and_clicks() -> None:
    viewport = Viewport(scroll_y=4, first_visible_line=1)
    metrics = GlyphMetrics(glyph_width=8, line_height=16)

    x, y = caret_origin(Cursor(line=2, column=0), metrics, viewport, padding=10)
    content = viewport.to_content(x, y, metrics, padding=10)

    assert (x, y) == pytest.approx((10.0, 22.0))
    assert content == pytest.approx((0.0, 32.0))
