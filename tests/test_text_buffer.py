from __future__ import annotations

import pytest

from gapedit.buffer import Cursor, LineIndex, LineSpan, TextBuffer, clamp_cursor


def test_lines_with_trailing_newline() -> None:
    buffer = TextBuffer("ab\ncd\n")

    assert buffer.line_count == 3
    assert buffer.get_line(0) == "ab"
    assert buffer.get_line(1) == "cd"
    assert buffer.get_line(2) == ""


def test_empty_document_has_one_empty_line() -> None:
    buffer = TextBuffer("")

    assert buffer.line_count == 1
    assert buffer.get_line(0) == ""
    assert buffer.lines.spans == (LineSpan(0, 0),)


def test_get_line_out_of_range_returns_empty() -> None:
    buffer = TextBuffer("ab\ncd")

    assert buffer.get_line(-1) == ""
    assert buffer.get_line(2) == ""
    assert buffer.line_length(7) == 0


def test_line_index_spans_are_contiguous() -> None:
    index = LineIndex.from_text("a\n\nbcd")

    assert index.spans == (LineSpan(0, 1), LineSpan(2, 0), LineSpan(3, 3))
    for current, following in zip(index, list(index)[1:]):
        assert following.start == current.end + 1


@pytest.mark.parametrize(
    "text",
    ["", "\n", "one line", "a\nb", "trailing\n", "\n\nblank\n\n", "ünï\ncødé"],
)
def test_lines_reconstruct_content(text: str) -> None:
    buffer = TextBuffer(text)

    lines = [buffer.get_line(n) for n in range(buffer.line_count)]

    assert buffer.line_count >= 1
    assert "\n".join(lines) == text


def test_rebuild_is_idempotent() -> None:
    buffer = TextBuffer("x\nyy\n\nzzz")
    before = buffer.lines.spans

    buffer.rebuild_line_index()
    buffer.rebuild_line_index()

    assert buffer.lines.spans == before


def test_resolve_offset_clamps_column() -> None:
    buffer = TextBuffer("ab\ncd")

    assert buffer.resolve_offset(Cursor(line=1, column=1)) == 4
    assert buffer.resolve_offset(Cursor(line=1, column=99)) == 5
    assert buffer.resolve_offset(Cursor(line=0, column=2)) == 2


def test_resolve_offset_out_of_range_line_is_zero() -> None:
    buffer = TextBuffer("ab\ncd")

    assert buffer.resolve_offset(Cursor(line=7, column=1)) == 0
    assert buffer.resolve_offset(Cursor(line=-1, column=1)) == 0


def test_mutations_refresh_index_and_version() -> None:
    buffer = TextBuffer("abcd")

    buffer.insert(2, "\n")

    assert buffer.version == 1
    assert buffer.line_count == 2
    assert buffer.get_line(1) == "cd"

    buffer.delete(2)

    assert buffer.version == 2
    assert buffer.text == "abcd"
    assert buffer.line_count == 1


def test_initial_capacity_leaves_room() -> None:
    buffer = TextBuffer("abc")

    assert buffer.content.capacity == 3 + 256
    assert buffer.length == 3


def test_mirror_snapshot() -> None:
    buffer = TextBuffer("ab")

    mirror = buffer.mirror(Cursor(line=0, column=1))

    assert mirror.text == "ab"
    assert mirror.cursor == (0, 1)
    assert mirror.selection is None


def test_clamp_cursor_pulls_positions_inside_document() -> None:
    buffer = TextBuffer("abc\nx")

    assert clamp_cursor(buffer, 5, 5).position == (1, 1)
    assert clamp_cursor(buffer, -2, -2).position == (0, 0)
    clamped = clamp_cursor(buffer, 0, 9)
    assert clamped.column == 3
    assert clamped.desired_column == 3
