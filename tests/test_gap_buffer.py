from __future__ import annotations

import random

from gapedit.buffer import GapBuffer


def make_buffer(text: str, *, capacity: int = 16) -> GapBuffer:
    buffer = GapBuffer(capacity)
    for pos, codepoint in enumerate(text):
        buffer.insert(pos, codepoint)
    return buffer


def assert_gap_bounds(buffer: GapBuffer) -> None:
    assert 0 <= buffer.gap_start <= buffer.gap_end <= buffer.capacity


def test_new_buffer_gap_spans_capacity() -> None:
    buffer = GapBuffer(8)

    assert buffer.gap_start == 0
    assert buffer.gap_end == 8
    assert buffer.logical_length == 0
    assert buffer.to_linear() == ""


def test_sequential_inserts_round_trip() -> None:
    text = "hello, wörld → ✓"
    buffer = make_buffer(text, capacity=4)

    assert buffer.to_linear() == text
    assert str(buffer) == text
    assert len(buffer) == len(text)
    assert_gap_bounds(buffer)


def test_insert_in_middle_moves_gap() -> None:
    buffer = make_buffer("hllo")

    buffer.insert(1, "e")

    assert buffer.to_linear() == "hello"
    assert buffer.gap_start == 2


def test_growth_doubles_capacity_and_keeps_order() -> None:
    buffer = make_buffer("abcd", capacity=4)
    assert buffer.gap_size == 0

    buffer.insert(2, "X")

    assert buffer.capacity == 8
    assert buffer.to_linear() == "abXcd"
    assert_gap_bounds(buffer)


def test_zero_capacity_buffer_still_grows() -> None:
    buffer = GapBuffer(0)

    buffer.insert(0, "a")
    buffer.insert(1, "b")

    assert buffer.to_linear() == "ab"
    assert buffer.capacity == 2


def test_move_gap_preserves_content() -> None:
    buffer = make_buffer("abcdef")

    buffer.move_gap_to(2)
    assert buffer.gap_start == 2
    assert buffer.to_linear() == "abcdef"

    buffer.move_gap_to(5)
    assert buffer.gap_start == 5
    assert buffer.to_linear() == "abcdef"


def test_move_gap_clamps_out_of_range_positions() -> None:
    buffer = make_buffer("abc")

    buffer.move_gap_to(99)
    assert buffer.gap_start == 3

    buffer.move_gap_to(-4)
    assert buffer.gap_start == 0
    assert buffer.to_linear() == "abc"


def test_delete_before_gap() -> None:
    buffer = make_buffer("abc")

    buffer.delete(0)

    assert buffer.to_linear() == "bc"


def test_delete_after_gap() -> None:
    buffer = make_buffer("abc")
    buffer.move_gap_to(0)

    buffer.delete(1)

    assert buffer.to_linear() == "ac"
    assert_gap_bounds(buffer)


def test_delete_at_edges_is_noop() -> None:
    buffer = make_buffer("abc")

    buffer.delete(3)
    buffer.delete(-1)
    buffer.move_gap_to(0)
    buffer.delete(-1)

    assert buffer.to_linear() == "abc"
    assert_gap_bounds(buffer)


def test_delete_on_empty_buffer_is_noop() -> None:
    buffer = GapBuffer(4)

    buffer.delete(0)

    assert buffer.to_linear() == ""
    assert buffer.gap_size == 4


def test_codepoint_at_reads_both_sides_of_gap() -> None:
    buffer = make_buffer("abcd")
    buffer.move_gap_to(2)

    assert [buffer.codepoint_at(i) for i in range(4)] == ["a", "b", "c", "d"]
    assert buffer.codepoint_at(4) is None
    assert buffer.codepoint_at(-1) is None


def test_random_edits_match_list_model() -> None:
    rng = random.Random(1234)
    buffer = GapBuffer(2)
    model: list[str] = []

    for _ in range(500):
        if model and rng.random() < 0.4:
            pos = rng.randrange(-2, len(model) + 3)
            buffer.delete(pos)
            if 0 <= pos < len(model):
                del model[pos]
        else:
            pos = rng.randrange(0, len(model) + 1)
            codepoint = rng.choice("ab\nç✓ ")
            buffer.insert(pos, codepoint)
            model.insert(pos, codepoint)

        assert_gap_bounds(buffer)
        assert buffer.logical_length == len(model)

    assert buffer.to_linear() == "".join(model)
