from __future__ import annotations

from typing import List

from gapedit.adapters.textual import TextualEditorAdapter, TextualUIHooks
from gapedit.editor import EditorCore, Frame, KeyInput
from gapedit.editor.dispatch import KeyDispatcher


def make_adapter(
    text: str = "",
    *,
    frames: List[Frame] | None = None,
    statuses: List[str] | None = None,
    logs: List[str] | None = None,
    padding: float = 0.0,
) -> TextualEditorAdapter:
    frame_sink = frames if frames is not None else []
    status_sink = statuses if statuses is not None else []
    log_sink = logs if logs is not None else []
    hooks = TextualUIHooks(
        update_frame=frame_sink.append,
        update_status=status_sink.append,
        log=log_sink.append,
    )
    adapter = TextualEditorAdapter(
        KeyDispatcher(EditorCore(text)), hooks, padding=padding
    )
    adapter.resize(10)
    return adapter


def test_adapter_renders_frame_after_typing() -> None:
    frames: List[Frame] = []
    statuses: List[str] = []
    adapter = make_adapter(frames=frames, statuses=statuses)

    adapter.handle_textual_key("h", text="h")
    adapter.handle_textual_key("i", text="i")

    assert frames[-1].lines == ("hi",)
    assert frames[-1].cursor == (0, 2)
    assert statuses[-1] == "Line 1, Col 3 [Modified]"


def test_adapter_batches_render_per_frame() -> None:
    frames: List[Frame] = []
    adapter = make_adapter(frames=frames)
    rendered_before = len(frames)

    results = adapter.handle_keys(
        [KeyInput(key="a", text="a"), KeyInput(key="ENTER"), KeyInput(key="b", text="b")]
    )

    assert len(results) == 3
    assert len(frames) == rendered_before + 1
    assert frames[-1].lines == ("a", "b")


def test_adapter_emits_log_lines() -> None:
    logs: List[str] = []
    adapter = make_adapter(logs=logs)

    adapter.handle_textual_key("LEFT")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


def test_adapter_click_moves_cursor() -> None:
    adapter = make_adapter("abc\ndef")

    adapter.handle_click(1, 1)

    assert adapter.editor.cursor_position == (1, 1)


def test_adapter_click_accounts_for_padding_and_scroll() -> None:
    adapter = make_adapter("\n".join(str(n) for n in range(30)), padding=1)
    adapter.viewport.first_visible_line = 20

    adapter.handle_click(2, 3)

    assert adapter.editor.cursor_position == (22, 1)


def test_adapter_scrolls_to_cursor() -> None:
    frames: List[Frame] = []
    adapter = make_adapter("\n".join(str(n) for n in range(30)), frames=frames)

    adapter.handle_keys([KeyInput(key="DOWN")] * 15)

    assert frames[-1].first_line == 15 - adapter.viewport.rows + 1
    assert frames[-1].caret_row == adapter.viewport.rows - 1
