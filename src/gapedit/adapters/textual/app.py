"""Executable Textual app that hosts the editor core."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use gapedit.adapters.textual.app"
    ) from exc

from gapedit.config import EditorConfig
from gapedit.editor import Frame, KeyInput
from gapedit.editor.dispatch import KeyDispatcher
from gapedit.keys import is_command_chord, normalize_modifiers
from gapedit.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks

CARET_STYLE = "reverse"


def frame_to_text(frame: Frame) -> Text:
    """Render frame lines, drawing the caret as a reversed cell."""

    text = Text(no_wrap=True, overflow="crop")
    caret_row = frame.caret_row
    for row, line in enumerate(frame.lines):
        if row:
            text.append("\n")
        if row == caret_row:
            column = frame.cursor[1]
            padded = line + " " if column >= len(line) else line
            start = len(text)
            text.append(padded)
            text.stylize(CARET_STYLE, start + column, start + column + 1)
        else:
            text.append(line)
    return text


class BufferView(Static):
    """Static widget showing the visible document window."""

    def on_click(self, event: events.Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        app = self.app
        if isinstance(app, GapEditApp):
            app.handle_buffer_click(offset.x, offset.y)

    def on_resize(self, event: events.Resize) -> None:
        app = self.app
        if isinstance(app, GapEditApp):
            app.handle_buffer_resize(self.content_size.height)


class GapEditApp(App[None]):
    """Single-document Textual editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: hidden;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self.config = config or EditorConfig.from_env()
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: BufferView | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._buffer_widget = BufferView("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        editor = self.config.create_editor(name="scratch")
        hooks = TextualUIHooks(
            update_frame=self._update_frame,
            update_status=self._update_status,
        )
        self.adapter = TextualEditorAdapter(
            KeyDispatcher(editor), hooks, padding=self.config.padding
        )
        if self._buffer_widget:
            self.adapter.resize(self._buffer_widget.content_size.height)

    async def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        self.adapter.handle_keys([normalized])
        event.stop()

    def handle_buffer_click(self, x: int, y: int) -> None:
        if self.adapter:
            self.adapter.handle_click(x, y)

    def handle_buffer_resize(self, height: int) -> None:
        if self.adapter:
            self.adapter.resize(height)

    def _update_frame(self, frame: Frame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(frame_to_text(frame))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[KeyInput]:
        if event.key in {"ctrl+c", "ctrl+q"}:
            return None
        *raw_modifiers, name = event.key.split("+")
        modifiers = normalize_modifiers(raw_modifiers)
        if event.is_printable and not is_command_chord(modifiers):
            key = name if len(name) == 1 else name.upper()
            return KeyInput(key=key, text=event.character)
        return KeyInput(key=name.upper(), modifiers=modifiers)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the gapedit Textual editor.")
    parser.add_argument(
        "--text",
        default=None,
        help="Initial document content (default: $GAPEDIT_INITIAL_TEXT or a banner)",
    )
    parser.add_argument(
        "--extra-capacity",
        type=int,
        default=None,
        help="Spare gap capacity allocated past the initial text",
    )
    parser.add_argument(
        "--log-preset",
        choices=("quiet", "development", "profiling"),
        default="quiet",
        help="Telemetry preset (default: quiet, keeps the terminal clean)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EditorConfig:
    config = EditorConfig.from_env()
    if args.text is not None:
        config.initial_text = args.text.replace("\\n", "\n")
    if args.extra_capacity is not None:
        config.extra_capacity = max(0, args.extra_capacity)
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = GapEditApp(config=build_config(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
