"""Textual adapter that feeds key/click events to the editor and renders frames."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from gapedit.editor import (
    DispatchResult,
    EditorCore,
    Frame,
    KeyInput,
    Viewport,
    render_frame,
)
from gapedit.editor.dispatch import KeyDispatcher


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges a ``KeyDispatcher`` to a Textual-friendly surface."""

    def __init__(
        self,
        dispatcher: KeyDispatcher,
        hooks: TextualUIHooks,
        *,
        viewport: Optional[Viewport] = None,
        padding: float = 0.0,
    ) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self.viewport = viewport or Viewport()
        self.padding = padding
        self._refresh()

    @property
    def editor(self) -> EditorCore:
        return self.dispatcher.editor

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> DispatchResult:
        """Translate a single Textual key event and refresh the frame."""

        results = self.handle_keys(
            [KeyInput(key=key, text=text, modifiers=tuple(modifiers))]
        )
        return results[0]

    def handle_keys(self, keys: Iterable[KeyInput]) -> List[DispatchResult]:
        """Apply a batch of key events, then render once."""

        batch = list(keys)
        for key in batch:
            self._log_state("key ->", key=key.token, text=key.text)
        results = self.dispatcher.drain(batch)
        for result in results:
            self._log_state(
                "result <-",
                consumed=result.consumed,
                status=result.status,
                action=result.action,
            )
        self._refresh()
        return results

    def handle_click(self, x: float, y: float) -> None:
        """Move the caret to a click at widget-relative ``(x, y)``."""

        content_x, content_y = self.viewport.to_content(
            x, y, self.editor.metrics, padding=self.padding
        )
        self.editor.move_to_point(content_x, content_y)
        self._log_state("click ->", x=x, y=y)
        self._refresh()

    def resize(self, screen_height: float) -> None:
        self.viewport.resize(screen_height, self.editor.metrics)
        self._refresh()

    def _refresh(self) -> Frame:
        frame = render_frame(self.editor, self.viewport, padding=self.padding)
        self.hooks.update_frame(frame)
        self.hooks.update_status(frame.status)
        return frame

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        editor = self.editor
        return {
            "cursor": editor.cursor_position,
            "lines": editor.line_count,
            "modified": editor.modified,
            "buffer": editor.name,
            "buffer_version": editor.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
