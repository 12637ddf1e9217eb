"""Routes discrete key events to editor operations."""

from __future__ import annotations

from typing import Iterable, List

from gapedit.keymaps import (
    INSERT_TEXT_ACTION,
    KeymapRegistry,
    KeymapResolver,
    load_default_keymaps,
)
from gapedit.keys import is_command_chord
from gapedit.runtime import telemetry

from .core import EditorCore
from .events import DispatchResult, KeyInput


class KeyDispatcher:
    """Owns the keymap and applies one editor operation per key event.

    Bound keys run their action. Unbound keys carrying a single printable
    character are typed unless ctrl, alt or meta is held. Anything else is
    reported as unconsumed and leaves the editor untouched.
    """

    def __init__(
        self,
        editor: EditorCore,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.editor = editor
        self.logger = telemetry.get_logger("gapedit.dispatch")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="gapedit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="gapedit.keymaps"
        )

    def handle_key(self, key: KeyInput) -> DispatchResult:
        with telemetry.span(
            name="dispatch::key",
            logger_name="gapedit.dispatch",
            component=True,
            metadata={"key": key.token},
        ) as handle:
            resolution = self.keymap_resolver.resolve(key.token)
            if resolution.status == "match" and resolution.match:
                action = resolution.match.action
            elif key.text and not is_command_chord(key.modifiers):
                action = self.keymap_registry.get_action(INSERT_TEXT_ACTION)
            else:
                handle.add_metadata("status", "unbound")
                return DispatchResult(consumed=False, status="unbound")

            handle.add_metadata("action", action.id)
            outcome = action(self.editor, key)

        if isinstance(outcome, DispatchResult):
            outcome.action = action.id
            return outcome
        return DispatchResult(consumed=True, action=action.id)

    def drain(self, keys: Iterable[KeyInput]) -> List[DispatchResult]:
        """Handle a frame's worth of key events in arrival order."""

        return [self.handle_key(key) for key in keys]


__all__ = ["KeyDispatcher"]
