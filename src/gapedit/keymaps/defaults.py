"""Built-in key bindings for the editor core."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from gapedit.actions import core as core_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

INSERT_TEXT_ACTION = "edit.insert_text"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id=INSERT_TEXT_ACTION,
        handler=core_actions.insert_text,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.insert_newline",
        handler=core_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="move.left",
        handler=core_actions.move_left,
        description="Move cursor left",
    ),
    ActionRef(
        id="move.right",
        handler=core_actions.move_right,
        description="Move cursor right",
    ),
    ActionRef(
        id="move.up",
        handler=core_actions.move_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="move.down",
        handler=core_actions.move_down,
        description="Move cursor down",
    ),
)


def _bind(binding_id: str, key: str, action_id: str, description: str) -> Binding:
    return Binding(
        id=binding_id,
        stroke=KeyStroke(key),
        action_id=action_id,
        description=description,
        source="defaults",
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("edit.backspace", "BACKSPACE", "edit.delete_backward", "Delete backward"),
    _bind("edit.enter", "ENTER", "edit.insert_newline", "Insert newline"),
    _bind("edit.return", "RETURN", "edit.insert_newline", "Insert newline"),
    _bind("move.left", "LEFT", "move.left", "Move cursor left"),
    _bind("move.right", "RIGHT", "move.right", "Move cursor right"),
    _bind("move.up", "UP", "move.up", "Move cursor up"),
    _bind("move.down", "DOWN", "move.down", "Move cursor down"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace_existing: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings.

    Actions are always registered so filtered-out bindings can be re-added
    later; ``include_bindings``/``exclude_bindings`` select bindings by id.
    """

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace_existing)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace_existing)

    for binding in extra_bindings or ():
        registry.register_binding(
            replace(binding, source=binding.source or "extra"),
            replace=replace_existing,
        )


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "INSERT_TEXT_ACTION",
]
