"""Editing and motion actions bound to keys."""

from __future__ import annotations

from gapedit.editor.core import EditorCore
from gapedit.editor.events import DispatchResult, KeyInput


def insert_text(editor: EditorCore, key: KeyInput) -> DispatchResult:
    """Insert the key's text when it is a single printable codepoint."""

    text = key.text or ""
    if len(text) != 1 or not text.isprintable():
        return DispatchResult(consumed=False, status="ignored")
    editor.insert_char(text)
    return DispatchResult(consumed=True, message="insert_char")


def insert_newline(editor: EditorCore, key: KeyInput) -> DispatchResult:
    del key
    editor.insert_newline()
    return DispatchResult(consumed=True, message="insert_newline")


def delete_backward(editor: EditorCore, key: KeyInput) -> DispatchResult:
    del key
    before = editor.version
    editor.delete_char()
    if editor.version == before:
        return DispatchResult(consumed=True, status="noop", message="start_of_document")
    return DispatchResult(consumed=True, message="delete_char")


def move_left(editor: EditorCore, key: KeyInput) -> DispatchResult:
    del key
    editor.move_left()
    return DispatchResult(consumed=True)


def move_right(editor: EditorCore, key: KeyInput) -> DispatchResult:
    del key
    editor.move_right()
    return DispatchResult(consumed=True)


def move_up(editor: EditorCore, key: KeyInput) -> DispatchResult:
    del key
    editor.move_up()
    return DispatchResult(consumed=True)


def move_down(editor: EditorCore, key: KeyInput) -> DispatchResult:
    del key
    editor.move_down()
    return DispatchResult(consumed=True)


__all__ = [
    "insert_text",
    "insert_newline",
    "delete_backward",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]
