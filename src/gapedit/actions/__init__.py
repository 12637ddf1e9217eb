"""Action handlers invoked by key bindings."""

from .core import (
    delete_backward,
    insert_newline,
    insert_text,
    move_down,
    move_left,
    move_right,
    move_up,
)

__all__ = [
    "insert_text",
    "insert_newline",
    "delete_backward",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
]
