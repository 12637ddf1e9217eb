"""Cursor and selection state."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple

Position = Tuple[int, int]  # (line, column)


@dataclass(slots=True)
class Cursor:
    """Caret position plus the column vertical movement tries to return to."""

    line: int = 0
    column: int = 0
    desired_column: int = 0

    @property
    def position(self) -> Position:
        return (self.line, self.column)

    def set_column(self, column: int) -> None:
        """Horizontal placement: the desired column follows the real one."""

        self.column = column
        self.desired_column = column

    def snapshot(self) -> "Cursor":
        return replace(self)


@dataclass(slots=True)
class Selection:
    """Anchor/head pair. Edits and motions do not touch it yet."""

    anchor: Cursor = field(default_factory=Cursor)
    head: Cursor = field(default_factory=Cursor)
    active: bool = False

    def set(self, anchor: Cursor, head: Cursor) -> None:
        self.anchor = anchor.snapshot()
        self.head = head.snapshot()
        self.active = True

    def clear(self) -> None:
        self.active = False

    def snapshot(self) -> "Selection":
        return Selection(
            anchor=self.anchor.snapshot(), head=self.head.snapshot(), active=self.active
        )


__all__ = ["Cursor", "Position", "Selection"]
