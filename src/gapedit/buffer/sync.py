"""Snapshot types handed to host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .state import Position


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly copy of the document and caret."""

    text: str
    cursor: Position
    selection: Optional[tuple[Position, Position]]
    version: int = 0
    attributes: dict[str, str] = field(default_factory=dict)


__all__ = ["BufferMirror"]
