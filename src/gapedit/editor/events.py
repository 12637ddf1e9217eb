"""Key events and dispatch results exchanged with input hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from gapedit.keys import stroke_token


@dataclass(slots=True)
class KeyInput:
    """Normalized key event produced by a host."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def token(self) -> str:
        return stroke_token(self.key, self.modifiers)


@dataclass(slots=True)
class DispatchResult:
    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    action: Optional[str] = None


__all__ = ["KeyInput", "DispatchResult"]
