"""Key token normalization shared by hosts, keymaps, and the dispatcher."""

from __future__ import annotations

from typing import Iterable

# modifiers that turn a printable key into a command instead of text
COMMAND_MODIFIERS = frozenset({"ctrl", "alt", "meta"})


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def is_command_chord(modifiers: Iterable[str]) -> bool:
    return not COMMAND_MODIFIERS.isdisjoint(normalize_modifiers(modifiers))


def stroke_token(key: str, modifiers: Iterable[str] = ()) -> str:
    """Return the lookup token for a key, e.g. ``"ctrl+LEFT"``."""

    normalized = normalize_modifiers(modifiers)
    if normalized:
        return "+".join(normalized) + f"+{key}"
    return key


__all__ = [
    "COMMAND_MODIFIERS",
    "is_command_chord",
    "normalize_modifiers",
    "stroke_token",
]
