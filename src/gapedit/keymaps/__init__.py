"""Declarative key bindings mapping key strokes to editor actions."""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import (
    DEFAULT_ACTIONS,
    DEFAULT_BINDINGS,
    INSERT_TEXT_ACTION,
    load_default_keymaps,
)

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "INSERT_TEXT_ACTION",
    "load_default_keymaps",
]
