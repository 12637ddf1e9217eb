"""Editor settings read from ``GAPEDIT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from gapedit.buffer import EXTRA_CAPACITY
from gapedit.editor import EditorCore, GlyphMetrics, TERMINAL_METRICS

ENV_PREFIX = "GAPEDIT_"

WELCOME_TEXT = "# Welcome to gapedit\n# Start typing...\n"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}")


def _env_int(environ: Mapping[str, str], name: str, fallback: int) -> int:
    value = _env(environ, name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(
    environ: Mapping[str, str], name: str, fallback: float, *, allow_zero: bool = False
) -> float:
    value = _env(environ, name)
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    if parsed > 0 or (allow_zero and parsed == 0):
        return parsed
    return fallback


@dataclass
class EditorConfig:
    initial_text: str = WELCOME_TEXT
    extra_capacity: int = EXTRA_CAPACITY
    metrics: GlyphMetrics = field(default_factory=lambda: TERMINAL_METRICS)
    padding: float = 0.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        """Build a config, ignoring unset or unparsable variables."""

        env = os.environ if environ is None else environ
        defaults = cls()
        text = _env(env, "INITIAL_TEXT")
        return cls(
            initial_text=defaults.initial_text if text is None else text,
            extra_capacity=max(0, _env_int(env, "EXTRA_CAPACITY", EXTRA_CAPACITY)),
            metrics=GlyphMetrics(
                glyph_width=_env_float(env, "GLYPH_WIDTH", defaults.metrics.glyph_width),
                line_height=_env_float(env, "LINE_HEIGHT", defaults.metrics.line_height),
                baseline=_env_float(env, "BASELINE", defaults.metrics.baseline),
            ),
            padding=_env_float(env, "PADDING", defaults.padding, allow_zero=True),
        )

    def create_editor(self, *, name: str = "default") -> EditorCore:
        return EditorCore(
            self.initial_text,
            name=name,
            metrics=self.metrics,
            extra_capacity=self.extra_capacity,
        )


__all__ = ["EditorConfig", "WELCOME_TEXT", "ENV_PREFIX"]
