"""Editor core, viewport model, and key event types."""

from .core import EditorCore, EditTransaction
from .events import DispatchResult, KeyInput
from .viewport import (
    TERMINAL_METRICS,
    Frame,
    GlyphMetrics,
    Viewport,
    caret_origin,
    render_frame,
    status_line,
)

__all__ = [
    "EditorCore",
    "EditTransaction",
    "DispatchResult",
    "KeyInput",
    "Frame",
    "GlyphMetrics",
    "TERMINAL_METRICS",
    "Viewport",
    "caret_origin",
    "render_frame",
    "status_line",
]
