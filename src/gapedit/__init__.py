"""Gap-buffer text storage and cursor model for interactive editors."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "editor",
    "keymaps",
    "keys",
    "runtime",
]

__version__ = "0.1.0"
