"""Minimal modal text editor built around a buffer/cursor state machine."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "session",
]

__version__ = "0.1.0"
