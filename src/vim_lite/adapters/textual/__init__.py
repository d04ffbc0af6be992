"""Textual host. ``app`` needs Textual at import time; ``controller`` does not."""

from .controller import TextualUIHooks, TextualVimAdapter, normalize_textual_key

__all__ = ["TextualUIHooks", "TextualVimAdapter", "normalize_textual_key"]
