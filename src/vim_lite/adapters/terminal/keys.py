"""Decode blessed keystrokes into classified key events."""

from __future__ import annotations

from typing import Optional

import blessed
from blessed.keyboard import Keystroke

from vim_lite.modes import KeyInput

_ESCAPE_CHARS = {"\x1b"}
_ENTER_CHARS = {"\r", "\n"}
_BACKSPACE_CHARS = {"\x7f", "\x08"}


def decode_keystroke(keystroke: Keystroke) -> KeyInput:
    """Classify one blessed keystroke.

    Arrows, function keys, Delete, Tab and control characters all become
    ``KeyKind.OTHER``; only single printable characters are ``CHAR``.
    """

    name = keystroke.name
    text = str(keystroke)
    if name == "KEY_ESCAPE" or text in _ESCAPE_CHARS:
        return KeyInput.escape()
    if name == "KEY_ENTER" or text in _ENTER_CHARS:
        return KeyInput.enter()
    if name == "KEY_BACKSPACE" or text in _BACKSPACE_CHARS:
        return KeyInput.backspace()
    if keystroke.is_sequence or len(text) != 1 or not text.isprintable():
        return KeyInput.other()
    return KeyInput.char(text)


class BlessedKeySource:
    """Blocking key source reading one keystroke per call."""

    def __init__(self, term: blessed.Terminal, *, timeout: Optional[float] = None):
        self.term = term
        self.timeout = timeout

    def read_key(self) -> KeyInput:
        keystroke = self.term.inkey(timeout=self.timeout)
        if not keystroke and self.timeout is None:
            # A blocking read only comes back empty when there is no keyboard.
            raise EOFError("terminal input is closed")
        return decode_keystroke(keystroke)


__all__ = ["BlessedKeySource", "decode_keystroke"]
