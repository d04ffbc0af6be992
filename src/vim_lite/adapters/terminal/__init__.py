"""Blessed-backed terminal host: key decoding, rendering, session scope."""

from .app import run_terminal_session
from .keys import BlessedKeySource, decode_keystroke
from .screen import TerminalHost, TerminalSurface

__all__ = [
    "BlessedKeySource",
    "TerminalHost",
    "TerminalSurface",
    "decode_keystroke",
    "run_terminal_session",
]
