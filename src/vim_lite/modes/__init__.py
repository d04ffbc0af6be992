"""Mode enumeration, key events, and dispatch types.

``ModeManager`` lives in ``vim_lite.modes.mode_manager``.
"""

from .base_mode import (
    BACKSPACE_TOKEN,
    CHAR_TOKEN,
    ENTER_TOKEN,
    ESCAPE_TOKEN,
    OTHER_TOKEN,
    KeyInput,
    KeyKind,
    Mode,
    ModeBus,
    ModeContext,
    ModeResult,
)

__all__ = [
    "BACKSPACE_TOKEN",
    "CHAR_TOKEN",
    "ENTER_TOKEN",
    "ESCAPE_TOKEN",
    "OTHER_TOKEN",
    "KeyInput",
    "KeyKind",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
]
