"""Mode enumeration, key events, and the shared dispatch context."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

from vim_lite.buffer import Buffer

ESCAPE_TOKEN = "<Esc>"
ENTER_TOKEN = "<Enter>"
BACKSPACE_TOKEN = "<BS>"
OTHER_TOKEN = "<Other>"
CHAR_TOKEN = "<Char>"


class Mode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"

    @property
    def label(self) -> str:
        return self.value.upper()


class KeyKind(str, Enum):
    CHAR = "char"
    ESCAPE = "escape"
    ENTER = "enter"
    BACKSPACE = "backspace"
    OTHER = "other"


_KIND_TOKENS = {
    KeyKind.ESCAPE: ESCAPE_TOKEN,
    KeyKind.ENTER: ENTER_TOKEN,
    KeyKind.BACKSPACE: BACKSPACE_TOKEN,
    KeyKind.OTHER: OTHER_TOKEN,
}


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Classified key event passed to the mode manager.

    ``text`` carries the character for ``KeyKind.CHAR`` events and is
    ``None`` otherwise.
    """

    kind: KeyKind
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR and (self.text is None or len(self.text) != 1):
            raise ValueError("CHAR key events need exactly one character of text")

    @classmethod
    def char(cls, text: str) -> "KeyInput":
        return cls(KeyKind.CHAR, text)

    @classmethod
    def escape(cls) -> "KeyInput":
        return cls(KeyKind.ESCAPE)

    @classmethod
    def enter(cls) -> "KeyInput":
        return cls(KeyKind.ENTER)

    @classmethod
    def backspace(cls) -> "KeyInput":
        return cls(KeyKind.BACKSPACE)

    @classmethod
    def other(cls) -> "KeyInput":
        return cls(KeyKind.OTHER)

    @property
    def token(self) -> str:
        if self.kind is KeyKind.CHAR:
            return self.text or ""
        return _KIND_TOKENS[self.kind]

    @property
    def fallback_tokens(self) -> tuple[str, ...]:
        if self.kind is KeyKind.CHAR:
            return (CHAR_TOKEN,)
        return ()


@dataclass(slots=True)
class ModeResult:
    """Outcome of dispatching one key."""

    consumed: bool
    switch_to: Optional[Mode] = None
    status: str = "ok"
    quit: bool = False


class ModeBus:
    """Minimal event bus letting hosts observe mode changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every action can access."""

    buffer: Buffer
    bus: ModeBus = field(default_factory=ModeBus)
