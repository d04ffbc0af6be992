"""UI-agnostic bridge between Textual key events and an EditorSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from vim_lite.buffer import BufferView
from vim_lite.modes import KeyInput, Mode, ModeResult
from vim_lite.session import EditorSession, format_status


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferView, Mode], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def normalize_textual_key(key: str, character: Optional[str] = None) -> KeyInput:
    """Classify a Textual ``events.Key`` by its ``key`` and ``character``."""

    if key == "escape":
        return KeyInput.escape()
    if key in {"enter", "return", "ctrl+m"}:
        return KeyInput.enter()
    if key in {"backspace", "ctrl+h"}:
        return KeyInput.backspace()
    if character and len(character) == 1 and character.isprintable():
        return KeyInput.char(character)
    return KeyInput.other()


class TextualVimAdapter:
    """Feeds keys to the session and pushes fresh snapshots to the UI."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._subscribe_events()
        self._refresh()

    @property
    def finished(self) -> bool:
        return self.session.finished

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        key_input = normalize_textual_key(key, character)
        self._log_state("key ->", key=key, token=key_input.token)
        result = self.session.process_key(key_input)
        self._refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to.value if result.switch_to else None,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.session.manager.context.bus
        for event in ("mode.switch", "editor.quit"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh(self) -> None:
        view = self.session.buffer.snapshot()
        mode = self.session.mode
        self.hooks.update_buffer(view, mode)
        self.hooks.update_status(format_status(mode, view.cursor))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.session.buffer
        return {
            "mode": self.session.mode.value,
            "cursor": tuple(buffer.cursor),
            "lines": buffer.line_count,
            "buffer_version": buffer.document.version,
        }


__all__ = ["TextualVimAdapter", "TextualUIHooks", "normalize_textual_key"]
