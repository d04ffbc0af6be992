"""Editor session: the blocking render/read/dispatch loop."""

from __future__ import annotations

from typing import Optional, Protocol

from vim_lite.buffer import Buffer, BufferView, Cursor
from vim_lite.modes import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from vim_lite.modes.mode_manager import ModeManager
from vim_lite.runtime import telemetry


class KeySource(Protocol):
    """Host-side input: blocks until the next key is available."""

    def read_key(self) -> KeyInput:
        ...


class RenderSurface(Protocol):
    """Host-side output: redraws the whole screen from a snapshot."""

    def render(self, view: BufferView, mode: Mode) -> None:
        ...


def format_status(mode: Mode, cursor: Cursor) -> str:
    """Status line text: mode name and cursor as (column, row)."""

    return f"-- {mode.label} -- Cursor: ({cursor.column}, {cursor.row})"


def create_default_manager(buffer: Optional[Buffer] = None) -> ModeManager:
    """Build a ModeManager over a fresh (or given) buffer with default keymaps."""

    context = ModeContext(buffer=buffer or Buffer(), bus=ModeBus())
    return ModeManager(context)


class EditorSession:
    """One editing session: buffer, cursor, mode, and the termination flag."""

    def __init__(self, manager: Optional[ModeManager] = None) -> None:
        self.manager = manager or create_default_manager()

    @property
    def buffer(self) -> Buffer:
        return self.manager.context.buffer

    @property
    def mode(self) -> Mode:
        return self.manager.active_mode

    @property
    def finished(self) -> bool:
        return self.manager.quit_requested

    def render(self, surface: RenderSurface) -> None:
        surface.render(self.buffer.snapshot(), self.mode)

    def process_key(self, key: KeyInput) -> ModeResult:
        return self.manager.handle_key(key)

    def run(self, source: KeySource, surface: RenderSurface) -> int:
        """Render, read one key, dispatch; repeat until quit.

        Returns the number of keys processed. Errors raised by the source or
        the surface propagate to the caller.
        """

        processed = 0
        telemetry.record_event("session.start", data={"buffer": self.buffer.name})
        with telemetry.span("session::run", component="session") as handle:
            while not self.finished:
                self.render(surface)
                self.process_key(source.read_key())
                processed += 1
            handle.add_metadata("keys", processed)
        telemetry.record_event("session.end", data={"keys": processed})
        return processed


__all__ = [
    "EditorSession",
    "KeySource",
    "RenderSurface",
    "create_default_manager",
    "format_status",
]
