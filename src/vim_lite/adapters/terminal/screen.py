"""Full-screen renderer and terminal acquisition built on blessed."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import blessed

from vim_lite.buffer import BufferView
from vim_lite.modes import Mode
from vim_lite.runtime import telemetry
from vim_lite.session import format_status


class TerminalSurface:
    """Redraws the whole buffer plus a status line on every render."""

    def __init__(self, term: blessed.Terminal) -> None:
        self.term = term

    def compose(self, view: BufferView, mode: Mode) -> str:
        term = self.term
        column, row = view.cursor
        # Raw mode disables output post-processing, so lines end in CR-LF.
        return "".join(
            [
                term.home + term.clear,
                "\r\n".join(view.lines),
                "\r\n" + format_status(mode, view.cursor),
                term.move(row, column) + term.normal_cursor,
            ]
        )

    def render(self, view: BufferView, mode: Mode) -> None:
        print(self.compose(view, mode), end="", file=self.term.stream, flush=True)


class TerminalHost:
    """Owns the blessed terminal for the lifetime of an editing session."""

    def __init__(self, term: Optional[blessed.Terminal] = None) -> None:
        self.term = term or blessed.Terminal()
        self.active = False

    @contextmanager
    def session(self) -> Iterator[blessed.Terminal]:
        """Hold the alternate screen and raw input mode.

        Both are released, and the cursor made visible again, on every exit
        path including exceptions.
        """

        with telemetry.span("terminal::session", component="terminal"):
            try:
                with self.term.fullscreen(), self.term.raw():
                    self.active = True
                    yield self.term
            finally:
                self.active = False
                print(
                    self.term.normal_cursor, end="", file=self.term.stream, flush=True
                )


__all__ = ["TerminalHost", "TerminalSurface"]
