"""Run an editing session on the controlling terminal."""

from __future__ import annotations

from typing import Optional

import blessed

from vim_lite.session import EditorSession

from .keys import BlessedKeySource
from .screen import TerminalHost, TerminalSurface


def run_terminal_session(
    session: Optional[EditorSession] = None,
    *,
    term: Optional[blessed.Terminal] = None,
) -> EditorSession:
    """Block on the terminal until the user quits; returns the finished session."""

    session = session or EditorSession()
    host = TerminalHost(term)
    with host.session() as terminal:
        session.run(BlessedKeySource(terminal), TerminalSurface(terminal))
    return session


__all__ = ["run_terminal_session"]
