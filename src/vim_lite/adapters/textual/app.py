"""Textual app hosting an editing session as an alternative to the raw terminal."""

from __future__ import annotations

from typing import Optional

try:  # pragma: no cover - imported only when the Textual host is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use vim_lite.adapters.textual.app"
    ) from exc

from vim_lite.buffer import BufferView, split_at_column
from vim_lite.modes import Mode
from vim_lite.runtime import telemetry
from vim_lite.session import EditorSession

from .controller import TextualUIHooks, TextualVimAdapter


def render_buffer(view: BufferView) -> Text:
    """Lines of the buffer with the cursor cell shown in reverse video.

    The cursor column is a display column, so on wide text the highlighted
    glyph matches where the blessed host places the terminal cursor.
    """

    column, row = view.cursor
    text = Text()
    for index, line in enumerate(view.lines):
        if index:
            text.append("\n")
        if index != row:
            text.append(line)
            continue
        before, cell, after = split_at_column(line, column)
        text.append(before)
        text.append(cell or " ", style="reverse")
        text.append(after)
    return text


class VimLiteApp(App[None]):
    """Buffer view plus a one-line status bar."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    def __init__(self, session: Optional[EditorSession] = None) -> None:
        super().__init__()
        self.session = session or EditorSession()
        self.adapter: TextualVimAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("vim_lite.adapters.textual")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            handle_event=self._handle_event,
            log=self._logger.debug,
        )
        self.adapter = TextualVimAdapter(self.session, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def _update_buffer(self, view: BufferView, mode: Mode) -> None:
        del mode
        if self._buffer_widget:
            self._buffer_widget.update(render_buffer(view))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: object | None) -> None:
        del payload
        if name == "editor.quit":
            self.exit()


def run_textual_app(session: Optional[EditorSession] = None) -> EditorSession:
    app = VimLiteApp(session)
    app.run()
    return app.session


__all__ = ["VimLiteApp", "render_buffer", "run_textual_app"]
