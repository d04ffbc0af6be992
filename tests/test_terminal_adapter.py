from __future__ import annotations

import io
from typing import Iterator, List

import blessed
import pytest
from blessed.keyboard import Keystroke

from vim_lite.adapters.terminal import (
    BlessedKeySource,
    TerminalHost,
    TerminalSurface,
    decode_keystroke,
    run_terminal_session,
)
from vim_lite.buffer import Buffer
from vim_lite.modes import KeyInput, KeyKind, Mode
from vim_lite.session import EditorSession, create_default_manager


@pytest.fixture
def term() -> blessed.Terminal:
    return blessed.Terminal(
        kind="xterm-256color", stream=io.StringIO(), force_styling=True
    )


def output(term: blessed.Terminal) -> str:
    return term.stream.getvalue()


def scripted_inkey(keystrokes: List[Keystroke]):
    remaining: Iterator[Keystroke] = iter(keystrokes)

    def inkey(timeout=None, esc_delay=0.35):
        del timeout, esc_delay
        return next(remaining)

    return inkey


def test_decode_named_keys(term: blessed.Terminal) -> None:
    assert decode_keystroke(
        Keystroke("\x1b", code=term.KEY_ESCAPE, name="KEY_ESCAPE")
    ) == KeyInput.escape()
    assert decode_keystroke(
        Keystroke("\r", code=term.KEY_ENTER, name="KEY_ENTER")
    ) == KeyInput.enter()
    assert decode_keystroke(
        Keystroke("\x7f", code=term.KEY_BACKSPACE, name="KEY_BACKSPACE")
    ) == KeyInput.backspace()


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ("\x1b", KeyKind.ESCAPE),
        ("\r", KeyKind.ENTER),
        ("\n", KeyKind.ENTER),
        ("\x08", KeyKind.BACKSPACE),
        ("\t", KeyKind.OTHER),
        ("\x03", KeyKind.OTHER),
        ("", KeyKind.OTHER),
    ],
)
def test_decode_raw_characters(raw: str, kind: KeyKind) -> None:
    assert decode_keystroke(Keystroke(raw)).kind is kind


def test_decode_printable_characters() -> None:
    assert decode_keystroke(Keystroke("q")) == KeyInput.char("q")
    assert decode_keystroke(Keystroke(" ")) == KeyInput.char(" ")
    assert decode_keystroke(Keystroke("é")) == KeyInput.char("é")
    assert decode_keystroke(Keystroke("\u0301")) == KeyInput.char("\u0301")


def test_decode_sequences_are_other(term: blessed.Terminal) -> None:
    up = Keystroke("\x1b[A", code=term.KEY_UP, name="KEY_UP")
    delete = Keystroke("\x1b[3~", code=term.KEY_DELETE, name="KEY_DELETE")

    assert decode_keystroke(up).kind is KeyKind.OTHER
    assert decode_keystroke(delete).kind is KeyKind.OTHER


def test_blocking_read_without_input_raises_eof(
    term: blessed.Terminal, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(term, "inkey", scripted_inkey([Keystroke("")]))

    with pytest.raises(EOFError):
        BlessedKeySource(term).read_key()


def test_surface_draws_lines_status_and_cursor(term: blessed.Terminal) -> None:
    buffer = Buffer.from_lines(["hi", "there"], cursor=(3, 1))
    surface = TerminalSurface(term)

    frame = surface.compose(buffer.snapshot(), Mode.INSERT)

    assert frame.startswith(term.home + term.clear)
    assert "hi\r\nthere\r\n-- INSERT -- Cursor: (3, 1)" in frame
    assert frame.endswith(term.move(1, 3) + term.normal_cursor)

    surface.render(buffer.snapshot(), Mode.INSERT)
    assert output(term) == frame


def test_host_releases_terminal_on_error(term: blessed.Terminal) -> None:
    host = TerminalHost(term)

    with pytest.raises(RuntimeError):
        with host.session():
            assert host.active is True
            raise RuntimeError("boom")

    written = output(term)
    assert host.active is False
    assert term.enter_fullscreen in written
    assert written.index(term.exit_fullscreen) > written.index(term.enter_fullscreen)
    assert written.endswith(term.normal_cursor)


def test_run_terminal_session_until_quit(
    term: blessed.Terminal, monkeypatch: pytest.MonkeyPatch
) -> None:
    keystrokes = [
        Keystroke("i"),
        Keystroke("h"),
        Keystroke("i"),
        Keystroke("\x1b", code=term.KEY_ESCAPE, name="KEY_ESCAPE"),
        Keystroke("q"),
    ]
    monkeypatch.setattr(term, "inkey", scripted_inkey(keystrokes))

    session = run_terminal_session(term=term)

    written = output(term)
    assert session.finished is True
    assert session.buffer.lines == ("hi",)
    assert "-- INSERT -- Cursor: (2, 0)" in written
    assert written.rindex(term.exit_fullscreen) > written.rindex("-- NORMAL --")


def test_run_terminal_session_releases_terminal_when_input_closes(
    term: blessed.Terminal, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(term, "inkey", scripted_inkey([Keystroke("i"), Keystroke("")]))
    session = EditorSession(create_default_manager())

    with pytest.raises(EOFError):
        run_terminal_session(session, term=term)

    assert session.mode is Mode.INSERT
    assert term.exit_fullscreen in output(term)
