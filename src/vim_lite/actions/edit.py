"""Insert-mode text mutations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_lite.buffer import BufferDelta
from vim_lite.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from vim_lite.keymaps import ResolutionMatch


def _edit_result(delta: BufferDelta) -> ModeResult:
    return ModeResult(consumed=True, status="edited" if delta.changed else "noop")


def insert_char(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    text = match.text
    if text is None:
        return ModeResult(consumed=False, status="noop")
    return _edit_result(context.buffer.insert_char(text))


def delete_char(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    return _edit_result(context.buffer.delete_char())


def insert_newline(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    return _edit_result(context.buffer.insert_newline())


__all__ = ["insert_char", "delete_char", "insert_newline"]
