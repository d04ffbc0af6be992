"""Mode transitions and session control."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_lite.modes.base_mode import Mode, ModeContext, ModeResult

if TYPE_CHECKING:
    from vim_lite.keymaps import ResolutionMatch


def enter_insert_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=Mode.INSERT)


def exit_to_normal_mode(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to=Mode.NORMAL)


def quit_editor(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="quit", quit=True)


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "quit_editor",
]
