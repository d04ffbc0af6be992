"""Normal-mode cursor motions.

Motions clamp at every boundary; none of them wrap across lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vim_lite.buffer import BufferDelta
from vim_lite.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:
    from vim_lite.keymaps import ResolutionMatch


def _motion_result(delta: BufferDelta) -> ModeResult:
    return ModeResult(consumed=True, status="moved" if delta.changed else "noop")


def move_left(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    return _motion_result(context.buffer.move_left())


def move_right(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    return _motion_result(context.buffer.move_right())


def move_up(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    return _motion_result(context.buffer.move_up())


def move_down(context: ModeContext, match: "ResolutionMatch") -> ModeResult:
    del match
    return _motion_result(context.buffer.move_down())


__all__ = ["move_left", "move_right", "move_up", "move_down"]
