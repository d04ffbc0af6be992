"""Buffer & cursor engine: line storage plus invariant-preserving edits."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Iterable, Optional, Sequence

from vim_lite.runtime import telemetry

from .document import LineDocument
from .state import BufferState, Cursor
from .validation import cursor_in_bounds, ensure_cursor
from .width import display_width, is_uniform_width


@dataclass(slots=True)
class BufferView:
    """Read-only snapshot handed to render surfaces."""

    version: int
    lines: Sequence[str]
    cursor: Cursor

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass(slots=True)
class BufferDelta:
    label: str
    changed: bool
    version: int
    cursor: Cursor
    line_count: int


class Buffer:
    """Owns the lines and the cursor; every operation keeps both valid.

    Horizontal bounds and vertical clamping are measured in display columns,
    while insertion and deletion address characters by index. On text made of
    width-1 characters the two spaces coincide.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or LineDocument()
        self.state = state or BufferState()
        ensure_cursor(self.document, self.state.cursor)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        *,
        cursor: tuple[int, int] = (0, 0),
        name: str = "default",
    ) -> "Buffer":
        return cls(
            name=name,
            document=LineDocument.from_lines(lines),
            state=BufferState(Cursor(*cursor)),
        )

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    @property
    def lines(self) -> Sequence[str]:
        return self.document.snapshot()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    @property
    def current_line(self) -> str:
        return self.document.get_line(self.state.row)

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            lines=self.document.snapshot(),
            cursor=self.state.cursor,
        )

    def set_cursor(self, column: int, row: int) -> None:
        self.state.set_cursor(*ensure_cursor(self.document, Cursor(column, row)))

    def check_invariants(self) -> bool:
        return cursor_in_bounds(self.document, self.state.cursor)

    def move_left(self) -> BufferDelta:
        with Transaction(self, "move_left") as tx:
            column, row = self.state.cursor
            if column > 0:
                self.state.set_cursor(column - 1, row)
        return tx.delta

    def move_right(self) -> BufferDelta:
        with Transaction(self, "move_right") as tx:
            column, row = self.state.cursor
            if column < display_width(self.current_line):
                self.state.set_cursor(column + 1, row)
        return tx.delta

    def move_up(self) -> BufferDelta:
        with Transaction(self, "move_up") as tx:
            column, row = self.state.cursor
            if row > 0:
                self._move_to_row(column, row - 1)
        return tx.delta

    def move_down(self) -> BufferDelta:
        with Transaction(self, "move_down") as tx:
            column, row = self.state.cursor
            if row < self.document.line_count - 1:
                self._move_to_row(column, row + 1)
        return tx.delta

    def insert_char(self, char: str) -> BufferDelta:
        if len(char) != 1:
            raise ValueError(f"insert_char expects a single character, got {char!r}")
        with Transaction(self, "insert_char") as tx:
            column, row = self.state.cursor
            self.document.insert_text(row, column, char)
            self.state.set_cursor(column + 1, row)
        return tx.delta

    def delete_char(self) -> BufferDelta:
        """Backspace: remove the character before the cursor or join lines."""

        with Transaction(self, "delete_char") as tx:
            column, row = self.state.cursor
            if column > 0:
                self.document.remove_char(row, column - 1)
                self.state.set_cursor(column - 1, row)
            elif row > 0:
                joined_at = self.document.join_with_previous(row)
                self.state.set_cursor(joined_at, row - 1)
        return tx.delta

    def insert_newline(self) -> BufferDelta:
        with Transaction(self, "insert_newline") as tx:
            column, row = self.state.cursor
            self.document.split_line(row, column)
            self.state.set_cursor(0, row + 1)
        return tx.delta

    def _move_to_row(self, column: int, row: int) -> None:
        width = display_width(self.document.get_line(row))
        self.state.set_cursor(min(column, width), row)


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps one buffer operation in a telemetry span and computes its delta."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._before_cursor: Cursor | None = None
        self._before_version = 0
        self.delta: BufferDelta | None = None

    def __enter__(self) -> "Transaction":
        self._before_cursor = self.buffer.state.cursor
        self._before_version = self.buffer.document.version
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name, "cursor": self._before_cursor},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                self.delta = self._build_delta()
                if self.delta.changed:
                    self._flag_width_mismatch()
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False

    def _build_delta(self) -> BufferDelta:
        cursor = self.buffer.state.cursor
        version = self.buffer.document.version
        return BufferDelta(
            label=self.label,
            changed=cursor != self._before_cursor or version != self._before_version,
            version=version,
            cursor=cursor,
            line_count=self.buffer.document.line_count,
        )

    def _flag_width_mismatch(self) -> None:
        # Column and character offset only agree on width-1 text.
        line = self.buffer.current_line
        in_bounds = self.buffer.check_invariants()
        if in_bounds and is_uniform_width(line):
            return
        telemetry.record_event(
            "cursor.width_mismatch",
            level="warning",
            data={
                "operation": self.label,
                "cursor": self.buffer.state.cursor,
                "line_width": display_width(line),
                "line_length": len(line),
                "in_bounds": in_bounds,
            },
        )


__all__ = ["Buffer", "BufferDelta", "BufferView", "Transaction"]
