"""Cursor position state for buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Cursor(NamedTuple):
    """Cursor position as ``(column, row)``."""

    column: int
    row: int


@dataclass(slots=True)
class BufferState:
    """Mutable cursor info tied to a LineDocument."""

    cursor: Cursor = Cursor(0, 0)

    def set_cursor(self, column: int, row: int) -> None:
        self.cursor = Cursor(column, row)

    @property
    def column(self) -> int:
        return self.cursor.column

    @property
    def row(self) -> int:
        return self.cursor.row
