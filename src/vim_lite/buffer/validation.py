"""Cursor validation helpers shared across buffer services."""

from __future__ import annotations

from .document import LineDocument
from .state import Cursor
from .width import display_width


class BufferValidationError(RuntimeError):
    """Raised when callers provide out-of-bounds cursor info."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def cursor_in_bounds(document: LineDocument, cursor: Cursor) -> bool:
    column, row = cursor
    if row < 0 or row >= document.line_count:
        return False
    return 0 <= column <= display_width(document.get_line(row))


def ensure_cursor(document: LineDocument, cursor: Cursor) -> Cursor:
    column, row = cursor
    if row < 0 or row >= document.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    if column < 0 or column > display_width(document.get_line(row)):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return Cursor(column, row)
