"""Line buffer, cursor state, and the invariant-preserving edit engine."""

from .buffer import Buffer, BufferDelta, BufferView, Transaction
from .document import LineDocument
from .state import BufferState, Cursor
from .validation import BufferValidationError, cursor_in_bounds, ensure_cursor
from .width import display_width, is_uniform_width, split_at_column

__all__ = [
    "Buffer",
    "BufferDelta",
    "BufferView",
    "Transaction",
    "LineDocument",
    "BufferState",
    "Cursor",
    "BufferValidationError",
    "cursor_in_bounds",
    "ensure_cursor",
    "display_width",
    "is_uniform_width",
    "split_at_column",
]
