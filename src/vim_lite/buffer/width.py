"""Display-width measurement for buffer lines."""

from __future__ import annotations

from typing import Tuple

from wcwidth import wcswidth, wcwidth


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    Characters ``wcwidth`` cannot measure (control characters) count as zero
    columns instead of poisoning the whole line with ``-1``.
    """

    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


def is_uniform_width(text: str) -> bool:
    """True when every character of ``text`` occupies exactly one column."""

    return all(wcwidth(char) == 1 for char in text)


def split_at_column(text: str, column: int) -> Tuple[str, str, str]:
    """Split ``text`` around the glyph drawn at display ``column``.

    Returns ``(before, cell, after)``. A wide glyph covers both of its
    columns, zero-width characters stay with the glyph they follow, and
    ``cell`` is empty when ``column`` lies at or past the end of the line.
    """

    offset = 0
    for index, char in enumerate(text):
        width = max(wcwidth(char), 0)
        if width and offset + width > column:
            end = index + 1
            while end < len(text) and wcwidth(text[end]) == 0:
                end += 1
            return text[:index], text[index:end], text[end:]
        offset += width
    return text, "", ""


__all__ = ["display_width", "is_uniform_width", "split_at_column"]
