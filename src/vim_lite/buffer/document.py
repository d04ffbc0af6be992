"""Line storage for vim_lite buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineDocument:
    """Mutable list-of-lines storage addressed by character index.

    The document is never empty: it always holds at least one (possibly
    empty) line. Indices past the end of a line address the end of the line.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=list(lines))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def insert_text(self, row: int, index: int, text: str) -> None:
        line = self._lines[row]
        self._lines[row] = line[:index] + text + line[index:]
        self._touch()

    def remove_char(self, row: int, index: int) -> bool:
        """Remove the character at ``index``; False when there is none."""

        line = self._lines[row]
        if index < 0 or index >= len(line):
            return False
        self._lines[row] = line[:index] + line[index + 1 :]
        self._touch()
        return True

    def split_line(self, row: int, index: int) -> None:
        line = self._lines[row]
        self._lines[row : row + 1] = [line[:index], line[index:]]
        self._touch()

    def join_with_previous(self, row: int) -> int:
        """Append line ``row`` to line ``row - 1`` and drop it.

        Returns the character length the previous line had before the join.
        """

        if row <= 0:
            raise IndexError("cannot join the first line with a previous line")
        current = self._lines.pop(row)
        previous = self._lines[row - 1]
        self._lines[row - 1] = previous + current
        self._touch()
        return len(previous)

    def _touch(self) -> None:
        self.version += 1
