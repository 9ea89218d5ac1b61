"""Line storage for the editing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .validation import ensure_column, ensure_line


@dataclass(slots=True)
class TextBuffer:
    """Ordered list of lines that always holds at least one line.

    The buffer knows nothing about undo; callers snapshot the affected
    lines before each mutation.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TextBuffer":
        return cls(_lines=list(lines))

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(_lines=text.split("\n"))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def get_line(self, index: int) -> str:
        ensure_line(self, index)
        return self._lines[index]

    def load(self, lines: Iterable[str]) -> None:
        """Replace the contents wholesale; cursor and history are untouched."""

        self._lines = list(lines) or [""]
        self._touch()

    def set_line(self, index: int, text: str) -> None:
        ensure_line(self, index)
        self._lines[index] = text
        self._touch()

    def insert_char(self, index: int, col: int, ch: str) -> None:
        line = self.get_line(index)
        ensure_column(self, index, col)
        self._lines[index] = line[:col] + ch + line[col:]
        self._touch()

    def delete_char(self, index: int, col: int) -> None:
        """Remove the character before ``col``; a no-op at column zero."""

        line = self.get_line(index)
        ensure_column(self, index, col)
        if col == 0:
            return
        self._lines[index] = line[: col - 1] + line[col:]
        self._touch()

    def delete_line(self, index: int) -> str:
        """Remove line ``index``; the last remaining line is blanked instead."""

        removed = self.get_line(index)
        if len(self._lines) == 1:
            self._lines[0] = ""
        else:
            del self._lines[index]
        self._touch()
        return removed

    def insert_lines(self, index: int, lines: Sequence[str]) -> None:
        if index < 0 or index > len(self._lines):
            ensure_line(self, index)
        self._lines[index:index] = list(lines)
        self._touch()

    def replace_lines(self, start: int, end: int, lines: Sequence[str]) -> None:
        """Replace ``[start:end]`` with ``lines``, never leaving zero lines."""

        self._lines[start:end] = list(lines)
        if not self._lines:
            self._lines = [""]
        self._touch()

    def _touch(self) -> None:
        self.version += 1


__all__ = ["TextBuffer"]
