"""Cursor state tied to a TextBuffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from .validation import clamp_cursor

if TYPE_CHECKING:
    from .document import TextBuffer

Cursor = Tuple[int, int]  # (line, column)


@dataclass(slots=True)
class CursorState:
    """Mutable cursor; every update is clamped to the buffer bounds."""

    line: int = 0
    column: int = 0

    @property
    def position(self) -> Cursor:
        return (self.line, self.column)

    def set(self, buffer: "TextBuffer", line: int, column: int) -> Cursor:
        self.line, self.column = clamp_cursor(buffer, line, column)
        return self.position

    def move(self, buffer: "TextBuffer", d_line: int, d_column: int) -> Cursor:
        return self.set(buffer, self.line + d_line, self.column + d_column)

    def clamp(self, buffer: "TextBuffer") -> Cursor:
        return self.set(buffer, self.line, self.column)

    def reset(self) -> None:
        self.line = 0
        self.column = 0
