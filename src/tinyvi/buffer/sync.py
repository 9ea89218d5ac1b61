"""Host-facing snapshot of the session for rendering collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Everything a renderer needs to paint one frame."""

    lines: Tuple[str, ...]
    cursor: Cursor
    mode: str
    filename: Optional[str] = None
    status: Optional[str] = None
    command_line: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def status_line(self) -> str:
        line, col = self.cursor
        name = self.filename or "[No Name]"
        return f"-- {self.mode.upper()} -- {name} {line + 1},{col + 1}"
