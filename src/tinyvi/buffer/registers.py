"""Single unnamed clipboard register."""

from __future__ import annotations

from typing import Iterable, Tuple


class ClipboardRegister:
    """Holds the last cut or copied lines; each write replaces the previous."""

    def __init__(self) -> None:
        self._lines: Tuple[str, ...] = ()

    @property
    def lines(self) -> Tuple[str, ...]:
        return self._lines

    def is_empty(self) -> bool:
        return not self._lines

    def set(self, lines: Iterable[str]) -> None:
        self._lines = tuple(lines)

    def clear(self) -> None:
        self._lines = ()
