"""Error taxonomy shared by the editing engine."""

from __future__ import annotations

from typing import Optional, Tuple


class EditorError(RuntimeError):
    """Base class for recoverable editor conditions."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OutOfRange(EditorError, IndexError):
    """Raised when a line index or cursor falls outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        cursor: Optional[Tuple[int, int]] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.cursor = cursor


class InvalidArgument(EditorError, ValueError):
    """Raised before mutation when an argument cannot be honoured."""


class FileUnavailable(EditorError, OSError):
    """Raised when a file cannot be opened for reading or writing."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["EditorError", "OutOfRange", "InvalidArgument", "FileUnavailable"]
