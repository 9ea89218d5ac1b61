"""Load/save collaborator for the editing session."""

from __future__ import annotations

import os
import tempfile
from typing import Iterable, List

from tinyvi.errors import FileUnavailable
from tinyvi.runtime import telemetry

# open() raises LookupError for an unknown encoding name
_IO_ERRORS = (OSError, UnicodeError, LookupError)


class FileStore:
    """Reads and writes buffers as newline-delimited text files."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load(self, path: str) -> List[str]:
        """Return the lines of ``path``; an empty file yields one empty line."""

        with telemetry.span("files::load", metadata={"path": path}):
            try:
                with open(
                    path, "r", encoding=self.encoding, errors="surrogateescape"
                ) as handle:
                    text = handle.read()
            except _IO_ERRORS as exc:
                self._unavailable(path, "load", exc)
                raise FileUnavailable(
                    f"Cannot open file: {path}", path=path
                ) from exc

        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return lines or [""]

    def save(self, path: str, lines: Iterable[str]) -> int:
        """Write every line followed by a newline; returns the line count.

        Output goes to a sibling temporary file that replaces ``path`` only
        once it is complete, so a failed save leaves the old file intact.
        """

        written = 0
        with telemetry.span("files::save", metadata={"path": path}):
            temp_path = None
            try:
                fd, temp_path = tempfile.mkstemp(
                    dir=os.path.dirname(os.path.abspath(path)),
                    prefix=f".{os.path.basename(path)}.",
                    suffix=".tmp",
                )
                with open(
                    fd, "w", encoding=self.encoding, errors="surrogateescape"
                ) as handle:
                    for line in lines:
                        handle.write(line)
                        handle.write("\n")
                        written += 1
                if os.path.exists(path):
                    os.chmod(temp_path, os.stat(path).st_mode & 0o7777)
                os.replace(temp_path, path)
            except _IO_ERRORS as exc:
                if temp_path is not None and os.path.exists(temp_path):
                    os.unlink(temp_path)
                self._unavailable(path, "save", exc)
                raise FileUnavailable(
                    f"Cannot write file: {path}", path=path
                ) from exc
        return written

    @staticmethod
    def _unavailable(path: str, op: str, exc: Exception) -> None:
        telemetry.record_event(
            "files.unavailable",
            level="warning",
            data={"path": path, "op": op, "error": str(exc)},
        )


__all__ = ["FileStore"]
