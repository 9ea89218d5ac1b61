"""Editor modes and session configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

ENV_PREFIX = "TINYVI_"


class EditorMode(str, Enum):
    """Available editor modes."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return MODE_LABELS[self]


MODE_LABELS = {
    EditorMode.NORMAL: "NORMAL",
    EditorMode.INSERT: "INSERT",
    EditorMode.COMMAND: "COMMAND",
}


def env_value(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env_value(name, environ=environ)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def env_int(
    name: str,
    default: Optional[int],
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[int]:
    raw = env_value(name, environ=environ)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(slots=True)
class EditorConfig:
    """Tunables for a single editing session.

    ``undo_limit`` caps each history stack; when full, the oldest entry is
    evicted. ``None`` keeps the stacks unbounded.
    """

    undo_limit: Optional[int] = None
    clear_redo_on_edit: bool = True
    report_unknown_commands: bool = False
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.undo_limit is not None and self.undo_limit <= 0:
            raise ValueError("undo_limit must be positive")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        limit = env_int("UNDO_LIMIT", None, environ=environ)
        if limit is not None and limit <= 0:
            limit = None
        return cls(
            undo_limit=limit,
            clear_redo_on_edit=not env_flag("KEEP_REDO", False, environ=environ),
            report_unknown_commands=env_flag(
                "REPORT_UNKNOWN", False, environ=environ
            ),
            encoding=env_value("ENCODING", environ=environ) or "utf-8",
        )


__all__ = [
    "ENV_PREFIX",
    "EditorConfig",
    "EditorMode",
    "MODE_LABELS",
    "env_flag",
    "env_int",
    "env_value",
]
