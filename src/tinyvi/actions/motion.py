"""Cursor motions; every target is clamped to the buffer."""

from __future__ import annotations

from tinyvi.modes.base_mode import ModeContext, ModeResult


def _move(context: ModeContext, d_line: int, d_column: int) -> ModeResult:
    before = context.session.position
    after = context.session.move_cursor(d_line, d_column)
    status = "motion" if after != before else "motion_blocked"
    return ModeResult(consumed=True, status=status)


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, 0, -1)


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, 1, 0)


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, -1, 0)


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    return _move(context, 0, 1)


__all__ = ["move_left", "move_down", "move_up", "move_right"]
