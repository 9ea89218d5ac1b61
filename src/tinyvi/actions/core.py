"""Mode switches and session lifecycle actions."""

from __future__ import annotations

from tinyvi.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def enter_command_mode(context: ModeContext, match) -> ModeResult:
    del match
    context.session.command_line.begin()
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def suspend_session(context: ModeContext, match) -> ModeResult:
    """Ctrl-Z: end the session; the host decides how to suspend the process."""

    del match
    context.session.suspend()
    context.bus.emit("session.suspend", None)
    return ModeResult(consumed=True, status="suspend", message="suspend")


__all__ = [
    "enter_insert_mode",
    "exit_to_normal_mode",
    "enter_command_mode",
    "suspend_session",
]
