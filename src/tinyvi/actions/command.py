"""Actions that complete or cancel the command line."""

from __future__ import annotations

from tinyvi.commands import CommandDispatcher, DispatchResult
from tinyvi.commands.parser import Search, Substitute
from tinyvi.modes.base_mode import ModeContext, ModeResult
from tinyvi.session import (
    PROMPT_SEARCH,
    PROMPT_SUBSTITUTE_FIND,
    PROMPT_SUBSTITUTE_REPLACE,
)


def submit_command_line(context: ModeContext, match) -> ModeResult:
    """Enter: run the line according to what the prompt was opened for."""

    del match
    session = context.session
    command_line = session.command_line
    text = command_line.text
    purpose = command_line.purpose
    context.bus.emit("command.submit", text)
    dispatcher = CommandDispatcher(session, emit=context.bus.emit)

    if purpose == PROMPT_SEARCH:
        result = dispatcher.dispatch(Search(text))
    elif purpose == PROMPT_SUBSTITUTE_FIND and text:
        command_line.begin(PROMPT_SUBSTITUTE_REPLACE, f":s/{text}/", find=text)
        return ModeResult(consumed=True, status="prompt", message="substitute_replace")
    elif purpose in {PROMPT_SUBSTITUTE_FIND, PROMPT_SUBSTITUTE_REPLACE}:
        result = dispatcher.dispatch(Substitute(command_line.find or "", text))
    elif not text.strip():
        return ModeResult(consumed=True, switch_to="normal", status="command_empty")
    else:
        result = dispatcher.run(text)

    return _to_mode_result(result)


def cancel_command_line(context: ModeContext, match) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="normal", message="command_cancel")


def _to_mode_result(result: DispatchResult) -> ModeResult:
    if result.prompt:
        return ModeResult(consumed=True, status="prompt", message=result.message)
    return ModeResult(
        consumed=True,
        switch_to="normal",
        status=f"command_{result.status}",
        message=result.message,
    )


__all__ = ["submit_command_line", "cancel_command_line"]
