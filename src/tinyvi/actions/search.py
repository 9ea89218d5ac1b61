"""Search prompt and repeat-search actions."""

from __future__ import annotations

from tinyvi.modes.base_mode import ModeContext, ModeResult
from tinyvi.session import PROMPT_SEARCH


def open_search_prompt(context: ModeContext, match) -> ModeResult:
    del match
    context.session.command_line.begin(PROMPT_SEARCH, "/")
    return ModeResult(consumed=True, switch_to="command", message="search_prompt")


def _repeat(context: ModeContext, *, reverse: bool) -> ModeResult:
    session = context.session
    hit = session.repeat_search(reverse=reverse)
    if hit is None:
        context.bus.emit("search.miss", session.search_engine.last_pattern)
        return ModeResult(consumed=True, status="not_found", message=session.status)
    return ModeResult(consumed=True, status="search")


def search_next(context: ModeContext, match) -> ModeResult:
    del match
    return _repeat(context, reverse=False)


def search_previous(context: ModeContext, match) -> ModeResult:
    del match
    return _repeat(context, reverse=True)


__all__ = ["open_search_prompt", "search_next", "search_previous"]
