"""Route parsed commands to session operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Type, Union, cast

from tinyvi.errors import EditorError
from tinyvi.runtime import telemetry
from tinyvi.session import (
    PROMPT_SEARCH,
    PROMPT_SUBSTITUTE_FIND,
    EditorSession,
)

from .parser import (
    Command,
    Edit,
    Quit,
    Redo,
    Search,
    SearchNext,
    SearchPrompt,
    Substitute,
    SubstitutePrompt,
    Undo,
    Unknown,
    Write,
    WriteQuit,
    parse_command,
)

Emitter = Callable[[str, object], None]


@dataclass(slots=True)
class DispatchResult:
    """Outcome of one command.

    ``prompt`` is true when the command opened a follow-up prompt and the
    command line should stay active.
    """

    status: str
    message: Optional[str] = None
    prompt: bool = False


def _silent(event: str, payload: object) -> None:
    del event, payload


class CommandDispatcher:
    """Performs exactly one operation per committed command line.

    Unknown commands are absorbed without an error so a typo never
    interrupts editing; set ``report_unknown_commands`` in the session
    config to get a status message instead.
    """

    def __init__(self, session: EditorSession, *, emit: Optional[Emitter] = None) -> None:
        self.session = session
        self.emit = emit or _silent
        self._handlers: Dict[Type[object], Callable[[Command], DispatchResult]] = {
            Write: self._write,
            Quit: self._quit,
            WriteQuit: self._write_quit,
            Undo: self._undo,
            Redo: self._redo,
            SearchPrompt: self._search_prompt,
            Search: self._search,
            SearchNext: self._search_next,
            SubstitutePrompt: self._substitute_prompt,
            Substitute: self._substitute,
            Edit: self._edit,
            Unknown: self._unknown,
        }

    def run(self, raw: str) -> DispatchResult:
        return self.dispatch(parse_command(raw))

    def dispatch(self, command: Command) -> DispatchResult:
        handler = self._handlers[type(command)]
        name = type(command).__name__.lower()
        with telemetry.span(
            f"command::{name}", component="commands", metadata={"command": name}
        ):
            try:
                return handler(command)
            except EditorError as exc:
                self.session.status = exc.message
                telemetry.record_event(
                    "command.failed",
                    level="warning",
                    data={"command": name, "error": exc.message},
                )
                return DispatchResult(status="error", message=exc.message)

    def _write(self, command: Command) -> DispatchResult:
        path = cast(Union[Write, WriteQuit], command).path
        written = self.session.save_file(path)
        self.emit(
            "command.write",
            {"path": self.session.filename, "lines": written},
        )
        return DispatchResult(status="write", message=self.session.status)

    def _quit(self, command: Command) -> DispatchResult:
        del command
        self.session.quit()
        self.emit("command.quit", {"modified": self.session.modified})
        self.emit("session.quit", None)
        return DispatchResult(status="quit", message="quit")

    def _write_quit(self, command: Command) -> DispatchResult:
        result = self._write(command)
        self._quit(command)
        return DispatchResult(status="write_quit", message=result.message)

    def _undo(self, command: Command) -> DispatchResult:
        del command
        entry = self.session.undo()
        if entry is None:
            return DispatchResult(status="noop", message="Already at oldest change")
        return DispatchResult(status="undo")

    def _redo(self, command: Command) -> DispatchResult:
        del command
        entry = self.session.redo()
        if entry is None:
            return DispatchResult(status="noop", message="Already at newest change")
        return DispatchResult(status="redo")

    def _search_prompt(self, command: Command) -> DispatchResult:
        del command
        self.session.command_line.begin(PROMPT_SEARCH, "/")
        return DispatchResult(status="prompt", prompt=True)

    def _search(self, command: Command) -> DispatchResult:
        query = cast(Search, command).query
        hit = self.session.search_forward(query)
        if hit is None:
            self.emit("search.miss", query)
            return DispatchResult(status="not_found", message=self.session.status)
        return DispatchResult(status="search")

    def _search_next(self, command: Command) -> DispatchResult:
        hit = self.session.repeat_search(reverse=cast(SearchNext, command).reverse)
        if hit is None:
            self.emit("search.miss", self.session.search_engine.last_pattern)
            return DispatchResult(status="not_found", message=self.session.status)
        return DispatchResult(status="search")

    def _substitute_prompt(self, command: Command) -> DispatchResult:
        del command
        self.session.command_line.begin(PROMPT_SUBSTITUTE_FIND, ":s/")
        return DispatchResult(status="prompt", prompt=True)

    def _substitute(self, command: Command) -> DispatchResult:
        substitute = cast(Substitute, command)
        self.session.substitute_all(substitute.find, substitute.replace)
        return DispatchResult(status="substitute", message=self.session.status)

    def _edit(self, command: Command) -> DispatchResult:
        path = cast(Edit, command).path
        self.session.open_file(path)
        self.emit("command.edit", {"path": path})
        return DispatchResult(status="edit", message=self.session.status)

    def _unknown(self, command: Command) -> DispatchResult:
        text = cast(Unknown, command).text
        telemetry.record_event("command.unknown", level="debug", data={"text": text})
        if not self.session.config.report_unknown_commands:
            return DispatchResult(status="ignored")
        message = f"Not an editor command: {text}"
        self.session.status = message
        return DispatchResult(status="unknown", message=message)


__all__ = ["CommandDispatcher", "DispatchResult"]
