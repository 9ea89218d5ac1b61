"""Adapter that wires ModalController events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from tinyvi.buffer import BufferMirror
from tinyvi.modes import KeyInput, ModalController, ModeResult

_RELAYED_EVENTS = (
    "command.start",
    "command.end",
    "command.submit",
    "command.write",
    "command.quit",
    "command.edit",
    "search.miss",
    "session.quit",
    "session.suspend",
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    show_command: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges the modal controller and its bus to a Textual-friendly surface."""

    def __init__(self, controller: ModalController, hooks: TextualUIHooks) -> None:
        self.controller = controller
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()
        self._refresh_command_line()

    @property
    def running(self) -> bool:
        return self.controller.session.running

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.controller.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        session_status = self.controller.session.status
        status = session_status or result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_buffer()
        self._refresh_command_line()

    def _subscribe_events(self) -> None:
        bus = self.controller.context.bus
        for event in _RELAYED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name.startswith("command"):
            self._refresh_command_line()
        if name == "command.edit":
            self._refresh_buffer()

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.controller.session.mirror())

    def _refresh_command_line(self) -> None:
        session = self.controller.session
        if session.mode.value == "command":
            self.hooks.show_command(session.command_line.display)
        else:
            self.hooks.show_command("")

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.controller.session
        return {
            "mode": session.mode.value,
            "normal_state": self.controller.normal_state.value,
            "cursor": session.position,
            "command": session.command_line.text,
            "file": session.filename,
            "buffer_version": session.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
