"""Command-line mode: accumulates text until Enter or Escape."""

from __future__ import annotations

from tinyvi.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver


class CommandMode(Mode):
    name = "command"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tinyvi.modes.command")
        self._resolver = require_keymap_resolver(context)

    @property
    def current_command(self) -> str:
        return self.context.session.command_line.text

    def on_enter(self, previous: str | None) -> None:
        del previous
        command_line = self.context.session.command_line
        self.context.bus.emit("command.start", command_line.purpose)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit("command.end", self.current_command)
        self.context.session.command_line.reset()

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, (key_to_token(key),))
        if result.status == "match" and result.match:
            return self._execute_match(result.match)
        return self._handle_text_input(key)

    def _handle_text_input(self, key: KeyInput) -> ModeResult:
        command_line = self.context.session.command_line
        if key.key == "BACKSPACE":
            command_line.backspace()
            return ModeResult(consumed=True, status="editing")

        if key.text and not key.modifiers and key.text.isprintable():
            command_line.append(key.text)
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="miss", message="unhandled")
