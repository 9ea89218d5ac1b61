"""Insert mode: printable keys go straight into the buffer."""

from __future__ import annotations

from tinyvi.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver


class InsertMode(Mode):
    """Insert bindings are single keys; anything unbound and printable is text."""

    name = "insert"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tinyvi.modes.insert")
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, (key_to_token(key),))
        if result.status == "match" and result.match:
            return self._execute_match(result.match)

        text = key.text
        if text and not key.modifiers and text.isprintable():
            session = self.context.session
            for ch in text:
                session.insert_char(ch)
            return ModeResult(consumed=True, status="insert")

        return ModeResult(consumed=False, status="miss", message="unhandled")
