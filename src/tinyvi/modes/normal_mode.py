"""Normal mode: motions, line edits and two-key composites."""

from __future__ import annotations

from enum import Enum
from typing import List

from tinyvi.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver


class NormalState(str, Enum):
    """Sub-states of Normal mode while a composite is half typed."""

    READY = "ready"
    PENDING_D = "pending_d"
    PENDING_Y = "pending_y"
    PENDING = "pending"


_COMPOSITE_STATES = {"d": NormalState.PENDING_D, "y": NormalState.PENDING_Y}


class NormalMode(Mode):
    """Resolves keys through the keymap trie.

    A prefix of a multi-key binding parks the mode in a pending sub-state;
    the next key either completes the binding or cancels it with no effect.
    There is no timeout.
    """

    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("tinyvi.modes.normal")
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []

    @property
    def state(self) -> NormalState:
        if not self._pending:
            return NormalState.READY
        return _COMPOSITE_STATES.get(self._pending[0], NormalState.PENDING)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._resolver.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._pending.clear()
            return self._execute_match(result.match)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        composite = len(self._pending) > 1
        self._pending.clear()
        if composite:
            return ModeResult(
                consumed=True, status="cancelled", message="sequence_cancelled"
            )
        return ModeResult(consumed=False, status="miss", message="unhandled")
