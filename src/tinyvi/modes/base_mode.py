"""Base classes and shared plumbing for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from tinyvi.errors import EditorError
from tinyvi.runtime import telemetry
from tinyvi.session import EditorSession

if TYPE_CHECKING:
    from tinyvi.keymaps import ResolutionMatch


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``key`` is a printable character or a name such as ``ESC``, ``ENTER``
    or ``BACKSPACE``; ``text`` carries the character a key would insert.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        return cls(key=ch, text=ch)

    @classmethod
    def ctrl(cls, key: str) -> "KeyInput":
        return cls(key=key, modifiers=("ctrl",))


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Services every mode and action can reach."""

    session: EditorSession
    bus: "ModeBus"
    extras: Dict[str, object] = field(default_factory=dict)


class ModeBus:
    """Minimal event bus letting modes and hosts exchange signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[str]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_key(
        self, key: KeyInput
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError

    def _execute_match(self, match: "ResolutionMatch") -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            try:
                outcome = match.action(self.context, match)
            except EditorError as exc:
                self.context.session.status = exc.message
                telemetry.record_event(
                    "action.failed",
                    level="warning",
                    data={"action": match.action.id, "error": exc.message},
                )
                return ModeResult(consumed=True, status="error", message=exc.message)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)
