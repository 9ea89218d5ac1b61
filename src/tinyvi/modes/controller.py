"""Modal controller: owns the active mode and routes key events."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from tinyvi.config import EditorMode
from tinyvi.keymaps import (
    Binding,
    KeymapRegistry,
    KeymapResolver,
    load_default_keymaps,
)
from tinyvi.runtime import telemetry
from tinyvi.session import EditorSession

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .normal_mode import NormalMode, NormalState


class ModalController:
    """Single flat state machine over Normal, Insert and Command modes.

    Keys are processed strictly in arrival order and every operation runs
    to completion before ``handle_key`` returns.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.logger = telemetry.get_logger("tinyvi.modes")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="tinyvi.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="tinyvi.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("controller", self)

    @classmethod
    def create(
        cls,
        session: Optional[EditorSession] = None,
        *,
        bus: Optional[ModeBus] = None,
        extra_bindings: Iterable[Binding] | None = None,
    ) -> "ModalController":
        """Build a controller with the three standard modes and default keys."""

        registry = KeymapRegistry(logger_name="tinyvi.keymaps")
        load_default_keymaps(registry, extra_bindings=extra_bindings)
        context = ModeContext(
            session=session or EditorSession(),
            bus=bus or ModeBus(),
            extras={},
        )
        controller = cls(context, keymap_registry=registry, load_defaults=False)
        controller.register_mode(NormalMode)
        controller.register_mode(InsertMode)
        controller.register_mode(CommandMode)
        return controller

    @property
    def session(self) -> EditorSession:
        return self.context.session

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def mode(self) -> EditorMode:
        return self.context.session.mode

    @property
    def normal_state(self) -> NormalState:
        mode = self._modes.get(NormalMode.name)
        if isinstance(mode, NormalMode):
            return mode.state
        return NormalState.READY

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._activate(mode, None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._activate(self._modes[name], previous.name if previous else None)
        telemetry.record_event("mode.switch", level="debug", data={"mode": name})
        self.context.bus.emit("mode.switch", name)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        # status messages last for a single key
        self.context.session.status = None
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result

    def type_keys(self, keys: str) -> list[ModeResult]:
        """Feed each character of ``keys`` as a plain key press."""

        return [self.handle_key(KeyInput.char(ch)) for ch in keys]

    def _activate(self, mode: Mode, previous: Optional[str]) -> None:
        self._active = mode.name
        self.context.session.mode = EditorMode(mode.name)
        mode.on_enter(previous)


__all__ = ["ModalController"]
