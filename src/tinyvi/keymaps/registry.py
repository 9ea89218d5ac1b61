"""Registry holding actions and the bindings that reach them."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Optional

from tinyvi.runtime.telemetry import span

from .models import ActionRef, Binding


class KeymapConflictError(RuntimeError):
    """Raised when a binding clashes with one already registered."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        super().__init__(
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns action references and per-mode binding tables.

    Within a mode a binding conflicts with another when it has the same key
    sequence, or when one sequence is a prefix of the other (the shorter one
    would make the longer unreachable).
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflicts = [
                other
                for other in self.detect_conflicts(binding)
                if other.id != binding.id
            ]
            if conflicts and not replace:
                raise KeymapConflictError(binding, conflicts)
            if binding.id in self._bindings and not replace:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            for conflict in conflicts:
                self._bindings.pop(conflict.id, None)
            self._bindings[binding.id] = binding
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is not None:
            self._revision += 1
        return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if mode is None or binding.mode == mode:
                yield binding

    def modes(self) -> tuple[str, ...]:
        return tuple(sorted({binding.mode for binding in self._bindings.values()}))

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        tokens = binding.sequence.tokens
        conflicts: list[Binding] = []
        for existing in self.iter_bindings(binding.mode):
            other = existing.sequence.tokens
            shortest = min(len(tokens), len(other))
            if tokens[:shortest] == other[:shortest]:
                conflicts.append(existing)
        return conflicts


__all__ = ["KeymapConflictError", "KeymapRegistry"]
