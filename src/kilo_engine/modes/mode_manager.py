"""Routes keys to the active editor mode and settles the session afterwards."""

from __future__ import annotations

from typing import Dict, Optional, Type

from kilo_engine.keymaps import KeymapRegistry, load_default_keymaps
from kilo_engine.runtime import telemetry

from .base_mode import QUIT_PENDING, KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the edit, search and save-as modes and dispatches keys to one.

    After every key the quit guard is re-armed unless the key was a refused
    quit. The viewport then follows the cursor before any requested mode
    switch is applied.
    """

    def __init__(self, context: ModeContext, *, load_defaults: bool = True) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.keymap_registry = KeymapRegistry(logger_name="kilo_engine.keymaps")
        if load_defaults:
            load_default_keymaps(self.keymap_registry)
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        """Instantiate ``mode_cls``; the first registered mode starts active."""

        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous is not None and previous.name == name:
            return
        if previous is not None:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event(
            "mode.switch",
            data={"mode": name, "from": previous.name if previous else None},
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ) as handle:
            result = mode.handle_key(key)
            handle.add_metadata("status", result.status)
        return self._settle(result)

    def _settle(self, result: ModeResult) -> ModeResult:
        session = self.context.session
        if result.status != QUIT_PENDING:
            session.reset_quit_guard()
        session.scroll()
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


__all__ = ["ModeManager"]
