"""Textual-agnostic controller wiring ModeManager results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from kilo_engine.modes import (
    EditMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
    SaveAsMode,
    SearchMode,
)
from kilo_engine.modes.mode_manager import ModeManager
from kilo_engine.render import Frame, compose_frame
from kilo_engine.session import EditorSession

NAMED_KEYS: Dict[str, str] = {
    "enter": "ENTER",
    "return": "ENTER",
    "escape": "ESC",
    "backspace": "BACKSPACE",
    "delete": "DELETE",
    "tab": "TAB",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
    "pageup": "PAGE_UP",
    "pagedown": "PAGE_DOWN",
    "home": "HOME",
    "end": "END",
}

BUS_EVENTS = ("session.quit", "document.saved", "document.save_failed")


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def normalize_key(key: str, character: Optional[str] = None) -> KeyInput:
    """Turn a Textual key name such as ``"ctrl+s"`` into a :class:`KeyInput`."""

    parts = key.split("+")
    base = parts[-1] if parts[-1] else "+"
    modifiers = tuple(part.lower() for part in parts[:-1] if part)
    named = NAMED_KEYS.get(base.lower())
    if named is not None:
        return KeyInput(key=named, modifiers=modifiers)
    typed = character is not None and len(character) == 1 and character.isprintable()
    if typed and set(modifiers) <= {"shift"}:
        return KeyInput(key=character, text=character)
    return KeyInput(key=base, modifiers=modifiers)


def create_default_manager(session: EditorSession) -> ModeManager:
    """Build a ModeManager with edit, search and save-as modes."""

    context = ModeContext(session=session, bus=ModeBus(), extras={})
    manager = ModeManager(context)
    manager.register_mode(EditMode)
    manager.register_mode(SearchMode)
    manager.register_mode(SaveAsMode)
    return manager


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[Frame], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualKiloAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self.refresh()

    @property
    def session(self) -> EditorSession:
        return self.manager.context.session

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Dispatch an already-normalized key and repaint."""

        normalized_modifiers = tuple(str(mod).lower() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self.refresh()
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def resize(self, rows: int, cols: int) -> None:
        self.session.resize(rows, cols)
        self.refresh()

    def refresh(self) -> None:
        frame = compose_frame(self.session)
        self.hooks.update_frame(frame)
        self.hooks.update_status(frame.message)

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in BUS_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        active_mode = self.manager.active_mode
        return {
            "mode": active_mode.name if active_mode else "?",
            "cursor": (session.cursor.cx, session.cursor.cy),
            "buffer": session.buffer.name,
            "dirty": session.document.dirty,
        }


__all__ = [
    "TextualKiloAdapter",
    "TextualUIHooks",
    "create_default_manager",
    "normalize_key",
]
