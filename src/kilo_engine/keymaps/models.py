"""Dataclasses describing key bindings and the actions they trigger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


def key_token(key: str, modifiers: Iterable[str] = ()) -> str:
    """Canonical lookup token, e.g. ``"ctrl+s"`` or ``"PAGE_UP"``."""

    normalized = normalize_modifiers(modifiers)
    if normalized:
        return "+".join(normalized + (key,))
    return key


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """One logical key press as produced by the key decoder."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return key_token(self.key, self.modifiers)

    @classmethod
    def parse(cls, text: str) -> "KeyStroke":
        """Build from ``"ctrl+s"`` style notation; the last part is the key."""

        parts = text.split("+")
        if len(parts) > 1 and parts[-1]:
            return cls(parts[-1], tuple(parts[:-1]))
        return cls(text)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key stroke in one mode with an action."""

    id: str
    mode: str
    stroke: KeyStroke
    action_id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.mode:
            raise ValueError("binding mode cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def token(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "key_token",
    "normalize_modifiers",
]
