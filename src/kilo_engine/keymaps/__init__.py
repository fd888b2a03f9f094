"""Keymap registry and default bindings."""

from .models import ActionRef, Binding, KeyStroke, key_token
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    ResolutionMatch,
)
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "key_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "ResolutionMatch",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
