"""Textual host: controller hooks plus the runnable app."""

from .controller import (
    TextualKiloAdapter,
    TextualUIHooks,
    create_default_manager,
    normalize_key,
)

__all__ = [
    "TextualKiloAdapter",
    "TextualUIHooks",
    "create_default_manager",
    "normalize_key",
]
