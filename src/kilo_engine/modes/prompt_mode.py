"""Shared single-line prompt editing for the message bar."""

from __future__ import annotations

from typing import List, Optional

from .base_mode import KeyInput, Mode, ModeContext

ERASE_KEYS = frozenset({"BACKSPACE", "DELETE"})
ERASE_TOKENS = frozenset({"ctrl+h"})


class PromptMode(Mode):
    """Collects typed text and mirrors it into the status message.

    Subclasses set ``template``, a ``%s`` format receiving the typed text,
    and may cap the text at ``max_length`` characters.
    """

    template = "%s"
    max_length: Optional[int] = None

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._typed: List[str] = []

    @property
    def text(self) -> str:
        return "".join(self._typed)

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._typed.clear()
        self._show()

    def _show(self) -> None:
        self.session.set_status(self.template, self.text)

    def _edit_text(self, key: KeyInput) -> bool:
        """Apply an erase or typed character; ``True`` when the text changed."""

        if _is_erase(key):
            if not self._typed:
                return False
            self._typed.pop()
            return True
        char = key.printable
        if char is None or char == "\t":
            return False
        if self.max_length is not None and len(self._typed) >= self.max_length:
            return False
        self._typed.append(char)
        return True


def _is_erase(key: KeyInput) -> bool:
    if key.key in ERASE_KEYS and not key.modifiers:
        return True
    mods = tuple(mod.lower() for mod in key.modifiers)
    return mods == ("ctrl",) and f"ctrl+{key.key.lower()}" in ERASE_TOKENS


__all__ = ["PromptMode"]
