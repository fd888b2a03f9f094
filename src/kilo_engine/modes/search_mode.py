"""Incremental search prompt.

Every edit of the query searches again from the top; arrow keys step to the
next or previous matching row, wrapping around the document. ENTER keeps the
cursor on the current hit, ESC puts cursor and viewport back where they were.
"""

from __future__ import annotations

from typing import Optional

from kilo_engine.search import SearchDirection, jump_to
from kilo_engine.session import SessionSnapshot

from .base_mode import KeyInput, ModeContext, ModeResult
from .prompt_mode import PromptMode

STEP_KEYS = {
    "RIGHT": SearchDirection.FORWARD,
    "DOWN": SearchDirection.FORWARD,
    "LEFT": SearchDirection.BACKWARD,
    "UP": SearchDirection.BACKWARD,
}


class SearchMode(PromptMode):
    name = "search"
    template = "Search: %s (Use ESC/Arrows/Enter)"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._saved: Optional[SessionSnapshot] = None
        self.max_length = context.session.search.max_length

    def on_enter(self, previous: str | None) -> None:
        self._saved = self.session.snapshot()
        self.session.search.clear()
        super().on_enter(previous)

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.session.search.match = None
        self._saved = None

    def handle_key(self, key: KeyInput) -> ModeResult:
        session = self.session
        if key.key == "ESC":
            if self._saved is not None:
                session.restore(self._saved)
            session.set_status("")
            return ModeResult(consumed=True, switch_to="edit", status="cancelled")

        if key.key == "ENTER":
            if not self.text:
                return ModeResult(consumed=True, status="editing")
            session.set_status("")
            return ModeResult(
                consumed=True, switch_to="edit", status="confirmed", message=self.text
            )

        direction = STEP_KEYS.get(key.key) if not key.modifiers else None
        if direction is None:
            if self._edit_text(key):
                session.search.set_query(self.text)
                self._show()
            else:
                # Any other key restarts the search from the top.
                session.search.set_query(session.search.query)
        return self._step(direction)

    def _step(self, direction: Optional[SearchDirection]) -> ModeResult:
        session = self.session
        match = session.search.step(session.document, direction)
        if match is None:
            return ModeResult(consumed=True, status="miss")
        jump_to(match, session.document, session.cursor, session.viewport)
        return ModeResult(consumed=True, status="match")


__all__ = ["SearchMode"]
