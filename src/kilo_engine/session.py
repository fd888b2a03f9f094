"""Explicit per-session context shared by modes, actions and renderers."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Callable, Optional

from kilo_engine.buffer import Buffer, CursorState, Document, DocumentIOError
from kilo_engine.runtime import telemetry
from kilo_engine.runtime.config import EditorSettings
from kilo_engine.search import SearchSession
from kilo_engine.view import Viewport

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"
STATUS_LINES = 2


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    stamp: float = 0.0


@dataclass(slots=True)
class SessionSnapshot:
    """Cursor and viewport captured before a prompt that may be cancelled."""

    cursor: CursorState
    viewport: Viewport


class EditorSession:
    """Everything one editing session owns; passed explicitly everywhere."""

    def __init__(
        self,
        buffer: Optional[Buffer] = None,
        *,
        settings: Optional[EditorSettings] = None,
        viewport: Optional[Viewport] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.buffer = (
            buffer if buffer is not None else Buffer(tab_stop=self.settings.tab_stop)
        )
        self.viewport = viewport if viewport is not None else Viewport()
        self.search = SearchSession(max_length=self.settings.query_max_length)
        self.status = StatusMessage()
        self.quit_remaining = self.settings.quit_times
        self._clock = clock

    @classmethod
    def open(
        cls,
        path: Optional[str | os.PathLike[str]] = None,
        *,
        settings: Optional[EditorSettings] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "EditorSession":
        """Start a session, loading ``path`` when given.

        A file that cannot be read leaves an empty buffer bound to that name and
        the reason in the message bar.
        """

        resolved = settings or EditorSettings.from_env()
        buffer: Optional[Buffer] = None
        failure: Optional[DocumentIOError] = None
        if path is not None:
            try:
                buffer = Buffer.open(path, tab_stop=resolved.tab_stop)
            except DocumentIOError as exc:
                failure = exc
                buffer = Buffer(filename=os.fspath(path), tab_stop=resolved.tab_stop)
        session = cls(buffer, settings=resolved, clock=clock)
        if failure is not None:
            session.set_status("Can't open! I/O error: %s", failure.reason)
        else:
            session.set_status(HELP_MESSAGE)
        return session

    # -- shortcuts -------------------------------------------------------

    @property
    def document(self) -> Document:
        return self.buffer.document

    @property
    def cursor(self) -> CursorState:
        return self.buffer.cursor

    # -- status ----------------------------------------------------------

    def set_status(self, fmt: str, *args: object) -> None:
        self.status = StatusMessage(
            text=fmt % args if args else fmt, stamp=self._clock()
        )

    def visible_status(self) -> str:
        status = self.status
        if status.text and self._clock() - status.stamp < self.settings.status_timeout:
            return status.text
        return ""

    # -- geometry --------------------------------------------------------

    def resize(self, screen_rows: int, screen_cols: int) -> None:
        """Apply terminal dimensions; two lines are reserved for status."""

        self.viewport.resize(screen_rows - STATUS_LINES, screen_cols)
        self.scroll()

    def scroll(self) -> None:
        self.viewport.scroll(self.buffer.document, self.buffer.cursor)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            cursor=self.buffer.cursor.copy(), viewport=self.viewport.copy()
        )

    def restore(self, snapshot: SessionSnapshot) -> None:
        self.buffer.cursor = snapshot.cursor.copy()
        self.viewport = snapshot.viewport.copy()

    # -- file and lifecycle ----------------------------------------------

    def save(self) -> bool:
        """Save to the bound filename, reporting the outcome in the status."""

        try:
            written = self.buffer.save()
        except DocumentIOError as exc:
            telemetry.record_event(
                "document.save_failed",
                level="warning",
                data={"path": exc.path, "reason": exc.reason},
            )
            self.set_status("Can't save! I/O error: %s", exc.reason)
            return False
        self.set_status("%d bytes written to disk", written)
        return True

    def request_quit(self) -> bool:
        """Return ``True`` when the session may end now."""

        if self.buffer.document.modified and self.quit_remaining > 0:
            self.set_status(
                "WARNING! File has unsaved changes. "
                "Press Ctrl-Q %d more times to quit.",
                self.quit_remaining,
            )
            self.quit_remaining -= 1
            return False
        telemetry.record_event("session.quit", data={"buffer": self.buffer.name})
        return True

    def reset_quit_guard(self) -> None:
        self.quit_remaining = self.settings.quit_times


__all__ = [
    "EditorSession",
    "SessionSnapshot",
    "StatusMessage",
    "HELP_MESSAGE",
    "STATUS_LINES",
]
