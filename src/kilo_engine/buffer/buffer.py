"""High-level buffer façade combining document, cursor and file binding."""

from __future__ import annotations

import os
from contextlib import AbstractContextManager
from typing import ContextManager, Literal, Optional

from kilo_engine.runtime import telemetry
from kilo_engine.runtime.config import TAB_STOP
from kilo_engine.syntax.rules import RuleSet, select_rule_set

from .document import Document
from .persistence import load_document, save_document
from .state import CursorState, clamp_cursor

Direction = Literal["left", "right", "up", "down"]


class Buffer:
    """Cursor-level editing on top of a :class:`Document`."""

    def __init__(
        self,
        *,
        document: Optional[Document] = None,
        cursor: Optional[CursorState] = None,
        filename: Optional[str] = None,
        tab_stop: int = TAB_STOP,
    ) -> None:
        self.document = (
            document if document is not None else Document(tab_stop=tab_stop)
        )
        self.cursor = cursor if cursor is not None else CursorState()
        self.filename = filename
        self.tab_stop = tab_stop

    @classmethod
    def from_text(
        cls, text: str, *, filename: Optional[str] = None, tab_stop: int = TAB_STOP
    ) -> "Buffer":
        buffer = cls(
            document=Document.from_text(text, tab_stop=tab_stop),
            filename=filename,
            tab_stop=tab_stop,
        )
        buffer.select_rules()
        buffer.document.mark_clean()
        return buffer

    @classmethod
    def open(
        cls, path: str | os.PathLike[str], *, tab_stop: int = TAB_STOP
    ) -> "Buffer":
        filename = os.fspath(path)
        rules = select_rule_set(filename)
        document = load_document(filename, rules=rules, tab_stop=tab_stop)
        return cls(document=document, filename=filename, tab_stop=tab_stop)

    @property
    def name(self) -> str:
        return self.filename or "[No Name]"

    @property
    def rule_set(self) -> Optional[RuleSet]:
        return self.document.rule_set

    def select_rules(self) -> Optional[RuleSet]:
        with telemetry.span(
            "syntax::select", component="syntax", metadata={"buffer": self.name}
        ) as handle:
            rules = select_rule_set(self.filename)
            handle.add_metadata("rules", rules.name if rules else "none")
            self.document.set_rule_set(rules)
        return rules

    def rename(self, filename: str) -> None:
        self.filename = filename
        self.select_rules()

    def save(self) -> int:
        """Write the document to ``filename`` and mark it clean.

        Raises :class:`DocumentIOError`; on failure the document keeps its
        modification count.
        """

        if not self.filename:
            raise ValueError("Buffer has no filename")
        written = save_document(self.document, self.filename)
        self.document.mark_clean()
        return written

    # -- editing ---------------------------------------------------------

    def _transaction(self, label: str) -> ContextManager[object]:
        return Transaction(self, label)

    def insert_char(self, char: str) -> None:
        with self._transaction("insert_char"):
            cursor = self.cursor
            if cursor.cy == self.document.row_count:
                self.document.append_row("")
            self.document.insert_char(cursor.cy, cursor.cx, char)
            cursor.cx += 1

    def insert_newline(self) -> None:
        with self._transaction("insert_newline"):
            cursor = self.cursor
            if cursor.cx == 0 or cursor.cy >= self.document.row_count:
                self.document.insert_row(cursor.cy, "")
            else:
                self.document.split_row(cursor.cy, cursor.cx)
            cursor.set(0, cursor.cy + 1)

    def delete_char(self) -> None:
        """Backspace: remove the character left of the cursor or join rows."""

        cursor = self.cursor
        if cursor.cy >= self.document.row_count:
            return
        if cursor.cx == 0 and cursor.cy == 0:
            return
        with self._transaction("delete_char"):
            if cursor.cx > 0:
                self.document.delete_char(cursor.cy, cursor.cx - 1)
                cursor.cx -= 1
            else:
                column = self.document.join_rows(cursor.cy - 1)
                cursor.set(column, cursor.cy - 1)

    def delete_forward(self) -> None:
        self.move("right")
        self.delete_char()

    # -- movement --------------------------------------------------------

    def move(self, direction: Direction) -> None:
        cursor = self.cursor
        row = self.document.row(cursor.cy)
        if direction == "left":
            if cursor.cx > 0:
                cursor.cx -= 1
            elif cursor.cy > 0:
                cursor.cy -= 1
                cursor.cx = len(self.document.rows[cursor.cy].raw)
        elif direction == "right":
            if row is not None and cursor.cx < len(row.raw):
                cursor.cx += 1
            elif row is not None:
                cursor.set(0, cursor.cy + 1)
        elif direction == "up":
            if cursor.cy > 0:
                cursor.cy -= 1
        elif direction == "down":
            if cursor.cy < self.document.row_count:
                cursor.cy += 1
        else:
            raise ValueError(f"Unknown direction '{direction}'")
        clamp_cursor(self.document, cursor)

    def move_home(self) -> None:
        self.cursor.cx = 0

    def move_end(self) -> None:
        row = self.document.row(self.cursor.cy)
        if row is not None:
            self.cursor.cx = len(row.raw)


class Transaction(AbstractContextManager["Transaction"]):
    """Profiles one editing verb and re-validates the cursor afterwards."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            clamp_cursor(self.buffer.document, self.buffer.cursor)
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "Direction", "Transaction"]
