"""Ordered row storage: the single owner of all text in a session."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from kilo_engine.runtime.config import TAB_STOP
from kilo_engine.syntax.highlight import SyntaxHighlighter
from kilo_engine.syntax.rules import RuleSet

from .row import Row

ENCODING = "latin-1"


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and drop trailing ``\\r``/``\\n`` from every line.

    A final terminator does not produce an extra empty row.
    """

    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.rstrip("\r\n") for line in lines]


class Document:
    """List-of-rows text model with a modification counter.

    Rows live in a plain list, so structural edits shift every following row
    (O(n)) and renumber them; ``rows[i].index == i`` holds after every call.
    Row objects obtained before a structural edit must be fetched again.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        rules: Optional[RuleSet] = None,
        tab_stop: int = TAB_STOP,
        logger_name: str | None = None,
    ) -> None:
        self.tab_stop = tab_stop
        self.highlighter = SyntaxHighlighter(rules, logger_name=logger_name)
        self._rows: List[Row] = [
            Row(index=i, raw=line, tab_stop=tab_stop) for i, line in enumerate(lines)
        ]
        self.dirty = 0
        self.highlighter.refresh_all(self._rows)

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "Document":
        return cls(split_lines(text), **kwargs)

    @classmethod
    def from_bytes(cls, data: bytes, **kwargs) -> "Document":
        return cls.from_text(data.decode(ENCODING), **kwargs)

    # -- read access -----------------------------------------------------

    @property
    def rows(self) -> Sequence[Row]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def row(self, index: int) -> Optional[Row]:
        if 0 <= index < len(self._rows):
            return self._rows[index]
        return None

    def lines(self) -> List[str]:
        return [row.raw for row in self._rows]

    def to_text(self) -> str:
        return "".join(f"{row.raw}\n" for row in self._rows)

    def to_bytes(self) -> bytes:
        return self.to_text().encode(ENCODING)

    # -- syntax ----------------------------------------------------------

    @property
    def rule_set(self) -> Optional[RuleSet]:
        return self.highlighter.rules

    def set_rule_set(self, rules: Optional[RuleSet]) -> None:
        self.highlighter.rules = rules
        self.highlighter.refresh_all(self._rows)

    # -- modification tracking -------------------------------------------

    @property
    def modified(self) -> bool:
        return self.dirty > 0

    def mark_clean(self) -> None:
        self.dirty = 0

    def _touch(self) -> None:
        self.dirty += 1

    # -- structural edits ------------------------------------------------

    def _renumber(self, start: int) -> None:
        for index in range(start, len(self._rows)):
            self._rows[index].index = index

    def insert_row(self, at: int, text: str = "") -> Row:
        at = max(0, min(at, len(self._rows)))
        row = Row(index=at, raw=text, tab_stop=self.tab_stop)
        # Seed with the state the following row currently receives so a
        # change caused by the new row is detected and cascaded.
        row.comment_open = at > 0 and self._rows[at - 1].comment_open
        self._rows.insert(at, row)
        self._renumber(at + 1)
        self.highlighter.refresh(self._rows, at)
        self._touch()
        return row

    def append_row(self, text: str = "") -> Row:
        return self.insert_row(len(self._rows), text)

    def delete_row(self, at: int) -> Optional[Row]:
        if not self._rows:
            return None
        at = max(0, min(at, len(self._rows) - 1))
        removed = self._rows.pop(at)
        self._renumber(at)
        self.highlighter.refresh(self._rows, at)
        self._touch()
        return removed

    def split_row(self, index: int, at: int) -> Optional[Row]:
        """Move the text right of ``at`` onto a new row below ``index``."""

        row = self.row(index)
        if row is None:
            return None
        tail = row.truncate(at)
        self.highlighter.refresh(self._rows, index)
        self._touch()
        return self.insert_row(index + 1, tail)

    def join_rows(self, index: int) -> int:
        """Append row ``index + 1`` onto row ``index``; return the join column."""

        row = self.row(index)
        below = self.row(index + 1)
        if row is None:
            return 0
        column = len(row.raw)
        if below is None:
            return column
        self.append_text(index, below.raw)
        self.delete_row(index + 1)
        return column

    # -- content edits ---------------------------------------------------

    def _edit_target(self, index: int) -> Optional[Row]:
        if not self._rows:
            return None
        return self._rows[max(0, min(index, len(self._rows) - 1))]

    def set_row_text(self, index: int, text: str) -> None:
        row = self._edit_target(index)
        if row is None:
            return
        row.set_raw(text)
        self.highlighter.refresh(self._rows, row.index)
        self._touch()

    def insert_char(self, index: int, at: int, char: str) -> None:
        row = self._edit_target(index)
        if row is None:
            return
        row.insert_char(at, char)
        self.highlighter.refresh(self._rows, row.index)
        self._touch()

    def delete_char(self, index: int, at: int) -> None:
        row = self._edit_target(index)
        if row is None:
            return
        if row.delete_char(at):
            self.highlighter.refresh(self._rows, row.index)
            self._touch()

    def append_text(self, index: int, text: str) -> None:
        row = self._edit_target(index)
        if row is None:
            return
        row.append_text(text)
        self.highlighter.refresh(self._rows, row.index)
        self._touch()


__all__ = ["Document", "ENCODING", "split_lines"]
