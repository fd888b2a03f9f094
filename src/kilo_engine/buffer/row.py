"""A single line of text and the state derived from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from kilo_engine.runtime.config import TAB_STOP
from kilo_engine.syntax.highlight import HighlightClass

from .coords import expand_tabs, raw_to_rendered, rendered_to_raw


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(slots=True)
class Row:
    """Raw text plus its tab-expanded render and highlight.

    ``render`` is rebuilt on every change to ``raw``; ``highlight`` is owned
    by the document's highlighter and always matches ``render`` in length
    once the document has refreshed the row.
    """

    index: int
    raw: str = ""
    tab_stop: int = TAB_STOP
    render: str = ""
    highlight: List[HighlightClass] = field(default_factory=list)
    comment_open: bool = False

    def __post_init__(self) -> None:
        self._rebuild()

    def __len__(self) -> int:
        return len(self.raw)

    def _rebuild(self) -> None:
        self.render = expand_tabs(self.raw, self.tab_stop)
        self.highlight = [HighlightClass.NORMAL] * len(self.render)

    def set_raw(self, text: str) -> None:
        self.raw = text
        self._rebuild()

    def insert_char(self, at: int, char: str) -> None:
        at = _clamp(at, 0, len(self.raw))
        self.set_raw(self.raw[:at] + char + self.raw[at:])

    def delete_char(self, at: int) -> bool:
        """Remove the character at ``at`` (clamped); ``False`` on an empty row."""

        if not self.raw:
            return False
        at = _clamp(at, 0, len(self.raw) - 1)
        self.set_raw(self.raw[:at] + self.raw[at + 1 :])
        return True

    def append_text(self, text: str) -> None:
        self.set_raw(self.raw + text)

    def truncate(self, at: int) -> str:
        """Cut the row at ``at`` and return the removed tail."""

        at = _clamp(at, 0, len(self.raw))
        tail = self.raw[at:]
        self.set_raw(self.raw[:at])
        return tail

    def cx_to_rx(self, cx: int) -> int:
        return raw_to_rendered(self.raw, cx, self.tab_stop)

    def rx_to_cx(self, rx: int) -> int:
        return rendered_to_raw(self.raw, rx, self.tab_stop)


__all__ = ["Row"]
