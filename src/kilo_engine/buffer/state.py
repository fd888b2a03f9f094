"""Cursor position tracking for buffers."""

from __future__ import annotations

from dataclasses import dataclass

from .document import Document


@dataclass(slots=True)
class CursorState:
    """Logical cursor: raw column ``cx`` on row ``cy``.

    ``cy`` may equal the row count (the empty line past the end of the file).
    ``rx`` is the rendered column of ``cx`` and is refreshed by the viewport.
    """

    cx: int = 0
    cy: int = 0
    rx: int = 0

    def set(self, cx: int, cy: int) -> None:
        self.cx = cx
        self.cy = cy

    def copy(self) -> "CursorState":
        return CursorState(cx=self.cx, cy=self.cy, rx=self.rx)


def clamp_cursor(document: Document, cursor: CursorState) -> CursorState:
    """Pull ``cursor`` back inside ``document`` in place and return it."""

    cursor.cy = max(0, min(cursor.cy, document.row_count))
    row = document.row(cursor.cy)
    limit = len(row.raw) if row is not None else 0
    cursor.cx = max(0, min(cursor.cx, limit))
    return cursor


def rendered_column(document: Document, cursor: CursorState) -> int:
    row = document.row(cursor.cy)
    if row is None:
        return 0
    return row.cx_to_rx(cursor.cx)


__all__ = ["CursorState", "clamp_cursor", "rendered_column"]
