"""Scroll offsets keeping the cursor inside a fixed rows x cols window."""

from __future__ import annotations

from dataclasses import dataclass

from kilo_engine.buffer.document import Document
from kilo_engine.buffer.state import CursorState, rendered_column


@dataclass(slots=True)
class Viewport:
    """Visible window into a document.

    ``rows`` and ``cols`` describe the text area only; status lines are the
    renderer's business.
    """

    rows: int = 24
    cols: int = 80
    row_offset: int = 0
    col_offset: int = 0

    def resize(self, rows: int, cols: int) -> None:
        self.rows = max(1, rows)
        self.cols = max(1, cols)

    def scroll(self, document: Document, cursor: CursorState) -> None:
        """Refresh ``cursor.rx`` and move the offsets so the cursor is visible."""

        cursor.rx = rendered_column(document, cursor)

        if cursor.cy < self.row_offset:
            self.row_offset = cursor.cy
        if cursor.cy >= self.row_offset + self.rows:
            self.row_offset = cursor.cy - self.rows + 1
        if cursor.rx < self.col_offset:
            self.col_offset = cursor.rx
        if cursor.rx >= self.col_offset + self.cols:
            self.col_offset = cursor.rx - self.cols + 1

        self.row_offset = max(0, self.row_offset)
        self.col_offset = max(0, self.col_offset)

    def reveal(self, document: Document, cursor: CursorState) -> None:
        """Scroll so the cursor row is the first visible row."""

        self.row_offset = cursor.cy
        self.scroll(document, cursor)

    def screen_position(self, cursor: CursorState) -> tuple[int, int]:
        """Zero-based ``(row, col)`` of the cursor inside the window."""

        return cursor.cy - self.row_offset, cursor.rx - self.col_offset

    def copy(self) -> "Viewport":
        return Viewport(
            rows=self.rows,
            cols=self.cols,
            row_offset=self.row_offset,
            col_offset=self.col_offset,
        )


__all__ = ["Viewport"]
