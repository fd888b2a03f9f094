"""Per-frame output surface: visible rows, status lines and cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from kilo_engine.runtime.config import VERSION
from kilo_engine.session import EditorSession
from kilo_engine.syntax.highlight import HighlightClass

FILENAME_WIDTH = 20


@dataclass(slots=True)
class FrameRow:
    text: str
    highlight: List[HighlightClass] = field(default_factory=list)
    filler: bool = False


@dataclass(slots=True)
class Frame:
    """Everything a terminal writer needs to paint one screen."""

    cols: int
    rows: List[FrameRow]
    status_left: str
    status_right: str
    message: str
    message_right: str
    cursor: Tuple[int, int]

    def status_bar(self) -> str:
        return _justify(self.status_left, self.status_right, self.cols)

    def message_bar(self) -> str:
        return _justify(self.message, self.message_right, self.cols)


def _justify(left: str, right: str, width: int) -> str:
    left = left[:width]
    gap = width - len(left) - len(right)
    if gap < 0:
        return left.ljust(width)
    return left + " " * gap + right


def _filler_row(document_empty: bool, y: int, rows: int, cols: int) -> FrameRow:
    if document_empty and y == rows // 3:
        welcome = f"Kilo editor -- version {VERSION}"[:cols]
        padding = (cols - len(welcome)) // 2
        text = ("~" + " " * (padding - 1) if padding else "") + welcome
    else:
        text = "~"
    return FrameRow(
        text=text, highlight=[HighlightClass.NORMAL] * len(text), filler=True
    )


def compose_frame(session: EditorSession) -> Frame:
    """Scroll the viewport to the cursor and slice out the visible state."""

    session.scroll()
    viewport = session.viewport
    document = session.document
    cursor = session.cursor
    match = session.search.match

    visible: List[FrameRow] = []
    start = viewport.col_offset
    stop = viewport.col_offset + viewport.cols
    for y in range(viewport.rows):
        filerow = viewport.row_offset + y
        row = document.row(filerow)
        if row is None:
            visible.append(
                _filler_row(document.row_count == 0, y, viewport.rows, viewport.cols)
            )
            continue
        highlight = row.highlight
        if match is not None and match.row == filerow:
            highlight = match.overlay(highlight)
        visible.append(
            FrameRow(text=row.render[start:stop], highlight=highlight[start:stop])
        )

    rules = document.rule_set
    modified = " (modified)" if document.modified else ""
    return Frame(
        cols=viewport.cols,
        rows=visible,
        status_left=(
            f"{session.buffer.name[:FILENAME_WIDTH]} - "
            f"{document.row_count} lines{modified}"
        ),
        status_right=(
            f"{rules.name if rules else 'no ft'} | "
            f"{cursor.cy + 1}/{document.row_count}"
        ),
        message=session.visible_status() or session.settings.greeting,
        message_right=f"Col: {cursor.rx + 1}/{viewport.cols}",
        cursor=viewport.screen_position(cursor),
    )


__all__ = ["Frame", "FrameRow", "compose_frame"]
