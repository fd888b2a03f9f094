"""VT100 painter: turns a :class:`Frame` into one escape-sequence string."""

from __future__ import annotations

from typing import Dict, List

from kilo_engine.syntax.highlight import HighlightClass

from .frame import Frame, FrameRow

CLEAR_LINE = "\x1b[K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
HOME = "\x1b[H"
INVERT = "\x1b[7m"
RESET = "\x1b[m"
DEFAULT_FG = "\x1b[39m"

ANSI_COLORS: Dict[HighlightClass, int] = {
    HighlightClass.COMMENT: 36,
    HighlightClass.BLOCK_COMMENT: 36,
    HighlightClass.KEYWORD1: 33,
    HighlightClass.KEYWORD2: 32,
    HighlightClass.STRING: 35,
    HighlightClass.NUMBER: 31,
    HighlightClass.MATCH: 34,
}


def _paint_row(row: FrameRow, out: List[str]) -> None:
    current = None
    for char, klass in zip(row.text, row.highlight):
        color = ANSI_COLORS.get(klass)
        if color != current:
            out.append(DEFAULT_FG if color is None else f"\x1b[{color}m")
            current = color
        out.append(char)
    if current is not None:
        out.append(DEFAULT_FG)


def paint(frame: Frame) -> str:
    out: List[str] = [HIDE_CURSOR, HOME]
    for row in frame.rows:
        _paint_row(row, out)
        out.append(CLEAR_LINE)
        out.append("\r\n")

    out.append(INVERT)
    out.append(frame.status_bar())
    out.append(RESET)
    out.append("\r\n")
    out.append(INVERT)
    out.append(CLEAR_LINE)
    out.append(frame.message_bar())
    out.append(RESET)

    row, col = frame.cursor
    out.append(f"\x1b[{row + 1};{col + 1}H")
    out.append(SHOW_CURSOR)
    return "".join(out)


__all__ = ["ANSI_COLORS", "paint"]
