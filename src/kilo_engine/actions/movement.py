"""Cursor movement verbs bound in edit mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kilo_engine.buffer import Direction
from kilo_engine.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from kilo_engine.keymaps.registry import ResolutionMatch


def _move(context: ModeContext, direction: Direction) -> ModeResult:
    context.session.buffer.move(direction)
    return ModeResult(consumed=True)


def move_left(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "left")


def move_right(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "right")


def move_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "up")


def move_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return _move(context, "down")


def move_home(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.buffer.move_home()
    return ModeResult(consumed=True)


def move_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.buffer.move_end()
    return ModeResult(consumed=True)


def page_up(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Jump to the top of the window, then one screen further up."""

    del match
    session = context.session
    session.cursor.cy = session.viewport.row_offset
    for _ in range(session.viewport.rows):
        session.buffer.move("up")
    return ModeResult(consumed=True)


def page_down(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Jump to the bottom of the window, then one screen further down."""

    del match
    session = context.session
    viewport = session.viewport
    session.cursor.cy = min(
        viewport.row_offset + viewport.rows - 1, session.document.row_count
    )
    for _ in range(viewport.rows):
        session.buffer.move("down")
    return ModeResult(consumed=True)


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_home",
    "move_end",
    "page_up",
    "page_down",
]
