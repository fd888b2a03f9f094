"""Text-changing verbs bound in edit mode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kilo_engine.modes.base_mode import ModeContext, ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from kilo_engine.keymaps.registry import ResolutionMatch


def insert_newline(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.buffer.insert_newline()
    return ModeResult(consumed=True)


def delete_backward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.buffer.delete_char()
    return ModeResult(consumed=True)


def delete_forward(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.buffer.delete_forward()
    return ModeResult(consumed=True)


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Insert ``text`` one character at a time at the cursor."""

    buffer = context.session.buffer
    for char in text:
        buffer.insert_char(char)
    return ModeResult(consumed=True)


__all__ = ["insert_newline", "delete_backward", "delete_forward", "insert_text"]
