"""Save, find, quit and no-op commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kilo_engine.modes.base_mode import QUIT_PENDING, ModeContext, ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from kilo_engine.keymaps.registry import ResolutionMatch


def save_document(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Save to the bound filename or prompt for one."""

    del match
    session = context.session
    if not session.buffer.filename:
        return ModeResult(consumed=True, switch_to="save_as", message="save_as")
    saved = session.save()
    context.bus.emit("document.saved" if saved else "document.save_failed", session)
    return ModeResult(consumed=True, status="saved" if saved else "error")


def start_search(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    return ModeResult(consumed=True, switch_to="search", message="search")


def quit_editor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    """Quit, unless unsaved changes still need confirming."""

    del match
    session = context.session
    if not session.request_quit():
        return ModeResult(consumed=True, status=QUIT_PENDING)
    context.bus.emit("session.quit", session)
    return ModeResult(consumed=True, status="quit")


def noop_action(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = ["save_document", "start_search", "quit_editor", "noop_action"]
