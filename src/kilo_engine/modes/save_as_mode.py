"""Filename prompt shown when saving an unnamed buffer."""

from __future__ import annotations

from kilo_engine.runtime import telemetry

from .base_mode import KeyInput, ModeResult
from .prompt_mode import PromptMode


class SaveAsMode(PromptMode):
    name = "save_as"
    template = "Save as: %s (ESC to cancel)"

    def handle_key(self, key: KeyInput) -> ModeResult:
        session = self.session
        if key.key == "ESC":
            session.set_status("Save aborted")
            return ModeResult(consumed=True, switch_to="edit", status="cancelled")

        if key.key == "ENTER":
            filename = self.text
            if not filename:
                return ModeResult(consumed=True, status="editing")
            with telemetry.span(
                "mode::save_as::commit",
                component="modes",
                metadata={"filename": filename},
            ):
                session.buffer.rename(filename)
                saved = session.save()
            self.context.bus.emit(
                "document.saved" if saved else "document.save_failed", session
            )
            return ModeResult(
                consumed=True,
                switch_to="edit",
                status="saved" if saved else "error",
                message=filename,
            )

        if self._edit_text(key):
            self._show()
            return ModeResult(consumed=True, status="editing")
        return ModeResult(consumed=True, status="ignored")


__all__ = ["SaveAsMode"]
