"""Default mode: bound keys run actions, other printable keys insert text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from kilo_engine.actions.editing import insert_text
from kilo_engine.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeResult

if TYPE_CHECKING:  # pragma: no cover
    from kilo_engine.keymaps import KeymapRegistry, ResolutionMatch

LOGGER_NAME = "kilo_engine.modes.edit"


class EditMode(Mode):
    name = "edit"

    @property
    def registry(self) -> Optional[KeymapRegistry]:
        return self.context.extras.get("keymap_registry")  # type: ignore[return-value]

    def handle_key(self, key: KeyInput) -> ModeResult:
        registry = self.registry
        match = registry.resolve(self.name, key.key, key.modifiers) if registry else None
        if match is not None:
            return self._execute_match(match)

        char = key.printable
        if char is None:
            return ModeResult(consumed=False, status="miss", message="unbound")
        return insert_text(self.context, char)

    def _execute_match(self, match: ResolutionMatch) -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            logger_name=LOGGER_NAME,
            component="keymaps",
            metadata={
                "binding_id": match.binding.id,
                "action": match.action.id,
                "description": match.action.description,
            },
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["EditMode"]
