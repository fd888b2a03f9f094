"""Built-in key table for edit mode."""

from __future__ import annotations

from kilo_engine.actions import commands as command_actions
from kilo_engine.actions import editing as editing_actions
from kilo_engine.actions import movement as movement_actions

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

EDIT_MODE = "edit"

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.newline",
        handler=editing_actions.insert_newline,
        description="Split the row at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="edit.delete_forward",
        handler=editing_actions.delete_forward,
        description="Delete the character under the cursor",
    ),
    ActionRef(id="move.up", handler=movement_actions.move_up, description="Cursor up"),
    ActionRef(
        id="move.down", handler=movement_actions.move_down, description="Cursor down"
    ),
    ActionRef(
        id="move.left", handler=movement_actions.move_left, description="Cursor left"
    ),
    ActionRef(
        id="move.right", handler=movement_actions.move_right, description="Cursor right"
    ),
    ActionRef(
        id="move.page_up", handler=movement_actions.page_up, description="Page up"
    ),
    ActionRef(
        id="move.page_down", handler=movement_actions.page_down, description="Page down"
    ),
    ActionRef(
        id="move.home", handler=movement_actions.move_home, description="Start of row"
    ),
    ActionRef(id="move.end", handler=movement_actions.move_end, description="End of row"),
    ActionRef(
        id="command.save",
        handler=command_actions.save_document,
        description="Save the buffer",
    ),
    ActionRef(
        id="command.find",
        handler=command_actions.start_search,
        description="Incremental search",
    ),
    ActionRef(
        id="command.quit",
        handler=command_actions.quit_editor,
        description="Quit the editor",
    ),
    ActionRef(id="core.noop", handler=command_actions.noop_action, description="Ignore"),
)

_KEY_TABLE: tuple[tuple[str, str], ...] = (
    ("ENTER", "edit.newline"),
    ("BACKSPACE", "edit.delete_backward"),
    ("ctrl+h", "edit.delete_backward"),
    ("DELETE", "edit.delete_forward"),
    ("UP", "move.up"),
    ("DOWN", "move.down"),
    ("LEFT", "move.left"),
    ("RIGHT", "move.right"),
    ("PAGE_UP", "move.page_up"),
    ("PAGE_DOWN", "move.page_down"),
    ("HOME", "move.home"),
    ("END", "move.end"),
    ("ctrl+s", "command.save"),
    ("ctrl+f", "command.find"),
    ("ctrl+q", "command.quit"),
    ("ESC", "core.noop"),
    ("ctrl+l", "core.noop"),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=f"{EDIT_MODE}.{key.lower().replace('+', '_')}",
        mode=EDIT_MODE,
        stroke=KeyStroke.parse(key),
        action_id=action_id,
    )
    for key, action_id in _KEY_TABLE
)


def load_default_keymaps(registry: KeymapRegistry) -> None:
    """Register built-in actions and the edit-mode key table."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "EDIT_MODE"]
