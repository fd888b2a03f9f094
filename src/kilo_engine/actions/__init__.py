"""Editing verbs reused across modes."""

from .commands import noop_action, quit_editor, save_document, start_search
from .editing import delete_backward, delete_forward, insert_newline, insert_text
from .movement import (
    move_down,
    move_end,
    move_home,
    move_left,
    move_right,
    move_up,
    page_down,
    page_up,
)

__all__ = [
    "noop_action",
    "quit_editor",
    "save_document",
    "start_search",
    "delete_backward",
    "delete_forward",
    "insert_newline",
    "insert_text",
    "move_down",
    "move_end",
    "move_home",
    "move_left",
    "move_right",
    "move_up",
    "page_down",
    "page_up",
]
