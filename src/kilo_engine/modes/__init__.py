"""Editor modes and their shared dispatch types.

``ModeManager`` lives in :mod:`kilo_engine.modes.mode_manager`; it pulls in
the keymap defaults, which in turn import the actions that depend on this
package.
"""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import PromptMode
from .save_as_mode import SaveAsMode
from .search_mode import SearchMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "EditMode",
    "PromptMode",
    "SaveAsMode",
    "SearchMode",
]
