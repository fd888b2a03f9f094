"""Line buffer: rows, document, cursor state and persistence."""

from .buffer import Buffer, Direction, Transaction
from .coords import expand_tabs, raw_to_rendered, rendered_to_raw
from .document import Document, split_lines
from .persistence import DocumentIOError, load_document, save_document
from .row import Row
from .state import CursorState, clamp_cursor, rendered_column

__all__ = [
    "Buffer",
    "Direction",
    "Transaction",
    "Document",
    "Row",
    "CursorState",
    "DocumentIOError",
    "clamp_cursor",
    "expand_tabs",
    "load_document",
    "raw_to_rendered",
    "rendered_column",
    "rendered_to_raw",
    "save_document",
    "split_lines",
]
