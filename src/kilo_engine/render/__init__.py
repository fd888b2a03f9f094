"""Frame composition and terminal painting."""

from .ansi import paint
from .frame import Frame, FrameRow, compose_frame

__all__ = ["Frame", "FrameRow", "compose_frame", "paint"]
