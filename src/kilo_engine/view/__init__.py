"""Viewport management."""

from .viewport import Viewport

__all__ = ["Viewport"]
