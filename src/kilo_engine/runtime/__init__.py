"""Runtime services: telemetry and settings."""

from . import telemetry
from .config import EditorSettings

__all__ = ["telemetry", "EditorSettings"]
