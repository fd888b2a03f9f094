"""Editor settings resolved from ``KILO_ENGINE_*`` environment variables."""

from __future__ import annotations

import getpass
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

VERSION = "0.1.0"

TAB_STOP = 8
QUIT_TIMES = 3
STATUS_TIMEOUT = 5.0
QUERY_MAX_LENGTH = 256
GREETING_SUFFIX = " Atreides"


def login_greeting() -> str:
    """Message bar filler shown while no status message is visible."""

    try:
        user = getpass.getuser()
    except (OSError, KeyError):
        return "Unknown"
    return f"{user}{GREETING_SUFFIX}"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _env_float(env: Mapping[str, str], key: str, fallback: float) -> float:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = float(value)
    except ValueError:
        return fallback
    return parsed if parsed >= 0 else fallback


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """Tunables shared by every component of one editing session."""

    tab_stop: int = TAB_STOP
    quit_times: int = QUIT_TIMES
    status_timeout: float = STATUS_TIMEOUT
    query_max_length: int = QUERY_MAX_LENGTH
    greeting: str = ""

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        source = os.environ if env is None else env
        return cls(
            tab_stop=_env_int(source, "TAB_STOP", TAB_STOP),
            quit_times=_env_int(source, "QUIT_TIMES", QUIT_TIMES),
            status_timeout=_env_float(source, "STATUS_TIMEOUT", STATUS_TIMEOUT),
            query_max_length=_env_int(source, "QUERY_MAX", QUERY_MAX_LENGTH),
            greeting=source.get(f"{ENV_PREFIX}GREETING") or login_greeting(),
        )


__all__ = [
    "EditorSettings",
    "VERSION",
    "TAB_STOP",
    "QUIT_TIMES",
    "STATUS_TIMEOUT",
    "QUERY_MAX_LENGTH",
    "login_greeting",
]
