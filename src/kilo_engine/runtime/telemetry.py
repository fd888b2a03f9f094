"""Structured logging and profiling for the editor, backed by telelog.

Public surface:

``configure(...)`` -- install a preset or explicit telelog configuration
``get_logger(name)`` -- cached, configured logger per component
``record_event(name, ...)`` -- one structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "KILO_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "kilo_engine")

_PRESETS = ("development", "production", "performance")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _with_profiling(config: Any) -> Any:
    config.with_profiling(True)
    return config


def _preset_config(preset: str) -> Any:
    key = preset.lower()
    if key not in _PRESETS:
        raise ValueError(f"Unknown preset '{preset}'.")

    config = tl.Config()
    if key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
        config.with_json_format(False)
    elif key == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "kilo_engine.log")
        config.with_buffering(True)
    else:
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_file_output(_env("LOG_FILE") or "kilo_engine-performance.log")
    return _with_profiling(config)


def _env_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = not _env_flag("DISABLE_CONSOLE", False)
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR", False))

    if _env_flag("LOG_JSON", False):
        config.with_json_format(True)

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    if _env_flag("LOG_BUFFERED", False):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))

    return _with_profiling(config)


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    Parameters
    ----------
    config:
        Explicit ``telelog.Config`` to adopt.
    preset:
        One of ``"development"``, ``"production"`` or ``"performance"``.
        Mutually exclusive with ``config``. With neither, the configuration is
        rebuilt from ``KILO_ENGINE_*`` environment variables.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = _preset_config(preset)
    elif config is None:
        config = _env_config()

    _ACTIVE_CONFIG = _with_profiling(config)
    _LOGGER_CACHE.clear()


def _active_config() -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _env_config()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` for ``name``."""

    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _active_config())
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _level_method(logger: Any, level: Any) -> Tuple[Any, bool]:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _emit(logger: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    method, structured = _level_method(logger, level)
    if structured:
        method(message, _pairs(payload))
    else:
        method(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach results to the span."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _report(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update(extra)
        _emit(self.logger, level, message, payload)

    def fail(self, reason: str) -> None:
        self._report("error", "span::fail", {"reason": reason})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the enclosed block under ``name``.

    ``component=True`` tracks the block as a component of the same name, a
    string names the component explicitly. ``metadata`` is pushed as logger
    context for the duration of the block and copied onto the handle.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    elif isinstance(component, str):
        component_name = component
    else:
        component_name = None

    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(context),
        )
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context:
                log.remove_context(key)


configure()

__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
