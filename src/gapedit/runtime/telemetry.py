"""telelog wiring for gapedit.

Loggers are cached per name and rebuilt whenever ``configure`` installs a new
configuration. Settings come from ``GAPEDIT_*`` environment variables unless a
preset or an explicit ``telelog.Config`` is given.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "GAPEDIT_"
ROOT_LOGGER = "gapedit"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _setting(name: str) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name) or None


def _enabled(name: str) -> bool:
    return (_setting(name) or "").lower() in {"1", "true", "yes", "on"}


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _from_environment() -> Any:
    config = tl.Config()
    config.with_min_level((_setting("LOG_LEVEL") or "WARNING").upper())
    config.with_console_output(not _enabled("DISABLE_CONSOLE"))
    config.with_colored_output(not _enabled("NO_COLOR"))
    config.with_json_format(_enabled("LOG_JSON"))
    if _setting("LOG_FILE"):
        config.with_file_output(_setting("LOG_FILE"))
    if _enabled("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_setting("LOG_BUFFER_SIZE") or "2048"))
    config.with_profiling(_enabled("PROFILE"))
    return config


def _development() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(True)
    config.with_colored_output(True)
    return config


def _quiet() -> Any:
    # the Textual app owns the terminal, so only a log file is allowed
    config = tl.Config()
    config.with_min_level("WARNING")
    config.with_console_output(False)
    if _setting("LOG_FILE"):
        config.with_file_output(_setting("LOG_FILE"))
    return config


def _profiling() -> Any:
    config = tl.Config()
    config.with_min_level("DEBUG")
    config.with_console_output(False)
    config.with_json_format(True)
    config.with_buffering(True)
    config.with_file_output(_setting("LOG_FILE") or "gapedit-profile.log")
    config.with_profiling(True)
    return config


PRESETS: Dict[str, Callable[[], Any]] = {
    "development": _development,
    "quiet": _quiet,
    "profiling": _profiling,
}


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Install ``config``, a named preset, or the environment defaults."""

    global _config
    if config is not None and preset:
        raise ValueError("pass either config or preset, not both")
    if preset:
        try:
            config = PRESETS[preset.lower()]()
        except KeyError:
            raise ValueError(f"unknown telemetry preset {preset!r}") from None
    _config = config if config is not None else _from_environment()
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    key = name or ROOT_LOGGER
    logger = _loggers.get(key)
    if logger is None:
        if _config is None:
            configure()
        logger = _loggers[key] = tl.Logger.with_config(key, _config)
    return logger


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    method = getattr(logger, f"{level.lower()}_with", None)
    if method is None:
        raise ValueError(f"unsupported log level {level!r}")
    method(message, _pairs(data))


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach fields to the failure record."""

    logger: Any
    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.fields[key] = str(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.name, **self.fields, "reason": reason}
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally as a tracked component.

    ``component=True`` names the component after the span. ``metadata`` is
    pushed as logger context while the block runs. Exceptions are logged and
    re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: str(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(log, name, dict(context))

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
