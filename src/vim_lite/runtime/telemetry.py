"""Logging for the editor, backed by telelog.

The editor draws on the terminal it runs in, so records go to a file and
console output only happens when ``VIM_LITE_LOG_CONSOLE`` asks for it.

``configure(...)`` -- rebuild the active telelog configuration
``get_logger(name)`` -- cached logger for a dotted name
``record_event(name, ...)`` -- one structured ``event::<name>`` record
``span(name, ...)`` -- profile a block, optionally as a tracked component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIM_LITE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "vim_lite")


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LogSettings:
    """The knobs the editor turns on a ``telelog.Config``."""

    level: str = "INFO"
    console: bool = False
    colored: bool = False
    json: bool = False
    log_file: str = ""
    buffered: bool = False
    buffer_size: int = 2048

    @classmethod
    def from_env(cls) -> "LogSettings":
        console = _env_flag("LOG_CONSOLE")
        return cls(
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            console=console,
            colored=console and not _env_flag("NO_COLOR"),
            json=_env_flag("LOG_JSON"),
            log_file=_env("LOG_FILE") or "",
            buffered=_env_flag("LOG_BUFFERED"),
            buffer_size=int(_env("LOG_BUFFER_SIZE") or "2048"),
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
            config.with_buffer_size(self.buffer_size)
        # span() depends on logger.profile
        config.with_profiling(True)
        return config


# Presets layer over the environment; each names its own fallback log file.
_PRESET_OVERRIDES: Dict[str, Dict[str, Any]] = {
    "development": {"level": "DEBUG", "json": False},
    "production": {"level": "INFO", "console": False, "buffered": True},
    "performance": {
        "level": "DEBUG",
        "console": False,
        "buffered": True,
        "json": True,
    },
}
_PRESET_LOG_FILES = {
    "development": "vim_lite-dev.log",
    "production": "vim_lite.log",
    "performance": "vim_lite-performance.log",
}
PRESETS: Tuple[str, ...] = tuple(_PRESET_OVERRIDES)


def resolve_settings(
    preset: Optional[str] = None, *, log_file: Optional[str] = None
) -> LogSettings:
    """Combine environment, preset and an explicit log file, in that order."""

    settings = LogSettings.from_env()
    if preset is not None:
        key = preset.lower()
        if key not in _PRESET_OVERRIDES:
            raise ValueError(f"Unknown preset '{preset}'.")
        settings = replace(settings, **_PRESET_OVERRIDES[key])
        if not settings.log_file:
            settings = replace(settings, log_file=_PRESET_LOG_FILES[key])
    if log_file:
        settings = replace(settings, log_file=log_file)
    return settings


_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Swap the active configuration and drop every cached logger.

    ``config`` adopts a ready ``telelog.Config`` as is and cannot be combined
    with ``preset``. Otherwise settings come from ``resolve_settings``.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if config is None:
        config = resolve_settings(preset, log_file=log_file).to_config()
    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        if _ACTIVE_CONFIG is None:
            configure()
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _write(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    level_name = str(level).lower()
    structured = getattr(logger, f"{level_name}_with", None)
    if structured is not None:
        pairs: List[Tuple[str, str]] = [(k, _text(v)) for k, v in fields.items()]
        structured(message, pairs)
        return
    plain = getattr(logger, level_name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    fields = {"event": name, **(data or {})}
    _write(get_logger(logger_name), level, f"event::{name}", fields)


@dataclass
class SpanHandle:
    """Collects metadata while a span is open; reports failures."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        fields: Dict[str, Any] = {"span": self.name, **self.metadata, "reason": reason}
        if self.component:
            fields["component"] = self.component
        _write(self.logger, "error", "span::fail", fields)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``component=True`` also tracks it as a component of the same name; a
    string names the component instead. ``metadata`` is pushed onto the
    logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        log,
        name,
        component=name if component is True else (component or None),
        metadata=dict(context),
    )

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if handle.component:
            stack.enter_context(log.track_component(handle.component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "LogSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "resolve_settings",
    "span",
]
