"""telelog wiring for scanner operations.

Scanners report through two calls: ``span`` wraps a composite operation
(delimited text, scan-until, numbers) and ``record_event`` notes changes to
the scanned text. Output is configured from ``SCAN_ENGINE_*`` environment
variables unless ``configure`` is given a preset or an explicit config.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SCAN_ENGINE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "scan_engine")

# Each entry maps a ``tl.Config.with_<name>`` builder to its argument.
PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {
        "min_level": "DEBUG",
        "console_output": True,
        "colored_output": True,
    },
    "production": {
        "min_level": "WARNING",
        "console_output": False,
        "file_output": "scan_engine.log",
        "buffering": True,
    },
    "profiling": {
        "min_level": "DEBUG",
        "console_output": False,
        "json_format": True,
        "buffering": True,
        "file_output": "scan_engine-profile.log",
        "profiling": True,
    },
}

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def settings_from_env() -> Dict[str, Any]:
    """Builder settings described by the ``SCAN_ENGINE_*`` variables."""

    console = not _env_flag("DISABLE_CONSOLE")
    settings: Dict[str, Any] = {
        "min_level": (_env("LOG_LEVEL") or "INFO").upper(),
        "console_output": console,
    }
    if console:
        settings["colored_output"] = not _env_flag("NO_COLOR")
    if _env_flag("LOG_JSON"):
        settings["json_format"] = True
    if _env("LOG_FILE"):
        settings["file_output"] = _env("LOG_FILE")
    if _env_flag("LOG_BUFFERED"):
        settings["buffering"] = True
        settings["buffer_size"] = int(_env("LOG_BUFFER_SIZE") or "2048")
    return settings


def settings_for_preset(preset: str) -> Dict[str, Any]:
    try:
        settings = dict(PRESETS[preset.lower()])
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'.") from None
    if "file_output" in settings and _env("LOG_FILE"):
        settings["file_output"] = _env("LOG_FILE")
    return settings


def build_config(settings: Dict[str, Any]) -> Any:
    config = tl.Config()
    for name, value in settings.items():
        getattr(config, f"with_{name}")(value)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> Any:
    """Install a new telelog config and drop cached loggers.

    ``preset`` picks one of ``PRESETS``; with neither argument the config is
    rebuilt from the environment. Returns the installed config.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if preset:
        config = build_config(settings_for_preset(preset))
    elif config is None:
        config = build_config(settings_from_env())

    _ACTIVE_CONFIG = config
    _LOGGER_CACHE.clear()
    return config


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = build_config(settings_from_env())
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    pairs = [(str(key), _stringify(value)) for key, value in payload.items()]
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, pairs)
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Outcome fields attached to a running scanner span."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def report(self, *, matched: bool, consumed: int = 0) -> None:
        """Record whether the operation matched and how many characters it took."""

        self.add_metadata("status", "match" if matched else "miss")
        self.add_metadata("consumed", consumed)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``, tracked as ``component`` when given.

    ``metadata`` is added to the logger context for the duration of the block
    and copied onto the yielded handle. An exception escaping the block is
    logged through ``SpanHandle.fail`` and re-raised.
    """

    log = get_logger(logger_name)
    context: Dict[str, str] = {
        key: _stringify(value) for key, value in (metadata or {}).items()
    }
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log, span_name=name, component_name=component, metadata=dict(context)
    )
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(component))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "settings_for_preset",
    "settings_from_env",
    "span",
]
