"""
Process-wide logger access.

The shared instance is created once, by whichever caller gets there first,
using double-checked locking. Arguments passed on later calls are ignored;
when they differ from what the instance was created with, a
``reinitialization_ignored`` warning is written to the diagnostics channel.

Applications that prefer explicit wiring can construct :class:`Logger`
directly and pass it around instead.
"""

from __future__ import annotations

import threading

from .config import LoggingSettings
from .diagnostics import configure_diagnostics, get_internal_logger
from .factory import create_sink
from .formatters import BaseFormatter, create_formatter
from .logger import Logger
from .severity import Severity

# =============================================================================
# Global State
# =============================================================================

_instance: Logger | None = None
_instance_lock = threading.Lock()
_initial_level: Severity | None = None


def _warn_if_mismatched(logger: Logger, level: Severity | int | str | None, formatter: BaseFormatter | None) -> None:
    ignored = {}
    active_level = _initial_level.name if _initial_level else None
    if level is not None:
        try:
            requested = Severity.parse(level).name
        except ValueError:
            requested = repr(level)
        if requested != active_level:
            ignored["level"] = requested
    if formatter is not None and type(formatter) is not type(logger.formatter):
        ignored["formatter"] = type(formatter).__name__
    if ignored:
        get_internal_logger("sinklog.core").warning(
            "reinitialization_ignored",
            active_level=active_level,
            active_formatter=type(logger.formatter).__name__,
            **ignored,
        )


def get_instance(
    initial_level: Severity | int | str | None = None,
    formatter: BaseFormatter | None = None,
) -> Logger:
    """
    Return the shared logger, creating it on first use.

    Args:
        initial_level: Threshold for a newly created logger (default INFO)
        formatter: Formatter for a newly created logger (default timestamped)
    """
    global _instance, _initial_level

    instance = _instance
    if instance is None:
        with _instance_lock:
            if _instance is None:
                level = Severity.parse(initial_level) if initial_level is not None else Severity.INFO
                _instance = Logger(level=level, formatter=formatter)
                _initial_level = level
                return _instance
            instance = _instance

    _warn_if_mismatched(instance, initial_level, formatter)
    return instance


def get_logger() -> Logger:
    """Shorthand for :func:`get_instance` with default arguments."""
    return get_instance()


def reset_instance() -> None:
    """Close and forget the shared logger; the next access creates a new one."""
    global _instance, _initial_level

    with _instance_lock:
        instance, _instance = _instance, None
        _initial_level = None
    if instance is not None:
        instance.close()


def configure_logging(settings: LoggingSettings | None = None) -> Logger:
    """
    Create the shared logger from settings and attach the configured sinks.

    If the shared logger already exists it is returned unchanged.

    Args:
        settings: Logging settings (default: read from ``SINKLOG_*`` env vars)
    """
    global _instance, _initial_level

    settings = settings or LoggingSettings()
    configure_diagnostics(settings.diagnostics_level.value)

    with _instance_lock:
        if _instance is not None:
            get_internal_logger("sinklog.core").warning("already_configured", instance=repr(_instance))
            return _instance

        level = Severity.parse(settings.level.value)
        logger = Logger(level=level, formatter=create_formatter(settings.formatter.value))
        try:
            for tag in settings.sink_tags:
                params = settings.file_path if tag == "file" else None
                logger.add_appender(create_sink(tag, params))
        except Exception:
            logger.close()
            raise

        _instance = logger
        _initial_level = level
        return logger
