"""
Internal diagnostics channel.

sinklog reports its own problems (a sink that failed to write or close, an
ignored re-initialisation of the shared logger) on stderr through structlog.
The loggers are built with ``structlog.wrap_logger`` so the host
application's global structlog configuration is neither read nor modified,
and nothing here is routed back into a sinklog ``Logger``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

_level = logging.WARNING


class _StderrFile:
    """File-like proxy resolving ``sys.stderr`` on every write."""

    def write(self, s: str) -> None:
        sys.stderr.write(s)

    def flush(self) -> None:
        sys.stderr.flush()


_STDERR = _StderrFile()


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.pop("_name", "sinklog")
    return event_dict


_PROCESSORS = [
    structlog.stdlib.add_log_level,
    add_timestamp,
    add_logger_name,
    structlog.processors.KeyValueRenderer(
        key_order=["timestamp", "level", "logger", "event"],
        drop_missing=True,
    ),
]


def configure_diagnostics(level: int | str) -> None:
    """Set the minimum level of diagnostics written to stderr."""
    global _level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Invalid diagnostics level: {level!r}")
        level = resolved
    _level = level


def get_internal_logger(name: str = "sinklog") -> FilteringBoundLogger:
    """Get a structlog logger for sinklog's own diagnostics."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=_STDERR),
        processors=_PROCESSORS,
        wrapper_class=structlog.make_filtering_bound_logger(_level),
        context_class=dict,
        _name=name,
    )
