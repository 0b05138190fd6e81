"""
Log formatters.

A formatter turns ``(severity, message)`` into one output line. Formatters hold
no mutable state, so a single instance can be shared by every thread that logs
through the same logger.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, NamedTuple

import orjson

from .severity import Severity

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], datetime]


class ParsedLine(NamedTuple):
    """A formatted line split back into its parts."""

    level: Severity
    message: str
    timestamp: str | None = None


def _parse_level(name: str, line: str) -> Severity:
    try:
        return Severity[name]
    except KeyError:
        raise ValueError(f"Unknown level {name!r} in line: {line!r}") from None


# =============================================================================
# Formatter Abstraction (Strategy Pattern)
# =============================================================================


class BaseFormatter(ABC):
    """Abstract base class for log formatters."""

    name: str = "base"

    @abstractmethod
    def format(self, level: Severity, message: str) -> str:
        """Render a single log line."""
        ...

    @abstractmethod
    def parse_line(self, line: str) -> ParsedLine:
        """Split a line produced by :meth:`format` back into its parts."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PlainFormatter(BaseFormatter):
    """``[LEVEL] message``"""

    name = "plain"
    _PATTERN = re.compile(r"\[([A-Z]+)\] (.*)", re.DOTALL)

    def format(self, level: Severity, message: str) -> str:
        return f"[{level.name}] {message}"

    def parse_line(self, line: str) -> ParsedLine:
        match = self._PATTERN.fullmatch(line)
        if match is None:
            raise ValueError(f"Line does not match plain layout: {line!r}")
        return ParsedLine(level=_parse_level(match.group(1), line), message=match.group(2))


class TimestampedFormatter(BaseFormatter):
    """``YYYY-MM-DD HH:MM:SS [LEVEL] message``

    The timestamp is local wall-clock time taken when :meth:`format` runs.
    ``datetime.strftime`` builds a fresh string per call, so no per-thread
    formatter state is needed.

    Args:
        clock: Callable returning the current ``datetime`` (default: ``datetime.now``)
    """

    name = "timestamped"
    _PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) \[([A-Z]+)\] (.*)", re.DOTALL)

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or datetime.now

    def format(self, level: Severity, message: str) -> str:
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return f"{timestamp} [{level.name}] {message}"

    def parse_line(self, line: str) -> ParsedLine:
        match = self._PATTERN.fullmatch(line)
        if match is None:
            raise ValueError(f"Line does not match timestamped layout: {line!r}")
        return ParsedLine(
            level=_parse_level(match.group(2), line),
            message=match.group(3),
            timestamp=match.group(1),
        )


class JsonFormatter(BaseFormatter):
    """One JSON object per line with ``timestamp``, ``level`` and ``message``."""

    name = "json"

    def __init__(self, clock: Clock | None = None):
        self._clock = clock or datetime.now

    def format(self, level: Severity, message: str) -> str:
        payload = {
            "timestamp": self._clock().strftime(TIMESTAMP_FORMAT),
            "level": level.name,
            "message": message,
        }
        return orjson.dumps(payload).decode()

    def parse_line(self, line: str) -> ParsedLine:
        try:
            payload = orjson.loads(line)
            return ParsedLine(
                level=_parse_level(payload["level"], line),
                message=payload["message"],
                timestamp=payload["timestamp"],
            )
        except (orjson.JSONDecodeError, KeyError, TypeError) as exc:
            raise ValueError(f"Line does not match json layout: {line!r}") from exc


_FORMATTERS: dict[str, type[BaseFormatter]] = {
    PlainFormatter.name: PlainFormatter,
    TimestampedFormatter.name: TimestampedFormatter,
    JsonFormatter.name: JsonFormatter,
}


def create_formatter(name: str) -> BaseFormatter:
    """Build a formatter from its name (``plain``, ``timestamped`` or ``json``)."""
    formatter_cls = _FORMATTERS.get(name.strip().lower())
    if formatter_cls is None:
        raise ValueError(f"Unknown formatter: {name!r} (expected one of {sorted(_FORMATTERS)})")
    return formatter_cls()
