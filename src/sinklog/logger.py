"""
The Logger: severity filter, one formatter and an ordered list of sinks.

Locking
-------
One re-entrant lock per instance guards the threshold, the sink list and the
closed flag. A log call reads the threshold once under the lock, formats
outside it, then delivers to all sinks while holding it again, so no
``add_appender``/``close`` can interleave with delivery. A ``set_log_level``
that lands between the two sections does not affect the call already past the
filter. The (threshold, sinks) pair is therefore not one snapshot: a sink
registered between the two sections receives a line that passed the earlier
threshold, even if the threshold has since been raised.

Write failures are isolated per sink: a sink that raises is reported on the
diagnostics channel and the remaining sinks still receive the line.
"""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Any

from .diagnostics import get_internal_logger
from .exceptions import LoggerClosedError
from .formatters import BaseFormatter, TimestampedFormatter
from .severity import Severity, should_emit
from .sinks import BaseSink


class Logger:
    """Thread-safe multi-sink logger.

    Args:
        level: Initial severity threshold (member, int or level name)
        formatter: Line formatter bound for the logger's lifetime
    """

    def __init__(self, level: Severity | int | str = Severity.INFO, formatter: BaseFormatter | None = None):
        self._lock = threading.RLock()
        self._threshold = Severity.parse(level)
        self._formatter = formatter or TimestampedFormatter()
        self._sinks: list[BaseSink] = []
        self._closed = False

    # =========================================================================
    # State
    # =========================================================================

    @property
    def level(self) -> Severity:
        with self._lock:
            return self._threshold

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    @property
    def sinks(self) -> tuple[BaseSink, ...]:
        with self._lock:
            return tuple(self._sinks)

    def is_enabled_for(self, level: Severity | int | str) -> bool:
        severity = Severity.parse(level)
        with self._lock:
            return not self._closed and should_emit(severity, self._threshold)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_appender(self, sink: BaseSink) -> None:
        """Register ``sink``; it receives every line logged from now on."""
        with self._lock:
            if self._closed:
                raise LoggerClosedError(operation="add appender")
            sink._claim(self)
            self._sinks.append(sink)
        get_internal_logger("sinklog.logger").debug("sink_registered", sink=repr(sink))

    add_sink = add_appender

    def set_log_level(self, level: Severity | int | str) -> None:
        """Replace the threshold for every log call that starts after this returns."""
        severity = Severity.parse(level)
        with self._lock:
            self._threshold = severity

    # =========================================================================
    # Logging
    # =========================================================================

    def log(self, level: Severity | int | str, message: Any) -> None:
        """Format ``message`` once and deliver it to every sink, in order."""
        severity = Severity.parse(level)
        if not self.is_enabled_for(severity):
            return

        line = self._formatter.format(severity, str(message))

        with self._lock:
            if self._closed:
                return
            for sink in self._sinks:
                try:
                    sink.append(line)
                except Exception as exc:
                    get_internal_logger("sinklog.logger").error(
                        "sink_write_failed",
                        sink=repr(sink),
                        error=f"{type(exc).__name__}: {exc}",
                    )

    def debug(self, message: Any) -> None:
        self.log(Severity.DEBUG, message)

    def info(self, message: Any) -> None:
        self.log(Severity.INFO, message)

    def warn(self, message: Any) -> None:
        self.log(Severity.WARN, message)

    warning = warn

    def error(self, message: Any) -> None:
        self.log(Severity.ERROR, message)

    # =========================================================================
    # Shutdown
    # =========================================================================

    def close(self) -> None:
        """Close every sink in registration order. Later calls do nothing."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for sink in self._sinks:
                try:
                    sink.close()
                except Exception as exc:
                    get_internal_logger("sinklog.logger").error(
                        "sink_close_failed",
                        sink=repr(sink),
                        error=f"{type(exc).__name__}: {exc}",
                    )

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Logger(level={self._threshold.name}, formatter={self._formatter!r}, "
            f"sinks={len(self._sinks)}, closed={self._closed})"
        )
