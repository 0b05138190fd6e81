"""
Bridge from the standard library ``logging`` module into a sinklog Logger.
"""

from __future__ import annotations

import logging

from .core import get_logger
from .logger import Logger
from .severity import Severity


def severity_for(levelno: int) -> Severity:
    """Map a stdlib level number onto the nearest sinklog severity."""
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARN
    if levelno >= logging.INFO:
        return Severity.INFO
    return Severity.DEBUG


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging records to a sinklog Logger.

    Records are rendered with the handler's own ``logging.Formatter`` (message
    only by default) and then passed through the target logger's filter and
    formatter like any other call.

    Without an explicit ``logger`` the shared instance is looked up per record.
    If none exists yet, the first record creates it with the defaults (INFO,
    timestamped formatter, no sinks) and later ``get_instance`` arguments are
    then ignored. Create the shared logger before installing the handler, or
    pass ``logger`` explicitly.

    Args:
        logger: Target logger (default: the shared instance, resolved per record)
    """

    def __init__(self, logger: Logger | None = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            target = self._logger or get_logger()
            target.log(severity_for(record.levelno), self.format(record))
        except Exception:
            self.handleError(record)


def install_stdlib_bridge(logger: Logger | None = None, logger_name: str | None = None) -> RedirectStdLibHandler:
    """
    Attach a :class:`RedirectStdLibHandler` to a stdlib logger.

    Args:
        logger: Target sinklog logger (default: the shared instance)
        logger_name: Stdlib logger to attach to (default: root)
    """
    handler = RedirectStdLibHandler(logger)
    logging.getLogger(logger_name).addHandler(handler)
    return handler
