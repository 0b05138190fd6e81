"""
sinklog: thread-safe severity-filtered logging with pluggable formatters and
multiple sinks.

Usage:
    from sinklog import Severity, TimestampedFormatter, create_sink, get_instance

    logger = get_instance(Severity.INFO, TimestampedFormatter())
    logger.add_appender(create_sink("console"))
    logger.add_appender(create_sink("file", "application.log"))
    logger.info("started")
    logger.close()
"""

from .config import LoggingSettings
from .core import configure_logging, get_instance, get_logger, reset_instance
from .exceptions import (
    LoggerClosedError,
    SinkConstructionError,
    SinkError,
    SinklogError,
    SinkOwnershipError,
    SinkWriteError,
    UnsupportedSinkTypeError,
)
from .factory import available_sink_types, create_sink, register_sink_type
from .formatters import (
    BaseFormatter,
    JsonFormatter,
    ParsedLine,
    PlainFormatter,
    TimestampedFormatter,
    create_formatter,
)
from .interceptors import RedirectStdLibHandler, install_stdlib_bridge
from .logger import Logger
from .severity import Severity, should_emit
from .sinks import BaseSink, ConsoleSink, FileSink, StreamSink

__version__ = "0.1.0"

__all__ = [
    "BaseFormatter",
    "BaseSink",
    "ConsoleSink",
    "FileSink",
    "JsonFormatter",
    "Logger",
    "LoggerClosedError",
    "LoggingSettings",
    "ParsedLine",
    "PlainFormatter",
    "RedirectStdLibHandler",
    "Severity",
    "SinkConstructionError",
    "SinkError",
    "SinklogError",
    "SinkOwnershipError",
    "SinkWriteError",
    "StreamSink",
    "TimestampedFormatter",
    "UnsupportedSinkTypeError",
    "available_sink_types",
    "configure_logging",
    "create_formatter",
    "create_sink",
    "get_instance",
    "get_logger",
    "install_stdlib_bridge",
    "register_sink_type",
    "reset_instance",
    "should_emit",
]
