"""
Reference scenario: ``python -m sinklog [path]``.

Logs to stdout and to ``path`` (default ``application.log``) at INFO with the
timestamped formatter, lowers the threshold to DEBUG half-way, then closes.
"""

import sys

from .core import get_instance
from .factory import create_sink
from .formatters import TimestampedFormatter
from .severity import Severity


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else "application.log"

    logger = get_instance(Severity.INFO, TimestampedFormatter())
    logger.add_appender(create_sink("console"))
    logger.add_appender(create_sink("file", path))

    logger.info("This is an info message.")
    logger.debug("This is a debug message.")
    logger.error("This is an error message.")

    logger.set_log_level(Severity.DEBUG)
    logger.debug("Debug level is now enabled.")

    logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
