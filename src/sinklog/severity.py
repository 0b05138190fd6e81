"""
Severity levels and the emit rule.

The numeric values match the standard library ``logging`` levels so that
records coming from ``logging`` map onto them without a lookup table.

    ←── quieter ──────────────── louder ──→
    ERROR(40)   WARN(30)   INFO(20)   DEBUG(10)

A message is emitted when ``level >= threshold``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Severity(IntEnum):
    """Ordered log level used for filtering."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    # stdlib spelling
    WARNING = 30

    @classmethod
    def parse(cls, value: Any) -> Severity:
        """Coerce a member, an int or a case-insensitive level name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Invalid severity: {value!r}") from None
        if isinstance(value, str):
            member = cls.__members__.get(value.strip().upper())
            if member is not None:
                return member
        raise ValueError(f"Invalid severity: {value!r}")


def should_emit(level: Severity, threshold: Severity) -> bool:
    """Return True when ``level`` passes ``threshold`` (inclusive)."""
    return level >= threshold
