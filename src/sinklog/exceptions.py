"""
Unified exception hierarchy for sinklog.

Every error carries a stable machine-readable ``code`` and a ``details`` dict
so callers can branch on the failure without parsing messages.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SinklogError(Exception):
    """Root of all sinklog errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Sink errors
# ================================


class SinkError(SinklogError):
    """Base class for failures raised by sinks or the sink factory."""

    pass


class UnsupportedSinkTypeError(SinkError, ValueError):
    """Raised when the factory is given a tag no sink variant is registered for."""

    def __init__(self, *, type_tag: str, known: Optional[list[str]] = None) -> None:
        message = f"Unknown sink type: {type_tag!r}"
        details = {"type_tag": type_tag, "known": list(known or [])}
        super().__init__(message, code="UNSUPPORTED_SINK_TYPE", details=details)


class SinkConstructionError(SinkError):
    """Raised when a sink cannot acquire its output resource."""

    def __init__(self, *, sink_type: str, target: Optional[str], reason: str) -> None:
        message = f"Cannot create {sink_type} sink for {target!r}: {reason}"
        details = {"sink_type": sink_type, "target": target, "reason": reason}
        super().__init__(message, code="SINK_CONSTRUCTION_FAILED", details=details)


class SinkWriteError(SinkError):
    """Raised when an append cannot complete."""

    def __init__(self, *, sink: str, reason: str) -> None:
        message = f"Write to {sink} failed: {reason}"
        details = {"sink": sink, "reason": reason}
        super().__init__(message, code="SINK_WRITE_FAILED", details=details)


class SinkOwnershipError(SinkError):
    """Raised when a sink is registered into more than one logger."""

    def __init__(self, *, sink: str) -> None:
        message = f"{sink} is already registered with a logger"
        super().__init__(message, code="SINK_ALREADY_OWNED", details={"sink": sink})


# ================================
# Logger errors
# ================================


class LoggerClosedError(SinklogError):
    """Raised when a closed logger is asked to accept new sinks."""

    def __init__(self, *, operation: str) -> None:
        message = f"Cannot {operation}: logger is closed"
        super().__init__(message, code="LOGGER_CLOSED", details={"operation": operation})
