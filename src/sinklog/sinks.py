"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any

from .exceptions import SinkConstructionError, SinkOwnershipError, SinkWriteError

# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks.

    Subclasses implement :meth:`_write` and, when they hold a resource,
    :meth:`_release`. The base class owns the closed flag so that ``append``
    after ``close`` fails loudly and ``close`` runs the release step once.
    """

    type_tag: str = "base"

    def __init__(self) -> None:
        self._closed = False
        self._owner: Any = None
        self._claim_lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def append(self, text: str) -> None:
        """Write ``text`` plus a line terminator and flush it."""
        if self._closed:
            raise SinkWriteError(sink=repr(self), reason="sink is closed")
        try:
            self._write(text + "\n")
        except (OSError, ValueError) as exc:
            raise SinkWriteError(sink=repr(self), reason=str(exc)) from exc

    def close(self) -> None:
        """Release the output resource. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._release()

    @abstractmethod
    def _write(self, data: str) -> None:
        """Write and flush ``data`` to the destination."""
        ...

    def _release(self) -> None:
        """Release the underlying resource (nothing to do by default)."""

    def _claim(self, owner: Any) -> None:
        with self._claim_lock:
            if self._owner is not None:
                raise SinkOwnershipError(sink=repr(self))
            self._owner = owner


class StreamSink(BaseSink):
    """Sink writing to an arbitrary text stream.

    Args:
        stream: Writable text stream
        owns_stream: Close the stream when the sink is closed
    """

    type_tag = "stream"

    def __init__(self, stream: IO[str], *, owns_stream: bool = False):
        super().__init__()
        self._stream = stream
        self._owns_stream = owns_stream

    @property
    def stream(self) -> IO[str]:
        return self._stream

    def _write(self, data: str) -> None:
        stream = self.stream
        stream.write(data)
        stream.flush()

    def _release(self) -> None:
        if self._owns_stream:
            self._stream.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stream={self._stream!r})"


class ConsoleSink(StreamSink):
    """Standard output sink.

    ``sys.stdout`` is looked up on every write so redirection after the sink
    was created is honoured. Closing never closes stdout.
    """

    type_tag = "console"

    def __init__(self) -> None:
        super().__init__(sys.stdout, owns_stream=False)

    @property
    def stream(self) -> IO[str]:
        return sys.stdout

    def __repr__(self) -> str:
        return "ConsoleSink()"


class FileSink(BaseSink):
    """Local file sink.

    The file is opened in append mode and created, together with its parent
    directories, if it does not exist. Failure to open raises
    :class:`SinkConstructionError` immediately.
    """

    type_tag = "file"

    def __init__(self, path: str | Path, *, encoding: str = "utf-8"):
        super().__init__()
        self._path = Path(path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self._path, "a", encoding=encoding)
        except (OSError, ValueError) as exc:
            raise SinkConstructionError(sink_type=self.type_tag, target=str(path), reason=str(exc)) from exc

    @property
    def path(self) -> Path:
        return self._path

    def _write(self, data: str) -> None:
        self._file.write(data)
        self._file.flush()

    def _release(self) -> None:
        self._file.close()

    def __repr__(self) -> str:
        return f"FileSink(path={str(self._path)!r})"
