import logging

import pytest

from sinklog import core
from sinklog.diagnostics import configure_diagnostics
from sinklog.sinks import BaseSink


class RecordingSink(BaseSink):
    """In-memory sink that keeps every appended line."""

    type_tag = "recording"

    def __init__(self, name: str = "recording", journal: list | None = None):
        super().__init__()
        self.name = name
        self.lines: list[str] = []
        self.journal = journal
        self.release_count = 0

    def _write(self, data: str) -> None:
        line = data[:-1]
        self.lines.append(line)
        if self.journal is not None:
            self.journal.append((self.name, line))

    def _release(self) -> None:
        self.release_count += 1

    def __repr__(self) -> str:
        return f"RecordingSink(name={self.name!r})"


@pytest.fixture(autouse=True)
def reset_shared_logger():
    """
    Every test starts and ends without a shared logger and with the default
    diagnostics threshold.
    """
    core.reset_instance()
    configure_diagnostics(logging.WARNING)
    yield
    core.reset_instance()
    configure_diagnostics(logging.WARNING)


@pytest.fixture
def make_sink():
    """Factory for :class:`RecordingSink` instances."""
    return RecordingSink


@pytest.fixture
def recording_sink():
    return RecordingSink()
