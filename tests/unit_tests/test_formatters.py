"""
Formatter layouts and line round-trips.
"""

from __future__ import annotations

import threading
from datetime import datetime

import orjson
import pytest

from sinklog.formatters import (
    JsonFormatter,
    PlainFormatter,
    TimestampedFormatter,
    create_formatter,
)
from sinklog.severity import Severity

FIXED = datetime(2026, 10, 18, 9, 5, 7)

MESSAGES = [
    "a",
    "",
    "hello world",
    "[ERROR] not really an error",
    "2026-01-01 00:00:00 [INFO] nested prefix",
    "unicode ✓ 日志",
    "  padded  ",
    '{"json": "looking"}',
]


class TestPlainFormatter:
    """[LEVEL] message"""

    def test_layout(self) -> None:
        assert PlainFormatter().format(Severity.INFO, "a") == "[INFO] a"
        assert PlainFormatter().format(Severity.WARN, "careful") == "[WARN] careful"

    @pytest.mark.parametrize("message", MESSAGES)
    def test_round_trip(self, message: str) -> None:
        formatter = PlainFormatter()
        parsed = formatter.parse_line(formatter.format(Severity.ERROR, message))
        assert parsed.message == message
        assert parsed.level is Severity.ERROR
        assert parsed.timestamp is None

    def test_parse_rejects_foreign_line(self) -> None:
        with pytest.raises(ValueError):
            PlainFormatter().parse_line("INFO a")
        with pytest.raises(ValueError):
            PlainFormatter().parse_line("[TRACE] a")


class TestTimestampedFormatter:
    """YYYY-MM-DD HH:MM:SS [LEVEL] message"""

    def test_layout_with_fixed_clock(self) -> None:
        formatter = TimestampedFormatter(clock=lambda: FIXED)
        assert formatter.format(Severity.DEBUG, "c") == "2026-10-18 09:05:07 [DEBUG] c"

    def test_uses_wall_clock_by_default(self) -> None:
        before = datetime.now().replace(microsecond=0)
        parsed = TimestampedFormatter().parse_line(TimestampedFormatter().format(Severity.INFO, "x"))
        after = datetime.now()
        stamp = datetime.strptime(parsed.timestamp, "%Y-%m-%d %H:%M:%S")
        assert before <= stamp <= after

    @pytest.mark.parametrize("message", MESSAGES)
    def test_round_trip(self, message: str) -> None:
        formatter = TimestampedFormatter(clock=lambda: FIXED)
        parsed = formatter.parse_line(formatter.format(Severity.INFO, message))
        assert parsed.message == message
        assert parsed.level is Severity.INFO
        assert parsed.timestamp == "2026-10-18 09:05:07"

    def test_parse_rejects_plain_line(self) -> None:
        with pytest.raises(ValueError):
            TimestampedFormatter().parse_line("[INFO] a")

    def test_concurrent_calls_produce_complete_lines(self) -> None:
        """Each call returns one whole line even when many threads format at once"""
        formatter = TimestampedFormatter()
        results: list[str] = []
        lock = threading.Lock()

        def worker(n: int) -> None:
            for i in range(200):
                line = formatter.format(Severity.INFO, f"t{n}-{i}")
                with lock:
                    results.append(line)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8 * 200
        messages = {formatter.parse_line(line).message for line in results}
        assert messages == {f"t{n}-{i}" for n in range(8) for i in range(200)}


class TestJsonFormatter:
    """One JSON object per line"""

    def test_payload(self) -> None:
        line = JsonFormatter(clock=lambda: FIXED).format(Severity.WARN, "disk low")
        assert orjson.loads(line) == {
            "timestamp": "2026-10-18 09:05:07",
            "level": "WARN",
            "message": "disk low",
        }

    @pytest.mark.parametrize("message", MESSAGES + ["multi\nline"])
    def test_round_trip(self, message: str) -> None:
        formatter = JsonFormatter(clock=lambda: FIXED)
        line = formatter.format(Severity.DEBUG, message)
        assert "\n" not in line
        assert formatter.parse_line(line).message == message

    def test_parse_rejects_non_json(self) -> None:
        with pytest.raises(ValueError):
            JsonFormatter().parse_line("[INFO] a")
        with pytest.raises(ValueError):
            JsonFormatter().parse_line('{"level": "INFO"}')


class TestCreateFormatter:
    @pytest.mark.parametrize(
        ("name", "cls"),
        [("plain", PlainFormatter), ("Timestamped", TimestampedFormatter), (" JSON ", JsonFormatter)],
    )
    def test_known(self, name: str, cls: type) -> None:
        assert isinstance(create_formatter(name), cls)

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown formatter"):
            create_formatter("xml")
