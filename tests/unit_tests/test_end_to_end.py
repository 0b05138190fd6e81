"""
Reference scenario: shared logger, console and file sinks, level change, close.
"""

from __future__ import annotations

import re

from sinklog import core
from sinklog.__main__ import main
from sinklog.factory import create_sink
from sinklog.formatters import TimestampedFormatter
from sinklog.severity import Severity

LINE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \[(DEBUG|INFO|WARN|ERROR)\] (.*)")


def _parse(lines: list[str]) -> list[tuple[str, str]]:
    parsed = []
    for line in lines:
        match = LINE.fullmatch(line)
        assert match is not None, line
        parsed.append((match.group(1), match.group(2)))
    return parsed


class TestScenario:
    def test_console_and_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "application.log"
        logger = core.get_instance(Severity.INFO, TimestampedFormatter())
        file_sink = create_sink("file", str(path))
        logger.add_appender(create_sink("console"))
        logger.add_appender(file_sink)

        logger.info("a")
        assert _parse(capsys.readouterr().out.splitlines()) == [("INFO", "a")]

        logger.debug("b")
        assert capsys.readouterr().out == ""

        logger.set_log_level(Severity.DEBUG)
        logger.debug("c")
        assert _parse(capsys.readouterr().out.splitlines()) == [("DEBUG", "c")]

        logger.close()
        assert file_sink.closed
        assert _parse(path.read_text(encoding="utf-8").splitlines()) == [("INFO", "a"), ("DEBUG", "c")]

    def test_module_entry_point(self, tmp_path, capsys) -> None:
        path = tmp_path / "demo.log"
        assert main([str(path)]) == 0

        expected = [
            ("INFO", "This is an info message."),
            ("ERROR", "This is an error message."),
            ("DEBUG", "Debug level is now enabled."),
        ]
        assert _parse(capsys.readouterr().out.splitlines()) == expected
        assert _parse(path.read_text(encoding="utf-8").splitlines()) == expected
        assert core.get_instance().closed
