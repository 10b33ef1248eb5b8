# tests/unit/observability/test_logger.py

import logging
from unittest.mock import MagicMock

import pytest

from gpt3_kit.observability.logger import (
    LoggerFunc,
    LoggerWriter,
    NoOpLogger,
    StdLogger,
)


def test_logger_func_forwards_format_and_args() -> None:
    calls = []
    sink = LoggerFunc(lambda fmt, *args: calls.append((fmt, args)))

    sink.printf("%s=%d", "n", 3)

    assert calls == [("%s=%d", ("n", 3))]


def test_noop_logger_accepts_anything() -> None:
    NoOpLogger().printf("%s %s", 1)


def test_std_logger_formats_with_logging(caplog: pytest.LogCaptureFixture) -> None:
    std = StdLogger(logging.getLogger("gpt3_kit.test"), level=logging.WARNING)

    with caplog.at_level(logging.WARNING, logger="gpt3_kit.test"):
        std.printf("completed %d of %d", 2, 5)

    assert caplog.records[0].getMessage() == "completed 2 of 5"
    assert caplog.records[0].levelno == logging.WARNING


class TestLoggerWriter:
    def test_write_trims_and_forwards(self) -> None:
        """Test that each write becomes one trimmed message."""
        sink = MagicMock()
        writer = LoggerWriter(sink)

        written = writer.write("  hello world \n")

        assert written == len("  hello world \n")
        sink.printf.assert_called_once_with("%s", "hello world")

    def test_write_bytes(self) -> None:
        sink = MagicMock()
        writer = LoggerWriter(sink)

        written = writer.write(b"\tline\r\n")

        assert written == 7
        sink.printf.assert_called_once_with("%s", "line")

    def test_usable_as_print_target(self) -> None:
        lines: list[str] = []
        writer = LoggerWriter(LoggerFunc(lambda fmt, *args: lines.append(fmt % args)))

        print("status ok", file=writer)

        assert "status ok" in lines
