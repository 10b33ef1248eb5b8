# src/gpt3_kit/observability/logger.py

"""Injectable printf-style logging sink.

A sink is anything with ``printf(format, *args)``. The completions client
holds one so an application can hand it over, but nothing in the request
path writes to it.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol


class Logger(Protocol):
    """Single-method logging capability."""

    def printf(self, format: str, *args: Any) -> None: ...


class LoggerFunc:
    """Adapts a plain callable to the Logger protocol.

    Example:
        >>> lines = []
        >>> sink = LoggerFunc(lambda fmt, *args: lines.append(fmt % args))
        >>> sink.printf("hello %s", "world")
        >>> lines
        ['hello world']
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        self._func = func

    def printf(self, format: str, *args: Any) -> None:
        self._func(format, *args)


class NoOpLogger:
    def printf(self, format: str, *args: Any) -> None:
        return None


class StdLogger:
    """Forwards to a standard library logger at a fixed level.

    ``logging`` already formats messages with the % operator, so the
    format string and arguments are passed through untouched.
    """

    def __init__(
        self, logger: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self._logger = logger or logging.getLogger("gpt3_kit")
        self._level = level

    def printf(self, format: str, *args: Any) -> None:
        self._logger.log(self._level, format, *args)


class LoggerWriter:
    """File-like adapter that turns each write into one sink message.

    Useful wherever a library wants a stream (``print(file=...)``,
    ``logging.StreamHandler``). Writes are not buffered and carry no level.
    """

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def write(self, data: str | bytes) -> int:
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        self.logger.printf("%s", text.strip())
        return len(data)

    def flush(self) -> None:
        return None
