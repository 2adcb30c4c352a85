"""Small loggers: one discarding everything, one writing to stderr, one proxy."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Protocol, TextIO


class Logger(Protocol):
    """Interface shared by the loggers of this module."""

    def printf(self, format: str, *args: object) -> None: ...

    def println(self, *args: object) -> None: ...

    def err(self, error: BaseException | None) -> None: ...


class NullLogger:
    """A logger ignoring any input, only counting what it discarded."""

    def __init__(self) -> None:
        self.discarded = 0

    def printf(self, format: str, *args: object) -> None:
        self.discarded += 1

    def println(self, *args: object) -> None:
        self.discarded += 1

    def err(self, error: BaseException | None) -> None:
        if error is not None:
            self.discarded += 1


class StdLogger:
    """A logger writing prefixed lines to a stream, stderr by default."""

    def __init__(self, prefix: str = "", stream: TextIO | None = None, timestamps: bool = False) -> None:
        self.prefix = prefix
        self.stream = stream
        self.timestamps = timestamps

    def _output(self, message: str) -> None:
        stream = self.stream if self.stream is not None else sys.stderr
        header = self.prefix
        if self.timestamps:
            header += datetime.now().strftime("%Y/%m/%d %H:%M:%S ")
        if not message.endswith("\n"):
            message += "\n"
        stream.write(header + message)
        stream.flush()

    def printf(self, format: str, *args: object) -> None:
        self._output(format % args if args else format)

    def println(self, *args: object) -> None:
        self._output(" ".join(str(arg) for arg in args))

    def err(self, error: BaseException | None) -> None:
        if error is not None:
            self.printf("warning: %s", error)


class ProxyLogger:
    """A logger delegating to another one, which can be swapped at runtime."""

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def printf(self, format: str, *args: object) -> None:
        self.logger.printf(format, *args)

    def println(self, *args: object) -> None:
        self.logger.println(*args)

    def err(self, error: BaseException | None) -> None:
        self.logger.err(error)