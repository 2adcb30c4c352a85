"""Error wrapping with a context message."""

from __future__ import annotations

from typing import Callable


class WrappedError(Exception):
    """An error annotated with a context message, keeping the original cause."""

    def __init__(self, msg: str, cause: BaseException) -> None:
        super().__init__(msg, cause)
        self.msg = msg
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.msg}: {self.cause}"


def wrap(err: BaseException | None, msg: str) -> WrappedError | None:
    """Prefix ``err`` with ``msg``; ``None`` stays ``None``."""
    if err is None:
        return None
    return WrappedError(msg, err)


def wrapf(err: BaseException | None, format: str, *args: object) -> WrappedError | None:
    """Like :func:`wrap`, with a %-formatted message."""
    return wrap(err, format % args if args else format)


def wrapper(msg: str) -> Callable[[BaseException | None], WrappedError | None]:
    """Return a function wrapping errors with ``msg``."""

    def _wrap(err: BaseException | None) -> WrappedError | None:
        return wrap(err, msg)

    return _wrap


def wrapperf(format: str, *args: object) -> Callable[[BaseException | None], WrappedError | None]:
    """Return a function wrapping errors with a %-formatted message."""
    return wrapper(format % args if args else format)