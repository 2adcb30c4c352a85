"""Writing output through the user's pager program."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from typing import TextIO

from zkutil.errors import WrappedError
from zkutil.logger import Logger, NullLogger
from zkutil.opt import NULL_STRING, OptString, not_empty_string
from zkutil.osenv import get_opt_env
from zkutil.shell import command_from_string

_FAILURE_MESSAGE = (
    "failed to paginate the output, try again with --no-pager or fix your PAGER environment variable"
)

_DEFAULT_PAGERS = ["less -FIRX", "more -R"]


class Pager:
    """Writes text either to a pager process or straight to standard output."""

    def __init__(
        self,
        stream: TextIO | None = None,
        process: subprocess.Popen | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._stream = stream
        self._process = process
        self._logger: Logger = logger if logger is not None else NullLogger()
        self._closed = False
        self._failure_reported = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        """Send ``text`` to the pager as is."""
        self.stream.write(text)

    def write_string(self, text: str) -> None:
        """Send ``text`` to the pager, followed by a newline."""
        self.write(text + "\n")

    def close(self) -> None:
        """Finish the output and wait for the pager process to end.

        If the pager fails, the error is reported to the logger and
        ``SystemExit(1)`` is raised.
        """
        if self._process is None:
            return
        if not self._closed:
            self._closed = True
            try:
                self.stream.close()
            except BrokenPipeError:
                pass
        code = self._process.wait()
        if code != 0 and not self._failure_reported:
            self._failure_reported = True
            cause = subprocess.CalledProcessError(code, self._process.args)
            self._logger.err(WrappedError(_FAILURE_MESSAGE, cause))
            raise SystemExit(1)

    def __enter__(self) -> Pager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


PASSTHROUGH_PAGER = Pager()


def select_default_pager() -> OptString:
    """Return the first default pager found on the executable path."""
    for pager in _DEFAULT_PAGERS:
        try:
            parts = shlex.split(pager)
        except ValueError:
            continue
        found = shutil.which(parts[0])
        if found is not None:
            return not_empty_string(" ".join([found, *parts[1:]]))
    return NULL_STRING


def select_pager_cmd(user_pager: OptString) -> OptString:
    """Pick the pager: ZK_PAGER, then the user's setting, then PAGER, then a default."""
    return (
        get_opt_env("ZK_PAGER")
        .or_(user_pager)
        .or_(get_opt_env("PAGER"))
        .or_(select_default_pager())
    )


def open_pager(pager_cmd: OptString, logger: Logger) -> Pager:
    """Start the selected pager and return a :class:`Pager` writing to it.

    Without any pager available, the shared pass-through pager is returned.
    """
    command = select_pager_cmd(pager_cmd)
    if command.is_null():
        return PASSTHROUGH_PAGER
    args = command_from_string(str(command))
    try:
        process = subprocess.Popen(args, stdin=subprocess.PIPE, text=True)
    except OSError as err:
        raise WrappedError(_FAILURE_MESSAGE, err) from err
    return Pager(process.stdin, process, logger)