"""Build shell command lines to run a command string with extra arguments."""

from __future__ import annotations

import os

from zkutil.osenv import get_opt_env

_IS_WINDOWS = os.name == "nt"


def command_from_string(command: str, *args: str) -> list[str] | str:
    """Return a command line running ``command`` with ``args`` in the user's shell.

    On POSIX this is an argument list for the shell named by ``ZK_SHELL``,
    then ``SHELL``, then ``sh``; the extra arguments become ``$1``, ``$2``...
    On Windows it is a ``cmd`` command line string.
    """
    if _IS_WINDOWS:
        return f'cmd /v:on/s/c "{command} {" ".join(args)}"'

    shell = get_opt_env("ZK_SHELL").or_(get_opt_env("SHELL")).or_string("sh").unwrap()
    return [shell, "-c", command, "--", *args]