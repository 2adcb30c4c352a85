"""File path helpers, directory walking and diffing of file listings."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Callable, Iterable, Iterator

from zkutil.logger import Logger


@dataclass(frozen=True)
class Metadata:
    """Information about a file path."""

    path: str
    modified: datetime


class DiffKind(IntEnum):
    """Type of file change made in a directory."""

    ADDED = 1
    MODIFIED = 2
    REMOVED = 3
    UNCHANGED = 4

    def __str__(self) -> str:
        return self.name.lower()

    def symbol(self) -> str:
        """Return a single character representing this change."""
        return {
            DiffKind.ADDED: "+",
            DiffKind.MODIFIED: "~",
            DiffKind.REMOVED: "-",
            DiffKind.UNCHANGED: "/",
        }[self]


@dataclass(frozen=True)
class DiffChange:
    """A file change made in a directory."""

    path: str
    kind: DiffKind

    def __str__(self) -> str:
        return f"{self.kind} {self.path}"


def diff(
    source: Iterable[Metadata],
    target: Iterable[Metadata],
    force_modified: bool,
    callback: Callable[[DiffChange], None],
) -> int:
    """Compare two listings sorted by path, reporting each change to ``callback``.

    Files present in both are compared by modification date. Returns the
    number of files in ``source``. An exception raised by ``callback`` stops
    the comparison and propagates.
    """
    sources = iter(source)
    targets = iter(target)
    count = 0

    def next_source() -> Metadata | None:
        nonlocal count
        item = next(sources, None)
        if item is not None:
            count += 1
        return item

    src = next_source()
    tgt = next(targets, None)

    while src is not None or tgt is not None:
        advance_source = advance_target = False
        if src is None:
            change = DiffChange(tgt.path, DiffKind.REMOVED)
            advance_target = True
        elif tgt is None:
            change = DiffChange(src.path, DiffKind.ADDED)
            advance_source = True
        elif src.path == tgt.path:
            modified = force_modified or src.modified != tgt.modified
            change = DiffChange(src.path, DiffKind.MODIFIED if modified else DiffKind.UNCHANGED)
            advance_source = advance_target = True
        elif src.path < tgt.path:
            change = DiffChange(src.path, DiffKind.ADDED)
            advance_source = True
        else:
            change = DiffChange(tgt.path, DiffKind.REMOVED)
            advance_target = True

        callback(change)

        if advance_source:
            src = next_source()
        if advance_target:
            tgt = next(targets, None)

    return count


def _stat(path: str) -> os.stat_result | None:
    try:
        return os.stat(path)
    except FileNotFoundError:
        return None


def exists(path: str) -> bool:
    """Return whether ``path`` exists on the file system."""
    return _stat(path) is not None


def dir_exists(path: str) -> bool:
    """Return whether ``path`` exists and is a directory."""
    info = _stat(path)
    return info is not None and stat.S_ISDIR(info.st_mode)


def _ext(path: str) -> str:
    for i in range(len(path) - 1, -1, -1):
        char = path[i]
        if char == "/" or char == os.sep:
            break
        if char == ".":
            return path[i:]
    return ""


def _base(path: str) -> str:
    if path == "":
        return "."
    stripped = path.rstrip("/" + os.sep)
    if stripped == "":
        return os.sep
    return os.path.basename(stripped)


def drop_ext(path: str) -> str:
    """Return ``path`` without its file extension."""
    ext = _ext(path)
    return path[: len(path) - len(ext)] if ext else path


def filename_stem(path: str) -> str:
    """Return the file name of ``path`` without its extension."""
    return _base(drop_ext(path))


def write_string(path: str, content: str) -> None:
    """Write ``content`` into a new file, creating parent directories if needed."""
    directory = os.path.dirname(path)
    if directory not in ("", ".", ".."):
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(content)


def walk(
    base_path: str,
    logger: Logger,
    notebook_root: str,
    should_ignore_path: Callable[[str], bool],
) -> Iterator[Metadata]:
    """Yield the metadata of the files under ``base_path`` in lexical order.

    Hidden files and directories are skipped, except a directory named
    ``notebook_root``. Files for which ``should_ignore_path`` returns true on
    their relative path are skipped too. Errors are reported to ``logger``.
    """

    def visit(abs_path: str, name: str, info: os.stat_result) -> Iterator[Metadata]:
        hidden = name.startswith(".")
        if stat.S_ISDIR(info.st_mode):
            if hidden and name != notebook_root:
                return
            with os.scandir(abs_path) as entries:
                children = sorted(entries, key=lambda entry: entry.name)
            for child in children:
                yield from visit(child.path, child.name, child.stat(follow_symlinks=False))
            return

        rel = os.path.relpath(abs_path, base_path)
        try:
            ignore = should_ignore_path(rel)
        except Exception as err:  # reported, then the file is skipped
            logger.println(err)
            return
        if hidden or ignore:
            return
        yield Metadata(rel, datetime.fromtimestamp(info.st_mtime, timezone.utc))

    try:
        root_info = os.lstat(base_path)
        yield from visit(base_path, _base(os.path.normpath(base_path)), root_info)
    except OSError as err:
        logger.println(err)