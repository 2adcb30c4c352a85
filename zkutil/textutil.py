"""String helpers."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlsplit

_MAX_LINE_LENGTH = 2048 * 1024
_WORD_RE = re.compile(r"""[^ \t\n\f\r,;\[\]"']+""")


def prepend(text: str, prefix: str) -> str:
    """Prefix each line of ``text`` with ``prefix``, e.g. to quote a paragraph."""
    if not text or not prefix:
        return text
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return prefix + prefix.join(lines)


def pluralize(word: str, count: int) -> str:
    """Append an ``s`` to ``word`` unless ``count`` is between -1 and 1."""
    if not word or -1 <= count <= 1:
        return word
    return word + "s"


def split_lines(s: str) -> list[str]:
    """Split ``s`` into lines, accepting both ``\\n`` and ``\\r\\n`` endings."""
    parts = s.split("\n")
    if parts[-1] == "":
        parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    for line in lines:
        if len(line) > _MAX_LINE_LENGTH:
            raise ValueError("error while scanning text: token too long")
    return lines


def join_lines(s: str) -> str:
    """Join the lines of ``s`` with single spaces."""
    return " ".join(split_lines(s))


def join_ints(ints: Iterable[int], delimiter: str) -> str:
    """Join integers with ``delimiter``."""
    return delimiter.join(str(i) for i in ints)


def is_url(s: str) -> bool:
    """Return whether ``s`` is an absolute URL with a scheme and a host."""
    if not s or any(c.isspace() for c in s):
        return False
    try:
        parts = urlsplit(s)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def remove_duplicates(strings: list[str] | None) -> list[str] | None:
    """Keep the first occurrence of each string, preserving order."""
    if strings is None:
        return None
    return list(dict.fromkeys(strings))


def remove_blank(strs: list[str] | None) -> list[str] | None:
    """Drop strings that are empty or whitespace only."""
    if strs is None:
        return None
    return [s for s in strs if s.strip()]


def expand_whitespace_literals(s: str) -> str:
    """Turn literal ``\\n`` and ``\\t`` sequences into real whitespace."""
    return s.replace("\\n", "\n").replace("\\t", "\t")


def contains(items: Iterable[str], e: str) -> bool:
    """Return whether ``e`` is among ``items``."""
    return e in items


def word_at(s: str, index: int) -> str:
    """Return the word touching the character position ``index``, or ``""``."""
    for match in _WORD_RE.finditer(s):
        if match.start() <= index <= match.end():
            return match.group()
    return ""


def copy_list(items: Iterable[str]) -> list[str]:
    """Return a shallow copy of ``items`` as a list."""
    return list(items)


def byte_index_to_rune_index(s: str, i: int) -> int:
    """Convert a UTF-8 byte offset in ``s`` to a character offset."""
    count = 0
    offset = 0
    for ch in s:
        if offset >= i:
            break
        count += 1
        offset += len(ch.encode("utf-8", "surrogatepass"))
    return count