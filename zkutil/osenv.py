"""Helpers to read the process environment."""

from __future__ import annotations

import os

from zkutil.opt import NULL_STRING, OptString, not_empty_string


def get_opt_env(key: str) -> OptString:
    """Return the environment variable ``key``; empty or unset yields null."""
    value = os.environ.get(key)
    if value is None:
        return NULL_STRING
    return not_empty_string(value)


def environ_map() -> dict[str, str]:
    """Return a snapshot of the environment as a plain dictionary."""
    return dict(os.environ)