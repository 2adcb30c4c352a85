"""Helpers for note-taking tools: optional values, text, dates, paths, paging and FTS5 queries."""

__version__ = "0.1.0"