"""Conversion of search-engine style queries into SQLite FTS5 syntax."""

from __future__ import annotations

# Tokens which are not quoted in the output query.
_PASSTHROUGH_TOKENS = frozenset({"AND", "OR", "NOT"})

# Whitespace and parentheses separate terms outside explicit quotes.
_TERM_SEPARATORS = frozenset(" \t\n()")


def convert_query(query: str) -> str:
    """Transform a Google-like query into an SQLite FTS5 one."""
    out: list[str] = []
    in_quote = False
    term = ""

    def close_term() -> None:
        nonlocal term
        if not term:
            return
        if not in_quote and term in _PASSTHROUGH_TOKENS:
            out.append(term)
        else:
            # A trailing * outside quotes marks a prefix token; it must stay
            # unquoted or the FTS5 tokenizer ignores it.
            is_prefix = not in_quote and term.endswith("*")
            text = term[:-1] if is_prefix else term
            out.append(f'"{text}"*' if is_prefix else f'"{text}"')
        term = ""

    for c in query:
        if c == '"':
            if in_quote:
                close_term()
            in_quote = not in_quote
        elif term == "" and c in "^*":
            out.append(c)
        elif not in_quote and c == ":":
            out.append(term + c)
            term = ""
        elif c == "-" and term == "":
            out.append(" NOT ")
        elif not in_quote and c == "|":
            close_term()
            out.append(" OR ")
        elif not in_quote and c == "+" and term == "":
            continue
        elif not in_quote and c in _TERM_SEPARATORS:
            close_term()
            out.append(c)
        else:
            term += c

    close_term()
    return "".join(out)