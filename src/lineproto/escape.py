"""Escaping rules for identifiers and quoted string values.

Identifiers (measurement, tag keys, tag values, field keys) escape comma,
equals sign, space and backslash with a leading backslash. Quoted string
field values escape only the double quote and the backslash.

Unescaping collapses a backslash only when it precedes one of the escapable
characters; any other backslash is kept verbatim together with the character
that follows it.
"""

from __future__ import annotations

IDENTIFIER_ESCAPES = frozenset("\\, =")
STRING_ESCAPES = frozenset('\\"')


def _escape(text: str, escapable: frozenset[str]) -> str:
    return "".join("\\" + ch if ch in escapable else ch for ch in text)


def _unescape(text: str, escapable: frozenset[str]) -> str:
    if "\\" not in text:
        return text
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and i + 1 < n and text[i + 1] in escapable:
            out.append(text[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def escape_identifier(text: str) -> str:
    """Escape comma, equals, space and backslash in an identifier."""
    return _escape(text, IDENTIFIER_ESCAPES)


def unescape_identifier(text: str) -> str:
    """Inverse of :func:`escape_identifier`."""
    return _unescape(text, IDENTIFIER_ESCAPES)


def escape_string(text: str) -> str:
    """Escape quotes and backslashes in a string value (without quoting it)."""
    return _escape(text, STRING_ESCAPES)


def unescape_string(text: str) -> str:
    """Inverse of :func:`escape_string`."""
    return _unescape(text, STRING_ESCAPES)


def quote_string(text: str) -> str:
    """Render a string field value as a double-quoted literal."""
    return '"' + escape_string(text) + '"'
