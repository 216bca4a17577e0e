"""Cursor over a line protocol payload.

The cursor owns the immutable payload text and a plain position index. Its
scanning methods extract one token at a time:

* identifier tokens (measurement, tag keys/values, field keys), which end at
  the first delimiter not immediately preceded by a backslash;
* quoted string field values, which end at the first quote not escaped by an
  odd run of backslashes and may span newlines;
* raw field value literals, which end at a comma, space or line break.
"""

from __future__ import annotations

from lineproto.errors import LineSyntaxError, UnterminatedStringError
from lineproto.escape import unescape_identifier, unescape_string

NEWLINE = "\n"


class Cursor:
    """Forward-only position within a payload."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, len={len(self.text)})"

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or ``""`` at end of input."""
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, len(self.text))

    def skip_spaces(self) -> None:
        text, i, n = self.text, self.pos, len(self.text)
        while i < n and text[i] == " ":
            i += 1
        self.pos = i

    def current_line(self) -> str:
        """Return the text from the cursor to the end of the line, without consuming it."""
        end = self.text.find(NEWLINE, self.pos)
        return self.text[self.pos :] if end < 0 else self.text[self.pos : end]

    def rest_of_line(self) -> str:
        """Consume and return the text up to the next newline.

        The newline itself is consumed but not returned.
        """
        line = self.current_line()
        self.advance(len(line) + 1)
        return line

    def skip_line(self) -> None:
        """Move past the next newline, or to end of input."""
        self.rest_of_line()

    # --- Token scanners ---

    def scan_token(
        self,
        delimiters: str,
        forbidden: str = "",
        error: type[LineSyntaxError] = LineSyntaxError,
    ) -> tuple[str, str]:
        """Scan an identifier up to the first unescaped delimiter.

        A delimiter or forbidden character directly preceded by a backslash
        is part of the token. The token is unescaped before it is returned.

        Args:
            delimiters: Characters that end the token.
            forbidden: Characters that invalidate the token when unescaped.
            error: Exception class raised on a syntax violation.

        Returns:
            ``(token, delimiter)``; the cursor is left just past the delimiter.

        Raises:
            LineSyntaxError: (as ``error``) on a newline, an unescaped
                forbidden character, or end of input before a delimiter. The
                cursor is left at the offending position.
        """
        text, start, n = self.text, self.pos, len(self.text)
        i = start
        while i < n:
            ch = text[i]
            if ch == NEWLINE:
                self.pos = i
                raise error(f"Unexpected end of line, expected one of {delimiters!r}", i)
            escaped = i > start and text[i - 1] == "\\"
            if not escaped:
                if ch in delimiters:
                    self.pos = i + 1
                    return unescape_identifier(text[start:i]), ch
                if ch in forbidden:
                    self.pos = i
                    raise error(f"Unexpected {ch!r}, expected one of {delimiters!r}", i)
            i += 1
        self.pos = n
        raise error(f"Unexpected end of input, expected one of {delimiters!r}", n)

    def scan_quoted(self) -> str:
        """Scan a double-quoted string value starting at the opening quote.

        Returns:
            The unescaped string; the cursor is left just past the closing
            quote.

        Raises:
            UnterminatedStringError: if the input ends before a closing quote.
                The cursor stays on the opening quote.
        """
        text, start, n = self.text, self.pos, len(self.text)
        i = start + 1
        while i < n:
            ch = text[i]
            if ch == "\\" and i + 1 < n and text[i + 1] in '\\"':
                i += 2
            elif ch == '"':
                self.pos = i + 1
                return unescape_string(text[start + 1 : i])
            else:
                i += 1
        raise UnterminatedStringError("Unterminated string field value", start)

    def scan_literal(self) -> str:
        """Scan a raw field value up to a comma, space, line break or end of input.

        The terminating character is not consumed.
        """
        text, i, n = self.text, self.pos, len(self.text)
        start = i
        while i < n and text[i] not in ", \r\n":
            i += 1
        self.pos = i
        return text[start:i]
