"""Configuration for the line protocol parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ParserConfig:
    """Configuration for ``LineProtocolParser``.

    ``strict`` controls what happens to content that follows the closing
    quote of a string field value: lenient parsing keeps the fields decoded
    so far and discards the rest of the line, strict parsing drops the line.
    """

    strict: bool = False

    def with_strict(self, enabled: bool = True) -> ParserConfig:
        self.strict = enabled
        return self

    def with_lenient(self) -> ParserConfig:
        self.strict = False
        return self
