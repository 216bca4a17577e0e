"""Single-line decoder.

Decodes one line starting at the cursor, in order:

    measurement  up to an unescaped ',' (tags follow) or ' ' (fields follow)
    tags         key '=' value, separated by ',', ended by ' '
    fields       key '=' value, separated by ',', ended by ' ', newline or end
    timestamp    optional signed 64-bit integer, rest of the line

Any violation raises a ``LineSyntaxError`` subclass and no point is produced.
"""

from __future__ import annotations

import logging
import re

from lineproto.errors import (
    FieldError,
    FieldValueError,
    MeasurementError,
    TagError,
    TimestampError,
    TrailingContentError,
)
from lineproto.point import Point
from lineproto.scanner import Cursor
from lineproto.values import INT64_MAX, INT64_MIN, FieldValue, decode_literal

log = logging.getLogger("lineproto.decoder")

_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")

# Characters that may follow a field value.
_FIELD_VALUE_END = (",", " ", "\r", "\n", "")


def decode_line(cursor: Cursor, *, strict: bool = False) -> Point:
    """Decode the line at the cursor into a Point.

    On success the cursor is left past the line's newline (or at end of
    input). On failure the cursor is left at the offending position.

    Raises:
        lineproto.errors.LineSyntaxError: if the line is malformed.
    """
    start = cursor.pos
    measurement, sep = cursor.scan_token(" ,", forbidden="=", error=MeasurementError)
    if not measurement:
        raise MeasurementError("Empty measurement", start)

    tags: dict[str, str] = {}
    while sep == ",":
        key_pos = cursor.pos
        key, _ = cursor.scan_token("=", forbidden=", ", error=TagError)
        if not key:
            raise TagError("Empty tag key", key_pos)
        value_pos = cursor.pos
        value, sep = cursor.scan_token(", ", error=TagError)
        if not value:
            raise TagError(f"Empty value for tag {key!r}", value_pos)
        tags[key] = value

    cursor.skip_spaces()
    fields: dict[str, FieldValue] = {}
    while True:
        key_pos = cursor.pos
        key, _ = cursor.scan_token("=", forbidden=", ", error=FieldError)
        if not key:
            raise FieldError("Empty field key", key_pos)

        if cursor.peek() == '"':
            fields[key] = FieldValue.string(cursor.scan_quoted())
            if cursor.peek() not in _FIELD_VALUE_END:
                if strict:
                    raise TrailingContentError(
                        f"Unexpected content after string value of field {key!r}",
                        cursor.pos,
                    )
                discarded = cursor.rest_of_line()
                log.debug(
                    "Discarding %d characters after string value of field %r",
                    len(discarded),
                    key,
                )
                return Point(measurement, tags, fields)
        else:
            value_pos = cursor.pos
            try:
                fields[key] = decode_literal(cursor.scan_literal())
            except FieldValueError as e:
                raise FieldValueError(e.reason, value_pos) from None

        if cursor.peek() != ",":
            break
        cursor.advance()

    return Point(measurement, tags, fields, _decode_timestamp(cursor))


def _decode_timestamp(cursor: Cursor) -> int | None:
    # The line is only consumed once the timestamp is known to be valid.
    pos = cursor.pos
    raw = cursor.current_line().strip()
    value = None
    if raw:
        if not _TIMESTAMP_RE.fullmatch(raw):
            raise TimestampError(f"Invalid timestamp: {raw!r}", pos)
        value = int(raw)
        if not INT64_MIN <= value <= INT64_MAX:
            raise TimestampError(f"Timestamp out of range: {raw!r}", pos)
    cursor.skip_line()
    return value
