"""lineproto: streaming decoder for the metric-point line protocol.

Decodes newline-delimited line protocol payloads into immutable ``Point``
records (measurement, tags, typed fields, optional timestamp), and
serializes points back to canonical lines.

Example usage::

    from lineproto import LineProtocolParser, FieldValue

    payload = (
        "# sensor dump\\n"
        "weather,location=us-midwest temperature=82 1465839830100400200\\n"
        'weather,location=us-east temperature=79i,note="sunny"\\n'
    )

    parser = LineProtocolParser(payload)
    while parser.has_next():
        point = parser.next_point()
        print(point.measurement, dict(point.tags), dict(point.fields))
        print(point.to_line())

    assert point.fields["temperature"] == FieldValue.integer(79)
"""

from lineproto.config import ParserConfig
from lineproto.decoder import decode_line
from lineproto.errors import (
    FieldError,
    FieldValueError,
    LineProtocolError,
    LineSyntaxError,
    MeasurementError,
    PointsExhaustedError,
    TagError,
    TimestampError,
    TrailingContentError,
    UnterminatedStringError,
)
from lineproto.escape import (
    escape_identifier,
    escape_string,
    quote_string,
    unescape_identifier,
    unescape_string,
)
from lineproto.parser import LineProtocolParser, ParserState, parse_points
from lineproto.point import Point
from lineproto.scanner import Cursor
from lineproto.values import FieldKind, FieldValue, decode_literal

__version__ = "0.1.0"

__all__ = [
    # Values
    "FieldKind",
    "FieldValue",
    "decode_literal",
    # Escaping
    "escape_identifier",
    "unescape_identifier",
    "escape_string",
    "unescape_string",
    "quote_string",
    # Decoding
    "Cursor",
    "Point",
    "decode_line",
    "LineProtocolParser",
    "ParserState",
    "parse_points",
    # Errors
    "LineProtocolError",
    "LineSyntaxError",
    "MeasurementError",
    "TagError",
    "FieldError",
    "FieldValueError",
    "UnterminatedStringError",
    "TrailingContentError",
    "TimestampError",
    "PointsExhaustedError",
    # Config
    "ParserConfig",
]
