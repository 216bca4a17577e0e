"""Line protocol error types."""

from __future__ import annotations


class LineProtocolError(Exception):
    """Base exception for all line protocol errors."""


class LineSyntaxError(LineProtocolError):
    """A line could not be decoded into a point.

    Raised by the line decoder and recovered by ``LineProtocolParser``, which
    drops the offending line and moves on to the next one.
    """

    def __init__(self, reason: str, position: int | None = None) -> None:
        msg = reason
        if position is not None:
            msg += f" (at offset {position})"
        super().__init__(msg)
        self.reason = reason
        self.position = position
        self.line_number: int | None = None


class MeasurementError(LineSyntaxError):
    """Empty or malformed measurement name."""


class TagError(LineSyntaxError):
    """Empty or malformed tag key or tag value."""


class FieldError(LineSyntaxError):
    """Empty or malformed field key, or a line without fields."""


class FieldValueError(LineSyntaxError):
    """Unquoted field value is not a valid float, integer or boolean."""


class UnterminatedStringError(LineSyntaxError):
    """Quoted field value has no closing quote."""


class TrailingContentError(LineSyntaxError):
    """Content follows a closing quote (strict mode only)."""


class TimestampError(LineSyntaxError):
    """Timestamp is not a signed 64-bit integer."""


class PointsExhaustedError(LineProtocolError, StopIteration):
    """No point is available; the payload has been fully consumed."""

    def __init__(self, message: str = "No more points in payload") -> None:
        super().__init__(message)
