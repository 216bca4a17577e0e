"""Pull-based iterator over the points of a line protocol payload.

Blank lines and ``#`` comment lines are skipped. Malformed lines are dropped
and decoding resumes on the next line; the caller only ever sees decoded
points or exhaustion.

Example::

    parser = LineProtocolParser(payload)
    while parser.has_next():
        point = parser.next_point()
        store(point)

    # or simply
    for point in LineProtocolParser(payload, strict=True):
        store(point)
"""

from __future__ import annotations

import logging
from enum import Enum

from lineproto.config import ParserConfig
from lineproto.decoder import decode_line
from lineproto.errors import LineSyntaxError, PointsExhaustedError
from lineproto.point import Point
from lineproto.scanner import NEWLINE, Cursor

log = logging.getLogger("lineproto.parser")


class ParserState(Enum):
    """Scan-ahead state of a ``LineProtocolParser``."""

    PENDING_SCAN = "pending_scan"
    READY = "ready"
    EXHAUSTED = "exhausted"


class LineProtocolParser:
    """Single-use, forward-only sequence of points decoded from a payload.

    ``has_next()`` scans ahead to the next decodable line and caches its
    point; ``next_point()`` hands the cached point over. The parser also
    implements the iterator protocol.
    """

    def __init__(
        self,
        payload: str,
        strict: bool = False,
        *,
        config: ParserConfig | None = None,
    ) -> None:
        self._config = config if config is not None else ParserConfig(strict=strict)
        self._cursor = Cursor(payload)
        self._state = ParserState.PENDING_SCAN
        self._pending: Point | None = None
        self._line_no = 1
        self._points_read = 0
        self._rejected_lines = 0

    @property
    def strict(self) -> bool:
        return self._config.strict

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def line_number(self) -> int:
        """1-based number of the line the parser will read next."""
        return self._line_no

    @property
    def points_read(self) -> int:
        return self._points_read

    @property
    def rejected_lines(self) -> int:
        """Number of malformed lines dropped so far."""
        return self._rejected_lines

    # --- Pull interface ---

    def has_next(self) -> bool:
        """Whether another point is available, scanning ahead if needed."""
        if self._state is ParserState.PENDING_SCAN:
            self._scan_ahead()
        return self._state is ParserState.READY

    def next_point(self) -> Point:
        """Return the next point.

        Raises:
            PointsExhaustedError: if the payload holds no further points.
        """
        if not self.has_next():
            raise PointsExhaustedError()
        point = self._pending
        self._pending = None
        self._state = ParserState.PENDING_SCAN
        self._points_read += 1
        return point

    def __iter__(self) -> LineProtocolParser:
        return self

    def __next__(self) -> Point:
        return self.next_point()

    # --- Scanning ---

    def _scan_ahead(self) -> None:
        cursor = self._cursor
        while not cursor.at_end:
            start = cursor.pos
            line_no = self._line_no
            point = None

            if _is_blank_or_comment(cursor.current_line()):
                cursor.skip_line()
            else:
                try:
                    point = decode_line(cursor, strict=self._config.strict)
                except LineSyntaxError as e:
                    e.line_number = line_no
                    self._rejected_lines += 1
                    log.debug("Dropping line %d: %s", line_no, e)
                    cursor.skip_line()

            # Quoted string values may span several physical lines.
            self._line_no += cursor.text.count(NEWLINE, start, cursor.pos)

            if point is not None:
                self._pending = point
                self._state = ParserState.READY
                return

        self._state = ParserState.EXHAUSTED
        log.debug(
            "Payload exhausted: %d points, %d rejected lines",
            self._points_read,
            self._rejected_lines,
        )


def _is_blank_or_comment(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_points(payload: str, strict: bool = False) -> list[Point]:
    """Decode every valid point in a payload."""
    return list(LineProtocolParser(payload, strict=strict))
