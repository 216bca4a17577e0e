"""Decoded point record and its canonical serialization.

Canonical line form::

    measurement[,tag_key=tag_value...] field_key=field_value[,...] [timestamp]

Measurement, tag keys, tag values and field keys are escaped for comma,
equals sign, space and backslash; tags and fields keep their insertion order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from lineproto.escape import escape_identifier
from lineproto.values import INT64_MAX, INT64_MIN, FieldValue


@dataclass(frozen=True, slots=True)
class Point:
    """A single decoded line: measurement, tags, fields and optional timestamp."""

    measurement: str
    tags: Mapping[str, str]
    fields: Mapping[str, FieldValue]
    timestamp: int | None = None

    def __post_init__(self) -> None:
        if not self.measurement:
            raise ValueError("Point measurement must not be empty")
        _check_identifier("measurement", self.measurement)

        tags = dict(self.tags)
        for key, value in tags.items():
            if not key or not value:
                raise ValueError(f"Empty tag key or value: {key!r}={value!r}")
            _check_identifier("tag key", key)
            _check_identifier("tag value", value)

        fields = dict(self.fields)
        if not fields:
            raise ValueError("Point must have at least one field")
        for key, value in fields.items():
            if not key:
                raise ValueError("Empty field key")
            _check_identifier("field key", key)
            if not isinstance(value, FieldValue):
                raise TypeError(f"Field {key!r} is not a FieldValue: {value!r}")

        if self.timestamp is not None:
            if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, int):
                raise TypeError(f"Timestamp must be an int, got {self.timestamp!r}")
            if not INT64_MIN <= self.timestamp <= INT64_MAX:
                raise ValueError(f"Timestamp out of 64-bit range: {self.timestamp}")

        object.__setattr__(self, "tags", MappingProxyType(tags))
        object.__setattr__(self, "fields", MappingProxyType(fields))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            self.measurement == other.measurement
            and dict(self.tags) == dict(other.tags)
            and dict(self.fields) == dict(other.fields)
            and self.timestamp == other.timestamp
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.measurement,
                frozenset(self.tags.items()),
                frozenset(self.fields.items()),
                self.timestamp,
            )
        )

    def to_line(self) -> str:
        """Serialize this point to a canonical line (no trailing newline)."""
        parts = [escape_identifier(self.measurement)]
        for key, value in self.tags.items():
            parts.append(f",{escape_identifier(key)}={escape_identifier(value)}")
        parts.append(" ")
        parts.append(
            ",".join(
                f"{escape_identifier(key)}={value.encode()}"
                for key, value in self.fields.items()
            )
        )
        if self.timestamp is not None:
            parts.append(f" {self.timestamp}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_line()


def _check_identifier(what: str, text: str) -> None:
    # An escaped trailing backslash would escape the delimiter written after it.
    if text.endswith("\\"):
        raise ValueError(f"{what.capitalize()} must not end in a backslash: {text!r}")
