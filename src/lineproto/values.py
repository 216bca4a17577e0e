"""Field value variants and their textual encoding.

A field value is one of four kinds:
    Kind      Literal                 Example
    FLOAT     decimal number          82, -1.5, 6.02e23
    INTEGER   integer + ``i``         82i, -7i
    BOOLEAN   t/true/f/false (any     true, F, FALSE
              of the listed cases)
    STRING    double-quoted text      "8\\"2"
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from lineproto.errors import FieldValueError
from lineproto.escape import quote_string

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_TRUE_LITERALS = frozenset(("t", "T", "true", "True", "TRUE"))
_FALSE_LITERALS = frozenset(("f", "F", "false", "False", "FALSE"))

# Python's int() and float() also accept underscores, whitespace, "inf" and
# "nan"; the wire format does not.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class FieldKind(Enum):
    """Field value type identifiers."""

    FLOAT = "float"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class FieldValue:
    """A single typed field value."""

    kind: FieldKind
    value: float | int | bool | str

    def __post_init__(self) -> None:
        kind, value = self.kind, self.value
        if kind is FieldKind.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Float field value must be a number, got {value!r}")
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(f"Float field value must be finite, got {value!r}")
            object.__setattr__(self, "value", value)
        elif kind is FieldKind.INTEGER:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Integer field value must be an int, got {value!r}")
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError(f"Integer field value out of 64-bit range: {value}")
        elif kind is FieldKind.BOOLEAN:
            if not isinstance(value, bool):
                raise TypeError(f"Boolean field value must be a bool, got {value!r}")
        elif kind is FieldKind.STRING:
            if not isinstance(value, str):
                raise TypeError(f"String field value must be a str, got {value!r}")
        else:
            raise TypeError(f"Unknown field kind: {kind!r}")

    # --- Constructors ---

    @classmethod
    def float(cls, value: float) -> FieldValue:
        return cls(FieldKind.FLOAT, value)

    @classmethod
    def integer(cls, value: int) -> FieldValue:
        return cls(FieldKind.INTEGER, value)

    @classmethod
    def boolean(cls, value: bool) -> FieldValue:
        return cls(FieldKind.BOOLEAN, value)

    @classmethod
    def string(cls, value: str) -> FieldValue:
        return cls(FieldKind.STRING, value)

    # --- Serialization ---

    def encode(self) -> str:
        """Render this value in its canonical line protocol form."""
        kind, value = self.kind, self.value
        if kind is FieldKind.FLOAT:
            return repr(value)
        if kind is FieldKind.INTEGER:
            return f"{value}i"
        if kind is FieldKind.BOOLEAN:
            return "true" if value else "false"
        if kind is FieldKind.STRING:
            return quote_string(value)
        raise TypeError(f"Unknown field kind: {kind!r}")

    def __str__(self) -> str:
        return self.encode()


def decode_literal(text: str) -> FieldValue:
    """Decode an unquoted field value literal.

    Raises:
        lineproto.errors.FieldValueError: if the literal is not a valid
            integer, boolean or float.
    """
    if not text:
        raise FieldValueError("Empty field value")

    if text.endswith("i"):
        digits = text[:-1]
        if not _INTEGER_RE.fullmatch(digits):
            raise FieldValueError(f"Invalid integer field value: {text!r}")
        value = int(digits)
        if not INT64_MIN <= value <= INT64_MAX:
            raise FieldValueError(f"Integer field value out of range: {text!r}")
        return FieldValue.integer(value)

    if text in _TRUE_LITERALS:
        return FieldValue.boolean(True)
    if text in _FALSE_LITERALS:
        return FieldValue.boolean(False)

    if not _FLOAT_RE.fullmatch(text):
        raise FieldValueError(f"Invalid field value: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise FieldValueError(f"Float field value out of range: {text!r}")
    return FieldValue.float(value)
