"""Tests for field value variants, literal decoding and canonical encoding."""

import pytest

from lineproto.errors import FieldValueError, LineSyntaxError
from lineproto.values import FieldKind, FieldValue, decode_literal


class TestFieldValue:
    """Test FieldValue construction and validation."""

    def test_float_constructor(self):
        val = FieldValue.float(82.0)
        assert val.kind is FieldKind.FLOAT
        assert val.value == 82.0

    def test_float_accepts_int(self):
        val = FieldValue.float(82)
        assert isinstance(val.value, float)
        assert val == FieldValue.float(82.0)

    def test_integer_constructor(self):
        val = FieldValue.integer(-7)
        assert val.kind is FieldKind.INTEGER
        assert val.value == -7

    def test_boolean_constructor(self):
        assert FieldValue.boolean(True).value is True
        assert FieldValue.boolean(False).kind is FieldKind.BOOLEAN

    def test_string_constructor(self):
        val = FieldValue.string('8"2')
        assert val.kind is FieldKind.STRING
        assert val.value == '8"2'

    def test_kinds_are_distinct(self):
        assert FieldValue.integer(1) != FieldValue.boolean(True)
        assert FieldValue.integer(82) != FieldValue.float(82.0)
        assert FieldValue.string("82") != FieldValue.float(82.0)

    def test_immutable(self):
        val = FieldValue.integer(1)
        with pytest.raises(AttributeError):
            val.value = 2

    def test_hashable(self):
        assert len({FieldValue.integer(1), FieldValue.integer(1), FieldValue.float(1)}) == 2

    def test_unknown_kind_rejected(self):
        with pytest.raises(TypeError):
            FieldValue("unsigned", 1)

    @pytest.mark.parametrize(
        "kind, value",
        [
            (FieldKind.FLOAT, "82"),
            (FieldKind.FLOAT, True),
            (FieldKind.INTEGER, 1.5),
            (FieldKind.INTEGER, True),
            (FieldKind.BOOLEAN, 1),
            (FieldKind.STRING, 82),
        ],
    )
    def test_wrong_payload_type(self, kind, value):
        with pytest.raises(TypeError):
            FieldValue(kind, value)

    def test_integer_out_of_range(self):
        with pytest.raises(ValueError):
            FieldValue.integer(2**63)
        assert FieldValue.integer(-(2**63)).value == -(2**63)

    def test_non_finite_float_rejected(self):
        with pytest.raises(ValueError):
            FieldValue.float(float("nan"))
        with pytest.raises(ValueError):
            FieldValue.float(float("inf"))


class TestDecodeLiteral:
    """Test classification of unquoted field value literals."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("82", 82.0),
            ("82.5", 82.5),
            ("-1.5", -1.5),
            ("+3", 3.0),
            (".5", 0.5),
            ("1.", 1.0),
            ("6.02e23", 6.02e23),
            ("1E-3", 0.001),
        ],
    )
    def test_float(self, text, expected):
        assert decode_literal(text) == FieldValue.float(expected)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("82i", 82),
            ("-82i", -82),
            ("0i", 0),
            ("9223372036854775807i", 2**63 - 1),
            ("-9223372036854775808i", -(2**63)),
        ],
    )
    def test_integer(self, text, expected):
        assert decode_literal(text) == FieldValue.integer(expected)

    @pytest.mark.parametrize("text", ["true", "TRUE", "True", "t", "T"])
    def test_boolean_true(self, text):
        assert decode_literal(text) == FieldValue.boolean(True)

    @pytest.mark.parametrize("text", ["false", "FALSE", "False", "f", "F"])
    def test_boolean_false(self, text):
        assert decode_literal(text) == FieldValue.boolean(False)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "i",
            "8.2i",
            "abci",
            "9223372036854775808i",
            "tRUE",
            "yes",
            "fals",
            "1_000",
            "nan",
            "inf",
            "1e999",
            "82x",
            "--1",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(FieldValueError):
            decode_literal(text)

    def test_invalid_is_syntax_error(self):
        with pytest.raises(LineSyntaxError):
            decode_literal("bogus")


class TestEncode:
    """Test canonical textual encoding of values."""

    def test_float(self):
        assert FieldValue.float(82).encode() == "82.0"
        assert FieldValue.float(-0.25).encode() == "-0.25"

    def test_integer_suffix(self):
        assert FieldValue.integer(82).encode() == "82i"

    def test_boolean(self):
        assert FieldValue.boolean(True).encode() == "true"
        assert FieldValue.boolean(False).encode() == "false"

    def test_string_quoted_and_escaped(self):
        assert FieldValue.string('8"2').encode() == '"8\\"2"'
        assert FieldValue.string("8\\").encode() == '"8\\\\"'

    def test_str_matches_encode(self):
        assert str(FieldValue.integer(5)) == "5i"

    @pytest.mark.parametrize(
        "value",
        [
            FieldValue.float(82.0),
            FieldValue.float(1e20),
            FieldValue.float(-3.5e-7),
            FieldValue.integer(-42),
            FieldValue.boolean(True),
            FieldValue.boolean(False),
        ],
    )
    def test_literal_roundtrip(self, value):
        assert decode_literal(value.encode()) == value
