"""
Tests for value kinds and their text codecs.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from whsp import (
    Boolean,
    Err,
    Kind,
    Number,
    Ok,
    ParseError,
    String,
    format_value,
    from_env_text,
    to_env_text,
)
from whsp.values import coerce

valid_values = st.one_of(
    st.integers().map(Number),
    st.text().map(String),
    st.booleans().map(Boolean),
)


class TestValidValue:
    def test_equality_by_kind_and_payload(self):
        assert Number(1) == Number(1)
        assert Number(1) != Number(2)
        assert String("1") != Number(1)
        assert Boolean(True) != String("true")

    def test_kind(self):
        assert Number(1).kind is Kind.NUMBER
        assert String("x").kind is Kind.STRING
        assert Boolean(False).kind is Kind.BOOLEAN

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Number(1).value = 2  # type: ignore[misc]

    def test_format(self):
        assert format_value(Number(-7)) == "-7"
        assert format_value(String("a b")) == "a b"
        assert format_value(Boolean(True)) == "true"
        assert format_value(Boolean(False)) == "false"


class TestEnvText:
    def test_encode(self):
        assert to_env_text(Number(42)) == "42"
        assert to_env_text(String("hello world")) == "hello world"
        assert to_env_text(Boolean(True)) == "1"
        assert to_env_text(Boolean(False)) == "0"

    def test_decode_number(self):
        assert from_env_text("42", Kind.NUMBER) == Ok(Number(42))
        assert from_env_text("-42", Kind.NUMBER) == Ok(Number(-42))
        assert from_env_text("+7", Kind.NUMBER) == Ok(Number(7))

    def test_decode_number_beyond_64_bits(self):
        text = str(2**64)
        assert from_env_text(text, Kind.NUMBER) == Ok(Number(2**64))
        assert from_env_text("-" + text, Kind.NUMBER) == Ok(Number(-(2**64)))

    @pytest.mark.parametrize("text", ["", "abc", "4.2", " 5", "1_000", "5\n", "--1"])
    def test_decode_bad_number(self, text):
        result = from_env_text(text, Kind.NUMBER, "age")
        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)
        assert result.error.option == "age"
        assert result.error.text == text

    def test_decode_boolean_only_one_is_true(self):
        assert from_env_text("1", Kind.BOOLEAN) == Ok(Boolean(True))
        assert from_env_text("0", Kind.BOOLEAN) == Ok(Boolean(False))
        assert from_env_text("true", Kind.BOOLEAN) == Ok(Boolean(False))
        assert from_env_text("", Kind.BOOLEAN) == Ok(Boolean(False))

    def test_boolean_both_directions_agree(self):
        for flag in (True, False):
            text = to_env_text(Boolean(flag))
            assert from_env_text(text, Kind.BOOLEAN) == Ok(Boolean(flag))

    def test_decode_string_verbatim(self):
        assert from_env_text(" padded ", Kind.STRING) == Ok(String(" padded "))

    @given(valid_values)
    def test_round_trip(self, value):
        assert from_env_text(to_env_text(value), value.kind) == Ok(value)


class TestCoerce:
    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            coerce("1", "number")  # type: ignore[arg-type]

    def test_unwrap_raises_parse_error(self):
        with pytest.raises(ParseError):
            coerce("five", Kind.NUMBER).unwrap()
