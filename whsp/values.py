"""
Text codecs for option values.

Environment storage uses ``to_env_text``/``from_env_text``; the tokenizer
shares ``coerce`` for value tokens.
"""

from __future__ import annotations

import re

from .errors import ParseError
from .types import Boolean, Err, Kind, Number, Ok, Result, String, ValidValue

# Optional sign followed by ASCII digits, nothing else
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_number(text: str, option: str | None = None) -> Result[Number, ParseError]:
    """
    Decode a decimal integer.

    The accepted text is narrower than ``int()``: no surrounding whitespace,
    no underscores, ASCII digits only. The value itself is not bounded, so
    numbers beyond 64 bits decode like any other.
    """
    if not INTEGER_PATTERN.fullmatch(text):
        return Err(ParseError(text, Kind.NUMBER, option))
    return Ok(Number(int(text)))


def coerce(text: str, kind: Kind, option: str | None = None) -> Result[ValidValue, ParseError]:
    """Turn a raw value token into a value of the given kind."""
    if kind == Kind.NUMBER:
        return parse_number(text, option)
    if kind == Kind.STRING:
        return Ok(String(text))
    if kind == Kind.BOOLEAN:
        return Ok(Boolean(text == "1"))
    raise ValueError(f"Unknown config type: {kind!r}")


def to_env_text(value: ValidValue) -> str:
    """
    Encode a value for storage in an environment variable.

    Examples:
        to_env_text(Number(-3))     # "-3"
        to_env_text(String("x y"))  # "x y"
        to_env_text(Boolean(True))  # "1"
    """
    match value:
        case Number(value=n):
            return str(n)
        case String(value=s):
            return s
        case Boolean(value=b):
            return "1" if b else "0"
    raise TypeError(f"Not a valid value: {value!r}")


def from_env_text(text: str, kind: Kind, option: str | None = None) -> Result[ValidValue, ParseError]:
    """
    Decode an environment variable's text as the given kind.

    Booleans are true only for exactly "1"; any other text is false.
    """
    return coerce(text, kind, option)


def format_value(value: ValidValue) -> str:
    """Display form of a value, e.g. for usage text."""
    return str(value)


def to_python(value: ValidValue) -> int | str | bool:
    return value.value
