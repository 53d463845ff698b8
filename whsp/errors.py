"""
Error taxonomy for whsp.

Registration, parsing and validation return these inside an Err; calling
``unwrap()`` on the Err raises them.
"""

from __future__ import annotations

from typing import Optional


class WhspError(Exception):
    """Base class for every whsp error."""


class InvalidName(WhspError):
    """
    Option name with a non-alphanumeric character.

    The empty name is rejected too: "--" would otherwise address it.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid option name: {name!r}, must be alphanumeric.")


class DuplicateShortAlias(WhspError):
    def __init__(self, short: str, claimed_by: str):
        self.short = short
        self.claimed_by = claimed_by
        super().__init__(f"Short option {short!r} is already in use by {claimed_by!r}.")


class UnknownOption(WhspError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown config option: {name!r}")


class ValueRejected(WhspError):
    """A value failed its option's rule."""

    def __init__(self, name: str, value, message: str):
        self.name = name
        self.value = value
        super().__init__(message)


class TypeMismatch(ValueRejected):
    def __init__(self, name: str, value, expected):
        self.expected = expected
        self.actual = value.kind
        super().__init__(
            name,
            value,
            f"Option {name!r} expects a {expected.value}, got a {value.kind.value}",
        )


class OutOfRange(ValueRejected):
    def __init__(self, name: str, value, minimum: int, maximum: int):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            name,
            value,
            f"Invalid value {value} for option {name!r}: "
            f"must be a number between {minimum} and {maximum}",
        )


class PatternMismatch(ValueRejected):
    def __init__(self, name: str, value, pattern: str):
        self.pattern = pattern
        super().__init__(
            name, value, f"Invalid value {value} for option {name!r}: must equal {pattern!r}"
        )


class ParseError(WhspError):
    """Text could not be decoded as the requested kind."""

    def __init__(self, text: str, kind, option: Optional[str] = None):
        self.text = text
        self.kind = kind
        self.option = option
        where = f" for option {option!r}" if option else ""
        super().__init__(f"Cannot parse {text!r} as a {kind.value}{where}")
