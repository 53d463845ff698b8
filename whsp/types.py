"""
Type definitions for whsp.

Provides the accepted value kinds, the ValidValue union and a minimal
Result type (Ok/Err).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


class Kind(Enum):
    """Value kinds an option can be declared with."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    kind = Kind.NUMBER

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class String:
    value: str

    kind = Kind.STRING

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool

    kind = Kind.BOOLEAN

    def __str__(self) -> str:
        return "true" if self.value else "false"


ValidValue = Union[Number, String, Boolean]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(self.error)


Result = Union[Ok[T], Err[E]]
