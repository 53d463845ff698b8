"""
Option descriptors, validation rules and registry settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .types import Kind, ValidValue


@dataclass(frozen=True, slots=True)
class NumberRange:
    """Number within [min, max], both ends inclusive."""

    min: int
    max: int


@dataclass(frozen=True, slots=True)
class Regex:
    """
    String rule.

    Note: values are compared to ``pattern`` literally, not matched as a
    regular expression.
    """

    pattern: str


@dataclass(frozen=True, slots=True)
class NoConstraint:
    """Rule that accepts any value, skipping even the kind check."""


Rule = Union[NumberRange, Regex, NoConstraint]


@dataclass
class ConfigOption:
    """
    Describes one declared option.

    Callers build partial descriptors; ``kind`` and ``multiple`` are fixed by
    the registration call that stores the option.

    Usage:
        ConfigOption(short="c", description="How many", default=Number(1))
        ConfigOption(validator=NumberRange(0, 120))
    """

    kind: Optional[Kind] = None
    short: Optional[str] = None
    default: Optional[ValidValue] = None
    description: Optional[str] = None
    validator: Optional[Rule] = None
    multiple: bool = False


class RegistryOptions(BaseModel):
    """Process-wide parsing policy for a registry."""

    model_config = ConfigDict(frozen=True)

    # Advisory only; the entry point decides whether positionals are an error
    allow_positionals: bool = True
    env_prefix: Optional[str] = None
    usage: Optional[str] = None

    @field_validator("env_prefix")
    @classmethod
    def _check_prefix(cls, v: Optional[str]) -> Optional[str]:
        if v == "":
            raise ValueError("env_prefix must not be empty; use None to disable it")
        return v
