"""
Value validation against declared option rules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional

from .errors import OutOfRange, PatternMismatch, TypeMismatch, UnknownOption, WhspError
from .schema import ConfigOption, NoConstraint, NumberRange, Regex
from .types import Err, Number, Ok, Result, String, ValidValue

if TYPE_CHECKING:
    from .registry import OptionSchemaRegistry


def validate_value(
    name: str, option: ConfigOption, value: ValidValue
) -> Optional[WhspError]:
    """
    Check one value against its option.

    Without a rule the value's kind must equal the declared kind. A rule
    replaces the kind check entirely.

    Returns:
        None if the value is accepted, otherwise the error
    """
    rule = option.validator
    match rule:
        case None:
            if value.kind != option.kind:
                return TypeMismatch(name, value, option.kind)
        case NumberRange(min=lo, max=hi):
            if not (isinstance(value, Number) and lo <= value.value <= hi):
                return OutOfRange(name, value, lo, hi)
        case Regex(pattern=pattern):
            # Literal comparison, the pattern is not compiled
            if not (isinstance(value, String) and value.value == pattern):
                return PatternMismatch(name, value, pattern)
        case NoConstraint():
            pass
        case _:
            raise TypeError(f"Unknown validator: {rule!r}")
    return None


def validate(
    registry: OptionSchemaRegistry, values: Mapping[str, ValidValue]
) -> Result[Mapping[str, ValidValue], WhspError]:
    """
    Validate values against a registry.

    Returns:
        Ok(values) if every value passes
        Err(error) for the first failing pair, in iteration order

    Usage:
        reg.num({"age": ConfigOption(validator=NumberRange(0, 120))})
        validate(reg, {"age": Number(30)})   # Ok
        validate(reg, {"age": Number(200)})  # Err(OutOfRange)
    """
    for name, value in values.items():
        option = registry.get(name)
        if option is None:
            return Err(UnknownOption(name))
        error = validate_value(name, option, value)
        if error is not None:
            return Err(error)
    return Ok(values)
