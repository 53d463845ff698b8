from .env import to_env_key
from .errors import (
    DuplicateShortAlias,
    InvalidName,
    OutOfRange,
    ParseError,
    PatternMismatch,
    TypeMismatch,
    UnknownOption,
    ValueRejected,
    WhspError,
)
from .models import to_pydantic
from .parser import OptionsResult
from .registry import OptionSchemaRegistry
from .schema import ConfigOption, NoConstraint, NumberRange, Regex, RegistryOptions
from .types import Boolean, Err, Kind, Number, Ok, String, ValidValue
from .values import format_value, from_env_text, to_env_text

__all__ = [
    # Values
    "Kind",
    "Number",
    "String",
    "Boolean",
    "ValidValue",
    "to_env_text",
    "from_env_text",
    "format_value",
    # Result types
    "Ok",
    "Err",
    # Schema
    "ConfigOption",
    "NumberRange",
    "Regex",
    "NoConstraint",
    "RegistryOptions",
    "OptionSchemaRegistry",
    "OptionsResult",
    "to_env_key",
    "to_pydantic",
    # Errors
    "WhspError",
    "InvalidName",
    "DuplicateShortAlias",
    "UnknownOption",
    "ValueRejected",
    "TypeMismatch",
    "OutOfRange",
    "PatternMismatch",
    "ParseError",
]
