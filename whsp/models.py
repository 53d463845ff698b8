"""
Pydantic interop for whsp registries.

Provides to_pydantic(), which compiles registered options to a model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from typing import Optional as TypingOptional

from pydantic import Field, create_model

from .schema import ConfigOption
from .types import Kind
from .values import to_python

if TYPE_CHECKING:
    from .registry import OptionSchemaRegistry

PYTHON_TYPES: dict[Kind, type] = {
    Kind.NUMBER: int,
    Kind.STRING: str,
    Kind.BOOLEAN: bool,
}


def to_pydantic(registry: OptionSchemaRegistry, name: str = "Options") -> type:
    """
    Compile a registry to a Pydantic model.

    Args:
        registry: Registry whose options become fields
        name: Name of the generated model class

    Returns:
        A Pydantic BaseModel subclass with one optional field per option

    Usage:
        Options = to_pydantic(reg)
        parsed = reg.parse_raw(argv).unwrap()
        opts = Options(**parsed.to_dict())
    """
    fields: dict[str, Any] = {}

    for key, option in registry.config_set.items():
        fields[key] = _extract_pydantic_field(option)

    return create_model(name, **fields)


def _extract_pydantic_field(option: ConfigOption) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from an option."""
    if option.kind is None:
        raise ValueError("Option has no kind; register it first")
    field_type = PYTHON_TYPES[option.kind]
    default = to_python(option.default) if option.default is not None else None

    # Parsing keeps the last occurrence, so list options stay scalar here
    extra = {"multiple": True} if option.multiple else None

    return (
        TypingOptional[field_type],
        Field(
            default=default,
            description=option.description,
            json_schema_extra=extra,
        ),
    )
