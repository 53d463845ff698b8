"""
Argument tokenizer.

Supports:
- Long options: "--count 5", "--verbose"
- Short aliases: "-c 5", "-v"
- Positionals: any token without a leading "-"

Boolean options take no value token. Unregistered options are dropped, and
a value option at the end of the argument list is skipped.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .errors import ParseError, WhspError
from .types import Boolean, Err, Kind, Ok, Result, ValidValue
from .values import coerce, to_python

if TYPE_CHECKING:
    from .registry import OptionSchemaRegistry

logger = logging.getLogger(__name__)

LONG_MARKER = "--"
SHORT_MARKER = "-"


@dataclass
class OptionsResult:
    """Values found on the command line plus the leftover positionals."""

    values: dict[str, ValidValue] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Plain Python payloads keyed by option name."""
        return {name: to_python(value) for name, value in self.values.items()}


def _option_name(registry: OptionSchemaRegistry, token: str) -> Optional[str]:
    """Registered option a token refers to, or None."""
    if token.startswith(LONG_MARKER):
        name = token[len(LONG_MARKER) :]
        return name if name in registry else None
    name = registry.resolve_short(token[len(SHORT_MARKER) :])
    return name if name is not None and name in registry else None


def parse_raw(
    registry: OptionSchemaRegistry, args: Sequence[str]
) -> Result[OptionsResult, ParseError]:
    """
    Scan ``args`` once, left to right.

    Args:
        registry: Option table used to resolve names, aliases and kinds
        args: Argument tokens without the program name

    Returns:
        Ok(OptionsResult) with values and positionals
        Err(ParseError) if a number option's value is not an integer
    """
    values: dict[str, ValidValue] = {}
    positionals: list[str] = []

    i = 0
    while i < len(args):
        token = args[i]
        if not token.startswith(SHORT_MARKER):
            positionals.append(token)
            i += 1
            continue

        name = _option_name(registry, token)
        if name is None:
            logger.debug("Dropping unregistered option %s", token)
            i += 1
            continue

        kind = registry.config_set[name].kind
        if kind == Kind.BOOLEAN:
            values[name] = Boolean(True)
        elif i + 1 < len(args):
            coerced = coerce(args[i + 1], kind, name)
            if isinstance(coerced, Err):
                return coerced
            values[name] = coerced.value
            i += 1
        else:
            logger.debug("Option %s has no value, skipping", token)
        i += 1

    return Ok(OptionsResult(values=values, positionals=positionals))


def parse(
    registry: OptionSchemaRegistry, args: Optional[Sequence[str]] = None
) -> Result[OptionsResult, WhspError]:
    """Parse then validate; ``args`` defaults to ``sys.argv[1:]``."""
    if args is None:
        args = sys.argv[1:]
    parsed = parse_raw(registry, args)
    if isinstance(parsed, Err):
        return parsed
    checked = registry.validate(parsed.value.values)
    if isinstance(checked, Err):
        return checked
    return parsed
