"""
Environment bridge.

Maps option values to and from environment variables named
``{PREFIX}_{NAME}``. All access goes through a mapping argument that
defaults to ``os.environ``, so callers can pass a plain dict instead.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Mapping, MutableMapping, Optional

from .errors import ParseError
from .types import Err, Ok, Result, ValidValue
from .values import from_env_text, to_env_text

if TYPE_CHECKING:
    from .parser import OptionsResult
    from .registry import OptionSchemaRegistry

logger = logging.getLogger(__name__)


def to_env_key(prefix: str, name: str) -> str:
    """
    Environment variable name for an option.

    Examples:
        to_env_key("app", "age")  # "APP_AGE"
    """
    return f"{prefix.upper()}_{name.upper()}"


def write_env(
    registry: OptionSchemaRegistry,
    result: OptionsResult,
    env: Optional[MutableMapping[str, str]] = None,
) -> list[str]:
    """
    Export parsed values as environment variables.

    Each write is independent; there is no rollback. Does nothing when the
    registry has no prefix.

    Returns:
        The variable names written
    """
    prefix = registry.options.env_prefix
    if not prefix:
        return []
    if env is None:
        env = os.environ

    written = []
    for name, value in result.values.items():
        key = to_env_key(prefix, name)
        env[key] = to_env_text(value)
        written.append(key)
    logger.debug("Wrote %d environment variables", len(written))
    return written


def load_env_defaults(
    registry: OptionSchemaRegistry,
    env: Optional[Mapping[str, str]] = None,
) -> Result[dict[str, ValidValue], ParseError]:
    """
    Decode the prefixed variables present for registered options.

    Returns:
        Ok({name: value}) for the variables that are set
        Err(ParseError) for the first one that cannot be decoded
    """
    prefix = registry.options.env_prefix
    if not prefix:
        return Ok({})
    if env is None:
        env = os.environ

    found: dict[str, ValidValue] = {}
    for name, option in registry.config_set.items():
        key = to_env_key(prefix, name)
        text = env.get(key)
        if text is None:
            continue
        decoded = from_env_text(text, option.kind, name)
        if isinstance(decoded, Err):
            logger.debug("Cannot decode %s=%r", key, text)
            return decoded
        found[name] = decoded.value
    return Ok(found)
