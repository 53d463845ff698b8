"""
OptionSchemaRegistry - the table of declared options.

Options are registered in batches with a fixed kind and multiplicity:

    reg = OptionSchemaRegistry(env_prefix="app")
    reg.num({"count": ConfigOption(short="c", default=Number(1))})
    reg.flag({"verbose": ConfigOption(short="v")})
    result = reg.parse_raw(["--count", "5", "-v", "file.txt"])
"""

from __future__ import annotations

import logging
from dataclasses import replace as _copy_with
from typing import Any, Iterator, Mapping, MutableMapping, Optional, Sequence

from . import env as _env
from . import parser as _parser
from . import validation as _validation
from .errors import DuplicateShortAlias, InvalidName, ParseError, WhspError
from .parser import OptionsResult
from .schema import ConfigOption, RegistryOptions
from .types import Err, Kind, Ok, Result, ValidValue

logger = logging.getLogger(__name__)


def is_valid_name(name: str) -> bool:
    return bool(name) and all(c.isalnum() for c in name)


class OptionSchemaRegistry:
    """
    Owns declared options, the short alias index and parsing policy.

    Mutated during setup (registration, ``set_defaults_from_env``) and read
    by parsing and validation afterwards.
    """

    def __init__(self, options: Optional[RegistryOptions] = None, **settings: Any):
        """
        Args:
            options: Ready-made settings
            **settings: Fields for RegistryOptions when ``options`` is omitted
        """
        if options is not None and settings:
            raise TypeError("Pass either options or keyword settings, not both")
        self.options = options if options is not None else RegistryOptions(**settings)
        self.config_set: dict[str, ConfigOption] = {}
        self.short_options: dict[str, str] = {}

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self.config_set

    def __len__(self) -> int:
        return len(self.config_set)

    def __iter__(self) -> Iterator[str]:
        return iter(self.config_set)

    def get(self, name: str) -> Optional[ConfigOption]:
        return self.config_set.get(name)

    def resolve_short(self, short: str) -> Optional[str]:
        """Name registered under a short alias, if any."""
        return self.short_options.get(short)

    def defaults(self) -> dict[str, ValidValue]:
        return {
            name: option.default
            for name, option in self.config_set.items()
            if option.default is not None
        }

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def validate_name(self, name: str, option: ConfigOption) -> Result[str, WhspError]:
        """
        Check a name and claim its short alias.

        Returns:
            Ok(name) after recording the alias mapping
            Err(InvalidName) for an empty or non-alphanumeric name
            Err(DuplicateShortAlias) if another name holds the alias
        """
        error = self._check_name(name, option)
        if error is not None:
            return Err(error)
        if option.short is not None:
            self.short_options[option.short] = name
        return Ok(name)

    def register(
        self,
        fields: Mapping[str, ConfigOption],
        kind: Kind,
        multiple: bool = False,
    ) -> Result[list[str], WhspError]:
        """
        Register a batch of options with a fixed kind and multiplicity.

        The whole batch is checked before anything is stored, so a failure
        leaves the registry unchanged. A name that is already registered is
        overwritten and its old aliases released, so another entry of the
        same batch may take them over.

        Returns:
            Ok([names]) on success
            Err(InvalidName | DuplicateShortAlias) on the first bad entry
        """
        # Alias index as it will look once the batch is stored
        pending = {
            short: owner
            for short, owner in self.short_options.items()
            if owner not in fields
        }
        for name, option in fields.items():
            error = self._check_name(name, option, pending)
            if error is None and option.short is not None:
                pending[option.short] = name
            if error is not None:
                logger.debug("Rejected %s batch: %s", kind.value, error)
                return Err(error)

        for name, option in fields.items():
            self._store(name, _copy_with(option, kind=kind, multiple=multiple))
        return Ok(list(fields))

    def num(self, fields: Mapping[str, ConfigOption]) -> Result[list[str], WhspError]:
        return self.register(fields, Kind.NUMBER)

    def num_list(self, fields: Mapping[str, ConfigOption]) -> Result[list[str], WhspError]:
        return self.register(fields, Kind.NUMBER, multiple=True)

    def opt(self, fields: Mapping[str, ConfigOption]) -> Result[list[str], WhspError]:
        return self.register(fields, Kind.STRING)

    def opt_list(self, fields: Mapping[str, ConfigOption]) -> Result[list[str], WhspError]:
        return self.register(fields, Kind.STRING, multiple=True)

    def flag(self, fields: Mapping[str, ConfigOption]) -> Result[list[str], WhspError]:
        return self.register(fields, Kind.BOOLEAN)

    def flag_list(self, fields: Mapping[str, ConfigOption]) -> Result[list[str], WhspError]:
        return self.register(fields, Kind.BOOLEAN, multiple=True)

    def replace(self, name: str, option: ConfigOption) -> Result[str, WhspError]:
        """
        Swap the descriptor of a registered option.

        The registered kind and multiplicity are kept.

        Raises:
            KeyError: if ``name`` is not registered
        """
        current = self.config_set[name]
        error = self._check_name(name, option)
        if error is not None:
            return Err(error)
        self._store(
            name, _copy_with(option, kind=current.kind, multiple=current.multiple)
        )
        return Ok(name)

    def remove(self, name: str) -> ConfigOption:
        """
        Drop an option and its short alias.

        Raises:
            KeyError: if ``name`` is not registered
        """
        option = self.config_set.pop(name)
        self._release_aliases(name)
        return option

    def _check_name(
        self,
        name: str,
        option: ConfigOption,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> Optional[WhspError]:
        if not is_valid_name(name):
            return InvalidName(name)
        if aliases is None:
            aliases = self.short_options
        if option.short is not None:
            owner = aliases.get(option.short)
            if owner is not None and owner != name:
                return DuplicateShortAlias(option.short, owner)
        return None

    def _store(self, name: str, option: ConfigOption) -> None:
        if name in self.config_set:
            logger.debug("Overwriting option %s", name)
        self._release_aliases(name)
        self.config_set[name] = option
        if option.short is not None:
            self.short_options[option.short] = name

    def _release_aliases(self, name: str) -> None:
        """Drop every alias pointing at ``name``, however it was recorded."""
        for short in [s for s, owner in self.short_options.items() if owner == name]:
            del self.short_options[short]
            logger.debug("Released short alias %s of %s", short, name)

    # ------------------------------------------------------------------
    # Parsing, validation and environment
    # ------------------------------------------------------------------

    def parse_raw(self, args: Sequence[str]) -> Result[OptionsResult, ParseError]:
        """See ``whsp.parser.parse_raw``."""
        return _parser.parse_raw(self, args)

    def parse(
        self, args: Optional[Sequence[str]] = None
    ) -> Result[OptionsResult, WhspError]:
        """Parse ``args`` (default ``sys.argv[1:]``) and validate the values."""
        return _parser.parse(self, args)

    def validate(
        self, values: Mapping[str, ValidValue]
    ) -> Result[Mapping[str, ValidValue], WhspError]:
        """See ``whsp.validation.validate``."""
        return _validation.validate(self, values)

    def resolve(self, result: OptionsResult) -> dict[str, ValidValue]:
        """Registered defaults overlaid with the parsed values."""
        return {**self.defaults(), **result.values}

    def write_env(
        self,
        result: OptionsResult,
        env: Optional[MutableMapping[str, str]] = None,
    ) -> list[str]:
        """See ``whsp.env.write_env``."""
        return _env.write_env(self, result, env)

    def set_defaults_from_env(
        self, env: Optional[Mapping[str, str]] = None
    ) -> Result[list[str], ParseError]:
        """
        Overwrite option defaults from prefixed environment variables.

        Nothing is changed when any variable fails to decode.

        Returns:
            Ok([names whose default changed])
            Err(ParseError) for the first malformed variable
        """
        loaded = _env.load_env_defaults(self, env)
        if isinstance(loaded, Err):
            return loaded
        for name, value in loaded.value.items():
            self.config_set[name].default = value
        return Ok(list(loaded.value))
