# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionRegistry`, the owner of every declared option.

The registry enforces unique long names (and, by default, unique short
names), keeps options in declaration order for usage rendering and the
required-option check, and maintains the short-name lookup table used to
resolve `-c` and clustered `-abc` forms.

When built with `allow_short_collisions=True`, a repeated short name is
accepted at registration time and its lookup slot is poisoned: resolving that
character fails with `AmbiguousShortOptionError` instead of picking one of the
owners.
"""
from __future__ import annotations

from typing import Any, Iterator

from progopts.exceptions import (
    AmbiguousShortOptionError,
    DuplicateOptionError,
    IllegalValueTypeError,
    OptionDefinitionError,
    UnknownOptionError,
    UnknownShortOptionError,
)
from progopts.logger import logger
from progopts.option import FlagOption, Option, ValuedOption
from progopts.readers import Reader, reader_value_type
from progopts.value_type import ValueType


class OptionRegistry:
    """
    Insertion-ordered store of `Option` objects keyed by name.

    Args:
        allow_short_collisions (bool): Accept repeated short names and report them
            as ambiguous at parse time instead of rejecting them at registration.
    """

    def __init__(self, allow_short_collisions: bool = False) -> None:
        self.allow_short_collisions: bool = allow_short_collisions
        self._options: dict[str, Option] = {}
        self._short_lookup: dict[str, str | None] | None = None

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise OptionDefinitionError("option name must be a non-empty string")
        if name.startswith("-"):
            raise OptionDefinitionError(
                f"option name '{name}' must not start with '-'"
            )
        if "=" in name or " " in name:
            raise OptionDefinitionError(
                f"option name '{name}' must not contain '=' or spaces"
            )
        if name in self._options:
            raise DuplicateOptionError(f"multiple definition: {name}")

    def _validate_short_name(self, short_name: str | None) -> str | None:
        if short_name in (None, ""):
            return None
        if not isinstance(short_name, str) or len(short_name) != 1:
            raise OptionDefinitionError(
                f"short name {short_name!r} must be a single character"
            )
        if short_name in ("-", "=", " "):
            raise OptionDefinitionError(f"short name {short_name!r} is not allowed")
        owners = self.short_name_owners(short_name)
        if owners and not self.allow_short_collisions:
            raise DuplicateOptionError(
                f"short option '-{short_name}' is already used by '--{owners[0]}'"
            )
        return short_name

    def _add(self, option: Option) -> None:
        self._options[option.name] = option
        self._short_lookup = None
        if option.short_name and len(self.short_name_owners(option.short_name)) > 1:
            logger.warning(
                "Short option '-%s' is shared by %s and is ambiguous.",
                option.short_name,
                ", ".join(self.short_name_owners(option.short_name)),
            )
        logger.debug("Registered option %s", option)

    def register_flag(
        self, name: str, short_name: str | None = None, description: str = ""
    ) -> FlagOption:
        """
        Declare a no-value option.

        Raises:
            DuplicateOptionError: If the name (or short name) is already registered.
            OptionDefinitionError: If the name or short name is malformed.
        """
        self._validate_name(name)
        short_name = self._validate_short_name(short_name)
        option = FlagOption(name=name, short_name=short_name, description=description)
        self._add(option)
        return option

    def register_valued(
        self,
        name: str,
        short_name: str | None = None,
        description: str = "",
        *,
        value_type: ValueType | type = str,
        required: bool = True,
        default: Any = None,
        reader: Reader | None = None,
    ) -> ValuedOption:
        """
        Declare an option holding a typed value.

        Args:
            name (str): Long option name.
            short_name (str | None): Optional single-character alias.
            description (str): Help text.
            value_type (ValueType | type): `int`, `float`, `str` or a `ValueType`.
            required (bool): Whether the option must be given.
            default (Any): Initial value; the zero value of the type if None.
            reader (Reader | None): Custom reader; `DefaultReader` if None.

        Raises:
            IllegalValueTypeError: If the value type, default or reader category
                is not legal for this option.
            DuplicateOptionError: If the name (or short name) is already registered.
        """
        try:
            category = ValueType.from_type(value_type)
        except IllegalValueTypeError as error:
            raise IllegalValueTypeError(f"{error}: {name}") from None
        self._validate_name(name)
        short_name = self._validate_short_name(short_name)
        if default is not None and not category.accepts(default):
            raise IllegalValueTypeError(
                f"default value {default!r} for '{name}' is not a {category} value"
            )
        if reader is not None:
            if not callable(reader):
                raise OptionDefinitionError(f"reader for '{name}' must be callable")
            produced = reader_value_type(reader)
            if produced is not None and produced is not category:
                raise IllegalValueTypeError(
                    f"reader for '{name}' reads {produced} values, expected {category}"
                )
        option = ValuedOption(
            name=name,
            short_name=short_name,
            description=description,
            value_type=category,
            default=category.normalize(default) if default is not None else None,
            required=required,
            reader=reader,
        )
        self._add(option)
        return option

    def short_name_owners(self, short_name: str) -> list[str]:
        """Return the names of every option declaring `short_name`."""
        return [
            option.name
            for option in self._options.values()
            if option.short_name == short_name
        ]

    def _build_short_lookup(self) -> dict[str, str | None]:
        lookup: dict[str, str | None] = {}
        for option in self._options.values():
            if not option.short_name:
                continue
            if option.short_name in lookup:
                lookup[option.short_name] = None
            else:
                lookup[option.short_name] = option.name
        return lookup

    @property
    def short_lookup(self) -> dict[str, str | None]:
        """Mapping of short name to owning option name; None marks an ambiguous slot."""
        if self._short_lookup is None:
            self._short_lookup = self._build_short_lookup()
        return self._short_lookup

    def resolve_short(self, short_name: str) -> str:
        """
        Return the name of the option owning `short_name`.

        Raises:
            UnknownShortOptionError: If no option declares it.
            AmbiguousShortOptionError: If two or more options declare it.
        """
        if short_name not in self.short_lookup:
            raise UnknownShortOptionError(short_name)
        name = self.short_lookup[short_name]
        if name is None:
            raise AmbiguousShortOptionError(
                short_name, self.short_name_owners(short_name)
            )
        return name

    def get(self, name: str) -> Option:
        """
        Return the option registered as `name`.

        Raises:
            UnknownOptionError: If no option has that name.
        """
        try:
            return self._options[name]
        except KeyError:
            raise UnknownOptionError(name) from None

    def all_in_order(self) -> Iterator[Option]:
        """Iterate options in declaration order."""
        return iter(list(self._options.values()))

    def reset(self) -> None:
        """Restore every option to its unset, default state."""
        for option in self._options.values():
            option.reset()

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[Option]:
        return self.all_in_order()

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        required = sum(option.is_required for option in self._options.values())
        short = sum(1 for option in self._options.values() if option.short_name)
        return (
            f"OptionRegistry(options={len(self._options)}, "
            f"short={short}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
