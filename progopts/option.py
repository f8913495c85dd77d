# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the option model stored by `OptionRegistry`.

Every declared option is an `Option` with a uniform interface, in one of two
variants:

- `FlagOption`: a no-value switch; presence on the command line sets it.
- `ValuedOption`: holds one typed value (integral, floating point or string),
  read from a raw string by its reader, with a default and a required flag.

Option state (`has_set`, `value`) is mutated only by the dispatcher during a
parse and restored to defaults with `reset()` at the start of each parse.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from progopts.exceptions import ReaderError
from progopts.readers import DefaultReader, Reader, format_value
from progopts.value_type import ValueType


@dataclass
class Option:
    """
    Base option record.

    Attributes:
        name (str): Long name, used as `--name` and as the lookup key.
        short_name (str | None): Single character used as `-c`, if any.
        description (str): Help text shown in usage output.
        has_set (bool): Whether the option appeared on the last parsed command line.
    """

    name: str
    short_name: str | None = None
    description: str = ""
    has_set: bool = field(default=False, compare=False)

    @property
    def takes_value(self) -> bool:
        return False

    @property
    def is_required(self) -> bool:
        return False

    def is_valid(self) -> bool:
        """Return False if the option is required but was not given."""
        return not self.is_required or self.has_set

    def reset(self) -> None:
        self.has_set = False

    @property
    def full_description(self) -> str:
        return self.description

    @property
    def short_description(self) -> str:
        return f"--{self.name}"

    @property
    def flags(self) -> tuple[str, ...]:
        if self.short_name:
            return (f"-{self.short_name}", f"--{self.name}")
        return (f"--{self.name}",)


@dataclass
class FlagOption(Option):
    """An option without a value; it is either set or not."""

    def mark_set(self) -> None:
        self.has_set = True

    def __str__(self) -> str:
        return f"FlagOption({', '.join(self.flags)})"


@dataclass
class ValuedOption(Option):
    """
    An option carrying a single typed value.

    Attributes:
        value_type (ValueType): Category of the stored value.
        default (Any): Value used when the option is not given.
        required (bool): True if parsing fails when the option is absent.
        reader (Reader | None): Converts the raw string; defaults to `DefaultReader`.
        value (Any): Current value, equal to `default` until assigned.
    """

    value_type: ValueType = ValueType.STRING
    default: Any = None
    required: bool = True
    reader: Reader | None = field(default=None, compare=False)
    value: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.default is None:
            self.default = self.value_type.zero()
        if self.reader is None:
            self.reader = DefaultReader(self.value_type)
        self.value = self.default

    @property
    def takes_value(self) -> bool:
        return True

    @property
    def is_required(self) -> bool:
        return self.required

    def reset(self) -> None:
        super().reset()
        self.value = self.default

    def assign(self, raw: str) -> Any:
        """
        Read `raw` through the reader and store the result.

        Raises:
            ReaderError: If the reader rejects the value. The current value and
                `has_set` are left unchanged.
        """
        assert self.reader is not None, "reader is set in __post_init__"
        try:
            value = self.reader(raw)
        except ReaderError:
            raise
        except (ValueError, TypeError) as error:
            raise ReaderError(str(error) or f"cannot read '{raw}'") from error
        if not self.value_type.accepts(value):
            raise ReaderError(
                f"reader returned {type(value).__name__}, expected {self.value_type}"
            )
        self.value = self.value_type.normalize(value)
        self.has_set = True
        return self.value

    @property
    def full_description(self) -> str:
        detail = str(self.value_type)
        if not self.required:
            default = format_value(self.default)
            if self.value_type is ValueType.STRING:
                default = f'"{default}"'
            detail = f"{detail} [={default}]"
        return f"{self.description} ({detail})"

    @property
    def short_description(self) -> str:
        return f"--{self.name}={self.value_type}"

    def __str__(self) -> str:
        return f"ValuedOption({', '.join(self.flags)}, type={self.value_type})"
