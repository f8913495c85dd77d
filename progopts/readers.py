# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value readers: pure callables that turn a raw option string into a typed value.

Every valued option owns exactly one reader. A reader either returns the
parsed value or raises `ReaderError`; it never mutates shared state and only
holds the configuration captured at construction (bounds, allowed values).

Readers:
- DefaultReader: parses the whole string as the option's value category.
- RangeReader: parses, then enforces an inclusive `[begin, end]` bound.
- OneOfReader: parses, then enforces membership in a fixed set of values.

Factories:
- range_reader(begin, end)
- one_of(*values)

Any other callable taking a string may be used as a reader; `ValueError` and
`TypeError` raised from it are reported as invalid option values.
"""
from __future__ import annotations

import math
import re
from typing import Any, Callable

from progopts.exceptions import (
    OneOfError,
    OptionDefinitionError,
    RangeError,
    ReaderError,
)
from progopts.value_type import ValueType

Reader = Callable[[str], Any]

INTEGRAL_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOATING_POINT_PATTERN = re.compile(
    r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?"
)


def read_value(raw: str, value_type: ValueType) -> Any:
    """
    Parse `raw` as `value_type`, requiring the entire string to be consumed.

    Raises:
        ReaderError: If the string is not a complete value of that category.
    """
    if value_type is ValueType.STRING:
        return raw
    if value_type is ValueType.INTEGRAL:
        if not INTEGRAL_PATTERN.fullmatch(raw):
            raise ReaderError(f"'{raw}' is not an integral value")
        return int(raw)
    if not FLOATING_POINT_PATTERN.fullmatch(raw):
        raise ReaderError(f"'{raw}' is not a floating point value")
    value = float(raw)
    if math.isinf(value):
        raise ReaderError(f"'{raw}' is out of range for a floating point value")
    return value


def reader_value_type(reader: Reader) -> ValueType | None:
    """Return the value category a reader produces, if it declares one."""
    value_type = getattr(reader, "value_type", None)
    if isinstance(value_type, ValueType):
        return value_type
    return None


def format_value(value: Any) -> str:
    """Render a value the way it is shown in usage and error text."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class DefaultReader:
    """Reads a value using the canonical textual form of its category."""

    def __init__(self, value_type: ValueType | type = str) -> None:
        self.value_type: ValueType = ValueType.from_type(value_type)

    def __call__(self, raw: str) -> Any:
        return read_value(raw, self.value_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefaultReader) or type(other) is not type(self):
            return False
        return self.value_type == other.value_type

    def __hash__(self) -> int:
        return hash((type(self), self.value_type))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value_type})"


class RangeReader(DefaultReader):
    """
    Reads a value and checks it lies within an inclusive range.

    Args:
        begin: Lowest accepted value.
        end: Highest accepted value.
        value_type: Category to read; inferred from `begin` and `end` if omitted.
    """

    def __init__(
        self, begin: Any, end: Any, value_type: ValueType | type | None = None
    ) -> None:
        if value_type is None:
            if ValueType.of_value(begin) != ValueType.of_value(end):
                value_type = ValueType.FLOATING_POINT
            else:
                value_type = ValueType.of_value(begin)
        super().__init__(value_type)
        if not (self.value_type.accepts(begin) and self.value_type.accepts(end)):
            raise OptionDefinitionError(
                f"range bounds {begin!r}, {end!r} are not {self.value_type} values"
            )
        if begin > end:
            raise OptionDefinitionError(
                f"range begin {begin!r} is greater than end {end!r}"
            )
        self.begin = self.value_type.normalize(begin)
        self.end = self.value_type.normalize(end)

    def __call__(self, raw: str) -> Any:
        value = super().__call__(raw)
        if value < self.begin or value > self.end:
            raise RangeError(
                f"range error: {format_value(value)} is not in "
                f"[{format_value(self.begin)}, {format_value(self.end)}]"
            )
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeReader):
            return False
        return (self.value_type, self.begin, self.end) == (
            other.value_type,
            other.begin,
            other.end,
        )

    def __hash__(self) -> int:
        return hash((type(self), self.value_type, self.begin, self.end))

    def __repr__(self) -> str:
        return f"RangeReader({self.begin!r}, {self.end!r})"


class OneOfReader(DefaultReader):
    """
    Reads a value and checks it is one of a fixed set of allowed values.

    Args:
        *allowed: The accepted values, all of the same category.
        value_type: Category to read; inferred from the first value if omitted.
    """

    def __init__(self, *allowed: Any, value_type: ValueType | type | None = None) -> None:
        if not allowed:
            raise OptionDefinitionError("one_of requires at least one allowed value")
        if value_type is None:
            value_type = ValueType.of_value(allowed[0])
        super().__init__(value_type)
        for value in allowed:
            if not self.value_type.accepts(value):
                raise OptionDefinitionError(
                    f"allowed value {value!r} is not a {self.value_type} value"
                )
        ordered: dict[Any, None] = {}
        for value in allowed:
            ordered[self.value_type.normalize(value)] = None
        self.allowed: tuple[Any, ...] = tuple(ordered)
        self._allowed_set = frozenset(self.allowed)

    def __call__(self, raw: str) -> Any:
        value = super().__call__(raw)
        if value not in self._allowed_set:
            choices = ", ".join(format_value(choice) for choice in self.allowed)
            raise OneOfError(f"oneof error: '{raw}' is not one of {{{choices}}}")
        return value

    def __contains__(self, value: object) -> bool:
        return value in self._allowed_set

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OneOfReader):
            return False
        return self.value_type == other.value_type and self._allowed_set == other._allowed_set

    def __hash__(self) -> int:
        return hash((type(self), self.value_type, self._allowed_set))

    def __repr__(self) -> str:
        return f"OneOfReader({', '.join(repr(value) for value in self.allowed)})"


def range_reader(begin: Any, end: Any) -> RangeReader:
    """Build a reader accepting values in the inclusive range `[begin, end]`."""
    return RangeReader(begin, end)


def one_of(*values: Any, value_type: ValueType | type | None = None) -> OneOfReader:
    """Build a reader accepting only the given values."""
    return OneOfReader(*values, value_type=value_type)
