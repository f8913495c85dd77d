# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueType`, the enum of value categories a valued option may hold.

Option values are stored behind a uniform `Option` interface; the category
recorded here is what `ProgramOptions.get()` checks a requested type against
and what the usage text shows for each option.

Supports alias coercion for config-friendly names.

Example:
    ValueType("Integral") → ValueType.INTEGRAL
    ValueType("int")      → ValueType.INTEGRAL (via alias)
    ValueType.from_type(float) → ValueType.FLOATING_POINT
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from progopts.exceptions import IllegalValueTypeError


class ValueType(Enum):
    """
    Value category of a valued option.

    Members:
        INTEGRAL: Whole numbers, stored as `int`.
        FLOATING_POINT: Real numbers, stored as `float`.
        STRING: Text, stored as `str`.

    Aliases:
        - "int" / "integer" → "Integral"
        - "float" / "double" → "FloatingPoint"
        - "str" / "string" → "String"
    """

    INTEGRAL = "Integral"
    FLOATING_POINT = "FloatingPoint"
    STRING = "String"

    @classmethod
    def from_type(cls, python_type: Any) -> ValueType:
        """Map a Python type (or an existing ValueType) to its category."""
        if isinstance(python_type, ValueType):
            return python_type
        if isinstance(python_type, str):
            try:
                return cls(python_type)
            except ValueError as error:
                raise IllegalValueTypeError(str(error)) from None
        # bool subclasses int but has no textual form readers could parse
        if python_type is bool:
            raise IllegalValueTypeError("illegal type: bool (use a flag option)")
        for member in cls:
            if python_type is member.python_type:
                return member
        name = getattr(python_type, "__name__", repr(python_type))
        raise IllegalValueTypeError(
            f"illegal type: {name}. Must be one of: int, float, str"
        )

    @classmethod
    def of_value(cls, value: Any) -> ValueType:
        """Return the category of a concrete value."""
        return cls.from_type(type(value))

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "int": "integral",
            "integer": "integral",
            "float": "floatingpoint",
            "double": "floatingpoint",
            "floating_point": "floatingpoint",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value.lower() == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def python_type(self) -> type:
        return {
            ValueType.INTEGRAL: int,
            ValueType.FLOATING_POINT: float,
            ValueType.STRING: str,
        }[self]

    def zero(self) -> Any:
        """Return the default-constructed value for this category."""
        return self.python_type()

    def accepts(self, value: Any) -> bool:
        """Check whether a value can be stored under this category as-is."""
        if isinstance(value, bool):
            return False
        if self is ValueType.FLOATING_POINT:
            return isinstance(value, (int, float))
        return isinstance(value, self.python_type)

    def normalize(self, value: Any) -> Any:
        """Store ints given for floating point options as floats."""
        if self is ValueType.FLOATING_POINT and isinstance(value, int):
            return float(value)
        return value

    def __str__(self) -> str:
        return self.value
