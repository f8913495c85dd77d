import pytest

from progopts.exceptions import IllegalValueTypeError
from progopts.value_type import ValueType


@pytest.mark.parametrize(
    "python_type, expected",
    [
        (int, ValueType.INTEGRAL),
        (float, ValueType.FLOATING_POINT),
        (str, ValueType.STRING),
        (ValueType.STRING, ValueType.STRING),
        ("int", ValueType.INTEGRAL),
        ("FloatingPoint", ValueType.FLOATING_POINT),
    ],
)
def test_from_type(python_type, expected):
    assert ValueType.from_type(python_type) is expected


@pytest.mark.parametrize("python_type", [bool, list, dict, bytes, "complex"])
def test_from_type_illegal(python_type):
    with pytest.raises(IllegalValueTypeError):
        ValueType.from_type(python_type)


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("integer", ValueType.INTEGRAL),
        ("  Float ", ValueType.FLOATING_POINT),
        ("double", ValueType.FLOATING_POINT),
        ("string", ValueType.STRING),
        ("str", ValueType.STRING),
    ],
)
def test_aliases(alias, expected):
    assert ValueType(alias) is expected


def test_invalid_alias():
    with pytest.raises(ValueError, match="Must be one of"):
        ValueType("decimal")


def test_zero_values():
    assert ValueType.INTEGRAL.zero() == 0
    assert ValueType.FLOATING_POINT.zero() == 0.0
    assert ValueType.STRING.zero() == ""


def test_accepts():
    assert ValueType.INTEGRAL.accepts(3)
    assert not ValueType.INTEGRAL.accepts(True)
    assert not ValueType.INTEGRAL.accepts(3.5)
    assert ValueType.FLOATING_POINT.accepts(3)
    assert ValueType.FLOATING_POINT.normalize(3) == 3.0
    assert isinstance(ValueType.FLOATING_POINT.normalize(3), float)
    assert not ValueType.STRING.accepts(1)


def test_str():
    assert str(ValueType.INTEGRAL) == "Integral"
    assert str(ValueType.FLOATING_POINT) == "FloatingPoint"
    assert str(ValueType.STRING) == "String"
