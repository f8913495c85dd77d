import pytest

from progopts.exceptions import ReaderError
from progopts.option import FlagOption, ValuedOption
from progopts.readers import DefaultReader, range_reader
from progopts.value_type import ValueType


def test_flag_option():
    option = FlagOption(name="gzip", description="gzip when transfer")
    assert not option.takes_value
    assert not option.is_required
    assert option.is_valid()
    assert not option.has_set
    option.mark_set()
    assert option.has_set
    option.reset()
    assert not option.has_set
    assert option.short_description == "--gzip"
    assert option.full_description == "gzip when transfer"
    assert option.flags == ("--gzip",)


def test_valued_option_defaults():
    option = ValuedOption(name="port", short_name="p", value_type=ValueType.INTEGRAL)
    assert option.takes_value
    assert option.is_required
    assert option.default == 0
    assert option.value == 0
    assert option.reader == DefaultReader(int)
    assert not option.is_valid()
    assert option.flags == ("-p", "--port")


def test_valued_option_assign():
    option = ValuedOption(
        name="port",
        value_type=ValueType.INTEGRAL,
        default=80,
        required=False,
        reader=range_reader(1, 65535),
    )
    assert option.assign("8080") == 8080
    assert option.value == 8080
    assert option.has_set

    option.reset()
    assert option.value == 80
    assert not option.has_set


def test_valued_option_failed_assign_keeps_state():
    option = ValuedOption(
        name="port",
        value_type=ValueType.INTEGRAL,
        default=80,
        required=False,
        reader=range_reader(1, 65535),
    )
    option.assign("443")
    with pytest.raises(ReaderError):
        option.assign("99999")
    assert option.value == 443
    assert option.has_set

    option.reset()
    with pytest.raises(ReaderError):
        option.assign("http")
    assert option.value == 80
    assert not option.has_set


def test_valued_option_custom_reader_errors():
    def hex_value(raw: str) -> int:
        return int(raw, 16)

    option = ValuedOption(name="mask", value_type=ValueType.INTEGRAL, reader=hex_value)
    assert option.assign("ff") == 255
    with pytest.raises(ReaderError):
        option.assign("zz")


def test_valued_option_reader_returning_wrong_type():
    option = ValuedOption(name="level", value_type=ValueType.INTEGRAL, reader=str.upper)
    with pytest.raises(ReaderError, match="expected Integral"):
        option.assign("debug")
    assert not option.has_set


@pytest.mark.parametrize(
    "value_type, default, required, expected",
    [
        (ValueType.STRING, "", True, "host name (String)"),
        (ValueType.INTEGRAL, 80, False, "host name (Integral [=80])"),
        (ValueType.STRING, "http", False, 'host name (String [="http"])'),
        (ValueType.FLOATING_POINT, 0.5, False, "host name (FloatingPoint [=0.5])"),
    ],
)
def test_valued_option_full_description(value_type, default, required, expected):
    option = ValuedOption(
        name="host",
        description="host name",
        value_type=value_type,
        default=default,
        required=required,
    )
    assert option.full_description == expected


def test_valued_option_short_description():
    option = ValuedOption(name="host", value_type=ValueType.STRING)
    assert option.short_description == "--host=String"
