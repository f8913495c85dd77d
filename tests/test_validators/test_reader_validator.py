import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from progopts import ProgramOptions, one_of, range_reader
from progopts.exceptions import TypeMismatchError
from progopts.validators import option_validator, reader_validator


def test_reader_validator_accepts_valid_values():
    validator = reader_validator(range_reader(1, 10))
    for valid in ["1", "5", "10"]:
        validator.validate(Document(valid))


@pytest.mark.parametrize("invalid", ["0", "11", "5.5", "hello", "-1", ""])
def test_reader_validator_rejects_invalid(invalid):
    validator = reader_validator(range_reader(1, 10))
    with pytest.raises(ValidationError):
        validator.validate(Document(invalid))


def test_reader_validator_custom_message():
    validator = reader_validator(one_of("a", "b"), error_message="Pick a or b.")
    with pytest.raises(ValidationError) as excinfo:
        validator.validate(Document("c"))
    assert excinfo.value.message == "Pick a or b."


def test_reader_validator_plain_callable():
    validator = reader_validator(int)
    validator.validate(Document("12"))
    with pytest.raises(ValidationError):
        validator.validate(Document("twelve"))


def test_option_validator():
    options = ProgramOptions()
    options.add("port", "p", "port", int, reader=range_reader(1, 65535))
    options.add_flag("gzip")
    validator = option_validator(options, "port")
    validator.validate(Document("8080"))
    with pytest.raises(ValidationError):
        validator.validate(Document("70000"))
    with pytest.raises(TypeMismatchError):
        option_validator(options, "gzip")
