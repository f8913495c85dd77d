# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for Prompt Toolkit built from option readers.

Lets an interactive prompt enforce the same rules as the command line, e.g.
asking for a missing `--port` with the option's range reader.

Included Validators:
- reader_validator: Wraps any reader as a `Validator`.
- option_validator: Wraps the reader of a registered valued option.
"""
from prompt_toolkit.validation import ValidationError, Validator

from progopts.exceptions import ReaderError, TypeMismatchError
from progopts.option import ValuedOption
from progopts.parser import ProgramOptions
from progopts.readers import Reader


class ReaderValidator(Validator):
    """Validator that accepts input only if `reader` can read it."""

    def __init__(self, reader: Reader, error_message: str | None = None) -> None:
        self.reader = reader
        self.error_message = error_message
        super().__init__()

    def validate(self, document):
        text = document.text
        try:
            self.reader(text)
        except (ReaderError, ValueError, TypeError) as error:
            raise ValidationError(
                message=self.error_message or f"Invalid input. {error}",
                cursor_position=len(text),
            ) from error


def reader_validator(reader: Reader, error_message: str | None = None) -> Validator:
    """Validator for values accepted by a reader."""
    return ReaderValidator(reader, error_message)


def option_validator(options: ProgramOptions, name: str) -> Validator:
    """Validator for values of the valued option `name`."""
    option = options.registry.get(name)
    if not isinstance(option, ValuedOption):
        raise TypeMismatchError(f"option '{name}' takes no value")
    assert option.reader is not None, "valued options always have a reader"
    return ReaderValidator(option.reader)
