# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ProgramOptions`, the public entry point of progopts.

It ties together the option registry, the tokenizer, the dispatcher and the
usage formatter behind a small declarative interface.

Key Features:
- Chainable registration via `add()` and `add_flag()`
- Typed values (int, float, str) with default, range and one-of readers
- `--name`, `--name=value`, `-c` and clustered `-abc` syntax
- `--` to end option processing
- Partial failure: every problem on the command line is reported, not just the first
- Plain-text usage rendering

Public Interface:
- `add(...)` / `add_flag(...)`: Declare options.
- `parse(args)`: Parse an argument vector or a single shell-like string.
- `get(name, value_type)` / `exists(name)`: Query parsed state.
- `errors`, `error()`, `all_errors()`, `positional`, `usage()`.

Example Usage:
    options = ProgramOptions(program_name="sample", footer="filename ...")
    options.add("host", "h", "host name")
    options.add("port", "p", "port number", int, required=False, default=80,
                reader=range_reader(1, 65535))
    options.add_flag("gzip", description="gzip when transfer")

    if options.parse(["sample", "--host", "example.com", "-p", "8080"]):
        url = f"{options.get('host', str)}:{options.get('port', int)}"
    else:
        print(options.all_errors())

Instances are not safe for concurrent parsing; each parse mutates option
state in place.
"""
from __future__ import annotations

from typing import Any, Sequence

from progopts.dispatcher import Dispatcher, ErrorKind, ParseError, ParseResult
from progopts.exceptions import (
    IllegalValueTypeError,
    TrailingEscapeError,
    TypeMismatchError,
    UnterminatedQuoteError,
)
from progopts.option import ValuedOption
from progopts.readers import Reader, reader_value_type
from progopts.registry import OptionRegistry
from progopts.tokenizer import tokenize
from progopts.usage import render_usage
from progopts.value_type import ValueType


class ProgramOptions:
    """
    Declarative command line option parser.

    Args:
        program_name (str): Name used in usage text. Taken from the first
            parsed token when left empty.
        footer (str): Text appended to the usage line.
        allow_short_collisions (bool): Accept repeated short names and report
            their use as ambiguous instead of rejecting the declaration.
    """

    def __init__(
        self,
        program_name: str = "",
        footer: str = "",
        allow_short_collisions: bool = False,
    ) -> None:
        self.program_name: str = program_name
        self.footer: str = footer
        self.registry: OptionRegistry = OptionRegistry(
            allow_short_collisions=allow_short_collisions
        )
        self._dispatcher: Dispatcher = Dispatcher(self.registry)
        self._result: ParseResult = ParseResult(program_name=program_name)

    def add_flag(
        self, name: str, short_name: str | None = None, description: str = ""
    ) -> ProgramOptions:
        """Declare a no-value option."""
        self.registry.register_flag(name, short_name, description)
        return self

    def add(
        self,
        name: str,
        short_name: str | None = None,
        description: str = "",
        value_type: ValueType | type | str | None = None,
        *,
        required: bool = True,
        default: Any = None,
        reader: Reader | None = None,
    ) -> ProgramOptions:
        """
        Declare an option carrying a value.

        Args:
            name (str): Long option name.
            short_name (str | None): Optional single-character alias.
            description (str): Help text.
            value_type (ValueType | type | str | None): `int`, `float` or `str`.
                Inferred from `default`, then from `reader`, then `str`.
            required (bool): Whether parsing fails when the option is absent.
            default (Any): Value used when the option is absent.
            reader (Reader | None): Custom reader such as `range_reader(1, 10)`.
        """
        if value_type is None:
            if default is not None:
                value_type = type(default)
            elif reader is not None and reader_value_type(reader) is not None:
                value_type = reader_value_type(reader)
            else:
                value_type = str
        self.registry.register_valued(
            name,
            short_name,
            description,
            value_type=value_type,
            required=required,
            default=default,
            reader=reader,
        )
        return self

    def set_footer(self, footer: str) -> None:
        self.footer = footer

    def set_program_name(self, program_name: str) -> None:
        self.program_name = program_name

    def parse(self, args: str | Sequence[str]) -> bool:
        """
        Parse an argument vector (program name first) or a shell-like string.

        Previous errors and positional arguments are discarded. Tokenization
        errors abort the parse before any option is touched.

        Returns:
            bool: True if no errors were found.
        """
        if isinstance(args, str):
            try:
                tokens = tokenize(args)
            except UnterminatedQuoteError as error:
                return self._fail(ErrorKind.UNTERMINATED_QUOTE, str(error))
            except TrailingEscapeError as error:
                return self._fail(ErrorKind.TRAILING_ESCAPE, str(error))
        else:
            tokens = list(args)

        self._result = self._dispatcher.dispatch(tokens)
        if not self.program_name and self._result.program_name:
            self.program_name = self._result.program_name
        return self._result.ok

    def _fail(self, kind: ErrorKind, message: str) -> bool:
        self.registry.reset()
        self._result = ParseResult(program_name=self.program_name)
        self._result.add_error(kind, message)
        return False

    def get(self, name: str, value_type: ValueType | type | str | None = None) -> Any:
        """
        Return the current value of a valued option.

        Raises:
            UnknownOptionError: If no option is registered as `name`.
            TypeMismatchError: If the option is a flag, or `value_type` differs
                from the option's value type.
        """
        option = self.registry.get(name)
        if not isinstance(option, ValuedOption):
            raise TypeMismatchError(f"type mismatch flag '{name}': option has no value")
        if value_type is not None:
            try:
                requested = ValueType.from_type(value_type)
            except IllegalValueTypeError as error:
                raise TypeMismatchError(f"type mismatch flag '{name}': {error}") from None
            if requested is not option.value_type:
                raise TypeMismatchError(
                    f"type mismatch flag '{name}': requested {requested}, "
                    f"option holds {option.value_type}"
                )
        return option.value

    def exists(self, name: str) -> bool:
        """
        Return True if the option was given on the last parsed command line.

        Raises:
            UnknownOptionError: If no option is registered as `name`.
        """
        return self.registry.get(name).has_set

    @property
    def issues(self) -> list[ParseError]:
        return list(self._result.errors)

    @property
    def errors(self) -> list[str]:
        return self._result.messages

    def error(self) -> str:
        """Return the first error message, or an empty string."""
        return self._result.messages[0] if self._result.errors else ""

    def all_errors(self) -> str:
        return "".join(f"{message}\n" for message in self._result.messages)

    @property
    def positional(self) -> list[str]:
        return list(self._result.positional)

    @property
    def rest(self) -> list[str]:
        return self.positional

    def usage(self) -> str:
        return render_usage(self.program_name, self.footer, self.registry.all_in_order())

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __str__(self) -> str:
        options = list(self.registry.all_in_order())
        flags = sum(not option.takes_value for option in options)
        required = sum(option.is_required for option in options)
        return (
            f"ProgramOptions(options={len(options)}, flags={flags}, "
            f"valued={len(options) - flags}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
