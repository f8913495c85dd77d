# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements the `Dispatcher`, which matches a token sequence against an
`OptionRegistry` and fills in option values.

Token forms:
- `--name` and `--name=value` resolve long options.
- `-c` and clustered `-abc` resolve short options. Only the last character of
  a cluster may take a value, consumed from the following token.
- `--` ends option processing; every later token is positional.
- Anything else, including a lone `-`, is positional.

The first token is the program name. Problems never stop the scan: each one is
recorded as a `ParseError` and dispatch moves on to the next token. After the
scan, every required option that was not set is reported as missing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from progopts.exceptions import (
    AmbiguousShortOptionError,
    ReaderError,
    UnknownShortOptionError,
)
from progopts.logger import logger
from progopts.option import FlagOption, Option, ValuedOption
from progopts.registry import OptionRegistry

END_OF_OPTIONS = "--"


class ErrorKind(Enum):
    """Category of a problem found while parsing a command line."""

    EMPTY_ARGUMENTS = "empty_arguments"
    UNTERMINATED_QUOTE = "unterminated_quote"
    TRAILING_ESCAPE = "trailing_escape"
    UNDEFINED_OPTION = "undefined_option"
    UNDEFINED_SHORT_OPTION = "undefined_short_option"
    AMBIGUOUS_SHORT_OPTION = "ambiguous_short_option"
    OPTION_NEEDS_VALUE = "option_needs_value"
    INVALID_OPTION_VALUE = "invalid_option_value"
    MISSING_REQUIRED_OPTION = "missing_required_option"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseError:
    """A single parse problem with a human-readable message."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ParseResult:
    """Outcome of one dispatch: accumulated errors and leftover positional tokens."""

    program_name: str = ""
    errors: list[ParseError] = field(default_factory=list)
    positional: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def add_error(self, kind: ErrorKind, message: str) -> None:
        logger.debug("Parse error (%s): %s", kind, message)
        self.errors.append(ParseError(kind, message))


class Dispatcher:
    """
    Consumes tokens against a registry, mutating option state in place.

    A dispatcher holds no state of its own between calls; every call to
    `dispatch()` resets the registry's options first.
    """

    def __init__(self, registry: OptionRegistry) -> None:
        self.registry = registry

    def dispatch(self, tokens: Sequence[str]) -> ParseResult:
        """
        Parse `tokens` (program name first) and validate required options.

        Args:
            tokens (Sequence[str]): The argument vector.

        Returns:
            ParseResult: Errors and positional arguments from this parse.
        """
        result = ParseResult()
        self.registry.reset()
        if not tokens:
            result.add_error(
                ErrorKind.EMPTY_ARGUMENTS, "argument vector must not be empty"
            )
            return result

        result.program_name = tokens[0]
        i = 1
        while i < len(tokens):
            token = tokens[i]
            if token == END_OF_OPTIONS:
                result.positional.extend(tokens[i + 1 :])
                break
            if token.startswith("--"):
                i = self._handle_long(tokens, i, result)
            elif token.startswith("-") and len(token) > 1:
                i = self._handle_short(tokens, i, result)
            else:
                result.positional.append(token)
                i += 1

        self._check_required(result)
        logger.debug(
            "Parsed %d token(s) for '%s': %d error(s), %d positional",
            len(tokens) - 1,
            result.program_name,
            len(result.errors),
            len(result.positional),
        )
        return result

    def _handle_long(self, tokens: Sequence[str], i: int, result: ParseResult) -> int:
        body = tokens[i][2:]
        name, separator, value = body.partition("=")
        if name not in self.registry:
            result.add_error(ErrorKind.UNDEFINED_OPTION, f"undefined option: --{name}")
            return i + 1
        option = self.registry.get(name)

        if separator:
            self._assign(option, value, result)
            return i + 1

        if not option.takes_value:
            self._mark(option)
            return i + 1
        if i + 1 >= len(tokens):
            result.add_error(
                ErrorKind.OPTION_NEEDS_VALUE, f"option needs value: --{name}"
            )
            return i + 1
        self._assign(option, tokens[i + 1], result)
        return i + 2

    def _handle_short(self, tokens: Sequence[str], i: int, result: ParseResult) -> int:
        cluster = tokens[i][1:]
        for char in cluster[:-1]:
            option = self._resolve_short(char, result)
            if option is None:
                continue
            if option.takes_value:
                result.add_error(
                    ErrorKind.OPTION_NEEDS_VALUE,
                    f"option needs value: --{option.name} "
                    f"(only the last option in '-{cluster}' may take a value)",
                )
                continue
            self._mark(option)

        option = self._resolve_short(cluster[-1], result)
        if option is None:
            return i + 1
        if not option.takes_value:
            self._mark(option)
            return i + 1
        if i + 1 >= len(tokens):
            result.add_error(
                ErrorKind.OPTION_NEEDS_VALUE, f"option needs value: --{option.name}"
            )
            return i + 1
        self._assign(option, tokens[i + 1], result)
        return i + 2

    def _resolve_short(self, char: str, result: ParseResult) -> Option | None:
        try:
            return self.registry.get(self.registry.resolve_short(char))
        except UnknownShortOptionError as error:
            result.add_error(ErrorKind.UNDEFINED_SHORT_OPTION, str(error))
        except AmbiguousShortOptionError as error:
            result.add_error(ErrorKind.AMBIGUOUS_SHORT_OPTION, str(error))
        return None

    def _mark(self, option: Option) -> None:
        assert isinstance(option, FlagOption), "only flags are set without a value"
        option.mark_set()

    def _assign(self, option: Option, raw: str, result: ParseResult) -> None:
        if not isinstance(option, ValuedOption):
            result.add_error(
                ErrorKind.INVALID_OPTION_VALUE,
                f"option value is invalid: --{option.name}={raw} (flag takes no value)",
            )
            return
        try:
            option.assign(raw)
        except ReaderError as error:
            result.add_error(
                ErrorKind.INVALID_OPTION_VALUE,
                f"option value is invalid: --{option.name}={raw} ({error})",
            )

    def _check_required(self, result: ParseResult) -> None:
        for option in self.registry.all_in_order():
            if not option.is_valid():
                result.add_error(
                    ErrorKind.MISSING_REQUIRED_OPTION,
                    f"missing required option: --{option.name}",
                )
