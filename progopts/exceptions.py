# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by progopts.

Registration and lookup problems are raised directly to the caller. Problems
found while dispatching a command line are never raised; they are collected
as `ParseError` records on the parse result instead. Tokenization errors are
raised by `tokenize()` and recorded by `ProgramOptions.parse()`.

All exceptions inherit from `ProgramOptionsError`.

Exception Hierarchy:
- ProgramOptionsError
    ├── OptionDefinitionError
    │   ├── DuplicateOptionError
    │   └── IllegalValueTypeError
    ├── TokenizeError
    │   ├── UnterminatedQuoteError
    │   └── TrailingEscapeError
    ├── OptionLookupError
    │   ├── UnknownOptionError
    │   ├── UnknownShortOptionError
    │   ├── AmbiguousShortOptionError
    │   └── TypeMismatchError
    └── ReaderError
        ├── RangeError
        └── OneOfError
"""


class ProgramOptionsError(Exception):
    """Base exception for progopts."""


class OptionDefinitionError(ProgramOptionsError):
    """Exception raised when an option is declared with invalid settings."""


class DuplicateOptionError(OptionDefinitionError):
    """Exception raised when an option name or short name is already registered."""


class IllegalValueTypeError(OptionDefinitionError):
    """Exception raised when an option value type is not integral, floating point or string."""


class TokenizeError(ProgramOptionsError):
    """Exception raised when a command line string cannot be split into tokens."""


class UnterminatedQuoteError(TokenizeError):
    """Exception raised when the input ends inside an open quote."""

    def __init__(self, message: str = "quote is not closed"):
        super().__init__(message)


class TrailingEscapeError(TokenizeError):
    """Exception raised when the input ends with a lone backslash."""

    def __init__(self, message: str = "unexpected occurrence of '\\' at end of string"):
        super().__init__(message)


class OptionLookupError(ProgramOptionsError):
    """Exception raised when an option cannot be resolved."""


class UnknownOptionError(OptionLookupError):
    """Exception raised when no option is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"there is no option: --{name}")


class UnknownShortOptionError(OptionLookupError):
    """Exception raised when no option is registered under a short name."""

    def __init__(self, short_name: str):
        self.short_name = short_name
        super().__init__(f"undefined short option: -{short_name}")


class AmbiguousShortOptionError(OptionLookupError):
    """Exception raised when several options share a short name."""

    def __init__(self, short_name: str, names: list[str] | None = None):
        self.short_name = short_name
        self.names = names or []
        super().__init__(f"ambiguous short options: -{short_name}")


class TypeMismatchError(OptionLookupError):
    """Exception raised when an option value is requested as the wrong type."""


class ReaderError(ProgramOptionsError, ValueError):
    """Exception raised when a reader rejects a raw option value."""


class RangeError(ReaderError):
    """Exception raised when a value falls outside the allowed bounds."""


class OneOfError(ReaderError):
    """Exception raised when a value is not one of the allowed values."""
