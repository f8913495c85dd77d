"""
progopts

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .dispatcher import Dispatcher, ErrorKind, ParseError, ParseResult
from .exceptions import ProgramOptionsError
from .logger import logger
from .option import FlagOption, Option, ValuedOption
from .parser import ProgramOptions
from .readers import DefaultReader, OneOfReader, RangeReader, one_of, range_reader
from .registry import OptionRegistry
from .tokenizer import tokenize
from .usage import render_usage
from .value_type import ValueType
from .version import __version__

__all__ = [
    "ProgramOptions",
    "OptionRegistry",
    "Dispatcher",
    "ParseResult",
    "ParseError",
    "ErrorKind",
    "Option",
    "FlagOption",
    "ValuedOption",
    "ValueType",
    "DefaultReader",
    "RangeReader",
    "OneOfReader",
    "range_reader",
    "one_of",
    "tokenize",
    "render_usage",
    "ProgramOptionsError",
    "logger",
    "__version__",
]
