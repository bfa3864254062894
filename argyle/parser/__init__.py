"""
Argyle CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_spec import ArgumentSpec
from .command_parser import CommandParser
from .command_spec import CommandSpec
from .option_spec import OptionSpec
from .option_type import OptionType
from .parse_result import ErrorList, ParseError, ParseErrorKind, ParseResult
from .short_names import allocate_short_names
from .tokenizer import Tokenizer

__all__ = [
    "ArgumentSpec",
    "CommandParser",
    "CommandSpec",
    "ErrorList",
    "OptionSpec",
    "OptionType",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "Tokenizer",
    "allocate_short_names",
]
