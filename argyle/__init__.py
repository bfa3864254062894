"""
Argyle CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .dispatch import dispatch
from .help import print_help, render_help
from .logger import logger
from .parser import CommandParser, OptionType, ParseResult
from .runner import run

__all__ = [
    "CommandParser",
    "OptionType",
    "ParseResult",
    "dispatch",
    "logger",
    "print_help",
    "render_help",
    "run",
]
