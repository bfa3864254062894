# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Runs a command line end to end: parse, report, then dispatch.

`run()` is the conventional caller of `CommandParser.parse()`. It prints the
error messages followed by the help listing when the parse fails, prints the
help listing when `-?/--help` was given, and otherwise dispatches the parse
result to the target object.
"""
from __future__ import annotations

import sys
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape

from argyle.console import console as default_console
from argyle.dispatch import dispatch
from argyle.help import print_help
from argyle.logger import logger
from argyle.parser.command_parser import CommandParser


def run(
    parser: CommandParser,
    target: Any,
    argv: Sequence[str] | str | None = None,
    console: Console | None = None,
) -> int:
    """
    Parse `argv` and dispatch it to `target`.

    Args:
        parser (CommandParser): The declared commands.
        target (Any): Object exposing `params` and one method per command.
        argv (Sequence[str] | str | None): Arguments, defaults to `sys.argv[1:]`.
        console (Console | None): Where to print errors and help.

    Returns:
        int: 0 on success or help, 1 on parse errors.

    Raises:
        DispatchError: If the target cannot handle the parsed command.
    """
    console = console or default_console
    if argv is None:
        argv = sys.argv[1:]
    result = parser.parse(argv)
    if not result.valid:
        logger.info("Invalid command line: %s", result.error_messages)
        for message in result.error_messages:
            console.print(escape(message), soft_wrap=True)
        console.print()
        print_help(parser, console)
        return 1
    if result.help:
        logger.info("Help requested for '%s'.", result.command)
        print_help(parser, console)
        return 0
    dispatch(result, target)
    return 0
