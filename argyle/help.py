# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the help listing of a `CommandParser` as aligned plain text.

The listing has two sections, "Commands" and "Global options". Each command is
followed by its own options, indented. Descriptions start in one column per
section, after the widest label of that section:

    Commands

    install [file] <mode=fast>  # Install a file
      -f/--force                # Overwrite existing files
    kill [pid]                  # Stop a process

    Global options

    -v/--verbose  # Be loud
    -?/--help     # Print help message

Rendering has no side effects beyond finalizing the parser, and repeated calls
return identical text.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from argyle.console import console as default_console
from argyle.parser.command_parser import HELP, CommandParser
from argyle.parser.option_spec import OptionSpec

INDENT = "  "


def _format_rows(rows: list[tuple[str, str]]) -> list[str]:
    width = max((len(label) for label, _ in rows), default=0)
    lines = []
    for label, description in rows:
        if description:
            lines.append(f"{label:<{width}}  # {description}")
        else:
            lines.append(label)
    return lines


def _option_row(option: OptionSpec, indent: str = "") -> tuple[str, str]:
    return f"{indent}{option.get_label_text()}", option.description


def render_help(parser: CommandParser) -> str:
    """
    Render the help listing for every command and global option.

    Args:
        parser (CommandParser): The parser to describe.

    Returns:
        str: The help text, without a trailing newline.
    """
    parser.finalize()
    sections: list[str] = []

    command_rows: list[tuple[str, str]] = []
    for command in parser.commands:
        command_rows.append((command.get_label_text(), command.description))
        command_rows.extend(
            _option_row(option, INDENT) for option in command.options.values()
        )
    if command_rows:
        sections.append("\n".join(["Commands", "", *_format_rows(command_rows)]))

    global_options = parser.global_options
    ordered = [option for name, option in global_options.items() if name != HELP]
    if HELP in global_options:
        ordered.append(global_options[HELP])
    if ordered:
        rows = [_option_row(option) for option in ordered]
        sections.append("\n".join(["Global options", "", *_format_rows(rows)]))

    return "\n\n".join(sections)


def print_help(parser: CommandParser, console: Console | None = None) -> None:
    """Print the help listing through a Rich console."""
    (console or default_console).print(escape(render_help(parser)), soft_wrap=True)
