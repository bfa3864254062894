# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandParser`, the engine that turns a raw token list into
a validated, typed `ParseResult` for one of a set of declared commands.

Unlike argparse, the parser never raises on bad input and never exits. Every
problem it finds is collected into an `ErrorList`, in a fixed order, and the
caller decides whether to print the errors, show help, or retry.

Key Features:
- Declarative registration via `add_command()`, `add_global_option()`,
  `CommandSpec.add_argument()` and `CommandSpec.add_option()`
- Six value kinds with eager type inference (`OptionType`)
- Automatic, deterministic short names (`-?` is always help)
- `--name=value`, `--name value`, `--no-name`, `-xvalue` and `-abc` bundling
- Splat and greedy trailing arguments
- Required/default resolution for options and arguments
- Aggregated, ordered error messages

Public Interface:
- `add_command(...)`: Declare a command and return its `CommandSpec`.
- `add_global_option(...)`: Declare an option shared by all commands.
- `finalize()`: Validate the model and assign short names.
- `parse(...)`: Parse a token list (or a shell-like string) into a `ParseResult`.

Example Usage:
    parser = CommandParser()
    parser.add_global_option("verbose", "Be loud")
    install = parser.add_command("install", "Install a file")
    install.add_argument("file", "The file to install")

    result = parser.parse(["-v", "install", "file"])
    # result.command == "install"
    # result.args == ["file"]
    # result.params == {"help": False, "verbose": True}

    parser.parse(["install"]).error_messages
    # ["File is required"]
"""
from __future__ import annotations

import shlex
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from argyle.exceptions import CoercionError, InclusionError, SpecError
from argyle.logger import logger
from argyle.parser.argument_spec import ArgumentSpec
from argyle.parser.coerce import check_inclusion, coerce_bool, coerce_value, display_name
from argyle.parser.command_spec import CommandSpec, build_tokenizer, resolve_options
from argyle.parser.option_spec import OptionSpec, RunHook, build_option
from argyle.parser.option_type import OptionType
from argyle.parser.parse_result import ErrorList, ParseErrorKind, ParseResult
from argyle.parser.short_names import HELP_SHORT_NAME
from argyle.parser.tokenizer import (
    LongOption,
    Positional,
    ShortFlagGroup,
    ShortOption,
    Token,
    Tokenizer,
    UnknownOption,
)

HELP = "help"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass
class ParseState:
    """Mutable state of a single parse call."""

    command: CommandSpec
    errors: ErrorList = field(default_factory=ErrorList)
    given: dict[str, Any] = field(default_factory=dict)
    seen: set[str] = field(default_factory=set)
    positionals: list[Positional] = field(default_factory=list)
    hook_calls: list[tuple[RunHook, Any]] = field(default_factory=list)


class CommandParser:
    """
    Declarative command-line parser for Argyle commands.

    Features:
    - Commands with ordered positional arguments.
    - Global and command-local options.
    - Type coercion and inclusion checks.
    - Required and default values.
    - Automatic short names.
    - Aggregated, ordered error messages instead of exceptions.
    """

    def __init__(self, help_option: bool = True) -> None:
        """
        Initialize the CommandParser.

        Args:
            help_option (bool): Add the synthetic `-?/--help` global option.
        """
        self.help_option: bool = help_option
        self._commands: dict[str, CommandSpec] = {}
        self._global_options: dict[str, OptionSpec] = {}
        self._resolved_global_options: dict[str, OptionSpec] = {}
        self._global_tokenizer: Tokenizer | None = None
        self._finalized: bool = False
        if help_option:
            self._add_help()

    def _add_help(self) -> None:
        """Add the synthetic help option."""
        self._global_options[HELP] = build_option(
            HELP, "Print help message", type=OptionType.BOOLEAN
        )

    @property
    def reserved_short_names(self) -> dict[str, str]:
        return {HELP: HELP_SHORT_NAME} if self.help_option else {}

    @property
    def commands(self) -> tuple[CommandSpec, ...]:
        return tuple(self._commands.values())

    @property
    def global_options(self) -> dict[str, OptionSpec]:
        """Global options, with short names once finalized."""
        if self._finalized:
            return dict(self._resolved_global_options)
        return dict(self._global_options)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def get_command(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def _check_open(self) -> None:
        if self._finalized:
            raise SpecError("The parser is finalized and cannot be changed")

    def add_command(self, name: str, description: str = "") -> CommandSpec:
        """
        Declare a command.

        Args:
            name (str): The command name as typed on the command line.
            description (str): One-line help text.

        Returns:
            CommandSpec: The command, ready for `add_argument()` and `add_option()`.
        """
        self._check_open()
        if not isinstance(name, str) or not name or name.startswith("-"):
            raise SpecError(f"Command name {name!r} must be a non-empty word")
        if any(char.isspace() for char in name):
            raise SpecError(f"Command name {name!r} cannot contain whitespace")
        if name in self._commands:
            raise SpecError(f"Command '{name}' is already defined")
        command = CommandSpec(name, description, self._global_options)
        self._commands[name] = command
        return command

    def add_global_option(
        self,
        name: str,
        description: str = "",
        *,
        type: OptionType | str | type | None = None,
        short_name: str | None = None,
        default: Any = None,
        required: bool = False,
        allowed_values: Iterable[Any] | None = None,
        use_no: bool = False,
        run_hook: RunHook | None = None,
    ) -> OptionSpec:
        """Declare an option accepted by every command. See `build_option`."""
        self._check_open()
        if name in self._global_options:
            raise SpecError(f"Global option '{name}' is already defined")
        option = build_option(
            name,
            description,
            type=type,
            short_name=short_name,
            default=default,
            required=required,
            allowed_values=allowed_values,
            use_no=use_no,
            run_hook=run_hook,
        )
        self._global_options[name] = option
        return option

    def finalize(self) -> None:
        """
        Validate every command and assign short names.

        Called automatically by the first `parse()`. Further declarations are
        rejected afterwards.

        Raises:
            SpecError: If a command's arguments or short names are invalid.
        """
        if self._finalized:
            return
        reserved = self.reserved_short_names
        self._resolved_global_options = resolve_options(
            self._global_options.values(), reserved
        )
        for command in self._commands.values():
            if self.help_option and HELP in command.options:
                raise SpecError(
                    f"Option 'help' of command '{command.name}' clashes with the "
                    "built-in help option"
                )
            command.finalize(reserved, self._resolved_global_options)
        self._global_tokenizer = build_tokenizer(self._resolved_global_options)
        self._finalized = True
        logger.debug("Parser finalized: %s", self)

    def _find_command(
        self, args: list[str], errors: ErrorList
    ) -> tuple[CommandSpec, int] | None:
        assert self._global_tokenizer is not None, "parser should be finalized"
        leading = next(
            (
                token
                for token in self._global_tokenizer.tokenize(args)
                if isinstance(token, Positional)
            ),
            None,
        )
        if leading is None:
            errors.add(ParseErrorKind.UNKNOWN_COMMAND, "Unknown command")
            return None
        command = self._commands.get(leading.text)
        if command is None:
            errors.add(
                ParseErrorKind.UNKNOWN_COMMAND,
                f"{display_name(leading.text)} is an unknown command",
                leading.index,
            )
            return None
        return command, leading.index

    def _accept(
        self, state: ParseState, spec: OptionSpec, value: Any, index: int
    ) -> None:
        """Check inclusion, then store a coerced option value."""
        try:
            check_inclusion(value, spec.allowed_values, spec.name)
        except InclusionError as error:
            state.errors.add(ParseErrorKind.INCLUSION, str(error), index)
            return
        if spec.run_hook is not None:
            state.hook_calls.append((spec.run_hook, value))
        existing = state.given.get(spec.name)
        if spec.type is OptionType.ARRAY and existing is not None:
            value = [*existing, *value]
        elif spec.type is OptionType.HASH and existing is not None:
            value = {**existing, **value}
        state.given[spec.name] = value

    def _consume_option(
        self,
        state: ParseState,
        spec: OptionSpec,
        raw: str | None,
        index: int,
        negated: bool = False,
    ) -> None:
        state.seen.add(spec.name)
        if spec.type is OptionType.BOOLEAN:
            if raw is None:
                self._accept(state, spec, not negated, index)
                return
            try:
                value = coerce_bool(raw, spec.name)
            except CoercionError as error:
                state.errors.add(ParseErrorKind.TYPE_COERCION, str(error), index)
                return
            self._accept(state, spec, value != negated, index)
            return
        if raw is None:
            state.errors.add(
                ParseErrorKind.TYPE_COERCION, f"{display_name(spec.name)} is invalid", index
            )
            return
        try:
            value = coerce_value(raw, spec.type, spec.name)
        except CoercionError as error:
            state.errors.add(ParseErrorKind.TYPE_COERCION, str(error), index)
            return
        self._accept(state, spec, value, index)

    def _unknown_option(self, state: ParseState, name: str, index: int) -> None:
        state.errors.add(
            ParseErrorKind.UNKNOWN_OPTION,
            f"{display_name(name)} is an unknown option",
            index,
        )

    def _handle_token(self, state: ParseState, token: Token) -> None:
        options = state.command.resolved_options
        short_options = state.command.tokenizer.short_options
        if isinstance(token, Positional):
            state.positionals.append(token)
        elif isinstance(token, UnknownOption):
            self._unknown_option(state, token.name, token.index)
        elif isinstance(token, LongOption):
            self._consume_option(
                state, options[token.name], token.value, token.index, token.negated
            )
        elif isinstance(token, ShortOption):
            self._consume_option(
                state, short_options[token.char], token.value, token.index
            )
        elif isinstance(token, ShortFlagGroup):
            last = len(token.chars) - 1
            for position, char in enumerate(token.chars):
                spec = short_options.get(char)
                if spec is None:
                    self._unknown_option(state, char, token.index)
                else:
                    value = token.value if position == last else None
                    self._consume_option(state, spec, value, token.index)

    def _coerce_positional(
        self, state: ParseState, argument: ArgumentSpec, token: Positional
    ) -> Any:
        try:
            return coerce_value(token.text, argument.type, argument.name)
        except CoercionError as error:
            state.errors.add(ParseErrorKind.TYPE_COERCION, str(error), token.index)
            return MISSING

    def _missing_argument(self, state: ParseState, argument: ArgumentSpec) -> None:
        state.errors.add(
            ParseErrorKind.MISSING_ARGUMENT, f"{display_name(argument.name)} is required"
        )

    def _match_positionals(self, state: ParseState) -> list[Any]:
        """Match positional tokens left to right against the declared arguments."""
        values: list[Any] = []
        remaining = list(state.positionals)
        for argument in state.command.arguments:
            if argument.is_trailing:
                taken, remaining = remaining, []
                if not taken:
                    if argument.required:
                        self._missing_argument(state, argument)
                    if argument.default is not None:
                        values.append(deepcopy(argument.default))
                    else:
                        values.append([] if argument.is_splat else MISSING)
                elif argument.is_splat:
                    values.append(
                        [self._coerce_positional(state, argument, token) for token in taken]
                    )
                else:
                    joined = " ".join(token.text for token in taken)
                    values.append(coerce_value(joined, OptionType.GREEDY, argument.name))
            elif remaining:
                values.append(self._coerce_positional(state, argument, remaining.pop(0)))
            else:
                if argument.required:
                    self._missing_argument(state, argument)
                values.append(
                    MISSING if argument.default is None else deepcopy(argument.default)
                )
        if remaining:
            state.errors.add(
                ParseErrorKind.TOO_MANY_ARGUMENTS, "Too many arguments", remaining[0].index
            )
        while values and values[-1] is MISSING:
            values.pop()
        return [None if value is MISSING else value for value in values]

    def _check_required_options(self, state: ParseState) -> None:
        for spec in state.command.resolved_options.values():
            if spec.required and spec.name not in state.seen:
                state.errors.add(
                    ParseErrorKind.MISSING_OPTION, f"{display_name(spec.name)} is required"
                )

    def _resolve_params(self, state: ParseState) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.help_option:
            params[HELP] = bool(state.given.get(HELP, False))
        for spec in state.command.resolved_options.values():
            if spec.name == HELP and self.help_option:
                continue
            if spec.name in state.given:
                params[spec.name] = state.given[spec.name]
            elif spec.default is not None:
                params[spec.name] = deepcopy(spec.default)
        return params

    def _split(self, args: Sequence[str] | str | None) -> list[str]:
        if args is None:
            return []
        if isinstance(args, str):
            return shlex.split(args)
        return list(args)

    def parse(self, args: Sequence[str] | str | None = None) -> ParseResult:
        """
        Parse a token list into a `ParseResult`.

        Parse-time problems never raise; they are returned as the result's errors.

        Args:
            args (Sequence[str] | str | None): The CLI-style argument list, or a
                shell-like string that is split with `shlex`.

        Returns:
            ParseResult: The command, args and params, or a non-empty error list.
        """
        self.finalize()
        args = self._split(args)
        errors = ErrorList()
        found = self._find_command(args, errors)
        if found is None:
            logger.debug("Parse failed for %s: %s", args, errors.messages)
            return ParseResult.failure(errors)
        command, command_index = found

        state = ParseState(command=command, errors=errors)
        tokenizer = command.tokenizer
        tokens = [
            *tokenizer.tokenize(args[:command_index]),
            *tokenizer.tokenize(args[command_index + 1 :], offset=command_index + 1),
        ]
        for token in tokens:
            self._handle_token(state, token)
        values = self._match_positionals(state)
        self._check_required_options(state)
        if errors:
            logger.debug("Parse failed for %s: %s", args, errors.messages)
            return ParseResult.failure(errors)

        params = self._resolve_params(state)
        for run_hook, value in state.hook_calls:
            run_hook(value, params)
        result = ParseResult(
            command=command.name,
            args=values,
            params=params,
            arguments=command.arguments,
        )
        logger.debug("Parsed %s: %s", args, result)
        return result

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        return (
            f"CommandParser(commands={len(self._commands)}, "
            f"global_options={len(self._global_options)}, "
            f"help_option={self.help_option})"
        )

    def __repr__(self) -> str:
        return str(self)
