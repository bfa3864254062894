# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result models returned by `CommandParser.parse()`.

A parse either succeeds, giving a command name, its positional values and its
option params, or fails with a non-empty `ErrorList`. The two outcomes are
mutually exclusive: a failed `ParseResult` exposes no partial values.

`ErrorList` keeps the kind of every error and always yields messages in a fixed
order of kinds, independent of the order in which they were detected:

1. command resolution
2. unknown options
3. missing required arguments
4. too many arguments
5. missing required options
6. type and inclusion errors, in token order
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Mapping

from argyle.parser.argument_spec import ArgumentSpec


class ParseErrorKind(Enum):
    """Kinds of parse-time errors, declared in reporting order."""

    UNKNOWN_COMMAND = "unknown_command"
    UNKNOWN_OPTION = "unknown_option"
    MISSING_ARGUMENT = "missing_argument"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    MISSING_OPTION = "missing_option"
    TYPE_COERCION = "type_coercion"
    INCLUSION = "inclusion"

    @property
    def rank(self) -> int:
        """Reporting rank; type and inclusion errors share one rank."""
        if self is ParseErrorKind.INCLUSION:
            return ParseErrorKind.TYPE_COERCION.rank
        return list(ParseErrorKind).index(self)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseError:
    """One parse-time error and the raw token index it was detected at."""

    kind: ParseErrorKind
    message: str
    position: int = 0

    def __str__(self) -> str:
        return self.message


class ErrorList:
    """Ordered, human-readable parse errors. Empty means the parse succeeded."""

    def __init__(self) -> None:
        self._errors: list[ParseError] = []

    def add(self, kind: ParseErrorKind, message: str, position: int = 0) -> None:
        self._errors.append(ParseError(kind, message, position))

    @property
    def errors(self) -> list[ParseError]:
        """Errors in reporting order."""
        return sorted(self._errors, key=lambda error: (error.kind.rank, error.position))

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def kinds(self) -> list[ParseErrorKind]:
        return [error.kind for error in self.errors]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __getitem__(self, index: int) -> str:
        return self.messages[index]

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorList):
            return self.messages == other.messages
        if isinstance(other, list):
            return self.messages == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ErrorList({self.messages!r})"


@dataclass(frozen=True)
class ParseResult:
    """
    The outcome of one parse call.

    Attributes:
        command (str | None): The recognized command, None on failure.
        args (list): Resolved positional values in declaration order.
        params (Mapping[str, Any]): Resolved option values, including `help`.
        errors (ErrorList): Parse errors, empty on success.
        arguments (tuple[ArgumentSpec, ...]): The command's declared arguments.
    """

    command: str | None = None
    args: list[Any] = field(default_factory=list)
    params: Mapping[str, Any] = field(default_factory=dict)
    errors: ErrorList = field(default_factory=ErrorList)
    arguments: tuple[ArgumentSpec, ...] = field(default=(), compare=False, repr=False)

    @classmethod
    def failure(cls, errors: ErrorList) -> ParseResult:
        return cls(errors=errors)

    @property
    def valid(self) -> bool:
        """True if the parse succeeded."""
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        return self.errors.messages

    @property
    def help(self) -> bool:
        """True if a help token was seen in a successful parse."""
        return bool(self.params.get("help"))

    def __str__(self) -> str:
        if not self.valid:
            return f"ParseResult(errors={self.error_messages})"
        return (
            f"ParseResult(command={self.command!r}, args={list(self.args)}, "
            f"params={dict(self.params)})"
        )
