# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw token list into option tokens and positional tokens.

The tokenizer knows which options exist (by long and short name) so that it can
decide whether an option consumes the next raw token as its value. A consumed
value is taken literally: `--name --verbose` gives `name` the value `--verbose`.

Token kinds:
- `LongOption`: `--name`, `--name=value`, `--no-name`
- `ShortOption`: `-x`, `-xvalue`, `-x=value`
- `ShortFlagGroup`: `-abc`, `-abc=value`, bundled short flags
- `Positional`: anything else, plus `-`, negative numbers, and tokens after `--`
- `UnknownOption`: a dash token matching no declared option

Every token keeps the index of the raw token it came from so that errors can be
reported in input order.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping, Sequence, Union

from argyle.parser.coerce import FLOAT_PATTERN
from argyle.parser.option_spec import OptionSpec
from argyle.parser.option_type import OptionType

TERMINATOR = "--"


@dataclass(frozen=True)
class LongOption:
    index: int
    name: str
    value: str | None = None
    negated: bool = False


@dataclass(frozen=True)
class ShortOption:
    index: int
    char: str
    value: str | None = None


@dataclass(frozen=True)
class ShortFlagGroup:
    """Bundled short flags; `value` belongs to the last char."""

    index: int
    chars: str
    value: str | None = None


@dataclass(frozen=True)
class Positional:
    index: int
    text: str


@dataclass(frozen=True)
class UnknownOption:
    index: int
    text: str

    @property
    def name(self) -> str:
        """The option name as typed, without dashes or an inline value."""
        return self.text.lstrip("-").split("=", 1)[0]


Token = Union[LongOption, ShortOption, ShortFlagGroup, Positional, UnknownOption]


class Tokenizer:
    """
    Tokenizes raw arguments against a set of known options.

    Args:
        long_options (Mapping[str, OptionSpec]): Options by long name.
        short_options (Mapping[str, OptionSpec]): Options by short name.
    """

    def __init__(
        self,
        long_options: Mapping[str, OptionSpec],
        short_options: Mapping[str, OptionSpec],
    ) -> None:
        self.long_options = long_options
        self.short_options = short_options

    def _is_negative_number(self, token: str) -> bool:
        return token[1:2] not in self.short_options and bool(
            FLOAT_PATTERN.fullmatch(token)
        )

    def _take_value(
        self, spec: OptionSpec, inline: str | None, args: Sequence[str], i: int
    ) -> tuple[str | None, int]:
        """Return the option value and the index of the next unread raw token."""
        if spec.type is OptionType.GREEDY:
            rest = list(args[i + 1 :])
            if inline is not None:
                rest.insert(0, inline)
            return (" ".join(rest) if rest else None), len(args)
        if inline is not None:
            return inline, i + 1
        if i + 1 < len(args):
            return args[i + 1], i + 2
        return None, i + 1

    def _resolve_long(self, body: str) -> tuple[OptionSpec | None, bool]:
        if body in self.long_options:
            return self.long_options[body], False
        if body.startswith("no-"):
            spec = self.long_options.get(body[3:])
            if spec is not None and spec.type is OptionType.BOOLEAN and spec.use_no:
                return spec, True
        return None, False

    def _long(self, token: str, args: Sequence[str], i: int) -> tuple[Token, int]:
        body, has_inline, inline = token[2:].partition("=")
        spec, negated = self._resolve_long(body)
        if spec is None:
            return UnknownOption(i, token), i + 1
        value = inline if has_inline else None
        if spec.type is OptionType.BOOLEAN:
            return LongOption(i, spec.name, value, negated), i + 1
        value, next_i = self._take_value(spec, value, args, i)
        return LongOption(i, spec.name, value), next_i

    def _short(self, token: str, args: Sequence[str], i: int) -> tuple[Token, int]:
        char, rest = token[1], token[2:]
        spec = self.short_options.get(char)
        if spec is None:
            return UnknownOption(i, token), i + 1
        if spec.type is OptionType.BOOLEAN:
            if not rest:
                return ShortOption(i, char), i + 1
            if rest.startswith("="):
                return ShortOption(i, char, rest[1:]), i + 1
            return self._group(token, args, i)
        inline = rest[1:] if rest.startswith("=") else rest or None
        value, next_i = self._take_value(spec, inline, args, i)
        return ShortOption(i, char, value), next_i

    def _group(self, token: str, args: Sequence[str], i: int) -> tuple[Token, int]:
        chars = token[1:]
        flags, has_inline, inline = chars.partition("=")
        for position, char in enumerate(flags):
            spec = self.short_options.get(char)
            if spec is None or spec.type is OptionType.BOOLEAN:
                continue
            rest = chars[position + 1 :]
            attached = rest[1:] if rest.startswith("=") else rest or None
            value, next_i = self._take_value(spec, attached, args, i)
            return ShortFlagGroup(i, chars[: position + 1], value), next_i
        return ShortFlagGroup(i, flags, inline if has_inline else None), i + 1

    def tokenize(self, args: Sequence[str], offset: int = 0) -> list[Token]:
        """
        Split raw arguments into tokens.

        Args:
            args (Sequence[str]): The raw CLI-style argument list.
            offset (int): Added to every token index, for tokenizing a slice.

        Returns:
            list[Token]: Tokens in input order.
        """
        tokens: list[Token] = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg == TERMINATOR:
                tokens.extend(
                    Positional(index, text)
                    for index, text in enumerate(args[i + 1 :], start=i + 1)
                )
                break
            if arg.startswith("--"):
                token, i = self._long(arg, args, i)
            elif arg.startswith("-") and len(arg) > 1 and not self._is_negative_number(arg):
                token, i = self._short(arg, args, i)
            else:
                token, i = Positional(i, arg), i + 1
            tokens.append(token)
        if offset:
            tokens = [replace(token, index=token.index + offset) for token in tokens]
        return tokens
