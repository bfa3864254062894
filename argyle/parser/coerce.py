# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion and inclusion checks for Argyle argument parsing.

This module converts raw string tokens into the value kinds named by `OptionType`
and validates coerced values against declared allowed values. Every failure is
reported with the same user-facing message, "<Name> is invalid", so that the
parser can fold it into its error list unchanged.

Functions:
- display_name: Turn an option or argument name into its message form.
- coerce_bool: Convert a string to a boolean.
- coerce_numeric: Convert a string to an int or a float.
- split_escaped: Split on a delimiter that may be escaped with a backslash.
- coerce_hash: Convert `key:value[,key:value]*` into a dict.
- coerce_value: General-purpose coercion to an `OptionType`.
- check_inclusion: Validate a coerced value against allowed values.
"""
from __future__ import annotations

import re
from typing import Any, Sequence

from argyle.exceptions import CoercionError, InclusionError
from argyle.parser.option_type import OptionType

INTEGER_PATTERN = re.compile(r"[-+]?\d+")
FLOAT_PATTERN = re.compile(r"[-+]?(\d+\.\d*|\.\d+|\d+)([eE][-+]?\d+)?")

TRUE_VALUES = {"true", "yes", "1"}
FALSE_VALUES = {"false", "no", "0"}


def display_name(name: str) -> str:
    """Return `name` with its first character upper-cased, e.g. `pid` → `Pid`."""
    if not name:
        return '""'
    return name[:1].upper() + name[1:]


def invalid(name: str) -> str:
    return f"{display_name(name)} is invalid"


def coerce_bool(value: str | bool, name: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts true/false, yes/no and 1/0 in any case.

    Raises:
        CoercionError: If the value is not one of the accepted spellings.
    """
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise CoercionError(invalid(name))


def coerce_numeric(value: str | int | float, name: str) -> int | float:
    """
    Convert a string to an int, or to a float if it has a fractional part or exponent.

    Raises:
        CoercionError: If the value has no integer or float lexical form.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    text = str(value).strip()
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    if FLOAT_PATTERN.fullmatch(text):
        return float(text)
    raise CoercionError(invalid(name))


def split_escaped(text: str, delimiter: str, maxsplit: int = -1) -> list[str]:
    """
    Split `text` on every unescaped `delimiter`.

    A backslash escapes the character after it; escapes of the delimiter are kept
    in the pieces so that a later split on another delimiter still sees them.
    """
    pieces: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text):
            current.append(text[i : i + 2])
            i += 2
            continue
        if char == delimiter and maxsplit != 0:
            pieces.append("".join(current))
            current = []
            maxsplit -= 1
        else:
            current.append(char)
        i += 1
    pieces.append("".join(current))
    return pieces


def unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text)


def coerce_array(value: str | Sequence[Any], name: str) -> list[Any]:
    """Convert `a,b,c` into `["a", "b", "c"]`; empty pieces are dropped."""
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [unescape(piece) for piece in split_escaped(str(value), ",") if piece]


def coerce_hash(value: str | dict, name: str) -> dict[str, str]:
    """
    Convert `key:value[,key:value]*` into a dict.

    The first unescaped `:` of each pair separates key from value, so values may
    contain further colons. `\\,` and `\\:` escape the delimiters.

    Raises:
        CoercionError: If a pair has no `:` or an empty key.
    """
    if isinstance(value, dict):
        return {str(key): str(item) for key, item in value.items()}
    result: dict[str, str] = {}
    for pair in split_escaped(str(value), ","):
        if not pair:
            continue
        parts = split_escaped(pair, ":", maxsplit=1)
        if len(parts) != 2 or not parts[0]:
            raise CoercionError(invalid(name))
        result[unescape(parts[0])] = unescape(parts[1])
    return result


def coerce_value(value: Any, option_type: OptionType, name: str) -> Any:
    """
    Convert a raw token to the given option type.

    Greedy values arrive already joined by the tokenizer and pass through like
    strings.

    Args:
        value (Any): The raw token, usually a string.
        option_type (OptionType): The declared value kind.
        name (str): The option or argument name used in error messages.

    Returns:
        Any: The coerced value.

    Raises:
        CoercionError: If the value cannot be coerced.
    """
    if option_type is OptionType.NUMERIC:
        return coerce_numeric(value, name)
    if option_type is OptionType.BOOLEAN:
        return coerce_bool(value, name)
    if option_type is OptionType.ARRAY:
        return coerce_array(value, name)
    if option_type is OptionType.HASH:
        return coerce_hash(value, name)
    if option_type is OptionType.GREEDY and isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def check_inclusion(value: Any, allowed_values: Sequence[Any] | None, name: str) -> None:
    """
    Validate a coerced value against its allowed values.

    Arrays are checked element by element, hashes value by value.

    Raises:
        InclusionError: If any checked value is not allowed.
    """
    if allowed_values is None:
        return
    if isinstance(value, list):
        candidates = value
    elif isinstance(value, dict):
        candidates = list(value.values())
    else:
        candidates = [value]
    for candidate in candidates:
        if candidate not in allowed_values:
            raise InclusionError(invalid(name))
