# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Assigns single-character aliases to options that were declared without one.

Allocation is a pure function of the ordered option list: the same declarations
always produce the same assignments, and nothing is shared between commands.

Order of claims:
1. Reserved characters (the synthetic help option reserves `?`).
2. Explicit short names, in declaration order.
3. Every other option, in declaration order, takes the first free character of
   its name, then of its name with swapped case, then a digit, then a symbol.
"""
from __future__ import annotations

import string
from typing import Iterable, Mapping

from argyle.exceptions import SpecError
from argyle.logger import logger
from argyle.parser.option_spec import OptionSpec

HELP_SHORT_NAME = "?"
SYMBOL_POOL = "!@#%^&+:"


def _candidates(name: str) -> list[str]:
    letters = [char for char in name if char.isalnum()]
    swapped = [char.swapcase() for char in letters]
    seen: dict[str, None] = {}
    for char in [*letters, *swapped, *string.digits, *SYMBOL_POOL]:
        seen.setdefault(char, None)
    return list(seen)


def allocate_short_names(
    options: Iterable[OptionSpec],
    reserved: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Map each option name to its short name.

    Args:
        options (Iterable[OptionSpec]): Options in declaration order.
        reserved (Mapping[str, str] | None): Pre-claimed `{name: char}` pairs,
            e.g. `{"help": "?"}`. They are included in the result.

    Returns:
        dict[str, str]: `{option name: short name}` for every option.

    Raises:
        SpecError: If two options claim the same explicit short name, or an
            option has no free character left.
    """
    options = list(options)
    reserved = dict(reserved or {})
    assigned: dict[str, str] = dict(reserved)
    claimed: dict[str, str] = {char: name for name, char in assigned.items()}

    for option in options:
        if option.short_name is None or option.name in reserved:
            continue
        if option.short_name in claimed:
            raise SpecError(
                f"Short name '-{option.short_name}' of option '{option.name}' is "
                f"already used by option '{claimed[option.short_name]}'"
            )
        claimed[option.short_name] = option.name
        assigned[option.name] = option.short_name

    for option in options:
        if option.short_name is not None or option.name in reserved:
            continue
        for char in _candidates(option.name):
            if char not in claimed:
                claimed[char] = option.name
                assigned[option.name] = char
                break
        else:
            raise SpecError(f"No short name left for option '{option.name}'")

    logger.debug("Short names allocated: %s", assigned)
    return assigned
