# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, the closed set of value kinds understood by the Argyle parser.

Every option and positional argument resolves to exactly one `OptionType` when it
is declared, either explicitly or by inference from its allowed values or its
default. Parsing and coercion only ever look at this tag.

Example:
    OptionType("int")          → OptionType.NUMERIC
    OptionType(list)           → OptionType.ARRAY
    OptionType.infer(["a"])    → OptionType.ARRAY
    OptionType.infer(range(3)) → OptionType.NUMERIC
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class OptionType(Enum):
    """
    The value kind of an option or argument.

    Members:
        STRING: Raw token, passed through.
        NUMERIC: Integer or float.
        BOOLEAN: Presence flag, or an explicit true/false/yes/no/1/0.
        ARRAY: Comma separated values, accumulated over repeated flags.
        HASH: `key:value` pairs, merged over repeated flags.
        GREEDY: Every remaining token joined with spaces.

    Aliases:
        - "str", "text" → "string"
        - "int", "float", "number" → "numeric"
        - "bool", "flag" → "boolean"
        - "list" → "array"
        - "dict", "map" → "hash"
    """

    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    ARRAY = "array"
    HASH = "hash"
    GREEDY = "greedy"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "text": "string",
            "int": "numeric",
            "float": "numeric",
            "number": "numeric",
            "bool": "boolean",
            "flag": "boolean",
            "list": "array",
            "dict": "hash",
            "map": "hash",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if isinstance(value, type):
            python_types = {
                str: cls.STRING,
                int: cls.NUMERIC,
                float: cls.NUMERIC,
                bool: cls.BOOLEAN,
                list: cls.ARRAY,
                tuple: cls.ARRAY,
                dict: cls.HASH,
            }
            if value in python_types:
                return python_types[value]
            raise ValueError(f"Invalid {cls.__name__}: {value.__name__}")
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def infer(cls, value: Any) -> OptionType:
        """Return the type a Python value implies, e.g. `3` → NUMERIC."""
        if isinstance(value, range):
            return cls.NUMERIC
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMERIC
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.HASH
        if isinstance(value, str):
            return cls.STRING
        raise ValueError(
            f"Cannot infer {cls.__name__} from {type(value).__name__} value {value!r}"
        )

    @property
    def takes_value(self) -> bool:
        """True if an option of this type consumes a value token."""
        return self is not OptionType.BOOLEAN

    def __str__(self) -> str:
        """Return the string representation of the option type."""
        return self.value
