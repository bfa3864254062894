# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Argyle CLI framework.

Parse-time problems (unknown commands, missing arguments, bad values) are never
raised past `CommandParser.parse()`; they are collected into an `ErrorList`.
The exceptions here cover the remaining failure surfaces: declaring an invalid
command model, coercing a single value, and dispatching a parse result.

All exceptions inherit from `ArgyleError`, the base exception for the framework.

Exception Hierarchy:
- ArgyleError
    ├── SpecError
    ├── CoercionError (also a TypeError)
    │   └── InclusionError
    └── DispatchError
        ├── DispatchMissingMethodError
        └── DispatchArityError
"""


class ArgyleError(Exception):
    """Base exception for the Argyle framework."""


class SpecError(ArgyleError):
    """Exception raised when a command, argument or option is declared incorrectly."""


class CoercionError(ArgyleError, TypeError):
    """Exception raised when a raw token cannot be coerced to its declared type."""


class InclusionError(CoercionError):
    """Exception raised when a coerced value is outside its allowed values."""


class DispatchError(ArgyleError):
    """Exception raised when a parse result cannot be dispatched."""


class DispatchMissingMethodError(DispatchError):
    """Exception raised when the target has no method for the parsed command."""


class DispatchArityError(DispatchError):
    """Exception raised when the parsed arguments do not fit the target method."""
