# Argyle CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds a successful `ParseResult` to a target object's command method.

The target is any object with a settable `params` attribute and one method per
command. Dashes in a command name map to underscores in the method name, so the
command `dry-run` calls `target.dry_run(...)`.

Functions:
- get_command_method: Look up the method for a command name.
- dispatch: Set `target.params` and call the command method with the parsed args.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable

from argyle.exceptions import DispatchArityError, DispatchError, DispatchMissingMethodError
from argyle.logger import logger
from argyle.parser.parse_result import ParseResult


def get_command_method(target: Any, command: str) -> Callable[..., Any]:
    """
    Return the bound method of `target` that handles `command`.

    Raises:
        DispatchMissingMethodError: If there is no such callable attribute.
    """
    method_name = command.replace("-", "_")
    method = getattr(target, method_name, None)
    if method_name.startswith("_") or not callable(method):
        raise DispatchMissingMethodError(
            f"{type(target).__name__} has no method '{method_name}' "
            f"for command '{command}'"
        )
    return method


def _expand_args(result: ParseResult) -> list[Any]:
    """Return the positional values with a trailing splat list expanded."""
    args = list(result.args)
    if not args or result.command is None:
        return args
    arguments = result.arguments
    if len(arguments) == len(args) and arguments[-1].is_splat:
        return [*args[:-1], *args[-1]]
    return args


def dispatch(result: ParseResult, target: Any) -> Any:
    """
    Call the method of `target` named by the parsed command.

    `target.params` is set to a copy of the parsed params before the call.

    Args:
        result (ParseResult): A successful parse result.
        target (Any): Object exposing `params` and the command methods.

    Returns:
        Any: The return value of the command method.

    Raises:
        DispatchError: If the parse result is not valid.
        DispatchMissingMethodError: If the target has no method for the command.
        DispatchArityError: If the parsed args do not fit the method signature.
    """
    if not result.valid or result.command is None:
        raise DispatchError(
            f"Cannot dispatch a failed parse: {', '.join(result.error_messages)}"
        )
    method = get_command_method(target, result.command)
    args = _expand_args(result)
    method_name = getattr(method, "__name__", result.command)
    try:
        inspect.signature(method).bind(*args)
    except TypeError as error:
        raise DispatchArityError(
            f"Command '{result.command}' cannot call {method_name}() "
            f"with {len(args)} argument(s): {error}"
        ) from error
    except ValueError:
        logger.debug("No signature available for %r; calling without a check", method)

    target.params = dict(result.params)
    logger.debug("Dispatching '%s' with args %s", result.command, args)
    return method(*args)
