# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import inspect
import types

from typing import TYPE_CHECKING, Any

from .capability import require_callable


if TYPE_CHECKING:
    from collections.abc import Callable

    from .capability import SetLike


# Callbacks are offered (value, key, container); a set element is both its value and its key
CALLBACK_ARITY = 3

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def positional_capacity(callback: Callable[..., Any]) -> int:
    """Return how many of the callback arguments ``callback`` requires positionally.

    Positional parameters with a default are left to it, so ``round`` is called as ``round(element)``.
    A ``*args`` parameter takes every callback argument. Callables whose signature cannot be introspected
    (some builtins and extension types) are given the element only.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return CALLBACK_ARITY
        if parameter.kind in _POSITIONAL_KINDS and parameter.default is inspect.Parameter.empty:
            count += 1
    return min(count, CALLBACK_ARITY)


def bind_callback[T, R](callback: Callable[..., R], this_arg: object, operation: str) -> Callable[[T, SetLike[T]], R]:
    """Adapt a user callback to be invoked as ``call(element, container)``.

    The callback receives the leading arguments of ``(element, element, container)`` that it requires.
    When ``this_arg`` is not ``None`` the callback is first bound to it, so that it is passed as the first argument.
    """
    require_callable(callback, operation)

    if this_arg is not None:
        callback = types.MethodType(callback, this_arg)

    match positional_capacity(callback):
        case 0:
            return lambda element, container: callback()
        case 1:
            return lambda element, container: callback(element)
        case 2:
            return lambda element, container: callback(element, element)
        case _:
            return lambda element, container: callback(element, element, container)
