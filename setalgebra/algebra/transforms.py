# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Functional transforms and quantifiers over the elements of a set-like receiver.

Callbacks are invoked once per element, in iteration order, with ``(element, element, receiver)``; callables
requiring fewer positional arguments get only the leading ones, so ``lambda x: ...`` and ``lambda: ...`` both work.
Passing ``this_arg`` binds the callback to it, as its first argument. Exceptions raised by a callback propagate
untouched and whatever result was being accumulated is dropped.

>>> from setalgebra import every, filter, find, map, some
>>> a = {1, 2, 3}
>>> sorted(map(a, lambda x: x * 2))
[2, 4, 6]
>>> sorted(filter(a, lambda x: x % 2 == 0))
[2]
>>> some(a, lambda x: x > 2), every(a, lambda x: x > 0)
(True, True)
>>> find(a, lambda x: x > 5)
NOT_FOUND
"""

from typing import TYPE_CHECKING, Any

from .callbacks import bind_callback
from .capability import SetLike, require_set
from .sentinel import NOT_FOUND
from .species import get_species_constructor


if TYPE_CHECKING:
    from collections.abc import Callable


def map[T, R](receiver: SetLike[T], callback: Callable[..., R], this_arg: object = None) -> SetLike[R]:  # noqa: A001 mirrors the builtin on purpose
    """Return a new container holding the result of ``callback`` for every element.

    Results that compare equal collapse, so the result may be smaller than the receiver, never larger.
    """
    call = bind_callback(callback, this_arg, "map")
    require_set(receiver, "map")

    result = get_species_constructor(receiver)()
    for element in receiver:
        result.add(call(element, receiver))
    return result


def filter[T](receiver: SetLike[T], predicate: Callable[..., Any], this_arg: object = None) -> SetLike[T]:  # noqa: A001 mirrors the builtin on purpose
    """Return a new container holding the elements for which ``predicate`` is truthy."""
    call = bind_callback(predicate, this_arg, "filter")
    require_set(receiver, "filter")

    result = get_species_constructor(receiver)()
    for element in receiver:
        if call(element, receiver):
            result.add(element)
    return result


def some[T](receiver: SetLike[T], predicate: Callable[..., Any], this_arg: object = None) -> bool:
    """Return whether ``predicate`` is truthy for at least one element, stopping at the first one."""
    call = bind_callback(predicate, this_arg, "some")
    require_set(receiver, "some")

    for element in receiver:
        if call(element, receiver):
            return True
    return False


def every[T](receiver: SetLike[T], predicate: Callable[..., Any], this_arg: object = None) -> bool:
    """Return whether ``predicate`` is truthy for all elements, stopping at the first falsy one."""
    call = bind_callback(predicate, this_arg, "every")
    require_set(receiver, "every")

    for element in receiver:
        if not call(element, receiver):
            return False
    return True


def find[T, D](receiver: SetLike[T], predicate: Callable[..., Any], this_arg: object = None, *, default: D = NOT_FOUND) -> T | D:
    """Return the first element for which ``predicate`` is truthy.

    The element itself is returned, not the predicate's result. When no element matches, ``default`` is returned,
    which is :data:`~setalgebra.algebra.sentinel.NOT_FOUND` unless given.

    >>> from setalgebra import NOT_FOUND, find
    >>> find({None}, lambda x: x is None) is None
    True
    >>> find(set(), bool) is NOT_FOUND
    True
    >>> find(set(), bool, default=0)
    0
    """
    call = bind_callback(predicate, this_arg, "find")
    require_set(receiver, "find")

    for element in receiver:
        if call(element, receiver):
            return element
    return default
