# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Structural check deciding whether a value can be used as the receiver of a set operation.

A set-like container is any object whose type provides membership (``__contains__``),
insertion (``add``), deletion (``discard``), enumeration (``__iter__``) and a size (``__len__``)
that is a non-negative integer. The built-in :class:`set` and every
:class:`collections.abc.MutableSet` qualify, :class:`frozenset`, :class:`list` and :class:`dict` do not.

>>> from setalgebra import is_set
>>> is_set({1, 2})
True
>>> is_set(frozenset({1, 2}))
False
>>> is_set([1, 2])
False
"""

from collections.abc import Iterator
from typing import Any, Protocol, TypeIs, runtime_checkable

from .errors import TypeContractViolation


# Members looked up on the type, as the interpreter itself does for special methods
REQUIRED_MEMBERS: tuple[str, ...] = ("__contains__", "add", "discard", "__iter__", "__len__")


@runtime_checkable
class SetLike[T](Protocol):
    def __contains__(self, value: object, /) -> bool: ...
    def __iter__(self) -> Iterator[T]: ...
    def __len__(self) -> int: ...
    def add(self, value: T, /) -> None: ...
    def discard(self, value: T, /) -> None: ...


def is_set_type(cls: object) -> TypeIs[type[SetLike[Any]]]:
    """Return whether ``cls`` is a class whose instances expose every set-like member."""
    if not isinstance(cls, type):
        return False
    return all(callable(getattr(cls, name, None)) for name in REQUIRED_MEMBERS)


def is_set(value: object) -> TypeIs[SetLike[Any]]:
    """Return whether ``value`` is a set-like container.

    Besides the required members, the size reported by ``__len__`` must be an ``int`` (``bool`` excluded)
    that is not negative. The size is read straight from the type so that broken ``__len__`` implementations,
    including ones that raise, are reported as ``False`` instead of being coerced by :func:`len`.
    """
    if value is None or not is_set_type(type(value)):
        return False

    try:
        size = type(value).__len__(value)  # pyright: ignore[reportAttributeAccessIssue]
    except Exception:  # noqa: BLE001 any failure to report a size means the value is not usable
        return False
    return isinstance(size, int) and not isinstance(size, bool) and size >= 0


def require_set(value: object, operation: str) -> None:
    if not is_set(value):
        msg = f"{operation}() requires a set-like receiver, got {type(value).__name__}"
        raise TypeContractViolation(msg)


def require_callable(value: object, operation: str) -> None:
    if not callable(value):
        msg = f"{operation}() requires a callable, got {type(value).__name__}"
        raise TypeContractViolation(msg)
