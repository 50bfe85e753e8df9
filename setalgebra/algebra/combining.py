# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Operations combining a set-like receiver with other iterables.

Each operation takes its operands as a single ordered sequence of iterables. Operands need not be set-like:
any iterable works, and repeated elements within an operand count once. The receiver and the operands are
never mutated; results are fresh containers built by the receiver's species constructor.

>>> from setalgebra import intersect, subtract, union, xor
>>> a, b = {1, 2, 3}, [2, 3, 4]
>>> sorted(union(a, [b]))
[1, 2, 3, 4]
>>> sorted(intersect(a, [b]))
[2, 3]
>>> sorted(xor(a, [b]))
[1, 4]
>>> sorted(subtract(a, [b]))
[1]
"""

from collections.abc import Callable, Iterable
from typing import Any

from .capability import SetLike, require_set
from .errors import ArityViolation, TypeContractViolation
from .species import get_species_constructor


def _collect_operands[T](operation: str, operands: Iterable[Iterable[T]], *, required: bool) -> tuple[Iterable[T], ...]:
    if not isinstance(operands, Iterable):
        msg = f"{operation}() expects a sequence of operands, got {type(operands).__name__}"
        raise TypeContractViolation(msg)

    collected = tuple(operands)
    for operand in collected:
        if not isinstance(operand, Iterable):
            msg = f"{operation}() operands must be iterable, got {type(operand).__name__}"
            raise TypeContractViolation(msg)

    if required and not collected:
        msg = f"{operation}() requires at least one operand besides the receiver"
        raise ArityViolation(msg)
    return collected


def union[T](receiver: SetLike[T], operands: Iterable[Iterable[T]]) -> SetLike[T]:
    """Return the elements of the receiver or of any operand.

    Elements are inserted in order: the receiver's first, then each operand's.
    """
    require_set(receiver, "union")
    collected = _collect_operands("union", operands, required=True)

    result = get_species_constructor(receiver)()
    for iterable in (receiver, *collected):
        for element in iterable:
            result.add(element)
    return result


def _snapshots[T](receiver: SetLike[T], operands: tuple[Iterable[T], ...]) -> tuple[Callable[..., SetLike[Any]], list[SetLike[T]]]:
    species = get_species_constructor(receiver)
    return species, [species(iterable) for iterable in (receiver, *operands)]


def intersect[T](receiver: SetLike[T], operands: Iterable[Iterable[T]]) -> SetLike[T]:
    """Return the elements present in the receiver and in every operand."""
    require_set(receiver, "intersect")
    collected = _collect_operands("intersect", operands, required=True)

    species, snapshots = _snapshots(receiver, collected)
    first, *others = snapshots

    result = species()
    for element in first:
        if all(element in snapshot for snapshot in others):
            result.add(element)
    return result


def xor[T](receiver: SetLike[T], operands: Iterable[Iterable[T]]) -> SetLike[T]:
    """Return the elements present in exactly one of the receiver and the operands.

    This generalises the symmetric difference to any number of operands; it is not a pairwise chain,
    so an element present in three operands is excluded.

    >>> from setalgebra import xor
    >>> sorted(xor({1, 2}, [[2, 3], [3, 1, 4]]))
    [4]
    """
    require_set(receiver, "xor")
    collected = _collect_operands("xor", operands, required=True)

    species, snapshots = _snapshots(receiver, collected)

    result = species()
    for snapshot in snapshots:
        for element in snapshot:
            if sum(1 for other in snapshots if element in other) == 1:
                result.add(element)
    return result


def subtract[T](receiver: SetLike[T], operands: Iterable[Iterable[T]] = ()) -> SetLike[T]:
    """Return a copy of the receiver without the elements of any operand.

    With no operand, the result is a plain copy of the receiver.
    """
    require_set(receiver, "subtract")
    collected = _collect_operands("subtract", operands, required=False)

    result = get_species_constructor(receiver)(receiver)
    for iterable in collected:
        for element in iterable:
            if element in result:
                result.discard(element)
    return result


def is_superset_of[T](receiver: SetLike[T], iterable: Iterable[T]) -> bool:
    """Return whether every element of ``iterable`` is in the receiver.

    ``iterable`` is consumed once and nothing is materialised; an empty iterable gives ``True``.

    >>> from setalgebra import is_superset_of
    >>> is_superset_of({1, 2, 3}, [2, 3]), is_superset_of({1, 2, 3}, [2, 5]), is_superset_of(set(), [])
    (True, False, True)
    """
    require_set(receiver, "is_superset_of")
    return all(element in receiver for element in iterable)
