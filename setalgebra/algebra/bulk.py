# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""In-place bulk mutators. Unlike every other operation, these change the receiver and return it."""

from collections.abc import Iterable

from .capability import SetLike, require_set


def add_elements[T, S: SetLike](receiver: S, elements: Iterable[T]) -> S:
    """Insert each of ``elements`` into the receiver, in order, and return the receiver.

    >>> from setalgebra import add_elements
    >>> s = {1}
    >>> add_elements(s, [2, 3]) is s, sorted(s)
    (True, [1, 2, 3])
    """
    require_set(receiver, "add_elements")
    for element in elements:
        receiver.add(element)
    return receiver


def remove_elements[T, S: SetLike](receiver: S, elements: Iterable[T]) -> S:
    """Discard each of ``elements`` from the receiver and return the receiver. Absent elements are ignored."""
    require_set(receiver, "remove_elements")
    for element in elements:
        receiver.discard(element)
    return receiver
