# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from typing import TYPE_CHECKING, Any, Self

from ..algebra import bulk, combining, transforms
from ..algebra.capability import is_set
from ..algebra.sentinel import NOT_FOUND
from ..algebra.species import resolve_species
from ..util.helpers import classproperty


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..algebra.capability import SetLike


class SetAlgebraMixin[T]:
    """Expose the set algebra operations as methods of a :class:`collections.abc.MutableSet`.

    Combining operations and bulk mutators take their operands variadically, as :meth:`set.union` does.
    Results are built by ``__species__``, which defaults to the concrete class and can be overridden by subclasses,
    either as a class attribute or as a :func:`~setalgebra.util.helpers.classproperty`.
    The ``|``, ``&``, ``^`` and ``-`` operators inherited from :class:`collections.abc.Set` honour it too.
    """

    is_set = staticmethod(is_set)

    @classproperty
    def __species__(cls) -> Callable[..., SetLike[Any]]:
        return cls

    @classmethod
    def _from_iterable(cls, iterable: Iterable[Any]) -> SetLike[Any]:
        return resolve_species(cls)(iterable)

    # MARK: Combining
    def union(self, *others: Iterable[T]) -> SetLike[T]:
        return combining.union(self, others)  # pyright: ignore[reportArgumentType]

    def intersect(self, *others: Iterable[T]) -> SetLike[T]:
        return combining.intersect(self, others)  # pyright: ignore[reportArgumentType]

    def xor(self, *others: Iterable[T]) -> SetLike[T]:
        return combining.xor(self, others)  # pyright: ignore[reportArgumentType]

    def subtract(self, *others: Iterable[T]) -> SetLike[T]:
        return combining.subtract(self, others)  # pyright: ignore[reportArgumentType]

    def is_superset_of(self, iterable: Iterable[T]) -> bool:
        return combining.is_superset_of(self, iterable)  # pyright: ignore[reportArgumentType]

    # MARK: Transforms
    def map[R](self, callback: Callable[..., R], this_arg: object = None) -> SetLike[R]:
        return transforms.map(self, callback, this_arg)  # pyright: ignore[reportArgumentType]

    def filter(self, predicate: Callable[..., Any], this_arg: object = None) -> SetLike[T]:
        return transforms.filter(self, predicate, this_arg)  # pyright: ignore[reportArgumentType]

    def some(self, predicate: Callable[..., Any], this_arg: object = None) -> bool:
        return transforms.some(self, predicate, this_arg)  # pyright: ignore[reportArgumentType]

    def every(self, predicate: Callable[..., Any], this_arg: object = None) -> bool:
        return transforms.every(self, predicate, this_arg)  # pyright: ignore[reportArgumentType]

    def find[D](self, predicate: Callable[..., Any], this_arg: object = None, *, default: D = NOT_FOUND) -> T | D:
        return transforms.find(self, predicate, this_arg, default=default)  # pyright: ignore[reportArgumentType]

    # MARK: Bulk mutators
    def add_elements(self, *elements: T) -> Self:
        return bulk.add_elements(self, elements)  # pyright: ignore[reportArgumentType, reportReturnType]

    def remove_elements(self, *elements: T) -> Self:
        return bulk.remove_elements(self, elements)  # pyright: ignore[reportArgumentType, reportReturnType]


# Methods attached by install(), in the order they are documented
OPERATION_NAMES: tuple[str, ...] = (
    "map",
    "filter",
    "some",
    "every",
    "find",
    "union",
    "intersect",
    "xor",
    "subtract",
    "is_superset_of",
    "add_elements",
    "remove_elements",
)
