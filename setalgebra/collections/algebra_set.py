# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import typing

from collections.abc import Hashable, Iterable, Iterator, MutableSet
from typing import Any, Self, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..algebra.capability import is_set
from .mixin import SetAlgebraMixin


class AlgebraSet[T: Hashable](SetAlgebraMixin[T], MutableSet[T]):
    """Mutable set exposing the set algebra operations as methods.

    Elements are stored as the keys of a ``dict``, so iteration follows insertion order. That order carries no
    meaning for the algebra; it only makes iteration, and therefore ``find``, reproducible.

    >>> from setalgebra import AlgebraSet
    >>> a = AlgebraSet([1, 2, 3])
    >>> a.union([2, 3, 4])
    AlgebraSet({1, 2, 3, 4})
    >>> a.xor([2, 3, 4])
    AlgebraSet({1, 4})
    >>> a.add_elements(4, 5).remove_elements(1) is a
    True
    >>> a
    AlgebraSet({2, 3, 4, 5})
    """

    _store: dict[T, None]

    def __init__(self, iterable: Iterable[T] | None = None, /) -> None:
        self._store = {} if iterable is None else dict.fromkeys(iterable)

    # MARK: MutableSet ABC
    @override
    def __contains__(self, value: object) -> bool:
        return value in self._store

    @override
    def __iter__(self) -> Iterator[T]:
        return iter(self._store)

    @override
    def __len__(self) -> int:
        return len(self._store)

    @override
    def add(self, value: T) -> None:
        self._store.setdefault(value, None)

    @override
    def discard(self, value: T) -> None:
        self._store.pop(value, None)

    @override
    def clear(self) -> None:
        self._store.clear()

    def copy(self) -> Self:
        return type(self)(self)

    @override
    def __repr__(self) -> str:
        if not self._store:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({{{', '.join(repr(element) for element in self._store)}}})"

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: type[Any], handler: GetCoreSchemaHandler) -> CoreSchema:
        args = typing.get_args(source)
        item_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        klass = typing.get_origin(source) or source

        return core_schema.no_info_before_validator_function(
            function=cls._list_set_like,
            schema=core_schema.no_info_after_validator_function(
                function=klass,
                schema=core_schema.list_schema(item_schema),
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    @staticmethod
    def _list_set_like(value: Any) -> Any:
        # Set-like containers pydantic does not know about are validated element by element
        return list(value) if is_set(value) else value
