# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro


from typing import TYPE_CHECKING, Any, override


if TYPE_CHECKING:
    from collections.abc import Callable


# NOTE: We extend property to piggyback on any code that handles property descriptors differently than other class variables
class ClassPropertyDescriptor[C: object, T: Any](property):
    """Read-only property evaluated against the owner class, even when accessed through an instance."""

    def __init__(self, fget: Callable[[C], T]) -> None:
        self.getter: Any = fget

    @override
    def __get__(self, obj: Any, cls: type | None = None) -> T:  # pyright: ignore[reportIncompatibleMethodOverride] as we know we are not compatible with property
        if cls is None:
            cls = type(obj)
        return self.getter.__get__(obj, cls)()

    @override
    def __set__(self, obj: Any, value: Any) -> None:
        msg = "Can't set classproperty descriptors"
        raise AttributeError(msg)

    @override
    def __delete__(self, obj: Any) -> None:
        msg = "Can't delete classproperty descriptors"
        raise AttributeError(msg)


def classproperty[C: object, T: Any](func: Callable[[C], T]) -> ClassPropertyDescriptor[C, T]:
    if not isinstance(func, (classmethod, staticmethod)):
        func = classmethod(func)  # pyright: ignore[reportAssignmentType, reportArgumentType]
    return ClassPropertyDescriptor(func)  # pyright: ignore[reportArgumentType]
