# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from typing import TYPE_CHECKING, Any, override


if TYPE_CHECKING:
    from collections.abc import Callable


class ClassInstancePropertyDescriptor[C = type, T = Any](property):
    """Read-only property that receives the instance, or the class when accessed on the class itself."""

    def __init__(self, fget: Callable[[C], T]) -> None:
        self.getter: Any = fget

    @override
    def __get__(self, obj: Any, cls: type | None = None) -> T:  # pyright: ignore[reportIncompatibleMethodOverride]
        return self.getter(cls if obj is None else obj)

    @override
    def __set__(self, obj: Any, value: Any) -> None:
        msg = "Can't set classinstanceproperty descriptor"
        raise AttributeError(msg)

    @override
    def __delete__(self, obj: Any) -> None:
        msg = "Can't delete classinstanceproperty descriptor"
        raise AttributeError(msg)


def classinstanceproperty[C = type, T = Any](func: Callable[[C], T]) -> ClassInstancePropertyDescriptor[C, T]:
    return ClassInstancePropertyDescriptor(func)
