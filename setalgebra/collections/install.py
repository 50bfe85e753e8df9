# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Opt-in installation of the set operations onto a user-defined set-like class.

Built-in types are never modified: wrap them in :class:`~setalgebra.collections.AlgebraSet`, or subclass
:class:`~setalgebra.collections.SetAlgebraMixin`, instead. For classes that cannot inherit the mixin,
:func:`install` copies its methods onto the class:

>>> from collections.abc import MutableSet
>>> from setalgebra import install
>>> @install(config={"operations": ["union", "filter"]})
... class Bag(MutableSet):
...     def __init__(self, items=()):
...         self.items = list(dict.fromkeys(items))
...     def __contains__(self, item):
...         return item in self.items
...     def __iter__(self):
...         return iter(self.items)
...     def __len__(self):
...         return len(self.items)
...     def add(self, item):
...         if item not in self.items:
...             self.items.append(item)
...     def discard(self, item):
...         if item in self.items:
...             self.items.remove(item)
>>> Bag([1, 2]).union([3]).items
[1, 2, 3]
>>> Bag.is_set(Bag()), hasattr(Bag, "xor")
(True, False)
"""

import builtins
import functools
import inspect

from collections.abc import Callable, Mapping
from typing import Any, overload

from pydantic import Field, field_validator

from ..algebra.capability import REQUIRED_MEMBERS, is_set_type
from ..algebra.errors import TypeContractViolation
from ..util.config import BaseConfigModel
from ..util.logging import getLogger
from .mixin import OPERATION_NAMES, SetAlgebraMixin


log = getLogger(__name__)


# The algebra is pointless without a native set type conforming to the capability check
assert is_set_type(set), "The built-in set type must be set-like"


# Shared with the mixin so that installing twice, or onto a mixin subclass, is not a clash
_IS_SET_STATIC = SetAlgebraMixin.__dict__["is_set"]
_MISSING = object()


class InstallConfig(BaseConfigModel):
    operations: frozenset[str] = Field(default=frozenset(OPERATION_NAMES), description="Names of the operations to attach as methods")
    static: bool = Field(default=True, description="Attach the 'is_set' capability check as a static method")
    overwrite: bool = Field(default=False, description="Replace attributes the class already defines under the same names")

    @field_validator("operations", mode="after")
    @classmethod
    def _validate_operations(cls, value: frozenset[str]) -> frozenset[str]:
        if unknown := value.difference(OPERATION_NAMES):
            msg = f"Unknown set operations: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        if len(value) != len(OPERATION_NAMES):
            cls.log.debug(t"Installing a subset of the set operations: {sorted(value)}")
        return value


type InstallConfigLike = InstallConfig | Mapping[str, Any] | None


def _members(config: InstallConfig) -> dict[str, Any]:
    members: dict[str, Any] = {name: SetAlgebraMixin.__dict__[name] for name in OPERATION_NAMES if name in config.operations}
    if config.static:
        members["is_set"] = _IS_SET_STATIC
    return members


def _install[C: type](cls: C, config: InstallConfig) -> C:
    if not isinstance(cls, type):
        msg = f"Set operations can only be installed onto a class, got {type(cls).__name__}"
        raise TypeContractViolation(msg)
    if getattr(builtins, cls.__name__, None) is cls:
        msg = f"Refusing to modify built-in type {cls.__name__}; use AlgebraSet or SetAlgebraMixin instead"
        raise TypeContractViolation(msg)
    if not is_set_type(cls):
        msg = f"{cls.__name__} is not set-like, it must define {', '.join(REQUIRED_MEMBERS)}"
        raise TypeContractViolation(msg)

    members = _members(config)

    if not config.overwrite:
        clashes = [
            name for name, member in members.items() if (existing := inspect.getattr_static(cls, name, _MISSING)) is not _MISSING and existing is not member
        ]
        if clashes:
            msg = f"{cls.__name__} already defines {', '.join(clashes)}; pass overwrite=True to replace them"
            raise TypeContractViolation(msg)

    for name, member in members.items():
        setattr(cls, name, member)

    log.debug(t"Installed {len(members)} set operations onto {cls.__qualname__}")
    return cls


@overload
def install[C: type](cls: C, /, *, config: InstallConfigLike = None) -> C: ...
@overload
def install[C: type](cls: None = None, /, *, config: InstallConfigLike = None) -> Callable[[C], C]: ...


def install[C: type](cls: C | None = None, /, *, config: InstallConfigLike = None) -> C | Callable[[C], C]:
    """Attach the set operations, and the ``is_set`` static check, to ``cls``.

    Usable directly, as ``@install``, or with a configuration, as ``@install(config={...})``.
    The class must be set-like (see :func:`~setalgebra.algebra.is_set_type`) and must not be a built-in type.
    Attributes the class already has under the same names are only replaced when ``overwrite`` is set.

    Raises:
        TypeContractViolation: ``cls`` cannot receive the operations.
        pydantic.ValidationError: ``config`` is invalid.

    """
    install_config = config if isinstance(config, InstallConfig) else InstallConfig.model_validate(config or {})

    if cls is None:
        return functools.partial(_install, config=install_config)
    return _install(cls, install_config)
