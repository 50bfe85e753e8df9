# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Set algebra (union, intersection, symmetric difference, subtraction) and functional transforms for set-like containers.

The operations are available as free functions taking the receiver first, as methods of
:class:`AlgebraSet` and of any class inheriting :class:`SetAlgebraMixin`, or attached to a
user-defined set-like class with :func:`install`.

>>> import setalgebra
>>> sorted(setalgebra.union({1, 2}, [[2, 3]]))
[1, 2, 3]
>>> setalgebra.AlgebraSet([1, 2, 3]).filter(lambda x: x % 2 == 0)
AlgebraSet({2})
"""

from .algebra import (
    NOT_FOUND,
    ArityViolation,
    NotFoundType,
    SetAlgebraError,
    SetLike,
    TypeContractViolation,
    add_elements,
    every,
    filter,  # noqa: A004 mirrors the builtin on purpose
    find,
    get_species_constructor,
    intersect,
    is_set,
    is_set_type,
    is_superset_of,
    map,  # noqa: A004 mirrors the builtin on purpose
    remove_elements,
    some,
    subtract,
    union,
    xor,
)
from .collections import OPERATION_NAMES, AlgebraSet, InstallConfig, SetAlgebraMixin, install


__all__ = [
    "NOT_FOUND",
    "OPERATION_NAMES",
    "AlgebraSet",
    "ArityViolation",
    "InstallConfig",
    "NotFoundType",
    "SetAlgebraError",
    "SetAlgebraMixin",
    "SetLike",
    "TypeContractViolation",
    "add_elements",
    "every",
    "filter",
    "find",
    "get_species_constructor",
    "install",
    "intersect",
    "is_set",
    "is_set_type",
    "is_superset_of",
    "map",
    "remove_elements",
    "some",
    "subtract",
    "union",
    "xor",
]
