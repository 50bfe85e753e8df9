# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Set algebra and functional transforms implemented against any set-like container.

Every function takes the receiver as its first argument. Results are built through the receiver's
species constructor (see :func:`get_species_constructor`), so subclasses of a container get results of their own type.
"""

from .bulk import add_elements, remove_elements
from .callbacks import CALLBACK_ARITY, bind_callback
from .capability import REQUIRED_MEMBERS, SetLike, is_set, is_set_type, require_callable, require_set
from .combining import intersect, is_superset_of, subtract, union, xor
from .errors import ArityViolation, SetAlgebraError, TypeContractViolation
from .sentinel import NOT_FOUND, NotFoundType
from .species import SPECIES_ATTRIBUTE, get_species_constructor, resolve_species
from .transforms import every, filter, find, map, some  # noqa: A004 mirrors the builtins on purpose


__all__ = [
    "CALLBACK_ARITY",
    "NOT_FOUND",
    "REQUIRED_MEMBERS",
    "SPECIES_ATTRIBUTE",
    "ArityViolation",
    "NotFoundType",
    "SetAlgebraError",
    "SetLike",
    "TypeContractViolation",
    "add_elements",
    "bind_callback",
    "every",
    "filter",
    "find",
    "get_species_constructor",
    "intersect",
    "is_set",
    "is_set_type",
    "is_superset_of",
    "map",
    "remove_elements",
    "require_callable",
    "require_set",
    "resolve_species",
    "some",
    "subtract",
    "union",
    "xor",
]
