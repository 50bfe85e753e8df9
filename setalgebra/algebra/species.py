# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import logging

from typing import TYPE_CHECKING, Any

from ..util.logging import getLogger
from .errors import TypeContractViolation


if TYPE_CHECKING:
    from collections.abc import Callable

    from .capability import SetLike


log = getLogger(__name__)


# Class attribute through which a container type redirects the construction of results
SPECIES_ATTRIBUTE = "__species__"


def resolve_species(klass: type) -> Callable[..., SetLike[Any]]:
    """Return the species constructor declared by ``klass``, defaulting to ``klass`` itself."""
    species = getattr(klass, SPECIES_ATTRIBUTE, None)
    if species is None:
        return klass

    if not callable(species):
        msg = f"{klass.__name__}.{SPECIES_ATTRIBUTE} must be callable, got {type(species).__name__}"
        raise TypeContractViolation(msg)

    if species is not klass and log.isEnabledFor(logging.DEBUG):
        log.debug(t"{klass.__qualname__} results are built by {getattr(species, '__qualname__', species)}")
    return species


def get_species_constructor[T](container: SetLike[T]) -> Callable[..., SetLike[Any]]:
    """Return the constructor used to build results of the same family as ``container``.

    The constructor is ``type(container).__species__`` when the type defines it (and it is not ``None``),
    otherwise ``type(container)`` itself. It is called either with no argument, to build an empty result,
    or with a single iterable, to build a snapshot or a copy. Operations resolve it once per call.

    >>> from setalgebra import get_species_constructor
    >>> get_species_constructor({1})
    <class 'set'>
    """
    return resolve_species(type(container))
