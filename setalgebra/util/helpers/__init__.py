# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from .classinstanceproperty import classinstanceproperty
from .classproperty import classproperty
from .frozendict import FrozenDict
from .tstring import tstring_as_fstring


__all__ = [
    "FrozenDict",
    "classinstanceproperty",
    "classproperty",
    "tstring_as_fstring",
]
