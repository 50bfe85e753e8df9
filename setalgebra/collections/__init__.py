# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from .algebra_set import AlgebraSet
from .install import InstallConfig, install
from .mixin import OPERATION_NAMES, SetAlgebraMixin


__all__ = [
    "OPERATION_NAMES",
    "AlgebraSet",
    "InstallConfig",
    "SetAlgebraMixin",
    "install",
]
