# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

# NOTE: The logging configuration models live in ..logging.config, which imports this package
from .base_model import BaseConfigModel


__all__ = [
    "BaseConfigModel",
]
