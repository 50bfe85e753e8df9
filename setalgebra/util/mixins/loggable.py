# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import logging

from ..helpers.classinstanceproperty import classinstanceproperty
from ..logging import getLogger


class LoggableMixin:
    """Mixin that adds a ``log`` property usable on both the class and its instances.

    Instance loggers are named after the class, class loggers are named ``T(<class name>)``,
    so that messages emitted while configuring a type can be told apart from those emitted by its instances.
    Loggers are looked up through :func:`logging.getLogger`, which already caches them by name.
    """

    @classinstanceproperty
    def log(self) -> logging.Logger:
        return getLogger(self.__log_name__)

    @classinstanceproperty
    def __log_name__(self) -> str:
        if isinstance(self, type):
            return f"T({self.__name__})"
        return type(self).__name__
