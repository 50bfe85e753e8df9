# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro


from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    import logging


@runtime_checkable
class LoggableProtocol(Protocol):
    @property
    def log(self) -> logging.Logger: ...
