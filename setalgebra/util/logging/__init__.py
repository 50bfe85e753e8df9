# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

# t-string support for log messages
from . import tstring

# Loggable Protocol
from .loggable_protocol import LoggableProtocol

# getLogger
from .logger import getLogger


__all__ = [
    "LoggableProtocol",
    "getLogger",
    "tstring",
]
