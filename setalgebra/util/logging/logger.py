# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import logging

from typing import Any

from .loggable_protocol import LoggableProtocol


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> logging.Logger:  # noqa: N802 matches logging.getLogger
    """Return a logger for ``obj``.

    The name is ``name`` when given, ``obj`` itself when it is a string, else the name of ``obj``'s type.
    When ``parent`` is a logger or a loggable object, the result is a child of the parent's logger.
    Loggers are whatever class the host application configured through :func:`logging.setLoggerClass`.
    """
    if name is None:
        name = obj if isinstance(obj, str) else type(obj).__name__

    if isinstance(parent, logging.Logger):
        logger = parent.getChild(name)
    elif isinstance(parent, LoggableProtocol):
        logger = parent.log.getChild(name)
    else:
        logger = logging.getLogger(name)

    # Loggers created after the manager was configured still get their custom level
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger
