# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

"""Process-wide logging configuration.

Configures file and TTY logging, log levels, and custom per-logger levels.
Nothing is configured until :meth:`LoggingManager.initialize` is called: importing the library
adds no handler and changes neither the levels nor the logger class of the host application.
"""

import logging
import os
import re
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from .config import LoggingConfig
from .filters import ConditionalFormatter, HandlerFilter


if TYPE_CHECKING:
    from pathlib import Path

    from .levels import LoggingLevel


######
# MARK: Constants

# Log file name, inside LoggingConfig.dir
LOG_FILE_NAME: str = "setalgebra.log"


def _records_captured_by_test_runner() -> bool:
    # pytest exports PYTEST_VERSION to the process it runs; other runners can set UNIT_TEST
    if "PYTEST_VERSION" in os.environ:
        return True
    return os.environ.get("UNIT_TEST", "").strip().lower() not in ("", "false", "0", "no")


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    config: LoggingConfig
    log_file_path: Path
    fh: logging.Handler | None = None
    ch: logging.Handler | None = None

    def __new__(cls) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls)
            instance.initialized = False
        return typing_cast("Self", instance)

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / LOG_FILE_NAME

        self._configure_root_logger()
        self._configure_file_handler()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def reset(self) -> None:
        """Remove the handlers installed by :meth:`initialize` and allow it to be called again."""
        for handler in (self.fh, self.ch):
            if handler is None:
                continue
            logging.root.removeHandler(handler)
            handler.close()
        self.fh = None
        self.ch = None
        self.initialized = False

    def _configure_root_logger(self) -> None:
        logging.captureWarnings(capture=True)
        logging.root.setLevel(self.config.levels.root.value)

    def _configure_file_handler(self) -> None:
        self.fh = None
        if not self.config.levels.file.enabled:
            return

        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)

        self.fh = logging.FileHandler(self.log_file_path, mode="w")
        self.fh.setLevel(self.config.levels.file.value)
        self.fh.setFormatter(ConditionalFormatter("%(asctime)s [%(levelname)s:%(name)s] %(message)s"))
        self.fh.addFilter(HandlerFilter("file"))
        logging.root.addHandler(self.fh)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.levels.tty.enabled:
            return

        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(ConditionalFormatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.levels.tty.value)
        self.ch.addFilter(HandlerFilter("tty"))

        if not _records_captured_by_test_runner():
            logging.root.addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Do nothing if logger already has an explicit level set
        if logger.level != logging.NOTSET:
            return

        # Apply the most specific (longest) matching custom level, or default if none match
        level: LoggingLevel = self.config.levels.default
        match_len = 0

        for pattern, custom in self.config.levels.custom.items():
            assert isinstance(pattern, re.Pattern), f"Custom logging levels keys must be compiled regex patterns, got {type(pattern)}"
            if (match := pattern.match(logger.name)) is not None and len(match.group(0)) > match_len:
                level = custom
                match_len = len(match.group(0))

        if level == logging.NOTSET or not level.enabled:
            return

        logger.setLevel(level.value)

    def _configure_custom_logger_levels(self) -> None:
        # Apply logging levels to loggers created before initialisation
        for logger in list(logging.root.manager.loggerDict.values()):
            if isinstance(logger, logging.Logger):
                self.apply_logging_level(logger)
