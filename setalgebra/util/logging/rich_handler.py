# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro


from typing import TYPE_CHECKING, override

from rich.console import Console, ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


if TYPE_CHECKING:
    import logging


class CustomRichHandler(RichHandler):
    """Compact rich console handler printing ``[L:logger.name] message`` lines on stderr."""

    @override
    def __init__(
        self,
        *args,
        show_level: bool = True,
        show_name: bool = True,
        level_prefix: str = "[",
        level_suffix: str = "] ",
        **kwargs,
    ) -> None:
        kwargs.setdefault("rich_tracebacks", True)
        kwargs.setdefault("enable_link_path", False)
        kwargs.setdefault("show_time", False)
        kwargs.setdefault("show_level", False)
        super().__init__(*args, console=Console(stderr=True), **kwargs)

        self.prefix_level = show_level
        self.prefix_name = show_name
        self.level_prefix = level_prefix
        self.level_suffix = level_suffix

    def should_format(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "simple", False)

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        if self.should_format(record) and (self.prefix_level or self.prefix_name):
            text.append(self.level_prefix, style="dim")
            if self.prefix_level:
                text.append(record.levelname[0], style=self.get_level_style(record))
            if self.prefix_name:
                text.append(f"{':' if self.prefix_level else ''}{record.name}", style="dim")
            text.append(self.level_suffix, style="dim")

        text.append(message)
        return text
