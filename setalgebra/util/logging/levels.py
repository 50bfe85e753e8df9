# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import logging

from typing import Any, ClassVar, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, PydanticUseDefault, core_schema


# Level value used to disable a handler entirely
OFF = -1

LEVELS : dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR"   : logging.ERROR   ,
    "WARNING" : logging.WARNING ,
    "INFO"    : logging.INFO    ,
    "DEBUG"   : logging.DEBUG   ,
    "NOTSET"  : logging.NOTSET  ,
    "OFF"     : OFF             ,
}  # fmt: skip

REVERSE_LEVELS: dict[int, str] = {v: k for k, v in LEVELS.items()}


class LoggingLevel:
    """A logging level that can be configured from an int, a level name, or a bool.

    >>> from setalgebra.util.logging.levels import LoggingLevel
    >>> LoggingLevel("debug")
    LoggingLevel.DEBUG
    >>> LoggingLevel(False).name
    'OFF'
    >>> LoggingLevel(15)
    LoggingLevel(15)
    """

    # fmt: off
    CRITICAL : ClassVar[LoggingLevel]
    ERROR    : ClassVar[LoggingLevel]
    WARNING  : ClassVar[LoggingLevel]
    INFO     : ClassVar[LoggingLevel]
    DEBUG    : ClassVar[LoggingLevel]
    NOTSET   : ClassVar[LoggingLevel]
    OFF      : ClassVar[LoggingLevel]
    # fmt: on

    def __init__(self, value: Any) -> None:
        self.value = type(self).coerce(value)

    @classmethod
    def coerce(cls, value: Any) -> int:
        if isinstance(value, LoggingLevel):
            return value.value

        # bool must be tested before int, as it is a subclass of it
        if isinstance(value, bool):
            level = logging.INFO if value else OFF
        elif isinstance(value, int):
            level = value
        elif isinstance(value, str):
            upper = value.strip().upper()
            if upper in LEVELS:
                level = LEVELS[upper]
            elif upper == "FALSE":
                level = OFF
            else:
                try:
                    level = int(upper)
                except ValueError as err:
                    msg = f"Unknown logging level string: {value}"
                    raise ValueError(msg) from err
        else:
            msg = f"Invalid type for logging level: {type(value)}"
            raise TypeError(msg)

        if level < OFF:
            msg = f"Invalid value for logging level: {level}"
            raise ValueError(msg)

        return level

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            function=cls.validate,
            schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(LoggingLevel),
                    core_schema.bool_schema(strict=True),
                    core_schema.int_schema(),
                    core_schema.str_schema(),
                    core_schema.none_schema(),
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def validate(cls, value: Any) -> LoggingLevel:
        # None falls back to the field default
        if value is None:
            raise PydanticUseDefault
        return cls(value)

    # MARK: Properties
    @property
    def name(self) -> str:
        return REVERSE_LEVELS.get(self.value, str(self.value))

    @property
    def enabled(self) -> bool:
        return self.value != OFF

    # MARK: Dunder
    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, LoggingLevel):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, str):
            return self.name == other.upper()
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    @override
    def __repr__(self) -> str:
        name = REVERSE_LEVELS.get(self.value)
        return f"LoggingLevel.{name}" if name is not None else f"LoggingLevel({self.value})"

    @override
    def __str__(self) -> str:
        return self.name


for _name, _value in LEVELS.items():
    setattr(LoggingLevel, _name, LoggingLevel(_value))
