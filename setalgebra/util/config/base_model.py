# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from pydantic import BaseModel, ConfigDict

from ..mixins import LoggableMixin


class BaseConfigModel(LoggableMixin, BaseModel):
    """Base class for every configuration model: immutable, and rejecting unknown keys."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )
