# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from enum import Enum
from typing import Final, Literal, override


class NotFoundType(Enum):
    """Type of :data:`NOT_FOUND`, the value returned by ``find`` when no element matches.

    Being a dedicated singleton, it can never be mistaken for an element, not even ``None``.
    It is falsy, so ``if (found := s.find(pred)):`` reads naturally when elements are truthy.
    """

    NOT_FOUND = "NOT_FOUND"

    def __bool__(self) -> Literal[False]:
        return False

    @override
    def __repr__(self) -> str:
        return self.value


NOT_FOUND: Final = NotFoundType.NOT_FOUND
