# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

from string.templatelib import Interpolation
from typing import TYPE_CHECKING, Literal


if TYPE_CHECKING:
    from string.templatelib import Template


# Conversion follows https://peps.python.org/pep-0750/#example-implementing-f-strings-with-t-strings
def _convert(value: object, conversion: Literal["a", "r", "s"] | None) -> object:
    match conversion:
        case "a":
            return ascii(value)
        case "r":
            return repr(value)
        case "s":
            return str(value)
        case _:
            return value


def tstring_as_fstring(template: Template) -> str:
    """Render a t-string template exactly like the equivalent f-string would."""
    parts: list[str] = []
    for item in template:
        if isinstance(item, Interpolation):
            parts.append(format(_convert(item.value, item.conversion), item.format_spec))
        else:
            parts.append(item)
    return "".join(parts)
