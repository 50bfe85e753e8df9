# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import pytest

from setalgebra.util.helpers import tstring_as_fstring


@pytest.mark.helpers
class TestTStringAsFString:
    def test_plain_text(self):
        assert tstring_as_fstring(t"no interpolations") == "no interpolations"

    def test_matches_fstring(self):
        name = "Bag"
        count = 3
        values = ["a", "é"]
        assert tstring_as_fstring(t"{name} has {count:02d} items") == f"{name} has {count:02d} items"
        assert tstring_as_fstring(t"{values!r}") == f"{values!r}"
        assert tstring_as_fstring(t"{values!a}") == f"{values!a}"
        assert tstring_as_fstring(t"{count!s:>4}") == f"{count!s:>4}"
