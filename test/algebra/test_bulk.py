# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import pytest

from setalgebra import AlgebraSet, TypeContractViolation, add_elements, remove_elements


@pytest.mark.algebra
@pytest.mark.bulk
class TestBulk:
    def test_add_elements_returns_receiver(self):
        s = {1}
        assert add_elements(s, [2, 3, 2]) is s
        assert s == {1, 2, 3}

    def test_add_elements_in_order(self):
        s = AlgebraSet([1])
        add_elements(s, [3, 2])
        assert list(s) == [1, 3, 2]

    def test_remove_elements_returns_receiver(self):
        s = {1, 2, 3}
        assert remove_elements(s, [1, 9]) is s
        assert s == {2, 3}

    def test_chaining(self):
        s = AlgebraSet()
        assert remove_elements(add_elements(s, [1, 2]), [1]) is s
        assert s == {2}

    def test_empty_elements(self):
        s = {1}
        assert add_elements(s, []) is s
        assert remove_elements(s, ()) is s
        assert s == {1}

    @pytest.mark.parametrize("operation", [add_elements, remove_elements])
    def test_rejects_non_set_receiver(self, operation):
        with pytest.raises(TypeContractViolation):
            operation([1], [2])
