# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import math

import pytest

from setalgebra import ArityViolation, TypeContractViolation, intersect, is_superset_of, subtract, union, xor


A = frozenset({1, 2, 3})
B = frozenset({2, 3, 4})


def _set(values=A):
    return set(values)


@pytest.mark.algebra
@pytest.mark.combining
class TestUnion:
    def test_scenario(self):
        assert union(_set(), [B]) == {1, 2, 3, 4}

    def test_many_operands(self):
        assert union({1}, [[2], (3, 3), {4}, iter([5])]) == {1, 2, 3, 4, 5}

    def test_returns_new_container(self):
        a = _set()
        result = union(a, [[]])
        assert result == a
        assert result is not a

    def test_idempotent(self):
        assert union(_set(), [_set()]) == A

    def test_does_not_mutate_inputs(self):
        a, b = _set(), [2, 5]
        union(a, [b])
        assert a == A
        assert b == [2, 5]

    def test_operands_from_generator(self):
        assert union({1}, ([value] for value in (2, 3))) == {1, 2, 3}

    def test_requires_operand(self):
        with pytest.raises(ArityViolation):
            union(_set(), [])

    def test_rejects_non_set_receiver(self):
        with pytest.raises(TypeContractViolation):
            union([1, 2], [[3]])

    def test_rejects_non_iterable_operand(self):
        with pytest.raises(TypeContractViolation, match="operands must be iterable"):
            union(_set(), [1])

    def test_rejects_non_iterable_operands(self):
        with pytest.raises(TypeContractViolation, match="expects a sequence of operands"):
            union(_set(), 1)


@pytest.mark.algebra
@pytest.mark.combining
class TestIntersect:
    def test_scenario(self):
        assert intersect(_set(), [B]) == {2, 3}

    def test_many_operands(self):
        assert intersect({1, 2, 3, 4}, [[2, 3, 4], (3, 4, 4), {4, 3, 9}]) == {3, 4}

    def test_duplicates_in_operand(self):
        assert intersect({1, 2}, [[2, 2, 2]]) == {2}

    def test_idempotent(self):
        assert intersect(_set(), [_set()]) == A

    def test_disjoint(self):
        assert intersect({1}, [[2]]) == set()

    def test_single_pass_iterator(self):
        assert intersect({1, 2, 3}, [iter([3, 1])]) == {1, 3}

    def test_does_not_mutate_inputs(self):
        a, b = _set(), [2, 5]
        intersect(a, [b])
        assert a == A
        assert b == [2, 5]

    def test_requires_operand(self):
        with pytest.raises(ArityViolation):
            intersect(_set(), ())

    def test_rejects_non_set_receiver(self):
        with pytest.raises(TypeContractViolation):
            intersect(frozenset(A), [B])

    def test_superset_of_difference_only_when_empty(self):
        a, b = _set(), _set(B)
        assert not is_superset_of(intersect(a, [b]), subtract(a, [b]))
        assert is_superset_of(intersect(a, [set()]), subtract(a, [a]))


@pytest.mark.algebra
@pytest.mark.combining
class TestXor:
    def test_scenario(self):
        assert xor(_set(), [B]) == {1, 4}

    def test_idempotent(self):
        assert xor(_set(), [_set()]) == set()

    def test_n_ary_is_exactly_one(self):
        # Pairwise chaining would keep 3, present in all three operands
        assert xor({1, 2, 3}, [[2, 3], [3, 4]]) == {1, 4}

    def test_duplicates_in_operand(self):
        assert xor({1}, [[2, 2]]) == {1, 2}

    def test_equals_union_minus_intersection(self):
        a, b = _set(), _set(B)
        assert xor(a, [b]) == subtract(union(a, [b]), [intersect(a, [b])])

    def test_requires_operand(self):
        with pytest.raises(ArityViolation):
            xor(_set(), [])


@pytest.mark.algebra
@pytest.mark.combining
class TestSubtract:
    def test_scenario(self):
        assert subtract(_set(), [B]) == {1}

    def test_many_operands(self):
        assert subtract({1, 2, 3, 4}, [[1], (2, 9)]) == {3, 4}

    def test_no_operand_copies(self):
        a = _set()
        result = subtract(a)
        assert result == a
        assert result is not a

    def test_properties(self):
        a, b = _set(), _set(B)
        result = subtract(a, [b])
        assert not any(element in result for element in b)
        assert all(element in a for element in result)

    def test_does_not_mutate_receiver(self):
        a = _set()
        subtract(a, [a])
        assert a == A

    def test_rejects_non_set_receiver(self):
        with pytest.raises(TypeContractViolation):
            subtract((1, 2), [[1]])


@pytest.mark.algebra
@pytest.mark.combining
class TestIsSupersetOf:
    def test_scenario(self):
        assert is_superset_of(_set(), [2, 3]) is True
        assert is_superset_of(_set(), [2, 5]) is False

    def test_vacuous(self):
        assert is_superset_of(set(), []) is True
        assert is_superset_of(_set(), iter(())) is True

    def test_consumes_once(self):
        seen = []

        def values():
            for value in (1, 2):
                seen.append(value)
                yield value

        assert is_superset_of(_set(), values())
        assert seen == [1, 2]

    def test_stops_at_first_missing(self):
        iterator = iter([1, 9, 2])
        assert not is_superset_of(_set(), iterator)
        assert list(iterator) == [2]

    def test_rejects_non_set_receiver(self):
        with pytest.raises(TypeContractViolation):
            is_superset_of([1, 2], [1])


@pytest.mark.algebra
@pytest.mark.combining
class TestElementEquality:
    def test_numeric_equality_collapses(self):
        assert len(union({1}, [[1.0, True]])) == 1

    def test_nan_matches_itself(self):
        nan = math.nan
        assert intersect({nan}, [[nan]]) == {nan}
