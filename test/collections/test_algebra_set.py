# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 setalgebra Rui Pinheiro

import pydantic
import pytest

from setalgebra import NOT_FOUND, AlgebraSet, ArityViolation, is_set


class Tagged(AlgebraSet):
    pass


class Downcast(AlgebraSet):
    __species__ = AlgebraSet


class Model(pydantic.BaseModel):
    tags: AlgebraSet[str]
    numbers: AlgebraSet[int] = pydantic.Field(default_factory=AlgebraSet)


@pytest.mark.collections
@pytest.mark.algebra_set
class TestAlgebraSetContainer:
    def test_construction(self):
        assert len(AlgebraSet()) == 0
        assert AlgebraSet([1, 2, 2, 3]) == {1, 2, 3}
        assert AlgebraSet(x for x in "abca") == {"a", "b", "c"}

    def test_insertion_order(self):
        s = AlgebraSet([3, 1, 2])
        s.add(1)
        s.add(0)
        assert list(s) == [3, 1, 2, 0]

    def test_add_discard_clear(self):
        s = AlgebraSet([1])
        s.add(2)
        s.discard(1)
        s.discard(42)
        assert s == {2}
        s.remove(2)
        with pytest.raises(KeyError):
            s.remove(2)
        s.add(5)
        s.clear()
        assert len(s) == 0

    def test_copy(self):
        s = Tagged([1, 2])
        c = s.copy()
        assert c == s
        assert c is not s
        assert type(c) is Tagged

    def test_repr(self):
        assert repr(AlgebraSet()) == "AlgebraSet()"
        assert repr(AlgebraSet(["a", 1])) == "AlgebraSet({'a', 1})"
        assert repr(Tagged([1])) == "Tagged({1})"

    def test_equality_with_builtin_set(self):
        assert AlgebraSet([1, 2]) == {1, 2}
        assert {1, 2} == AlgebraSet([2, 1])
        assert AlgebraSet([1]) != {1, 2}

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(AlgebraSet())

    def test_is_set(self):
        assert is_set(AlgebraSet())
        assert AlgebraSet.is_set({1})
        assert not AlgebraSet.is_set([1])


@pytest.mark.collections
@pytest.mark.algebra_set
class TestAlgebraSetOperations:
    def test_scenario(self):
        a = AlgebraSet([1, 2, 3])
        b = AlgebraSet([2, 3, 4])
        assert a.union(b) == {1, 2, 3, 4}
        assert a.intersect(b) == {2, 3}
        assert a.xor(b) == {1, 4}
        assert a.subtract(b) == {1}
        assert a.is_superset_of([2, 3])
        assert not a.is_superset_of([2, 5])
        assert a == {1, 2, 3}

    def test_transforms(self):
        a = AlgebraSet([1, 2, 3])
        assert a.map(lambda x: x * 2) == {2, 4, 6}
        assert a.filter(lambda x: x % 2 == 0) == {2}
        assert a.some(lambda x: x > 2)
        assert a.every(lambda x: x > 0)
        assert a.find(lambda x: x > 5) is NOT_FOUND
        assert a.find(lambda x: x > 1) == 2

    def test_variadic_operands(self):
        a = AlgebraSet([1, 2, 3, 4])
        assert a.union([5], (6,)) == {1, 2, 3, 4, 5, 6}
        assert a.intersect([1, 2, 3], [2, 3]) == {2, 3}
        assert a.xor([1], [1, 5]) == {2, 3, 4, 5}
        assert a.subtract([1], [2]) == {3, 4}
        assert a.subtract() == a

    def test_requires_operand(self):
        a = AlgebraSet([1])
        for operation in (a.union, a.intersect, a.xor):
            with pytest.raises(ArityViolation):
                operation()

    def test_bulk_chaining(self):
        a = AlgebraSet()
        assert a.add_elements(1, 2, 3).remove_elements(2, 9) is a
        assert list(a) == [1, 3]

    def test_results_keep_subclass(self):
        a = Tagged([1, 2])
        for result in (a.union([3]), a.intersect([1]), a.xor([1]), a.subtract([1]), a.map(abs), a.filter(bool)):
            assert type(result) is Tagged

    def test_results_follow_species_override(self):
        a = Downcast([1, 2])
        assert type(a.union([3])) is AlgebraSet
        assert type(a.map(abs)) is AlgebraSet
        assert type(a.copy()) is Downcast

    def test_operators_follow_species(self):
        a, b = Tagged([1, 2, 3]), Tagged([2, 3, 4])
        assert type(a | b) is Tagged
        assert a | b == {1, 2, 3, 4}
        assert a & b == {2, 3}
        assert a ^ b == {1, 4}
        assert a - b == {1}
        assert type(Downcast([1]) | Downcast([2])) is AlgebraSet


@pytest.mark.collections
@pytest.mark.algebra_set
class TestAlgebraSetPydantic:
    def test_validate_from_list(self):
        model = Model.model_validate({"tags": ["a", "b", "a"]})
        assert isinstance(model.tags, AlgebraSet)
        assert list(model.tags) == ["a", "b"]
        assert isinstance(model.numbers, AlgebraSet)
        assert len(model.numbers) == 0

    def test_validate_from_set_like(self):
        model = Model(tags=AlgebraSet(["x"]), numbers={1, 2})
        assert model.tags == {"x"}
        assert model.numbers == {1, 2}

    def test_validates_items(self):
        with pytest.raises(pydantic.ValidationError):
            Model(tags=["a"], numbers=["not a number"])

    def test_serialize(self):
        model = Model(tags=["a", "b"], numbers=[3])
        assert model.model_dump() == {"tags": ["a", "b"], "numbers": [3]}
        assert model.model_dump_json() == '{"tags":["a","b"],"numbers":[3]}'
