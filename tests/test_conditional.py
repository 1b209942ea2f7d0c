"""
Tests for Conditional construction, accessors and rendering.
"""

import copy
import pickle

import pytest

from elimcore.core.config import invariant_mode
from elimcore.core.errors import PreconditionError
from elimcore.inference.conditional import Conditional
from elimcore.inference.views import KeyView, MutableKeyView


class TestConstruction:
    def test_no_parents(self):
        c = Conditional(3)
        assert c.nr_frontals() == 1
        assert c.nr_parents() == 0
        assert c.key() == 3
        assert list(c.parents()) == []

    @pytest.mark.parametrize("parents", [(1,), (1, 2), (1, 2, 7)])
    def test_explicit_parents(self, parents):
        c = Conditional(0, *parents)
        assert c.nr_frontals() == 1
        assert c.nr_parents() == len(parents)
        assert c.frontals() == [0]
        assert c.parents() == list(parents)

    def test_parent_collection(self):
        c = Conditional.with_parents(5, [9, 2, 4])
        assert c.frontals() == [5]
        assert c.parents() == [9, 2, 4]  # supplied order, not sorted

    def test_parent_iterator(self):
        c = Conditional.from_parent_range(1, iter(range(2, 6)))
        assert c.parents() == [2, 3, 4, 5]

    def test_from_range_multi_frontal(self):
        c = Conditional.from_range([0, 1, 2, 7, 8], 3)
        assert c.nr_frontals() == 3
        assert c.nr_parents() == 2
        assert c.frontals() == [0, 1, 2]
        assert c.parents() == [7, 8]

    def test_from_range_all_frontal(self):
        c = Conditional.from_range(["a", "b"], 2)
        assert c.nr_parents() == 0
        assert c.frontals() == ["a", "b"]

    def test_from_range_too_many_frontals_raises(self):
        with pytest.raises(ValueError):
            Conditional.from_range([0, 1], 3)

    def test_empty(self):
        c = Conditional.empty()
        assert len(c) == 0
        assert c.nr_frontals() == 0
        assert c.nr_parents() == 0

    def test_subclass_factories(self):
        class SymbolConditional(Conditional):
            pass

        c = SymbolConditional.from_range(["x1", "l2"], 1)
        assert isinstance(c, SymbolConditional)
        assert isinstance(SymbolConditional.with_parents("x1", ["x2"]), SymbolConditional)


class TestAccessors:
    def test_example(self):
        c = Conditional(5, 2, 9)
        assert c.nr_frontals() == 1
        assert c.nr_parents() == 2
        assert c.key() == 5
        assert c.frontals() == [5]
        assert c.parents() == [2, 9]
        assert c.keys() == (5, 2, 9)

    def test_boundaries(self):
        c = Conditional.from_range([4, 5, 6, 7], 2)
        assert (c.begin_frontals(), c.end_frontals()) == (0, 2)
        assert (c.begin_parents(), c.end_parents()) == (2, 4)

    def test_key_requires_single_frontal(self):
        c = Conditional.from_range([0, 1, 2], 2)
        with pytest.raises(PreconditionError):
            c.key()

    def test_key_unchecked_when_trusted(self):
        c = Conditional.from_range([0, 1, 2], 2)
        with invariant_mode("trusted"):
            assert c.key() == 0

    def test_views_are_restartable(self):
        c = Conditional(1, 2, 3)
        view = c.parents()
        assert isinstance(view, KeyView)
        assert list(view) == [2, 3]
        assert list(view) == [2, 3]
        assert len(view) == 2
        assert view[-1] == 3
        assert 2 in view

    def test_read_only_view_rejects_assignment(self):
        c = Conditional(1, 2)
        with pytest.raises(TypeError):
            c.parents()[0] = 5

    def test_mutable_view_edits_in_place(self):
        c = Conditional(1, 2, 3)
        parents = c.mutable_parents()
        assert isinstance(parents, MutableKeyView)
        parents[1] = 8
        assert c.parents() == [2, 8]
        assert c.frontals() == [1]

    def test_mutable_view_cannot_reach_other_partition(self):
        c = Conditional(1, 2)
        with pytest.raises(IndexError):
            c.mutable_frontals()[1] = 0

    def test_mutable_view_cannot_resize(self):
        c = Conditional(1, 2, 3)
        with pytest.raises(TypeError):
            c.mutable_parents()[0:2] = [4]


class TestEquals:
    def test_same_keys(self):
        assert Conditional(5, 2, 9).equals(Conditional.with_parents(5, [2, 9]))
        assert Conditional(5, 2, 9) == Conditional(5, 2, 9)

    def test_tolerance_ignored(self):
        a, b = Conditional(5, 2), Conditional(5, 3)
        assert not a.equals(b, tol=1e9)
        assert Conditional(5, 2).equals(Conditional(5, 2), tol=0.0)

    def test_frontal_count_mismatch(self):
        a = Conditional.from_range([1, 2, 3], 1)
        b = Conditional.from_range([1, 2, 3], 2)
        assert not a.equals(b)

    def test_order_matters(self):
        assert not Conditional(1, 2, 3).equals(Conditional(1, 3, 2))

    def test_length_mismatch(self):
        assert not Conditional(1, 2).equals(Conditional(1, 2, 3))

    def test_other_types(self):
        assert not Conditional(1).equals(None)
        assert not Conditional(1, 2).equals((1, 2))
        assert Conditional(1) != "1"


class TestRendering:
    def test_with_parents(self):
        assert Conditional(5, 2, 9).format("X") == "X P( 5 | 2 9)"

    def test_without_parents(self):
        assert Conditional(5).format("X") == "X P( 5)"

    def test_multi_frontal(self):
        c = Conditional.from_range([0, 1, 4], 2)
        assert c.format("clique") == "clique P( 0 1 | 4)"

    def test_print(self, capsys):
        Conditional(5, 2, 9).print("X")
        assert capsys.readouterr().out == "X P( 5 | 2 9)\n"

    def test_default_label(self, capsys):
        Conditional(0).print()
        assert capsys.readouterr().out == "Conditional P( 0)\n"


class TestSharing:
    def test_copy_disallowed(self):
        c = Conditional(1, 2)
        with pytest.raises(TypeError):
            copy.copy(c)
        with pytest.raises(TypeError):
            copy.deepcopy(c)

    def test_pickle_disallowed(self):
        with pytest.raises(TypeError):
            pickle.dumps(Conditional(1, 2))

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Conditional(1))

    def test_shared_instance_sees_permutation(self):
        c = Conditional(0, 1)
        holders = [c, c]
        c.permute_separator_with_inverse({0: 0, 1: 4})
        assert all(h.parents() == [4] for h in holders)
