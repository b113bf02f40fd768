"""Tests for the fluent sequence wrapper (core/stream.py).

Every test is a pure function call.  These tests exercise:

* Natural ordering and comparator ordering
* Stability of ties
* Idempotence
* Non-mutation of the input and of the original wrapper
* Failure modes (unorderable elements, failing comparator)
"""

from __future__ import annotations

import pytest

from lambdava.core.functions import function2
from lambdava.core.stream import FunctionalSequence, functional
from lambdava.exceptions import LambdavaError, UnorderableElementsError


def _d_first(left: str, right: str) -> int:
    """Rank ``"d"`` ahead of everything, otherwise natural order."""
    if left == "d" and right != "d":
        return -1
    if left != "d" and right == "d":
        return 1
    return (left > right) - (left < right)


# ---------------------------------------------------------------------------
# Wrapper basics
# ---------------------------------------------------------------------------

class TestFunctionalSequence:
    def test_as_list(self) -> None:
        assert functional(["a", "b"]).as_list() == ["a", "b"]

    def test_as_list_is_fresh(self) -> None:
        seq = functional([1, 2])
        assert seq.as_list() is not seq.as_list()

    def test_accepts_any_iterable(self) -> None:
        assert functional(x * 2 for x in range(3)).as_list() == [0, 2, 4]

    def test_len_and_bool(self) -> None:
        assert len(functional([1, 2, 3])) == 3
        assert not functional([])
        assert functional([0])

    def test_iterable(self) -> None:
        assert list(functional("abc")) == ["a", "b", "c"]

    def test_equality(self) -> None:
        assert functional([1, 2]) == FunctionalSequence((1, 2))

    def test_frozen(self) -> None:
        seq = functional([1])
        with pytest.raises(AttributeError):
            seq.elements = ()  # type: ignore[misc]


# ---------------------------------------------------------------------------
# sort()
# ---------------------------------------------------------------------------

class TestSort:
    def test_natural_order(self) -> None:
        assert functional(["z", "d", "a"]).sort().as_list() == ["a", "d", "z"]

    def test_reverse(self) -> None:
        assert functional([1, 3, 2]).sort(reverse=True).as_list() == [3, 2, 1]

    def test_idempotent(self) -> None:
        once = functional([5, 1, 4, 1, 3]).sort()
        assert once.sort() == once

    def test_already_sorted_unchanged(self) -> None:
        assert functional([1, 2, 3]).sort().as_list() == [1, 2, 3]

    def test_empty(self) -> None:
        assert functional([]).sort().as_list() == []

    def test_does_not_mutate_input(self) -> None:
        source = ["z", "d", "a"]
        seq = functional(source)
        seq.sort()
        assert source == ["z", "d", "a"]
        assert seq.as_list() == ["z", "d", "a"]

    def test_returns_new_wrapper(self) -> None:
        seq = functional([2, 1])
        assert seq.sort() is not seq

    def test_unorderable_elements(self) -> None:
        with pytest.raises(UnorderableElementsError) as exc_info:
            functional([object(), object(), object()]).sort()
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert exc_info.value.hint is not None

    def test_mixed_types_unorderable(self) -> None:
        with pytest.raises(TypeError):
            functional([1, "a"]).sort()

    def test_unorderable_error_in_hierarchy(self) -> None:
        assert issubclass(UnorderableElementsError, LambdavaError)


# ---------------------------------------------------------------------------
# sort_by()
# ---------------------------------------------------------------------------

class TestSortBy:
    def test_custom_comparator(self) -> None:
        result = functional(["z", "d", "a"]).sort_by(_d_first).as_list()
        assert result == ["d", "a", "z"]

    def test_function2_comparator(self) -> None:
        result = functional(["z", "d", "a"]).sort_by(function2(_d_first)).as_list()
        assert result == ["d", "a", "z"]

    def test_stable_on_ties(self) -> None:
        rows = [("b", 1), ("a", 2), ("b", 0), ("a", 1)]
        by_letter = functional(rows).sort_by(
            lambda x, y: (x[0] > y[0]) - (x[0] < y[0])
        )
        assert by_letter.as_list() == [("a", 2), ("a", 1), ("b", 1), ("b", 0)]

    def test_all_ties_preserve_order(self) -> None:
        items = [3, 1, 2]
        assert functional(items).sort_by(lambda a, b: 0).as_list() == [3, 1, 2]

    def test_does_not_mutate_input(self) -> None:
        source = ["z", "d", "a"]
        seq = functional(source)
        seq.sort_by(_d_first)
        assert source == ["z", "d", "a"]
        assert seq.as_list() == ["z", "d", "a"]

    def test_chaining(self) -> None:
        result = functional([3, 1, 2]).sort().sort_by(lambda a, b: b - a)
        assert result.as_list() == [3, 2, 1]

    def test_comparator_error_propagates(self) -> None:
        def broken(a: int, b: int) -> int:
            raise ZeroDivisionError("boom")

        with pytest.raises(ZeroDivisionError, match="boom"):
            functional([1, 2]).sort_by(broken)

    def test_works_on_unorderable_elements(self) -> None:
        a, b = object(), object()
        ordered = functional([a, b]).sort_by(lambda x, y: -1 if x is b else 1)
        assert ordered.as_list() == [b, a]
