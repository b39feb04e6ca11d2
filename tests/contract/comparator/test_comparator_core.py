"""Contract tests for Comparator implementations.

Every comparator must be a total order over its value domain and return
only -1, 0 or 1. The sorter relies on nothing else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import given
from hypothesis import strategies as st

from primkit.arrays.sorter import is_sorted, sort

if TYPE_CHECKING:
    from .conftest import ComparatorCase


def test_results_are_normalized(comparator_case: ComparatorCase) -> None:
    """compare() only ever returns -1, 0 or 1."""

    @given(data=st.data())
    def check(data: st.DataObject) -> None:
        a = data.draw(comparator_case.values)
        b = data.draw(comparator_case.values)
        assert comparator_case.comparator(a, b) in (-1, 0, 1)

    check()


def test_reflexive(comparator_case: ComparatorCase) -> None:
    """compare(a, a) == 0."""

    @given(data=st.data())
    def check(data: st.DataObject) -> None:
        a = data.draw(comparator_case.values)
        assert comparator_case.comparator(a, a) == 0

    check()


def test_antisymmetric(comparator_case: ComparatorCase) -> None:
    """compare(a, b) == -compare(b, a)."""

    @given(data=st.data())
    def check(data: st.DataObject) -> None:
        a = data.draw(comparator_case.values)
        b = data.draw(comparator_case.values)
        compare = comparator_case.comparator
        assert compare(a, b) == -compare(b, a)

    check()


def test_transitive(comparator_case: ComparatorCase) -> None:
    """a <= b and b <= c implies a <= c."""

    @given(data=st.data())
    def check(data: st.DataObject) -> None:
        compare = comparator_case.comparator
        a, b, c = (data.draw(comparator_case.values) for _ in range(3))
        if compare(a, b) <= 0 and compare(b, c) <= 0:
            assert compare(a, c) <= 0

    check()


def test_sort_respects_comparator(comparator_case: ComparatorCase) -> None:
    """sort() output is ordered under the comparator it was given."""

    @given(items=st.lists(comparator_case.values, max_size=25))
    def check(items: list) -> None:
        result = sort(items, comparator_case.comparator)
        assert is_sorted(result, comparator_case.comparator)
        assert len(result) == len(items)

    check()
