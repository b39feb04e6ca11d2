"""Contract tests for PivotSelector implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from primkit.arrays.sorter import sort

if TYPE_CHECKING:
    from primkit.interfaces.pivot import PivotSelector


def test_indices_are_in_range(pivot_selector: PivotSelector) -> None:
    """select(n) returns an index in range(n) for every n >= 2."""
    for length in range(2, 200):
        for _ in range(5):
            assert 0 <= pivot_selector.select(length) < length


def test_has_readable_repr(pivot_selector: PivotSelector) -> None:
    """repr() names the strategy (it appears in sorter debug logs)."""
    assert type(pivot_selector).__name__ in repr(pivot_selector)


def test_sort_result_does_not_depend_on_selector(pivot_selector: PivotSelector) -> None:
    """Pivots change the work done, never the sorted output."""
    items = [5, 3, 8, 1, 9, 2, 7, 3, 5, 0, -4, 8]
    assert sort(items, pivot_selector=pivot_selector) == sorted(items)
