"""Randomized three-way quicksort.

`sort` returns a sorted copy of any finite sequence under a caller-supplied
comparator, or under the values' natural order. Each partition step picks a
pivot through a `PivotSelector` (uniformly at random by default), splits the
remaining elements into less-than, equal-to and greater-than buckets, and
sorts the outer buckets the same way.

Properties:
- The result is a permutation of the input ordered so that
  ``compare(out[i], out[i + 1]) <= 0`` for every adjacent pair.
- The sort is **not stable**: equivalent elements may come out in a
  different relative order than they went in.
- Expected O(n log n) comparisons, O(n^2) in the worst case. The pivot draw
  only affects speed, never the result.
- Incomparable values (``float("nan")`` under natural order) compare as
  equivalent to everything; their placement is unspecified.
- A comparator that is not a total order still terminates and returns a
  permutation of the input, in no particular order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

from primkit.adapters.comparators import (
    CaseInsensitiveComparator,
    LocaleComparator,
    NaturalComparator,
    as_comparator,
    reverse,
)
from primkit.adapters.pivot_selectors import RandomPivotSelector
from primkit.errors import UnknownSortOrderError

if TYPE_CHECKING:
    from primkit.interfaces.comparator import CompareFunc, Comparator
    from primkit.interfaces.pivot import PivotSelector

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DEFAULT_PIVOT_SELECTOR = RandomPivotSelector()


class SortOrder(Enum):
    """Direction of a sort."""

    ASC = "asc"
    DESC = "desc"


def _resolve_order(order: SortOrder | str) -> SortOrder:
    if isinstance(order, SortOrder):
        return order
    try:
        return SortOrder(order)
    except ValueError as e:
        raise UnknownSortOrderError(order) from e


def _resolve_comparator(
    comparator: CompareFunc | None, order: SortOrder | str
) -> Comparator[Any]:
    resolved = as_comparator(comparator) if comparator is not None else NaturalComparator()
    if _resolve_order(order) is SortOrder.DESC:
        return reverse(resolved)
    return resolved


def _partition(
    items: list[T], compare: Comparator[Any], selector: PivotSelector
) -> tuple[list[T], list[T], list[T]]:
    length = len(items)
    index = max(0, min(selector.select(length), length - 1))
    pivot = items[index]

    # The pivot is never compared with itself, so every partition step
    # shrinks the outer buckets even under a non-reflexive comparator.
    less: list[T] = []
    equal: list[T] = [pivot]
    greater: list[T] = []
    for item in items[:index] + items[index + 1 :]:
        result = compare(item, pivot)
        if result < 0:
            less.append(item)
        elif result > 0:
            greater.append(item)
        else:
            equal.append(item)
    return less, equal, greater


def sort(
    items: Iterable[T],
    comparator: CompareFunc | None = None,
    *,
    order: SortOrder | str = SortOrder.ASC,
    pivot_selector: PivotSelector | None = None,
) -> list[T]:
    """Return a new list with the elements of `items` in sorted order.

    Args:
        items: The elements to sort. Never mutated.
        comparator: Three-way comparison function. Defaults to the
            elements' natural order. Results are only inspected for their
            sign.
        order: `SortOrder.ASC` (default) or `SortOrder.DESC`, or their
            string values ``"asc"`` / ``"desc"``.
        pivot_selector: Strategy choosing each partition's pivot. Defaults
            to a shared `RandomPivotSelector`.

    Returns:
        A sorted list. Equivalent elements keep no particular relative order.

    Raises:
        UnknownSortOrderError: If `order` is not a recognised sort order.

    Example:
        ```py
        sort([7, 1, 6, 3, 5, 8, 2, 9, 4])  # [1, 2, 3, 4, 5, 6, 7, 8, 9]
        sort(["gamma", "alpha", "beta"], order="desc")  # ["gamma", "beta", "alpha"]
        ```
    """
    compare = _resolve_comparator(comparator, order)
    selector = pivot_selector if pivot_selector is not None else _DEFAULT_PIVOT_SELECTOR
    pending = list(items)
    logger.debug(
        "Sorting %d items (comparator=%s, selector=%r)",
        len(pending),
        type(compare).__name__,
        selector,
    )

    # Work stack of (needs_sorting, chunk). Chunks are pushed in reverse so
    # that less-than buckets are emitted before their pivot run and the
    # greater-than bucket; this is the recursive
    # sort(less) + equal + sort(greater) without recursion.
    result: list[T] = []
    stack: list[tuple[bool, list[T]]] = [(True, pending)]
    while stack:
        needs_sorting, chunk = stack.pop()
        if not needs_sorting or len(chunk) < 2:
            result.extend(chunk)
            continue
        less, equal, greater = _partition(chunk, compare, selector)
        stack.append((True, greater))
        stack.append((False, equal))
        stack.append((True, less))
    return result


def sort_strings(
    items: Iterable[str],
    *,
    ignore_case: bool = False,
    order: SortOrder | str = SortOrder.ASC,
    pivot_selector: PivotSelector | None = None,
) -> list[str]:
    """Sort strings with locale-aware collation, optionally ignoring case."""
    comparator = CaseInsensitiveComparator() if ignore_case else LocaleComparator()
    return sort(items, comparator, order=order, pivot_selector=pivot_selector)


def is_sorted(
    items: Sequence[T],
    comparator: CompareFunc | None = None,
    *,
    order: SortOrder | str = SortOrder.ASC,
) -> bool:
    """Return True if every adjacent pair of `items` is in order."""
    compare = _resolve_comparator(comparator, order)
    return all(compare(items[i], items[i + 1]) <= 0 for i in range(len(items) - 1))
