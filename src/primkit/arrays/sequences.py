"""Copy-returning helpers over sequences.

None of these functions mutate their input. Functions returning a sequence
always return a new list, even when nothing changed.
"""

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def first(items: Sequence[T]) -> T | None:
    """Return the first element, or None for an empty sequence."""
    return items[0] if items else None


def last(items: Sequence[T]) -> T | None:
    """Return the last element, or None for an empty sequence."""
    return items[-1] if items else None


def unique(items: Iterable[T]) -> list[T]:
    """Return the distinct elements in order of first appearance.

    Works for unhashable elements too, at quadratic cost.
    """
    seen: set[Any] = set()
    unhashable_seen: list[T] = []
    result: list[T] = []
    for item in items:
        try:
            if item in seen:
                continue
            seen.add(item)
        except TypeError:
            if item in unhashable_seen:
                continue
            unhashable_seen.append(item)
        result.append(item)
    return result


def intersperse(items: Iterable[T], separator: T) -> list[T]:
    """Return `items` with `separator` placed between each pair of elements."""
    result: list[T] = []
    for i, item in enumerate(items):
        if i:
            result.append(separator)
        result.append(item)
    return result


def insert_at(items: Sequence[T], index: int, *values: T) -> list[T]:
    """Return a copy of `items` with `values` inserted before `index`.

    `index` follows slice semantics: negative values count from the end and
    out-of-range values insert at the nearest boundary.
    """
    copy = list(items)
    copy[index:index] = values
    return copy


def remove_at(items: Sequence[T], index: int) -> list[T]:
    """Return a copy of `items` without the element at `index`.

    Negative indices count from the end. An out-of-range index returns an
    unchanged copy.
    """
    copy = list(items)
    if -len(copy) <= index < len(copy):
        del copy[index]
    return copy


def contains_any(items: Iterable[T], *candidates: T) -> bool:
    """Return True if any of `candidates` is an element of `items`."""
    pool = list(items)
    return any(candidate in pool for candidate in candidates)


def is_identical(items: Sequence[T]) -> bool:
    """Return True if all elements are equal (vacuously True for < 2 elements)."""
    return all(items[i] == items[i + 1] for i in range(len(items) - 1))


def filter_out(items: Iterable[T], unwanted: Iterable[T]) -> list[T]:
    """Return the elements of `items` that are not in `unwanted`."""
    excluded = list(unwanted)
    return [item for item in items if item not in excluded]


def filter_truthy(items: Iterable[T]) -> list[T]:
    """Return the truthy elements of `items`."""
    return [item for item in items if item]
