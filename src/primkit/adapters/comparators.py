"""Comparator implementations for PRIMKIT.

- `NaturalComparator` orders by the values' own ``<`` / ``>`` operators
  (numbers numerically, strings by code point, dates chronologically).
- `LocaleComparator` collates strings with the active ``LC_COLLATE`` locale.
- `CaseInsensitiveComparator` folds both strings with simple lower-case
  mapping, then collates.
- `ReversedComparator` and `KeyComparator` derive new orders from existing
  ones.
"""

import locale
from collections.abc import Callable
from typing import Any, TypeVar

from primkit.interfaces.comparator import CompareFunc, Comparator, sign

# pylint: disable=too-few-public-methods

T = TypeVar("T")


class NaturalComparator(Comparator[Any]):
    """Order values by their native relational operators.

    Note:
        Values that are neither less than nor greater than each other (for
        example ``float("nan")`` against anything) compare as equivalent.
        Their relative placement in a sort is unspecified.
    """

    def compare(self, a: Any, b: Any) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0


class LocaleComparator(Comparator[str]):
    """Collate strings with `locale.strcoll` under the current locale."""

    def compare(self, a: str, b: str) -> int:
        return sign(locale.strcoll(a, b))


class CaseInsensitiveComparator(Comparator[str]):
    """Collate strings after folding both with `str.lower`."""

    def compare(self, a: str, b: str) -> int:
        return sign(locale.strcoll(a.lower(), b.lower()))


class ReversedComparator(Comparator[T]):
    """Impose the opposite of another comparator's order."""

    def __init__(self, inner: CompareFunc) -> None:
        self._inner = inner

    @property
    def inner(self) -> CompareFunc:
        """Return the comparator being reversed."""
        return self._inner

    def compare(self, a: T, b: T) -> int:
        return sign(self._inner(b, a))


class KeyComparator(Comparator[T]):
    """Compare values by a derived key.

    Args:
        key: Function extracting the sort key from a value.
        inner: Comparator applied to the keys. Defaults to natural order.
    """

    def __init__(self, key: Callable[[T], Any], inner: CompareFunc | None = None) -> None:
        self._key = key
        self._inner = inner if inner is not None else NaturalComparator()

    def compare(self, a: T, b: T) -> int:
        return sign(self._inner(self._key(a), self._key(b)))


class _FunctionComparator(Comparator[Any]):
    def __init__(self, func: CompareFunc) -> None:
        self._func = func

    def compare(self, a: Any, b: Any) -> int:
        return sign(self._func(a, b))


def as_comparator(func: CompareFunc) -> Comparator[Any]:
    """Return `func` as a `Comparator`, normalizing its results to -1/0/1.

    `Comparator` instances are returned unchanged.
    """
    if isinstance(func, Comparator):
        return func
    return _FunctionComparator(func)


def reverse(comparator: CompareFunc) -> Comparator[Any]:
    """Return a comparator imposing the opposite order of `comparator`.

    Reversing a `ReversedComparator` unwraps it instead of nesting.
    """
    if isinstance(comparator, ReversedComparator):
        return as_comparator(comparator.inner)
    return ReversedComparator(comparator)
