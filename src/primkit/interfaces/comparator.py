"""Interface for three-way comparators.

A comparator imposes a total order over values of a type: it returns a
negative number when the first value sorts before the second, zero when they
are equivalent and a positive number otherwise. Plain callables with that
signature satisfy the contract; `Comparator` gives them a named, reusable
home.

Implementations are expected to be reflexive, antisymmetric and transitive.
Nothing here checks that; a comparator that is not a total order yields an
unspecified (but non-crashing) ordering from the sorter.
"""

import abc
from collections.abc import Callable
from typing import Any, Generic, TypeAlias, TypeVar

# pylint: disable=too-few-public-methods

T = TypeVar("T")

CompareFunc: TypeAlias = Callable[[Any, Any], int]


def sign(value: float) -> int:
    """Collapse a comparison result to -1, 0 or 1.

    Results that are neither positive nor negative (zero, NaN) map to 0.
    """
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


class Comparator(abc.ABC, Generic[T]):
    """Contract for a three-way comparator over values of type T."""

    @abc.abstractmethod
    def compare(self, a: T, b: T) -> int:
        """Compare two values.

        Args:
            a: Some value.
            b: Some other value.

        Returns:
            -1 if `a` sorts before `b`, 0 if they are equivalent, 1 otherwise.
        """

    def __call__(self, a: T, b: T) -> int:
        return self.compare(a, b)
