"""Pivot selectors for the quicksort in `primkit.arrays.sorter`."""

import random

from primkit.interfaces.pivot import PivotSelector

# pylint: disable=too-few-public-methods


class RandomPivotSelector(PivotSelector):
    """Uniformly random pivot selection.

    Each selector owns a private `random.Random`, so seeding one never
    disturbs the global generator or other selectors.

    Args:
        seed: Optional seed for reproducible pivot sequences.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    def select(self, length: int) -> int:
        """Draw a pivot index uniformly from ``range(length)``."""
        return self._rng.randrange(length)

    def __repr__(self) -> str:
        return f"RandomPivotSelector(seed={self._seed!r})"


class FirstPivotSelector(PivotSelector):
    """Always pick the first element.

    Note:
        Quadratic on already-sorted input; meant for exercising worst-case
        partition paths in tests.
    """

    def select(self, length: int) -> int:
        return 0


class LastPivotSelector(PivotSelector):
    """Always pick the last element."""

    def select(self, length: int) -> int:
        return length - 1


class MiddlePivotSelector(PivotSelector):
    """Always pick the middle element."""

    def select(self, length: int) -> int:
        return length // 2
