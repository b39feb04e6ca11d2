"""Interface for quicksort pivot selection."""

import abc

# pylint: disable=too-few-public-methods


class PivotSelector(abc.ABC):
    """Contract for choosing the pivot of a partition.

    The sorter calls `select` once per partition of two or more elements and
    uses the element at the returned index as the pivot. Indices outside
    ``range(length)`` are clamped by the caller, so a selector can never make
    a sort fail; it can only make it slower.
    """

    @abc.abstractmethod
    def select(self, length: int) -> int:
        """Return the pivot index for a partition of ``length`` elements."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
