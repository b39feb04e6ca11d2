"""Fixtures for comparator contract tests."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import pytest
from hypothesis import strategies as st

from primkit.adapters.comparators import (
    CaseInsensitiveComparator,
    KeyComparator,
    LocaleComparator,
    NaturalComparator,
    ReversedComparator,
)
from primkit.interfaces.comparator import Comparator


@dataclass(frozen=True)
class ComparatorCase:
    """A comparator paired with a strategy for values it totally orders."""

    comparator: Comparator[Any]
    values: st.SearchStrategy[Any]


_TEXT = st.text(alphabet="abcABC", max_size=5)
_INTS = st.integers(min_value=-1000, max_value=1000)


@pytest.fixture(
    params=["natural-int", "natural-str", "locale", "case-insensitive", "reversed", "key"]
)
def comparator_case(request: pytest.FixtureRequest) -> Iterable[ComparatorCase]:
    """Return a comparator and a strategy for values it must totally order.

    Extend by adding identifiers to `params` and a branch below.
    """
    match request.param:
        case "natural-int":
            yield ComparatorCase(NaturalComparator(), _INTS)
        case "natural-str":
            yield ComparatorCase(NaturalComparator(), _TEXT)
        case "locale":
            yield ComparatorCase(LocaleComparator(), _TEXT)
        case "case-insensitive":
            yield ComparatorCase(CaseInsensitiveComparator(), _TEXT)
        case "reversed":
            yield ComparatorCase(ReversedComparator(NaturalComparator()), _INTS)
        case "key":
            yield ComparatorCase(KeyComparator(abs), _INTS)
        case _:
            raise ValueError(f"unknown comparator type: {request.param}")
