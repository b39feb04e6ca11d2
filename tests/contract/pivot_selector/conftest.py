"""Fixtures for pivot selector contract tests."""

from collections.abc import Iterable

import pytest

from primkit.adapters.pivot_selectors import (
    FirstPivotSelector,
    LastPivotSelector,
    MiddlePivotSelector,
    RandomPivotSelector,
)
from primkit.interfaces.pivot import PivotSelector


@pytest.fixture(params=["random", "seeded", "first", "last", "middle"])
def pivot_selector(request: pytest.FixtureRequest) -> Iterable[PivotSelector]:
    """Return a fresh PivotSelector for the requested strategy."""
    match request.param:
        case "random":
            yield RandomPivotSelector()
        case "seeded":
            yield RandomPivotSelector(seed=1234)
        case "first":
            yield FirstPivotSelector()
        case "last":
            yield LastPivotSelector()
        case "middle":
            yield MiddlePivotSelector()
        case _:
            raise ValueError(f"unknown pivot selector type: {request.param}")
