"""Global pytest configuration for PRIMKIT."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

# pylint: disable=unused-argument

# Keep property runs small in CI; raise locally with HYPOTHESIS_PROFILE=dev.
settings.register_profile("ci", max_examples=50, deadline=None)
settings.register_profile(
    "dev",
    max_examples=500,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "ci"))

TESTS_ROOT = Path(__file__).parent.resolve()
SUITE_MARKERS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item with the suite its directory belongs to.

    An explicit mark of the same name on the test wins.
    """
    for item in items:
        parents = item.path.resolve().parents
        for root, marker_name in SUITE_MARKERS.items():
            if root in parents and item.get_closest_marker(marker_name) is None:
                item.add_marker(getattr(pytest.mark, marker_name))
