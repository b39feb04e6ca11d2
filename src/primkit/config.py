"""Configuration utilities for PRIMKIT.

This module centralizes the environment variables PRIMKIT reads and the
helpers that parse them.
"""

import os

from primkit.errors import InvalidSortSeedError

SORT_SEED_ENV = "PRIMKIT_SORT_SEED"  # pragma: no mutate


def get_sort_seed() -> int | None:
    """Get the pivot-selection seed from the environment.

    Returns:
        The integer value of `PRIMKIT_SORT_SEED`, or None when it is unset
        or empty.

    Raises:
        InvalidSortSeedError: If `PRIMKIT_SORT_SEED` is set but is not an
            integer.
    """
    if not (raw := os.environ.get(SORT_SEED_ENV, "").strip()):
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise InvalidSortSeedError(raw) from e
