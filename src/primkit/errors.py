"""Error definitions for PRIMKIT.

Scanning and sorting never raise for documented inputs. The errors below
cover argument validation and configuration only.
"""

# ============================================================================
#                           General errors
# ============================================================================


class PrimkitError(Exception):
    """Base class for PRIMKIT errors."""


# ============================================================================
#                           Sorting errors
# ============================================================================


class UnknownSortOrderError(PrimkitError, ValueError):
    """Raised when a sort order is neither a SortOrder nor one of its values."""

    def __init__(self, order: object) -> None:
        super().__init__(
            f"Unknown sorting order {order!r}; expected 'asc' or 'desc'."
        )
        self.order = order


# ============================================================================
#                           Configuration errors
# ============================================================================


class InvalidSortSeedError(PrimkitError, ValueError):
    """Raised when PRIMKIT_SORT_SEED is set but is not an integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"PRIMKIT_SORT_SEED must be an integer, got {value!r}.")
        self.value = value
