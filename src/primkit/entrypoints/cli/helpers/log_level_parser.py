"""Parse ``-L NAME=LEVEL`` logger overrides.

Values come either from repeated options or from a single environment
variable holding a comma/space separated list; both reduce to the same
mapping of logger name to numeric level.
"""

import logging
import re
from collections.abc import Iterable

import click

# The sorter logs one DEBUG record per call; keep those out of the flight
# recorder unless explicitly requested.
DEFAULT_LIB_LEVELS = {"primkit.arrays.sorter": logging.INFO}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_pairs(value: str | Iterable[str]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [pair for chunk in chunks for pair in _SEPARATORS.split(chunk) if pair]


def _level_from_name(name: str) -> int:
    level = getattr(logging, name.strip().upper(), None)
    # logging also exposes non-level attributes such as BASIC_FORMAT
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {name}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into ``{name: level}``.

    The result starts from `DEFAULT_LIB_LEVELS`; a later pair for the same
    logger replaces an earlier one. Level names are case-insensitive.

    Raises:
        click.BadParameter: If a pair has no ``=`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for pair in _split_pairs(value):
        name, sep, level_name = pair.partition("=")
        if not sep:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {pair!r}")
        levels[name.strip()] = _level_from_name(level_name)
    return levels
