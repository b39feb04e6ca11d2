"""PRIMKIT sort CLI: randomized quicksort over command-line or stdin items.

Items come from the ITEMS arguments, or from whitespace-separated stdin when
no arguments are given. Sorted items are printed one per line on **stdout**,
exactly as they were written (numeric mode orders by value but echoes the
original tokens).

Pivot selection is random. Pass ``--seed`` (or set ``PRIMKIT_SORT_SEED``)
to make the pivot sequence reproducible; the output order of distinct items
never depends on it.

Examples
    $ primkit sort pear apple fig
    $ printf '10 9 100' | primkit sort --numeric --desc
"""

import logging
import math

import click

from primkit import config
from primkit.adapters.comparators import (
    CaseInsensitiveComparator,
    KeyComparator,
    LocaleComparator,
)
from primkit.adapters.pivot_selectors import RandomPivotSelector
from primkit.arrays.sorter import SortOrder, sort as sort_items
from primkit.errors import InvalidSortSeedError

from .helpers import error, warn

logger = logging.getLogger(__name__)

NAN_WARNING = "NaN has no defined position in a numeric sort; its placement is arbitrary."


def _parse_numbers(items: list[str]) -> dict[str, float]:
    values: dict[str, float] = {}
    for item in items:
        try:
            values[item] = float(item)
        except ValueError as e:
            raise click.BadParameter(f"{item!r} is not a number.", param_hint="ITEMS") from e
    return values


@click.command(name="sort")
@click.argument("items", nargs=-1)
@click.option("--numeric", "-n", is_flag=True, help="Compare items as numbers.")
@click.option(
    "--ignore-case", "-i", is_flag=True, help="Compare text case-insensitively."
)
@click.option("--desc", "descending", is_flag=True, help="Sort in descending order.")
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for pivot selection. Defaults to PRIMKIT_SORT_SEED, else random.",
)
@click.pass_context
def sort(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    items: tuple[str, ...],
    numeric: bool,
    ignore_case: bool,
    descending: bool,
    seed: int | None,
) -> None:
    """Sort ITEMS (or whitespace-separated stdin) and print one per line."""
    if seed is None:
        try:
            seed = config.get_sort_seed()
        except InvalidSortSeedError as e:
            error(str(e))
            ctx.exit(1)

    tokens = list(items) or click.get_text_stream("stdin").read().split()

    if numeric:
        values = _parse_numbers(tokens)
        if any(math.isnan(v) for v in values.values()):
            warn(NAN_WARNING)
        comparator = KeyComparator(values.__getitem__)
    elif ignore_case:
        comparator = CaseInsensitiveComparator()
    else:
        comparator = LocaleComparator()

    logger.info("Sorting %d items (seed=%s)", len(tokens), seed)
    result = sort_items(
        tokens,
        comparator,
        order=SortOrder.DESC if descending else SortOrder.ASC,
        pivot_selector=RandomPivotSelector(seed),
    )
    for item in result:
        click.echo(item)
