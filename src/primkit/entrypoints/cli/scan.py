"""PRIMKIT scan CLI: string scanning from the command line.

Thin wrappers over `primkit.strings.scanner`. Results go to **stdout** as a
single line: an index (``-1`` when not found), a count, or ``true`` /
``false``. Predicates always exit with status 0; the answer is in the
output, not the exit code.

Examples
    $ primkit scan index-of "Lorem ipsum" ipsum
    6
    $ primkit scan count "Lorem ipsum dolor sit" or
    2
    $ primkit scan contains --ignore-case "Lorem" LOR
    true
"""

import logging

import click
import click_extra as clickx

from primkit.strings import scanner, transforms

logger = logging.getLogger(__name__)

IGNORE_CASE_HELP = "Fold both operands to lower case before comparing."


def _echo_bool(value: bool) -> None:
    click.echo("true" if value else "false")


@click.group(cls=clickx.ExtraGroup)
def scan() -> None:
    """String scanning commands."""


@scan.command(name="index-of")
@click.argument("haystack")
@click.argument("needle")
@click.option("--last", is_flag=True, help="Report the last occurrence instead.")
@click.option("--ignore-case", "-i", is_flag=True, help=IGNORE_CASE_HELP)
def index_of(haystack: str, needle: str, last: bool, ignore_case: bool) -> None:
    """Print the index of NEEDLE in HAYSTACK, or -1."""
    match (last, ignore_case):
        case (False, False):
            idx = scanner.index_of(haystack, needle)
        case (False, True):
            idx = scanner.index_of_ignore_case(haystack, needle)
        case (True, False):
            idx = scanner.last_index_of(haystack, needle)
        case (True, True):
            idx = scanner.last_index_of_ignore_case(haystack, needle)
    logger.debug("index-of %r in %r -> %d", needle, haystack, idx)
    click.echo(idx)


@scan.command()
@click.argument("haystack")
@click.argument("needle")
@click.option("--ignore-case", "-i", is_flag=True, help=IGNORE_CASE_HELP)
def contains(haystack: str, needle: str, ignore_case: bool) -> None:
    """Print whether HAYSTACK contains NEEDLE."""
    _echo_bool(scanner.contains(haystack, needle, ignore_case=ignore_case))


@scan.command(name="starts-with")
@click.argument("text")
@click.argument("prefix")
@click.option("--ignore-case", "-i", is_flag=True, help=IGNORE_CASE_HELP)
def starts_with(text: str, prefix: str, ignore_case: bool) -> None:
    """Print whether TEXT starts with PREFIX."""
    _echo_bool(scanner.starts_with(text, prefix, ignore_case=ignore_case))


@scan.command(name="ends-with")
@click.argument("text")
@click.argument("suffix")
@click.option("--ignore-case", "-i", is_flag=True, help=IGNORE_CASE_HELP)
def ends_with(text: str, suffix: str, ignore_case: bool) -> None:
    """Print whether TEXT ends with SUFFIX."""
    _echo_bool(scanner.ends_with(text, suffix, ignore_case=ignore_case))


@scan.command()
@click.argument("haystack")
@click.argument("needle")
def count(haystack: str, needle: str) -> None:
    """Print the number of non-overlapping occurrences of NEEDLE."""
    click.echo(scanner.count_matches(haystack, needle))


@scan.command()
@click.argument("a")
@click.argument("b")
@click.option(
    "--text",
    "show_text",
    is_flag=True,
    help="Print the differing remainder of the longer string instead of the index.",
)
def diff(a: str, b: str, show_text: bool) -> None:
    """Print the first index at which A and B differ, or -1."""
    if show_text:
        click.echo(transforms.difference(a, b))
    else:
        click.echo(scanner.index_of_difference(a, b))
