"""PRIMKIT CLI entry point.

Defines the top-level ``primkit`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``primkit scan``: substring search, containment, prefix/suffix tests,
  match counting and difference detection.
- ``primkit sort``: randomized three-way quicksort over arguments or stdin.

Notes
- The CLI version is sourced from `primkit.__version__` and displayed by
  Click-Extra (``--version``).
- Additional commands should be registered here via ``primkit.add_command(...)``.

Examples
    $ primkit --version
    $ primkit scan count "ho ho ho" ho
    $ primkit -v sort --numeric 3 1 2
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from primkit import __version__
from primkit.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .scan import scan as scan_group
from .sort import sort as sort_command

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)

BASE_CONSOLE_LEVEL = logging.WARNING
LEVEL_STEP = 10


def console_level(verbose_count: int, quiet_count: int) -> int:
    """Return the console level after applying ``-v``/``-q`` repetitions.

    Each ``-v`` lowers WARNING by one standard level and each ``-q`` raises
    it; the result is clamped to DEBUG..CRITICAL.
    """
    level = BASE_CONSOLE_LEVEL + LEVEL_STEP * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


HELP = """PRIMKIT command-line interface.

    PRIMKIT bundles stateless helpers over strings and sequences. The CLI
    exposes its string scanner (search, containment, prefix/suffix, match
    counting, difference detection) and its randomized quicksort.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="One more level of console logging per repetition (-v INFO, -vv DEBUG).",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="One less level of console logging per repetition (-q ERROR, -qq CRITICAL).",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Log everything to the console, with source locations and timestamps.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to. Truncated at startup.",
    default=Path(user_log_dir("primkit", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="PRIMKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="PRIMKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of log records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Buffer DEBUG-level records in memory regardless of -v/-q and write "
        "them to --log-path as soon as a WARNING or worse is logged."
    ),
    default=True,
    envvar="PRIMKIT_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Also write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar="PRIMKIT_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Minimum level for one logger as NAME=LEVEL, applied to every handler. "
        "Repeatable, e.g. -L primkit.arrays.sorter=DEBUG to see each sort call; "
        "PRIMKIT_LOGGER_LEVEL takes a comma or space separated list."
    ),
    default=("primkit.arrays.sorter=INFO",),
    envvar="PRIMKIT_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def primkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PRIMKIT command-line interface."""
    level = console_level(verbose_count, quiet_count)

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # Root passes everything through; each handler applies its own level.
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, logger_level in logger_levels.items():
        logging.getLogger(name).setLevel(logger_level)

    log_startup(logger, level=level, handlers=handlers, logger_levels=logger_levels)

    # Closing the handlers flushes the flight recorder when --force-flush is set.
    ctx.call_on_close(logging.shutdown)


primkit.add_command(scan_group)
primkit.add_command(sort_command)
