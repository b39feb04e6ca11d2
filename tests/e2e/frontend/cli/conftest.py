"""Fixtures for end-to-end tests of the `primkit` CLI.

Registers a test-only `log-demo` command that logs one line per level on a
PRIMKIT logger and on a third-party logger, so console filtering and the
flight recorder can be checked without depending on what real commands log.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from primkit.entrypoints.cli.main import primkit

# pylint: disable=redefined-outer-name

DEMO_LEVELS = ("debug", "info", "warning", "error", "critical")


@click.command()
def log_demo():
    """Log every level on 'primkit.demo', then third-party lines, then a DEBUG tail.

    The trailing DEBUG record is emitted after the WARNING that flushes the
    flight recorder, so it only reaches disk when the buffer is flushed on
    close.
    """
    own = logging.getLogger("primkit.demo")
    for name in DEMO_LEVELS:
        getattr(own, name)("demo %s message", name)
    third_party = logging.getLogger("some.thirdparty")
    for name in DEMO_LEVELS[:3]:
        getattr(third_party, name)("third-party %s message", name)
    own.debug("demo trailing debug message")


def _unregister(group: click.Group, name: str) -> None:
    group.commands.pop(name, None)
    # click-extra keeps its own per-section registries
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the `primkit` group for one test."""
    primkit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(primkit, "log-demo")


@pytest.fixture
def runner():
    """Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a throwaway working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def command_runner():
    """CliRunner for command tests; the flight recorder is switched off."""
    return CliRunner(env={"PRIMKIT_FLIGHT_RECORDER": "0"})
