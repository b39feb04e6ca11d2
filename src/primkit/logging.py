"""Logging helpers used by the PRIMKIT CLI.

This module configures console logging with Rich and an in-memory "flight
recorder" that buffers log records and writes them to disk on flush. It also
provides a filter that tags records from loggers outside PRIMKIT with a
short prefix used by console formatting.
"""

from __future__ import annotations

import logging
import os
import platform
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from primkit import __version__

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "primkit"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)
FLIGHT_RECORDER_FLUSH_LEVEL = logging.WARNING

# Distributions whose versions are logged at startup.
STARTUP_LIBRARIES = ("click", "click-extra", "rich")


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` so console lines show where foreign records come from.

    Records from PRIMKIT loggers get an empty prefix; anything else gets its
    top-level logger name in brackets ("urllib3.pool" -> "[urllib3]"). No
    record is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a RichHandler on stderr for interactive output.

    Debug mode forces DEBUG, shows the source location of each record and
    timestamps it; otherwise third-party records get a short prefix.

    Args:
        level: Minimum level shown (ignored in debug mode).
        debug_mode: Show everything, with paths and timestamps.
        color: Let Rich pick a color system; False disables color, in step
            with click-extra's ``--no-color``.
    """
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(color_system="auto" if color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Build the flight recorder: a `MemoryHandler` in front of a log file.

    Records are held in memory until one at `FLIGHT_RECORDER_FLUSH_LEVEL` or
    above arrives (or `capacity` is reached), then written to `path` in one
    go. With `flush_on_close` whatever is still buffered is written when the
    handler closes.

    Args:
        path: Destination file. Truncated when the handler is created.
        capacity: Records held before the buffer flushes on its own.
        flush_on_close: Write the remaining buffer on close.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=FLIGHT_RECORDER_FLUSH_LEVEL,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def _flight_recorder(handlers: list[logging.Handler]) -> MemoryHandler | None:
    return next((h for h in handlers if isinstance(h, MemoryHandler)), None)


def log_startup(
    logger: logging.Logger,
    *,
    level: int,
    handlers: list[logging.Handler],
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary followed by DEBUG diagnostics.

    The flight recorder settings are read back from the `MemoryHandler`
    among `handlers`, if there is one.

    Args:
        logger: Logger the messages go to.
        level: Console level in effect.
        handlers: Handlers attached to the root logger.
        logger_levels: Per-logger level overrides from ``-L``.
    """
    recorder = _flight_recorder(handlers)
    logger.info(
        "PRIMKIT %s - console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(level),
        "ON" if recorder else "OFF",
    )

    logger.debug("Python: %s", platform.python_version())
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug(
        "Libraries: %s",
        ", ".join(
            f"{name}={_distribution_version(name)}" for name in STARTUP_LIBRARIES
        ),
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if recorder is not None:
        target = recorder.target
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            getattr(target, "baseFilename", "<none>"),
            recorder.capacity,
            recorder.flushOnClose,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
