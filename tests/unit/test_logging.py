"""Unit tests for primkit.logging."""

import logging

from rich.logging import RichHandler

from primkit import __version__
from primkit.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    log_startup,
)


def _record(name: str) -> logging.LogRecord:
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


def test_prefix_filter_tags_third_party_records():
    """Records from other packages get a bracketed prefix."""
    record = _record("urllib3.connectionpool")
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == "[urllib3]"  # type: ignore[attr-defined]


def test_prefix_filter_leaves_project_records_bare():
    """Records from primkit loggers get an empty prefix."""
    record = _record("primkit.arrays.sorter")
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == ""  # type: ignore[attr-defined]


def test_console_handler_levels_and_filters():
    """Normal mode keeps the level and adds the prefix filter; debug mode does not."""
    handler = config_console_handler(level=logging.WARNING)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.WARNING
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)

    debug_handler = config_console_handler(level=logging.WARNING, debug_mode=True)
    assert debug_handler.level == logging.DEBUG
    assert not debug_handler.filters


def test_flight_recorder_flushes_on_warning(tmp_path):
    """Buffered records reach the file once a WARNING is emitted."""
    path = tmp_path / "recorder.log"
    handler = config_flight_recorder(path, capacity=100)
    logger = logging.getLogger("primkit.tests.recorder")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("buffered debug line")
        assert path.read_text(encoding="utf-8") == ""
        logger.warning("trigger")
        content = path.read_text(encoding="utf-8")
        assert "buffered debug line" in content
        assert "trigger" in content
    finally:
        logger.removeHandler(handler)
        target = handler.target
        handler.close()
        target.close()  # type: ignore[union-attr]


def test_log_startup_reads_recorder_settings_from_handler(tmp_path, caplog):
    """Recorder path, capacity and flush mode come from the handler itself."""
    recorder = config_flight_recorder(
        tmp_path / "startup.log", capacity=64, flush_on_close=True
    )
    logger = logging.getLogger("primkit.tests.startup")
    try:
        with caplog.at_level(logging.DEBUG, logger="primkit.tests.startup"):
            log_startup(
                logger,
                level=logging.INFO,
                handlers=[recorder],
                logger_levels={"primkit.arrays.sorter": logging.INFO},
            )
    finally:
        target = recorder.target
        recorder.close()
        target.close()  # type: ignore[union-attr]

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0] == f"PRIMKIT {__version__} - console=INFO, flight-recorder=ON"
    assert any(m.startswith("Libraries: click=") for m in messages)
    assert (
        f"Flight recorder: path={tmp_path / 'startup.log'}, capacity=64, "
        "flush_on_close=True"
    ) in messages
    assert "Per-logger overrides: {'primkit.arrays.sorter': 'INFO'}" in messages


def test_log_startup_without_recorder(caplog):
    logger = logging.getLogger("primkit.tests.startup")
    with caplog.at_level(logging.DEBUG, logger="primkit.tests.startup"):
        log_startup(logger, level=logging.WARNING, handlers=[], logger_levels={})

    messages = [record.getMessage() for record in caplog.records]
    assert messages[0].endswith("console=WARNING, flight-recorder=OFF")
    assert not any(m.startswith("Flight recorder:") for m in messages)
    assert "Per-logger overrides: {}" in messages
