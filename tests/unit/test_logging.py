"""Unit tests for `stagestore.logging`."""

import logging
from logging.handlers import MemoryHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from stagestore.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    config_flight_recorder,
    configure_logging,
    log_startup,
    verbosity_level,
)


def _record(name: str, level: int = logging.INFO, msg: str = "m") -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("stagestore", ""),
        ("stagestore.adapters.datastore.local", ""),
        ("urllib3.connectionpool", "[urllib3]"),
        ("markdown_it", "[markdown_it]"),
    ],
)
def test_prefix_filter(name: str, prefix: str):
    """Third-party records get a bracketed prefix; project records get none."""
    record = _record(name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix


def test_console_handler_default():
    """Outside debug mode the handler keeps its level and adds the prefix filter."""
    handler = config_console_handler(level=logging.ERROR)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.ERROR
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)
    assert handler.console.stderr


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True, color=False)
    assert handler.level == logging.DEBUG
    assert not handler.filters
    assert handler.console.color_system is None


def test_flight_recorder_flushes_at_warning(tmp_path: Path):
    """Records are buffered until one reaches the flush level."""
    path = tmp_path / "logs" / "fr.log"
    handler = config_flight_recorder(path, capacity=10)
    target = handler.target
    try:
        assert isinstance(handler, MemoryHandler)
        assert path.parent.is_dir()

        handler.handle(_record("stagestore.x", logging.DEBUG, "buffered"))
        handler.target.flush()
        assert path.read_text(encoding="utf-8") == ""

        handler.handle(_record("stagestore.x", logging.WARNING, "trigger"))
        content = path.read_text(encoding="utf-8")
        assert "DEBUG stagestore.x:1: buffered" in content
        assert "WARNING stagestore.x:1: trigger" in content
    finally:
        handler.close()
        target.close()


def test_flight_recorder_flush_on_close(tmp_path: Path):
    """With flush_on_close, buffered records are written when closed."""
    path = tmp_path / "fr.log"
    handler = config_flight_recorder(path, flush_on_close=True)
    target = handler.target
    handler.handle(_record("stagestore.x", logging.DEBUG, "late"))
    handler.close()
    target.close()
    assert "late" in path.read_text(encoding="utf-8")


@pytest.fixture
def restore_root_logger():
    """Detach the handlers installed by `configure_logging` after the test."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler, (RichHandler, MemoryHandler)):
            target = getattr(handler, "target", None)
            root.removeHandler(handler)
            handler.close()
            if target is not None:
                target.close()
    root.setLevel(level)


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 4, logging.CRITICAL),
        (1, 1, logging.WARNING),
    ],
)
def test_verbosity_level(verbose: int, quiet: int, expected: int):
    """Each -v/-q moves one level from WARNING, clamped to DEBUG..CRITICAL."""
    assert verbosity_level(verbose, quiet) == expected


def test_configure_logging_console_only(restore_root_logger):
    """Without a log path only the console handler is installed."""
    handlers = configure_logging(level=logging.ERROR)
    root = logging.getLogger()
    assert [type(h) for h in handlers] == [RichHandler]
    assert root.handlers == handlers
    assert root.level == logging.DEBUG


def test_configure_logging_with_recorder(restore_root_logger, tmp_path: Path):
    """A log path adds the flight recorder; per-logger floors are applied."""
    handlers = configure_logging(
        level=logging.WARNING,
        log_path=tmp_path / "run.log",
        capacity=50,
        force_flush=True,
        logger_levels={"stagestore.test_floor": logging.ERROR},
    )
    recorder = handlers[1]
    assert isinstance(recorder, MemoryHandler)
    assert recorder.capacity == 50
    assert recorder.flushOnClose is True
    assert logging.getLogger("stagestore.test_floor").level == logging.ERROR
    logging.getLogger("stagestore.test_floor").setLevel(logging.NOTSET)


def test_log_startup(caplog: pytest.LogCaptureFixture, tmp_path: Path):
    """The run summary is read off the handlers; details follow at DEBUG."""
    console = config_console_handler(level=logging.INFO)
    recorder = config_flight_recorder(tmp_path / "fr.log", capacity=7)
    target = recorder.target
    logger = logging.getLogger("stagestore.test_startup")
    try:
        with caplog.at_level(logging.DEBUG, logger="stagestore.test_startup"):
            log_startup(
                logger,
                app_version="1.2.3",
                handlers=[console, recorder],
                root="/srv/pkg",
                logger_levels={"markdown_it": logging.WARNING},
            )
    finally:
        recorder.close()
        target.close()

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "STAGESTORE 1.2.3: console=INFO, flight-recorder=ON"
    assert caplog.records[0].levelno == logging.INFO
    assert "Staging root: /srv/pkg" in messages
    assert "Handlers: ['RichHandler', 'MemoryHandler']" in messages
    assert (
        f"Flight recorder: path={tmp_path / 'fr.log'}, capacity=7, flush_on_close=False"
        in messages
    )
    assert "Per-logger overrides: {'markdown_it': 'WARNING'}" in messages


def test_log_startup_without_handlers(caplog: pytest.LogCaptureFixture):
    """No console and no recorder are reported as OFF; empty overrides as <none>."""
    logger = logging.getLogger("stagestore.test_startup")
    with caplog.at_level(logging.DEBUG, logger="stagestore.test_startup"):
        log_startup(
            logger, app_version="1.2.3", handlers=[], root=None, logger_levels={}
        )
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "STAGESTORE 1.2.3: console=OFF, flight-recorder=OFF"
    assert "Staging root: <unset>" in messages
    assert "Per-logger overrides: <none>" in messages
    assert not any(m.startswith("Flight recorder:") for m in messages)
