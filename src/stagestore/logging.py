"""Logging setup for the STAGESTORE CLI.

Two handlers hang off the root logger:

- a Rich console handler on **stderr**, so ``stagestore cat`` can pipe
  staged bytes through stdout untouched;
- an optional flight recorder: a `MemoryHandler` that keeps recent records
  at DEBUG and writes them to a log file once something goes wrong.

The store adapters only ever call ``logging.getLogger(__name__)``; all
handler wiring lives here and is driven by `stagestore.entrypoints.cli.main`.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "stagestore"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Console level for ``-v``/``-q`` counts: one step each way from WARNING."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Tag records from outside ``stagestore`` with ``[top-level-name]``.

    Sets ``record.prefix`` (empty for project loggers) and never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        top, _, _ = record.name.partition(".")
        record.prefix = "" if top == PROJECT_PREFIX else f"[{top}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    Debug mode lowers the level to DEBUG and shows timestamps, logger names and
    source locations. Otherwise third-party records get a short prefix.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a buffering handler that writes to `path` on demand.

    The file (and its directory) is created now and truncated; records reach it
    when one at `flush_level` arrives, when the buffer is full, or on close if
    `flush_on_close` is set.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    capacity: int = 2000,
    force_flush: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler (and the flight recorder when `log_path` is set).

    The root logger passes everything; each handler applies its own level.
    Entries of `logger_levels` set a floor on individual loggers for both.

    Returns:
        The handlers now attached to the root logger.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path, capacity=capacity, flush_on_close=force_flush
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    handlers: list[logging.Handler],
    root: str | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the one-line run summary at INFO and environment details at DEBUG.

    Console level and flight-recorder settings are read off `handlers`.
    """
    console = next((h for h in handlers if isinstance(h, RichHandler)), None)
    recorder = next((h for h in handlers if isinstance(h, MemoryHandler)), None)

    logger.info(
        "STAGESTORE %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(console.level) if console else "OFF",
        "ON" if recorder else "OFF",
    )
    logger.debug("Python: %s", platform.python_version())
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Executable: %s", sys.executable)
    logger.debug("Click: %s", version("click"))
    logger.debug("Rich: %s", version("rich"))
    logger.debug("Staging root: %s", root or "<unset>")
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
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
