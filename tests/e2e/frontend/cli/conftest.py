"""Fixtures for end-to-end tests of the ``stagestore`` command.

Provides a test-only ``log-demo`` command that logs at every level, a
CliRunner whose default log path stays inside the isolated filesystem, and
a staging root for the content commands.
"""

import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from stagestore.entrypoints.cli.main import stagestore

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on a project logger and a third-party logger."""
    logger = logging.getLogger("stagestore.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Drop `name` from the group and from any Click-Extra help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on the top-level group for one test."""
    stagestore.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(stagestore, "log-demo")


@pytest.fixture
def runner():
    """CliRunner with the flight-recorder file relative to the working dir."""
    return CliRunner(env={"STAGESTORE_LOG_PATH": "latest.log", "STAGESTORE_ROOT": None})


@pytest.fixture
def fs(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def root(fs) -> Path:
    """Staging root inside the isolated filesystem (not created yet)."""
    return Path("staging").absolute()
