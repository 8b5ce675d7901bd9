"""STAGESTORE CLI entry point.

Defines the top-level ``stagestore`` command (via Click-Extra), configures
logging, and registers the content commands.

Available commands
- ``stagestore add NAME``: stage content from a file, text, or stdin.
- ``stagestore cat NAME`` / ``stat NAME`` / ``ls``: inspect staged content.
- ``stagestore save``: mark the staging session complete.

Notes
- The CLI version is sourced from `stagestore.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ stagestore --root /tmp/pkg add a.txt --text hello
    $ STAGESTORE_ROOT=/tmp/pkg stagestore ls
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from stagestore import __version__
from stagestore.config import ROOT_ENV_VAR
from stagestore.logging import configure_logging, log_startup, verbosity_level

from .content import COMMANDS
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """STAGESTORE command-line interface.

    STAGESTORE keeps the contents of a package in a staging directory until it
    is uploaded. Each named item is a plain file under the staging root, so what
    you add is exactly what gets packaged.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Environment:', fg='blue', bold=True, underline=True)}",
        f"  {ROOT_ENV_VAR}: default staging root for all commands",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--root",
    "root",
    type=click.Path(file_okay=False, path_type=str),
    envvar=ROOT_ENV_VAR,
    show_envvar=True,
    default=None,
    help="Staging root directory (created if missing).",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("stagestore", appauthor=False)) / "latest.log",
    envvar="STAGESTORE_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="STAGESTORE_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records in memory at DEBUG granularity and write "
        "them to --log-path when a WARNING/ERROR occurs, or on exit with "
        "--force-flush. Console verbosity is unchanged."
    ),
    default=True,
    envvar="STAGESTORE_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar="STAGESTORE_FORCE_FLUSH",
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
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L stagestore=INFO) or "
        "via STAGESTORE_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="STAGESTORE_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def stagestore(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    root: str | None,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """STAGESTORE command-line interface."""

    handlers = configure_logging(
        level=verbosity_level(verbose_count, quiet_count),
        debug_mode=debug,
        color=ctx.color is not False,  # None means auto
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        handlers=handlers,
        root=root,
        logger_levels=logger_levels,
    )

    ctx.ensure_object(dict)["root"] = root

    ctx.call_on_close(logging.shutdown)


for _command in COMMANDS:
    stagestore.add_command(_command)
