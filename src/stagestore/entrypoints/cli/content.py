"""STAGESTORE content commands.

Thin wrappers over the staging data store: ``add``, ``cat``, ``stat``, ``ls``
and ``save``. The store is built on first use from the group's ``--root``
option (or ``STAGESTORE_ROOT``).

Behavior
- Staged bytes (``cat``) and listings (``ls``, ``stat --json``) go to
  **stdout**; status lines go to **stderr**.
- Store and filesystem errors become ``ClickException`` (exit code 1) with
  the underlying message; nothing is retried.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from stagestore.bootstrap import bootstrap
from stagestore.config import ROOT_ENV_VAR, RootPathNotSetError
from stagestore.interfaces.datastore import (
    AbstractDataStore,
    BufferOrigin,
    ContentOrigin,
    DataStoreError,
    FileOrigin,
)

from .helpers import success, warn

logger = logging.getLogger(__name__)

MISSING_ROOT_MSG = (
    "No staging root given.\n\n"
    f"Pass --root PATH or set {ROOT_ENV_VAR}, e.g.:\n"
    f"  export {ROOT_ENV_VAR}=/tmp/pkg"
)


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except RootPathNotSetError as e:
        raise click.ClickException(MISSING_ROOT_MSG) from e
    except FileNotFoundError as e:
        raise click.ClickException(f"Not found: {e.filename or e}") from e
    except (DataStoreError, OSError, UnicodeDecodeError) as e:
        raise click.ClickException(str(e)) from e


def _store(ctx: click.Context) -> AbstractDataStore:
    obj = ctx.ensure_object(dict)
    if "store" not in obj:
        with _reported_errors():
            obj["store"] = bootstrap(obj.get("root")).data_store
    return obj["store"]


@click.command()
@click.argument("name")
@click.option(
    "--from-file",
    "from_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Copy an existing file into the store.",
)
@click.option("--text", "text", help="Store TEXT (UTF-8) as the content.")
@click.pass_context
def add(ctx: click.Context, name: str, from_file: Path | None, text: str | None) -> None:
    """Stage NAME from a file, from --text, or from stdin."""
    if from_file is not None and text is not None:
        raise click.UsageError("--from-file and --text are mutually exclusive.")

    origin: ContentOrigin
    if from_file is not None:
        origin = FileOrigin(from_file)
    elif text is not None:
        origin = BufferOrigin(text)
    else:
        origin = BufferOrigin(click.get_binary_stream("stdin").read())

    logger.debug("Adding %s from %s", name, type(origin).__name__)
    store = _store(ctx)
    with _reported_errors():
        if store.exists(name):
            warn(f"{name!r} already staged; overwriting.")
        store.add_content(name, origin)
        size = store.stat_content(name).size
    success(f"Staged {name!r} ({size} bytes).")


@click.command()
@click.argument("name")
@click.option(
    "--encoding",
    default=None,
    help="Decode as text with this encoding instead of writing raw bytes.",
)
@click.pass_context
def cat(ctx: click.Context, name: str, encoding: str | None) -> None:
    """Write the content of NAME to stdout."""
    store = _store(ctx)
    with _reported_errors():
        if encoding is None:
            click.echo(store.read_bytes(name), nl=False)
        else:
            click.echo(store.read_content(name, encoding=encoding), nl=False)


@click.command(name="stat")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object.")
@click.pass_context
def stat_(ctx: click.Context, name: str, as_json: bool) -> None:
    """Show size, modification time and kind of NAME."""
    store = _store(ctx)
    with _reported_errors():
        info = store.stat_content(name)
    if as_json:
        click.echo(
            json.dumps(
                {
                    "name": info.name,
                    "size": info.size,
                    "mtime": info.mtime.isoformat(),
                    "kind": info.kind,
                }
            )
        )
    else:
        click.echo(f"{info.name}\t{info.size}\t{info.mtime.isoformat()}\t{info.kind}")


@click.command(name="ls")
@click.pass_context
def ls(ctx: click.Context) -> None:
    """List staged content names, sorted."""
    store = _store(ctx)
    with _reported_errors():
        names = store.list_contents()
    for name in sorted(names):
        click.echo(name)


@click.command()
@click.pass_context
def save(ctx: click.Context) -> None:
    """Mark the staging session complete."""
    store = _store(ctx)
    with _reported_errors():
        store.save()
    success("Staging store saved.")


COMMANDS = (add, cat, stat_, ls, save)
