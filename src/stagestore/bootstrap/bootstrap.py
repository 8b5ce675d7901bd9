"""Bootstrap the staging data store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from stagestore import config
from stagestore.adapters.datastore import FileDataStore, MemoryDataStore
from stagestore.interfaces.datastore import AbstractDataStore

logger = logging.getLogger(__name__)

Backend = Literal["file", "memory"]


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    data_store: AbstractDataStore


def build_data_store(root: str | None, backend: Backend = "file") -> AbstractDataStore:
    """Build a data store for the requested backend.

    Args:
        root: Staging directory; required for the ``"file"`` backend.
        backend: ``"file"`` or ``"memory"``.

    Raises:
        ConfigurationError: If `root` is invalid for the file backend.
        ValueError: If `backend` is unknown.
    """
    match backend:
        case "file":
            return FileDataStore({config.ROOT_OPTION: root})
        case "memory":
            return MemoryDataStore()
        case _:
            raise ValueError(f"unknown data store backend: {backend}")


def bootstrap(root: str | None = None, *, backend: Backend = "file") -> AppContainer:
    """Wire the application, falling back to `STAGESTORE_ROOT` for the root.

    Raises:
        RootPathNotSetError: If no root is given and the environment has none.
    """
    if backend == "file" and root is None:
        root = config.get_root_path()
    data_store = build_data_store(root, backend)
    logger.debug("Bootstrapped %s data store", type(data_store).__name__)
    return AppContainer(data_store=data_store)
