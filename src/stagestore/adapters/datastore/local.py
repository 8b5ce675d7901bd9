"""Local filesystem-based staging data store adapter."""

from __future__ import annotations

import logging
import stat
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, BinaryIO

from stagestore.config import StagingStoreOptions, validate_options
from stagestore.interfaces.datastore import (
    AbstractDataStore,
    BufferOrigin,
    ContentKind,
    ContentStat,
    PathLike,
    normalize_content_name,
)
from stagestore.utils.fs import copy_file, list_files

logger = logging.getLogger(__name__)


class FileDataStore(AbstractDataStore):
    """Staging store that keeps each content item as a file under a root directory.

    Content names map 1:1 onto paths below the root (``root/<name>``). All
    writes hit the disk before the call returns, so `save()` has nothing left
    to do. Filesystem errors are raised unchanged.

    Args:
        options: `StagingStoreOptions`, or a mapping with a
            ``temporary_package_path`` string entry.

    Raises:
        ConfigurationError: If `options` is missing or malformed.
    """

    def __init__(self, options: StagingStoreOptions | Mapping[str, Any]) -> None:
        self._options = validate_options(options)
        self._root = self._options.root
        self._root.mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_path(cls, root: PathLike) -> FileDataStore:
        """Build a store rooted at `root`."""
        return cls(StagingStoreOptions(temporary_package_path=str(root)))

    @property
    def root(self) -> Path:
        """Absolute root directory; fixed for the lifetime of the store."""
        return self._root

    @property
    def temporary_package_path(self) -> str:
        """Root directory as originally configured."""
        return self._options.temporary_package_path

    # --- Core Operations ---

    def stat_content(self, name: str) -> ContentStat:
        path = self._determine_path(name)
        st = path.stat()
        return ContentStat(
            name=path.relative_to(self._root).as_posix(),
            size=st.st_size,
            mtime=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
            kind=_kind_of(st.st_mode),
        )

    def open_read(self, name: str) -> BinaryIO:
        return self._determine_path(name).open("rb")

    def list_contents(self) -> list[str]:
        return list_files(self._root)

    def add_content_from_file(self, name: str, file_path: PathLike) -> None:
        dest = self._determine_path(name)
        src = Path(file_path)

        if src.resolve() == dest.resolve():
            logger.debug("Skipping self-copy of %s", dest)
            return

        copy_file(src, dest, create_basepath=True)

    def add_content_from_buffer(self, name: str, content: bytes | str) -> None:
        dest = self._determine_path(name)
        data = BufferOrigin(content).as_bytes()
        logger.debug("Writing %d bytes to %s", len(data), dest)
        dest.write_bytes(data)

    # --- Internal Helpers ---

    def _determine_path(self, name: str) -> Path:
        """Map a content name onto its file below the root.

        Raises:
            InvalidContentName: If the name is empty, absolute, or escapes the root.
        """
        return self._root / normalize_content_name(name)


def _kind_of(mode: int) -> ContentKind:
    if stat.S_ISREG(mode):
        return "file"
    if stat.S_ISDIR(mode):
        return "directory"
    return "other"
