"""In-memory staging data store backend.

This module provides a tiny, dependency-free data store meant for **tests**,
dry runs and local development. Items are kept entirely in RAM, keyed by
their normalized content name. There is no persistence across process
restarts.

Key behaviors
-------------
- **Same contract as the file store**: missing names raise
  `FileNotFoundError`, invalid names raise `InvalidContentName`, buffer
  writes overwrite, and adding a file copies its bytes at call time.
- **Flat namespace**: ``"lib/a.dll"`` is just a key; there are no
  directories, so buffer writes never fail for a missing parent.
- **Thread-safety**: All reads and writes happen under an `RLock`. Writers
  to the same name race; the last one wins.

Typical usage
-------------
    store = MemoryDataStore()
    store.add_content("a.txt", BufferOrigin("hello"))
    store.read_content("a.txt")  # "hello"
    store.stat_content("a.txt")  # ContentStat(name="a.txt", size=5, ...)
"""

from __future__ import annotations

import io
import logging
import threading
from datetime import datetime, timezone
from pathlib import Path

from stagestore.interfaces.datastore import (
    AbstractDataStore,
    BufferOrigin,
    ContentStat,
    PathLike,
    normalize_content_name,
)

__all__ = ["MemoryDataStore"]

logger = logging.getLogger(__name__)


class MemoryDataStore(AbstractDataStore):
    """In-memory staging store.

    Stat reports ``kind="file"`` and the UTC time of the last write.
    `open_read()` returns a fresh `BytesIO` per call that the **caller**
    must close.
    """

    def __init__(self) -> None:
        self._items: dict[str, tuple[bytes, datetime]] = {}
        self._lock = threading.RLock()

    # ---- AbstractDataStore ----

    def stat_content(self, name: str) -> ContentStat:
        key = normalize_content_name(name)
        with self._lock:
            try:
                data, mtime = self._items[key]
            except KeyError as exc:
                raise FileNotFoundError(key) from exc
        return ContentStat(name=key, size=len(data), mtime=mtime)

    def open_read(self, name: str) -> io.BytesIO:
        key = normalize_content_name(name)
        with self._lock:
            try:
                data, _ = self._items[key]
            except KeyError as exc:
                raise FileNotFoundError(key) from exc
        return io.BytesIO(data)

    def list_contents(self) -> list[str]:
        with self._lock:
            return list(self._items)

    def add_content_from_file(self, name: str, file_path: PathLike) -> None:
        src = Path(file_path)
        if src.is_dir():
            raise IsADirectoryError(src)
        self._install(normalize_content_name(name), src.read_bytes())

    def add_content_from_buffer(self, name: str, content: bytes | str) -> None:
        self._install(normalize_content_name(name), BufferOrigin(content).as_bytes())

    # ---- Internal Helpers ----

    def _install(self, key: str, data: bytes) -> None:
        logger.debug("Storing %d bytes as %s", len(data), key)
        with self._lock:
            self._items[key] = (data, datetime.now(timezone.utc))
