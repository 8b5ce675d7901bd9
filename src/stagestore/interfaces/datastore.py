"""Staging data store interface.

This module defines a minimal, backend-agnostic interface for staging named
content items before a package is uploaded. Items are addressed **only** by a
relative content name (e.g. ``"bin/app.dll"``); there is no digest, version or
alias semantics here.

Exports
-------
Exceptions
    - DataStoreError:     Base class for store errors.
    - ConfigurationError: Invalid construction options.
    - InvalidContentName: Name is empty, absolute, or escapes the store root.

Data types
    - ContentStat:  Size, modification time and kind of a stored item.
    - FileOrigin:   New content comes from an existing file on disk.
    - BufferOrigin: New content comes from an in-memory buffer.

Abstract interfaces
    - AbstractDataStore: Backend primitives (`stat_content`, `open_read`,
      `list_contents`, `add_content_from_file`, `add_content_from_buffer`)
      plus the dispatching `add_content()` and read helpers.

Error contract
--------------
Filesystem failures are **not** wrapped. A missing item raises
`FileNotFoundError`, a permission problem raises `PermissionError`, and so
on; callers decide retry/abort policy. Only misuse of the store itself
(bad options, bad names) raises a `DataStoreError`.

Typical usage
-------------
    store.add_content("a.txt", BufferOrigin("hello"))
    store.add_content("lib/b.dll", FileOrigin("build/b.dll"))
    assert store.read_content("a.txt") == "hello"
    sorted(store.list_contents())  # ["a.txt", "lib/b.dll"]
"""

import abc
import os
import posixpath
from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePosixPath
from typing import BinaryIO, Literal

PathLike = str | os.PathLike[str]
ContentKind = Literal["file", "directory", "other"]


class DataStoreError(Exception):
    """Base class for all data-store errors."""


class ConfigurationError(DataStoreError, ValueError):
    """Construction options are missing or have the wrong type."""


class InvalidContentName(DataStoreError, ValueError):
    """A content name is empty, absolute, or resolves outside the store root."""


@dataclass(frozen=True)
class ContentStat:
    """Metadata about a stored content item.

    Attributes:
        name: Normalized content name (POSIX separators).
        size: Size in bytes.
        mtime: Last modification time, tz-aware UTC.
        kind: ``"file"``, ``"directory"`` or ``"other"``.
    """

    name: str
    size: int
    mtime: datetime
    kind: ContentKind = "file"

    @property
    def is_file(self) -> bool:
        """Return True if the item is a regular file."""
        return self.kind == "file"


@dataclass(frozen=True)
class FileOrigin:
    """New content is copied from an existing file."""

    path: PathLike


@dataclass(frozen=True)
class BufferOrigin:
    """New content is written from memory; ``str`` is encoded as UTF-8."""

    content: bytes | str

    def __post_init__(self) -> None:
        if not isinstance(self.content, (bytes, bytearray, memoryview, str)):
            raise TypeError(
                f"buffer content must be bytes or str, got {type(self.content).__name__}"
            )

    def as_bytes(self) -> bytes:
        """Return the buffer as bytes."""
        if isinstance(self.content, str):
            return self.content.encode("utf-8")
        return bytes(self.content)


ContentOrigin = FileOrigin | BufferOrigin


def normalize_content_name(name: str) -> str:
    """Validate a content name and return its normalized POSIX form.

    Backslashes are treated as separators and ``.``/``..`` segments are
    collapsed lexically. Drive prefixes (``C:``) count as absolute only where
    the host has drives. No filesystem access is performed.

    Args:
        name: Relative name of a content item, e.g. ``"bin/app.dll"``.

    Returns:
        The normalized name, e.g. ``"a/./b.txt"`` -> ``"a/b.txt"``.

    Raises:
        InvalidContentName: If the name is empty, absolute, or escapes the root.
    """
    if not isinstance(name, str) or not name:
        raise InvalidContentName(f"Content name must be a non-empty string: {name!r}")

    posix = name.replace("\\", "/")
    if PurePosixPath(posix).is_absolute() or os.path.splitdrive(name)[0]:
        raise InvalidContentName(f"Content name must be relative: {name!r}")

    normalized = posixpath.normpath(posix)
    if normalized == "." or normalized == ".." or normalized.startswith("../"):
        raise InvalidContentName(f"Content name escapes the store root: {name!r}")

    return normalized


class AbstractDataStore(abc.ABC):
    """Named staging store. Identity is the content name."""

    # --- Core Operations ---

    @abc.abstractmethod
    def stat_content(self, name: str) -> ContentStat:
        """Return metadata for the item called `name`.

        Args:
            name: Content name relative to the store root.

        Returns:
            ContentStat: Size, modification time and kind.

        Raises:
            FileNotFoundError: If nothing is stored under `name`.
            InvalidContentName: If `name` is not a valid content name.
            OSError: Underlying I/O errors.
        """

    @abc.abstractmethod
    def open_read(self, name: str) -> BinaryIO:
        """Open the item called `name` for binary reading.

        The **caller** must close the returned stream.

        Raises:
            FileNotFoundError: If nothing is stored under `name`.
            OSError: Underlying I/O errors.
        """

    @abc.abstractmethod
    def list_contents(self) -> list[str]:
        """Return the names of all stored items.

        Order is backend-dependent and not guaranteed to be sorted.

        Raises:
            OSError: Underlying I/O errors (e.g. the root was removed).
        """

    @abc.abstractmethod
    def add_content_from_file(self, name: str, file_path: PathLike) -> None:
        """Stage the file at `file_path` under `name`.

        Missing parent directories of the destination are created. If
        `file_path` already resolves to the destination, nothing is copied.

        Raises:
            FileNotFoundError: If `file_path` does not exist.
            OSError: Underlying I/O errors.
        """

    @abc.abstractmethod
    def add_content_from_buffer(self, name: str, content: bytes | str) -> None:
        """Write `content` verbatim under `name`, replacing any existing item.

        ``str`` content is encoded as UTF-8.

        Raises:
            OSError: Underlying I/O errors.
        """

    # --- Convenience methods (non-abstract) ---

    def add_content(self, name: str, origin: ContentOrigin) -> None:
        """Stage new content under `name`, dispatching on the origin variant.

        Args:
            name: Content name relative to the store root.
            origin: `FileOrigin` to copy an existing file, `BufferOrigin` to
                write bytes/text from memory.

        Raises:
            TypeError: If `origin` is neither variant.
        """
        match origin:
            case FileOrigin(path=path):
                self.add_content_from_file(name, path)
            case BufferOrigin():
                self.add_content_from_buffer(name, origin.content)
            case _:
                raise TypeError(
                    f"origin must be FileOrigin or BufferOrigin, got {type(origin).__name__}"
                )

    def read_bytes(self, name: str) -> bytes:
        """Read the entire item into memory."""
        with self.open_read(name) as fp:
            return fp.read()

    def read_content(self, name: str, encoding: str = "utf-8") -> str:
        """Read the entire item and decode it as text.

        Raises:
            FileNotFoundError: If nothing is stored under `name`.
            UnicodeDecodeError: If the bytes are not valid in `encoding`.
        """
        return self.read_bytes(name).decode(encoding)

    def exists(self, name: str) -> bool:
        """Return ``True`` if an item is stored under `name`."""
        try:
            self.stat_content(name)
        except (FileNotFoundError, NotADirectoryError):
            return False

        return True

    def save(self) -> None:
        """Mark the staging session complete.

        Every write is persisted when it happens, so the default is a no-op.
        """
