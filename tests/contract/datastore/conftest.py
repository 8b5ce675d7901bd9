"""Pytest fixtures for data store contract tests.

Provided fixtures
-----------------
- **store**: Parametrized backend factory that returns a **fresh**
  `AbstractDataStore` per test: ``"file"`` (`FileDataStore` over ``tmp_path``)
  and ``"memory"`` (`MemoryDataStore`).

- **arbitrary_text**: Small deterministic text sample with non-ASCII
  characters, for round-trips.

- **source_file**: A file outside the store with known bytes, for
  `FileOrigin` tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from stagestore.adapters.datastore import FileDataStore, MemoryDataStore

if TYPE_CHECKING:
    from stagestore.interfaces.datastore import AbstractDataStore

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["file", "memory"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> AbstractDataStore:
    """Return a fresh data store for the requested backend."""
    match request.param:
        case "file":
            return FileDataStore.from_path(tmp_path / "staging")
        case "memory":
            return MemoryDataStore()
        case _:
            raise ValueError(f"unknown store type: {request.param}")


@pytest.fixture
def arbitrary_text() -> str:
    """Deterministic sample payload for quick round-trip tests."""
    return "Ünïcödé staging payload: the quick brown fox ✓\n"


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A file outside any store root with known binary content."""
    src = tmp_path / "outside" / "source.bin"
    src.parent.mkdir(parents=True)
    src.write_bytes(b"\x00\x01source bytes\xff")
    return src
