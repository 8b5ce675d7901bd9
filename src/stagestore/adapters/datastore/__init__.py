"""Staging data store backends.

- `FileDataStore`: items are files under a root directory (production).
- `MemoryDataStore`: items live in a dict (tests and dry runs).
"""

from .local import FileDataStore
from .memory import MemoryDataStore

__all__ = ["FileDataStore", "MemoryDataStore"]
