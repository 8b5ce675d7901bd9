"""Global pytest fixtures and default markers for STAGESTORE."""

from __future__ import annotations

from pathlib import Path

import pytest

from stagestore.adapters.datastore import FileDataStore

# pylint: disable=unused-argument,redefined-outer-name

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "contract", "integration", "functional", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each item with the name of its top-level test folder.

    ``tests/unit/...`` gets ``unit``, ``tests/contract/...`` gets ``contract``,
    and so on. Explicit markers of the same name are left alone.
    """
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        if folder not in FOLDER_MARKERS:
            continue
        if not any(marker.name == folder for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture
def staging_root(tmp_path: Path) -> Path:
    """Return a not-yet-created staging root under the test's tmp dir."""
    return tmp_path / "pkg"


@pytest.fixture
def file_store(staging_root: Path) -> FileDataStore:
    """Return a `FileDataStore` rooted at `staging_root`."""
    return FileDataStore({"temporary_package_path": str(staging_root)})
