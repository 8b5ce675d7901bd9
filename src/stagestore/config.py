"""Configuration utilities for STAGESTORE.

This module centralizes the construction options of the staging store, their
validation, and the environment variables read by the application.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from stagestore.interfaces.datastore import ConfigurationError, DataStoreError

ROOT_ENV_VAR = "STAGESTORE_ROOT"  # pragma: no mutate
ROOT_OPTION = "temporary_package_path"  # pragma: no mutate


class RootPathNotSetError(DataStoreError):
    """Raised when the STAGESTORE_ROOT environment variable is not set."""


@dataclass(frozen=True)
class StagingStoreOptions:
    """Options accepted by `FileDataStore`.

    Attributes:
        temporary_package_path: Directory that holds the staged package contents.
    """

    temporary_package_path: str

    def __post_init__(self) -> None:
        _require_string(self.temporary_package_path, f"options.{ROOT_OPTION}")

    @property
    def root(self) -> Path:
        """Absolute root directory of the store."""
        return Path(self.temporary_package_path).absolute()


def _require_string(value: Any, label: str) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(
            f"{label} must be a string, got {type(value).__name__}"
        )
    if not value:
        raise ConfigurationError(f"{label} must not be empty")


def validate_options(
    options: StagingStoreOptions | Mapping[str, Any] | None,
) -> StagingStoreOptions:
    """Validate raw construction options.

    Accepts either a `StagingStoreOptions` instance or a mapping with a
    ``temporary_package_path`` string entry (extra keys are ignored).

    Args:
        options: The options to validate.

    Returns:
        A validated `StagingStoreOptions`.

    Raises:
        ConfigurationError: If `options` is not a mapping/options object, or the
            root path is missing or not a string.
    """
    if isinstance(options, StagingStoreOptions):
        return options

    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"options must be a mapping, got {type(options).__name__}"
        )

    if ROOT_OPTION not in options:
        raise ConfigurationError(f"options.{ROOT_OPTION} is required")

    return StagingStoreOptions(temporary_package_path=options[ROOT_OPTION])


def get_root_path() -> str:
    """Get the staging root directory from the environment.

    Returns:
        The value of the `STAGESTORE_ROOT` environment variable.

    Raises:
        RootPathNotSetError: If `STAGESTORE_ROOT` is not set.
    """
    if not (root := os.environ.get(ROOT_ENV_VAR)):
        raise RootPathNotSetError
    return root
