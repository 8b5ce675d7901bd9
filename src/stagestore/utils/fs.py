"""Filesystem helpers used by the file-backed data store."""

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


def list_files(root: PathLike) -> list[str]:
    """Recursively list regular files under `root`.

    Directories are descended into but not reported. Symlinks to files are
    reported; symlinked directories are not followed.

    Args:
        root: Directory to walk.

    Returns:
        list[str]: Paths relative to `root`, with POSIX separators, in
        filesystem order.

    Raises:
        FileNotFoundError: If `root` does not exist.
        NotADirectoryError: If `root` is not a directory.
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(root_path)
    if not root_path.is_dir():
        raise NotADirectoryError(root_path)

    def _raise(err: OSError) -> None:
        raise err

    names: list[str] = []
    for dirpath, _dirnames, filenames in os.walk(root_path, onerror=_raise):
        for filename in filenames:
            full = Path(dirpath) / filename
            if full.is_file():
                names.append(full.relative_to(root_path).as_posix())
    return names


def copy_file(src: PathLike, dst: PathLike, *, create_basepath: bool = True) -> Path:
    """Copy `src` to `dst`, content and permission bits.

    Args:
        src: Existing file to copy.
        dst: Destination file path; an existing file is overwritten.
        create_basepath: Create missing parent directories of `dst` first.

    Returns:
        Path: The destination path.

    Raises:
        FileNotFoundError: If `src` does not exist, or the parent of `dst` is
            missing and `create_basepath` is False.
        IsADirectoryError: If `src` is a directory.
        OSError: Underlying I/O errors.
    """
    src_path, dst_path = Path(src), Path(dst)

    if src_path.is_dir():
        raise IsADirectoryError(src_path)

    if create_basepath:
        dst_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Copying %s -> %s", src_path, dst_path)
    shutil.copy2(src_path, dst_path)
    return dst_path
