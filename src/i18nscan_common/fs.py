"""Filesystem utilities using pathlib for safe, typed operations.

Examples
--------
>>> from pathlib import Path
>>> from i18nscan_common.fs import read_bytes, write_bytes
>>> write_bytes(Path("/tmp/catalog.json"), b"[]")
>>> read_bytes(Path("/tmp/catalog.json"))
b'[]'
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from i18nscan_common.logging import get_logger

__all__ = ["DEFAULT_FILE_MODE", "read_bytes", "write_bytes"]

logger = get_logger(__name__)

DEFAULT_FILE_MODE: Final[int] = 0o644


def read_bytes(path: Path) -> bytes:
    """Read a file's raw contents.

    Parameters
    ----------
    path : Path
        File path to read.

    Returns
    -------
    bytes
        File contents.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    IsADirectoryError
        If ``path`` is a directory.
    PermissionError
        If the file is not readable.
    """
    return path.read_bytes()


def write_bytes(path: Path, data: bytes, *, mode: int = DEFAULT_FILE_MODE) -> None:
    """Write ``data`` to ``path`` with create-or-truncate semantics.

    New files are created with permission bits ``mode`` (subject to the process umask); existing
    files are truncated in place and keep their permissions. There is no temporary file and no
    rename, so a failed write may leave a truncated file behind.

    Parameters
    ----------
    path : Path
        Destination file. The parent directory must already exist.
    data : bytes
        Content to write.
    mode : int, optional
        Permission bits for newly created files. Defaults to ``0o644``.

    Raises
    ------
    OSError
        If the file cannot be opened or written.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    logger.debug(
        "Wrote file",
        extra={"operation": "write_bytes", "path": str(path), "size_bytes": len(data)},
    )
