"""Expand command-line paths into an ordered list of Go source files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

from i18nscan_common.errors import SourceReadError

__all__ = ["EXCLUDED_DIRS", "SOURCE_SUFFIXES", "iter_source_files"]

SOURCE_SUFFIXES: Final[frozenset[str]] = frozenset({".go"})

EXCLUDED_DIRS: Final[frozenset[str]] = frozenset(
    {
        ".git",
        "vendor",
        "testdata",
        "node_modules",
    }
)


def _is_excluded(path: Path, root: Path) -> bool:
    relative = path.relative_to(root)
    return any(part in EXCLUDED_DIRS for part in relative.parts[:-1])


def _expand_directory(root: Path) -> list[Path]:
    return sorted(
        candidate
        for candidate in root.rglob("*")
        if candidate.suffix in SOURCE_SUFFIXES
        and candidate.is_file()
        and not _is_excluded(candidate, root)
    )


def iter_source_files(paths: Iterable[str | Path]) -> list[Path]:
    """Resolve files and directories into the files to analyse.

    Files are passed through as given, whatever their suffix. Directories are searched
    recursively for ``.go`` files in sorted order, skipping vendored and VCS directories. A path
    listed twice is analysed once, at its first position.

    Parameters
    ----------
    paths : Iterable[str | Path]
        Files and directories, in the order analysis should follow.

    Returns
    -------
    list[Path]
        Files in analysis order.

    Raises
    ------
    SourceReadError
        If a path does not exist.
    """
    ordered: list[Path] = []
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            candidates = _expand_directory(path)
        elif path.exists():
            candidates = [path]
        else:
            msg = f"Source path not found: {path}"
            raise SourceReadError(msg, path=path, missing=True)
        for candidate in candidates:
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            ordered.append(candidate)
    return ordered
