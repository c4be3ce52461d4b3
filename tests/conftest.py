"""Shared pytest fixtures for the i18nscan test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

GoFileFactory = Callable[[str, str], Path]


@pytest.fixture
def write_go(tmp_path: Path) -> GoFileFactory:
    """Return a factory writing Go sources under ``tmp_path``.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    GoFileFactory
        Callable taking a relative file name and source text, returning the written path.
    """

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo ``setup_logging`` calls made by CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
