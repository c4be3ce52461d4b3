"""Tree-sitter powered extraction of i18n message IDs from Go sources."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

__all__ = ["__version__"]

try:
    __version__ = pkg_version("i18nscan")
except PackageNotFoundError:  # pragma: no cover - development fallback
    __version__ = "0.0.0-dev"
