"""Shared infrastructure for i18nscan: errors, logging, settings and filesystem helpers."""

from __future__ import annotations

from i18nscan_common import errors, fs, logging, problem_details, settings, types

__all__ = [
    "errors",
    "fs",
    "logging",
    "problem_details",
    "settings",
    "types",
]
