"""Analyzer settings with typed configuration and fail-fast validation.

Settings are built from explicit keyword arguments only (CLI options or library callers); they are
never read from the environment.

Examples
--------
>>> from i18nscan_common.settings import load_settings
>>> load_settings().func_name
'T'
>>> load_settings(func_name="Tr", debug=True).func_name
'Tr'
"""

from __future__ import annotations

import re
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from i18nscan_common.errors import SettingsError
from i18nscan_common.logging import get_logger

__all__ = [
    "DEFAULT_FUNC_NAME",
    "AnalyzerSettings",
    "load_settings",
]

logger = get_logger(__name__)

DEFAULT_FUNC_NAME: Final[str] = "T"

# Go identifiers: a letter or underscore followed by letters, digits or underscores.
_IDENTIFIER = re.compile(r"[^\W\d]\w*")


class AnalyzerSettings(BaseModel):
    """Configuration surface of the analyzer.

    Attributes
    ----------
    func_name : str
        Name of the translation function whose calls are collected. Blank values fall back to
        ``"T"``.
    debug : bool
        Emit a full syntax tree dump for every analysed file.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    func_name: str = Field(
        default=DEFAULT_FUNC_NAME,
        description="Translation function name matched against call sites",
    )
    debug: bool = Field(default=False, description="Dump every parsed syntax tree")

    @field_validator("func_name", mode="before")
    @classmethod
    def _default_blank_func_name(cls, value: object) -> object:
        if value is None:
            return DEFAULT_FUNC_NAME
        if isinstance(value, str) and not value.strip():
            return DEFAULT_FUNC_NAME
        return value

    @field_validator("func_name")
    @classmethod
    def _require_identifier(cls, value: str) -> str:
        if _IDENTIFIER.fullmatch(value) is None:
            msg = f"'{value}' is not a valid Go identifier"
            raise ValueError(msg)
        return value


def load_settings(**overrides: object) -> AnalyzerSettings:
    """Load :class:`AnalyzerSettings` with optional overrides.

    Parameters
    ----------
    **overrides : object
        Field values (``func_name``, ``debug``).

    Returns
    -------
    AnalyzerSettings
        Validated, immutable settings.

    Raises
    ------
    SettingsError
        If any override fails validation. Each failing field is listed under
        ``validation_errors`` in the error context.
    """
    try:
        return AnalyzerSettings.model_validate(overrides)
    except ValidationError as exc:
        errors: list[dict[str, object]] = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "issue": error["msg"],
            }
            for error in exc.errors()
        ]
        logger.error(
            "Settings validation failed",
            extra={"operation": "load_settings", "error_type": type(exc).__name__},
        )
        msg = f"Configuration validation failed: {exc.error_count()} invalid field(s)"
        raise SettingsError(msg, errors=errors, cause=exc) from exc
