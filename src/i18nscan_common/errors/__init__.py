"""Exception hierarchy and Problem Details support.

Examples
--------
>>> from i18nscan_common.errors import ErrorCode, I18nScanError
>>> try:
...     raise I18nScanError("Operation failed")
... except I18nScanError as e:
...     details = e.to_problem_details(instance="urn:i18nscan:extract")
...     assert details["type"] == "https://i18nscan.dev/problems/runtime-error"
"""

from __future__ import annotations

from i18nscan_common.errors.codes import BASE_TYPE_URI, ErrorCode, get_type_uri
from i18nscan_common.errors.exceptions import (
    ConfigurationError,
    I18nScanError,
    SerializationError,
    SettingsError,
    SourceParseError,
    SourceReadError,
)

__all__ = [
    "BASE_TYPE_URI",
    "ConfigurationError",
    "ErrorCode",
    "I18nScanError",
    "SerializationError",
    "SettingsError",
    "SourceParseError",
    "SourceReadError",
    "get_type_uri",
]
