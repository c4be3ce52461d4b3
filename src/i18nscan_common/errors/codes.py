"""Error code registry and type URIs for Problem Details.

Codes and URIs are stable across releases so that callers (and anything parsing the CLI's error
output) can branch on them.

Examples
--------
>>> from i18nscan_common.errors.codes import ErrorCode, get_type_uri
>>> get_type_uri(ErrorCode.SOURCE_PARSE_ERROR)
'https://i18nscan.dev/problems/source-parse-error'
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

__all__ = [
    "BASE_TYPE_URI",
    "ErrorCode",
    "get_type_uri",
]


BASE_TYPE_URI: Final[str] = "https://i18nscan.dev/problems"


class ErrorCode(StrEnum):
    """Stable error codes for i18nscan exceptions.

    Attributes
    ----------
    SOURCE_PARSE_ERROR
        A source file could not be parsed into a syntax tree.
    SOURCE_READ_ERROR
        A source path is missing or unreadable.
    CONFIGURATION_ERROR
        Analyzer configuration is invalid.
    RUNTIME_ERROR
        Unclassified runtime failure.
    SERIALIZATION_ERROR
        The catalog could not be encoded or written.

    Examples
    --------
    >>> ErrorCode.SERIALIZATION_ERROR == "serialization-error"
    True
    """

    # Source input
    SOURCE_PARSE_ERROR = "source-parse-error"
    SOURCE_READ_ERROR = "source-read-error"

    # Configuration & runtime
    CONFIGURATION_ERROR = "configuration-error"
    RUNTIME_ERROR = "runtime-error"

    # Output
    SERIALIZATION_ERROR = "serialization-error"

    def __str__(self) -> str:
        """Return the code value as a string.

        Returns
        -------
        str
            The error code value (e.g., "source-parse-error").
        """
        return self.value


def get_type_uri(code: ErrorCode) -> str:
    """Get the RFC 9457 type URI for an error code.

    Parameters
    ----------
    code : ErrorCode
        Error code enum value.

    Returns
    -------
    str
        Complete type URI (e.g., "https://i18nscan.dev/problems/source-parse-error").
    """
    return f"{BASE_TYPE_URI}/{code.value}"
