"""Typed exception hierarchy with Problem Details support.

All i18nscan exceptions inherit from :class:`I18nScanError`, which carries a stable
:class:`~i18nscan_common.errors.codes.ErrorCode`, a log level and a context mapping, and converts
itself into an RFC 9457 Problem Details payload.

Examples
--------
>>> from i18nscan_common.errors import ErrorCode, SerializationError
>>> try:
...     raise SerializationError("Failed to write catalog", cause=OSError("disk full"))
... except SerializationError as e:
...     assert e.code == ErrorCode.SERIALIZATION_ERROR
...     details = e.to_problem_details(instance="urn:i18nscan:extract")
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import cast

from i18nscan_common.errors.codes import ErrorCode, get_type_uri
from i18nscan_common.problem_details import (
    ProblemDetails,
    ProblemDetailsParams,
    build_problem_details,
)
from i18nscan_common.types import JsonValue

__all__ = [
    "ConfigurationError",
    "I18nScanError",
    "I18nScanErrorConfig",
    "SerializationError",
    "SettingsError",
    "SourceParseError",
    "SourceReadError",
]


@dataclass(slots=True)
class I18nScanErrorConfig:
    """Configuration options used when instantiating :class:`I18nScanError`."""

    code: ErrorCode = ErrorCode.RUNTIME_ERROR
    http_status: int = 500
    log_level: int = logging.ERROR
    cause: Exception | None = None
    context: Mapping[str, object] | None = None


class I18nScanError(Exception):
    """Base exception for all i18nscan errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    config : I18nScanErrorConfig | None, optional
        Structured configuration (code, http_status, log_level, cause, context). Defaults to a
        generic runtime error.

    Attributes
    ----------
    message : str
        Human-readable error message.
    code : ErrorCode
        Error code enum value.
    http_status : int
        Status used in Problem Details payloads.
    log_level : int
        Logging level the error should be reported at.
    context : dict[str, object]
        Additional structured details.

    Examples
    --------
    >>> error = I18nScanError("Operation failed")
    >>> error.code
    <ErrorCode.RUNTIME_ERROR: 'runtime-error'>
    >>> error.to_problem_details()["status"]
    500
    """

    def __init__(self, message: str, *, config: I18nScanErrorConfig | None = None) -> None:
        resolved = config or I18nScanErrorConfig()
        super().__init__(message)
        self.message = message
        self.code = resolved.code
        self.http_status = resolved.http_status
        self.log_level = resolved.log_level
        self.context: dict[str, object] = dict(resolved.context) if resolved.context else {}
        if resolved.cause is not None:
            self.__cause__ = resolved.cause

    def to_problem_details(
        self,
        instance: str | None = None,
        title: str | None = None,
    ) -> ProblemDetails:
        """Convert to RFC 9457 Problem Details JSON.

        Parameters
        ----------
        instance : str | None, optional
            URI identifying the specific occurrence. Defaults to ``urn:i18nscan:error``.
        title : str | None, optional
            Short summary. Defaults to the exception class name.

        Returns
        -------
        ProblemDetails
            Problem Details payload including ``code`` and, when present, the error context as
            ``extensions``.
        """
        extensions = {key: _coerce_json(value) for key, value in self.context.items()}
        return build_problem_details(
            ProblemDetailsParams(
                problem_type=get_type_uri(self.code),
                title=title or self.__class__.__name__,
                status=self.http_status,
                detail=self.message,
                instance=instance or "urn:i18nscan:error",
                code=self.code.value,
                extensions=extensions or None,
            )
        )

    def __str__(self) -> str:
        """Return formatted error string.

        Returns
        -------
        str
            Formatted error string (e.g., "SourceParseError[source-parse-error]: ...").
        """
        base = f"{self.__class__.__name__}[{self.code.value}]: {self.message}"
        if self.__cause__:
            base += f" (caused by: {type(self.__cause__).__name__})"
        return base


def _coerce_json(value: object) -> JsonValue:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Mapping):
        mapping = cast("Mapping[object, object]", value)
        return {str(k): _coerce_json(v) for k, v in mapping.items()}
    if isinstance(value, (list, tuple)):
        return [_coerce_json(item) for item in cast("list[object]", value)]
    return str(value)


class SourceParseError(I18nScanError):
    """Error raised when a source file does not parse cleanly.

    Parse failures are fatal for the whole analysis run. The location of the first syntax error is
    recorded in the context so callers can point at it.

    Parameters
    ----------
    message : str
        Human-readable error message.
    path : str | Path
        File (or pseudo-path) that failed to parse.
    line : int | None, optional
        1-based line of the first syntax error.
    column : int | None, optional
        1-based column of the first syntax error.
    cause : Exception | None, optional
        Underlying exception. Defaults to None.

    Examples
    --------
    >>> error = SourceParseError("unbalanced braces", path="main.go", line=4, column=1)
    >>> error.context["line"]
    4
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path,
        line: int | None = None,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.path = str(path)
        self.line = line
        self.column = column
        context: dict[str, object] = {"path": self.path}
        if line is not None:
            context["line"] = line
        if column is not None:
            context["column"] = column
        super().__init__(
            message,
            config=I18nScanErrorConfig(
                code=ErrorCode.SOURCE_PARSE_ERROR,
                http_status=422,
                cause=cause,
                context=context,
            ),
        )


class SourceReadError(I18nScanError):
    """Error raised when a source path is missing or cannot be read.

    Uses HTTP status 404 for missing paths and 400 for anything else.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | Path,
        missing: bool = False,
        cause: Exception | None = None,
    ) -> None:
        self.path = str(path)
        self.missing = missing
        super().__init__(
            message,
            config=I18nScanErrorConfig(
                code=ErrorCode.SOURCE_READ_ERROR,
                http_status=404 if missing else 400,
                cause=cause,
                context={"path": self.path},
            ),
        )


class ConfigurationError(I18nScanError):
    """Error during configuration validation.

    Uses error code CONFIGURATION_ERROR, status 500 and CRITICAL log level. Raised when the
    Go grammar package is missing or unusable.

    Parameters
    ----------
    message : str
        Human-readable error message describing the configuration failure.
    cause : Exception | None, optional
        Underlying exception. Defaults to None.
    context : Mapping[str, object] | None, optional
        Additional context dictionary. Defaults to None.

    Examples
    --------
    >>> raise ConfigurationError("Go grammar package is not installed")  # doctest: +SKIP
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(
            message,
            config=I18nScanErrorConfig(
                code=ErrorCode.CONFIGURATION_ERROR,
                http_status=500,
                log_level=logging.CRITICAL,
                cause=cause,
                context=context,
            ),
        )


class SettingsError(I18nScanError):
    """Error raised when analyzer settings fail validation.

    Validation errors (one mapping per failing field) are merged into the context under
    ``validation_errors``.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, object]] | None = None,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        combined_context: dict[str, object] = dict(context or {})
        if errors:
            combined_context.setdefault(
                "validation_errors",
                [dict(error) for error in errors],
            )
        super().__init__(
            message,
            config=I18nScanErrorConfig(
                code=ErrorCode.CONFIGURATION_ERROR,
                http_status=500,
                cause=cause,
                context=combined_context,
            ),
        )


class SerializationError(I18nScanError):
    """Error during catalog encoding or writing.

    Serialization failures are recoverable: the records that were being written stay available on
    the analyzer that produced them.

    Parameters
    ----------
    message : str
        Human-readable error message describing the serialization failure.
    cause : Exception | None, optional
        Underlying exception. Defaults to None.
    context : Mapping[str, object] | None, optional
        Additional context dictionary. Defaults to None.
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(
            message,
            config=I18nScanErrorConfig(
                code=ErrorCode.SERIALIZATION_ERROR,
                http_status=500,
                cause=cause,
                context=context,
            ),
        )
