"""RFC 9457 Problem Details helpers.

Errors raised by the scanner convert themselves into Problem Details payloads so the CLI can report
failures in a machine-readable form next to the human-readable message.

Examples
--------
>>> from i18nscan_common.problem_details import ProblemDetailsParams, build_problem_details
>>> problem = build_problem_details(
...     ProblemDetailsParams(
...         problem_type="https://i18nscan.dev/problems/source-parse-error",
...         title="SourceParseError",
...         status=422,
...         detail="syntax error in main.go at 3:1",
...         instance="urn:i18nscan:extract",
...     )
... )
>>> problem["status"]
422
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypedDict, cast

from i18nscan_common.types import JsonValue

__all__ = [
    "ProblemDetails",
    "ProblemDetailsParams",
    "build_problem_details",
]


class ProblemDetails(TypedDict, total=False):
    """TypedDict for RFC 9457 Problem Details payloads."""

    type: str
    title: str
    status: int
    detail: str
    instance: str
    code: str
    extensions: dict[str, JsonValue]


@dataclass(slots=True, frozen=True)
class ProblemDetailsParams:
    """Parameters used to construct a Problem Details payload."""

    problem_type: str
    title: str
    status: int
    detail: str
    instance: str
    code: str | None = None
    extensions: Mapping[str, JsonValue] | None = None


def build_problem_details(params: ProblemDetailsParams, /) -> ProblemDetails:
    """Build an RFC 9457 Problem Details payload.

    Parameters
    ----------
    params : ProblemDetailsParams
        Fields of the payload. ``code`` and ``extensions`` are only emitted when set.

    Returns
    -------
    ProblemDetails
        Payload with ``type``, ``title``, ``status``, ``detail`` and ``instance`` populated.

    Raises
    ------
    ValueError
        If ``status`` is not a 4xx/5xx code.
    """
    if not 400 <= params.status <= 599:  # noqa: PLR2004 - HTTP error range
        msg = f"Problem Details status must be an HTTP error code, got {params.status}"
        raise ValueError(msg)
    payload: dict[str, object] = {
        "type": params.problem_type,
        "title": params.title,
        "status": params.status,
        "detail": params.detail,
        "instance": params.instance,
    }
    if params.code is not None:
        payload["code"] = params.code
    if params.extensions:
        payload["extensions"] = dict(params.extensions)
    return cast("ProblemDetails", payload)
