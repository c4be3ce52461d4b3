"""JSON catalog encoding and persistence."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from i18nscan.extractor.records import I18NRecord
from i18nscan_common.errors import SerializationError
from i18nscan_common.fs import DEFAULT_FILE_MODE, write_bytes
from i18nscan_common.logging import get_logger

__all__ = ["encode_catalog", "write_catalog"]

logger = get_logger(__name__)


def encode_catalog(records: Iterable[I18NRecord], *, indent: int | None = None) -> bytes:
    """Encode records as a JSON array of ``{"id", "translation"}`` objects.

    Parameters
    ----------
    records : Iterable[I18NRecord]
        Records in output order.
    indent : int | None, optional
        Indentation for pretty output. ``None`` (default) produces compact JSON such as
        ``[{"id":"hello","translation":""}]``.

    Returns
    -------
    bytes
        UTF-8 encoded JSON document. Non-ASCII keys are written as-is, not escaped.

    Raises
    ------
    SerializationError
        If the records cannot be encoded.
    """
    payload = [record.model_dump(include={"id", "translation"}) for record in records]
    separators = (",", ":") if indent is None else None
    try:
        text = json.dumps(payload, ensure_ascii=False, indent=indent, separators=separators)
        return text.encode("utf-8")
    except (TypeError, ValueError) as exc:
        msg = f"Failed to encode catalog: {exc}"
        raise SerializationError(msg, cause=exc) from exc


def write_catalog(
    records: Iterable[I18NRecord],
    path: Path,
    *,
    indent: int | None = None,
    mode: int = DEFAULT_FILE_MODE,
) -> int:
    """Encode ``records`` and write them to ``path``.

    The file is created or truncated in place; there is no temporary file.

    Parameters
    ----------
    records : Iterable[I18NRecord]
        Records in output order.
    path : Path
        Destination file. Its directory must exist.
    indent : int | None, optional
        See :func:`encode_catalog`.
    mode : int, optional
        Permission bits for a newly created file. Defaults to ``0o644``.

    Returns
    -------
    int
        Number of bytes written.

    Raises
    ------
    SerializationError
        If encoding fails or the file cannot be written.
    """
    data = encode_catalog(records, indent=indent)
    try:
        write_bytes(path, data, mode=mode)
    except OSError as exc:
        msg = f"Failed to write catalog to {path}: {exc}"
        raise SerializationError(msg, cause=exc, context={"path": str(path)}) from exc
    logger.info(
        "Catalog written",
        extra={"operation": "save_json", "path": str(path), "size_bytes": len(data)},
    )
    return len(data)
