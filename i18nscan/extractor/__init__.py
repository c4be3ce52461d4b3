"""Go translation-key extraction: parsing, tree walking and catalog output."""

from __future__ import annotations

from i18nscan.extractor.analyzer import Analyzer
from i18nscan.extractor.callee import MAX_DEPTH, resolve_identifier
from i18nscan.extractor.catalog import encode_catalog, write_catalog
from i18nscan.extractor.discovery import iter_source_files
from i18nscan.extractor.records import I18NRecord, RecordCollection
from i18nscan_common.settings import DEFAULT_FUNC_NAME

__all__ = [
    "DEFAULT_FUNC_NAME",
    "MAX_DEPTH",
    "Analyzer",
    "I18NRecord",
    "RecordCollection",
    "encode_catalog",
    "iter_source_files",
    "resolve_identifier",
    "write_catalog",
]
