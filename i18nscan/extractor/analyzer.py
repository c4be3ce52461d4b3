"""Analysis session: parse Go files and accumulate translation keys.

An :class:`Analyzer` owns one :class:`~i18nscan.extractor.records.RecordCollection`. Every file it
analyses adds to that collection, so keys are deduplicated across files and keep the order in
which they were first seen. Independent analyzers never share state.

Examples
--------
>>> analyzer = Analyzer()
>>> analyzer.analyze_source(b'package main\\nfunc main() { T("hello"); T("hello") }\\n')
(I18NRecord(id='hello', translation=''),)
>>> analyzer.dump_json()
b'[{"id":"hello","translation":""}]'
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from i18nscan.extractor.catalog import encode_catalog, write_catalog
from i18nscan.extractor.records import I18NRecord, RecordCollection
from i18nscan.extractor.tscore import format_tree, parse_go_source
from i18nscan.extractor.walker import collect_message_ids
from i18nscan_common.errors import SourceReadError
from i18nscan_common.fs import read_bytes
from i18nscan_common.logging import get_logger
from i18nscan_common.settings import DEFAULT_FUNC_NAME, AnalyzerSettings, load_settings

__all__ = ["DEFAULT_FUNC_NAME", "Analyzer"]

logger = get_logger(__name__)


class Analyzer:
    """Collect translation keys from Go sources.

    Parameters
    ----------
    func_name : str, optional
        Translation function name. Empty means ``"T"``.
    debug : bool, optional
        Write a full syntax tree dump of each analysed file to ``dump_stream``.
    dump_stream : TextIO | None, optional
        Destination for tree dumps. Defaults to ``sys.stdout`` at dump time.

    Raises
    ------
    SettingsError
        If ``func_name`` is not a valid Go identifier.
    """

    def __init__(
        self,
        func_name: str = DEFAULT_FUNC_NAME,
        *,
        debug: bool = False,
        dump_stream: TextIO | None = None,
    ) -> None:
        self.settings = load_settings(func_name=func_name, debug=debug)
        self.dump_stream = dump_stream
        self._records = RecordCollection()

    @classmethod
    def from_settings(
        cls, settings: AnalyzerSettings, *, dump_stream: TextIO | None = None
    ) -> Analyzer:
        """Build an analyzer from already validated settings."""
        return cls(settings.func_name, debug=settings.debug, dump_stream=dump_stream)

    @property
    def func_name(self) -> str:
        """Translation function name from the validated settings."""
        return self.settings.func_name

    @property
    def debug(self) -> bool:
        """Whether each analysed file is dumped as a syntax tree."""
        return self.settings.debug

    @property
    def records(self) -> RecordCollection:
        """Accumulated records, shared by every file analysed so far."""
        return self._records

    def name(self) -> str:
        """Return the function name matched at call sites."""
        return self.settings.func_name or DEFAULT_FUNC_NAME

    def analyze_source(self, data: bytes, path: str | Path = "<memory>") -> tuple[I18NRecord, ...]:
        """Analyse one in-memory source buffer.

        Parameters
        ----------
        data : bytes
            Go source text.
        path : str | Path, optional
            Name used in diagnostics.

        Returns
        -------
        tuple[I18NRecord, ...]
            All records accumulated so far, across every analysed source.

        Raises
        ------
        SourceParseError
            If the source does not parse. Nothing from this source is recorded.
        """
        tree = parse_go_source(data, path)
        if self.debug:
            stream = self.dump_stream if self.dump_stream is not None else sys.stdout
            stream.write(f"# {path}\n")
            stream.write(format_tree(tree.root_node))
        before = len(self._records)
        matches = collect_message_ids(tree.root_node, self.name(), self._records)
        logger.debug(
            "Analysed source",
            extra={
                "operation": "analyze",
                "path": str(path),
                "matches": matches,
                "new_records": len(self._records) - before,
                "records": len(self._records),
            },
        )
        return self._records.snapshot()

    def analyze_file(self, path: str | Path) -> tuple[I18NRecord, ...]:
        """Read and analyse one Go file.

        Parameters
        ----------
        path : str | Path
            Source file.

        Returns
        -------
        tuple[I18NRecord, ...]
            All records accumulated so far.

        Raises
        ------
        SourceReadError
            If the file is missing or unreadable.
        SourceParseError
            If the file does not parse.
        """
        source_path = Path(path)
        try:
            data = read_bytes(source_path)
        except FileNotFoundError as exc:
            msg = f"Source file not found: {source_path}"
            raise SourceReadError(msg, path=source_path, missing=True, cause=exc) from exc
        except OSError as exc:
            msg = f"Failed to read source file '{source_path}': {exc}"
            raise SourceReadError(msg, path=source_path, cause=exc) from exc
        return self.analyze_source(data, source_path)

    def analyze_files(self, paths: Iterable[str | Path]) -> tuple[I18NRecord, ...]:
        """Analyse files sequentially in the given order.

        The first failing file stops the run; records from files analysed before it stay in
        :attr:`records`.

        Returns
        -------
        tuple[I18NRecord, ...]
            All records accumulated so far.
        """
        for path in paths:
            self.analyze_file(path)
        return self._records.snapshot()

    def dump_json(self, *, indent: int | None = None) -> bytes:
        """Return the accumulated records as a JSON catalog."""
        return encode_catalog(self._records, indent=indent)

    def save_json(self, path: str | Path, *, indent: int | None = None) -> None:
        """Write the JSON catalog to ``path``.

        Raises
        ------
        SerializationError
            If the catalog cannot be written. Records remain available on the analyzer.
        """
        write_catalog(self._records, Path(path), indent=indent)
