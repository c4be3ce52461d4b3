"""Catalog record model and the ordered, deduplicating accumulator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["I18NRecord", "RecordCollection"]


class I18NRecord(BaseModel):
    """One catalog entry: a message ID and its (initially empty) translation.

    Records are immutable and compare by value.

    Examples
    --------
    >>> I18NRecord(id="hello") == I18NRecord(id="hello")
    True
    >>> I18NRecord(id="hello").model_dump()
    {'id': 'hello', 'translation': ''}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(description="Message key, exactly the unquoted literal at the call site")
    translation: str = Field(default="", description="Translated text, filled in downstream")


class RecordCollection:
    """Insertion-ordered collection holding at most one record per ID.

    Records are appended in first-seen order and never removed. Membership is checked through a
    set of IDs; order and contents are the same as a linear scan would give.

    Parameters
    ----------
    records : Iterable[I18NRecord], optional
        Initial records; later duplicates are dropped.
    """

    __slots__ = ("_ids", "_records")

    def __init__(self, records: Iterable[I18NRecord] = ()) -> None:
        self._records: list[I18NRecord] = []
        self._ids: set[str] = set()
        for record in records:
            self.add(record)

    def add(self, record: I18NRecord) -> bool:
        """Append ``record`` unless its ID is already present.

        Returns
        -------
        bool
            True when the record was appended.
        """
        if record.id in self._ids:
            return False
        self._ids.add(record.id)
        self._records.append(record)
        return True

    def add_id(self, message_id: str) -> bool:
        """Append a fresh record for ``message_id`` unless already present.

        Returns
        -------
        bool
            True when a record was appended.
        """
        if message_id in self._ids:
            return False
        return self.add(I18NRecord(id=message_id))

    def ids(self) -> list[str]:
        """Return the message IDs in insertion order."""
        return [record.id for record in self._records]

    def snapshot(self) -> tuple[I18NRecord, ...]:
        """Return an immutable view of the current records."""
        return tuple(self._records)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._ids

    def __iter__(self) -> Iterator[I18NRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ids()!r})"
