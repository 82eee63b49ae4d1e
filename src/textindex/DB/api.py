# textindex/DB/api.py
from __future__ import annotations
from typing import Protocol, Iterable, List, Optional

from ..models import VocabularyRecord


class RecordStore(Protocol):
    # Create
    def create(self, r: VocabularyRecord) -> int: ...
    def bulk_create(self, items: Iterable[VocabularyRecord]) -> int: ...
    # Read
    def read(self, rid: int) -> VocabularyRecord: ...
    def all(self) -> List[VocabularyRecord]: ...
    def count(self) -> int: ...
    def names_with_prefix(self, prefix: str) -> List[str]: ...
    # Delete
    def delete(self, rid: int) -> None: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str, *, records: Optional[Iterable[VocabularyRecord]] = None) -> RecordStore:
    """
    Factory:
      - memory://       -> MemoryStore (seeded with records if given)
      - csv:///path.csv -> MemoryStore seeded from the CSV, then with records
    """
    # Lazy imports avoid a circular import with memory_store
    from .memory_store import MemoryStore

    if dsn.startswith("memory://"):
        return MemoryStore(records=records)

    if dsn.startswith("csv:///"):
        from ..loader import load_records_csv
        path = dsn.removeprefix("csv:///")
        store = MemoryStore(records=load_records_csv(path))
        if records:
            store.bulk_create(records)
        return store

    raise ValueError(f"Unsupported store DSN: {dsn}")
