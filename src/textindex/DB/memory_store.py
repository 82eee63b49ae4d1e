# textindex/DB/memory_store.py
from __future__ import annotations
from typing import Dict, Iterable, List, Optional
from .api import RecordStore
from ..models import VocabularyRecord

class MemoryStore(RecordStore):
    """In-memory CRUD over vocabulary records; ids are assigned in insertion order."""
    def __init__(self, records: Optional[Iterable[VocabularyRecord]]=None) -> None:
        self._rows: Dict[int, VocabularyRecord] = {}
        self._next_id = 0
        if records:
            self.bulk_create(records)

    # C
    def create(self, r: VocabularyRecord) -> int:
        rid = self._next_id
        self._rows[rid] = r
        self._next_id += 1
        return rid

    def bulk_create(self, items: Iterable[VocabularyRecord]) -> int:
        n = 0
        for r in items:
            self.create(r); n += 1
        return n

    # R
    def read(self, rid: int) -> VocabularyRecord:
        try:
            return self._rows[int(rid)]
        except KeyError:
            raise KeyError(rid)

    def all(self) -> List[VocabularyRecord]:
        return [self._rows[k] for k in sorted(self._rows)]

    def count(self) -> int:
        return len(self._rows)

    def names_with_prefix(self, prefix: str) -> List[str]:
        """Record names starting with prefix (case-insensitive), insertion order."""
        p = (prefix or "").strip().lower()
        if not p:
            return []
        return [r.name for r in self.all() if r.name.lower().startswith(p)]

    # D
    def delete(self, rid: int) -> None:
        try:
            del self._rows[int(rid)]
        except KeyError:
            raise KeyError(rid)

    def close(self) -> None:
        self._rows.clear()
