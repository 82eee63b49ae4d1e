# textindex/engine.py
from __future__ import annotations

import os
import logging
import threading
from typing import Iterable, List, Mapping, Optional

from . import config as CFG
from .models import VocabularyRecord, SearchTerm
from .normalize import normalize_term
from .loader import load_documents
from .patterns import count_exact, count_kmp, count_naive
from .frequency import FrequencyTracker
from .spell import SpellIndex
from .avl import AutocompleteIndex
from .inverted import DocumentIndex, CorpusHits
from .DB.api import RecordStore, make_store

log = logging.getLogger(__name__)


class EngineNotReady(RuntimeError):
    """Raised by queries made before build() or after shutdown()."""


class Engine:
    """
    Thin orchestration layer that glues together:
      - vocabulary records (CRUD) via a RecordStore,
      - SpellIndex (trie + edit distance) loaded from those records,
      - AutocompleteIndex (AVL tree) fed by callers and by store prefix lookups,
      - DocumentIndex over registered documents,
      - FrequencyTracker for search terms.

    Public API (used by CLI/Flask):
      * build(...):  open store -> load spell index -> register documents
      * add_record / get_record / remove_record
      * word_exists / suggest_words / spell_check
      * insert_autocomplete_word / autocomplete_suggestions / complete_word
      * index_document / search_corpus
      * count_exact / database_word_count / rank_records
      * record_search_term / search_statistics
      * shutdown()

    Writes are serialized with one lock; reads are not locked.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._store: Optional[RecordStore] = None
        self.spell = SpellIndex()
        self.autocomplete = AutocompleteIndex()
        self.documents = DocumentIndex()
        self.frequencies = FrequencyTracker()
        self._lock = threading.RLock()

    # /* ~~~ Open the record store, load the vocabulary and register documents ~~~ */
    def build(
        self,
        *,
        records: Optional[Iterable[VocabularyRecord]] = None,
        documents: Optional[Mapping[str, str]] = None,   # doc id -> raw text
        roots: Optional[Iterable[str]] = None,            # folders scanned for *.txt
        db_dsn: Optional[str] = None,                     # "memory://" or "csv:///path.csv"
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["TEXTINDEX_VERBOSE"] = "1"

        dsn = db_dsn or CFG.DEFAULT_DSN
        recs = [r if isinstance(r, VocabularyRecord) else VocabularyRecord(name=r) for r in (records or [])]
        log.info("Initializing record store: %s", dsn)
        # open everything new before touching current state
        store = make_store(dsn, records=recs)
        docs = []
        if roots:
            roots = list(roots)
            log.info("Loading corpus from %s", roots)
            docs = [(d.id, d.text) for d in load_documents(roots)]
        docs.extend((documents or {}).items())

        with self._lock:
            old, self._store = self._store, store
            if old is not None:
                old.close()
            self._reload_locked()
            self.autocomplete.clear()
            self.documents.clear()
            for doc_id, text in docs:
                self.documents.index_document(doc_id, text)

        log.info("Engine build() complete: records=%d documents=%d",
                 self._store.count(), len(self.documents))

    # /* ~~~ Rebuild the spell index wholesale after the vocabulary changed ~~~ */
    def reload(self) -> None:
        self._require_store()
        with self._lock:
            self._reload_locked()

    def _reload_locked(self) -> None:
        assert self._store is not None
        self.spell.load(self._store.all())
        log.info("Spell index loaded: records=%d", self._store.count())

    def add_record(self, record: VocabularyRecord) -> int:
        store = self._require_store()
        with self._lock:
            rid = store.create(record)
            self.spell.add_record(record)
        return rid

    def get_record(self, rid: int) -> VocabularyRecord:
        return self._require_store().read(rid)

    def remove_record(self, rid: int) -> None:
        """Delete one record; the spell index is rebuilt without it."""
        store = self._require_store()
        with self._lock:
            store.delete(rid)
            self._reload_locked()

    # ------------- spell check -------------

    def word_exists(self, word: str) -> bool:
        self._require_store()
        return self.spell.exists(normalize_term(word))

    def suggest_words(self, word: str) -> List[str]:
        self._require_store()
        return self.spell.suggest(normalize_term(word))

    def spell_check(self, term: str) -> dict:
        """Exact vocabulary hit, else the nearest records by edit distance."""
        norm = normalize_term(term)
        exists = self.word_exists(norm)
        return {
            "term": norm,
            "exists": exists,
            "suggestions": [] if exists or not norm else self.suggest_words(norm),
        }

    # ------------- autocomplete -------------

    def insert_autocomplete_word(self, word: str) -> None:
        self._require_store()
        with self._lock:
            self.autocomplete.insert(normalize_term(word))

    def autocomplete_suggestions(self, prefix: str) -> List[str]:
        self._require_store()
        # lowercased by the index; not trimmed, a trailing space is part of the prefix
        return self.autocomplete.suggest_by_prefix(prefix or "")

    def complete_word(self, prefix: str) -> List[str]:
        """Pull store names with the prefix into the AVL tree, then query it."""
        store = self._require_store()
        norm = normalize_term(prefix)
        if not norm:
            return []
        names = store.names_with_prefix(norm)
        log.info("complete_word(%r): %d names from store", norm, len(names))
        with self._lock:
            self.autocomplete.insert_many(names)
        return self.autocomplete.suggest_by_prefix(norm)

    # ------------- documents -------------

    def index_document(self, doc_id: str, text: str) -> None:
        self._require_store()
        with self._lock:
            self.documents.index_document(doc_id, text)

    def search_corpus(self, query: str) -> CorpusHits:
        """Literal occurrences per document. The query itself is not case-folded."""
        self._require_store()
        if query and query.strip():
            self.record_search_term(normalize_term(query))
        # the per-document token tree is rebuilt during the scan
        with self._lock:
            return self.documents.search(query)

    def find_whole_word(self, word: str) -> dict:
        """Whole-word, case-insensitive offsets per registered document."""
        self._require_store()
        hits = {}
        for doc_id, text in self.documents.documents().items():
            offsets = self.documents.find_whole_word(text, word)
            if offsets:
                hits[doc_id] = offsets
        return hits

    # ------------- counting -------------

    def count_exact(self, text: str, pattern: str, algorithm: str = CFG.DEFAULT_COUNT_ALGORITHM) -> int:
        return count_exact(text, pattern, algorithm)

    def database_word_count(self, term: str) -> int:
        """KMP count of term across every record's name and category (lowercased)."""
        store = self._require_store()
        t = normalize_term(term)
        if not t:
            return 0
        return sum(count_kmp(r.name.lower(), t) + count_kmp(r.category.lower(), t)
                   for r in store.all())

    def rank_records(self, term: str) -> List[VocabularyRecord]:
        """Records containing term, most occurrences first; zero-count records dropped."""
        store = self._require_store()
        t = normalize_term(term)
        if not t:
            return []
        self.record_search_term(t)
        scored = []
        for r in store.all():
            n = count_naive(r.name.lower(), t) + count_naive(r.category.lower(), t)
            if n > 0:
                scored.append((n, r))
        scored.sort(key=lambda nr: -nr[0])
        return [r for _, r in scored]

    # ------------- frequency -------------

    def record_search_term(self, term: str) -> int:
        with self._lock:
            return self.frequencies.record_and_get(term)

    def search_statistics(self) -> List[SearchTerm]:
        return self.frequencies.statistics()

    # ------------- teardown -------------

    # /* ~~~ Close the store and drop every index ~~~ */
    def shutdown(self) -> None:
        with self._lock:
            try:
                if self._store:
                    self._store.close()
            finally:
                self._store = None
                self.spell.clear()
                self.autocomplete.clear()
                self.documents.clear()
                self.frequencies.reset()
                log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_store(self) -> RecordStore:
        if self._store is None:
            raise EngineNotReady("Engine not initialized. Call build() first.")
        return self._store
