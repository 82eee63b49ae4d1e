from __future__ import annotations
import csv
import logging
import os
from typing import Iterable, List
from .models import Document, VocabularyRecord
from .config import CORPUS_EXTS, CSV_NAME_FIELD, CSV_CATEGORY_FIELD, VERBOSE

# File I/O lives here, outside the index structures: they only see text.

log = logging.getLogger(__name__)
PROGRESS_EVERY_FILES = 500

def _iter_corpus_files(roots: Iterable[str]) -> Iterable[tuple[str, str]]:
    """Yield (root, path) for corpus files recursively under each root."""
    for root in roots:
        root = os.path.abspath(root)
        for dirpath, _, filenames in os.walk(root):
            for fn in sorted(filenames):
                if fn.lower().endswith(CORPUS_EXTS):
                    yield root, os.path.join(dirpath, fn)

def _rel_to_any_root(path: str, roots_abs: List[str]) -> str:
    """Return the shortest relative path to any of the given absolute roots."""
    best = path
    for r in roots_abs:
        try:
            rel = os.path.relpath(path, r)
            if len(rel) < len(best):
                best = rel
        except ValueError:
            pass
    return best.replace("\\", "/")

def load_documents(roots: List[str]) -> List[Document]:
    """
    Read every corpus file under roots.
    Document ids are root-relative paths; unreadable files are skipped.
    """
    docs: List[Document] = []
    roots_abs = [os.path.abspath(p) for p in roots]
    for _, path in _iter_corpus_files(roots):
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                text = f.read()
        except OSError as exc:
            log.warning("Error reading file %s: %s", path, exc)
            continue
        docs.append(Document(id=_rel_to_any_root(path, roots_abs), text=text))
        if VERBOSE and len(docs) % PROGRESS_EVERY_FILES == 0:
            log.info("[scanned] files=%d", len(docs))

    log.info("Loaded %d documents from %s", len(docs), roots)
    return docs

def load_records_csv(path: str,
                     name_field: str = CSV_NAME_FIELD,
                     category_field: str = CSV_CATEGORY_FIELD) -> List[VocabularyRecord]:
    """
    Read vocabulary records from a CSV with a header row.
    Rows with an empty name or category are skipped.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    out: List[VocabularyRecord] = []
    skipped = 0
    with open(path, "r", encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            name = (row.get(name_field) or "").strip()
            category = (row.get(category_field) or "").strip()
            if not name or not category:
                skipped += 1
                continue
            out.append(VocabularyRecord(name=name, category=category))
    log.info("Loaded %d records from %s (skipped=%d)", len(out), path, skipped)
    return out
