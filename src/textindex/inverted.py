from __future__ import annotations
import logging
import re
from typing import Dict, List, Mapping, Optional
from .normalize import split_tokens

log = logging.getLogger(__name__)

Occurrences = Dict[int, str]                 # offset -> matched literal
CorpusHits = Dict[str, Occurrences]          # document id -> occurrences


class _TSTNode:
    __slots__ = ("char", "terminal", "lo", "eq", "hi")

    def __init__(self, char: str) -> None:
        self.char = char
        self.terminal = False
        self.lo: Optional[_TSTNode] = None
        self.eq: Optional[_TSTNode] = None
        self.hi: Optional[_TSTNode] = None


class TernarySearchTree:
    """Token set: lo < char, eq continues the word, hi > char."""

    def __init__(self) -> None:
        self._root: Optional[_TSTNode] = None
        self._size = 0

    def insert(self, word: str) -> None:
        if not word:
            return
        if self._root is None:
            self._root = _TSTNode(word[0])
        node = self._root
        i = 0
        while True:
            ch = word[i]
            if ch < node.char:
                if node.lo is None:
                    node.lo = _TSTNode(ch)
                node = node.lo
            elif ch > node.char:
                if node.hi is None:
                    node.hi = _TSTNode(ch)
                node = node.hi
            elif i + 1 < len(word):
                i += 1
                if node.eq is None:
                    node.eq = _TSTNode(word[i])
                node = node.eq
            else:
                if not node.terminal:
                    node.terminal = True
                    self._size += 1
                return

    def __contains__(self, word: str) -> bool:
        if not word:
            return False
        node = self._root
        i = 0
        while node is not None:
            ch = word[i]
            if ch < node.char:
                node = node.lo
            elif ch > node.char:
                node = node.hi
            elif i + 1 < len(word):
                i += 1
                node = node.eq
            else:
                return node.terminal
        return False

    def __len__(self) -> int:
        return self._size


class DocumentIndex:
    """
    Per-corpus occurrence search.

    For each document a fresh ternary tree of its tokens is built (membership
    only); offsets come from a literal scan of the raw text, so substrings
    inside larger tokens are reported too.
    """

    def __init__(self) -> None:
        self._tree = TernarySearchTree()
        self._docs: Dict[str, str] = {}

    # -------- per-document --------
    def build_for_document(self, raw_text: str) -> TernarySearchTree:
        """Replace the current token tree with one built from raw_text."""
        tree = TernarySearchTree()
        for tok in split_tokens(raw_text):
            tree.insert(tok)
        self._tree = tree
        return tree

    def contains(self, token: str) -> bool:
        """Membership of token in the most recently built document tree."""
        return token in self._tree

    @staticmethod
    def find_occurrences(raw_text: str, query: str) -> Occurrences:
        """Every start offset of query in raw_text (case-sensitive, overlaps allowed)."""
        hits: Occurrences = {}
        if not query or not raw_text:
            return hits
        i = raw_text.find(query)
        while i != -1:
            hits[i] = query
            i = raw_text.find(query, i + 1)
        return hits

    @staticmethod
    def find_whole_word(raw_text: str, word: str) -> List[int]:
        """
        Offsets of word as a whole word, case-insensitive.
        The word is trimmed and lowercased; the text is lowercased.
        """
        w = (word or "").strip().lower()
        if not w or not raw_text:
            return []
        pattern = re.compile(r"\b" + re.escape(w) + r"\b")
        return [m.start() for m in pattern.finditer(raw_text.lower())]

    # -------- corpus --------
    def search_corpus(self, query: str, documents: Mapping[str, str]) -> CorpusHits:
        """Occurrences of query per document; documents without hits are omitted."""
        results: CorpusHits = {}
        if not query or not query.strip():
            log.debug("Empty search term provided")
            return results
        if not documents:
            return results

        for doc_id, text in documents.items():
            if not text:
                log.debug("Skipping empty document %s", doc_id)
                continue
            self.build_for_document(text)
            hits = self.find_occurrences(text, query)
            if hits:
                results[doc_id] = hits

        log.debug("search_corpus(%r): %d/%d documents matched", query, len(results), len(documents))
        return results

    # -------- registry --------
    def index_document(self, doc_id: str, text: str) -> None:
        self._docs[doc_id] = text

    def remove_document(self, doc_id: str) -> None:
        self._docs.pop(doc_id, None)

    def documents(self) -> Dict[str, str]:
        return dict(self._docs)

    def search(self, query: str) -> CorpusHits:
        """search_corpus over every registered document."""
        return self.search_corpus(query, self._docs)

    def clear(self) -> None:
        self._docs.clear()
        self._tree = TernarySearchTree()

    def __len__(self) -> int:
        return len(self._docs)
