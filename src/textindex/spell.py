from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Union
from .models import VocabularyRecord
from .normalize import normalize_term

log = logging.getLogger(__name__)


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance: unit cost for insert, delete and substitute.
    Plain DP table of (len(a)+1) x (len(b)+1); no transpositions.
    """
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        dp[i][0] = i
    for j in range(len(b) + 1):
        dp[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dp[i][j] = min(dp[i - 1][j] + 1, dp[i][j - 1] + 1, dp[i - 1][j - 1] + cost)
    return dp[len(a)][len(b)]


class TrieNode:
    """
    children: char -> TrieNode
    terminal: the root-to-node path spells a vocabulary word
    """

    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.terminal = False


class SpellIndex:
    """
    Closed-vocabulary spell checker.

    The trie answers exact membership. Suggestions do not walk the trie:
    they compare the query against the name and the category of every loaded
    record and keep all records tied at the smallest edit distance.

    Lifecycle: load(records) rebuilds everything, add_record()/insert() grow
    it, clear() empties it.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._records: List[VocabularyRecord] = []

    # -------- build --------
    def load(self, records: Iterable[Union[VocabularyRecord, str]]) -> None:
        self.clear()
        for r in records:
            self.add_record(r)
        log.debug("SpellIndex loaded: records=%d", len(self._records))

    def add_record(self, record: Union[VocabularyRecord, str]) -> None:
        if isinstance(record, str):
            record = VocabularyRecord(name=record)
        self._records.append(record)
        self.insert(record.name.lower())
        if record.category:
            self.insert(record.category.lower())

    def insert(self, word: str) -> None:
        """Insert word as given (callers lowercase first). Empty word is ignored."""
        if not word:
            return
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        node.terminal = True

    def clear(self) -> None:
        self._root = TrieNode()
        self._records = []

    # -------- query --------
    def exists(self, word: str) -> bool:
        if not word:
            return False
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal

    def __contains__(self, word: str) -> bool:
        return self.exists(word)

    def words(self) -> List[str]:
        """Every vocabulary word in the trie (depth-first, insertion order of edges)."""
        out: List[str] = []
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.terminal:
                out.append(prefix)
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, prefix + ch))
        return out

    @property
    def records(self) -> List[VocabularyRecord]:
        return list(self._records)

    def suggest(self, word: str) -> List[str]:
        """
        Nearest vocabulary records to word by edit distance.

        Scans records in load order, comparing the name and then the category.
        A strictly smaller distance clears the candidates; an equal distance
        appends. Returns record names (first-seen order, no duplicates).
        """
        query = normalize_term(word)
        if not query:
            return []

        best = None
        matches: List[VocabularyRecord] = []
        for rec in self._records:
            for field in (rec.name, rec.category):
                if not field:
                    continue
                d = edit_distance(query, field.lower())
                if best is None or d < best:
                    best = d
                    matches = [rec]
                elif d == best:
                    matches.append(rec)

        log.debug("suggest(%r): min_distance=%s candidates=%d", query, best, len(matches))
        return list(dict.fromkeys(r.name for r in matches))
