from __future__ import annotations
from collections import Counter
from typing import List
from .models import SearchTerm


class FrequencyTracker:
    """
    Search term -> access count. Counts only ever grow; reset() is the only
    way to drop them. Terms are expected to be normalized by the caller.
    """

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def record_and_get(self, term: str) -> int:
        """Increment term and return the post-increment count (first call -> 1)."""
        if not term:
            return 0
        self._counts[term] += 1
        return self._counts[term]

    def get(self, term: str) -> int:
        return self._counts.get(term, 0)

    def statistics(self) -> List[SearchTerm]:
        """All recorded terms, most frequent first (ties alphabetical)."""
        rows = sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return [SearchTerm(term=t, frequency=c) for t, c in rows]

    def reset(self) -> None:
        self._counts.clear()

    def __len__(self) -> int:
        return len(self._counts)
