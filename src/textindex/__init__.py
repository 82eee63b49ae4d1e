"""
Text Indexing Toolkit

In-memory structures for looking words up in a catalog vocabulary and
finding literal occurrences in a text corpus:

- SpellIndex: trie membership + nearest-record suggestions by edit distance
- AutocompleteIndex: AVL tree of whole words with range-pruned prefix search
- DocumentIndex: per-document ternary token tree + raw-text offset scan
- patterns: KMP, Boyer-Moore and naive exact-substring counters
- FrequencyTracker: search term -> access count

Engine wires them to a vocabulary record store and is what the CLI and the
Flask API talk to.

Example Usage:
    from textindex import Engine, VocabularyRecord

    eng = Engine()
    eng.build(records=[VocabularyRecord("iPhone 14", "Apple")],
              documents={"doc1": "concatenate cats"})
    eng.suggest_words("iphone")      # ['iPhone 14']
    eng.search_corpus("cat")         # {'doc1': {3: 'cat', 12: 'cat'}}
"""

# src/textindex/__init__.py
from .engine import Engine, EngineNotReady  # re-export
from .models import VocabularyRecord, Document, SearchTerm

__version__ = "1.0.0"
__all__ = ["Engine", "EngineNotReady", "VocabularyRecord", "Document", "SearchTerm"]
