from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class VocabularyRecord:
    name: str                 # primary name (phone model)
    category: str = ""        # brand / company

@dataclass(frozen=True)
class Document:
    id: str                   # root-relative file path or logical name
    text: str                 # raw, untokenized content

@dataclass(frozen=True)
class SearchTerm:
    term: str
    frequency: int
