from __future__ import annotations
import re
from typing import List
from .config import TOKEN_SPLIT

_SPLIT = re.compile(TOKEN_SPLIT)

def normalize_term(text: str | None) -> str:
    """Trim and lowercase. None is treated as the empty string."""
    if not text:
        return ""
    return text.strip().lower()

def split_tokens(text: str) -> List[str]:
    """
    Split raw text on runs of non-word characters.
    Empty pieces (leading/trailing separators) are dropped.
    """
    if not text:
        return []
    return [t for t in _SPLIT.split(text) if t]
