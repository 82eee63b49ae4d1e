from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

@dataclass
class _Node:
    word: str
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1

def _h(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0

def _update(node: _Node) -> None:
    node.height = 1 + max(_h(node.left), _h(node.right))

def _balance(node: Optional[_Node]) -> int:
    return _h(node.left) - _h(node.right) if node is not None else 0

def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x

def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y

class AutocompleteIndex:
    """
    AVL tree keyed by whole lowercase words.
    insert() keeps |height(left) - height(right)| <= 1 at every node;
    suggest_by_prefix() only visits subtrees that can hold words starting with prefix.
    No deletion.
    """
    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size: int = 0

    # -------- Build --------
    def insert(self, word: str) -> None:
        if not word:
            return
        self._root = self._insert(self._root, word.lower())

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    def _insert(self, node: Optional[_Node], word: str) -> _Node:
        if node is None:
            self._size += 1
            return _Node(word=word)
        if word < node.word:
            node.left = self._insert(node.left, word)
        elif word > node.word:
            node.right = self._insert(node.right, word)
        else:
            return node  # duplicate: no structural change

        _update(node)
        bal = _balance(node)

        # left-left
        if bal > 1 and word < node.left.word:
            return _rotate_right(node)
        # right-right
        if bal < -1 and word > node.right.word:
            return _rotate_left(node)
        # left-right
        if bal > 1 and word > node.left.word:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        # right-left
        if bal < -1 and word < node.right.word:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    # -------- Query --------
    def suggest_by_prefix(self, prefix: str) -> List[str]:
        """All stored words starting with prefix (case-insensitive), sorted."""
        if not prefix:
            return []
        p = prefix.lower()
        out: List[str] = []

        def _walk(n: Optional[_Node]) -> None:
            if n is None:
                return
            # everything on the left is < n.word; skip it when n.word <= p
            if n.word > p:
                _walk(n.left)
            if n.word.startswith(p):
                out.append(n.word)
            # everything on the right is > n.word; skip it once n.word is past every match
            if n.word < p or n.word.startswith(p):
                _walk(n.right)

        _walk(self._root)
        return out

    def __contains__(self, word: str) -> bool:
        if not word:
            return False
        w = word.lower()
        node = self._root
        while node is not None:
            if w == node.word:
                return True
            node = node.left if w < node.word else node.right
        return False

    def __len__(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        return _h(self._root)

    def iter_words(self) -> Iterable[str]:
        """Yield words in ascending order."""
        def _inorder(n: Optional[_Node]) -> Iterable[str]:
            if n is None: return
            yield from _inorder(n.left)
            yield n.word
            yield from _inorder(n.right)
        yield from _inorder(self._root)

    def is_balanced(self) -> bool:
        """Check the AVL invariant and cached heights over the whole tree."""
        def _check(n: Optional[_Node]) -> int:
            if n is None:
                return 0
            lh, rh = _check(n.left), _check(n.right)
            if lh < 0 or rh < 0 or abs(lh - rh) > 1 or n.height != 1 + max(lh, rh):
                return -1
            return 1 + max(lh, rh)
        return _check(self._root) >= 0

    def clear(self) -> None:
        self._root = None
        self._size = 0
