# src/e2e/test_document_index.py

import pytest

from textindex.inverted import DocumentIndex, TernarySearchTree


def test_search_corpus_reports_substring_offsets():
    out = DocumentIndex().search_corpus("cat", {"doc1": "concatenate cats"})
    assert out == {"doc1": {3: "cat", 12: "cat"}}


def test_occurrences_overlap_and_case_sensitivity():
    occ = DocumentIndex.find_occurrences("aaaa Aa", "aa")
    assert occ == {0: "aa", 1: "aa", 2: "aa"}
    assert DocumentIndex.find_occurrences("Cat cat", "cat") == {4: "cat"}


def test_documents_without_hits_are_omitted():
    docs = {"a.txt": "the phone", "b.txt": "nothing relevant", "c.txt": "", "d.txt": "phones!"}
    out = DocumentIndex().search_corpus("phone", docs)
    assert set(out) == {"a.txt", "d.txt"}
    assert out["a.txt"] == {4: "phone"}
    assert out["d.txt"] == {0: "phone"}


@pytest.mark.parametrize("query", ["", "   "])
def test_empty_query_gives_empty_result(query):
    assert DocumentIndex().search_corpus(query, {"x": "some text"}) == {}


def test_empty_corpus_gives_empty_result():
    assert DocumentIndex().search_corpus("x", {}) == {}


def test_token_tree_is_rebuilt_per_document():
    idx = DocumentIndex()
    tree = idx.build_for_document("Hello, world -- hello again!")
    assert len(tree) == 4  # Hello, world, hello, again
    assert idx.contains("world") and idx.contains("Hello")
    assert not idx.contains("wor")
    idx.build_for_document("second doc")
    assert idx.contains("second")
    assert not idx.contains("world")


def test_search_leaves_last_document_tree_in_place():
    idx = DocumentIndex()
    idx.search_corpus("o", {"1": "one two", "2": "four five"})
    assert idx.contains("four")
    assert not idx.contains("one")


def test_tst_membership():
    t = TernarySearchTree()
    for w in ["cat", "cats", "car", "dog", "a", "cat", ""]:
        t.insert(w)
    assert len(t) == 5
    for w in ["cat", "cats", "car", "dog", "a"]:
        assert w in t
    for w in ["ca", "c", "do", "dogs", "b", ""]:
        assert w not in t


def test_tst_handles_long_tokens_without_recursion():
    t = TernarySearchTree()
    long_word = "".join(chr(0x4E00 + i) for i in range(3000))
    t.insert(long_word)
    assert long_word in t
    assert long_word[:-1] not in t


def test_registry_search():
    idx = DocumentIndex()
    idx.index_document("doc1", "concatenate cats")
    idx.index_document("doc2", "dogs only")
    assert idx.search("cat") == {"doc1": {3: "cat", 12: "cat"}}
    idx.remove_document("doc1")
    assert idx.search("cat") == {}
    assert len(idx) == 1
    idx.clear()
    assert idx.documents() == {}


def test_whole_word_matches_are_case_insensitive():
    text = "Phone, phones and a PHONE. smartphone"
    assert DocumentIndex.find_whole_word(text, " phone ") == [0, 20]
    assert DocumentIndex.find_whole_word(text, "") == []
