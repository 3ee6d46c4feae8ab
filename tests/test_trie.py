from pathlib import Path

import pytest

from wordgrid.errors import SourceUnavailable
from wordgrid.trie import Trie, load_trie, read_words

DATA_DIR = Path(__file__).parent / "data"


def _make_trie(words: list[str]) -> Trie:
    trie = Trie()
    for w in words:
        trie.insert(w)
    return trie


def test_insert_and_lookup():
    words = ["aa", "ab", "abc", "Ab"]
    trie = _make_trie(words)
    for w in words:
        assert trie.has_word(w)
        assert not trie.has_word(w + "x")
        assert not trie.has_word(w[:1])


def test_one_letter_words_without_prefix_false_positives():
    trie = _make_trie(["aa", "ab", "c", "d"])
    assert trie.has_word("c")
    assert trie.has_word("d")
    assert not trie.has_word("a")
    assert "c" in trie
    assert "a" not in trie


def test_case_is_not_normalized():
    trie = _make_trie(["Ab"])
    assert trie.has_word("Ab")
    assert not trie.has_word("ab")


def test_duplicate_insert_stores_one_word():
    trie = _make_trie(["aa", "aa"])
    assert trie.has_word("aa")
    assert len(trie) == 1
    assert trie.autocomplete("a", 3) == ["aa"]


def test_find_node():
    trie = _make_trie(["abc"])
    assert trie.find_node("") is trie.root
    node = trie.find_node("ab")
    assert node is not None
    assert not node.is_word
    assert trie.find_node("abc").is_word
    assert trie.find_node("abd") is None
    assert trie.find_node("abcd") is None


def test_autocomplete_lexicographic():
    words = ["abra", "aaron", "acapella", "z", "zzz", "zany"]
    trie = _make_trie(words)
    assert trie.autocomplete("a", len(words) + 1) == ["aaron", "abra", "acapella"]
    assert trie.autocomplete("a", 4) == ["aaron", "abra", "acapella"]
    assert trie.autocomplete("a", 1) == ["aaron"]
    assert trie.autocomplete("z", 2) == ["z", "zany"]


def test_autocomplete_query_word_comes_first():
    trie = _make_trie(["cart", "car", "cab", "carbon"])
    assert trie.autocomplete("car", 10) == ["car", "carbon", "cart"]


def test_autocomplete_no_match_and_zero_limit():
    trie = _make_trie(["apple"])
    assert trie.autocomplete("b", 5) == []
    assert trie.autocomplete("apples", 5) == []
    assert trie.autocomplete("a", 0) == []


def test_autocomplete_empty_query_lists_everything_in_order():
    trie = _make_trie(["b", "a", "ba"])
    assert trie.autocomplete("", 10) == ["a", "b", "ba"]


def test_enumerate_returns_suffixes():
    trie = _make_trie(["tea", "ten", "to"])
    node = trie.find_node("te")
    assert trie.enumerate(node, 5) == ["a", "n"]
    assert trie.enumerate(trie.root, 2) == ["tea", "ten"]


def test_from_words_respects_max_words():
    trie = Trie.from_words(["one", "two", "three"], 2)
    assert trie.has_word("one")
    assert trie.has_word("two")
    assert not trie.has_word("three")


def test_from_words_short_source_is_not_an_error():
    trie = Trie.from_words(iter(["one"]), 100)
    assert len(trie) == 1


def test_read_words_skips_blank_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\n\n  beta  \n\ngamma\n", encoding="utf-8")
    assert list(read_words(str(path))) == ["alpha", "beta", "gamma"]


def test_read_words_missing_file():
    with pytest.raises(SourceUnavailable):
        read_words("/nonexistent/words.txt")


def test_load_trie_missing_file_with_zero_max_words():
    with pytest.raises(SourceUnavailable):
        load_trie("/nonexistent/words.txt", 0)


def test_load_trie_from_titles():
    trie = load_trie(str(DATA_DIR / "titles.txt"), 3)
    assert trie.has_word("Synontology")
    assert trie.has_word("Prince Regent gudgeon")
    assert trie.has_word("Reported Military Losses during the Invasion of Cyprus (1974)")
    assert not trie.has_word("Prince Edward")
    assert not trie.has_word("RU-38")


def test_load_trie_filters_and_lowercases(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Cat\nOX\nDOGS\n", encoding="utf-8")
    trie = load_trie(str(path), 10, min_length=3, lowercase=True)
    assert trie.has_word("cat")
    assert trie.has_word("dogs")
    assert not trie.has_word("ox")
    assert not trie.has_word("Cat")


def test_load_trie_undecodable_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat\n\xff\xfe\n")
    with pytest.raises(SourceUnavailable):
        load_trie(str(path), 10)
