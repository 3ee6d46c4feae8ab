from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, Iterator

from wordgrid.errors import SourceUnavailable

logger = logging.getLogger("wordgrid")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str], max_words: int) -> Trie:
        """Build a trie from at most ``max_words`` entries of ``words``."""
        trie = cls()
        for word in islice(words, max_words):
            trie.insert(word)
        return trie

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.has_word(word)

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def find_node(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has_word(self, word: str) -> bool:
        node = self.find_node(word)
        return node is not None and node.is_word

    def enumerate(self, node: TrieNode, limit: int) -> list[str]:
        """Return up to ``limit`` word suffixes below ``node`` in character order.

        Pre-order: the start node is reported before anything beneath it,
        so a query that is itself a word always comes first.
        """
        result: list[str] = []
        stack = [(node, "")]
        while stack and len(result) < limit:
            current, suffix = stack.pop()
            if current.is_word:
                result.append(suffix)
            # Reverse order on the stack so the smallest character pops first
            for ch in sorted(current.children, reverse=True):
                stack.append((current.children[ch], suffix + ch))
        return result

    def autocomplete(self, query: str, limit: int) -> list[str]:
        node = self.find_node(query)
        if node is None:
            return []
        return [query + suffix for suffix in self.enumerate(node, limit)]


def read_words(path: str) -> Iterator[str]:
    """Yield one word per non-blank line of a UTF-8 text file.

    The file is opened eagerly so a missing source fails here rather than
    on first iteration.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise SourceUnavailable(f"Cannot open word list {path}: {e}") from e
    return _lines(f, path)


def _lines(f, path: str) -> Iterator[str]:
    with f:
        try:
            for line in f:
                word = line.strip()
                if word:
                    yield word
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(f"Cannot read word list {path}: {e}") from e


def load_trie(path: str, max_words: int, min_length: int = 1, lowercase: bool = False) -> Trie:
    words = read_words(path)
    if lowercase:
        words = (w.lower() for w in words)
    words = (w for w in words if len(w) >= min_length)
    trie = Trie.from_words(words, max_words)
    logger.info("Loaded %d words from %s (max_words=%d)", len(trie), path, max_words)
    return trie
