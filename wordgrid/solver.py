from __future__ import annotations

from wordgrid.grid import Grid, Position, VisitedMask, neighbors
from wordgrid.trie import Trie, TrieNode


class BoardSearcher:
    """Find every lexicon word that can be traced through adjacent cells of a grid."""

    def __init__(self, grid: Grid, trie: Trie):
        self.grid = grid
        self.trie = trie

    def solve(self) -> set[str]:
        """Search from every cell with a fresh visited mask.

        A path is dropped as soon as its letters stop being a prefix of
        some word in the trie.
        """
        found: set[str] = set()
        for posn in self.grid.positions():
            self._visit(posn, self.trie.root, "", VisitedMask(self.grid.n), found)
        return found

    def _visit(self, posn: Position, node: TrieNode, acc: str, visited: VisitedMask, found: set[str]):
        # ``node`` is the trie node for ``acc``; step down by this cell's letter
        letter = self.grid.get(posn.x, posn.y)
        for ch in letter:
            node = node.children.get(ch)
            if node is None:
                return
        word = acc + letter
        if node.is_word:
            found.add(word)
        if not node.children:
            return
        next_visited = visited.mark(posn)
        for nxt in neighbors(posn, self.grid.n):
            if not next_visited.is_visited(nxt):
                self._visit(nxt, node, word, next_visited, found)

    def trace(self, word: str) -> list[Position] | None:
        """Return the cells spelling ``word`` without reuse, or None.

        Start cells are tried in row-major order, so the path returned begins
        at the topmost-leftmost cell that can start the word.
        """
        for posn in self.grid.positions():
            path = self._trace(posn, word, VisitedMask(self.grid.n))
            if path is not None:
                return path
        return None

    def _trace(self, posn: Position, rest: str, visited: VisitedMask) -> list[Position] | None:
        letter = self.grid.get(posn.x, posn.y)
        if not rest.startswith(letter):
            return None
        rest = rest[len(letter):]
        if not rest:
            return [posn]
        visited = visited.mark(posn)
        for nxt in neighbors(posn, self.grid.n):
            if visited.is_visited(nxt):
                continue
            tail = self._trace(nxt, rest, visited)
            if tail is not None:
                return [posn] + tail
        return None


def rank_words(words, max_results: int = 0) -> list[str]:
    """Sort longest first, then alphabetically; cap at ``max_results`` when positive."""
    result = sorted(words, key=lambda w: (-len(w), w))
    return result[:max_results] if max_results > 0 else result
