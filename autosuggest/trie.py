"""Prefix trie for word storage and alphabetical prefix suggestions."""

from __future__ import annotations

import logging
import string
from typing import Iterable, Iterator

from autosuggest.constants import TRIM_CHARS

log = logging.getLogger("autosuggest")

_LETTERS = frozenset(string.ascii_letters)


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class PrefixIndex:
    """Word set stored as a prefix trie, answering prefix queries.

    Words and prefixes go through the same normalization (see
    :meth:`normalize`), so only lowercase ASCII letters ever become edges
    and the root is never terminal.
    """

    def __init__(self, words: Iterable[str] | None = None):
        self.root = TrieNode()
        self._word_count = 0
        if words is not None:
            self.bulk_insert(words)

    @staticmethod
    def normalize(text: str) -> str:
        """Trim, lowercase and keep ASCII letters only.

        ``"  Apple "`` -> ``"apple"``, ``"ice-cream"`` -> ``"icecream"``,
        ``"123"`` -> ``""``.
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        return "".join(ch.lower() for ch in text.strip(TRIM_CHARS) if ch in _LETTERS)

    # public API

    def insert(self, word: str) -> None:
        """Store *word*. Empty words are ignored; duplicates count once."""
        clean = self.normalize(word)
        if not clean:
            return

        node = self.root
        for ch in clean:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self._word_count += 1
            log.debug("Indexed %r (%d words)", clean, self._word_count)

    def bulk_insert(self, words: Iterable[str]) -> int:
        """Insert every word; returns how many were new."""
        if isinstance(words, str):
            raise TypeError("expected an iterable of words, got a single str")
        before = self._word_count
        for word in words:
            self.insert(word)
        return self._word_count - before

    def suggest(self, prefix: str = "") -> list[str]:
        """All stored words starting with *prefix*, sorted alphabetically.

        An empty prefix matches every word. No match gives ``[]``.
        """
        clean = self.normalize(prefix)
        start = self._walk(clean)
        if start is None:
            return []

        results: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(start, clean)]
        while stack:
            node, path = stack.pop()
            if node.is_terminal:
                results.append(path)
            for ch, child in node.children.items():
                stack.append((child, path + ch))

        results.sort()
        return results

    def count(self) -> int:
        """Number of distinct words stored."""
        return self._word_count

    def is_word(self, word: str) -> bool:
        clean = self.normalize(word)
        node = self._walk(clean)
        return bool(clean) and node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(self.normalize(prefix)) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_word(word)

    def __len__(self) -> int:
        return self._word_count

    def __iter__(self) -> Iterator[str]:
        return iter(self.suggest(""))

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
