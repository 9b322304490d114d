"""Trie Auto-Suggest — prefix-based word suggestions."""

from autosuggest.constants import COLORS, DEFAULT_WORDS, MENU_SIZE, TRIM_CHARS, WORD_LIST_FILENAME
from autosuggest.trie import PrefixIndex, TrieNode
from autosuggest.dictionary import Dictionary
from autosuggest.cli import run_cli

__all__ = [
    "COLORS",
    "DEFAULT_WORDS",
    "MENU_SIZE",
    "TRIM_CHARS",
    "WORD_LIST_FILENAME",
    "Dictionary",
    "PrefixIndex",
    "TrieNode",
    "run_cli",
]
