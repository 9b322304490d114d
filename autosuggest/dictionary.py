"""Word list loading into a prefix index."""

from __future__ import annotations

import logging
import os
import time

from autosuggest.constants import DEFAULT_WORDS, WORD_LIST_FILENAME
from autosuggest.trie import PrefixIndex

log = logging.getLogger("autosuggest")

BUILTIN_SOURCE = "built-in"

PACKAGE_WORD_LIST = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", WORD_LIST_FILENAME)


class Dictionary:
    """Seeds a :class:`PrefixIndex` from a word-list file or the built-in list."""

    def __init__(self, dict_path: str | None = None):
        self.index = PrefixIndex()
        self.source: str = BUILTIN_SOURCE
        self.load_seconds: float = 0.0

        t0 = time.perf_counter()
        self._load(dict_path)
        self.load_seconds = time.perf_counter() - t0

    def _load(self, dict_path: str | None) -> None:
        search_paths: list[str] = []
        if dict_path:
            if os.path.exists(dict_path):
                search_paths.append(dict_path)
            else:
                log.warning("Word list %s not found -- searching defaults.", dict_path)

        search_paths.extend([
            WORD_LIST_FILENAME,
            PACKAGE_WORD_LIST,
        ])

        for path in search_paths:
            if not os.path.exists(path):
                continue
            try:
                added = self._load_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read %s: %s", path, exc)
                continue
            if added:
                self.source = path
                log.info("Loaded %s words from %s", f"{self.index.count():,}", path)
                return
            log.debug("No words in %s", path)

        log.warning("No word list found -- using built-in word list.")
        self._load_builtin()

    def _load_file(self, path: str) -> int:
        words: list[str] = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word and not word.startswith("#"):
                    words.append(word)
        return self.index.bulk_insert(words)

    def _load_builtin(self) -> None:
        self.index.bulk_insert(DEFAULT_WORDS)
        self.source = BUILTIN_SOURCE
        log.info("Loaded %d built-in words", self.index.count())

    def __len__(self) -> int:
        return self.index.count()

    def __contains__(self, word: object) -> bool:
        return word in self.index
