"""Shared fixtures for the auto-suggest tests."""

from __future__ import annotations

import pytest

from autosuggest.trie import PrefixIndex


@pytest.fixture
def fruit_index() -> PrefixIndex:
    return PrefixIndex(["apple", "app", "apply", "apricot", "banana"])


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep a stray words.txt in the working directory out of the tests.
    monkeypatch.chdir(tmp_path)
