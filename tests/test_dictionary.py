"""Tests for word list loading."""

from __future__ import annotations

import logging

import pytest

from autosuggest import dictionary
from autosuggest.dictionary import BUILTIN_SOURCE, Dictionary


def test_builtin_fallback_when_no_file(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="autosuggest"):
        d = Dictionary()
    assert d.source == BUILTIN_SOURCE
    assert len(d) == 49
    assert d.index.suggest("ap") == ["apartment", "app", "appetite", "apple", "apply", "apricot"]
    assert "built-in" in caplog.text
    assert d.load_seconds >= 0.0


def test_loads_explicit_path(tmp_path) -> None:
    path = tmp_path / "mine.txt"
    path.write_text("# comment\nZebra\n\n  zeal \nzebra\n", encoding="utf-8")
    d = Dictionary(str(path))
    assert d.source == str(path)
    assert d.index.suggest("") == ["zeal", "zebra"]
    assert "zebra" in d


def test_words_txt_in_working_directory(tmp_path) -> None:
    (tmp_path / "words.txt").write_text("kiwi\nkale\n", encoding="utf-8")
    d = Dictionary()
    assert d.source == "words.txt"
    assert d.index.suggest("k") == ["kale", "kiwi"]


def test_missing_explicit_path_warns_and_falls_back(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="autosuggest"):
        d = Dictionary(str(tmp_path / "nope.txt"))
    assert d.source == BUILTIN_SOURCE
    assert "not found" in caplog.text


def test_empty_file_is_skipped(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n123\n", encoding="utf-8")
    d = Dictionary(str(path))
    assert d.source == BUILTIN_SOURCE
    assert len(d) == 49


def test_undecodable_file_is_skipped(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "bad.txt"
    path.write_bytes(b"\xff\xfe\xfa\n")
    with caplog.at_level(logging.WARNING, logger="autosuggest"):
        d = Dictionary(str(path))
    assert d.source == BUILTIN_SOURCE
    assert "Could not read" in caplog.text


def test_words_txt_beside_package(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    bundled = tmp_path / "bundled" / "words.txt"
    bundled.parent.mkdir()
    bundled.write_text("mango\nmelon\n", encoding="utf-8")
    monkeypatch.setattr(dictionary, "PACKAGE_WORD_LIST", str(bundled))

    d = Dictionary()
    assert d.source == str(bundled)
    assert d.index.suggest("m") == ["mango", "melon"]


def test_working_directory_list_wins_over_package_list(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    bundled = tmp_path / "bundled" / "words.txt"
    bundled.parent.mkdir()
    bundled.write_text("mango\n", encoding="utf-8")
    (tmp_path / "words.txt").write_text("kiwi\n", encoding="utf-8")
    monkeypatch.setattr(dictionary, "PACKAGE_WORD_LIST", str(bundled))

    assert Dictionary().source == "words.txt"
