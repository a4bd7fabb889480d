"""Tests for word-list loading and word approval."""

from __future__ import annotations

import asyncio
import logging

import tileplay.dictionary as dictionary_module
from tileplay.dictionary import AsyncValidator, Dictionary


class TestLoading:
    def test_loads_word_file(self, tmp_path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("cat\nDOG\n  tar  \nA\nit's\n\n", encoding="utf-8")
        d = Dictionary(str(path))
        assert d.words == {"CAT", "DOG", "TAR"}
        assert d.source == str(path)
        assert d.trie.is_word("TAR")

    def test_missing_file_falls_back(self, monkeypatch, tmp_path, caplog) -> None:
        monkeypatch.setattr(dictionary_module, "DEFAULT_SEARCH_PATHS", ())
        with caplog.at_level(logging.WARNING, logger="tileplay"):
            d = Dictionary(str(tmp_path / "missing.txt"))
        assert d.source == "<fallback>"
        assert "CAT" in d
        assert d.trie.is_word("QI")
        assert "built-in minimal word list" in caplog.text

    def test_words_from_memory(self, small_dictionary: Dictionary) -> None:
        assert small_dictionary.source == "<memory>"
        assert "cats" in small_dictionary
        assert len(small_dictionary) == small_dictionary.trie.count_words()


class TestApproval:
    def test_approve_returns_invalid_subset(self, small_dictionary: Dictionary) -> None:
        assert small_dictionary.approve(["CAT", "XQZ", "TAR", "CATZ"]) == ["XQZ", "CATZ"]
        assert small_dictionary.approve(["CAT", "ACT"]) == []

    def test_async_validator(self, small_dictionary: Dictionary) -> None:
        validator = AsyncValidator(small_dictionary)
        assert asyncio.run(validator.approve(["CAT", "XQZ"])) == ["XQZ"]
