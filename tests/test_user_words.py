"""Tests for the persistent user word list."""

from __future__ import annotations

from pathlib import Path

import pytest

from spellscan.services.errors import UserWordsError
from spellscan.services.user_words import UserWordList


def test_missing_file_is_an_empty_list(tmp_path: Path) -> None:
    words = UserWordList(tmp_path / "user_words.txt")

    assert len(words) == 0
    assert "anything" not in words


def test_learn_appends_and_persists(tmp_path: Path) -> None:
    path = tmp_path / "user_words.txt"
    words = UserWordList(path)

    assert words.learn("spellscan") is True
    assert words.learn("spellscan") is False
    assert words.learn("Qt") is True

    assert path.read_text(encoding="utf-8") == "spellscan\nQt\n"
    assert UserWordList(path).words() == frozenset({"spellscan", "Qt"})


def test_matching_is_exact(tmp_path: Path) -> None:
    words = UserWordList(tmp_path / "user_words.txt")
    words.learn("Qt")

    assert "Qt" in words
    assert "qt" not in words


def test_unlearn_rewrites_without_matches(tmp_path: Path) -> None:
    path = tmp_path / "user_words.txt"
    path.write_text("alpha\nbeta\n\nalpha\ngamma", encoding="utf-8")
    words = UserWordList(path)

    assert words.unlearn("alpha") is True
    assert words.unlearn("alpha") is False

    assert path.read_text(encoding="utf-8") == "beta\ngamma\n"
    assert words.words() == frozenset({"beta", "gamma"})


def test_reload_picks_up_external_changes(tmp_path: Path) -> None:
    path = tmp_path / "user_words.txt"
    words = UserWordList(path)
    assert len(words) == 0

    path.write_text("fresh\n", encoding="utf-8")
    words.reload()

    assert "fresh" in words


@pytest.mark.parametrize("word", ["", "two\nlines"])
def test_invalid_words_are_rejected(tmp_path: Path, word: str) -> None:
    with pytest.raises(ValueError):
        UserWordList(tmp_path / "user_words.txt").learn(word)


def test_unreadable_file_raises_user_words_error(tmp_path: Path) -> None:
    path = tmp_path / "user_words.txt"
    path.mkdir()

    with pytest.raises(UserWordsError):
        len(UserWordList(path))
