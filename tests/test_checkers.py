"""Tests for the checker backends and ScanConfig wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from spellscan.scanner.batch import find_misspelled_ranges
from spellscan.services.checkers import (
    EnchantChecker,
    LayeredChecker,
    WordChecker,
    WordListChecker,
    build_checker,
    build_scan_config,
)
from spellscan.services.errors import DictionaryNotFoundError, UnsupportedBackendError
from spellscan.services.settings import SpellSettings
from spellscan.services.user_words import UserWordList


def _hunspell_dir(root: Path) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "xx_XX.dic").write_text("3\ncat/S\ndog\ndon't\n", encoding="utf-8")
    (root / "xx_XX.aff").write_text("SET UTF-8\nWORDCHARS -\n", encoding="utf-8")
    return root


class TestWordListChecker:
    def test_case_variants(self) -> None:
        checker = WordListChecker(["paris", "cat"])

        assert checker.check("cat")
        assert checker.check("Cat")
        assert checker.check("CAT")
        assert not checker.check("cta")

    def test_lower_case_does_not_match_proper_noun(self) -> None:
        checker = WordListChecker(["Paris"])

        assert checker.check("Paris")
        assert not checker.check("paris")

    def test_typographic_apostrophe_matches_ascii_entry(self) -> None:
        assert WordListChecker(["don't"]).check("don’t")

    def test_words_without_letters_are_accepted(self) -> None:
        checker = WordListChecker()

        assert checker.check("3.14")
        assert checker.check("")

    def test_from_file_and_add(self, tmp_path: Path) -> None:
        path = tmp_path / "words.txt"
        path.write_text("alpha\n  beta \n\n", encoding="utf-8")

        checker = WordListChecker.from_file(path)
        checker.add("gamma")

        assert len(checker) == 3
        assert checker.check("beta") and checker.check("gamma")

    def test_from_hunspell(self, tmp_path: Path) -> None:
        root = _hunspell_dir(tmp_path)

        checker = WordListChecker.from_hunspell(root / "xx_XX.dic", root / "xx_XX.aff")

        assert checker.check("dog")
        assert not checker.check("cats")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(WordListChecker(), WordChecker)


def test_layered_checker_prefers_user_words(tmp_path: Path) -> None:
    user_words = UserWordList(tmp_path / "user_words.txt")
    user_words.learn("spellscan")
    checker = LayeredChecker(WordListChecker(["cat"]), user_words)

    assert checker("spellscan")
    assert checker.check("cat")
    assert not checker.check("dgo")
    assert checker.user_words is user_words


def test_build_checker_wordlist_from_file(tmp_path: Path) -> None:
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("cat\n", encoding="utf-8")
    settings = SpellSettings(
        backend="wordlist",
        wordlist_path=str(wordlist),
        user_words_path=str(tmp_path / "user_words.txt"),
    )

    checker = build_checker(settings)

    assert checker.check("cat")
    assert not checker.check("dog")


def test_build_checker_wordlist_from_hunspell_paths(tmp_path: Path) -> None:
    root = _hunspell_dir(tmp_path / "dicts")
    settings = SpellSettings(
        language="xx_XX",
        backend="wordlist",
        dictionary_paths=[str(root)],
        user_words_path=str(tmp_path / "user_words.txt"),
    )

    assert build_checker(settings).check("dog")


def test_build_checker_missing_wordlist(tmp_path: Path) -> None:
    settings = SpellSettings(backend="wordlist", wordlist_path=str(tmp_path / "missing.txt"))

    with pytest.raises(DictionaryNotFoundError):
        build_checker(settings)


def test_build_checker_unknown_backend() -> None:
    with pytest.raises(UnsupportedBackendError):
        build_checker(SpellSettings(backend="telepathy"))


def test_build_scan_config_merges_word_chars(tmp_path: Path) -> None:
    root = _hunspell_dir(tmp_path / "dicts")
    settings = SpellSettings(
        language="xx_XX",
        backend="wordlist",
        dictionary_paths=[str(root)],
        user_words_path=str(tmp_path / "user_words.txt"),
        extra_word_chars="_",
    )

    config = build_scan_config(settings)

    assert config.word_chars == frozenset({"-", "_"})
    assert find_misspelled_ranges("cat dgo", config=config)[0].to_tuple() == (5, 7)


def test_build_scan_config_uses_given_checker(tmp_path: Path) -> None:
    settings = SpellSettings(language="zz_ZZ", dictionary_paths=[str(tmp_path)])

    config = build_scan_config(settings, checker=WordListChecker(["ok"]))

    assert config.word_chars == frozenset()
    assert config.check_word("ok")
    assert not config.check_word("nope")


def test_enchant_checker_reports_missing_dictionary() -> None:
    pytest.importorskip("enchant")

    with pytest.raises(DictionaryNotFoundError):
        EnchantChecker("zz_NOT_A_LANGUAGE")
