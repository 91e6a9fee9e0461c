"""Tests for Hunspell dictionary discovery and parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from spellscan.services.dictionaries import (
    find_dictionary,
    read_affix_encoding,
    read_affix_wordchars,
    read_dic_words,
)
from spellscan.services.errors import DictionaryNotFoundError


def _write_dictionary(root: Path, language: str = "xx_XX", *, aff: str | None = "SET UTF-8\n") -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / f"{language}.dic").write_text("3\nhello/S\nworld\nand/1,2\n", encoding="utf-8")
    if aff is not None:
        (root / f"{language}.aff").write_text(aff, encoding="utf-8")
    return root


def test_find_dictionary_searches_paths_in_order(tmp_path: Path) -> None:
    first = tmp_path / "empty"
    first.mkdir()
    second = _write_dictionary(tmp_path / "dicts")

    files = find_dictionary("xx_XX", [first, second])

    assert files.language == "xx_XX"
    assert files.dic == second / "xx_XX.dic"
    assert files.aff == second / "xx_XX.aff"


def test_find_dictionary_without_affix_file(tmp_path: Path) -> None:
    root = _write_dictionary(tmp_path, aff=None)

    assert find_dictionary("xx_XX", [root]).aff is None


def test_find_dictionary_raises_when_missing(tmp_path: Path) -> None:
    with pytest.raises(DictionaryNotFoundError) as excinfo:
        find_dictionary("zz_ZZ", [tmp_path])

    assert excinfo.value.language == "zz_ZZ"
    assert "zz_ZZ" in str(excinfo.value)


def test_read_dic_words_strips_flags_and_count(tmp_path: Path) -> None:
    root = _write_dictionary(tmp_path)

    assert read_dic_words(root / "xx_XX.dic") == {"hello", "world", "and"}


def test_read_dic_words_handles_escaped_slash_and_morphology(tmp_path: Path) -> None:
    dic = tmp_path / "escaped.dic"
    dic.write_text("2\nand\\/or/X\nrun/Y\tpo:verb\n", encoding="utf-8")

    assert read_dic_words(dic) == {"and/or", "run"}


def test_affix_encoding_and_wordchars(tmp_path: Path) -> None:
    aff = tmp_path / "de.aff"
    aff.write_bytes("SET ISO8859-1\nWORDCHARS -.é\n".encode("latin-1"))

    assert read_affix_encoding(aff) == "iso8859-1"
    assert read_affix_wordchars(aff) == frozenset({"-", ".", "é"})


def test_affix_without_set_defaults_to_utf8(tmp_path: Path) -> None:
    aff = tmp_path / "plain.aff"
    aff.write_text("TRY abc\n", encoding="utf-8")

    assert read_affix_encoding(aff) == "utf-8"
    assert read_affix_wordchars(aff) == frozenset()
