"""Tests for :mod:`spellscan.scanner.extractor`."""

from __future__ import annotations

from spellscan.core.ranges import WordSpan
from spellscan.scanner.extractor import find_word_within_string, is_word_part


def test_contraction_is_one_word() -> None:
    assert find_word_within_string("don't", 1) == WordSpan(1, 5, "don't", None)


def test_typographic_apostrophe_joins_too() -> None:
    span = find_word_within_string("it’s", 4)

    assert span is not None
    assert span.word == "it’s"


def test_outer_quotes_are_excluded() -> None:
    assert find_word_within_string("'quoted'", 4) == WordSpan(2, 7, "quoted", None)


def test_trailing_possessive_apostrophe_is_a_boundary() -> None:
    span = find_word_within_string("dogs'", 2)

    assert span is not None
    assert (span.first_char, span.last_char, span.word) == (1, 4, "dogs")


def test_reports_next_word_character() -> None:
    span = find_word_within_string("this/it's/test", 1)

    assert span == WordSpan(1, 4, "this", 6)


def test_next_word_links_walk_every_word_of_the_string() -> None:
    inner = "this/it's/test"
    words = []
    anchor: int | None = 1
    while anchor is not None:
        span = find_word_within_string(inner, anchor)
        assert span is not None
        words.append((span.first_char, span.last_char, span.word))
        anchor = span.next_word_char

    assert words == [(1, 4, "this"), (6, 9, "it's"), (11, 14, "test")]


def test_results_are_translated_to_buffer_offsets() -> None:
    span = find_word_within_string("(cat)", 3, string_start=10)

    assert span == WordSpan(11, 13, "cat", None)


def test_anchor_on_punctuation_has_no_word() -> None:
    assert find_word_within_string("(cat)", 1) is None
    assert find_word_within_string("", 1) is None


def test_numeric_joins() -> None:
    assert find_word_within_string("3.14", 3).word == "3.14"  # type: ignore[union-attr]
    assert find_word_within_string("1,000", 1).word == "1,000"  # type: ignore[union-attr]
    assert find_word_within_string("1/2", 3).word == "1/2"  # type: ignore[union-attr]


def test_hyphen_between_letters_splits_words() -> None:
    span = find_word_within_string("well-known", 1)

    assert span == WordSpan(1, 4, "well", 6)


def test_abbreviation_keeps_inner_dots_only() -> None:
    span = find_word_within_string("e.g.", 1)

    assert span == WordSpan(1, 3, "e.g", None)


def test_whitespace_inside_string_is_tolerated() -> None:
    span = find_word_within_string("ab cd", 4)

    assert span is not None
    assert (span.first_char, span.last_char, span.word) == (4, 5, "cd")


def test_is_word_part_edges() -> None:
    text = "'a.b'"

    assert [is_word_part(text, i) for i in range(0, 7)] == [False, False, True, True, True, False, False]
