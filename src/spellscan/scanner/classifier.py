"""Codepoint classification used by every scanner stage."""

from __future__ import annotations

import unicodedata
from enum import Enum

__all__ = ["CharCategory", "classify", "is_alnum_category", "APOSTROPHES", "NBSP"]

NBSP = "\u00a0"
APOSTROPHES: frozenset[str] = frozenset({"'", "\u2019"})

# Codepoints carrying the Unicode White_Space property. U+00A0 is listed for
# completeness but is classified as NON_BREAKING before this table is consulted.
_WHITE_SPACE: frozenset[str] = frozenset(
    chr(cp)
    for cp in (
        *range(0x0009, 0x000E),
        0x0020,
        0x0085,
        0x00A0,
        0x1680,
        *range(0x2000, 0x200B),
        0x2028,
        0x2029,
        0x202F,
        0x205F,
        0x3000,
    )
)


class CharCategory(Enum):
    """Scanner-level category of a single character."""

    LETTER = "letter"
    NUMBER = "number"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    NON_BREAKING = "non_breaking"
    APOSTROPHE = "apostrophe"


def classify(char: str | int) -> CharCategory:
    """Return the :class:`CharCategory` of ``char`` (a character or codepoint)."""

    if isinstance(char, int):
        try:
            char = chr(char)
        except (ValueError, OverflowError):
            return CharCategory.PUNCTUATION
    if len(char) != 1:
        return CharCategory.PUNCTUATION
    if char == NBSP:
        return CharCategory.NON_BREAKING
    if char in APOSTROPHES:
        return CharCategory.APOSTROPHE
    general = unicodedata.category(char)
    if general.startswith("L"):
        return CharCategory.LETTER
    if general.startswith("N"):
        return CharCategory.NUMBER
    if char in _WHITE_SPACE:
        return CharCategory.WHITESPACE
    return CharCategory.PUNCTUATION


def is_alnum_category(category: CharCategory | None) -> bool:
    return category is CharCategory.LETTER or category is CharCategory.NUMBER
