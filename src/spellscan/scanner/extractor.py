"""Extract single words from an inner string around an anchor offset."""

from __future__ import annotations

from ..core.ranges import WordSpan
from .classifier import CharCategory, classify, is_alnum_category

__all__ = [
    "find_word_within_string",
    "is_word_part",
    "join_kind",
    "ALNUM_JOINS",
    "NUMERIC_JOINS",
]

# Joins accepted between two letters/numbers in any combination.
ALNUM_JOINS: frozenset[str] = frozenset({".", "@"})
# Joins accepted only between two numbers (3.14, 1,000, 2-3, 1/2).
NUMERIC_JOINS: frozenset[str] = frozenset({"-", ",", "/"})


def _category_at(text: str, offset: int) -> CharCategory | None:
    if offset < 1 or offset > len(text):
        return None
    return classify(text[offset - 1])


def join_kind(text: str, offset: int) -> str | None:
    """Return the join character at ``offset`` when it glues two word characters.

    Apostrophes join any two letters/numbers (``it's``); ``.`` and ``@`` do the
    same (``e.g``, ``foo.com``, ``a@b``); ``-``, ``,`` and ``/`` only join
    numbers. A join at the first or last position never applies.
    """

    if offset <= 1 or offset >= len(text):
        return None
    char = text[offset - 1]
    category = classify(char)
    before = _category_at(text, offset - 1)
    after = _category_at(text, offset + 1)
    if category is CharCategory.APOSTROPHE or char in ALNUM_JOINS:
        if is_alnum_category(before) and is_alnum_category(after):
            return char
        return None
    if char in NUMERIC_JOINS:
        if before is CharCategory.NUMBER and after is CharCategory.NUMBER:
            return char
    return None


def is_word_part(text: str, offset: int) -> bool:
    """Return ``True`` when the character at 1-based ``offset`` belongs to a word."""

    category = _category_at(text, offset)
    if category is None:
        return False
    if is_alnum_category(category):
        return True
    return join_kind(text, offset) is not None


def find_word_within_string(
    inner: str,
    anchor_offset: int,
    string_start: int = 1,
) -> WordSpan | None:
    """Return the word covering ``anchor_offset`` inside ``inner``.

    ``anchor_offset`` is 1-based within ``inner`` and ``string_start`` is the
    buffer offset of the first character of ``inner``; the returned span is
    expressed in buffer coordinates. ``None`` means the anchor is not on a word.
    """

    length = len(inner or "")
    if length == 0:
        return None
    anchor = min(max(int(anchor_offset), 1), length)
    if not is_word_part(inner, anchor):
        return None

    first = anchor
    while first > 1 and is_word_part(inner, first - 1):
        first -= 1
    last = anchor
    while last < length and is_word_part(inner, last + 1):
        last += 1

    next_word: int | None = None
    cursor = last + 1
    while cursor <= length:
        if is_word_part(inner, cursor):
            next_word = cursor + string_start - 1
            break
        cursor += 1

    shift = string_start - 1
    return WordSpan(
        first_char=first + shift,
        last_char=last + shift,
        word=inner[first - 1 : last],
        next_word_char=next_word,
    )
