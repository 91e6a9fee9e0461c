"""Incremental resolution of the single word affected by an edit."""

from __future__ import annotations

import logging
from enum import Enum

from ..core.ranges import WordCheck, WordSpan
from .batch import iter_tokens
from .boundaries import chars_within_inner_whitespace_boundaries, is_whitespace_at
from .classifier import CharCategory, classify, is_alnum_category
from .config import ScanConfig
from .extractor import find_word_within_string, is_word_part
from .urls import has_known_tld, is_excluded_token, string_is_url

__all__ = [
    "AnchorMode",
    "resolve_anchor_word",
    "check_anchor_word",
    "completes_word",
    "selection_is_whole_word",
]

LOGGER = logging.getLogger(__name__)

_WORD_END_CATEGORIES: frozenset[CharCategory] = frozenset(
    {
        CharCategory.PUNCTUATION,
        CharCategory.WHITESPACE,
        CharCategory.NON_BREAKING,
        CharCategory.APOSTROPHE,
    }
)


class AnchorMode(Enum):
    """How the anchor passed to :func:`resolve_anchor_word` was derived."""

    WORD_JUST_COMPLETED = "word_just_completed"
    WORD_AROUND_INSERTION_POINT = "word_around_insertion_point"
    SELECTED_WORD = "selected_word"


def completes_word(char: str, config: ScanConfig) -> bool:
    """Return ``True`` when typing ``char`` may finish the word before it."""

    if not char or char in config.word_chars:
        return False
    return classify(char) in _WORD_END_CATEGORIES


def selection_is_whole_word(text: str, start: int, end: int) -> bool:
    """Return ``True`` when ``[start, end]`` covers word characters only.

    A selection flanked by a letter or number is part of a longer word and is
    rejected, as is any selection holding a hard word boundary.
    """

    if start > end:
        start, end = end, start
    if start < 1 or end > len(text):
        return False
    for offset in range(start, end + 1):
        if not is_word_part(text, offset):
            return False
    if start > 1 and is_alnum_category(classify(text[start - 2])):
        return False
    if end < len(text) and is_alnum_category(classify(text[end])):
        return False
    return True


def resolve_anchor_word(
    text: str,
    anchor: int,
    mode: AnchorMode,
    *,
    config: ScanConfig | None = None,
    selection_end: int | None = None,
) -> WordSpan | None:
    """Return the one word an edit at ``anchor`` affects, if any.

    ``anchor`` is a 1-based character index whose meaning depends on ``mode``:
    the character just typed, the character right after the caret, or the
    first selected character (with ``selection_end`` as the last one).
    """

    active = config or ScanConfig()
    length = len(text or "")
    if length == 0:
        return None
    anchor = int(anchor)

    if mode is AnchorMode.WORD_JUST_COMPLETED:
        if anchor < 1 or anchor > length:
            return None
        if not completes_word(text[anchor - 1], active):
            return None
        return _word_at(text, anchor - 1, active)

    if mode is AnchorMode.WORD_AROUND_INSERTION_POINT:
        span = _word_at(text, anchor, active)
        if span is None:
            span = _word_at(text, anchor - 1, active)
        return span

    if mode is AnchorMode.SELECTED_WORD:
        end = anchor if selection_end is None else int(selection_end)
        if not selection_is_whole_word(text, anchor, end):
            return None
        return _word_at(text, min(anchor, end), active)

    raise ValueError(f"Unsupported anchor mode: {mode!r}")


def check_anchor_word(
    text: str,
    anchor: int,
    mode: AnchorMode,
    *,
    config: ScanConfig,
    selection_end: int | None = None,
) -> WordCheck | None:
    """Resolve the anchored word and report whether it is spelled correctly."""

    span = resolve_anchor_word(text, anchor, mode, config=config, selection_end=selection_end)
    if span is None:
        return None
    correct = bool(config.check_word(span.word))
    LOGGER.debug("Checked %r at %d-%d: correct=%s", span.word, span.first_char, span.last_char, correct)
    return WordCheck(span=span, correct=correct)


def _word_at(text: str, anchor: int, config: ScanConfig) -> WordSpan | None:
    if anchor < 1 or anchor > len(text) or is_whitespace_at(text, anchor):
        return None
    inner = chars_within_inner_whitespace_boundaries(text, anchor)
    if inner is None:
        return None

    if string_is_url(inner.text):
        return _word_in_marked_string(inner.text, inner.anchor_offset, inner.first_char, config)

    span = find_word_within_string(inner.text, inner.anchor_offset, inner.first_char)
    if span is None:
        return None
    if has_known_tld(span.word, config.tlds):
        return None
    return span


def _word_in_marked_string(
    inner: str,
    anchor_offset: int,
    string_start: int,
    config: ScanConfig,
) -> WordSpan | None:
    # Strings holding URL/email markers are re-tokenized with the batch rules so
    # that words sharing the string with a URL keep their batch boundaries.
    shift = string_start - 1
    match = None
    for token in iter_tokens(inner):
        if match is not None:
            return WordSpan(match.first_char, match.last_char, match.word, token.first_char + shift)
        if token.first_char > anchor_offset:
            return None
        if token.last_char >= anchor_offset:
            if is_excluded_token(token, config.tlds):
                return None
            match = WordSpan(token.first_char + shift, token.last_char + shift, token.word)
    return match
