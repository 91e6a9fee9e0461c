"""Batch tokenizer and misspelling range finder for whole buffers."""

from __future__ import annotations

import logging
from typing import Iterator

from ..core.ranges import MisspellingRange, Token
from .boundaries import chars_within_inner_whitespace_boundaries, is_whitespace_at
from .classifier import classify, is_alnum_category
from .config import ScanConfig
from .extractor import join_kind
from .urls import URL_SCHEME_SEPARATOR, is_excluded_token

__all__ = ["iter_tokens", "find_misspelled_ranges"]

LOGGER = logging.getLogger(__name__)


def iter_tokens(text: str, start: int = 1) -> Iterator[Token]:
    """Yield the tokens of ``text`` that end at or after ``start``.

    A ``start`` inside a word rewinds to the beginning of its inner string so
    token boundaries are identical whatever offset the scan starts from.
    """

    length = len(text or "")
    start = max(int(start), 1)
    if start > length:
        return

    cursor = start
    enclosing = chars_within_inner_whitespace_boundaries(text, start)
    if enclosing is not None and enclosing.first_char < start:
        cursor = enclosing.first_char

    while cursor <= length:
        while cursor <= length and not is_alnum_category(classify(text[cursor - 1])):
            cursor += 1
        if cursor > length:
            return

        first = last = cursor
        inside_url = email = potential_domain = False
        while last < length:
            following = last + 1
            if inside_url:
                if is_whitespace_at(text, following):
                    break
                last = following
                continue
            if text.startswith(URL_SCHEME_SEPARATOR, following - 1):
                inside_url = True
                last = following
                continue
            if is_alnum_category(classify(text[following - 1])):
                last = following
                continue
            joined = join_kind(text, following)
            if joined is None:
                break
            if joined == "@":
                email = True
            elif joined == ".":
                potential_domain = True
            # the join character and the word character after it
            last = following + 1

        if last >= start:
            yield Token(
                first_char=first,
                last_char=last,
                word=text[first - 1 : last],
                inside_url=inside_url,
                email=email,
                potential_domain=potential_domain,
            )
        cursor = last + 1


def find_misspelled_ranges(
    text: str,
    start_offset: int = 1,
    *,
    config: ScanConfig,
) -> list[MisspellingRange]:
    """Return the ordered ranges of misspelled words from ``start_offset`` on."""

    ranges: list[MisspellingRange] = []
    scanned = 0
    for token in iter_tokens(text, start_offset):
        scanned += 1
        if is_excluded_token(token, config.tlds):
            continue
        if not config.check_word(token.word):
            ranges.append(MisspellingRange(token.first_char, token.last_char))
    LOGGER.debug("Scanned %d token(s); %d misspelled", scanned, len(ranges))
    return ranges
