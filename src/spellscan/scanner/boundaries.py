"""Locate whitespace-delimited inner strings inside a text buffer."""

from __future__ import annotations

from ..core.ranges import InnerString
from .classifier import CharCategory, classify

__all__ = ["chars_within_inner_whitespace_boundaries", "is_whitespace_at"]


def is_whitespace_at(text: str, offset: int) -> bool:
    """Return ``True`` when the 1-based ``offset`` holds a whitespace character."""

    return classify(text[offset - 1]) is CharCategory.WHITESPACE


def chars_within_inner_whitespace_boundaries(text: str, anchor: int) -> InnerString | None:
    """Return the inner string around ``anchor``.

    ``anchor`` is a 1-based character index; ``0`` (or anything below) scans
    forward from the start of the buffer and anchors past the end are clamped
    to the last character. When the anchor sits on whitespace the next
    non-whitespace run to its right is returned. ``None`` means no run exists.
    """

    length = len(text or "")
    if length == 0:
        return None
    position = min(max(int(anchor), 0), length)

    if position == 0 or is_whitespace_at(text, position):
        first = _next_non_whitespace(text, max(position, 1))
        if first is None:
            return None
    else:
        first = position
        while first > 1 and not is_whitespace_at(text, first - 1):
            first -= 1

    last = first
    while last < length and not is_whitespace_at(text, last + 1):
        last += 1

    anchor_offset = max(1, position - first + 1)
    return InnerString(
        first_char=first,
        last_char=last,
        text=text[first - 1 : last],
        anchor_offset=anchor_offset,
    )


def _next_non_whitespace(text: str, offset: int) -> int | None:
    length = len(text)
    cursor = offset
    while cursor <= length:
        if not is_whitespace_at(text, cursor):
            return cursor
        cursor += 1
    return None
