"""Structured helpers for representing scanned text spans.

All offsets in this module are 1-based character indices and ranges are
inclusive on both ends, matching the addressing used by the scanner.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(slots=True, frozen=True)
class MisspellingRange(Sequence[int]):
    """Inclusive ``(start, end)`` character span of a misspelled word."""

    start: int
    end: int

    def __post_init__(self) -> None:
        start = self._coerce_index(self.start, "start")
        end = self._coerce_index(self.end, "end")
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @staticmethod
    def _coerce_index(value: Any, label: str) -> int:
        try:
            number = int(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"MisspellingRange {label} must be an integer") from exc
        if number < 1:
            return 1
        return number

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> int | tuple[int, ...]:
        if isinstance(index, slice):
            return self.to_tuple()[index]
        if index == 0:
            return self.start
        if index == 1:
            return self.end
        raise IndexError("MisspellingRange index out of range")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        """Return the number of characters covered by the range."""

        return self.end - self.start + 1

    def contains(self, offset: int) -> bool:
        """Return ``True`` when ``offset`` falls inside the range."""

        return self.start <= offset <= self.end

    def slice_of(self, text: str) -> str:
        """Return the characters of ``text`` covered by the range."""

        return text[self.start - 1 : self.end]

    def to_tuple(self) -> tuple[int, int]:
        """Return the range as a ``(start, end)`` tuple."""

        return (self.start, self.end)

    def to_dict(self) -> dict[str, int]:
        """Return the range as a JSON-friendly object."""

        return {"start": self.start, "end": self.end}

    @classmethod
    def from_value(cls, value: Any) -> MisspellingRange:
        """Coerce ``value`` into a :class:`MisspellingRange`."""

        if isinstance(value, MisspellingRange):
            return value
        if isinstance(value, Mapping):
            start = value.get("start")
            end = value.get("end")
            if start is None or end is None:
                raise ValueError("MisspellingRange mappings require start and end keys")
            return cls(start, end)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            seq = list(value)
            if len(seq) != 2:
                raise ValueError("MisspellingRange sequences must have exactly two entries")
            return cls(seq[0], seq[1])
        start = getattr(value, "first_char", None)
        end = getattr(value, "last_char", None)
        if start is not None and end is not None:
            return cls(start, end)
        raise TypeError("Unsupported MisspellingRange input")


@dataclass(slots=True, frozen=True)
class InnerString:
    """Whitespace-free run of a buffer located around an anchor."""

    first_char: int
    last_char: int
    text: str
    anchor_offset: int


@dataclass(slots=True, frozen=True)
class WordSpan:
    """A single spell-checkable word and its buffer-relative span.

    ``next_word_char`` is the buffer offset of the next word character inside
    the same inner string, or ``None`` when the word is the last one.
    """

    first_char: int
    last_char: int
    word: str
    next_word_char: int | None = None

    def to_range(self) -> MisspellingRange:
        return MisspellingRange(self.first_char, self.last_char)


@dataclass(slots=True, frozen=True)
class Token:
    """A token produced by the streaming batch tokenizer."""

    first_char: int
    last_char: int
    word: str
    inside_url: bool = False
    email: bool = False
    potential_domain: bool = False

    def to_span(self) -> WordSpan:
        return WordSpan(self.first_char, self.last_char, self.word)


@dataclass(slots=True, frozen=True)
class WordCheck:
    """Outcome of checking one anchored word."""

    span: WordSpan
    correct: bool


__all__ = ["MisspellingRange", "InnerString", "WordSpan", "Token", "WordCheck"]
