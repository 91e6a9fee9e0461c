"""Explicit configuration threaded through every scanner call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .urls import TOP_LEVEL_DOMAINS

__all__ = ["ScanConfig", "WordCheckFn"]

WordCheckFn = Callable[[str], bool]


def _accept_everything(word: str) -> bool:
    return True


@dataclass(slots=True, frozen=True)
class ScanConfig:
    """Checker capability plus the character sets the scanner consults.

    ``check_word`` returns whether a word is spelled correctly for the active
    language. ``word_chars`` holds the extra word characters of the loaded
    dictionary (Hunspell ``WORDCHARS``); typing one of them never completes a
    word.
    """

    check_word: WordCheckFn = _accept_everything
    word_chars: frozenset[str] = field(default_factory=frozenset)
    tlds: frozenset[str] = TOP_LEVEL_DOMAINS

    def __post_init__(self) -> None:
        if not callable(self.check_word):
            raise TypeError("ScanConfig.check_word must be callable")
        object.__setattr__(self, "word_chars", frozenset(self.word_chars or ()))
        object.__setattr__(self, "tlds", frozenset(t.casefold() for t in self.tlds))
