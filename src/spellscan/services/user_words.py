"""Persistent list of words the user taught the checker."""

from __future__ import annotations

import logging
from pathlib import Path

from ..utils.file_io import append_line, read_text, write_text
from .errors import UserWordsError

__all__ = ["UserWordList", "DEFAULT_USER_WORDS_PATH"]

LOGGER = logging.getLogger(__name__)
DEFAULT_USER_WORDS_PATH = Path.home() / ".spellscan" / "user_words.txt"


class UserWordList:
    """Line-delimited UTF-8 word file: one word per line, exact matching.

    ``learn`` appends a line, ``unlearn`` rewrites the file without the
    matching lines. The file is read lazily on first access.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path).expanduser() if path else DEFAULT_USER_WORDS_PATH
        self._words: set[str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._load()

    def __len__(self) -> int:
        return len(self._load())

    def words(self) -> frozenset[str]:
        """Return a snapshot of the learned words."""

        return frozenset(self._load())

    def reload(self) -> None:
        self._words = None
        self._load()

    def learn(self, word: str) -> bool:
        """Add ``word``; return ``False`` when it was already known."""

        word = self._validate(word)
        words = self._load()
        if word in words:
            return False
        try:
            append_line(self._path, word)
        except OSError as exc:
            raise UserWordsError(f"Unable to update {self._path}: {exc}") from exc
        words.add(word)
        LOGGER.info("Learned %r", word)
        return True

    def unlearn(self, word: str) -> bool:
        """Remove every line equal to ``word``; return ``False`` if none matched."""

        word = self._validate(word)
        words = self._load()
        if word not in words:
            return False
        lines = self._read_lines()
        remaining = [line for line in lines if line and line != word]
        body = "".join(f"{line}\n" for line in remaining)
        try:
            write_text(self._path, body)
        except OSError as exc:
            raise UserWordsError(f"Unable to update {self._path}: {exc}") from exc
        words.discard(word)
        LOGGER.info("Unlearned %r", word)
        return True

    def _load(self) -> set[str]:
        if self._words is None:
            self._words = {line for line in self._read_lines() if line}
            LOGGER.debug("Loaded %d user word(s) from %s", len(self._words), self._path)
        return self._words

    def _read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        try:
            return read_text(self._path, encoding="utf-8").split("\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise UserWordsError(f"Unable to read {self._path}: {exc}") from exc

    @staticmethod
    def _validate(word: str) -> str:
        if not isinstance(word, str) or not word:
            raise ValueError("User words must be non-empty strings")
        if "\n" in word or "\r" in word:
            raise ValueError("User words cannot contain line breaks")
        return word
