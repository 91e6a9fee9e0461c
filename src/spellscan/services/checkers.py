"""Spell-checking backends and the wiring that turns settings into a ScanConfig."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Protocol, runtime_checkable

from ..scanner.config import ScanConfig
from ..utils.file_io import read_text
from .dictionaries import find_dictionary, read_affix_encoding, read_affix_wordchars, read_dic_words
from .errors import DictionaryNotFoundError, UnsupportedBackendError
from .user_words import UserWordList

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from .settings import SpellSettings

__all__ = [
    "WordChecker",
    "WordListChecker",
    "EnchantChecker",
    "LayeredChecker",
    "BACKEND_CHOICES",
    "build_checker",
    "build_scan_config",
]

LOGGER = logging.getLogger(__name__)
BACKEND_CHOICES: tuple[str, ...] = ("enchant", "wordlist")


@runtime_checkable
class WordChecker(Protocol):
    """Anything able to tell whether a single word is spelled correctly."""

    def check(self, word: str) -> bool:
        ...


class WordListChecker:
    """Checker backed by an in-memory set of accepted words.

    Capitalised and upper-case words also match their lower-case entry, and
    tokens holding no letters at all (``3.14``, ``1/2``) are always accepted.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = {w for w in words if w}

    def __len__(self) -> int:
        return len(self._words)

    @classmethod
    def from_file(cls, path: Path | str) -> WordListChecker:
        """Load a plain word list, one word per line."""

        text = read_text(path)
        return cls(line.strip() for line in text.split("\n"))

    @classmethod
    def from_hunspell(cls, dic_path: Path | str, aff_path: Path | str | None = None) -> WordListChecker:
        """Load the base words of a Hunspell dictionary."""

        encoding = read_affix_encoding(aff_path) if aff_path else "utf-8"
        return cls(read_dic_words(dic_path, encoding=encoding))

    def add(self, word: str) -> None:
        if word:
            self._words.add(word)

    def check(self, word: str) -> bool:
        if not word or not any(char.isalpha() for char in word):
            return True
        for candidate in _spelling_variants(word):
            if candidate in self._words:
                return True
        return False


class EnchantChecker:
    """Checker delegating to an Enchant dictionary (Hunspell, Aspell, OS providers)."""

    def __init__(self, language: str) -> None:
        try:  # Local import so the scanner works without the enchant C library.
            import enchant
            from enchant.errors import DictNotFoundError
        except ImportError as exc:
            raise UnsupportedBackendError(
                "pyenchant and the enchant library must be installed for the 'enchant' backend."
            ) from exc

        try:
            self._dict: Any = enchant.Dict(language)
        except DictNotFoundError as exc:
            raise DictionaryNotFoundError(language, str(exc)) from exc
        self.language = language
        LOGGER.debug(
            "Enchant dictionary %s loaded via %s", language, getattr(self._dict.provider, "name", "?")
        )

    def check(self, word: str) -> bool:
        if not word:
            return True
        return bool(self._dict.check(word))


class LayeredChecker:
    """Accept user-learned words first, then defer to the backend checker."""

    def __init__(self, backend: WordChecker, user_words: UserWordList | None = None) -> None:
        self._backend = backend
        self._user_words = user_words

    @property
    def user_words(self) -> UserWordList | None:
        return self._user_words

    def check(self, word: str) -> bool:
        if self._user_words is not None and word in self._user_words:
            return True
        return self._backend.check(word)

    def __call__(self, word: str) -> bool:
        return self.check(word)


def build_checker(settings: SpellSettings) -> LayeredChecker:
    """Instantiate the backend named by ``settings`` layered over the user words."""

    backend_name = (settings.backend or "").strip().lower()
    backend: WordChecker
    if backend_name == "enchant":
        backend = EnchantChecker(settings.language)
    elif backend_name == "wordlist":
        backend = _load_wordlist(settings)
    else:
        raise UnsupportedBackendError(
            f"Unknown checker backend '{settings.backend}' (choose from {', '.join(BACKEND_CHOICES)})"
        )
    user_words = UserWordList(settings.user_words_path) if settings.user_words_path else UserWordList()
    LOGGER.info("Using %s backend for %s", backend_name, settings.language)
    return LayeredChecker(backend, user_words)


def build_scan_config(settings: SpellSettings, *, checker: WordChecker | None = None) -> ScanConfig:
    """Return the :class:`ScanConfig` for ``settings``.

    Word characters come from the dictionary's affix ``WORDCHARS`` when one can
    be found, merged with ``settings.extra_word_chars``.
    """

    active = checker or build_checker(settings)
    word_chars = set(settings.extra_word_chars or "")
    try:
        files = find_dictionary(settings.language, settings.dictionary_paths or None)
    except DictionaryNotFoundError:
        LOGGER.debug("No affix file for %s; using configured word characters only", settings.language)
    else:
        if files.aff is not None:
            word_chars.update(read_affix_wordchars(files.aff))
    return ScanConfig(check_word=active.check, word_chars=frozenset(word_chars))


def _load_wordlist(settings: SpellSettings) -> WordListChecker:
    try:
        if settings.wordlist_path:
            return WordListChecker.from_file(Path(settings.wordlist_path).expanduser())
        files = find_dictionary(settings.language, settings.dictionary_paths or None)
        return WordListChecker.from_hunspell(files.dic, files.aff)
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryNotFoundError(settings.language, str(exc)) from exc


def _spelling_variants(word: str) -> list[str]:
    variants = [word]
    normalized = word.replace("\u2019", "'")
    if normalized != word:
        variants.append(normalized)
    for value in list(variants):
        if value[:1].isupper():
            variants.append(value.lower())
            variants.append(value[:1] + value[1:].lower())
    return variants
