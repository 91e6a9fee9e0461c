"""Checking capability: backends, dictionaries, user words and settings."""

from .checkers import (
    BACKEND_CHOICES,
    EnchantChecker,
    LayeredChecker,
    WordChecker,
    WordListChecker,
    build_checker,
    build_scan_config,
)
from .dictionaries import DictionaryFiles, find_dictionary, read_affix_wordchars, read_dic_words
from .errors import DictionaryNotFoundError, SpellCheckError, UnsupportedBackendError, UserWordsError
from .settings import SettingsStore, SpellSettings
from .user_words import UserWordList

__all__ = [
    "BACKEND_CHOICES",
    "DictionaryFiles",
    "DictionaryNotFoundError",
    "EnchantChecker",
    "LayeredChecker",
    "SettingsStore",
    "SpellCheckError",
    "SpellSettings",
    "UnsupportedBackendError",
    "UserWordList",
    "UserWordsError",
    "WordChecker",
    "WordListChecker",
    "build_checker",
    "build_scan_config",
    "find_dictionary",
    "read_affix_wordchars",
    "read_dic_words",
]
