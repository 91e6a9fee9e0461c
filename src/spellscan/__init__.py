"""spellscan: word segmentation and misspelling-range scanning for text editors."""

from .core.ranges import InnerString, MisspellingRange, Token, WordCheck, WordSpan
from .scanner import (
    AnchorMode,
    CharCategory,
    ScanConfig,
    check_anchor_word,
    classify,
    find_misspelled_ranges,
    resolve_anchor_word,
)

__version__ = "0.1.0"

__all__ = [
    "AnchorMode",
    "CharCategory",
    "InnerString",
    "MisspellingRange",
    "ScanConfig",
    "Token",
    "WordCheck",
    "WordSpan",
    "check_anchor_word",
    "classify",
    "find_misspelled_ranges",
    "resolve_anchor_word",
]
