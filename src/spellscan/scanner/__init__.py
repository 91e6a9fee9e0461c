"""Word segmentation and misspelling-range scanning.

The batch path (:func:`find_misspelled_ranges`) and the incremental path
(:func:`resolve_anchor_word`) share one word-part predicate so both agree on
word boundaries for identical input.
"""

from .anchor import AnchorMode, check_anchor_word, completes_word, resolve_anchor_word, selection_is_whole_word
from .batch import find_misspelled_ranges, iter_tokens
from .boundaries import chars_within_inner_whitespace_boundaries
from .classifier import CharCategory, classify
from .config import ScanConfig
from .extractor import find_word_within_string, is_word_part
from .urls import TOP_LEVEL_DOMAINS, has_known_tld, is_excluded_token, string_is_url

__all__ = [
    "AnchorMode",
    "CharCategory",
    "ScanConfig",
    "TOP_LEVEL_DOMAINS",
    "chars_within_inner_whitespace_boundaries",
    "check_anchor_word",
    "classify",
    "completes_word",
    "find_misspelled_ranges",
    "find_word_within_string",
    "has_known_tld",
    "is_excluded_token",
    "is_word_part",
    "iter_tokens",
    "resolve_anchor_word",
    "selection_is_whole_word",
    "string_is_url",
]
