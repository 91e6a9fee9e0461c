"""Detection of URLs, email addresses and domain-like tokens."""

from __future__ import annotations

from collections.abc import Collection

from ..core.ranges import Token

__all__ = [
    "TOP_LEVEL_DOMAINS",
    "URL_MARKERS",
    "URL_SCHEME_SEPARATOR",
    "string_is_url",
    "has_known_tld",
    "is_excluded_token",
]

URL_SCHEME_SEPARATOR = "://"
URL_MARKERS: tuple[str, ...] = (URL_SCHEME_SEPARATOR, ":\\", "@")

TOP_LEVEL_DOMAINS: frozenset[str] = frozenset(
    {
        # generic
        "com", "org", "net", "edu", "gov", "mil", "int", "info", "biz", "name",
        "pro", "aero", "coop", "museum", "mobi", "asia", "tel", "travel", "jobs",
        "cat", "io", "co", "ai", "app", "dev", "me", "tv", "cc", "ly", "fm",
        # country codes
        "ac", "ad", "ae", "ar", "at", "au", "ba", "be", "bg", "br", "by", "ca",
        "ch", "cl", "cn", "cz", "de", "dk", "ee", "es", "eu", "fi", "fr", "gr",
        "hk", "hr", "hu", "id", "ie", "il", "in", "is", "it", "jp", "kr", "kz",
        "li", "lt", "lu", "lv", "md", "mx", "my", "nl", "no", "nz", "pe", "ph",
        "pk", "pl", "pt", "ro", "rs", "ru", "se", "sg", "si", "sk", "su", "th",
        "tr", "tw", "ua", "uk", "us", "uz", "ve", "vn", "za",
    }
)


def string_is_url(value: str) -> bool:
    """Cheap containment check for URL, path and email markers."""

    if not value:
        return False
    return any(marker in value for marker in URL_MARKERS)


def has_known_tld(word: str, tlds: Collection[str] = TOP_LEVEL_DOMAINS) -> bool:
    """Return ``True`` when the last dot-delimited component of ``word`` is a TLD."""

    if "." not in word:
        return False
    suffix = word.rsplit(".", 1)[1]
    return suffix.casefold() in tlds


def is_excluded_token(token: Token, tlds: Collection[str] = TOP_LEVEL_DOMAINS) -> bool:
    """Return ``True`` when ``token`` must not be spell-checked."""

    if token.inside_url or token.email:
        return True
    if token.potential_domain:
        return has_known_tld(token.word, tlds)
    return False
