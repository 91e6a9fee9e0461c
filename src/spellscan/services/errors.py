"""Error taxonomy of the checking capability."""

from __future__ import annotations

__all__ = [
    "SpellCheckError",
    "DictionaryNotFoundError",
    "UnsupportedBackendError",
    "UserWordsError",
]


class SpellCheckError(RuntimeError):
    """Base class for failures raised before the scanner can run."""


class DictionaryNotFoundError(SpellCheckError):
    """Raised when no dictionary is available for the requested language."""

    def __init__(self, language: str, detail: str | None = None) -> None:
        message = f"No dictionary available for language '{language}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.language = language


class UnsupportedBackendError(SpellCheckError):
    """Raised when settings name a checker backend that does not exist."""


class UserWordsError(SpellCheckError):
    """Raised when the user-word file cannot be read or written."""
