"""Core value types shared by the scanner and the editor layer."""

from .ranges import InnerString, MisspellingRange, Token, WordCheck, WordSpan

__all__ = ["InnerString", "MisspellingRange", "Token", "WordCheck", "WordSpan"]
