"""Locate Hunspell dictionaries and read the bits the scanner consumes."""

from __future__ import annotations

import codecs
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .errors import DictionaryNotFoundError

__all__ = [
    "DictionaryFiles",
    "default_search_paths",
    "find_dictionary",
    "read_affix_encoding",
    "read_affix_wordchars",
    "read_dic_words",
]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class DictionaryFiles:
    """Paths of a Hunspell ``.dic``/``.aff`` pair."""

    language: str
    dic: Path
    aff: Path | None = None


def default_search_paths() -> list[Path]:
    """Return the conventional Hunspell dictionary directories for this OS."""

    if sys.platform == "darwin":
        return [Path.home() / "Library" / "Spelling", Path("/Library/Spelling")]
    if sys.platform.startswith("win"):
        return [Path.home() / ".spellscan" / "dictionaries"]
    return [Path("/usr/share/hunspell"), Path("/usr/share/myspell/dicts"), Path("/usr/share/myspell")]


def find_dictionary(language: str, search_paths: Iterable[Path | str] | None = None) -> DictionaryFiles:
    """Return the dictionary files for ``language`` or raise :class:`DictionaryNotFoundError`."""

    directories: Sequence[Path | str] = list(search_paths) if search_paths else default_search_paths()
    for directory in directories:
        root = Path(directory).expanduser()
        dic = root / f"{language}.dic"
        if not dic.is_file():
            continue
        aff = root / f"{language}.aff"
        LOGGER.debug("Found dictionary for %s in %s", language, root)
        return DictionaryFiles(language=language, dic=dic, aff=aff if aff.is_file() else None)
    raise DictionaryNotFoundError(language, f"searched {', '.join(str(d) for d in directories)}")


def read_affix_encoding(aff_path: Path | str) -> str:
    """Return the ``SET`` encoding declared in an affix file (default UTF-8)."""

    with Path(aff_path).open("rb") as handle:
        for raw in handle:
            line = raw.strip()
            if line.startswith(b"SET"):
                parts = line.split()
                if len(parts) >= 2:
                    name = parts[1].decode("ascii", errors="ignore")
                    try:
                        return codecs.lookup(name).name
                    except LookupError:
                        LOGGER.warning("Unknown affix encoding %r in %s", name, aff_path)
                break
    return "utf-8"


def read_affix_wordchars(aff_path: Path | str) -> frozenset[str]:
    """Return the characters listed by ``WORDCHARS`` in an affix file."""

    encoding = read_affix_encoding(aff_path)
    with Path(aff_path).open("r", encoding=encoding, errors="replace") as handle:
        for line in handle:
            stripped = line.strip()
            if not stripped.startswith("WORDCHARS"):
                continue
            parts = stripped.split(None, 1)
            if len(parts) == 2:
                return frozenset(parts[1].strip())
    return frozenset()


def read_dic_words(dic_path: Path | str, *, encoding: str = "utf-8") -> set[str]:
    """Return the base words of a Hunspell ``.dic`` file (affix flags stripped)."""

    words: set[str] = set()
    with Path(dic_path).open("r", encoding=encoding, errors="ignore") as handle:
        # first line holds the approximate word count
        next(handle, None)
        for line in handle:
            entry = line.strip()
            if not entry:
                continue
            word = _split_flags(entry)
            if word:
                words.add(word)
    LOGGER.debug("Read %d word(s) from %s", len(words), dic_path)
    return words


def _split_flags(entry: str) -> str:
    # "word/FLAGS" with "\/" escaping a literal slash; morphology follows a tab
    entry = entry.split("\t", 1)[0]
    chars: list[str] = []
    escaped = False
    for char in entry:
        if escaped:
            chars.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "/":
            break
        else:
            chars.append(char)
    return "".join(chars).strip()
