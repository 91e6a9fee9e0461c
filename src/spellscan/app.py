"""Command-line entry point for spellscan."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence, TextIO, get_args, get_origin, get_type_hints

from .core.ranges import MisspellingRange
from .scanner.batch import find_misspelled_ranges
from .services.checkers import build_checker, build_scan_config
from .services.errors import SpellCheckError
from .services.settings import SettingsStore, SpellSettings
from .services.user_words import UserWordList
from .utils.logging import configure_logging
from .utils.file_io import read_text

_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}
_FALSE_VALUES = {"0", "false", "no", "off", "disabled"}
_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISSPELLED = 1
EXIT_ERROR = 2


def load_settings(
    path: Path | None = None,
    *,
    store: SettingsStore | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> SpellSettings:
    """Load persisted settings or fall back to defaults."""

    active_store = store or SettingsStore(path)
    try:
        settings = active_store.load(overrides=overrides)
    except OSError as exc:  # pragma: no cover - depends on filesystem
        _LOGGER.warning("Failed to load settings from %s: %s", active_store.path, exc)
        settings = SpellSettings()
    return settings


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Entry point invoked by the ``spellscan`` console script."""

    out = stdout or sys.stdout
    args = _parse_cli_args(argv)

    debug = args.debug or _env_flag("SPELLSCAN_DEBUG", default=False)
    log_path = configure_logging(debug)

    settings_path = args.settings_path or os.environ.get("SPELLSCAN_SETTINGS_PATH")
    resolved_path = Path(settings_path).expanduser() if settings_path else None
    store = SettingsStore(resolved_path)
    try:
        cli_overrides = _coerce_cli_overrides(args.overrides or [])
    except ValueError as exc:
        print(f"Invalid --set override: {exc}", file=sys.stderr)
        return EXIT_ERROR

    settings = load_settings(resolved_path, store=store, overrides=cli_overrides or None)
    if settings.debug_logging and not debug:
        configure_logging(True)
    _LOGGER.debug("Settings loaded from %s; logging to %s", store.path, log_path)

    if args.dump_settings:
        json.dump(asdict(settings), out, indent=2, sort_keys=True)
        out.write("\n")
        return EXIT_OK

    try:
        if args.command == "check":
            return _run_check(args, settings, out)
        if args.command == "learn":
            return _run_learn(args.word, settings, out, learn=True)
        if args.command == "unlearn":
            return _run_learn(args.word, settings, out, learn=False)
    except SpellCheckError as exc:
        print(f"spellscan: {exc}", file=sys.stderr)
        return EXIT_ERROR

    print("spellscan: a command is required (check, learn, unlearn)", file=sys.stderr)
    return EXIT_ERROR


def _run_check(args: argparse.Namespace, settings: SpellSettings, out: TextIO) -> int:
    try:
        text = read_text(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"spellscan: cannot read {args.path}: {exc}", file=sys.stderr)
        return EXIT_ERROR

    config = build_scan_config(settings)
    ranges = find_misspelled_ranges(text, args.start, config=config)
    _LOGGER.info("%s: %d misspelled word(s)", args.path, len(ranges))

    if args.json:
        payload = [dict(item.to_dict(), word=item.slice_of(text)) for item in ranges]
        json.dump(payload, out, indent=2, ensure_ascii=False)
        out.write("\n")
    else:
        for item in ranges:
            line, column = _line_and_column(text, item)
            out.write(f"{args.path}:{line}:{column}: {item.slice_of(text)} ({item.start}-{item.end})\n")
    return EXIT_MISSPELLED if ranges else EXIT_OK


def _run_learn(word: str, settings: SpellSettings, out: TextIO, *, learn: bool) -> int:
    user_words = UserWordList(settings.user_words_path)
    try:
        changed = user_words.learn(word) if learn else user_words.unlearn(word)
    except ValueError as exc:
        print(f"spellscan: {exc}", file=sys.stderr)
        return EXIT_ERROR
    verb = "learned" if learn else "unlearned"
    if changed:
        out.write(f"{verb} {word}\n")
    else:
        state = "already known" if learn else "not in the user word list"
        out.write(f"{word} is {state}\n")
    return EXIT_OK


def _line_and_column(text: str, item: MisspellingRange) -> tuple[int, int]:
    prefix = text[: item.start - 1]
    line = prefix.count("\n") + 1
    column = item.start - (prefix.rfind("\n") + 1)
    return line, column


def _env_flag(name: str, *, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _parse_cli_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spellscan",
        description="Find misspelled words in text files and manage the user word list.",
    )
    parser.add_argument(
        "--dump-settings",
        action="store_true",
        help="Print the effective settings payload and exit.",
    )
    parser.add_argument(
        "--settings-path",
        metavar="PATH",
        help="Override the default ~/.spellscan/settings.json path.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help="Override persisted settings for this run (repeatable).",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")

    commands = parser.add_subparsers(dest="command")
    check = commands.add_parser("check", help="Report misspelled words in a file.")
    check.add_argument("path", help="Text file to scan.")
    check.add_argument("--start", type=int, default=1, help="1-based character offset to start from.")
    check.add_argument("--json", action="store_true", help="Emit ranges as JSON.")

    learn = commands.add_parser("learn", help="Add a word to the user word list.")
    learn.add_argument("word")
    unlearn = commands.add_parser("unlearn", help="Remove a word from the user word list.")
    unlearn.add_argument("word")
    return parser.parse_args(argv)


def _coerce_cli_overrides(items: Sequence[str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if not items:
        return overrides

    fields = SpellSettings.__dataclass_fields__  # type: ignore[attr-defined]
    type_hints = get_type_hints(SpellSettings)
    for entry in items:
        if "=" not in entry:
            raise ValueError(f"Override '{entry}' must use KEY=VALUE syntax.")
        key, raw_value = entry.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError("Override is missing a field name.")
        if key not in fields:
            raise ValueError(f"Unknown setting '{key}'.")
        annotation = type_hints.get(key, fields[key].type)
        overrides[key] = _coerce_value(annotation, raw_value.strip())
    return overrides


def _coerce_value(annotation: Any, raw_value: str) -> Any:
    target = _resolve_annotation(annotation)
    normalized = raw_value.strip()

    if _is_optional(annotation) and normalized.lower() in {"none", "null"}:
        return None
    if target is str or target is Any:
        return normalized
    if target is bool:
        return _parse_bool(normalized)
    if target is int:
        return int(normalized, 10)
    if target is type(None):
        return None
    if target is list:
        try:
            value = json.loads(normalized or "[]")
        except json.JSONDecodeError as exc:
            raise ValueError("List overrides must be valid JSON arrays") from exc
        if not isinstance(value, list):
            raise ValueError("List overrides must be valid JSON arrays")
        return value
    return normalized


def _is_optional(annotation: Any) -> bool:
    return get_origin(annotation) is not None and type(None) in get_args(annotation)


def _resolve_annotation(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is None:
        return annotation
    if origin is list:
        return list
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(args) == 1:
        return _resolve_annotation(args[0])
    return annotation


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot interpret '{value}' as a boolean")


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
