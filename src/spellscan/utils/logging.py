"""Logging setup for the spellscan command line and editor integrations.

Records from the ``spellscan`` package always reach a rotating
``spellscan.log`` file. The console (stderr by default) only shows warnings
and errors unless debug logging is turned on with ``--debug`` or the
``debug_logging`` setting.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

__all__ = ["configure_logging", "resolve_log_dir", "LOG_FILE_NAME"]

LOG_FILE_NAME = "spellscan.log"
_PACKAGE_LOGGER = "spellscan"
_DEFAULT_LOG_DIR = Path.home() / ".spellscan" / "logs"
_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_CONSOLE_FORMAT = "spellscan: %(levelname)s: %(message)s"
_MAX_BYTES = 1_000_000
_BACKUP_COUNT = 3

_installed: list[logging.Handler] = []


def configure_logging(
    debug: bool = False,
    *,
    stream: TextIO | None = None,
    log_dir: Path | str | None = None,
) -> Path:
    """Route ``spellscan`` log records to the log file and the console.

    Calling it again replaces the handlers of the previous call, which is how
    the CLI switches to debug output once the persisted settings are known.
    Handlers are attached to the package logger only, so host applications
    keep their own root configuration. Returns the log file path.
    """

    target_dir = resolve_log_dir(log_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / LOG_FILE_NAME

    logger = logging.getLogger(_PACKAGE_LOGGER)
    _remove_installed(logger)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    for handler in (file_handler, console_handler):
        logger.addHandler(handler)
        _installed.append(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return log_path


def resolve_log_dir(log_dir: Path | str | None = None) -> Path:
    """Return the log directory: explicit argument, ``SPELLSCAN_LOG_DIR``, then the default."""

    return Path(log_dir or os.environ.get("SPELLSCAN_LOG_DIR") or _DEFAULT_LOG_DIR).expanduser()


def _remove_installed(logger: logging.Logger) -> None:
    while _installed:
        handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()
