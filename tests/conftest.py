"""Shared pytest fixtures."""

from __future__ import annotations

import os
from typing import Callable, Iterable

import pytest

from spellscan.scanner.config import ScanConfig

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Keep host settings and log files out of the tests."""

    for name in list(os.environ):
        if name.startswith("SPELLSCAN_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SPELLSCAN_LOG_DIR", str(tmp_path_factory.getbasetemp() / "logs"))


@pytest.fixture
def config_for() -> Callable[[Iterable[str]], ScanConfig]:
    """Build a :class:`ScanConfig` accepting exactly the given words."""

    def factory(words: Iterable[str], **kwargs) -> ScanConfig:
        known = set(words)
        return ScanConfig(check_word=lambda word: word in known, **kwargs)

    return factory


@pytest.fixture
def reject_all() -> ScanConfig:
    return ScanConfig(check_word=lambda word: False)
