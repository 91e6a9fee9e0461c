"""Editor-facing layer: edit events, the dispatcher and spell-check sessions."""

from importlib import import_module
from typing import Any

from . import dispatcher, events, session
from .dispatcher import AnchorRequest, EditEventDispatcher, SpellCheckState
from .events import (
    CaretMoved,
    DeleteKeyPressed,
    DocumentChecked,
    Event,
    EventBus,
    TextEdited,
    WordChecked,
    WordSelected,
)
from .session import SpellCheckSession

__all__ = [
    "AnchorRequest",
    "CaretMoved",
    "DeleteKeyPressed",
    "DocumentChecked",
    "EditEventDispatcher",
    "Event",
    "EventBus",
    "SpellCheckSession",
    "SpellCheckState",
    "TextEdited",
    "WordChecked",
    "WordSelected",
    "dispatcher",
    "events",
    "session",
]


def __getattr__(name: str) -> Any:
	if name == "qt_bridge":
		module = import_module(f"{__name__}.{name}")
		globals()[name] = module
		return module
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
