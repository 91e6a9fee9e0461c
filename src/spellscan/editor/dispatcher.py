"""Map edit events onto anchored word resolutions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..scanner.anchor import AnchorMode
from .events import CaretMoved, DeleteKeyPressed, Event, TextEdited, WordSelected

__all__ = ["SpellCheckState", "AnchorRequest", "EditEventDispatcher"]

LOGGER = logging.getLogger(__name__)


class SpellCheckState(Enum):
    """Whether a delete key press is waiting for the following text change."""

    CLEAN = "clean"
    PENDING_DELETE_CHECK = "pending_delete_check"


@dataclass(slots=True, frozen=True)
class AnchorRequest:
    """A resolver invocation derived from one edit event (1-based anchors)."""

    text: str
    anchor: int
    mode: AnchorMode
    selection_end: int | None = None


class EditEventDispatcher:
    """Deterministic edit-event to anchor-mode mapping.

    - a delete/backspace key press arms ``PENDING_DELETE_CHECK``; the next
      removal resolves the word around the insertion point, while an
      insertion clears the pending state and is handled as usual;
    - a single inserted character resolves the word it may have completed;
    - a vertical caret move resolves the word around the caret that was left;
    - a selection resolves the selected word.

    Multi-character insertions (pastes) produce no request; callers rescan
    the document for those.
    """

    def __init__(self) -> None:
        self._state = SpellCheckState.CLEAN

    @property
    def state(self) -> SpellCheckState:
        return self._state

    def reset(self) -> None:
        self._state = SpellCheckState.CLEAN

    def dispatch(self, event: Event) -> AnchorRequest | None:
        if isinstance(event, DeleteKeyPressed):
            self._state = SpellCheckState.PENDING_DELETE_CHECK
            return None
        if isinstance(event, TextEdited):
            return self._on_text_edited(event)
        if isinstance(event, CaretMoved):
            if not event.vertical:
                return None
            return AnchorRequest(event.text, event.previous + 1, AnchorMode.WORD_AROUND_INSERTION_POINT)
        if isinstance(event, WordSelected):
            start, end = sorted((event.start, event.end))
            if start == end:
                return None
            return AnchorRequest(event.text, start + 1, AnchorMode.SELECTED_WORD, selection_end=end)
        LOGGER.debug("Ignoring unsupported event %s", type(event).__name__)
        return None

    def _on_text_edited(self, event: TextEdited) -> AnchorRequest | None:
        if self._state is SpellCheckState.PENDING_DELETE_CHECK:
            self._state = SpellCheckState.CLEAN
            # a key press that removed nothing leaves the next insertion alone
            if not event.inserted:
                return AnchorRequest(event.text, event.position + 1, AnchorMode.WORD_AROUND_INSERTION_POINT)
        if len(event.inserted) == 1:
            return AnchorRequest(event.text, event.position + 1, AnchorMode.WORD_JUST_COMPLETED)
        return None
