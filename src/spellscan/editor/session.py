"""Spell-check session tying the dispatcher, the scanner and an event bus together."""

from __future__ import annotations

import logging

from ..core.ranges import MisspellingRange, WordCheck
from ..scanner.anchor import check_anchor_word
from ..scanner.batch import find_misspelled_ranges
from ..scanner.config import ScanConfig
from .dispatcher import EditEventDispatcher, SpellCheckState
from .events import DocumentChecked, Event, EventBus, WordChecked

__all__ = ["SpellCheckSession"]

LOGGER = logging.getLogger(__name__)


class SpellCheckSession:
    """Per-editor spell-check state.

    ``handle`` feeds one edit event through the dispatcher and, when it maps
    to a word, checks it and publishes :class:`WordChecked`. How a result is
    rendered is up to the subscribers.
    """

    def __init__(
        self,
        config: ScanConfig,
        *,
        bus: EventBus | None = None,
        dispatcher: EditEventDispatcher | None = None,
    ) -> None:
        self._config = config
        self._bus: EventBus = bus or EventBus()
        self._dispatcher = dispatcher or EditEventDispatcher()

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def config(self) -> ScanConfig:
        return self._config

    @property
    def state(self) -> SpellCheckState:
        return self._dispatcher.state

    def update_config(self, config: ScanConfig) -> None:
        """Swap the checker configuration (language or dictionary change)."""

        self._config = config
        self._dispatcher.reset()

    def handle(self, event: Event) -> WordCheck | None:
        request = self._dispatcher.dispatch(event)
        if request is None:
            return None
        result = check_anchor_word(
            request.text,
            request.anchor,
            request.mode,
            config=self._config,
            selection_end=request.selection_end,
        )
        if result is None:
            return None
        self._bus.publish(WordChecked(span=result.span, correct=result.correct))
        return result

    def check_document(self, text: str, start_offset: int = 1) -> list[MisspellingRange]:
        ranges = find_misspelled_ranges(text, start_offset, config=self._config)
        LOGGER.debug("Document check found %d misspelled range(s)", len(ranges))
        self._bus.publish(DocumentChecked(ranges=ranges, start_offset=start_offset))
        return ranges
