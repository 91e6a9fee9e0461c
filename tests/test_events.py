"""Unit tests for :mod:`spellscan.editor.events`."""

from __future__ import annotations

import gc

from spellscan.core.ranges import MisspellingRange, WordSpan
from spellscan.editor.events import (
    CaretMoved,
    DeleteKeyPressed,
    DocumentChecked,
    Event,
    EventBus,
    TextEdited,
    WordChecked,
)


class TestEvents:
    """Tests for the event dataclasses."""

    def test_events_use_slots(self) -> None:
        event = TextEdited(text="abc", position=2, inserted="c")
        assert hasattr(event, "__slots__")

    def test_defaults(self) -> None:
        assert TextEdited(text="a", position=0).inserted == ""
        assert CaretMoved(text="a", previous=0, current=1).vertical is False
        assert DocumentChecked(ranges=[]).start_offset == 1


class TestEventBusSubscription:
    """Tests for subscription bookkeeping."""

    def test_subscribe_and_count(self) -> None:
        bus: EventBus[Event] = EventBus()

        bus.subscribe(WordChecked, lambda e: None)
        bus.subscribe(WordChecked, lambda e: None)
        bus.subscribe(DocumentChecked, lambda e: None)

        assert bus.handler_count(WordChecked) == 2
        assert bus.handler_count(DocumentChecked) == 1
        assert bus.handler_count() == 3

    def test_unsubscribe_removes_first_registration(self) -> None:
        bus: EventBus[Event] = EventBus()

        def handler(event: WordChecked) -> None:
            pass

        bus.subscribe(WordChecked, handler)
        bus.subscribe(WordChecked, handler)
        bus.unsubscribe(WordChecked, handler)

        assert bus.handler_count(WordChecked) == 1

    def test_unsubscribe_unknown_handler_is_safe(self) -> None:
        bus: EventBus[Event] = EventBus()

        bus.unsubscribe(WordChecked, lambda e: None)

        assert bus.handler_count() == 0

    def test_clear(self) -> None:
        bus: EventBus[Event] = EventBus()
        bus.subscribe(WordChecked, lambda e: None)

        bus.clear()

        assert bus.handler_count() == 0


class TestEventBusPublish:
    """Tests for event delivery."""

    def test_publish_delivers_to_exact_type_only(self) -> None:
        bus: EventBus[Event] = EventBus()
        checked: list[WordChecked] = []
        documents: list[DocumentChecked] = []
        bus.subscribe(WordChecked, checked.append)
        bus.subscribe(DocumentChecked, documents.append)

        event = WordChecked(span=WordSpan(1, 3, "teh"), correct=False)
        bus.publish(event)

        assert checked == [event]
        assert documents == []

    def test_publish_without_handlers_is_a_no_op(self) -> None:
        bus: EventBus[Event] = EventBus()

        bus.publish(DeleteKeyPressed())

    def test_failing_handler_does_not_stop_others(self) -> None:
        bus: EventBus[Event] = EventBus()
        received: list[DocumentChecked] = []

        def broken(event: DocumentChecked) -> None:
            raise RuntimeError("boom")

        bus.subscribe(DocumentChecked, broken)
        bus.subscribe(DocumentChecked, received.append)

        event = DocumentChecked(ranges=[MisspellingRange(1, 3)])
        bus.publish(event)

        assert received == [event]

    def test_bound_methods_are_held_weakly(self) -> None:
        bus: EventBus[Event] = EventBus()

        class Listener:
            def __init__(self) -> None:
                self.seen: list[Event] = []

            def on_checked(self, event: WordChecked) -> None:
                self.seen.append(event)

        listener = Listener()
        bus.subscribe(WordChecked, listener.on_checked)
        bus.publish(WordChecked(span=WordSpan(1, 1, "a"), correct=True))
        assert len(listener.seen) == 1

        del listener
        gc.collect()
        bus.publish(WordChecked(span=WordSpan(1, 1, "a"), correct=True))

        assert bus.handler_count(WordChecked) == 0
