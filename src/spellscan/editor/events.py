"""Edit events consumed by the spell-check dispatcher and the bus that carries results.

Positions on editor events are 0-based caret positions (the number of
characters before the caret), the way text widgets address their cursors.
The dispatcher converts them to the 1-based anchors the scanner expects.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Generic, TypeVar
from weakref import WeakMethod, ref

from ..core.ranges import MisspellingRange, WordSpan

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from typing import DefaultDict

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Event")

Handler = Callable[[E], None]


@dataclass(slots=True)
class Event:
    """Base class for all events published on an :class:`EventBus`."""

    pass


# =============================================================================
# Edit events
# =============================================================================


@dataclass(slots=True)
class DeleteKeyPressed(Event):
    """Emitted when a delete or backspace key press was observed."""


@dataclass(slots=True)
class TextEdited(Event):
    """Emitted after the buffer content changed.

    Attributes:
        text: Snapshot of the buffer after the edit.
        position: Caret position where the edit happened.
        inserted: The inserted characters, empty for pure removals.
    """

    text: str
    position: int
    inserted: str = ""


@dataclass(slots=True)
class CaretMoved(Event):
    """Emitted when the caret moved without editing.

    Attributes:
        text: Snapshot of the buffer.
        previous: Caret position before the move.
        current: Caret position after the move.
        vertical: ``True`` for line-wise moves (up/down arrows).
    """

    text: str
    previous: int
    current: int
    vertical: bool = False


@dataclass(slots=True)
class WordSelected(Event):
    """Emitted when a word was selected, typically by a double click.

    Attributes:
        text: Snapshot of the buffer.
        start: Caret position at the start of the selection.
        end: Caret position at the end of the selection (exclusive).
    """

    text: str
    start: int
    end: int


# =============================================================================
# Result events
# =============================================================================


@dataclass(slots=True)
class WordChecked(Event):
    """Emitted once an anchored word has been checked.

    Attributes:
        span: The checked word and its 1-based inclusive span.
        correct: Whether the checker accepted the word.
    """

    span: WordSpan
    correct: bool


@dataclass(slots=True)
class DocumentChecked(Event):
    """Emitted after a whole buffer has been scanned.

    Attributes:
        ranges: Misspelled ranges in buffer order.
        start_offset: The 1-based offset the scan started from.
    """

    ranges: list[MisspellingRange]
    start_offset: int = 1


class EventBus(Generic[E]):
    """A typed publish-subscribe event bus.

    Bound-method handlers are held weakly so subscribers can be garbage
    collected; plain functions are held strongly. Not thread-safe: publish
    from the thread that owns the editor.
    """

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: DefaultDict[type[Event], list[_HandlerRef]] = defaultdict(list)

    def subscribe(self, event_type: type[E], handler: Handler[E]) -> None:
        """Register ``handler`` for events of exactly ``event_type``."""
        self._handlers[event_type].append(_HandlerRef.create(handler))
        logger.debug("Subscribed handler %s to event type %s", _handler_name(handler), event_type.__name__)

    def unsubscribe(self, event_type: type[E], handler: Handler[E]) -> None:
        """Remove the first registration of ``handler``; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if handlers is None:
            return
        for i, handler_ref in enumerate(handlers):
            if handler_ref.matches(handler):
                handlers.pop(i)
                return

    def publish(self, event: E) -> None:
        """Invoke every handler for ``event`` in registration order.

        A handler raising an exception is logged and the remaining handlers
        still run.
        """
        event_type = type(event)
        handlers = self._handlers.get(event_type)
        if not handlers:
            return

        dead_indices: list[int] = []
        for i, handler_ref in enumerate(handlers):
            handler = handler_ref.resolve()
            if handler is None:
                dead_indices.append(i)
                continue
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Handler %s raised exception for event %s",
                    _handler_name(handler),
                    event_type.__name__,
                )

        for i in reversed(dead_indices):
            handlers.pop(i)

    def clear(self) -> None:
        self._handlers.clear()

    def handler_count(self, event_type: type[E] | None = None) -> int:
        if event_type is not None:
            return len(self._handlers.get(event_type, []))
        return sum(len(handlers) for handlers in self._handlers.values())


class _HandlerRef:
    """Weak reference for bound methods, strong reference for other callables."""

    __slots__ = ("_ref", "_is_weak")

    def __init__(self, handler_ref: WeakMethod | ref | Handler, is_weak: bool) -> None:
        self._ref = handler_ref
        self._is_weak = is_weak

    @classmethod
    def create(cls, handler: Handler) -> _HandlerRef:
        if hasattr(handler, "__self__") and hasattr(handler, "__func__"):
            try:
                return cls(WeakMethod(handler), is_weak=True)
            except TypeError:
                pass
        return cls(handler, is_weak=False)

    def resolve(self) -> Handler | None:
        if not self._is_weak:
            return self._ref  # type: ignore[return-value]
        return self._ref()  # type: ignore[operator]

    def matches(self, handler: Handler) -> bool:
        resolved = self.resolve()
        if resolved is None:
            return False
        return resolved == handler


def _handler_name(handler: Handler) -> str:
    if hasattr(handler, "__self__") and hasattr(handler, "__func__"):
        cls_name = type(handler.__self__).__name__
        return f"{cls_name}.{handler.__func__.__name__}"
    if hasattr(handler, "__name__"):
        return handler.__name__
    return repr(handler)


__all__ = [
    "Event",
    "EventBus",
    "Handler",
    # Edit events
    "DeleteKeyPressed",
    "TextEdited",
    "CaretMoved",
    "WordSelected",
    # Results
    "WordChecked",
    "DocumentChecked",
]
