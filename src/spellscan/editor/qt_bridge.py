"""Bridge from a Qt text widget to a :class:`SpellCheckSession`.

The bridge only observes the widget: it turns key presses, content changes,
caret moves and double clicks into edit events and schedules each check
after ``delay_ms`` so typing is never blocked. Results go out on the
session's event bus; painting them is left to the subscriber.
"""

from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtWidgets import QPlainTextEdit

from ..services.checkers import build_scan_config
from ..services.settings import SpellSettings
from .events import CaretMoved, DeleteKeyPressed, Event, EventBus, TextEdited, WordSelected
from .session import SpellCheckSession

__all__ = ["QtSpellCheckBridge", "attach_spell_checker"]

LOGGER = logging.getLogger(__name__)

_DELETE_KEYS = {Qt.Key.Key_Backspace, Qt.Key.Key_Delete}
_VERTICAL_KEYS = {Qt.Key.Key_Up, Qt.Key.Key_Down, Qt.Key.Key_PageUp, Qt.Key.Key_PageDown}


class QtSpellCheckBridge(QObject):
    """Translate ``QPlainTextEdit`` activity into spell-check edit events."""

    def __init__(
        self,
        editor: QPlainTextEdit,
        session: SpellCheckSession,
        *,
        delay_ms: int = 50,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._editor = editor
        self._session = session
        self._delay_ms = max(0, int(delay_ms))
        self._caret = editor.textCursor().position()
        self._vertical_move = False
        self._attached = False
        self.attach()

    @property
    def session(self) -> SpellCheckSession:
        return self._session

    def attach(self) -> None:
        if self._attached:
            return
        self._editor.installEventFilter(self)
        self._editor.viewport().installEventFilter(self)
        self._editor.document().contentsChange.connect(self._on_contents_change)
        self._editor.cursorPositionChanged.connect(self._on_cursor_moved)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        self._editor.removeEventFilter(self)
        self._editor.viewport().removeEventFilter(self)
        self._editor.document().contentsChange.disconnect(self._on_contents_change)
        self._editor.cursorPositionChanged.disconnect(self._on_cursor_moved)
        self._attached = False

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        event_type = event.type()
        if event_type == QEvent.Type.KeyPress:
            key = event.key()  # type: ignore[attr-defined]
            if key in _DELETE_KEYS:
                # Queued like the edits so the pending state is consumed in order.
                self._schedule(DeleteKeyPressed())
            elif key in _VERTICAL_KEYS:
                self._vertical_move = True
        elif event_type == QEvent.Type.MouseButtonDblClick:
            # The selection is only in place once Qt has processed the click.
            QTimer.singleShot(0, self._emit_selection)
        return False

    def _on_contents_change(self, position: int, removed: int, added: int) -> None:
        del removed
        text = self._editor.toPlainText()
        inserted = text[position : position + added] if added else ""
        self._schedule(TextEdited(text=text, position=position, inserted=inserted))

    def _on_cursor_moved(self) -> None:
        previous = self._caret
        current = self._editor.textCursor().position()
        self._caret = current
        if not self._vertical_move:
            return
        self._vertical_move = False
        if previous != current:
            self._schedule(
                CaretMoved(text=self._editor.toPlainText(), previous=previous, current=current, vertical=True)
            )

    def _emit_selection(self) -> None:
        cursor = self._editor.textCursor()
        if not cursor.hasSelection():
            return
        self._schedule(
            WordSelected(
                text=self._editor.toPlainText(),
                start=cursor.selectionStart(),
                end=cursor.selectionEnd(),
            )
        )

    def _schedule(self, event: Event) -> None:
        if self._delay_ms == 0:
            self._deliver(event)
            return
        QTimer.singleShot(self._delay_ms, lambda: self._deliver(event))

    def _deliver(self, event: Any) -> None:
        try:
            self._session.handle(event)
        except Exception:  # pragma: no cover - logged and dropped
            LOGGER.exception("Spell check failed for %s", type(event).__name__)


def attach_spell_checker(
    editor: QPlainTextEdit,
    settings: SpellSettings,
    *,
    bus: EventBus | None = None,
) -> QtSpellCheckBridge:
    """Build a session from ``settings`` and attach it to ``editor``.

    Raises :class:`~spellscan.services.errors.SpellCheckError` when the
    configured backend or dictionary is unavailable.
    """

    config = build_scan_config(settings)
    session = SpellCheckSession(config, bus=bus)
    return QtSpellCheckBridge(editor, session, delay_ms=settings.check_delay_ms, parent=editor)
