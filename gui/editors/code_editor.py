"""Plain text editor with term autocomplete."""

import asyncio
from PySide6.QtWidgets import QPlainTextEdit
from PySide6.QtGui import QTextCursor
from PySide6.QtCore import QTimer, Signal

from core.text_buffer import TextBuffer, Position, NoActiveDocumentError
from .suggestion_popup import SuggestionPopup


class CodeEditor(QPlainTextEdit, TextBuffer):
    """Plain text editor that suggests dictionary terms while typing.

    The editor doubles as the TextBuffer the completion engine reads lines
    from and writes accepted suggestions into.
    """

    notice = Signal(str)  # user-visible message

    def __init__(self, parent=None, completion=None, delay_ms=150):
        super().__init__(parent)
        self.completion = completion
        self.delay_ms = delay_ms
        self.document_provider = None  # callable returning the ActiveDocument
        self._active = None
        self._values = []
        self._applying = False

        self.popup = SuggestionPopup(self)
        self.popup.accepted.connect(self._on_suggestion_accepted)

        self.suggest_timer = QTimer(self)
        self.suggest_timer.setSingleShot(True)
        self.suggest_timer.timeout.connect(self._do_suggest)

        self.textChanged.connect(self._on_text_changed)

    def set_completion(self, completion, delay_ms=None):
        """Set the TermCompletion session (None disables autocomplete).

        Args:
            completion: TermCompletion instance or None
            delay_ms: Debounce delay in milliseconds
        """
        self.completion = completion
        if delay_ms is not None:
            self.delay_ms = delay_ms
        if completion is None:
            self.hide_suggestions()

    # TextBuffer

    def get_line(self, line: int) -> str:
        block = self.document().findBlockByNumber(line)
        return block.text() if block.isValid() else ""

    def get_cursor(self) -> Position:
        cursor = self.textCursor()
        return Position(cursor.blockNumber(), cursor.positionInBlock())

    def replace_range(self, text: str, start: Position, end: Position):
        doc = self.document()
        start_pos = doc.findBlockByNumber(start.line).position() + start.ch
        end_pos = doc.findBlockByNumber(end.line).position() + end.ch

        cursor = QTextCursor(doc)
        cursor.setPosition(start_pos)
        cursor.setPosition(end_pos, QTextCursor.KeepAnchor)
        cursor.insertText(text)
        self.setTextCursor(cursor)

    # Suggestions

    def _on_text_changed(self):
        """Schedule a suggestion pass after typing pauses."""
        if self._applying or not self.completion:
            return
        self.suggest_timer.stop()
        self.suggest_timer.start(self.delay_ms)

    def _do_suggest(self):
        if not self.completion:
            return

        active = self.completion.trigger(self)
        if active is None:
            self.hide_suggestions()
            return

        values = asyncio.run(self.completion.suggestions(active))

        # Text may have changed while the suggestions were computed
        if not values or not self.completion.is_current(active, self):
            self.hide_suggestions()
            return

        self._active = active
        self._values = values
        anchor = self.viewport().mapToGlobal(self.cursorRect().bottomLeft())
        self.popup.show_suggestions(self.completion.render(active, values), anchor)

    def hide_suggestions(self):
        self._active = None
        self._values = []
        self.popup.hide()

    def _on_suggestion_accepted(self, row: int):
        if self._active is None or not (0 <= row < len(self._values)):
            return

        active, value = self._active, self._values[row]
        self.hide_suggestions()

        document = self.document_provider() if self.document_provider else None
        self._applying = True
        try:
            self.completion.accept(active, value, document)
        except NoActiveDocumentError as e:
            self.notice.emit(str(e))
        finally:
            self._applying = False

    def keyPressEvent(self, event):
        if self.popup.isVisible() and self.popup.handle_key(event):
            return
        super().keyPressEvent(event)

    def focusOutEvent(self, event):
        self.hide_suggestions()
        super().focusOutEvent(event)
