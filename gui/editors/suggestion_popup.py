"""Floating list of term suggestions shown under the text cursor."""

from PySide6.QtWidgets import QListWidget, QAbstractItemView
from PySide6.QtCore import Qt, Signal, QPoint


class SuggestionPopup(QListWidget):
    """Frameless suggestion list driven by the editor's key events.

    The popup never takes focus; the editor forwards navigation keys
    through ``handle_key`` so typing continues uninterrupted.
    """

    accepted = Signal(int)  # row index

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowFlags(Qt.ToolTip | Qt.FramelessWindowHint)
        self.setFocusPolicy(Qt.NoFocus)
        self.setSelectionMode(QAbstractItemView.SingleSelection)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setStyleSheet("QListWidget { border: 1px solid #bbb; } QListWidget::item { padding: 2px 6px; }")
        self.itemClicked.connect(lambda item: self.accepted.emit(self.row(item)))

    def show_suggestions(self, rows, anchor: QPoint):
        """Fill the list and show it at ``anchor`` (global coordinates).

        Args:
            rows: Row labels to display
            anchor: Top-left corner of the popup
        """
        self.clear()
        if not rows:
            self.hide()
            return

        self.addItems(rows)
        self.setCurrentRow(0)

        row_height = self.sizeHintForRow(0)
        width = max(self.sizeHintForColumn(0) + 24, 160)
        self.resize(width, row_height * len(rows) + 2 * self.frameWidth())
        self.move(anchor)
        self.show()

    def handle_key(self, event) -> bool:
        """Handle a key press forwarded by the editor.

        Returns:
            True if the key was consumed by the popup
        """
        key = event.key()
        if key == Qt.Key_Escape:
            self.hide()
            return True
        if key in (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Tab):
            row = self.currentRow()
            if row >= 0:
                self.accepted.emit(row)
            self.hide()
            return True
        if key == Qt.Key_Down:
            self.setCurrentRow((self.currentRow() + 1) % self.count())
            return True
        if key == Qt.Key_Up:
            self.setCurrentRow((self.currentRow() - 1) % self.count())
            return True
        return False
