"""Tabbed container for open documents."""

import os
from PySide6.QtWidgets import QWidget, QVBoxLayout, QTabWidget, QMessageBox
from PySide6.QtCore import Signal, QUrl
from PySide6.QtGui import QDesktopServices

from .document_viewer import DocumentWidget


class EditorWidget(QWidget):
    """One DocumentWidget tab per open file, all sharing the completion session."""

    modification_changed = Signal(bool)  # modified state of the current tab
    term_clicked = Signal(str)  # term name from a preview link
    tab_closed = Signal()
    notice = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.tabs = QTabWidget()
        self.tabs.setTabsClosable(True)
        self.tabs.tabCloseRequested.connect(self.close_tab)
        self.tabs.currentChanged.connect(lambda _: self.modification_changed.emit(self.is_current_modified()))
        layout.addWidget(self.tabs)

        self.open_files = {}  # path -> DocumentWidget
        self.project_path = None
        self.completion = None
        self.delay_ms = 150

    def set_project_path(self, path):
        """Set the project root used to compute document paths."""
        self.project_path = path

    def set_completion(self, completion, delay_ms=None):
        """Attach a TermCompletion session to every open and future document."""
        self.completion = completion
        if delay_ms is not None:
            self.delay_ms = delay_ms
        for widget in self.open_files.values():
            widget.set_completion(completion, self.delay_ms)

    def open_file(self, path, content):
        widget = self.open_files.get(path)
        if widget is None:
            widget = DocumentWidget(path, content or "", self.project_path,
                                    completion=self.completion, delay_ms=self.delay_ms)
            widget.link_clicked.connect(self.follow_link)
            widget.term_clicked.connect(self.term_clicked.emit)
            widget.notice.connect(self.notice.emit)
            widget.modification_changed.connect(lambda _, w=widget: self._update_tab(w))
            self.tabs.addTab(widget, os.path.basename(path))
            self.open_files[path] = widget
        self.tabs.setCurrentWidget(widget)

    def _update_tab(self, widget):
        index = self.tabs.indexOf(widget)
        if index == -1:
            return
        title = os.path.basename(widget.file_path)
        if widget.is_modified():
            title += " •"
        self.tabs.setTabText(index, title)
        if widget is self.tabs.currentWidget():
            self.modification_changed.emit(widget.is_modified())

    def current_document(self):
        widget = self.tabs.currentWidget()
        return widget if isinstance(widget, DocumentWidget) else None

    def current_editor(self):
        document = self.current_document()
        return document.editor if document else None

    def is_current_modified(self):
        document = self.current_document()
        return document.is_modified() if document else False

    def mark_current_saved(self):
        document = self.current_document()
        if document:
            document.set_modified(False)

    def get_current_file(self):
        document = self.current_document()
        if document is None:
            return None, None
        return document.file_path, document.get_content()

    def follow_link(self, target):
        """Open a link clicked in a preview: web URLs externally, files in a tab."""
        if target.startswith(("http://", "https://")):
            QDesktopServices.openUrl(QUrl(target))
            return
        try:
            with open(target, 'r', encoding='utf-8') as f:
                self.open_file(target, f.read())
        except OSError as e:
            QMessageBox.warning(self, "Error", f"Could not open linked file: {e}")

    def close_tab(self, index):
        widget = self.tabs.widget(index)
        self.open_files.pop(widget.file_path, None)
        self.tabs.removeTab(index)
        widget.deleteLater()
        self.tab_closed.emit()

    def close_all(self):
        while self.tabs.count():
            self.close_tab(0)

    def update_open_file_path(self, old_path, new_path):
        """Retarget tabs after ``old_path`` (a file or folder) became ``new_path``.

        Returns:
            True if any open document was affected
        """
        prefix = old_path.rstrip(os.sep) + os.sep
        moved = [path for path in self.open_files if path == old_path or path.startswith(prefix)]
        for path in moved:
            widget = self.open_files.pop(path)
            # Document path decides where terms defined in it are filed
            widget.file_path = new_path + path[len(old_path):]
            self.open_files[widget.file_path] = widget
            self._update_tab(widget)
        return bool(moved)
