"""Dialog for browsing the term dictionary."""

import posixpath
from PySide6.QtWidgets import (QDialog, QVBoxLayout, QHBoxLayout, QLabel, QListWidget,
                               QPushButton, QLineEdit, QMessageBox, QTextBrowser,
                               QInputDialog, QSplitter)
from PySide6.QtCore import Qt, Signal

from core.term_store import TermStoreError


class DictionaryDialog(QDialog):
    """Lists known terms, shows their descriptions and renames records."""

    open_requested = Signal(str)  # absolute path of a term record
    record_renamed = Signal(str, str)  # absolute old and new paths, after the store renamed it

    def __init__(self, plugin, parent=None):
        super().__init__(parent)
        self.plugin = plugin
        self.setWindowTitle("Term Dictionary")
        self.resize(640, 420)

        layout = QVBoxLayout(self)

        filter_layout = QHBoxLayout()
        filter_layout.addWidget(QLabel("Find:"))
        self.filter_input = QLineEdit()
        self.filter_input.setPlaceholderText("Type to rank terms by similarity")
        self.filter_input.textChanged.connect(self._refresh_term_list)
        filter_layout.addWidget(self.filter_input)
        layout.addLayout(filter_layout)

        splitter = QSplitter(Qt.Horizontal)
        self.term_list = QListWidget()
        self.term_list.currentTextChanged.connect(self._show_description)
        self.term_list.itemDoubleClicked.connect(lambda item: self._open_selected())
        splitter.addWidget(self.term_list)

        self.description = QTextBrowser()
        splitter.addWidget(self.description)
        splitter.setSizes([220, 420])
        layout.addWidget(splitter, 1)

        self.count_label = QLabel()
        layout.addWidget(self.count_label)

        button_layout = QHBoxLayout()

        open_btn = QPushButton("Open Record")
        open_btn.clicked.connect(self._open_selected)
        button_layout.addWidget(open_btn)

        rename_btn = QPushButton("Rename Term")
        rename_btn.clicked.connect(self._rename_selected)
        button_layout.addWidget(rename_btn)

        button_layout.addStretch()

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        button_layout.addWidget(close_btn)

        layout.addLayout(button_layout)

        self._refresh_term_list()

    def _refresh_term_list(self):
        """Refresh the term list, ranked against the filter text."""
        query = self.filter_input.text().strip()
        if query:
            terms = self.plugin.lookup.rank(query)
        else:
            terms = sorted(self.plugin.repository.terms(), key=str.lower)

        self.term_list.clear()
        self.term_list.addItems(terms)
        self.count_label.setText(f"{len(terms)} of {len(self.plugin.repository)} terms")
        if terms:
            self.term_list.setCurrentRow(0)
        else:
            self.description.clear()

    def _show_description(self, term):
        if not term:
            self.description.clear()
            return
        path = self.plugin.store.find_record(term)
        if path is None:
            # Known gap: deleted records keep their term
            self.description.setPlainText(f"No record found for '{term}'.")
            return
        try:
            self.description.setMarkdown(self.plugin.store.read_record(path))
        except TermStoreError as e:
            self.description.setPlainText(str(e))

    def _selected_record(self):
        item = self.term_list.currentItem()
        if not item:
            QMessageBox.warning(self, "No Selection", "Please select a term.")
            return None, None
        term = item.text()
        path = self.plugin.store.find_record(term)
        if path is None:
            QMessageBox.warning(self, "Missing Record", f"No record found for '{term}'.")
            return term, None
        return term, path

    def _open_selected(self):
        _, path = self._selected_record()
        if path:
            self.open_requested.emit(self.plugin.store.absolute_path(path))

    def _rename_selected(self):
        term, path = self._selected_record()
        if not path:
            return

        new_term, ok = QInputDialog.getText(self, "Rename Term", "New name:", text=term)
        new_term = new_term.strip()
        if not ok or not new_term or new_term == term:
            return

        store = self.plugin.store
        new_path = posixpath.join(posixpath.dirname(path), new_term + store.record_extension)
        try:
            store.rename(path, new_path)
        except TermStoreError as e:
            QMessageBox.warning(self, "Error", f"Could not rename: {e}")
            return
        self.record_renamed.emit(store.absolute_path(path), store.absolute_path(new_path))
        self._refresh_term_list()
