"""Markdown document editor with live preview."""

import os
import re
from urllib.parse import quote, unquote
import markdown
from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout,
                               QPushButton, QStackedWidget, QTextBrowser)
from PySide6.QtCore import Signal

from core.text_buffer import BufferDocument
from .code_editor import CodeEditor

TERM_SCHEME = "term"
_TERM_REFERENCE_RE = re.compile(r"\[\[([^\[\]\n]+)\]\]")


def link_term_references(text: str) -> str:
    """Turn ``[[Term]]`` references into Markdown links the preview can follow."""
    return _TERM_REFERENCE_RE.sub(
        lambda m: f"[{m.group(1)}]({TERM_SCHEME}:{quote(m.group(1))})", text
    )


class DocumentWidget(QWidget):
    """Widget for editing and previewing Markdown documents."""

    link_clicked = Signal(str)  # Emits path or URL when a link is clicked
    term_clicked = Signal(str)  # Emits term name when a [[term]] link is clicked
    modification_changed = Signal(bool)  # Emits when modified state changes
    notice = Signal(str)

    def __init__(self, file_path, content, base_dir=None, completion=None, delay_ms=150, parent=None):
        super().__init__(parent)
        self.file_path = file_path
        self.base_dir = base_dir  # Project root for resolving relative paths
        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        # Toolbar for switching modes
        self.toolbar_layout = QHBoxLayout()
        self.edit_btn = QPushButton("Edit")
        self.edit_btn.setCheckable(True)
        self.edit_btn.setChecked(True)
        self.edit_btn.clicked.connect(self.show_edit)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.setCheckable(True)
        self.preview_btn.clicked.connect(self.show_preview)

        self.toolbar_layout.addWidget(self.edit_btn)
        self.toolbar_layout.addWidget(self.preview_btn)
        self.toolbar_layout.addStretch()

        self.layout.addLayout(self.toolbar_layout)

        # Stack for Edit/Preview
        self.stack = QStackedWidget()

        # Editor with term autocomplete
        self.editor = CodeEditor(completion=completion, delay_ms=delay_ms)
        self.editor.document_provider = self.active_document
        self.editor.setPlainText(content)
        self.editor.document().setModified(False)  # Reset initial state
        self.editor.document().modificationChanged.connect(self.on_modification_changed)
        self.editor.notice.connect(self.notice.emit)

        self.stack.addWidget(self.editor)

        # Preview
        self.preview = QTextBrowser()
        self.preview.setOpenLinks(False)  # Handle links manually
        self.preview.anchorClicked.connect(self.handle_link)

        if self.base_dir:
            self.preview.setSearchPaths([self.base_dir])

        self.stack.addWidget(self.preview)

        self.layout.addWidget(self.stack)

    def relative_path(self):
        """Path of this document relative to the project root."""
        if self.base_dir:
            rel = os.path.relpath(self.file_path, self.base_dir)
            if not rel.startswith('..'):
                return rel.replace('\\', '/')
        return os.path.basename(self.file_path)

    def active_document(self):
        """ActiveDocument handed to the completion engine."""
        return BufferDocument(self.relative_path(), self.editor)

    def set_completion(self, completion, delay_ms=None):
        self.editor.set_completion(completion, delay_ms)

    def on_modification_changed(self, changed):
        self.modification_changed.emit(changed)

    def is_modified(self):
        return self.editor.document().isModified()

    def set_modified(self, modified):
        self.editor.document().setModified(modified)

    def handle_link(self, url):
        # url is QUrl
        scheme = url.scheme()
        path = url.toString()

        if scheme == TERM_SCHEME:
            self.term_clicked.emit(unquote(path[len(TERM_SCHEME) + 1:]))
            return

        if scheme in ['http', 'https']:
            self.link_clicked.emit(path)
            return

        if not scheme or scheme == 'file':
            local_path = url.toLocalFile() if scheme == 'file' else path

            # If relative, resolve against current file's directory
            if not os.path.isabs(local_path):
                current_dir = os.path.dirname(self.file_path)
                local_path = os.path.normpath(os.path.join(current_dir, local_path))

            self.link_clicked.emit(local_path)

    def show_edit(self):
        self.edit_btn.setChecked(True)
        self.preview_btn.setChecked(False)
        self.stack.setCurrentIndex(0)

    def show_preview(self):
        self.edit_btn.setChecked(False)
        self.preview_btn.setChecked(True)

        text = link_term_references(self.editor.toPlainText())
        html_content = markdown.markdown(text, extensions=['fenced_code', 'tables'])

        style = """
        <style>
            body { font-family: sans-serif; }
            a { color: #2f7fc1; }
            code { background-color: #f2f2f2; padding: 2px 4px; }
            pre { background-color: #f2f2f2; padding: 10px; }
            blockquote { border-left: 4px solid #ccc; margin: 0; padding-left: 10px; }
        </style>
        """
        self.preview.setHtml(f"{style}\n{html_content}")

        self.stack.setCurrentIndex(1)

    def update_content(self, content):
        self.editor.setPlainText(content)
        self.editor.document().setModified(False)
        if self.preview_btn.isChecked():
            self.show_preview()

    def get_content(self):
        return self.editor.toPlainText()
