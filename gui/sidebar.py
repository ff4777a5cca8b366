import os
import shutil
from PySide6.QtWidgets import (QWidget, QVBoxLayout, QTreeView, QFileSystemModel, QMenu, QInputDialog,
                               QMessageBox, QFileDialog, QStyledItemDelegate, QLabel)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter, QColor, QBrush


class TermRecordDelegate(QStyledItemDelegate):
    """Draws a marker next to files that are term records."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.dictionary_prefix = None
        self.record_extension = ".md"

    def set_dictionary(self, dictionary_path, record_extension=".md"):
        if dictionary_path:
            self.dictionary_prefix = dictionary_path.replace('\\', '/').rstrip('/') + '/'
        else:
            self.dictionary_prefix = None
        self.record_extension = record_extension

    def is_record(self, path):
        path = path.replace('\\', '/')
        return (
            self.dictionary_prefix is not None
            and path.startswith(self.dictionary_prefix)
            and path.endswith(self.record_extension)
        )

    def paint(self, painter, option, index):
        super().paint(painter, option, index)

        model = index.model()
        if model.isDir(index) or not self.is_record(model.filePath(index)):
            return

        size = 6
        painter.save()
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setBrush(QBrush(QColor(47, 127, 193)))
        painter.setPen(Qt.NoPen)
        painter.drawEllipse(option.rect.right() - size - 4, option.rect.center().y() - size // 2, size, size)
        painter.restore()


class Sidebar(QWidget):
    """Project tree. File operations are reported so the term store can follow them."""
    file_created = Signal(str)         # path
    file_renamed = Signal(str, str)    # old_path, new_path
    file_moved = Signal(str, str)      # old_path, new_path
    file_double_clicked = Signal(str)  # file_path

    def __init__(self, parent=None):
        super().__init__(parent)
        self.root_path = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = QLabel("No project")
        self.header.setStyleSheet("font-weight: bold; color: #666; padding: 6px 8px; border-bottom: 1px solid #ddd;")
        layout.addWidget(self.header)

        self.model = QFileSystemModel()
        self.model.setReadOnly(False)
        # In-place edits in the tree rename through the model
        self.model.fileRenamed.connect(
            lambda folder, old, new: self.file_renamed.emit(os.path.join(folder, old), os.path.join(folder, new))
        )

        self.tree = QTreeView()
        self.tree.setModel(self.model)
        self.tree.setHeaderHidden(True)
        for column in (1, 2, 3):
            self.tree.hideColumn(column)

        self.delegate = TermRecordDelegate(self.tree)
        self.tree.setItemDelegate(self.delegate)

        self.tree.setContextMenuPolicy(Qt.CustomContextMenu)
        self.tree.customContextMenuRequested.connect(self.open_context_menu)
        self.tree.doubleClicked.connect(self._on_double_clicked)
        layout.addWidget(self.tree, 1)

    def set_root_path(self, path):
        """Show ``path`` as the project root."""
        self.root_path = path
        folder_name = os.path.basename(path.rstrip('/\\'))
        self.header.setText(f"Project: {folder_name}")
        self.model.setRootPath(path)
        self.tree.setRootIndex(self.model.index(path))

    def clear(self):
        self.root_path = None
        self.header.setText("No project")
        self.delegate.set_dictionary(None)
        self.tree.setRootIndex(self.model.index(""))

    def set_dictionary(self, dictionary_path, record_extension=".md"):
        """Mark records inside ``dictionary_path`` in the tree."""
        self.delegate.set_dictionary(dictionary_path, record_extension)
        self.tree.viewport().update()

    def _on_double_clicked(self, index):
        if index.isValid() and not self.model.isDir(index):
            self.file_double_clicked.emit(self.model.filePath(index))

    def open_context_menu(self, position):
        if not self.root_path:
            return
        index = self.tree.indexAt(position)

        menu = QMenu()
        actions = {
            menu.addAction("New File"): self.create_new_file,
            menu.addAction("New Folder"): self.create_new_folder,
        }
        if index.isValid():
            menu.addSeparator()
            actions[menu.addAction("Rename")] = self.rename_item
            actions[menu.addAction("Move To…")] = self.move_item
            actions[menu.addAction("Delete")] = self.delete_item

        chosen = menu.exec(self.tree.viewport().mapToGlobal(position))
        if chosen in actions:
            actions[chosen](index)

    def _target_dir(self, index):
        if index is None or not index.isValid():
            return self.root_path
        path = self.model.filePath(index)
        return path if self.model.isDir(index) else os.path.dirname(path)

    def _ask_name(self, title, label, text=""):
        name, ok = QInputDialog.getText(self, title, label, text=text)
        name = name.strip()
        return name if ok and name else None

    def create_new_file(self, index=None):
        name = self._ask_name("New File", "Filename:")
        if not name:
            return
        path = os.path.join(self._target_dir(index), name)
        try:
            # 'x' refuses to clobber an existing file
            with open(path, 'x', encoding='utf-8'):
                pass
        except OSError as e:
            QMessageBox.warning(self, "Error", f"Could not create file: {e}")
            return
        self.file_created.emit(path)

    def create_new_folder(self, index=None):
        name = self._ask_name("New Folder", "Folder Name:")
        if not name:
            return
        path = os.path.join(self._target_dir(index), name)
        try:
            os.mkdir(path)
        except OSError as e:
            QMessageBox.warning(self, "Error", f"Could not create folder: {e}")
            return
        self.file_created.emit(path)

    def delete_item(self, index):
        # Deleting a term record does not remove the term from suggestions
        path = self.model.filePath(index)
        answer = QMessageBox.question(self, "Confirm Delete", f"Delete {os.path.basename(path)}?",
                                      QMessageBox.Yes | QMessageBox.No)
        if answer != QMessageBox.Yes:
            return
        try:
            if os.path.isdir(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except OSError as e:
            QMessageBox.warning(self, "Error", f"Could not delete: {e}")

    def _relocate(self, old_path, new_path):
        if new_path == old_path:
            return False
        if os.path.exists(new_path):
            QMessageBox.warning(self, "Exists", f"{os.path.basename(new_path)} already exists.")
            return False
        try:
            shutil.move(old_path, new_path)
        except OSError as e:
            QMessageBox.warning(self, "Error", f"Could not move: {e}")
            return False
        return True

    def rename_item(self, index):
        old_path = self.model.filePath(index)
        name = self._ask_name("Rename", "New name:", os.path.basename(old_path))
        if not name:
            return
        new_path = os.path.join(os.path.dirname(old_path), name)
        if self._relocate(old_path, new_path):
            self.file_renamed.emit(old_path, new_path)

    def move_item(self, index):
        old_path = self.model.filePath(index)
        dest_folder = QFileDialog.getExistingDirectory(self, "Select destination folder", self.root_path,
                                                       QFileDialog.ShowDirsOnly)
        if not dest_folder:
            return
        try:
            inside = os.path.commonpath([os.path.abspath(dest_folder), self.root_path]) == self.root_path
        except ValueError:
            inside = False
        if not inside:
            QMessageBox.warning(self, "Invalid Folder", "Please choose a folder within the project.")
            return
        new_path = os.path.join(dest_folder, os.path.basename(old_path))
        if self._relocate(old_path, new_path):
            self.file_moved.emit(old_path, new_path)
