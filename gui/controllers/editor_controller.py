"""Controller for editor and file operations."""

import os
import shutil
from PySide6.QtWidgets import QMessageBox


class EditorController:
    """Handles file operations (open, save, rename, move, undo/redo).

    Renames and creations inside the project are forwarded to the term
    store so the term repository follows them.
    """

    def __init__(self, main_window):
        """Initialize editor controller.

        Args:
            main_window: The MainWindow instance
        """
        self.window = main_window
        self.file_ops_history = []  # list of {"type": "rename"|"move", "old": str, "new": str}
        self.file_ops_redo = []     # stack for redo

    def _store(self):
        plugin = self.window.term_plugin
        return plugin.store if plugin else None

    def _notify_renamed(self, old_path, new_path):
        store = self._store()
        if store is None:
            return
        # Folder renames carry their records along
        if os.path.isdir(new_path):
            for root, _, files in os.walk(new_path):
                for name in files:
                    moved = os.path.join(root, name)
                    original = os.path.join(old_path, os.path.relpath(moved, new_path))
                    store.notify_renamed(original, moved)
        else:
            store.notify_renamed(old_path, new_path)

    def on_file_created(self, path):
        """Handle a file or folder created from the sidebar."""
        store = self._store()
        if store is None or not os.path.isfile(path):
            return
        rel = store.relative_path(path)
        watcher = self.window.project_controller.watcher
        if watcher is not None:
            watcher.mark_known(rel)
        store.notify_created(rel)

    def on_file_renamed(self, old_path, new_path):
        """Handle a rename done in the sidebar."""
        self._record_operation("rename", old_path, new_path)

    def on_file_moved(self, old_path, new_path):
        """Handle a move done in the sidebar."""
        self._record_operation("move", old_path, new_path)

    def on_record_renamed(self, old_path, new_path):
        """Handle a term record renamed through the term store.

        The store already notified its listeners, so only tabs and history
        are updated.
        """
        self._record_operation("rename", old_path, new_path, notify=False)

    def _record_operation(self, kind, old_path, new_path, notify=True):
        self._apply_relocation(old_path, new_path, notify)
        self.file_ops_history.append({"type": kind, "old": old_path, "new": new_path})
        self.file_ops_redo.clear()
        self.window.save_project_state()

    def _apply_relocation(self, old_path, new_path, notify=True):
        """Retarget tabs and tell the term store about a relocated path."""
        if self.window.editor.update_open_file_path(old_path, new_path):
            print(f"DEBUG: Retargeted open tabs {old_path} -> {new_path}")
        if notify:
            self._notify_renamed(old_path, new_path)

    def undo_file_change(self):
        """Undo last file rename or move."""
        self._replay(self.file_ops_history, self.file_ops_redo, undo=True)

    def redo_file_change(self):
        """Redo last undone file operation."""
        self._replay(self.file_ops_redo, self.file_ops_history, undo=False)

    def _replay(self, source, target, undo):
        title = "Undo" if undo else "Redo"
        if not source:
            QMessageBox.information(self.window, title, f"No file operations to {title.lower()}.")
            return

        op = source.pop()
        src, dst = (op["new"], op["old"]) if undo else (op["old"], op["new"])
        if not os.path.exists(src) or os.path.exists(dst):
            QMessageBox.critical(self.window, f"{title} Failed", f"Cannot move {src} to {dst}")
            source.append(op)
            return
        try:
            os.makedirs(os.path.dirname(dst), exist_ok=True)
            shutil.move(src, dst)
        except OSError as e:
            QMessageBox.critical(self.window, f"{title} Failed", f"Could not {title.lower()} operation: {e}")
            source.append(op)
            return

        self._apply_relocation(src, dst)
        target.append(op)
        self.window.statusBar().showMessage(f"{title}: {os.path.basename(src)} -> {os.path.basename(dst)}", 3000)

    def update_save_button_state(self, modified):
        """Enable/disable save action based on modification state."""
        self.window.save_act.setEnabled(modified)

    def save_current_file(self):
        """Save the currently open file."""
        path, content = self.window.editor.get_current_file()
        if not path or content is None:
            return

        if self.window.project_manager.save_file(path, content):
            self.window.editor.mark_current_saved()
            self.window.statusBar().showMessage(f"Saved: {os.path.basename(path)}", 3000)
        else:
            QMessageBox.critical(self.window, "Error", f"Could not save file: {path}")

    def open_file(self, path):
        """Open ``path`` in a new tab."""
        if not os.path.isfile(path):
            return
        content = self.window.project_manager.read_file(path)
        if content is None:
            QMessageBox.warning(self.window, "Error", f"Could not open file: {path}")
            return
        self.window.editor.open_file(path, content)

    def open_term(self, term):
        """Open the record of ``term`` (from a [[term]] link)."""
        store = self._store()
        if store is None:
            return
        path = store.find_record(term)
        if path is None:
            self.window.show_notice(f"No record found for '{term}'")
            return
        self.open_file(store.absolute_path(path))
