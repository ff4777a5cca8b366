"""Controller for project lifecycle and the term dictionary session."""

import os
import hashlib
from PySide6.QtWidgets import QFileDialog, QMessageBox
from PySide6.QtCore import QSettings

from core.plugin import TermPlugin
from core.term_store import TermStoreError
from gui.dictionary_watcher import DictionaryWatcher
from gui.editors import DocumentWidget


class ProjectController:
    """Handles project open/close and starts the term dictionary."""

    def __init__(self, main_window):
        """Initialize project controller.

        Args:
            main_window: The MainWindow instance
        """
        self.window = main_window
        self.settings = QSettings("Termwell", "Termwell")
        self.watcher = None

    def open_project_dialog(self):
        """Open file dialog to select project folder."""
        folder_path = QFileDialog.getExistingDirectory(self.window, "Select Project Folder")
        if folder_path:
            self.open_project(folder_path)

    def open_project(self, folder_path):
        """Open a project folder.

        Args:
            folder_path: Path to project folder
        """
        if self.window.project_manager.get_root_path():
            self._shutdown_project_session()

        if not self.window.project_manager.open_project(folder_path):
            QMessageBox.warning(self.window, "Error", f"Not a folder: {folder_path}")
            return

        folder_path = self.window.project_manager.get_root_path()

        try:
            plugin = TermPlugin(folder_path, notifier=self.window.show_notice).load()
        except TermStoreError as e:
            QMessageBox.warning(self.window, "Dictionary Error", f"Could not load the term dictionary: {e}")
            self.window.project_manager.close_project()
            return
        self.window.term_plugin = plugin

        self.watcher = DictionaryWatcher(plugin.store, self.window)

        self.window.sidebar.set_root_path(folder_path)
        self.window.sidebar.set_dictionary(
            plugin.store.absolute_path(plugin.settings.dictionary_name),
            plugin.settings.record_extension,
        )

        self.window.editor.set_project_path(folder_path)
        self.apply_autocomplete_setting()

        self.window.setWindowTitle(f"Termwell - {folder_path}")
        self.window.stack.setCurrentWidget(self.window.main_interface)
        self.window.show_notice(f"{len(plugin.repository)} terms loaded")

        self.settings.setValue("last_project", folder_path)

        recent = self.settings.value("recent_projects", [])
        if not isinstance(recent, list):
            recent = [recent] if recent else []
        if folder_path in recent:
            recent.remove(folder_path)
        recent.insert(0, folder_path)
        recent = recent[:5]  # Keep top 5
        self.settings.setValue("recent_projects", recent)

        self.restore_project_state(folder_path)

    def apply_autocomplete_setting(self):
        """Attach or detach the completion session according to settings."""
        plugin = self.window.term_plugin
        if plugin is None:
            self.window.editor.set_completion(None)
            return
        enabled = self.settings.value("autocomplete_enabled", True, type=bool) and plugin.settings.enabled
        self.window.editor.set_completion(
            plugin.completion if enabled else None,
            plugin.settings.suggestion_delay_ms,
        )

    def set_autocomplete_enabled(self, enabled):
        self.settings.setValue("autocomplete_enabled", bool(enabled))
        self.apply_autocomplete_setting()

    def save_project_state(self):
        """Save open tabs of the current project."""
        project_path = self.window.project_manager.get_root_path()
        if not project_path:
            return

        # Use hash of path for key to avoid issues with special chars
        key = hashlib.md5(project_path.encode()).hexdigest()

        open_files = []
        for i in range(self.window.editor.tabs.count()):
            widget = self.window.editor.tabs.widget(i)
            if isinstance(widget, DocumentWidget):
                path = widget.file_path
                if path and os.path.isfile(path):
                    open_files.append(path)

        self.settings.setValue(f"state/{key}/open_files", open_files)
        self.settings.sync()

    def restore_project_state(self, project_path):
        """Reopen the tabs saved for ``project_path``."""
        key = hashlib.md5(project_path.encode()).hexdigest()
        open_files = self.settings.value(f"state/{key}/open_files", [])

        # QSettings returns a plain string for single-item lists
        if open_files and not isinstance(open_files, list):
            open_files = [open_files]

        for path in open_files or []:
            if os.path.isfile(path):
                content = self.window.project_manager.read_file(path)
                if content is not None:
                    self.window.editor.open_file(path, content)

    def close_project(self):
        """Close current project and return to welcome screen."""
        self._shutdown_project_session(clear_last_project=True)
        self.window.stack.setCurrentWidget(self.window.welcome_widget)

    def _shutdown_project_session(self, clear_last_project=False):
        self.save_project_state()

        if self.watcher is not None:
            self.watcher.stop()
            self.watcher.deleteLater()
            self.watcher = None

        if self.window.term_plugin is not None:
            self.window.term_plugin.unload()
            self.window.term_plugin = None

        self.window.editor.set_completion(None)
        self.window.editor.close_all()
        self.window.sidebar.clear()
        self.window.project_manager.close_project()
        self.window.setWindowTitle("Termwell")

        if clear_last_project:
            self.settings.setValue("last_project", "")

        self.update_welcome_screen()

    def update_welcome_screen(self):
        """Update welcome screen with recent projects."""
        recent = self.settings.value("recent_projects", [])
        if not isinstance(recent, list):
            recent = [recent] if recent else []
        recent = [p for p in recent if os.path.exists(p)]
        self.settings.setValue("recent_projects", recent)

        self.window.welcome_widget.set_recent_projects(recent)

    def shutdown_on_close(self):
        """Save state when the window closes."""
        self.save_project_state()
        if self.watcher is not None:
            self.watcher.stop()
