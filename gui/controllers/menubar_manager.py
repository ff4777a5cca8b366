"""Menu bar and toolbar manager for MainWindow."""

from PySide6.QtWidgets import QStyle
from PySide6.QtGui import QAction, QKeySequence


class MenuBarManager:
    """Manages menu bar and toolbars for the main window."""

    def __init__(self, main_window):
        """Initialize menu bar manager.

        Args:
            main_window: The MainWindow instance
        """
        self.window = main_window
        self.menu_bar = main_window.menuBar()

    def create_menus(self):
        """Create all application menus."""
        self._create_file_menu()
        self._create_edit_menu()
        self._create_terms_menu()

    def _create_file_menu(self):
        """Create File menu."""
        file_menu = self.menu_bar.addMenu("File")

        open_action = QAction("Open Project Folder", self.window)
        open_action.triggered.connect(self.window.open_project_dialog)
        file_menu.addAction(open_action)

        save_action = QAction("Save", self.window)
        save_action.setShortcut("Ctrl+S")
        save_action.triggered.connect(self.window.save_current_file)
        file_menu.addAction(save_action)

        close_project_action = QAction("Close Project", self.window)
        close_project_action.triggered.connect(self.window.close_project)
        file_menu.addAction(close_project_action)

        exit_action = QAction("Exit", self.window)
        exit_action.triggered.connect(self.window.close)
        file_menu.addAction(exit_action)

    def _create_edit_menu(self):
        """Create Edit menu acting on the current document."""
        edit_menu = self.menu_bar.addMenu("Edit")

        for label, shortcut, method in (
            ("Undo", "Ctrl+Z", "undo"),
            ("Redo", "Ctrl+Y", "redo"),
            (None, None, None),
            ("Cut", "Ctrl+X", "cut"),
            ("Copy", "Ctrl+C", "copy"),
            ("Paste", "Ctrl+V", "paste"),
        ):
            if label is None:
                edit_menu.addSeparator()
                continue
            action = QAction(label, self.window)
            action.setShortcut(shortcut)
            action.triggered.connect(lambda checked=False, m=method: self._editor_call(m))
            edit_menu.addAction(action)

    def _editor_call(self, method):
        editor = self.window.editor.current_editor()
        if editor is not None:
            getattr(editor, method)()

    def _create_terms_menu(self):
        """Create Terms menu."""
        terms_menu = self.menu_bar.addMenu("Terms")

        browse_action = QAction("Browse Dictionary...", self.window)
        browse_action.setShortcut("Ctrl+Shift+D")
        browse_action.triggered.connect(self._open_dictionary_browser)
        terms_menu.addAction(browse_action)

        terms_menu.addSeparator()

        autocomplete_action = QAction("Enable Term Autocomplete", self.window)
        autocomplete_action.setCheckable(True)
        autocomplete_action.setChecked(
            self.window.settings.value("autocomplete_enabled", True, type=bool)
        )
        autocomplete_action.triggered.connect(self.window.project_controller.set_autocomplete_enabled)
        terms_menu.addAction(autocomplete_action)

    def _open_dictionary_browser(self):
        """Open the term dictionary dialog."""
        # Import here to avoid circular imports
        from gui.dialogs.dictionary_dialog import DictionaryDialog

        if self.window.term_plugin is None:
            self.window.show_notice("Open a project to browse its dictionary")
            return

        dialog = DictionaryDialog(self.window.term_plugin, self.window)
        dialog.open_requested.connect(self.window.editor_controller.open_file)
        dialog.record_renamed.connect(self.window.editor_controller.on_record_renamed)
        dialog.exec()

    def create_toolbar(self):
        """Create main toolbar."""
        toolbar = self.window.addToolBar("Main Toolbar")
        toolbar.setMovable(False)
        style = self.window.style()

        def add(icon, text, tip, slot, shortcut=None):
            action = QAction(style.standardIcon(icon), text, self.window)
            action.setStatusTip(tip)
            if shortcut:
                action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(slot)
            toolbar.addAction(action)
            return action

        self.window.save_act = add(QStyle.SP_DriveFDIcon, "Save", "Save current file", self.window.save_current_file)
        self.window.save_act.setEnabled(False)
        toolbar.addSeparator()

        add(QStyle.SP_ArrowBack, "Undo File Change", "Undo last file rename/move",
            self.window.editor_controller.undo_file_change, "Ctrl+Alt+Z")
        add(QStyle.SP_ArrowForward, "Redo File Change", "Redo last undone file rename/move",
            self.window.editor_controller.redo_file_change, "Ctrl+Alt+Y")
        add(QStyle.SP_DirOpenIcon, "Open Project", "Open a project folder", self.window.open_project_dialog)
        add(QStyle.SP_DialogCloseButton, "Close Project", "Close current project", self.window.close_project)
        toolbar.addSeparator()

        add(QStyle.SP_FileDialogContentsView, "Dictionary", "Browse the term dictionary", self._open_dictionary_browser)

        self.window.toolbar = toolbar
