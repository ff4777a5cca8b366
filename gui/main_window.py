from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QSplitter, QStackedWidget
from PySide6.QtCore import Qt, QSettings

from gui.sidebar import Sidebar
from core.project import ProjectManager
from gui.editors import EditorWidget
from gui.welcome import WelcomeWidget
from gui.controllers import MenuBarManager, ProjectController, EditorController


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Termwell")
        self.resize(1100, 750)

        # Core state
        self.project_manager = ProjectManager()
        self.settings = QSettings("Termwell", "Termwell")
        self.term_plugin = None

        # Central Stack (Welcome vs Main Interface)
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.welcome_widget = WelcomeWidget()
        self.welcome_widget.open_clicked.connect(self.open_project_dialog)
        self.welcome_widget.recent_clicked.connect(self.open_project)
        self.stack.addWidget(self.welcome_widget)

        self.main_interface = QWidget()
        main_layout = QHBoxLayout(self.main_interface)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.main_splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(self.main_splitter)

        self.sidebar = Sidebar()
        self.main_splitter.addWidget(self.sidebar)

        self.editor = EditorWidget()
        self.editor.tab_closed.connect(self.save_project_state)
        self.editor.notice.connect(self.show_notice)
        self.main_splitter.addWidget(self.editor)
        self.main_splitter.setSizes([260, 840])

        self.stack.addWidget(self.main_interface)

        # Initialize controllers (after widgets are created)
        self.editor_controller = EditorController(self)
        self.project_controller = ProjectController(self)
        self.menu_manager = MenuBarManager(self)

        self.menu_manager.create_menus()
        self.menu_manager.create_toolbar()

        self.sidebar.file_created.connect(self.editor_controller.on_file_created)
        self.sidebar.file_renamed.connect(self.editor_controller.on_file_renamed)
        self.sidebar.file_moved.connect(self.editor_controller.on_file_moved)
        self.sidebar.file_double_clicked.connect(self.editor_controller.open_file)
        self.editor.term_clicked.connect(self.editor_controller.open_term)
        self.editor.modification_changed.connect(self.editor_controller.update_save_button_state)

        self.statusBar().showMessage("Ready")

        # Restore last project or show the welcome screen
        last_project = self.settings.value("last_project", "")
        self.update_welcome_screen()
        if last_project:
            self.open_project(last_project)
        else:
            self.stack.setCurrentWidget(self.welcome_widget)

    def show_notice(self, message):
        """Notification sink for the term dictionary."""
        print(f"NOTICE: {message}")
        self.statusBar().showMessage(message, 5000)

    # Delegates to controllers

    def open_project_dialog(self):
        self.project_controller.open_project_dialog()

    def open_project(self, path):
        self.project_controller.open_project(path)

    def close_project(self):
        self.project_controller.close_project()

    def save_project_state(self):
        self.project_controller.save_project_state()

    def update_welcome_screen(self):
        self.project_controller.update_welcome_screen()

    def save_current_file(self):
        self.editor_controller.save_current_file()

    def closeEvent(self, event):
        self.project_controller.shutdown_on_close()
        super().closeEvent(event)
