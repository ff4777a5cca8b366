from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QPushButton, QListWidget
from PySide6.QtCore import Qt, Signal


class WelcomeWidget(QWidget):
    """Shown while no project is open."""
    open_clicked = Signal()
    recent_clicked = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        title = QLabel("Termwell")
        title.setStyleSheet("font-size: 24px; font-weight: bold; color: #888;")
        layout.addWidget(title, alignment=Qt.AlignHCenter)

        hint = QLabel("Terms live in the project's Dictionary folder.\n"
                      "Type !!!Term: description!!! in a document to define a new one.")
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet("color: #666; margin-bottom: 16px;")
        layout.addWidget(hint)

        open_btn = QPushButton("Open Project Folder")
        open_btn.setFixedWidth(220)
        open_btn.clicked.connect(self.open_clicked.emit)
        layout.addWidget(open_btn, alignment=Qt.AlignHCenter)

        self.recent_label = QLabel("Recent Projects:")
        self.recent_label.setStyleSheet("font-weight: bold; margin-top: 20px;")
        layout.addWidget(self.recent_label)

        self.recent_list = QListWidget()
        self.recent_list.setMaximumHeight(140)
        self.recent_list.itemClicked.connect(lambda item: self.recent_clicked.emit(item.text()))
        layout.addWidget(self.recent_list)

        self.set_recent_projects([])

    def set_recent_projects(self, projects):
        self.recent_list.clear()
        self.recent_list.addItems(projects)
        self.recent_label.setVisible(bool(projects))
        self.recent_list.setVisible(bool(projects))
