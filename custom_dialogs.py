from PyQt6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QWidget
from PyQt6.QtCore import Qt, QPoint

from constants import GeneralText, WindowSize
from error_messages import ErrorMessages

class BaseDialog(QDialog):
    """Frameless dialog that can be dragged by its background."""

    def __init__(self, parent=None, settings=None, pos: QPoint = None):
        super().__init__(parent)
        self.settings = settings or {}
        self.oldPos = None

        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.Dialog)
        if pos is not None:
            self.move(pos)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.oldPos = event.globalPosition().toPoint()

    def mouseMoveEvent(self, event):
        if self.oldPos and event.buttons() == Qt.MouseButton.LeftButton:
            delta = event.globalPosition().toPoint() - self.oldPos
            self.move(self.x() + delta.x(), self.y() + delta.y())
            self.oldPos = event.globalPosition().toPoint()

    def mouseReleaseEvent(self, event):
        self.oldPos = None

class CustomMessageBox(BaseDialog):
    def __init__(self, parent=None, title=GeneralText.ERROR, text="", settings=None, pos=None, suggestions=None):
        super().__init__(parent, settings, pos)
        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumWidth(WindowSize.DIALOG_WIDTH)
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        background_widget = QWidget()
        background_widget.setObjectName("dialog_background")
        main_layout.addWidget(background_widget)
        content_layout = QVBoxLayout(background_widget)
        content_layout.setContentsMargins(20, 15, 20, 15)
        self.title_label = QLabel(title)
        self.title_label.setStyleSheet("font-weight: bold; font-size: 11pt;")
        content_layout.addWidget(self.title_label)
        self.text_label = QLabel(text)
        self.text_label.setWordWrap(True)
        self.text_label.setMinimumHeight(50)
        self.text_label.setStyleSheet("padding-top: 10px; padding-bottom: 10px;")
        content_layout.addWidget(self.text_label)

        self.suggestions_label = QLabel(ErrorMessages.format_suggestions(suggestions))
        self.suggestions_label.setWordWrap(True)
        self.suggestions_label.setStyleSheet("color: #94A3B8; padding-bottom: 10px;")
        content_layout.addWidget(self.suggestions_label)
        if not suggestions:
            self.suggestions_label.hide()

        button_layout = QHBoxLayout()
        button_layout.addStretch(1)
        self.ok_button = QPushButton(GeneralText.OK)
        self.ok_button.clicked.connect(self.accept)
        button_layout.addWidget(self.ok_button)
        content_layout.addLayout(button_layout)
