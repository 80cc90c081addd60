from PyQt5.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QPlainTextEdit,
    QPushButton,
    QApplication,
)
from PyQt5.QtGui import QFont


class CodeWidget(QWidget):
    """Read-only view of the generated sketch with a copy button."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setReadOnly(True)
        self.text_edit.setLineWrapMode(QPlainTextEdit.NoWrap)
        font = QFont("monospace")
        font.setStyleHint(QFont.Monospace)
        self.text_edit.setFont(font)

        copy_btn = QPushButton("Copier le code", self)
        copy_btn.clicked.connect(self._copy)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.text_edit)
        layout.addWidget(copy_btn)

    def set_code(self, code: str):
        if code != self.text_edit.toPlainText():
            self.text_edit.setPlainText(code)

    def _copy(self):
        QApplication.clipboard().setText(self.text_edit.toPlainText())
