from PyQt5.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QPlainTextEdit,
    QDialogButtonBox,
    QApplication,
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont


class DebugDialog(QDialog):
    """État interne du document (historique, cache, sélection)."""

    def __init__(self, document, parent=None):
        super().__init__(parent)
        self.document = document
        self.setWindowTitle("Debug")
        self.setModal(True)
        self.resize(480, 420)

        layout = QVBoxLayout(self)
        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setReadOnly(True)
        self.text_edit.setFont(QFont("monospace"))
        layout.addWidget(self.text_edit)

        buttons = QDialogButtonBox(QDialogButtonBox.Close, Qt.Horizontal, self)
        refresh_btn = buttons.addButton("Rafraîchir", QDialogButtonBox.ActionRole)
        refresh_btn.clicked.connect(self.refresh)
        copy_btn = buttons.addButton("Copier", QDialogButtonBox.ActionRole)
        copy_btn.clicked.connect(
            lambda: QApplication.clipboard().setText(
                self.text_edit.toPlainText())
        )
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
        self.refresh()

    def refresh(self):
        self.text_edit.setPlainText(self.document.debug_report())
