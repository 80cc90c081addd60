# tftsketch/ui/canvas_size_dialog.py

from PyQt5.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QFormLayout,
    QSpinBox,
    QLabel,
    QDialogButtonBox,
)
from PyQt5.QtCore import Qt


class CanvasSizeDialog(QDialog):
    def __init__(self, width: int, height: int, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Taille du canevas")
        self.setModal(True)

        main_layout = QVBoxLayout(self)
        form = QFormLayout()
        main_layout.addLayout(form)

        self.width_spin = QSpinBox()
        self.width_spin.setRange(1, 4096)
        self.width_spin.setValue(width)
        form.addRow("Largeur (px) :", self.width_spin)

        self.height_spin = QSpinBox()
        self.height_spin.setRange(1, 4096)
        self.height_spin.setValue(height)
        form.addRow("Hauteur (px) :", self.height_spin)

        warning = QLabel(
            "Le contenu et l'historique seront effacés.", self
        )
        warning.setWordWrap(True)
        main_layout.addWidget(warning)

        buttons = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel, Qt.Horizontal, self
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        main_layout.addWidget(buttons)

    def get_size(self) -> tuple[int, int]:
        return self.width_spin.value(), self.height_spin.value()
