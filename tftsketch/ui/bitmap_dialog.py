# tftsketch/ui/bitmap_dialog.py

from PyQt5.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QFormLayout,
    QPlainTextEdit,
    QSpinBox,
    QComboBox,
    QDialogButtonBox,
    QMessageBox,
)
from PyQt5.QtCore import Qt


class BitmapDialog(QDialog):
    """Saisie d'un bitmap : taille, profondeur et tableau C."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Importer un bitmap")
        self.setModal(True)

        main_layout = QVBoxLayout(self)
        form = QFormLayout()
        main_layout.addLayout(form)

        # Largeur
        self.width_spin = QSpinBox()
        self.width_spin.setRange(1, 4096)
        self.width_spin.setValue(16)
        form.addRow("Largeur :", self.width_spin)

        # Hauteur
        self.height_spin = QSpinBox()
        self.height_spin.setRange(1, 4096)
        self.height_spin.setValue(16)
        form.addRow("Hauteur :", self.height_spin)

        # Profondeur
        self.bpp_combo = QComboBox()
        self.bpp_combo.addItem("1 bpp (monochrome)", 1)
        self.bpp_combo.addItem("16 bpp (RGB565)", 16)
        form.addRow("Format :", self.bpp_combo)

        # Tableau C
        self.array_edit = QPlainTextEdit()
        self.array_edit.setPlaceholderText(
            "const unsigned char logo[] PROGMEM = { 0x00, 0x18, ... };"
        )
        form.addRow("Tableau C :", self.array_edit)

        # Boutons OK / Annuler
        buttons = QDialogButtonBox(
            QDialogButtonBox.Ok | QDialogButtonBox.Cancel, Qt.Horizontal, self
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        main_layout.addWidget(buttons)

    def _on_accept(self):
        if not self.array_edit.toPlainText().strip():
            QMessageBox.warning(self, "Bitmap", "Tous les champs sont requis.")
            return
        self.accept()

    def get_parameters(self) -> dict:
        return {
            "width": self.width_spin.value(),
            "height": self.height_spin.value(),
            "bpp": self.bpp_combo.currentData(),
            "source": self.array_edit.toPlainText(),
        }
