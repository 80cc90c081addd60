from PyQt5.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QListWidget,
    QListWidgetItem,
    QSlider,
    QLabel,
)
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont


class TimelineWidget(QWidget):
    """Liste des actions de l'historique avec un curseur de position."""

    # index de l'action cliquée (sélectionne son élément)
    actionClicked = pyqtSignal(int)
    # nouvelle position du curseur (-1 = rien d'appliqué)
    cursorMoved = pyqtSignal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.list = QListWidget(self)
        self.list.itemClicked.connect(self._on_item_clicked)

        self.slider = QSlider(Qt.Horizontal, self)
        self.slider.setMinimum(-1)
        self.slider.valueChanged.connect(self._on_slider_changed)

        self.label = QLabel(self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.list)
        layout.addWidget(self.slider)
        layout.addWidget(self.label)

    # ------------------------------------------------------------------
    def populate(self, history):
        """Refresh the list from a HistoryEngine."""
        self.list.blockSignals(True)
        self.slider.blockSignals(True)

        self.list.clear()
        for i, action in enumerate(history.actions):
            el = action.element
            node = QListWidgetItem(f"{i + 1}. {el.kind} #{el.id}")
            node.setData(Qt.UserRole, i)
            if i > history.index:
                node.setForeground(Qt.gray)
            if i == history.index:
                font = QFont(node.font())
                font.setBold(True)
                node.setFont(font)
            self.list.addItem(node)
        self.slider.setMaximum(len(history.actions) - 1)
        self.slider.setValue(history.index)
        self.label.setText(f"Position : {history.index + 1} / {len(history)}")

        self.list.blockSignals(False)
        self.slider.blockSignals(False)

    def _on_item_clicked(self, node):
        self.actionClicked.emit(node.data(Qt.UserRole))

    def _on_slider_changed(self, value):
        self.cursorMoved.emit(value)
