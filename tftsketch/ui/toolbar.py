from PyQt5.QtWidgets import QToolBar, QAction, QActionGroup, QColorDialog
from PyQt5.QtGui import QColor

from ..utils import color_to_hex

# (outil, libellé)
TOOL_ACTIONS = [
    ("select", "Sélection"),
    ("pixel", "Pixel"),
    ("line", "Ligne"),
    ("rect", "Rectangle"),
    ("fill-rect", "Rectangle plein"),
    ("circle", "Cercle"),
    ("fill-circle", "Cercle plein"),
    ("text", "Texte"),
]


class Toolbar(QToolBar):
    def __init__(self, parent):
        super().__init__("Outils", parent)
        self.main = parent
        self.document = parent.document

        self.tool_actions = {}
        group = QActionGroup(self)
        group.setExclusive(True)
        for tool, label in TOOL_ACTIONS:
            act = QAction(label, self)
            act.setCheckable(True)
            act.triggered.connect(lambda _, t=tool: self.main.set_tool(t))
            group.addAction(act)
            self.addAction(act)
            self.tool_actions[tool] = act
        self.tool_actions["select"].setChecked(True)

        bmp_act = QAction("Bitmap...", self)
        bmp_act.triggered.connect(self.main.open_bitmap_dialog)
        self.addAction(bmp_act)

        self.addSeparator()

        # Couleurs
        color_act = QAction("Couleur...", self)
        color_act.triggered.connect(self.choose_color)
        self.addAction(color_act)

        bg_act = QAction("Fond...", self)
        bg_act.triggered.connect(self.choose_background)
        self.addAction(bg_act)

    def sync_tool(self, tool):
        # place-bitmap n'a pas de bouton : on garde le dernier état
        act = self.tool_actions.get(tool)
        if act is not None:
            act.setChecked(True)

    def choose_color(self):
        """Ouvre une palette, récupère la couleur et la passe au document."""
        color = QColorDialog.getColor(
            QColor(self.document.pen_color), self.parent(), "Choisir une couleur"
        )
        if color.isValid():
            self.main.set_pen_color(color_to_hex(color))

    def choose_background(self):
        color = QColorDialog.getColor(
            QColor(self.document.background), self.parent(), "Couleur de fond"
        )
        if color.isValid():
            self.main.set_background(color_to_hex(color))
