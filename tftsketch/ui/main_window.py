# tftsketch/ui/main_window.py
import os
import logging
from PyQt5.QtWidgets import (
    QMainWindow,
    QDockWidget,
    QAction,
    QFileDialog,
    QMessageBox,
    QDialog,
    QInputDialog,
    QLabel,
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

from ..canvas import CanvasWidget
from ..core import Document
from ..errors import SketchError
from ..settings import load_settings, save_settings
from .toolbar import Toolbar
from .bitmap_dialog import BitmapDialog
from .canvas_size_dialog import CanvasSizeDialog
from .timeline_dock import TimelineWidget
from .code_dock import CodeWidget
from .logs_dock import LogsWidget
from .debug_dialog import DebugDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        logger.debug("MainWindow initialized")
        self.setWindowTitle("tftsketch")
        self.resize(1280, 800)

        # Paramètres de l'application
        self.settings = settings
        self.prefs = load_settings(settings)
        self.document = Document(
            self.prefs.canvas_width,
            self.prefs.canvas_height,
            background=self.prefs.background,
            pen_color=self.prefs.pen_color,
            text_font=self.prefs.text_font,
            prompt_text=self._prompt_text,
        )

        self.canvas = CanvasWidget(self.document, self)
        self.canvas.sceneChanged.connect(self.refresh)
        self.canvas.viewChanged.connect(self._refresh_timeline)
        self.setCentralWidget(self.canvas)

        self.toolbar = Toolbar(self)
        self.addToolBar(self.toolbar)

        self.timeline = TimelineWidget(self)
        self.timeline.actionClicked.connect(self.focus_action)
        self.timeline.cursorMoved.connect(self.scrub_to)
        self._create_dock("Historique", self.timeline, Qt.RightDockWidgetArea)

        self.code_view = CodeWidget(self)
        self._create_dock("Code", self.code_view, Qt.RightDockWidgetArea)

        self.logs = LogsWidget(self)
        self._create_dock("Logs", self.logs, Qt.BottomDockWidgetArea)

        self.status_label = QLabel("", self)
        self.statusBar().addPermanentWidget(self.status_label)

        self._build_menu()
        self.refresh()

    def _create_dock(self, label, widget, area):
        dock = QDockWidget(label, self)
        dock.setObjectName(label)
        dock.setWidget(widget)
        self.addDockWidget(area, dock)
        return dock

    def _build_menu(self):
        mb = self.menuBar()
        self.menu_actions = {}

        filem = mb.addMenu("Fichier")
        self._add_action(filem, "export", "Exporter le sketch...",
                         self.export_sketch, QKeySequence.Save)
        filem.addSeparator()
        self._add_action(filem, "quit", "Quitter", self.close,
                         QKeySequence.Quit)

        editm = mb.addMenu("Édition")
        self._add_action(editm, "undo", "Annuler", self.undo,
                         QKeySequence.Undo)
        self._add_action(editm, "redo", "Rétablir", self.redo,
                         QKeySequence.Redo)
        editm.addSeparator()
        self._add_action(editm, "delete_entry",
                         "Supprimer l'entrée d'historique",
                         self.delete_history_entry)
        self._add_action(editm, "delete", "Supprimer la sélection",
                         self.delete_selection, QKeySequence.Delete)
        self._add_action(editm, "clear", "Effacer le canevas", self.clear)

        canvasm = mb.addMenu("Canevas")
        self._add_action(canvasm, "resize", "Taille...",
                         self.open_canvas_size_dialog)
        self._add_action(canvasm, "bitmap", "Importer un bitmap...",
                         self.open_bitmap_dialog)

        helpm = mb.addMenu("Aide")
        self._add_action(helpm, "debug", "Debug...", self.show_debug_dialog)

    def _add_action(self, menu, key, label, slot, shortcut=None):
        act = QAction(label, self)
        if shortcut is not None:
            act.setShortcut(shortcut)
        act.triggered.connect(slot)
        menu.addAction(act)
        self.menu_actions[key] = act
        return act

    # ------------------------------------------------------------------
    def refresh(self):
        """Redraw and regenerate the sketch after a scene change."""
        self.code_view.set_code(self.document.generate_code())
        self._refresh_timeline()
        self.canvas.update()
        failures = self.document.last_decode_failures
        if failures:
            self.show_status(
                f"{len(failures)} bitmap(s) non décodé(s) : {failures[0].error}"
            )

    def _refresh_timeline(self):
        self.timeline.populate(self.document.history)
        self.menu_actions["undo"].setEnabled(self.document.history.can_undo)
        self.menu_actions["redo"].setEnabled(self.document.history.can_redo)
        self.toolbar.sync_tool(self.document.current_tool)

    def show_status(self, text: str):
        self.status_label.setText(text)

    def _run(self, operation, *args):
        """Run a document operation, reporting editor errors to the user."""
        try:
            operation(*args)
        except (SketchError, ValueError) as exc:
            logger.error(f"{type(exc).__name__}: {exc}")
            QMessageBox.warning(self, "tftsketch", str(exc))
            return False
        self.refresh()
        return True

    def _prompt_text(self, default):
        text, ok = QInputDialog.getText(self, "Texte", "Entrer le texte :",
                                        text=default)
        return text if ok else None

    # --- Outils -------------------------------------------------------
    def set_tool(self, tool):
        self._run(self.document.set_tool, tool)

    def set_pen_color(self, color):
        if self._run(self.document.set_pen_color, color):
            self.prefs.pen_color = color
            save_settings(self.prefs, self.settings)

    def set_background(self, color):
        if self._run(self.document.set_background, color):
            self.prefs.background = color
            save_settings(self.prefs, self.settings)

    def open_bitmap_dialog(self):
        dlg = BitmapDialog(self)
        if dlg.exec_() != QDialog.Accepted:
            return
        p = dlg.get_parameters()
        self._run(self.document.load_bitmap,
                  p["width"], p["height"], p["bpp"], p["source"])

    # --- Historique ---------------------------------------------------
    def undo(self):
        self._run(self.document.undo)

    def redo(self):
        self._run(self.document.redo)

    def scrub_to(self, index):
        if index != self.document.history.index:
            self._run(self.document.scrub_to, index)

    def focus_action(self, index):
        self._run(self.document.focus_action, index)

    def delete_history_entry(self):
        index = self.document.history.index
        if index < 0:
            QMessageBox.information(
                self, "Historique", "Aucune entrée d'historique à supprimer."
            )
            return
        resp = QMessageBox.question(
            self, "Historique",
            f"Supprimer l'opération n° {index + 1} ?",
        )
        if resp == QMessageBox.Yes:
            self._run(self.document.delete_current)

    def delete_selection(self):
        self._run(self.document.delete_selected)

    def clear(self):
        resp = QMessageBox.question(
            self, "Effacer",
            "Effacer le canevas ? L'historique sera perdu.",
        )
        if resp == QMessageBox.Yes:
            self._run(self.document.clear)

    def open_canvas_size_dialog(self):
        doc = self.document
        dlg = CanvasSizeDialog(doc.width, doc.height, self)
        if dlg.exec_() != QDialog.Accepted:
            return
        width, height = dlg.get_size()
        if self._run(doc.resize, width, height):
            self.prefs.canvas_width, self.prefs.canvas_height = width, height
            save_settings(self.prefs, self.settings)

    # --- Export -------------------------------------------------------
    def export_sketch(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Exporter le sketch", os.path.expanduser("~"),
            "Arduino (*.ino)"
        )
        if not path:
            return
        if not path.lower().endswith(".ino"):
            path += ".ino"
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.document.generate_code())
        except OSError as e:
            QMessageBox.critical(self, "Erreur", f"Impossible d'exporter : {e}")
            return
        self.show_status(f"Sketch exporté : {path}")

    def show_debug_dialog(self):
        """Display a dialog with debug information about the document."""
        logger.debug("Generating debug report")
        DebugDialog(self.document, self).exec_()
