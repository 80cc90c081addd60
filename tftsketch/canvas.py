# tftsketch/canvas.py
# -*- coding: utf-8 -*-

import logging
from PyQt5.QtWidgets import QWidget, QMessageBox
from PyQt5.QtCore import Qt, QRectF, pyqtSignal
from PyQt5.QtGui import QPainter, QColor, QPen

from .errors import SketchError
from .render import render_scene

logger = logging.getLogger(__name__)


class CanvasWidget(QWidget):
    """Affiche la scène du document et lui transmet les événements souris."""

    # émis quand la scène (et donc le code généré) a changé
    sceneChanged = pyqtSignal()
    # émis quand seule la sélection / l'aperçu a changé
    viewChanged = pyqtSignal()

    MARGIN = 10

    def __init__(self, document, parent=None):
        super().__init__(parent)
        logger.debug("CanvasWidget initialized")
        self.document = document
        self.setMouseTracking(True)
        self.setMinimumSize(200, 150)
        self.setFocusPolicy(Qt.StrongFocus)

    # ------------------------------------------------------------------
    def _scale(self) -> float:
        doc = self.document
        avail_w = max(1, self.width() - 2 * self.MARGIN)
        avail_h = max(1, self.height() - 2 * self.MARGIN)
        return max(0.01, min(avail_w / doc.width, avail_h / doc.height))

    def _target_rect(self) -> QRectF:
        s = self._scale()
        w = self.document.width * s
        h = self.document.height * s
        return QRectF((self.width() - w) / 2, (self.height() - h) / 2, w, h)

    def map_to_canvas(self, pos) -> tuple[int, int]:
        """Widget position -> integer canvas coordinates."""
        target = self._target_rect()
        s = self._scale()
        return (
            round((pos.x() - target.x()) / s),
            round((pos.y() - target.y()) / s),
        )

    def _report(self, exc: SketchError):
        logger.error(f"{type(exc).__name__}: {exc}")
        QMessageBox.warning(self, "tftsketch", str(exc))

    # ------------------------------------------------------------------
    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(60, 60, 60))
        target = self._target_rect()
        image = render_scene(self.document)
        # rendu sans lissage : un pixel TFT = un bloc net
        painter.setRenderHint(QPainter.SmoothPixmapTransform, False)
        painter.drawImage(target, image)
        painter.setPen(QPen(QColor(200, 200, 200), 1, Qt.DashLine))
        painter.drawRect(target)
        painter.end()

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        x, y = self.map_to_canvas(event.pos())
        doc = self.document
        placing = doc.current_tool == "place-bitmap"
        try:
            doc.pointer_down(x, y)
        except SketchError as exc:
            self._report(exc)
            return
        if placing:
            self.sceneChanged.emit()
        else:
            self.viewChanged.emit()
        self.update()

    def mouseMoveEvent(self, event):
        x, y = self.map_to_canvas(event.pos())
        doc = self.document
        if doc.current_tool == "select" and not doc.dragging:
            self.setCursor(
                Qt.SizeAllCursor if doc.hover(x, y) else Qt.OpenHandCursor
            )
        elif doc.current_tool == "place-bitmap":
            self.setCursor(Qt.DragCopyCursor)
        else:
            self.setCursor(Qt.CrossCursor)
        doc.pointer_move(x, y)
        self.update()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        x, y = self.map_to_canvas(event.pos())
        try:
            changed = self.document.pointer_up(x, y)
        except SketchError as exc:
            self._report(exc)
            return
        if changed:
            self.sceneChanged.emit()
        self.update()

    def keyPressEvent(self, event):
        doc = self.document
        if event.key() == Qt.Key_Escape and doc.preview is not None:
            doc.set_tool("select")
            doc.preview = None
            self.viewChanged.emit()
            self.update()
            return
        super().keyPressEvent(event)
