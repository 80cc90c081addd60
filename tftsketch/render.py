# tftsketch/render.py
"""
Rendu de la scène dans une QImage, à l'échelle 1:1 du TFT cible.
"""

import logging

from PyQt5.QtCore import Qt, QRectF
from PyQt5.QtGui import (
    QBrush,
    QColor,
    QFont,
    QFontMetricsF,
    QImage,
    QPainter,
    QPen,
)

from .elements import (
    Bitmap,
    Circle,
    FillCircle,
    FillRect,
    Line,
    Pixel,
    Rect,
    Text,
)
from .utils import font_size, is_hex_color, text_height

logger = logging.getLogger(__name__)

SELECTION_PADDING = 5
SELECTION_COLOR = QColor("#007bff")


def _qcolor(value) -> QColor:
    return QColor(value) if is_hex_color(value) else QColor("black")


def text_font(element: Text) -> QFont:
    font = QFont("monospace")
    font.setStyleHint(QFont.Monospace)
    font.setPixelSize(font_size(element.font))
    return font


def text_width(element: Text) -> float:
    """Rendered width of a text element."""
    return QFontMetricsF(text_font(element)).horizontalAdvance(element.text)


def selection_bounds(element, measure=text_width) -> QRectF:
    """Rectangle of the dashed outline drawn around a selected element."""
    pad = SELECTION_PADDING
    if isinstance(element, Line):
        x = min(element.x1, element.x2)
        y = min(element.y1, element.y2)
        w = abs(element.x1 - element.x2)
        h = abs(element.y1 - element.y2)
    elif isinstance(element, (Circle, FillCircle)):
        x = element.x - element.r
        y = element.y - element.r
        w = h = element.r * 2
    elif isinstance(element, Pixel):
        x, y, w, h = element.x, element.y, 0, 0
    elif isinstance(element, Text):
        x, y = element.x, element.y
        w = measure(element)
        h = text_height(element.font)
    elif isinstance(element, (Rect, FillRect, Bitmap)):
        x, y, w, h = element.x, element.y, element.w, element.h
    else:
        raise TypeError(f"élément inconnu : {element!r}")
    return QRectF(x - pad, y - pad, w + pad * 2, h + pad * 2)


def _draw_bitmap(painter: QPainter, element: Bitmap, codec):
    image = codec.get(element.source) if codec is not None else None
    if image is None:
        # pas (encore) décodé : rien à dessiner
        return
    if element.bpp == 1:
        tinted = QImage(image.size(), QImage.Format_ARGB32_Premultiplied)
        tinted.fill(_qcolor(element.color))
        p = QPainter(tinted)
        p.setCompositionMode(QPainter.CompositionMode_DestinationIn)
        p.drawImage(0, 0, image)
        p.end()
        painter.drawImage(element.x, element.y, tinted)
    else:
        painter.drawImage(element.x, element.y, image)


def draw_element(painter: QPainter, element, codec=None):
    """Paint one element with ``painter``."""
    color = _qcolor(element.color)
    painter.setPen(QPen(color, 1))
    painter.setBrush(Qt.NoBrush)

    if isinstance(element, Pixel):
        painter.fillRect(element.x, element.y, 1, 1, color)
    elif isinstance(element, Line):
        painter.drawLine(element.x1, element.y1, element.x2, element.y2)
    elif isinstance(element, Rect):
        painter.drawRect(element.x, element.y, element.w, element.h)
    elif isinstance(element, FillRect):
        painter.fillRect(element.x, element.y, element.w, element.h, color)
    elif isinstance(element, Circle):
        painter.drawEllipse(
            QRectF(element.x - element.r, element.y - element.r,
                   element.r * 2, element.r * 2)
        )
    elif isinstance(element, FillCircle):
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(color))
        painter.drawEllipse(
            QRectF(element.x - element.r, element.y - element.r,
                   element.r * 2, element.r * 2)
        )
    elif isinstance(element, Text):
        painter.setFont(text_font(element))
        painter.drawText(
            QRectF(element.x, element.y, 1e5, 1e5),
            Qt.AlignLeft | Qt.AlignTop,
            element.text,
        )
    elif isinstance(element, Bitmap):
        _draw_bitmap(painter, element, codec)
    else:
        raise TypeError(f"élément inconnu : {element!r}")


def draw_selection(painter: QPainter, element):
    pen = QPen(SELECTION_COLOR, 1)
    pen.setDashPattern([4, 2])
    painter.setPen(pen)
    painter.setBrush(Qt.NoBrush)
    painter.drawRect(selection_bounds(element))


def render_scene(document) -> QImage:
    """Render the live scene of ``document`` (plus preview and selection)."""
    image = QImage(document.width, document.height,
                   QImage.Format_ARGB32_Premultiplied)
    image.fill(_qcolor(document.background))
    painter = QPainter(image)
    try:
        for element in document.scene:
            draw_element(painter, element, document.codec)
        if document.preview is not None:
            draw_element(painter, document.preview, document.codec)
        selected = document.selected_element
        if selected is not None:
            draw_selection(painter, selected)
    finally:
        painter.end()
    return image
