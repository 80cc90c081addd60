# tftsketch/hittest.py
"""Find the element under a point, topmost first."""

import math

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
from .render import text_width
from .utils import text_height

PIXEL_TOLERANCE = 2
LINE_TOLERANCE = 5


def _dist_sq(ax, ay, bx, by):
    return (ax - bx) ** 2 + (ay - by) ** 2


def dist_to_segment_sq(px, py, x1, y1, x2, y2):
    """Squared distance from (px, py) to the segment (x1, y1)-(x2, y2)."""
    l2 = _dist_sq(x1, y1, x2, y2)
    if l2 == 0:
        return _dist_sq(px, py, x1, y1)
    t = ((px - x1) * (x2 - x1) + (py - y1) * (y2 - y1)) / l2
    t = max(0.0, min(1.0, t))
    return _dist_sq(px, py, x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def hit(element, x, y, measure=None) -> bool:
    """Return True if (x, y) falls on ``element``.

    ``measure`` maps a Text element to its rendered width; it defaults to
    the Qt font metrics used by the renderer.
    """
    if isinstance(element, Pixel):
        return (
            abs(x - element.x) <= PIXEL_TOLERANCE
            and abs(y - element.y) <= PIXEL_TOLERANCE
        )
    if isinstance(element, (Rect, FillRect, Bitmap)):
        return (
            element.x <= x <= element.x + element.w
            and element.y <= y <= element.y + element.h
        )
    if isinstance(element, (Circle, FillCircle)):
        return math.hypot(x - element.x, y - element.y) <= element.r
    if isinstance(element, Line):
        d2 = dist_to_segment_sq(
            x, y, element.x1, element.y1, element.x2, element.y2
        )
        return d2 < LINE_TOLERANCE ** 2
    if isinstance(element, Text):
        width = (measure or text_width)(element)
        height = text_height(element.font)
        return (
            element.x <= x <= element.x + width
            and element.y <= y <= element.y + height
        )
    raise TypeError(f"élément inconnu : {element!r}")


def locate(point, scene, measure=None):
    """Return the topmost element of ``scene`` containing ``point``."""
    x, y = point
    for element in reversed(scene):
        if hit(element, x, y, measure):
            return element
    return None
