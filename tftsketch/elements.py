# tftsketch/elements.py
"""
Modèle canonique des éléments de la scène.

Chaque primitive (pixel, ligne, rectangle, cercle, texte, bitmap) est une
dataclass. L'ensemble est fermé : l'historique, le rendu, la détection de
clic et la génération de code ne connaissent que les classes listées dans
``ELEMENT_TYPES``.
"""

import copy
import itertools
from dataclasses import dataclass, field
from typing import ClassVar

DEFAULT_COLOR = "#000000"
DEFAULT_FONT = "u8g2_font_ncenB12_tr"
DEFAULT_TEXT = "Hello"

_id_counter = itertools.count(1)


def next_element_id() -> int:
    """Return a new process-unique element id."""
    return next(_id_counter)


@dataclass(kw_only=True)
class Element:
    kind: ClassVar[str] = ""

    id: int = field(default_factory=next_element_id)
    color: str = DEFAULT_COLOR


@dataclass(kw_only=True)
class Pixel(Element):
    kind: ClassVar[str] = "pixel"

    x: int = 0
    y: int = 0


@dataclass(kw_only=True)
class Line(Element):
    kind: ClassVar[str] = "line"

    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0


@dataclass(kw_only=True)
class Rect(Element):
    kind: ClassVar[str] = "rect"

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass(kw_only=True)
class FillRect(Element):
    kind: ClassVar[str] = "fill-rect"

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


@dataclass(kw_only=True)
class Circle(Element):
    kind: ClassVar[str] = "circle"

    x: int = 0
    y: int = 0
    r: int = 0


@dataclass(kw_only=True)
class FillCircle(Element):
    kind: ClassVar[str] = "fill-circle"

    x: int = 0
    y: int = 0
    r: int = 0


@dataclass(kw_only=True)
class Text(Element):
    kind: ClassVar[str] = "text"

    x: int = 0
    y: int = 0
    text: str = DEFAULT_TEXT
    font: str = DEFAULT_FONT


@dataclass(kw_only=True)
class Bitmap(Element):
    """Bitmap décrit par un tableau C (``source``) et sa taille déclarée."""

    kind: ClassVar[str] = "bitmap"

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    bpp: int = 1
    source: str = ""


ELEMENT_TYPES = (Pixel, Line, Rect, FillRect, Circle, FillCircle, Text, Bitmap)
KINDS = {cls.kind: cls for cls in ELEMENT_TYPES}


def clone(element: Element) -> Element:
    """Deep copy keeping the same id."""
    return copy.deepcopy(element)


def move_element(element: Element, origin: Element, dx: int, dy: int):
    """Place ``element`` at the position of ``origin`` shifted by dx/dy."""
    if isinstance(element, Line):
        element.x1 = origin.x1 + dx
        element.y1 = origin.y1 + dy
        element.x2 = origin.x2 + dx
        element.y2 = origin.y2 + dy
    else:
        element.x = origin.x + dx
        element.y = origin.y + dy
