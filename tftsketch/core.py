# tftsketch/core.py
"""
Logique métier de l'éditeur, indépendante des widgets :
- possède l'historique, le cache des bitmaps et la scène reconstruite
- traduit les outils et les événements pointeur en actions
- fournit le code généré pour la scène courante
"""

import logging
import math
from dataclasses import dataclass

from .bitmap import BitmapCodec
from .codegen import generate_code
from .elements import (
    DEFAULT_FONT,
    DEFAULT_TEXT,
    Bitmap,
    Circle,
    Element,
    FillCircle,
    FillRect,
    Line,
    Pixel,
    Rect,
    Text,
    clone,
    move_element,
)
from .errors import EditorBusy, NotFound
from .hittest import locate
from .history import AddAction, HistoryEngine
from .utils import is_hex_color, round_half_up

logger = logging.getLogger(__name__)

TOOLS = (
    "select",
    "pixel",
    "line",
    "rect",
    "fill-rect",
    "circle",
    "fill-circle",
    "text",
    "place-bitmap",
)

_BOX_TOOLS = {"rect": Rect, "fill-rect": FillRect}
_ROUND_TOOLS = {"circle": Circle, "fill-circle": FillCircle}


@dataclass
class DragState:
    element_id: int
    start_x: int
    start_y: int
    origin: Element


class Document:
    """One editable TFT screen: history, bitmap cache, selection and tools."""

    def __init__(
        self,
        width: int = 320,
        height: int = 240,
        background: str = "#FFFFFF",
        pen_color: str = "#000000",
        text_font: str = DEFAULT_FONT,
        prompt_text=None,
        measure=None,
    ):
        self.width = width
        self.height = height
        self.background = background
        self.pen_color = pen_color
        self.text_font = text_font
        self.prompt_text = prompt_text
        self.measure = measure

        self.codec = BitmapCodec()
        self.history = HistoryEngine(self.codec)
        self.current_tool = "select"
        self.selected_id = None
        self.preview = None
        self._start = None
        self._drag = None
        logger.debug(f"Document {width}x{height} created")

    # ------------------------------------------------------------------
    @property
    def scene(self):
        return self.history.scene

    @property
    def last_decode_failures(self):
        return self.history.last_failures

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    @property
    def selected_element(self):
        if self.selected_id is None:
            return None
        for el in self.scene:
            if el.id == self.selected_id:
                return el
        return None

    def element_by_id(self, element_id) -> Element:
        for el in self.scene:
            if el.id == element_id:
                return el
        raise NotFound(f"élément {element_id} absent de la scène")

    def _check_not_dragging(self):
        if self._drag is not None:
            raise EditorBusy("déplacement en cours")

    # --- Outils et couleurs ------------------------------------------
    def set_tool(self, name: str):
        if name not in TOOLS:
            raise ValueError(f"outil inconnu : {name}")
        self._check_not_dragging()
        logger.debug(f"Tool set to {name}")
        if self.current_tool == "place-bitmap" and name != "place-bitmap":
            self.preview = None
        if name != "select":
            self.selected_id = None
        self.current_tool = name

    def set_pen_color(self, color: str):
        if not is_hex_color(color):
            raise ValueError(f"couleur invalide : {color!r}")
        self.pen_color = color

    def set_background(self, color: str):
        if not is_hex_color(color):
            raise ValueError(f"couleur invalide : {color!r}")
        self.background = color

    # --- Historique ---------------------------------------------------
    def add_element(self, element: Element):
        """Append an 'add' action for ``element``."""
        self._check_not_dragging()
        return self.history.append(AddAction(clone(element)))

    def load_bitmap(self, width: int, height: int, bpp: int, source: str):
        """Decode a new bitmap and make it the pending element to place.

        Decoding errors propagate: nothing is added to the history.
        """
        self._check_not_dragging()
        element = Bitmap(
            w=width, h=height, bpp=bpp, source=source, color=self.pen_color
        )
        self.codec.decode(source, width, height, bpp)
        self.set_tool("place-bitmap")
        self.preview = element
        return element

    def place_bitmap(self, x: int, y: int):
        if self.current_tool != "place-bitmap" or self.preview is None:
            raise NotFound("aucun bitmap en attente de placement")
        element = self.preview
        element.x, element.y = x, y
        self.preview = None
        failures = self.add_element(element)
        self.set_tool("select")
        return failures

    def scrub_to(self, index: int):
        """Move the history cursor (timeline drag); clears the selection."""
        self._check_not_dragging()
        failures = self.history.rebuild(index)
        self.selected_id = None
        return failures

    def focus_action(self, index: int):
        """Rebuild up to ``index`` and select the element it added."""
        self._check_not_dragging()
        failures = self.history.rebuild(index)
        self.selected_id = (
            self.history.actions[index].element.id if index >= 0 else None
        )
        return failures

    def undo(self) -> bool:
        self._check_not_dragging()
        self.selected_id = None
        return self.history.undo()

    def redo(self) -> bool:
        self._check_not_dragging()
        self.selected_id = None
        return self.history.redo()

    def delete_at(self, index: int):
        self._check_not_dragging()
        action = self.history.action_at(index)
        if action.element.id == self.selected_id:
            self.selected_id = None
        return self.history.delete_at(index)

    def delete_current(self):
        """Delete the action under the history cursor."""
        if self.history.index < 0:
            raise NotFound("aucune entrée d'historique à supprimer")
        return self.delete_at(self.history.index)

    def delete_selected(self):
        if self.selected_id is None:
            raise NotFound("aucun élément sélectionné")
        return self.delete_at(self.history.index_of(self.selected_id))

    def resize(self, width: int, height: int):
        """Change the canvas size; history and bitmap cache are discarded."""
        if width <= 0 or height <= 0:
            raise ValueError(f"taille de canevas invalide : {width}x{height}")
        self.clear()
        self.width = width
        self.height = height
        logger.debug(f"Canvas resized to {width}x{height}")

    def clear(self):
        self._check_not_dragging()
        self.history.reset()
        self.codec.clear()
        self.selected_id = None
        self.preview = None
        self._start = None
        if self.current_tool == "place-bitmap":
            self.current_tool = "select"

    # --- Pointeur -----------------------------------------------------
    def hover(self, x: int, y: int):
        """Element the select tool would grab at (x, y)."""
        if self.current_tool != "select" or self._drag is not None:
            return None
        return locate((x, y), self.scene, self.measure)

    def pointer_down(self, x: int, y: int):
        logger.debug(f"Pointer down at {x},{y} tool={self.current_tool}")
        if self.current_tool == "place-bitmap":
            if self.preview is not None:
                self.place_bitmap(x, y)
            return
        if self.current_tool == "select":
            found = locate((x, y), self.scene, self.measure)
            if found is None:
                self.selected_id = None
                return
            self.selected_id = found.id
            self._drag = DragState(found.id, x, y, clone(found))
            return

        self.selected_id = None
        self._start = (x, y)
        tool = self.current_tool
        if tool == "pixel":
            self.preview = Pixel(x=x, y=y, color=self.pen_color)
        elif tool == "line":
            self.preview = Line(x1=x, y1=y, x2=x, y2=y, color=self.pen_color)
        elif tool in _BOX_TOOLS:
            self.preview = _BOX_TOOLS[tool](x=x, y=y, color=self.pen_color)
        elif tool in _ROUND_TOOLS:
            self.preview = _ROUND_TOOLS[tool](x=x, y=y, color=self.pen_color)
        elif tool == "text":
            self.preview = Text(
                x=x, y=y, text=DEFAULT_TEXT, font=self.text_font,
                color=self.pen_color,
            )

    def pointer_move(self, x: int, y: int):
        if self._drag is not None:
            element = self.selected_element
            if element is not None:
                move_element(
                    element,
                    self._drag.origin,
                    x - self._drag.start_x,
                    y - self._drag.start_y,
                )
            return
        if self.current_tool == "place-bitmap" and self.preview is not None:
            self.preview.x, self.preview.y = x, y
            return
        if self._start is None or self.preview is None:
            return
        x0, y0 = self._start
        el = self.preview
        if isinstance(el, Line):
            el.x2, el.y2 = x, y
        elif isinstance(el, (Rect, FillRect)):
            el.x, el.y = min(x0, x), min(y0, y)
            el.w, el.h = abs(x0 - x), abs(y0 - y)
        elif isinstance(el, (Circle, FillCircle)):
            el.r = round_half_up(math.hypot(x - x0, y - y0))

    def pointer_up(self, x: int, y: int):
        """Finish a drag or a drawing. Returns True if the scene changed."""
        logger.debug(f"Pointer up at {x},{y} tool={self.current_tool}")
        if self._drag is not None:
            drag, self._drag = self._drag, None
            element = self.selected_element
            if element is None:
                return False
            self.history.commit_element_edit(drag.element_id, element)
            return True
        if self._start is None or self.preview is None:
            return False

        self.pointer_move(x, y)
        element, self.preview, self._start = self.preview, None, None
        if isinstance(element, Text) and self.prompt_text is not None:
            text = self.prompt_text(element.text)
            if not text:
                return False
            element.text = text
        if isinstance(element, (Rect, FillRect)) and element.w == 0 and element.h == 0:
            return False
        if isinstance(element, (Circle, FillCircle)) and element.r == 0:
            return False
        self.add_element(element)
        return True

    # --- Export -------------------------------------------------------
    def generate_code(self) -> str:
        return generate_code(self.scene, self.background, self.width, self.height)

    def debug_report(self) -> str:
        """Return a textual report about the current document state."""
        lines: list[str] = []
        lines.append("== Canvas ==")
        lines.append(f"size: {self.width}x{self.height}")
        lines.append(f"background: {self.background}")
        lines.append(f"pen color: {self.pen_color}")
        lines.append(f"Tool: {self.current_tool}")
        lines.append("")

        lines.append("== Selection ==")
        selected = self.selected_element
        lines.append(
            f"{selected.kind} #{selected.id}" if selected else "(none)"
        )
        lines.append(f"dragging: {self.dragging}")
        lines.append("")

        lines.append("== Bitmap cache ==")
        lines.append(
            f"entries: {len(self.codec)} decodes: {self.codec.decode_count}"
        )
        lines.append("")

        lines.append("== History ==")
        lines.append(f"index: {self.history.index} / {len(self.history)}")
        for i, action in enumerate(self.history.actions):
            mark = ">" if i == self.history.index else " "
            el = action.element
            lines.append(f"{mark} {i}: {action.kind} {el.kind} #{el.id}")
        for failure in self.last_decode_failures:
            lines.append(f"  decode failed at {failure.index}: {failure.error}")
        return "\n".join(lines)
