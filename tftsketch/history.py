# tftsketch/history.py
"""
Historique linéaire des actions d'édition.

La scène visible n'est jamais modifiée par patch : elle est reconstruite en
rejouant les actions ``0..index`` dans l'ordre (algorithme du peintre).
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, NamedTuple

from .bitmap import BitmapCodec
from .elements import Bitmap, Element, clone
from .errors import BitmapError, EditorBusy, NotFound

logger = logging.getLogger(__name__)


@dataclass
class AddAction:
    kind: ClassVar[str] = "add"

    element: Element


class DecodeFailure(NamedTuple):
    index: int
    element: Bitmap
    error: BitmapError


class HistoryEngine:
    def __init__(self, codec: BitmapCodec | None = None):
        self.codec = codec if codec is not None else BitmapCodec()
        self.actions: list[AddAction] = []
        self.index = -1
        self.scene: list[Element] = []
        self.last_failures: list[DecodeFailure] = []
        self._rebuilding = False

    def __len__(self):
        return len(self.actions)

    # ------------------------------------------------------------------
    def _check_idle(self):
        if self._rebuilding:
            raise EditorBusy("historique en cours de reconstruction")

    @property
    def can_undo(self) -> bool:
        return self.index >= 0

    @property
    def can_redo(self) -> bool:
        return self.index + 1 < len(self.actions)

    def action_at(self, index: int) -> AddAction:
        if not 0 <= index < len(self.actions):
            raise NotFound(f"aucune action à l'index {index}")
        return self.actions[index]

    def index_of(self, element_id: int) -> int:
        for i, action in enumerate(self.actions):
            if action.element.id == element_id:
                return i
        raise NotFound(f"aucune action pour l'élément {element_id}")

    # ------------------------------------------------------------------
    def append(self, action: AddAction) -> list[DecodeFailure]:
        """Drop the redo branch, push ``action`` and rebuild up to it."""
        self._check_idle()
        del self.actions[self.index + 1:]
        self.actions.append(action)
        logger.debug(
            "Append %s #%s at %d", action.element.kind, action.element.id,
            len(self.actions) - 1,
        )
        return self.rebuild(len(self.actions) - 1)

    def rebuild(self, target_index: int) -> list[DecodeFailure]:
        """Replay actions ``0..target_index`` into a fresh scene.

        A bitmap that fails to decode stays in the scene (it draws nothing)
        and is reported in the returned list.
        """
        self._check_idle()
        if not -1 <= target_index < len(self.actions):
            raise NotFound(
                f"index {target_index} hors de l'historique "
                f"(0..{len(self.actions) - 1})"
            )
        self._rebuilding = True
        try:
            scene = []
            failures = []
            for i in range(target_index + 1):
                action = self.actions[i]
                if not isinstance(action, AddAction):
                    continue
                el = clone(action.element)
                if isinstance(el, Bitmap) and not self.codec.has(el.source):
                    try:
                        self.codec.decode(el.source, el.w, el.h, el.bpp)
                    except BitmapError as exc:
                        logger.warning(
                            "Bitmap #%s (action %d) not decoded: %s",
                            el.id, i, exc,
                        )
                        failures.append(DecodeFailure(i, el, exc))
                scene.append(el)
            self.index = target_index
            self.scene = scene
            self.last_failures = failures
        finally:
            self._rebuilding = False
        logger.debug(
            "Rebuilt scene: %d elements, index %d/%d",
            len(self.scene), self.index, len(self.actions),
        )
        return failures

    def delete_at(self, index: int) -> AddAction:
        """Remove the action at ``index`` and rebuild up to ``index - 1``."""
        self._check_idle()
        removed = self.action_at(index)
        del self.actions[index]
        logger.debug("Deleted action %d (%s)", index, removed.element.kind)
        self.rebuild(index - 1)
        return removed

    def commit_element_edit(self, element_id: int, new_state: Element):
        """Write an edited element back into its action, in place."""
        self._check_idle()
        action = self.actions[self.index_of(element_id)]
        action.element = clone(new_state)
        logger.debug("Committed edit of %s #%s", new_state.kind, element_id)

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self.rebuild(self.index - 1)
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self.rebuild(self.index + 1)
        return True

    def reset(self):
        self._check_idle()
        self.actions = []
        self.index = -1
        self.scene = []
        self.last_failures = []
