# Pointer and keyboard interaction on the shape surface.

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional
import logging

import config
from hit_test import query_region
from model import Point, Rect, Scene
from removal import RemovalController
from selection import SelectionManager

logger = logging.getLogger(__name__)

BoundingBoxProvider = Callable[[str], Optional[Rect]]


class InteractionState(Enum):
    IDLE = "idle"
    DRAGGING_ENTITIES = "dragging_entities"
    DRAWING_MARQUEE = "drawing_marquee"


def normalize_key(key: str) -> str:
    """Description: Map toolkit key names onto canonical key names
    Inputs: key: str
    """
    return config.KEY_ALIASES.get(key, key)


class InputStateMachine:
    """Turns raw pointer, wheel and key events into selection and entity changes.

    Pointer events drive the Idle / DraggingEntities / DrawingMarquee states.
    Keys, wheel and context actions are handled the same way in every state.
    """

    def __init__(
        self,
        scene: Scene,
        selection: SelectionManager,
        removal: RemovalController,
        query_bounding_box: BoundingBoxProvider,
    ) -> None:
        """Description: Init
        Inputs: scene: Scene, selection: SelectionManager, removal: RemovalController, query_bounding_box: BoundingBoxProvider
        """
        self._scene = scene
        self._selection = selection
        self._removal = removal
        self._query_bounding_box = query_bounding_box

        self.state = InteractionState.IDLE
        self._last_pointer: Optional[Point] = None
        self._marquee_anchor: Optional[Point] = None
        self._marquee: Optional[Rect] = None

    @property
    def marquee(self) -> Optional[Rect]:
        """Description: Marquee rectangle a renderer should draw, if one is being dragged out
        Inputs: None
        """
        return self._marquee

    def on_pointer_down(self, target: Optional[str], button: int, x: float, y: float) -> None:
        """Description: Start an entity drag or a marquee
        Inputs: target: Optional[str], button: int, x: float, y: float
        """
        if button != config.PRIMARY_BUTTON:
            logger.debug("Ignoring pointer-down with button %s", button)
            return
        if target is not None and self._scene.get_live(target) is None:
            logger.debug("Ignoring pointer-down on unavailable entity %s", target)
            return
        if self.state != InteractionState.IDLE:
            self.on_pointer_up()

        if target is None:
            self._selection.clear()
            self._marquee_anchor = (x, y)
            self._marquee = Rect(x, y, 0, 0)
            self.state = InteractionState.DRAWING_MARQUEE
            return

        self._last_pointer = (x, y)
        self._selection.select_single(target)
        self.state = InteractionState.DRAGGING_ENTITIES

    def on_pointer_move(self, x: float, y: float) -> None:
        if self.state == InteractionState.DRAGGING_ENTITIES:
            self._drag_to(x, y)
        elif self.state == InteractionState.DRAWING_MARQUEE:
            self._update_marquee(x, y)

    def on_pointer_up(self) -> None:
        if self.state == InteractionState.DRAWING_MARQUEE:
            self._marquee = None
            self._marquee_anchor = None
        self._last_pointer = None
        self.state = InteractionState.IDLE

    def on_key_down(self, key: str) -> None:
        """Description: Delete the drag targets, or nudge the active entity
        Inputs: key: str
        """
        key = normalize_key(key)
        if key in config.DELETE_KEYS:
            for entity_id in self._selection.current_drag_targets():
                self._removal.request(entity_id)
            self._selection.clear()
            return
        step = config.NUDGE_KEYS.get(key)
        active = self._selection.active
        # Nudging never applies to a multi-selection.
        if step is None or active is None:
            return
        self._scene.move_entity(active, step[0], step[1])

    def on_wheel(self, target: Optional[str], delta_y: float) -> None:
        """Description: Resize the drag targets, or the entity under the pointer
        Inputs: target: Optional[str], delta_y: float
        """
        factor = config.SHRINK_FACTOR if delta_y > 0 else config.GROW_FACTOR
        targets = self._selection.current_drag_targets()
        if not targets and target is not None:
            targets = {target}
        for entity_id in targets:
            self._scene.resize_entity(entity_id, factor)

    def on_context_action(self, target: str) -> None:
        self._scene.toggle_morph(target)

    def on_double_click(self, target: str) -> None:
        """Description: Remove a single entity regardless of the selection
        Inputs: target: str
        """
        if self._removal.request(target):
            self._selection.discard(target)

    def _drag_to(self, x: float, y: float) -> None:
        if self._last_pointer is None:
            return
        dx = x - self._last_pointer[0]
        dy = y - self._last_pointer[1]
        for entity_id in self._selection.current_drag_targets():
            self._scene.move_entity(entity_id, dx, dy)
        self._last_pointer = (x, y)

    def _update_marquee(self, x: float, y: float) -> None:
        if self._marquee_anchor is None:
            return
        self._marquee = Rect.from_corners(self._marquee_anchor, (x, y))
        candidates: Dict[str, Rect] = {}
        for entity in self._scene.live_entities():
            box = self._query_bounding_box(entity.id)
            if box is not None:
                candidates[entity.id] = box
        self._selection.replace_multi(query_region(self._marquee, candidates))
