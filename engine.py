# The shape surface engine: one explicit instance per editor surface.

from __future__ import annotations

from typing import Callable, Optional, Tuple
import random
import time

import config
from canvas_controller import BoundingBoxProvider, InputStateMachine, InteractionState
from model import Rect, Scene, Variant
from removal import RemovalController
from selection import SelectionManager
from zorder import ZOrderAllocator


class SceneEngine:
    """Owns the scene and every collaborator that mutates it.

    Surrounding UI glue calls the ``create_entity`` / ``on_*`` operations. A
    renderer observes state through ``scene`` and ``marquee`` and is told about
    changes through the ``on_changed`` and ``on_removal_started`` callbacks. It
    reports back through ``on_removal_animation_complete``.
    """

    def __init__(
        self,
        surface_size: Tuple[int, int] = config.DEFAULT_SURFACE_SIZE,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        query_bounding_box: Optional[BoundingBoxProvider] = None,
        on_changed: Optional[Callable[[], None]] = None,
        on_removal_started: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.zorder = ZOrderAllocator()
        self.scene = Scene(self.zorder, surface_size=surface_size, rng=rng)
        self.selection = SelectionManager(self.scene, self.zorder)
        self.removal = RemovalController(
            self.scene,
            on_removal_started=self._removal_started,
            clock=clock,
        )
        self.input = InputStateMachine(
            self.scene,
            self.selection,
            self.removal,
            self._bounding_box,
        )
        self._query_bounding_box = query_bounding_box
        self._on_changed = on_changed
        self._on_removal_started = on_removal_started

    @property
    def state(self) -> InteractionState:
        return self.input.state

    @property
    def marquee(self) -> Optional[Rect]:
        return self.input.marquee

    def set_bounding_box_provider(self, provider: Optional[BoundingBoxProvider]) -> None:
        self._query_bounding_box = provider

    def set_listeners(
        self,
        on_changed: Optional[Callable[[], None]] = None,
        on_removal_started: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._on_changed = on_changed
        self._on_removal_started = on_removal_started

    def set_surface_size(self, width: int, height: int) -> None:
        self.scene.surface_size = (width, height)

    def create_entity(self, variant: Variant) -> str:
        entity_id = self.scene.create_entity(variant)
        self._notify_changed()
        return entity_id

    def on_pointer_down(self, target: Optional[str], button: int, x: float, y: float) -> None:
        self.input.on_pointer_down(target, button, x, y)
        self._notify_changed()

    def on_pointer_move(self, x: float, y: float) -> None:
        if self.input.state == InteractionState.IDLE:
            return
        self.input.on_pointer_move(x, y)
        self._notify_changed()

    def on_pointer_up(self) -> None:
        self.input.on_pointer_up()
        self._notify_changed()

    def on_key_down(self, key: str) -> None:
        self.input.on_key_down(key)
        self._notify_changed()

    def on_wheel(self, target: Optional[str], delta_y: float) -> None:
        self.input.on_wheel(target, delta_y)
        self._notify_changed()

    def on_context_action(self, target: str) -> None:
        self.input.on_context_action(target)
        self._notify_changed()

    def on_double_click(self, target: str) -> None:
        self.input.on_double_click(target)
        self._notify_changed()

    def on_removal_animation_complete(self, entity_id: str) -> None:
        if self.removal.on_removal_complete(entity_id):
            self._notify_changed()

    def sweep_removals(self) -> None:
        """Description: Purge removals whose animation never reported back
        Inputs: None
        """
        if self.removal.sweep():
            self._notify_changed()

    def _bounding_box(self, entity_id: str) -> Optional[Rect]:
        if self._query_bounding_box is not None:
            return self._query_bounding_box(entity_id)
        entity = self.scene.get(entity_id)
        return entity.bounds() if entity else None

    def _removal_started(self, entity_id: str) -> None:
        if self._on_removal_started:
            self._on_removal_started(entity_id)

    def _notify_changed(self) -> None:
        if self._on_changed:
            self._on_changed()
