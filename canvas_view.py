from __future__ import annotations

from typing import Callable, Dict, List, Optional
import logging
import random

import tkinter as tk

import config
from engine import SceneEngine
from hit_test import topmost_live
from model import Rect, SelectionState, ShapeEntity, Variant
from palette import pick_color, removal_frames

logger = logging.getLogger(__name__)


class CanvasView:
    """Draws the engine's scene on a tk canvas and feeds it raw input.

    The view owns everything the engine treats as external: entity colours,
    on-screen geometry for hit testing, and the removal fade.
    """

    def __init__(
        self,
        master: tk.Widget,
        engine: SceneEngine,
        on_view_changed: Optional[Callable[[], None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Description: Init
        Inputs: master: tk.Widget, engine: SceneEngine, on_view_changed, rng: Optional[random.Random]
        """
        self.engine = engine
        self._rng = rng or random.Random()
        self.canvas = tk.Canvas(master, bg=config.THEME["bg"], highlightthickness=0)
        self._on_view_changed = on_view_changed

        self._entity_items: Dict[str, int] = {}
        self._item_to_entity: Dict[int, str] = {}
        self._colors: Dict[str, str] = {}
        self._fading: Dict[str, str] = {}

        engine.set_bounding_box_provider(self.bounding_box)
        engine.set_listeners(on_changed=self.draw, on_removal_started=self._begin_removal_animation)

        self.canvas.bind("<Configure>", self._on_resize)
        self.canvas.bind("<ButtonPress>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<Double-Button-1>", self._on_double)
        self.canvas.bind("<MouseWheel>", self._on_mouse_wheel)
        self.canvas.bind("<Button-4>", lambda e: self._on_wheel_step(e, -1.0))
        self.canvas.bind("<Button-5>", lambda e: self._on_wheel_step(e, 1.0))
        self.canvas.bind("<KeyPress>", self._on_key)
        self.canvas.focus_set()
        self.canvas.after(config.REMOVAL_SWEEP_MS, self._sweep)

    def bounding_box(self, entity_id: str) -> Optional[Rect]:
        """Description: On-screen geometry of an entity, as supplied to hit testing
        Inputs: entity_id: str
        """
        item_id = self._entity_items.get(entity_id)
        if item_id is not None:
            coords = self.canvas.coords(item_id)
            if len(coords) == 4:
                return Rect.from_corners((coords[0], coords[1]), (coords[2], coords[3]))
        entity = self.engine.scene.get(entity_id)
        return entity.bounds() if entity else None

    def draw(self) -> None:
        """Description: Draw
        Inputs: None
        """
        self.canvas.delete("shape")
        self.canvas.delete("marquee")
        self._entity_items.clear()
        self._item_to_entity.clear()

        for entity in self.engine.scene.in_draw_order():
            item_id = self._draw_entity(entity)
            self._entity_items[entity.id] = item_id
            self._item_to_entity[item_id] = entity.id

        marquee = self.engine.marquee
        if marquee is not None:
            self.canvas.create_rectangle(
                marquee.left, marquee.top, marquee.right, marquee.bottom,
                outline=config.THEME["accent"], dash=(4, 2), tags="marquee",
            )
        self._notify_view_changed()

    def _draw_entity(self, entity: ShapeEntity) -> int:
        """Description: Draw entity
        Inputs: entity: ShapeEntity
        """
        if entity.id not in self._colors:
            self._colors[entity.id] = pick_color(self._rng)
        fill = self._fading.get(entity.id) or self._colors[entity.id]
        if entity.selection_state == SelectionState.ACTIVE:
            outline, width = config.THEME["active_outline"], 3
        elif entity.selection_state == SelectionState.MULTI:
            outline, width = config.THEME["multi_outline"], 2
        else:
            outline, width = fill, 1
        bounds = entity.bounds()
        create = self.canvas.create_oval if entity.effective_variant == Variant.ROUND else self.canvas.create_rectangle
        return create(
            bounds.left, bounds.top, bounds.right, bounds.bottom,
            fill=fill, outline=outline, width=width, tags="shape",
        )

    def _entity_at(self, event: tk.Event) -> Optional[str]:
        """Description: Topmost live entity under the pointer; fading shapes are passed over
        Inputs: event: tk.Event
        """
        hits = self.canvas.find_overlapping(event.x, event.y, event.x, event.y)
        return topmost_live(self.engine.scene, (self._item_to_entity.get(item_id) for item_id in reversed(hits)))

    def _on_resize(self, event: tk.Event) -> None:
        self.engine.set_surface_size(event.width, event.height)

    def _on_press(self, event: tk.Event) -> None:
        """Description: On press
        Inputs: event: tk.Event
        """
        self.canvas.focus_set()
        target = self._entity_at(event)
        # tk numbers buttons from 1; the engine numbers them from 0 (primary).
        button = event.num - 1
        if event.num == 3 and target is not None:
            self.engine.on_context_action(target)
            return
        self.engine.on_pointer_down(target, button, event.x, event.y)

    def _on_drag(self, event: tk.Event) -> None:
        self.engine.on_pointer_move(event.x, event.y)

    def _on_release(self, _event: tk.Event) -> None:
        self.engine.on_pointer_up()

    def _on_double(self, event: tk.Event) -> None:
        target = self._entity_at(event)
        if target is not None:
            self.engine.on_double_click(target)

    def _on_mouse_wheel(self, event: tk.Event) -> None:
        """Description: On mouse wheel
        Inputs: event: tk.Event
        """
        # tk reports wheel-up as a positive delta; the engine expects the opposite sign.
        self._on_wheel_step(event, -float(event.delta))

    def _on_wheel_step(self, event: tk.Event, delta_y: float) -> None:
        target = self._entity_at(event)
        if target is None:
            return
        self.engine.on_wheel(target, delta_y)

    def _on_key(self, event: tk.Event) -> None:
        self.engine.on_key_down(event.keysym)

    def _begin_removal_animation(self, entity_id: str) -> None:
        """Description: Fade an entity out, then report completion to the engine
        Inputs: entity_id: str
        """
        color = self._colors.get(entity_id, config.COLORS[0])
        frames = removal_frames(color, config.THEME["bg"])
        interval = max(1, config.REMOVAL_ANIMATION_MS // len(frames))
        logger.debug("Starting removal fade for %s", entity_id)
        self.canvas.after(interval, self._step_removal, entity_id, frames, 0, interval)

    def _step_removal(self, entity_id: str, frames: List[str], index: int, interval: int) -> None:
        if entity_id not in self.engine.scene:
            self._forget(entity_id)
            return
        if index >= len(frames):
            self._forget(entity_id)
            self.engine.on_removal_animation_complete(entity_id)
            return
        self._fading[entity_id] = frames[index]
        self.draw()
        self.canvas.after(interval, self._step_removal, entity_id, frames, index + 1, interval)

    def _forget(self, entity_id: str) -> None:
        self._fading.pop(entity_id, None)
        self._colors.pop(entity_id, None)

    def _sweep(self) -> None:
        self.engine.sweep_removals()
        self.canvas.after(config.REMOVAL_SWEEP_MS, self._sweep)

    def _notify_view_changed(self) -> None:
        """Description: Notify view changed
        Inputs: None
        """
        if self._on_view_changed:
            self._on_view_changed()
