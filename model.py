from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging
import random
import uuid

import config
from zorder import ZOrderAllocator

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class Variant(Enum):
    RECTANGULAR = "rectangular"
    ROUND = "round"


class SelectionState(Enum):
    NONE = "none"
    ACTIVE = "active"
    MULTI = "multi"


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "Rect":
        """Description: Normalised rectangle spanning two corners in any drag direction
        Inputs: cls, a: Point, b: Point
        """
        return cls(
            left=min(a[0], b[0]),
            top=min(a[1], b[1]),
            width=abs(a[0] - b[0]),
            height=abs(a[1] - b[1]),
        )


@dataclass
class ShapeEntity:
    id: str
    variant: Variant
    position: Point
    size: float
    z_index: int
    morphed: bool = False
    selection_state: SelectionState = SelectionState.NONE
    pending_removal: bool = False

    @property
    def effective_variant(self) -> Variant:
        """Description: Shape a renderer should draw; the morph overlay wins over the base variant
        Inputs: None
        """
        return Variant.ROUND if self.morphed else self.variant

    def bounds(self) -> Rect:
        """Description: Bounds
        Inputs: None
        """
        return Rect(self.position[0], self.position[1], self.size, self.size)


class Scene:
    """Owns every ShapeEntity on the surface, keyed by id.

    Operations on an unknown id are no-ops. Entities waiting on their removal
    animation stay in the table until ``purge`` but refuse moves and resizes.
    """

    def __init__(
        self,
        zorder: ZOrderAllocator,
        surface_size: Tuple[int, int] = config.DEFAULT_SURFACE_SIZE,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._zorder = zorder
        self._rng = rng or random.Random()
        self.surface_size = surface_size
        self._entities: Dict[str, ShapeEntity] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def get(self, entity_id: Optional[str]) -> Optional[ShapeEntity]:
        """Description: Get entity, or None when the id is unknown
        Inputs: entity_id: Optional[str]
        """
        if entity_id is None:
            return None
        return self._entities.get(entity_id)

    def get_live(self, entity_id: Optional[str]) -> Optional[ShapeEntity]:
        """Description: Get entity unless it is unknown or pending removal
        Inputs: entity_id: Optional[str]
        """
        entity = self.get(entity_id)
        if entity is None or entity.pending_removal:
            return None
        return entity

    def live_entities(self) -> List[ShapeEntity]:
        """Description: Live entities
        Inputs: None
        """
        return [entity for entity in self._entities.values() if not entity.pending_removal]

    def in_draw_order(self) -> List[ShapeEntity]:
        """Description: Entities sorted bottom to top by z-index
        Inputs: None
        """
        return sorted(self._entities.values(), key=lambda entity: entity.z_index)

    def new_entity_id(self) -> str:
        return str(uuid.uuid4())

    def create_entity(self, variant: Variant) -> str:
        """Description: Create an entity near the surface centre
        Inputs: variant: Variant
        """
        width, height = self.surface_size
        half = config.SPAWN_SPREAD / 2
        x = self._rng.random() * config.SPAWN_SPREAD + (width / 2 - half)
        y = self._rng.random() * config.SPAWN_SPREAD + (height / 2 - half)
        entity = ShapeEntity(
            id=self.new_entity_id(),
            variant=variant,
            position=(x, y),
            size=config.DEFAULT_SIZE,
            z_index=self._zorder.next(),
        )
        self._entities[entity.id] = entity
        logger.debug("Created %s entity %s at (%.1f, %.1f) z=%d", variant.value, entity.id, x, y, entity.z_index)
        return entity.id

    def move_entity(self, entity_id: str, dx: float, dy: float) -> None:
        """Description: Offset an entity's position; no bounds checking
        Inputs: entity_id: str, dx: float, dy: float
        """
        entity = self.get_live(entity_id)
        if entity is None:
            return
        entity.position = (entity.position[0] + dx, entity.position[1] + dy)

    def resize_entity(self, entity_id: str, factor: float) -> bool:
        """Description: Scale an entity's size; rejected outright when the result leaves (MIN_SIZE, MAX_SIZE)
        Inputs: entity_id: str, factor: float
        """
        entity = self.get_live(entity_id)
        if entity is None:
            return False
        new_size = entity.size * factor
        if not config.MIN_SIZE < new_size < config.MAX_SIZE:
            logger.debug("Rejected resize of %s to %.2f", entity_id, new_size)
            return False
        entity.size = new_size
        return True

    def toggle_morph(self, entity_id: str) -> None:
        entity = self.get(entity_id)
        if entity is None:
            return
        entity.morphed = not entity.morphed

    def mark_pending_removal(self, entity_id: str) -> None:
        entity = self.get(entity_id)
        if entity is None:
            return
        entity.pending_removal = True

    def purge(self, entity_id: str) -> Optional[ShapeEntity]:
        """Description: Drop an entity for good; returns it, or None if it was already gone
        Inputs: entity_id: str
        """
        return self._entities.pop(entity_id, None)
