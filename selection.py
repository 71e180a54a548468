# Active and multi selection over the scene's entities.

from __future__ import annotations

from typing import Iterable, Optional, Set
import logging

from model import Scene, SelectionState
from zorder import ZOrderAllocator

logger = logging.getLogger(__name__)


class SelectionManager:
    """Tracks at most one active entity and a set of multi-selected entities.

    Only ids are held here; the per-entity ``selection_state`` flags live on the
    entities in the scene and are kept in step with these two collections.
    """

    def __init__(self, scene: Scene, zorder: ZOrderAllocator) -> None:
        self._scene = scene
        self._zorder = zorder
        self._active: Optional[str] = None
        self._multi: Set[str] = set()

    @property
    def active(self) -> Optional[str]:
        return self._active

    @property
    def multi(self) -> Set[str]:
        return set(self._multi)

    def clear(self) -> None:
        """Description: Drop the active entity and every multi member
        Inputs: None
        """
        self._set_state(self._active, SelectionState.NONE)
        self._active = None
        for entity_id in self._multi:
            self._set_state(entity_id, SelectionState.NONE)
        self._multi = set()

    def select_single(self, entity_id: str) -> None:
        """Description: Make an entity the active selection and bring it to front
        Inputs: entity_id: str

        A member of the current multi-selection keeps the group intact so the
        whole group can be dragged from it; it is still raised.
        """
        entity = self._scene.get_live(entity_id)
        if entity is None:
            logger.debug("Ignoring selection of unavailable entity %s", entity_id)
            return
        if entity_id not in self._multi:
            self.clear()
            self._active = entity_id
            entity.selection_state = SelectionState.ACTIVE
        entity.z_index = self._zorder.next()

    def replace_multi(self, entity_ids: Iterable[str]) -> None:
        """Description: Replace the multi-selection; the active entity is left alone
        Inputs: entity_ids: Iterable[str]
        """
        incoming = {entity_id for entity_id in entity_ids if self._scene.get_live(entity_id) is not None}
        if self._active in incoming:
            # An entity cannot be both active and multi.
            self._active = None
        for entity_id in self._multi - incoming:
            self._set_state(entity_id, SelectionState.NONE)
        for entity_id in incoming - self._multi:
            self._set_state(entity_id, SelectionState.MULTI)
        self._multi = incoming

    def discard(self, entity_id: str) -> None:
        """Description: Remove one entity from whichever selection holds it
        Inputs: entity_id: str
        """
        if entity_id == self._active:
            self._active = None
        self._multi.discard(entity_id)
        self._set_state(entity_id, SelectionState.NONE)

    def current_drag_targets(self) -> Set[str]:
        """Description: Entities that move, resize or delete together
        Inputs: None
        """
        if self._multi:
            return set(self._multi)
        if self._active is not None:
            return {self._active}
        return set()

    def _set_state(self, entity_id: Optional[str], state: SelectionState) -> None:
        entity = self._scene.get(entity_id)
        if entity is not None:
            entity.selection_state = state
