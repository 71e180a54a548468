# Two-phase entity deletion coordinated with the removal animation.

from __future__ import annotations

from typing import Callable, Dict, List, Optional
import logging
import time

import config
from model import Scene

logger = logging.getLogger(__name__)


class RemovalController:
    """Marks entities for removal and purges them once their animation finishes.

    Each request registers a one-shot entry keyed by entity id. The first
    completion signal for that id consumes the entry and purges the entity;
    repeated or unsolicited signals find no entry and do nothing. Entries whose
    signal never arrives are purged by ``sweep`` after ``timeout`` seconds.
    """

    def __init__(
        self,
        scene: Scene,
        on_removal_started: Optional[Callable[[str], None]] = None,
        timeout: float = config.REMOVAL_TIMEOUT_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._scene = scene
        self._on_removal_started = on_removal_started
        self._timeout = timeout
        self._clock = clock
        self._deadlines: Dict[str, float] = {}

    @property
    def pending_ids(self) -> List[str]:
        return list(self._deadlines)

    def request(self, entity_id: str) -> bool:
        """Description: Start removing an entity; returns False for unknown or already pending ids
        Inputs: entity_id: str
        """
        entity = self._scene.get(entity_id)
        if entity is None or entity.pending_removal:
            logger.debug("Ignoring removal request for %s", entity_id)
            return False
        self._scene.mark_pending_removal(entity_id)
        self._deadlines[entity_id] = self._clock() + self._timeout
        logger.info("Removal requested for %s", entity_id)
        if self._on_removal_started:
            self._on_removal_started(entity_id)
        return True

    def on_removal_complete(self, entity_id: str) -> bool:
        """Description: Purge an entity whose removal animation has finished
        Inputs: entity_id: str
        """
        if self._deadlines.pop(entity_id, None) is None:
            logger.debug("Ignoring removal completion for %s", entity_id)
            return False
        self._scene.purge(entity_id)
        logger.info("Purged %s", entity_id)
        return True

    def sweep(self) -> List[str]:
        """Description: Purge requests whose completion signal is overdue
        Inputs: None
        """
        now = self._clock()
        overdue = [entity_id for entity_id, deadline in self._deadlines.items() if deadline <= now]
        for entity_id in overdue:
            logger.warning("Removal of %s timed out; purging without animation", entity_id)
            self.on_removal_complete(entity_id)
        return overdue
