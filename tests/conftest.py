"""
Pytest configuration and shared fixtures for the shape surface tests.
"""

import random
import sys
from pathlib import Path
from typing import List

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from engine import SceneEngine
from model import Scene, Variant
from removal import RemovalController
from selection import SelectionManager
from zorder import ZOrderAllocator


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RemovalRecorder:
    """Stands in for the removal animation; remembers which ids it was asked to play."""

    def __init__(self):
        self.started: List[str] = []

    def __call__(self, entity_id: str) -> None:
        self.started.append(entity_id)


# ============== Component Fixtures ==============

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recorder() -> RemovalRecorder:
    return RemovalRecorder()


@pytest.fixture
def zorder() -> ZOrderAllocator:
    return ZOrderAllocator()


@pytest.fixture
def scene(zorder: ZOrderAllocator) -> Scene:
    return Scene(zorder, surface_size=(1000, 800), rng=random.Random(1))


@pytest.fixture
def selection(scene: Scene, zorder: ZOrderAllocator) -> SelectionManager:
    return SelectionManager(scene, zorder)


@pytest.fixture
def removal(scene: Scene, recorder: RemovalRecorder, clock: FakeClock) -> RemovalController:
    return RemovalController(scene, on_removal_started=recorder, timeout=2.0, clock=clock)


# ============== Engine Fixtures ==============

@pytest.fixture
def engine(recorder: RemovalRecorder, clock: FakeClock) -> SceneEngine:
    """Seeded engine with a recording removal animation."""
    return SceneEngine(
        surface_size=(1000, 800),
        rng=random.Random(7),
        clock=clock,
        on_removal_started=recorder,
    )


@pytest.fixture
def place(engine: SceneEngine):
    """Create an entity at a fixed position and size."""

    def _place(x: float, y: float, size: float = 100, variant: Variant = Variant.RECTANGULAR) -> str:
        entity_id = engine.create_entity(variant)
        entity = engine.scene.get(entity_id)
        entity.position = (x, y)
        entity.size = size
        return entity_id

    return _place
