"""
Unit tests for stacking order allocation and AABB hit testing.
"""

import pytest

from hit_test import overlaps, query_region, topmost_live
from model import Rect, Variant
from zorder import ZOrderAllocator


class TestZOrderAllocator:
    """Tests for ZOrderAllocator."""

    def test_starts_at_one(self):
        assert ZOrderAllocator().next() == 1

    def test_strictly_increasing(self):
        allocator = ZOrderAllocator()
        values = [allocator.next() for _ in range(1000)]
        assert values == sorted(set(values))
        assert values[-1] == 1000


class TestOverlaps:
    """Tests for the inclusive overlap rule."""

    @pytest.mark.parametrize("b", [
        Rect(5, 5, 10, 10),      # partial
        Rect(2, 2, 2, 2),        # contained
        Rect(-5, -5, 30, 30),    # containing
        Rect(10, 0, 5, 5),       # touching right edge
        Rect(0, 10, 5, 5),       # touching bottom edge
        Rect(10, 10, 5, 5),      # touching corner
    ])
    def test_overlapping(self, b):
        a = Rect(0, 0, 10, 10)
        assert overlaps(a, b)
        assert overlaps(b, a)

    @pytest.mark.parametrize("b", [
        Rect(10.5, 0, 5, 5),
        Rect(-6, 0, 5, 5),
        Rect(0, 10.5, 5, 5),
        Rect(0, -6, 5, 5),
    ])
    def test_separated(self, b):
        a = Rect(0, 0, 10, 10)
        assert not overlaps(a, b)
        assert not overlaps(b, a)

    def test_zero_size_region_on_box(self):
        assert overlaps(Rect(5, 5, 0, 0), Rect(0, 0, 10, 10))


class TestQueryRegion:
    """Tests for query_region."""

    def test_empty_candidates(self):
        assert query_region(Rect(0, 0, 10, 10), {}) == set()

    def test_matches_pairwise_overlap(self):
        candidates = {
            "a": Rect(0, 0, 10, 10),
            "b": Rect(20, 0, 10, 10),
            "c": Rect(40, 40, 10, 10),
            "d": Rect(30, 10, 5, 5),
        }
        region = Rect(10, 0, 20, 10)
        expected = {key for key, rect in candidates.items() if overlaps(region, rect)}
        assert query_region(region, candidates) == expected == {"a", "b", "d"}

    def test_returns_python_strings(self):
        result = query_region(Rect(0, 0, 1, 1), {"only": Rect(0, 0, 1, 1)})
        assert result == {"only"}
        assert all(isinstance(key, str) for key in result)


class TestTopmostLive:
    """Tests for picking the topmost live entity from a stack of hits."""

    def test_first_live_wins(self, scene):
        lower = scene.create_entity(Variant.RECTANGULAR)
        upper = scene.create_entity(Variant.ROUND)
        assert topmost_live(scene, [upper, lower]) == upper

    def test_skips_entity_being_removed(self, scene):
        lower = scene.create_entity(Variant.RECTANGULAR)
        upper = scene.create_entity(Variant.ROUND)
        scene.mark_pending_removal(upper)
        assert topmost_live(scene, [upper, lower]) == lower

    def test_only_fading_or_unknown_hits_mean_empty_surface(self, scene):
        fading = scene.create_entity(Variant.RECTANGULAR)
        scene.mark_pending_removal(fading)
        assert topmost_live(scene, [fading, None, "missing"]) is None
        assert topmost_live(scene, []) is None
