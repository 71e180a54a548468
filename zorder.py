# Stacking order for entities on the surface.

from __future__ import annotations


class ZOrderAllocator:
    """Hands out strictly increasing stacking values, starting at 1.

    Values are never reused. Python ints do not overflow, so no wraparound
    policy exists.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value
