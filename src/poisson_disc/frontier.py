from __future__ import annotations

from typing import Iterator, List

import numpy as np

from .geometry import Point


class Frontier:
    """
    Active set of accepted points that may still spawn candidates.

    Backed by a plain list: selection is by random index and eviction swaps
    the chosen slot with the last element before shrinking, so order is not
    preserved.
    """

    def __init__(self):
        self._active: List[Point] = []

    def __len__(self) -> int:
        return len(self._active)

    def __bool__(self) -> bool:
        return bool(self._active)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._active)

    def __getitem__(self, i: int) -> Point:
        return self._active[i]

    def push(self, p: Point) -> None:
        self._active.append(p)

    def pick(self, rng: np.random.Generator) -> int:
        """Return a uniformly random index into the frontier."""
        if not self._active:
            raise IndexError("pick from an empty frontier")
        return int(rng.integers(len(self._active)))

    def evict(self, i: int) -> Point:
        """Remove slot `i` in O(1) by moving the last point into it."""
        removed = self._active[i]
        last = self._active.pop()
        if i < len(self._active):
            self._active[i] = last
        return removed


__all__ = ["Frontier"]
