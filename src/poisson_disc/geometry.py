from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A 2D point. Pure value type, compared by its coordinates."""

    x: float
    y: float

    def dist(self, other: Point) -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return math.sqrt(dx * dx + dy * dy)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Point:
        if len(values) != 2:
            raise ValueError(f"A point needs exactly 2 coordinates, got {len(values)}")
        return cls(float(values[0]), float(values[1]))


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned rectangle (min_x, min_y, max_x, max_y).

    Membership is half-open: min <= v < max on both axes.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        values = (self.min_x, self.min_y, self.max_x, self.max_y)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"Bounds must be finite, got {values}")
        if self.max_x <= self.min_x:
            raise ValueError(
                f"Bounds max_x ({self.max_x}) must be greater than min_x ({self.min_x})"
            )
        if self.max_y <= self.min_y:
            raise ValueError(
                f"Bounds max_y ({self.max_y}) must be greater than min_y ({self.min_y})"
            )

    @property
    def dx(self) -> float:
        return self.max_x - self.min_x

    @property
    def dy(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.dx * self.dy

    def contains(self, p: Point) -> bool:
        return self.min_x <= p.x < self.max_x and self.min_y <= p.y < self.max_y

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Bounds:
        if len(values) != 4:
            raise ValueError(
                f"Bounds need 4 values (min_x, min_y, max_x, max_y), got {len(values)}"
            )
        return cls(*(float(v) for v in values))


__all__ = ["Point", "Bounds"]
