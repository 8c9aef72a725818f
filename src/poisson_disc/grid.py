"""
Uniform acceleration grid for minimum-distance queries.

Cells have side d / sqrt(2), so a cell can never hold two accepted points:
any two points sharing a cell are closer than d. A point closer than d to a
candidate can sit at most two cells away on each axis, which bounds the
neighbour scan to a 5x5 block.
"""

from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
from numba import njit

from .geometry import Bounds, Point

###############################################################################
# Constants
###############################################################################

EMPTY = -1  # Sentinel for an unoccupied cell
SEARCH_RADIUS = 2  # Neighbour window in cells on each side of the candidate


###############################################################################
# Kernels
###############################################################################


@njit(cache=True)
def _cell_index(
    x: float, y: float, min_x: float, min_y: float, cell_size: float
) -> Tuple[int, int]:
    """Convert world coordinates to (col, row) cell indices."""
    col = int(math.floor((x - min_x) / cell_size))
    row = int(math.floor((y - min_y) / cell_size))
    return col, row


@njit(cache=True)
def _has_close_neighbour(
    cells: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    col: int,
    row: int,
    x: float,
    y: float,
    min_distance: float,
) -> bool:
    """
    Scan the cells within SEARCH_RADIUS of (col, row) for a stored point
    closer than min_distance to (x, y).

    The window is clamped to the grid. `cells` holds indices into xs/ys, or
    EMPTY.
    """
    n_cols, n_rows = cells.shape
    c0 = max(col - SEARCH_RADIUS, 0)
    c1 = min(col + SEARCH_RADIUS, n_cols - 1)
    r0 = max(row - SEARCH_RADIUS, 0)
    r1 = min(row + SEARCH_RADIUS, n_rows - 1)

    for c in range(c0, c1 + 1):
        for r in range(r0, r1 + 1):
            idx = cells[c, r]
            if idx == EMPTY:
                continue
            dx = xs[idx] - x
            dy = ys[idx] - y
            if math.sqrt(dx * dx + dy * dy) < min_distance:
                return True
    return False


###############################################################################
# Grid
###############################################################################


class AccelerationGrid:
    """
    Dense (col, row) grid covering `bounds`, each cell empty or holding one
    accepted point.

    Points are stored in insertion order in flat coordinate arrays; the cell
    array holds indices into them. Cells are never vacated.
    """

    def __init__(self, bounds: Bounds, min_distance: float):
        if not min_distance > 0.0 or not math.isfinite(min_distance):
            raise ValueError(f"min_distance must be positive and finite, got {min_distance}")
        self.bounds = bounds
        self.min_distance = float(min_distance)
        self.cell_size = self.min_distance / math.sqrt(2.0)

        # +1 guards against rounding at the max edge
        n_cols = int(math.ceil(bounds.dx / self.cell_size)) + 1
        n_rows = int(math.ceil(bounds.dy / self.cell_size)) + 1
        self.cells = np.full((n_cols, n_rows), EMPTY, dtype=np.int64)

        capacity = n_cols * n_rows
        self._xs = np.empty(capacity, dtype=np.float64)
        self._ys = np.empty(capacity, dtype=np.float64)
        self._count = 0

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    def __len__(self) -> int:
        return self._count

    def cell_index_of(self, p: Point) -> Tuple[int, int]:
        return _cell_index(p.x, p.y, self.bounds.min_x, self.bounds.min_y, self.cell_size)

    def is_valid(self, p: Point) -> bool:
        """True if `p` is inside bounds and at least min_distance from every stored point."""
        if not self.bounds.contains(p):
            return False
        col, row = self.cell_index_of(p)
        return not _has_close_neighbour(
            self.cells, self._xs, self._ys, col, row, p.x, p.y, self.min_distance
        )

    def try_insert(self, p: Point) -> bool:
        """Store `p` if it is valid. Returns False, without mutating, otherwise."""
        if not self.bounds.contains(p):
            return False
        col, row = self.cell_index_of(p)
        if _has_close_neighbour(
            self.cells, self._xs, self._ys, col, row, p.x, p.y, self.min_distance
        ):
            return False

        if self._count == self._xs.shape[0]:
            self._grow()
        idx = self._count
        self._xs[idx] = p.x
        self._ys[idx] = p.y
        self.cells[col, row] = idx
        self._count += 1
        return True

    def points(self) -> List[Point]:
        """Stored points in insertion order."""
        n = self._count
        return [Point(float(x), float(y)) for x, y in zip(self._xs[:n], self._ys[:n])]

    def coords(self) -> np.ndarray:
        """Stored points as an (N, 2) array."""
        return np.column_stack((self._xs[: self._count], self._ys[: self._count]))

    def _grow(self) -> None:
        # Only reachable if float rounding ever lets two points share a cell
        size = max(1, 2 * self._xs.shape[0])
        self._xs = np.resize(self._xs, size)
        self._ys = np.resize(self._ys, size)


__all__ = ["AccelerationGrid", "EMPTY", "SEARCH_RADIUS"]
