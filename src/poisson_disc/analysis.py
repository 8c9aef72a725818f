"""
Brute-force checks and statistics over a finished sample.

O(n^2) scans, meant for verification and test-sized outputs rather than
the sampling hot path.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

from .geometry import Bounds


def _as_coords(points) -> np.ndarray:
    """Accept an (N, 2) array or a sequence of Point and return float64 coords."""
    if isinstance(points, np.ndarray):
        return np.ascontiguousarray(points, dtype=np.float64).reshape(-1, 2)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)


@njit(cache=True)
def _nearest_neighbour_kernel(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    n = xs.shape[0]
    out = np.full(n, np.inf)
    for i in range(n):
        for j in range(i + 1, n):
            dx = xs[j] - xs[i]
            dy = ys[j] - ys[i]
            dist = math.sqrt(dx * dx + dy * dy)
            if dist < out[i]:
                out[i] = dist
            if dist < out[j]:
                out[j] = dist
    return out


def nearest_neighbour_distances(points) -> np.ndarray:
    """Distance from each point to its nearest neighbour (inf for a lone point)."""
    coords = _as_coords(points)
    return _nearest_neighbour_kernel(
        np.ascontiguousarray(coords[:, 0]), np.ascontiguousarray(coords[:, 1])
    )


def pairwise_min_distance(points) -> float:
    nn = nearest_neighbour_distances(points)
    if nn.size == 0:
        return math.inf
    return float(nn.min())


def check_min_distance(points, min_distance: float) -> bool:
    return pairwise_min_distance(points) >= min_distance


def check_containment(points, bounds: Bounds) -> bool:
    """All points inside the half-open rectangle."""
    coords = _as_coords(points)
    x = coords[:, 0]
    y = coords[:, 1]
    return bool(
        np.all((x >= bounds.min_x) & (x < bounds.max_x) & (y >= bounds.min_y) & (y < bounds.max_y))
    )


def packing_density(num_points: int, min_distance: float, bounds: Bounds) -> float:
    """
    Fraction of the area covered by discs of radius d/2, relative to the
    densest (hexagonal) packing, pi / (2 * sqrt(3)).
    """
    r = 0.5 * min_distance
    covered = num_points * math.pi * r * r / bounds.area
    return covered / (math.pi / (2.0 * math.sqrt(3.0)))


def summarize(points, min_distance: float, bounds: Bounds) -> dict:
    """Counts, nearest-neighbour statistics and invariant checks for a sample."""
    coords = _as_coords(points)
    nn = nearest_neighbour_distances(coords)
    finite = nn[np.isfinite(nn)]
    return {
        "num_points": int(coords.shape[0]),
        "min_distance": float(finite.min()) if finite.size else math.inf,
        "mean_nn_distance": float(finite.mean()) if finite.size else math.inf,
        "packing_density": packing_density(int(coords.shape[0]), min_distance, bounds),
        "min_distance_ok": bool(finite.size == 0 or finite.min() >= min_distance),
        "contained": check_containment(coords, bounds),
    }


__all__ = [
    "nearest_neighbour_distances",
    "pairwise_min_distance",
    "check_min_distance",
    "check_containment",
    "packing_density",
    "summarize",
]
