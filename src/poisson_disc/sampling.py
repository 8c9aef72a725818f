"""
Poisson-disc sampling in a rectangle (Bridson's algorithm).

Dart throwing around an active frontier, with an acceleration grid for the
minimum-distance test:

1. Insert a seed point into the grid, the frontier and the output.
2. While the frontier is not empty, pick a frontier point at random and
   throw up to k candidates into the annulus [d, 2d) around it.
3. The first candidate accepted by the grid joins the grid, the frontier
   and the output. If all k fail, the frontier point is evicted (it stays
   in the output).

Every accepted point keeps the minimum-distance invariant, so stopping the
loop early still yields a valid sample.
"""

from __future__ import annotations

import math
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from . import utils
from .frontier import Frontier
from .geometry import Bounds, Point
from .grid import AccelerationGrid

###############################################################################
# Constants
###############################################################################

TWO_PI = 2.0 * math.pi
DEFAULT_K_TRIES = 30  # Bridson's suggested attempt count
REPORT_EVERY = 1000  # Progress line interval when verbose


@dataclass
class SamplingParams:
    """Configuration for a single Poisson-disc sampling run."""

    min_distance: float = 10.0
    k_tries: int = DEFAULT_K_TRIES
    bounds: Bounds | Sequence[float] = (0.0, 0.0, 100.0, 100.0)
    start: Point | Sequence[float] | None = None
    seed: int | None = None
    max_points: int | None = None
    verbose: bool = False

    def __post_init__(self):
        if not isinstance(self.bounds, Bounds):
            self.bounds = Bounds.from_sequence(self.bounds)
        if self.start is not None and not isinstance(self.start, Point):
            self.start = Point.from_sequence(self.start)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> SamplingParams:
        return cls(**config)

    def to_meta(self) -> Dict[str, Any]:
        """JSON-friendly view of the parameters."""
        meta = asdict(self)
        meta["bounds"] = list(self.bounds.as_tuple())
        meta["start"] = None if self.start is None else list(self.start.as_tuple())
        meta.pop("verbose")
        return meta


def _validate(min_distance, k_tries, max_points) -> None:
    if isinstance(min_distance, bool) or not isinstance(
        min_distance, (int, float, np.integer, np.floating)
    ):
        raise ValueError(f"min_distance must be a real number, got {min_distance!r}")
    if not math.isfinite(min_distance) or min_distance <= 0.0:
        raise ValueError(f"min_distance must be positive and finite, got {min_distance}")
    if isinstance(k_tries, bool) or not isinstance(k_tries, (int, np.integer)):
        raise ValueError(f"k_tries must be an integer, got {k_tries!r}")
    if k_tries < 1:
        raise ValueError(f"k_tries must be at least 1, got {k_tries}")
    if max_points is not None and max_points < 0:
        raise ValueError(f"max_points must be non-negative, got {max_points}")


def _random_point_in(bounds: Bounds, rng: np.random.Generator) -> Point:
    return Point(
        rng.random() * bounds.dx + bounds.min_x,
        rng.random() * bounds.dy + bounds.min_y,
    )


def _annulus_candidate(p: Point, d: float, rng: np.random.Generator) -> Point:
    """Uniform angle, radius uniform in [d, 2d), around p."""
    theta = rng.random() * TWO_PI
    radius = rng.random() * d + d
    return Point(p.x + radius * math.cos(theta), p.y + radius * math.sin(theta))


def sample_2d(
    min_distance: float,
    k_tries: int,
    bounds: Bounds,
    start: Optional[Point] = None,
    rng: int | np.random.Generator | None = None,
    *,
    max_points: Optional[int] = None,
    verbose: bool = False,
) -> List[Point]:
    """
    Generate points in `bounds` no closer than `min_distance` to each other.

    Args:
        min_distance: Minimum pairwise distance d (> 0).
        k_tries: Candidates thrown around a frontier point before it is
            evicted (>= 1).
        bounds: Sampling rectangle, half-open on the max edges.
        start: Optional first point. If it lies outside `bounds` the result
            is empty.
        rng: numpy Generator (or seed) supplying all randomness. Equal seeds
            give identical output.
        max_points: Stop once this many points have been accepted.
        verbose: Print progress lines.

    Returns:
        Accepted points in acceptance order.
    """
    _validate(min_distance, k_tries, max_points)
    if not isinstance(bounds, Bounds):
        bounds = Bounds.from_sequence(bounds)
    if start is not None and not isinstance(start, Point):
        start = Point.from_sequence(start)
    rng = utils.make_rng(rng)
    d = float(min_distance)
    start_time = time.time()

    grid = AccelerationGrid(bounds, d)
    frontier = Frontier()
    points: List[Point] = []

    if max_points == 0:
        return points

    if start is not None:
        if not grid.try_insert(start):
            if verbose:
                print(f"[poisson] start point {start.as_tuple()} outside bounds, no samples")
            return points
        seed_point = start
    else:
        seed_point = _random_point_in(bounds, rng)
        # Redraw if rounding put the draw on an open max edge
        while not grid.try_insert(seed_point):
            seed_point = _random_point_in(bounds, rng)
    points.append(seed_point)
    frontier.push(seed_point)

    while frontier:
        if max_points is not None and len(points) >= max_points:
            break
        i = frontier.pick(rng)
        p0 = frontier[i]
        found = False
        for _ in range(k_tries):
            p1 = _annulus_candidate(p0, d, rng)
            if not grid.try_insert(p1):
                continue
            points.append(p1)
            frontier.push(p1)
            found = True
            break
        if not found:
            frontier.evict(i)
        elif verbose and len(points) % REPORT_EVERY == 0:
            elapsed = time.time() - start_time
            print(
                f"[poisson] accepted {len(points)} points, frontier={len(frontier)}, elapsed={elapsed:.1f}s"
            )

    if verbose:
        elapsed = time.time() - start_time
        print(f"[poisson] done: {len(points)} points in {elapsed:.2f}s")
    return points


def run_model(
    params: SamplingParams | dict | None = None,
) -> utils.SampleResult:
    """
    Run one sampling pass from params (or a plain dict) and return a SampleResult.
    """
    if params is None:
        params = SamplingParams()
    elif isinstance(params, dict):
        params = SamplingParams.from_dict(params)
    start_time = time.time()

    points = sample_2d(
        params.min_distance,
        params.k_tries,
        params.bounds,
        params.start,
        utils.make_rng(params.seed),
        max_points=params.max_points,
        verbose=params.verbose,
    )
    positions = np.array([p.as_tuple() for p in points], dtype=np.float64).reshape(-1, 2)

    meta = {"model": "poisson_disc"}
    meta.update(params.to_meta())
    meta["num_points"] = len(points)
    meta["time_elapsed"] = time.time() - start_time
    return utils.SampleResult(positions=positions, meta=meta)


class PoissonDiscSampler:
    """
    Object interface over sample_2d.

    Holds the parameters, runs once per `run()` call and keeps the last
    result.
    """

    def __init__(self, params: SamplingParams | None = None):
        self.params = params or SamplingParams()
        self.result: utils.SampleResult | None = None

    def run(self) -> utils.SampleResult:
        self.result = run_model(self.params)
        return self.result

    @property
    def points(self) -> List[Point]:
        return [Point(float(x), float(y)) for x, y in self.get_coords()]

    def get_coords(self) -> np.ndarray:
        """
        Returns the accepted points as an (N, 2) float array in acceptance order.
        """
        if self.result is None:
            raise RuntimeError("Sampler has not been run. Call run() first.")
        return self.result.positions


__all__ = [
    "sample_2d",
    "run_model",
    "SamplingParams",
    "PoissonDiscSampler",
]
