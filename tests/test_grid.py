"""
Tests for the acceleration grid, checked against a brute-force scan.
"""

import math

import numpy as np
import pytest

from poisson_disc import AccelerationGrid, Bounds, Point
from poisson_disc.grid import EMPTY


def _brute_force_valid(accepted, p, d, bounds):
    if not bounds.contains(p):
        return False
    for q in accepted:
        dx = q.x - p.x
        dy = q.y - p.y
        if math.sqrt(dx * dx + dy * dy) < d:
            return False
    return True


def test_grid_dimensions_and_cell_size():
    grid = AccelerationGrid(Bounds(0, 0, 10, 10), 1.0)
    assert grid.cell_size == pytest.approx(1.0 / math.sqrt(2.0))
    # ceil(10 / 0.7071) + 1 = 15 + 1
    assert grid.shape == (16, 16)
    assert (grid.cells == EMPTY).all()
    assert len(grid) == 0


def test_cell_size_is_not_rounded():
    # A floored cell size would be zero here
    grid = AccelerationGrid(Bounds(-0.05, -0.05, 0.025, 0.075), 0.01)
    assert grid.cell_size == pytest.approx(0.01 / math.sqrt(2.0))
    assert grid.shape == (
        math.ceil(0.075 / grid.cell_size) + 1,
        math.ceil(0.125 / grid.cell_size) + 1,
    )


def test_cell_index_of():
    grid = AccelerationGrid(Bounds(0, 0, 10, 10), 1.0)
    assert grid.cell_index_of(Point(0.0, 0.0)) == (0, 0)
    assert grid.cell_index_of(Point(1.0, 0.5)) == (1, 0)
    assert grid.cell_index_of(Point(9.99, 9.99)) == (14, 14)

    offset = AccelerationGrid(Bounds(-5, -5, 5, 5), 1.0)
    assert offset.cell_index_of(Point(-5.0, -5.0)) == (0, 0)


def test_try_insert_accepts_then_rejects_close_points():
    grid = AccelerationGrid(Bounds(0, 0, 10, 10), 1.0)
    assert grid.try_insert(Point(5.0, 5.0))
    assert len(grid) == 1

    assert not grid.try_insert(Point(5.0, 5.0)), "duplicate must be rejected"
    assert not grid.try_insert(Point(5.99, 5.0)), "closer than d"
    assert not grid.try_insert(Point(5.6, 5.6)), "diagonal neighbour closer than d"
    assert len(grid) == 1

    # Exactly d apart is allowed
    assert grid.try_insert(Point(6.0, 5.0))
    assert len(grid) == 2


def test_neighbour_two_cells_away_is_found():
    d = 1.0
    c = d / math.sqrt(2.0)
    grid = AccelerationGrid(Bounds(0, 0, 10, 10), d)
    a = Point(0.9 * c, 0.5 * c)
    b = Point(2.05 * c, 0.5 * c)
    assert grid.cell_index_of(a)[0] == 0
    assert grid.cell_index_of(b)[0] == 2
    assert a.dist(b) < d

    assert grid.try_insert(a)
    assert not grid.try_insert(b), "a +/-1 cell window would miss this neighbour"


def test_out_of_bounds_does_not_mutate():
    grid = AccelerationGrid(Bounds(0, 0, 10, 10), 1.0)
    for p in (Point(10.0, 5.0), Point(5.0, 10.0), Point(-0.1, 5.0), Point(5.0, -1e-9)):
        assert not grid.try_insert(p)
        assert not grid.is_valid(p)
    assert len(grid) == 0
    assert (grid.cells == EMPTY).all()


def test_is_valid_does_not_insert():
    grid = AccelerationGrid(Bounds(0, 0, 10, 10), 1.0)
    assert grid.is_valid(Point(1.0, 1.0))
    assert len(grid) == 0


def test_grid_matches_brute_force():
    """Random insertions agree with an O(N) scan, and never break the invariant."""
    rng = np.random.default_rng(1234)
    d = 0.7
    bounds = Bounds(-3.0, 2.0, 4.0, 6.5)
    grid = AccelerationGrid(bounds, d)
    accepted = []

    for _ in range(3000):
        # Sample slightly outside bounds too
        p = Point(
            float(rng.uniform(bounds.min_x - 0.5, bounds.max_x + 0.5)),
            float(rng.uniform(bounds.min_y - 0.5, bounds.max_y + 0.5)),
        )
        expected = _brute_force_valid(accepted, p, d, bounds)
        assert grid.try_insert(p) == expected, f"grid disagrees with brute force at {p}"
        if expected:
            accepted.append(p)

    assert grid.points() == accepted
    assert grid.coords().shape == (len(accepted), 2)
    # One point per occupied cell
    assert int((grid.cells != EMPTY).sum()) == len(accepted)


@pytest.mark.parametrize("d", [0.0, -1.0, math.nan, math.inf])
def test_grid_rejects_bad_distance(d):
    with pytest.raises(ValueError):
        AccelerationGrid(Bounds(0, 0, 1, 1), d)
