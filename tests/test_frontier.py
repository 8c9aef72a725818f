# tests/test_frontier.py
import numpy as np
import pytest

from poisson_disc import Frontier, Point


def _filled(n):
    f = Frontier()
    for i in range(n):
        f.push(Point(float(i), 0.0))
    return f


def test_push_and_len():
    f = _filled(3)
    assert len(f) == 3
    assert bool(f)
    assert list(f) == [Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0)]


def test_evict_swaps_with_last():
    f = _filled(4)
    removed = f.evict(1)
    assert removed == Point(1.0, 0.0)
    assert list(f) == [Point(0.0, 0.0), Point(3.0, 0.0), Point(2.0, 0.0)]


def test_evict_last_and_only():
    f = _filled(2)
    assert f.evict(1) == Point(1.0, 0.0)
    assert list(f) == [Point(0.0, 0.0)]
    assert f.evict(0) == Point(0.0, 0.0)
    assert len(f) == 0
    assert not f


def test_pick_is_in_range_and_reproducible():
    f = _filled(5)
    picks_a = [f.pick(np.random.default_rng(7)) for _ in range(3)]
    picks_b = [f.pick(np.random.default_rng(7)) for _ in range(3)]
    assert picks_a == picks_b

    rng = np.random.default_rng(0)
    seen = {f.pick(rng) for _ in range(200)}
    assert seen == {0, 1, 2, 3, 4}


def test_pick_from_empty_raises():
    with pytest.raises(IndexError):
        Frontier().pick(np.random.default_rng(0))
