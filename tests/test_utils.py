# tests/test_utils.py
import json

import numpy as np
import pytest

from poisson_disc import run_model, utils


def test_make_rng():
    a = utils.make_rng(5).random(3)
    b = utils.make_rng(5).random(3)
    np.testing.assert_array_equal(a, b)

    rng = np.random.default_rng(1)
    assert utils.make_rng(rng) is rng
    assert isinstance(utils.make_rng(None), np.random.Generator)


def test_save_and_load_roundtrip(tmp_path):
    result = run_model({"min_distance": 10.0, "k_tries": 10, "bounds": [-50, -50, 25, 75], "seed": 3})
    path = tmp_path / "nested" / "sample.npz"
    utils.save_sample_result(path, result)
    assert path.exists()

    loaded = utils.load_samples(path)
    np.testing.assert_array_equal(loaded.positions, result.positions)
    assert loaded.meta == result.meta
    assert loaded.num_points == result.num_points


def test_save_samples_empty(tmp_path):
    path = tmp_path / "empty.npz"
    utils.save_samples(path, positions=None, meta={"num_points": 0})
    loaded = utils.load_samples(path)
    assert loaded.positions.shape == (0, 2)
    assert loaded.meta == {"num_points": 0}


def test_save_refuses_overwrite(tmp_path):
    path = tmp_path / "sample.npz"
    result = utils.SampleResult(positions=np.zeros((1, 2)), meta={})
    utils.save_sample_result(path, result)
    with pytest.raises(FileExistsError):
        utils.save_sample_result(path, result, overwrite=False)


def test_ensure_meta():
    result = utils.SampleResult()
    assert result.ensure_meta() == {}
    assert result.meta == {}
    assert result.num_points == 0


def test_load_params_json(tmp_path):
    path = tmp_path / "params.json"
    path.write_text(json.dumps({"min_distance": 2.5, "k_tries": 20}))
    assert utils.load_params(path) == {"min_distance": 2.5, "k_tries": 20}


def test_load_params_toml(tmp_path):
    if utils.tomllib is None:
        pytest.skip("tomllib unavailable")
    path = tmp_path / "params.toml"
    path.write_text('min_distance = 2.5\nbounds = [0.0, 0.0, 10.0, 5.0]\n')
    assert utils.load_params(path) == {"min_distance": 2.5, "bounds": [0.0, 0.0, 10.0, 5.0]}


def test_load_params_rejects_unknown_format(tmp_path):
    path = tmp_path / "params.yaml"
    path.write_text("min_distance: 1\n")
    with pytest.raises(ValueError):
        utils.load_params(path)
