# src/poisson_disc/utils.py
from __future__ import annotations

import json
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    tomllib = None  # type: ignore


@dataclass
class SampleResult:
    """Common container for sampler outputs."""

    positions: Optional[np.ndarray] = None
    meta: Optional[Dict[str, Any]] = None

    def ensure_meta(self) -> Dict[str, Any]:
        if self.meta is None:
            self.meta = {}
        return self.meta

    @property
    def num_points(self) -> int:
        return 0 if self.positions is None else int(self.positions.shape[0])


def make_rng(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return a numpy Generator for `seed`; an existing Generator is passed through."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def now_str() -> str:
    return time.strftime("%Y%m%d-%H%M%S")


def save_samples(path: str | os.PathLike[str], positions=None, meta=None):
    """
    Convenience wrapper around save_sample_result for raw arrays.
    """
    result = SampleResult(
        positions=None if positions is None else np.asarray(positions, dtype=np.float64),
        meta=meta or {},
    )
    save_sample_result(path, result)


def save_sample_result(
    path: str | os.PathLike[str], result: SampleResult, *, overwrite: bool = True
) -> None:
    """Serialize a SampleResult to a compressed .npz file."""
    if not overwrite and Path(path).exists():
        raise FileExistsError(f"{path} already exists")
    out_dir = Path(path).parent
    out_dir.mkdir(parents=True, exist_ok=True)
    out: Dict[str, Any] = {}
    positions = result.positions
    if positions is None:
        positions = np.empty((0, 2), dtype=np.float64)
    out["positions"] = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    # Stored as JSON text so loading never needs allow_pickle
    out["meta"] = np.array(json.dumps(result.meta or {}))
    np.savez_compressed(path, **out)


def load_samples(path: str | os.PathLike[str]) -> SampleResult:
    """
    Load a sample .npz into a SampleResult.
    """
    with np.load(path) as data:
        positions = data["positions"].astype(np.float64) if "positions" in data else None
        meta: Dict[str, Any] = {}
        if "meta" in data:
            meta = json.loads(str(data["meta"]))
    return SampleResult(positions=positions, meta=meta)


def load_params(path: str | os.PathLike[str]) -> Dict[str, Any]:
    """
    Load sampling parameters from JSON or TOML.
    """
    path = str(path)
    with open(path, "rb") as fh:
        data = fh.read()
    suffix = Path(path).suffix.lower()
    if suffix in {".json", ""}:
        return json.loads(data.decode("utf-8"))
    if suffix in {".toml", ".tml"}:
        if tomllib is None:
            raise RuntimeError("tomllib is unavailable; cannot parse TOML files")
        return tomllib.loads(data.decode("utf-8"))
    raise ValueError(f"Unsupported parameter file format: {suffix}")
