"""
Quality report for a saved Poisson-disc sample.

Checks the minimum-distance and containment invariants and reports
nearest-neighbour statistics and packing density.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

# Add src/ to path so the script runs from a source checkout
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from poisson_disc import Bounds, analysis, utils


def validate_positions(positions) -> np.ndarray:
    """
    Validate and return positions as an (N, 2) float array.

    Raises:
        ValueError: If positions are missing or not shaped (N, 2)
    """
    if positions is None:
        raise ValueError("result.positions is None. Cannot perform analysis.")
    pos = np.asarray(positions, dtype=np.float64)
    if pos.ndim != 2 or pos.shape[1] != 2:
        raise ValueError(f"Expected positions to be shape (N, 2), got {pos.shape}.")
    if not np.isfinite(pos).all():
        raise ValueError("positions contain NaN or infinite values")
    return pos


def analyse_sample(npz_path) -> dict:
    """Load a sample file and return the analysis summary."""
    result = utils.load_samples(npz_path)
    meta = result.meta or {}
    positions = validate_positions(result.positions)
    if "min_distance" not in meta or "bounds" not in meta:
        raise ValueError(f"{npz_path} has no min_distance/bounds metadata")
    bounds = Bounds.from_sequence(meta["bounds"])
    return analysis.summarize(positions, float(meta["min_distance"]), bounds)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Check invariants and report statistics for a Poisson-disc sample."
    )
    parser.add_argument("file", help="Path to the .npz file")
    args = parser.parse_args(argv)

    summary = analyse_sample(args.file)

    print(f"Analysis of {args.file}")
    print(f"  Points:                 {summary['num_points']}")
    print(f"  Min pairwise distance:  {summary['min_distance']:.6g}")
    print(f"  Mean NN distance:       {summary['mean_nn_distance']:.6g}")
    print(f"  Packing density:        {summary['packing_density']:.3f}")
    print(f"  Min-distance invariant: {'OK' if summary['min_distance_ok'] else 'VIOLATED'}")
    print(f"  Containment invariant:  {'OK' if summary['contained'] else 'VIOLATED'}")

    return 0 if summary["min_distance_ok"] and summary["contained"] else 1


if __name__ == "__main__":
    sys.exit(main())
