#!/usr/bin/env python3
"""
Single Poisson-disc Sampling Runner

Runs one sampling pass and writes the accepted points to a .npz file.
"""

import argparse
import sys
import time
from pathlib import Path

# Add src/ to path so the script runs from a source checkout
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from poisson_disc import PoissonDiscSampler, utils
from poisson_disc.config import add_sampling_arguments, params_from_args


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a single Poisson-disc point set",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_sampling_arguments(parser)
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--out",
        type=str,
        default=None,
        help="Output .npz file path (auto-generated if not provided)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.seed is None and not args.config:
        args.seed = 42
    params = params_from_args(args)

    print(
        f"Sampling: d={params.min_distance}, k={params.k_tries}, "
        f"bounds={params.bounds.as_tuple()}, seed={params.seed}"
    )
    start_time = time.time()
    sampler = PoissonDiscSampler(params)
    result = sampler.run()
    elapsed_time = time.time() - start_time

    if args.out is None:
        timestamp = utils.now_str()
        output_dir = Path("results")
        output_dir.mkdir(exist_ok=True)
        args.out = str(
            output_dir / f"poisson_d{params.min_distance:g}_S{params.seed}_{timestamp}.npz"
        )

    utils.save_sample_result(args.out, result)

    print(f"\nSampling completed.")
    print(f"   Time elapsed: {elapsed_time:.2f} seconds")
    print(f"   Points generated: {result.num_points}")
    print(f"   Output saved to: {args.out}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
