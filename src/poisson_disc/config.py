"""
Command-line and file configuration for sampling runs.

Values are layered: SamplingParams defaults, then a --config file (JSON or
TOML), then any flag given explicitly on the command line.
"""

from __future__ import annotations

import argparse
from typing import Any, Dict

from . import utils
from .sampling import SamplingParams


def add_sampling_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Register the flags shared by the sampling scripts."""
    # Defaults are None so unset flags do not mask values from --config
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON or TOML file with sampling parameters",
    )
    parser.add_argument(
        "--min-distance",
        type=float,
        default=None,
        help="Minimum distance between points (default: 10.0)",
    )
    parser.add_argument(
        "--k",
        dest="k_tries",
        type=int,
        default=None,
        help="Candidate attempts per frontier point (default: 30)",
    )
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        default=None,
        help="Sampling rectangle (default: 0 0 100 100)",
    )
    parser.add_argument(
        "--start",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Optional first point",
    )
    parser.add_argument(
        "--max-points",
        type=int,
        default=None,
        help="Stop after this many points",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Print progress while sampling",
    )
    return parser


def params_from_args(args: argparse.Namespace, **overrides: Any) -> SamplingParams:
    """
    Build SamplingParams from parsed flags, layered over an optional config file.

    Keyword overrides win over both (used by the batch runner for per-task seeds).
    """
    config: Dict[str, Any] = {}
    if getattr(args, "config", None):
        config.update(utils.load_params(args.config))

    for key in ("min_distance", "k_tries", "bounds", "start", "seed", "max_points", "verbose"):
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value

    config.update(overrides)
    return SamplingParams.from_dict(config)


__all__ = ["add_sampling_arguments", "params_from_args"]
