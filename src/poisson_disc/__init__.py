"""
Poisson-disc sampling library.

Generates blue-noise point sets in a 2D rectangle with a guaranteed minimum
distance between points (Bridson's algorithm):
- sample_2d: functional entry point returning a list of Point
- PoissonDiscSampler / SamplingParams: object interface for scripted runs
- AccelerationGrid, Frontier: the building blocks of a sampling run
"""

from .geometry import Bounds, Point
from .grid import AccelerationGrid
from .frontier import Frontier
from .sampling import PoissonDiscSampler, SamplingParams, run_model, sample_2d
from . import analysis, config, utils

__all__ = [
    # Sampling
    "sample_2d",
    "run_model",
    "PoissonDiscSampler",
    # Configuration / data
    "SamplingParams",
    "Bounds",
    "Point",
    # Building blocks
    "AccelerationGrid",
    "Frontier",
    # Utilities
    "analysis",
    "config",
    "utils",
]
