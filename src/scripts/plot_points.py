# src/scripts/plot_points.py
import argparse
import os
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import PatchCollection
from matplotlib.patches import Circle, Rectangle

# Add src/ to path so the script runs from a source checkout
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from poisson_disc import utils


def format_title(meta, num_points=None):
    """
    Build a one-line title from sample metadata.
    """
    if not meta:
        return None
    num = num_points if num_points is not None else meta.get("num_points", "?")
    seed = meta.get("seed")
    parts = [
        f"N={num}",
        f"d={meta.get('min_distance', '?')}",
        f"k={meta.get('k_tries', '?')}",
        f"seed={seed if seed is not None else '?'}",
    ]
    return "Poisson disc: " + ", ".join(parts)


def render(positions, meta, output=None, show_discs=False, point_size=4.0, dpi=150, show=False):
    """
    Scatter the points inside their sampling rectangle.

    With show_discs, each point also gets a disc of radius d/2; discs of a
    valid sample touch but never overlap.
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    fig, ax = plt.subplots(figsize=(8, 8))

    bounds = meta.get("bounds")
    if bounds:
        min_x, min_y, max_x, max_y = bounds
        ax.add_patch(
            Rectangle((min_x, min_y), max_x - min_x, max_y - min_y, fill=False, ec="gray", lw=1.0)
        )

    d = meta.get("min_distance")
    if show_discs and d:
        discs = [Circle((x, y), 0.5 * d) for x, y in positions]
        ax.add_collection(PatchCollection(discs, facecolor="tab:blue", alpha=0.25, edgecolor="none"))

    ax.scatter(positions[:, 0], positions[:, 1], s=point_size, color="black")
    ax.set_aspect("equal")
    ax.autoscale_view()

    title = format_title(meta, num_points=positions.shape[0])
    if title:
        ax.set_title(title, pad=10)

    if output:
        os.makedirs(os.path.dirname(output) if os.path.dirname(output) else ".", exist_ok=True)
        plt.savefig(output, dpi=dpi, bbox_inches="tight")
        print(f"Saved figure to {output}")
    if show:
        plt.show()
    plt.close(fig)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot a saved Poisson-disc sample .npz")
    parser.add_argument("file", help="Path to .npz sample file")
    parser.add_argument(
        "--out",
        default=None,
        help="Output image path (default: <input>.png)",
    )
    parser.add_argument("--discs", action="store_true", help="Draw d/2 discs around points")
    parser.add_argument("--size", type=float, default=4.0, help="Marker size (default: 4)")
    parser.add_argument("--dpi", type=int, default=150, help="DPI for output file (default: 150)")
    parser.add_argument("--show", action="store_true", help="Show plot interactively")
    args = parser.parse_args(argv)

    if not os.path.exists(args.file):
        print(f"Error: file not found: {args.file}")
        return 1

    if not args.show:
        plt.switch_backend("Agg")
    if args.out is None:
        args.out = str(Path(args.file).with_suffix(".png"))

    result = utils.load_samples(args.file)
    render(
        result.positions,
        result.meta or {},
        output=args.out,
        show_discs=args.discs,
        point_size=args.size,
        dpi=args.dpi,
        show=args.show,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
