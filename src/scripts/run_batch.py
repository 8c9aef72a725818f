#!/usr/bin/env python3
"""
Batch Poisson-disc Sampling Runner

Generates many independent point sets (one per seed) in parallel. Each task
owns its own generator, so runs never share state.
"""

import argparse
import json
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any, Dict

# Add src/ to path so the script runs from a source checkout
SRC = Path(__file__).resolve().parents[1]
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from poisson_disc import SamplingParams, run_model, utils
from poisson_disc.config import add_sampling_arguments, params_from_args


def run_single_sample(params: SamplingParams, output_path: str) -> Dict[str, Any]:
    """
    Run one sampling pass and save it.

    Module level so ProcessPoolExecutor can pickle it.
    """
    result = run_model(params)
    utils.save_sample_result(output_path, result)
    return {
        "output_path": output_path,
        "seed": params.seed,
        "points": result.num_points,
        "success": True,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a batch of Poisson-disc point sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_sampling_arguments(parser)
    parser.add_argument(
        "--count",
        type=int,
        required=True,
        help="Number of point sets to generate",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of parallel processes (default: 1, runs in-process)",
    )
    parser.add_argument(
        "--name",
        type=str,
        default="batch",
        help="Batch name for output folder (default: 'batch')",
    )
    parser.add_argument(
        "--base-seed",
        type=int,
        default=42,
        help="Base seed (each run gets base_seed + index) (default: 42)",
    )
    parser.add_argument(
        "--out-dir",
        type=str,
        default="results/batches",
        help="Parent directory for batch folders (default: results/batches)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.count < 1:
        raise ValueError(f"--count must be at least 1, got {args.count}")

    first_seed = args.base_seed
    last_seed = args.base_seed + args.count - 1
    base_params = params_from_args(args, seed=first_seed)

    timestamp = utils.now_str()
    batch_dir = Path(args.out_dir) / (
        f"{args.name}_d{base_params.min_distance:g}_S{first_seed}-{last_seed}_{timestamp}"
    )
    batch_dir.mkdir(parents=True, exist_ok=True)

    manifest = {
        "model": "poisson_disc",
        "params": base_params.to_meta(),
        "count": args.count,
        "base_seed": args.base_seed,
        "jobs": args.jobs,
        "timestamp": timestamp,
        "batch_name": args.name,
    }
    manifest_path = batch_dir / "manifest.json"
    with open(manifest_path, "w") as f:
        json.dump(manifest, f, indent=2)

    print(f"Batch generation started:")
    print(f"  Min distance: {base_params.min_distance}")
    print(f"  Bounds: {base_params.bounds.as_tuple()}")
    print(f"  Total runs: {args.count}")
    print(f"  Parallel jobs: {args.jobs}")
    print(f"  Output directory: {batch_dir}")
    print()

    tasks = []
    for i in range(args.count):
        seed = args.base_seed + i
        params = params_from_args(args, seed=seed, verbose=False)
        tasks.append((params, str(batch_dir / f"{seed}.npz")))

    start_time = time.time()
    results = []
    failed = []

    if args.jobs <= 1:
        for completed, task in enumerate(tasks, start=1):
            try:
                result = run_single_sample(*task)
            except Exception as e:
                failed.append({"seed": task[0].seed, "error": str(e)})
                print(f"  [{completed}/{args.count}] FAILED: seed={task[0].seed} - {e}")
                continue
            results.append(result)
            print(f"  [{completed}/{args.count}] Completed: seed={result['seed']}, points={result['points']}")
    else:
        with ProcessPoolExecutor(max_workers=args.jobs) as executor:
            future_to_task = {
                executor.submit(run_single_sample, *task): task for task in tasks
            }
            completed = 0
            for future in as_completed(future_to_task):
                completed += 1
                task = future_to_task[future]
                try:
                    result = future.result()
                except Exception as e:
                    failed.append({"seed": task[0].seed, "error": str(e)})
                    print(f"  [{completed}/{args.count}] FAILED: seed={task[0].seed} - {e}")
                    continue
                results.append(result)
                print(
                    f"  [{completed}/{args.count}] Completed: seed={result['seed']}, "
                    f"points={result['points']}"
                )

    elapsed_time = time.time() - start_time

    manifest["results"] = {
        "total": args.count,
        "successful": len(results),
        "failed": len(failed),
        "elapsed_seconds": elapsed_time,
    }
    manifest["runs"] = sorted(results, key=lambda r: r["seed"])
    if failed:
        manifest["failures"] = failed
    with open(manifest_path, "w") as f:
        json.dump(manifest, f, indent=2)

    print()
    print("=" * 60)
    print("Batch generation completed!")
    print(f"  Successful: {len(results)}/{args.count}")
    print(f"  Failed: {len(failed)}/{args.count}")
    print(f"  Total time: {elapsed_time:.2f} seconds")
    print(f"  Manifest: {manifest_path}")
    print("=" * 60)

    return 0 if len(failed) == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
