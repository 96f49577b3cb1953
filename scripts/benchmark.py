#!/usr/bin/env python3
"""
Benchmark the algorithms over many random graphs.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --nodes 25 --trials 200 --seed 1
    python scripts/benchmark.py --save
    python scripts/benchmark.py --output /tmp/benchmark.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import asdict
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv()

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathfinder.benchmark import benchmark_random_graphs  # noqa: E402
from pathfinder.config import (  # noqa: E402
    DEFAULT_BENCHMARK_NODE_COUNT,
    DEFAULT_BENCHMARK_TRIALS,
    RESULTS_DIR,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark pathfinding algorithms on random graphs")
    parser.add_argument(
        "--nodes",
        type=int,
        default=DEFAULT_BENCHMARK_NODE_COUNT,
        help=f"Nodes per graph (default: {DEFAULT_BENCHMARK_NODE_COUNT})",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=DEFAULT_BENCHMARK_TRIALS,
        help=f"Number of random graphs (default: {DEFAULT_BENCHMARK_TRIALS})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--output", type=Path, default=None, help="Write statistics as JSON")
    parser.add_argument("--save", action="store_true", help=f"Write statistics to {RESULTS_DIR}/benchmark.json")
    return parser.parse_args()


def run_benchmark() -> int:
    args = parse_args()

    print("=" * 70)
    print("Pathfinder - Random Graph Benchmark")
    print("=" * 70)
    print(f"\n{args.trials} graphs x {args.nodes} nodes...\n")

    start_time = time.time()
    try:
        stats = benchmark_random_graphs(args.nodes, args.trials, seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    elapsed = time.time() - start_time

    print(f"  {'Algorithm':10} {'Mean':>8} {'Median':>8} {'Std':>8} {'Visited':>8} {'Ratio':>6} {'Optimal':>8}")
    print("-" * 70)
    for s in stats:
        print(
            f"  {s.algorithm:10} {s.mean_time_ms:>6.3f}ms {s.median_time_ms:>6.3f}ms "
            f"{s.std_time_ms:>6.3f}ms {s.mean_visited:>8.1f} {s.mean_distance_ratio:>6.2f} "
            f"{s.optimal_rate:>7.0%}"
        )
    print(f"\nFinished in {elapsed:.1f}s")

    output = args.output or (RESULTS_DIR / "benchmark.json" if args.save else None)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump([asdict(s) for s in stats], f, indent=2)
        print(f"Saved statistics to {output}")

    return 0


if __name__ == "__main__":
    sys.exit(run_benchmark())
