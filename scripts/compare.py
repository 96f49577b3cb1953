#!/usr/bin/env python3
"""
Run all four algorithms on the same graph and compare them.

Usage:
    python scripts/compare.py
    python scripts/compare.py --random 12 --seed 7
    python scripts/compare.py --graph data/city.json --source A --target H --parallel
"""

from __future__ import annotations

import argparse
import logging
import sys
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

from pathfinder.benchmark import compare_algorithms, comparison_rows, pick_winner  # noqa: E402
from pathfinder.graph import generate_random_graph, load_graph  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compare pathfinding algorithms on one graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--graph", type=Path, help="Graph file (.json or .msgpack)")
    parser.add_argument("--random", type=int, default=10, metavar="N", help="Random graph size (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--source", type=str, default=None, help="Source node label (default: first node)")
    parser.add_argument("--target", type=str, default=None, help="Target node label (default: last node)")
    parser.add_argument("--parallel", action="store_true", help="Run the searches in a thread pool")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        graph = load_graph(args.graph) if args.graph else generate_random_graph(args.random, seed=args.seed)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not graph.nodes:
        print("Error: graph has no nodes", file=sys.stderr)
        return 1

    source_node = graph.find_by_label(args.source) if args.source else graph.nodes[0]
    target_node = graph.find_by_label(args.target) if args.target else graph.nodes[-1]
    if source_node is None or target_node is None:
        print("Error: source or target label not found", file=sys.stderr)
        return 1

    print("=" * 78)
    print("Algorithm Comparison")
    print("=" * 78)
    print(f"\n{len(graph.nodes)} nodes, {len(graph.edges)} edges: {source_node.label} -> {target_node.label}\n")

    results = compare_algorithms(graph, source_node.id, target_node.id, parallel=args.parallel)

    print(f"  {'Algorithm':10} {'Distance':>8} {'Visited':>8} {'Steps':>6} {'Time':>9}  Path")
    print("-" * 78)
    for row in comparison_rows(results, graph):
        distance = row.distance if row.distance >= 0 else "-"
        path = " -> ".join(row.path_labels) or "(none)"
        print(f"  {row.algorithm:10} {distance:>8} {row.visited:>8} {row.steps:>6} {row.time_ms:>7.2f}ms  {path}")

    winner = pick_winner(results)
    if winner is not None and winner.found:
        print(f"\nWinner: {winner.algorithm} (distance {winner.distance}, {winner.execution_time_ms}ms)")
        return 0

    print("\nNo algorithm found a path")
    return 1


if __name__ == "__main__":
    sys.exit(main())
