#!/usr/bin/env python3
"""
Pathfinder CLI - Find a path with one algorithm and optionally replay it.

Usage:
    python scripts/find_path.py --random 8 --algorithm dijkstra --save-graph demo.json
    python scripts/find_path.py --graph demo.json --source A --target H --algorithm bfs
    python scripts/find_path.py --graph data/city.json --source A --target F --algorithm astar
    python scripts/find_path.py --random 10 --seed 42 --algorithm dfs --animate --speed fast

Algorithms:
    dijkstra - Optimal, priority queue with lazy deletion
    astar    - Optimal while the straight-line heuristic is admissible
    bfs      - Fewest hops, weight summed afterwards
    dfs      - Any path, not optimal

Source and target accept a node id or a node label. With --random they
default to the first and last generated node.
"""

from __future__ import annotations

import argparse
import asyncio
import json
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

from pathfinder.animation import (  # noqa: E402
    AnimationController,
    AnimationFrame,
    AnimationState,
    AsyncioScheduler,
)
from pathfinder.config import (  # noqa: E402
    ALGORITHM_KEYS,
    DATA_DIR,
    DEFAULT_ALGORITHM,
    DEFAULT_NODE_COUNT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    SPEED_PRESETS,
    speed_label,
)
from pathfinder.graph import Graph, generate_random_graph, load_graph, save_graph  # noqa: E402
from pathfinder.search import SearchResult, run_algorithm  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a path through a weighted graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--graph",
        type=Path,
        help="Graph file (.json or .msgpack)",
    )
    source_group.add_argument(
        "--random",
        type=int,
        metavar="N",
        help=f"Generate a random connected graph with N nodes (default: {DEFAULT_NODE_COUNT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --random",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Source node id or label",
    )
    parser.add_argument(
        "--target",
        type=str,
        default=None,
        help="Target node id or label",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=list(ALGORITHM_KEYS),
        help=f"Algorithm to use (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Replay the exploration trace step by step",
    )
    parser.add_argument(
        "--speed",
        type=str,
        default="fast",
        help=f"Replay speed: preset ({', '.join(SPEED_PRESETS)}) or milliseconds",
    )
    parser.add_argument(
        "--save-graph",
        type=str,
        default=None,
        metavar="NAME",
        help="Save the graph to the data directory (e.g. city.json), reload it later with --graph NAME",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def resolve_node(graph: Graph, ref: str | None, fallback_index: int):
    """Map an id or label to a node id; None when it matches nothing."""
    if ref is None:
        return graph.nodes[fallback_index].id if graph.nodes else None
    if graph.has_node(ref):
        return ref
    node = graph.find_by_label(ref)
    return node.id if node else None


def parse_speed(value: str) -> int:
    if value.lower() in SPEED_PRESETS:
        return SPEED_PRESETS[value.lower()]
    return int(value)


async def replay(result: SearchResult, graph: Graph, speed_ms: int) -> None:
    """Replay the trace on the running event loop, printing each frame."""
    done = asyncio.Event()
    controller = AnimationController(AsyncioScheduler(), speed_ms=speed_ms)

    def on_frame(frame: AnimationFrame) -> None:
        if frame.cursor > 0 and frame.state != AnimationState.IDLE:
            step = result.steps[frame.cursor - 1]
            revealed = ", ".join(sorted(graph.labels_for(frame.revealed_nodes)))
            print(
                f"  [{frame.cursor:3}/{frame.total_steps}] "
                f"{graph.label_for(step.from_id)} -> {graph.label_for(step.to_id)} "
                f"(w={step.weight})  revealed: {revealed}"
            )
        if frame.state == AnimationState.COMPLETE:
            done.set()

    controller.subscribe(on_frame)
    controller.start(result)
    await done.wait()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    try:
        if args.graph:
            graph = load_graph(args.graph)
        else:
            graph = generate_random_graph(args.random or DEFAULT_NODE_COUNT, seed=args.seed)
        speed_ms = parse_speed(args.speed)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    source = resolve_node(graph, args.source, 0)
    target = resolve_node(graph, args.target, -1)
    if source is None or target is None:
        print("Error: source or target not found in graph", file=sys.stderr)
        return 1

    if args.save_graph:
        saved = save_graph(graph, DATA_DIR / args.save_graph)
        print(f"Saved graph to {saved}")

    result = run_algorithm(args.algorithm, graph, source, target)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
        return 0 if result.found else 1

    print("\n" + "=" * 60)
    print(f"{result.algorithm}: {graph.label_for(source)} -> {graph.label_for(target)}")
    print("=" * 60)
    print(f"  Graph:      {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    print(f"  Complexity: {result.complexity}")
    print(f"  Time:       {result.execution_time_ms}ms")
    print(f"  Visited:    {' '.join(graph.labels_for(result.visited))}")
    print(f"  Steps:      {len(result.steps)}")

    if args.animate:
        print(f"\nReplaying {len(result.steps)} steps at {speed_ms}ms ({speed_label(speed_ms)})...")
        try:
            asyncio.run(replay(result, graph, speed_ms))
        except KeyboardInterrupt:
            print("\n\nReplay interrupted by user")
            return 130  # Standard exit code for Ctrl+C

    print("\n" + "=" * 60)
    if result.found:
        print(f"Path ({result.hops} edges, distance {result.distance}):")
        print(f"  {' -> '.join(result.path_labels(graph))}")
    else:
        print("No path found")
    print("=" * 60)

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
