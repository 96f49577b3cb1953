"""
Aggregate algorithm statistics over many random graphs.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from pathfinder.config import (
    ALGORITHM_KEYS,
    DEFAULT_BENCHMARK_NODE_COUNT,
    DEFAULT_BENCHMARK_TRIALS,
)
from pathfinder.graph.generator import generate_random_graph
from pathfinder.search import get_algorithm

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmStats:
    """
    Per-algorithm summary over a benchmark run.

    Attributes:
        algorithm: Display name
        trials: Number of problems solved
        mean_time_ms / median_time_ms / std_time_ms: Execution time
        mean_visited: Average number of finalized nodes
        mean_steps: Average trace length
        mean_distance_ratio: Average distance / Dijkstra distance (1.0 = optimal)
        optimal_rate: Fraction of trials matching Dijkstra's distance
    """

    algorithm: str
    trials: int
    mean_time_ms: float
    median_time_ms: float
    std_time_ms: float
    mean_visited: float
    mean_steps: float
    mean_distance_ratio: float
    optimal_rate: float


def benchmark_random_graphs(
    node_count: int = DEFAULT_BENCHMARK_NODE_COUNT,
    trials: int = DEFAULT_BENCHMARK_TRIALS,
    seed: int | None = None,
    algorithms: tuple[str, ...] = ALGORITHM_KEYS,
) -> list[AlgorithmStats]:
    """
    Solve random problems with every algorithm and summarize.

    Each trial generates a connected graph and searches from its first
    node to its last. Distances are compared against Dijkstra's, which
    is always run as the reference even if not listed.

    Args:
        node_count: Nodes per random graph (at least 2)
        trials: Number of graphs
        seed: Random seed for reproducibility
        algorithms: Algorithms to summarize

    Raises:
        ValueError: If node_count < 2 or trials < 1
    """
    if node_count < 2:
        raise ValueError(f"node_count must be at least 2, got {node_count}")
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    rng = random.Random(seed)
    reference = get_algorithm("dijkstra")
    searches = [get_algorithm(name) for name in algorithms]

    times = np.zeros((len(searches), trials))
    visited = np.zeros((len(searches), trials))
    steps = np.zeros((len(searches), trials))
    ratios = np.zeros((len(searches), trials))

    for t in range(trials):
        graph = generate_random_graph(node_count, rng=rng)
        source, destination = graph.nodes[0].id, graph.nodes[-1].id
        best = reference.search(graph, source, destination).distance

        for i, search in enumerate(searches):
            result = search.search(graph, source, destination)
            times[i, t] = result.execution_time_ms
            visited[i, t] = len(result.visited)
            steps[i, t] = len(result.steps)
            ratios[i, t] = result.distance / best if best > 0 else 1.0

    stats = [
        AlgorithmStats(
            algorithm=search.name,
            trials=trials,
            mean_time_ms=float(np.mean(times[i])),
            median_time_ms=float(np.median(times[i])),
            std_time_ms=float(np.std(times[i])),
            mean_visited=float(np.mean(visited[i])),
            mean_steps=float(np.mean(steps[i])),
            mean_distance_ratio=float(np.mean(ratios[i])),
            optimal_rate=float(np.mean(np.isclose(ratios[i], 1.0))),
        )
        for i, search in enumerate(searches)
    ]

    logger.info(f"Benchmarked {len(searches)} algorithms on {trials} graphs of {node_count} nodes")
    return stats
