"""
Run every algorithm on the same graph and compare the results.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Sequence

from pathfinder.config import ALGORITHM_KEYS
from pathfinder.graph.model import Graph, NodeId
from pathfinder.search import get_algorithm
from pathfinder.search.result import SearchResult

logger = logging.getLogger(__name__)


@dataclass
class ComparisonRow:
    algorithm: str
    distance: float
    visited: int
    steps: int
    time_ms: float
    complexity: str
    path_labels: list[str]


def compare_algorithms(
    graph: Graph,
    source: NodeId,
    destination: NodeId,
    algorithms: Sequence[str] = ALGORITHM_KEYS,
    parallel: bool = False,
) -> list[SearchResult]:
    """
    Run each algorithm on the same problem.

    Searches share no state, so parallel=True simply fans them out over
    a thread pool. Results come back in the order of algorithms either way.

    Raises:
        ValueError: If an algorithm name is unknown
    """
    searches = [get_algorithm(name) for name in algorithms]

    if parallel and len(searches) > 1:
        with ThreadPoolExecutor(max_workers=len(searches)) as executor:
            futures = [
                executor.submit(search.search, graph, source, destination)
                for search in searches
            ]
            results = [future.result() for future in futures]
    else:
        results = [search.search(graph, source, destination) for search in searches]

    logger.info(
        "Comparison: "
        + ", ".join(f"{r.algorithm}={r.distance}" for r in results)
    )
    return results


def pick_winner(results: Sequence[SearchResult]) -> SearchResult | None:
    """
    Pick the best result: shortest distance, then fastest.

    Scans in order starting from the first result that found a path; a
    later result replaces the current best only if it found a path and
    is no worse on both distance and execution time. Falls back to the
    first result when none found a path.
    """
    if not results:
        return None

    found = [r for r in results if r.distance > 0]
    best = found[0] if found else results[0]
    for result in results:
        if (
            result.distance > 0
            and result.distance <= best.distance
            and result.execution_time_ms <= best.execution_time_ms
        ):
            best = result
    return best


def comparison_rows(results: Sequence[SearchResult], graph: Graph) -> list[ComparisonRow]:
    """Flatten results into table rows with readable path labels."""
    return [
        ComparisonRow(
            algorithm=r.algorithm,
            distance=r.distance,
            visited=len(r.visited),
            steps=len(r.steps),
            time_ms=r.execution_time_ms,
            complexity=r.complexity,
            path_labels=r.path_labels(graph),
        )
        for r in results
    ]
