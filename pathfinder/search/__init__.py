"""
Search module.

Provides the four pathfinding algorithms and their results:
- DijkstraSearch: Optimal, lazy-deletion priority queue
- AStarSearch: Optimal with an admissible heuristic
- BreadthFirstSearch: Fewest hops
- DepthFirstSearch: Any path, not optimal
- SearchResult / Step: Outcome plus exploration trace
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pathfinder.config import ALGORITHM_KEYS
from pathfinder.search.astar import AStarSearch
from pathfinder.search.base import Exploration, SearchAlgorithm
from pathfinder.search.bfs import BreadthFirstSearch
from pathfinder.search.dfs import DepthFirstSearch
from pathfinder.search.dijkstra import DijkstraSearch
from pathfinder.search.result import SearchResult, Step

if TYPE_CHECKING:
    from pathfinder.graph.model import Graph, NodeId

__all__ = [
    "ALGORITHMS",
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "DijkstraSearch",
    "Exploration",
    "SearchAlgorithm",
    "SearchResult",
    "Step",
    "get_algorithm",
    "run_algorithm",
]

ALGORITHMS = ALGORITHM_KEYS


def get_algorithm(name: str, **kwargs) -> SearchAlgorithm:
    """
    Get an algorithm by name.

    Args:
        name: Algorithm identifier (dijkstra, astar, bfs, dfs)
        **kwargs: Additional arguments passed to the constructor (e.g., heuristic_scale)

    Returns:
        Instantiated algorithm

    Raises:
        ValueError: If algorithm name is unknown
    """
    algorithms = {
        "dijkstra": DijkstraSearch,
        "astar": AStarSearch,
        "bfs": BreadthFirstSearch,
        "dfs": DepthFirstSearch,
    }

    key = name.lower()
    if key not in algorithms:
        available = ", ".join(algorithms.keys())
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    # Only A* accepts kwargs
    if key == "astar":
        return AStarSearch(**kwargs)

    return algorithms[key]()


def run_algorithm(
    name: str,
    graph: Graph,
    source: NodeId,
    destination: NodeId,
) -> SearchResult:
    """Run the named algorithm once. See SearchAlgorithm.search()."""
    return get_algorithm(name).search(graph, source, destination)
