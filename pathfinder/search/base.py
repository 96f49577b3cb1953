"""
Search algorithm base class.

Every algorithm implements _explore(); the base class handles timing,
endpoint validation and adjacency construction so the four searches
report results the same way.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pathfinder.config import EXECUTION_TIME_PRECISION, UNREACHABLE_DISTANCE
from pathfinder.graph.adjacency import AdjacencyIndex, build_adjacency
from pathfinder.graph.model import Graph, NodeId
from pathfinder.search.result import SearchResult, Step

logger = logging.getLogger(__name__)


@dataclass
class Exploration:
    """
    What a traversal produced before timing and packaging.

    Attributes:
        path: Reconstructed path ([] if unreachable)
        distance: Path weight or UNREACHABLE_DISTANCE
        visited: Finalization order
        steps: Exploration trace
    """

    path: list[NodeId]
    distance: float
    visited: list[NodeId] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)


class SearchAlgorithm(ABC):
    """
    Abstract base class for pathfinding algorithms.

    Instances hold no per-search state, so one instance can serve
    concurrent searches on independent graphs.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Registry identifier (e.g., 'dijkstra', 'astar')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name (e.g., 'Dijkstra', 'A*')."""
        ...

    @property
    @abstractmethod
    def complexity(self) -> str:
        """Static time-complexity label."""
        ...

    @property
    def optimal(self) -> bool:
        """Whether the reported distance is the minimum path weight."""
        return False

    @abstractmethod
    def _explore(
        self,
        graph: Graph,
        adjacency: AdjacencyIndex,
        source: NodeId,
        destination: NodeId,
    ) -> Exploration:
        """
        Run the traversal. Both endpoints are guaranteed to be in the graph.
        """
        ...

    def search(self, graph: Graph, source: NodeId, destination: NodeId) -> SearchResult:
        """
        Find a path from source to destination.

        A source or destination missing from the graph is not an error:
        the result is simply unreachable (empty path, distance -1).

        Args:
            graph: Graph to search
            source: Start node id
            destination: Target node id

        Returns:
            SearchResult with path, distance, visit order and step trace
        """
        start = time.perf_counter()

        missing = [n for n in (source, destination) if not graph.has_node(n)]
        if missing:
            logger.warning(
                f"{self.name}: node(s) {', '.join(repr(n) for n in missing)} "
                "not in graph, treating as unreachable"
            )
            exploration = Exploration(path=[], distance=UNREACHABLE_DISTANCE)
        else:
            adjacency = build_adjacency(graph)
            exploration = self._explore(graph, adjacency, source, destination)

        elapsed_ms = (time.perf_counter() - start) * 1000

        result = SearchResult(
            path=exploration.path,
            distance=exploration.distance,
            visited=exploration.visited,
            steps=exploration.steps,
            execution_time_ms=round(elapsed_ms, EXECUTION_TIME_PRECISION),
            complexity=self.complexity,
            algorithm=self.name,
        )

        if result.found:
            logger.info(
                f"{self.name}: {source!r} -> {destination!r} distance {result.distance} "
                f"({len(result.visited)} visited, {len(result.steps)} steps, "
                f"{result.execution_time_ms}ms)"
            )
        else:
            logger.info(f"{self.name}: no path from {source!r} to {destination!r}")

        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r})"
