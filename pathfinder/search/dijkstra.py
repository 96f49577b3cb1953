"""
Dijkstra's shortest path with a lazy-deletion priority queue.
"""

from __future__ import annotations

import math

from pathfinder.config import UNREACHABLE_DISTANCE
from pathfinder.graph.adjacency import AdjacencyIndex, reconstruct_path
from pathfinder.graph.heap import MinHeap
from pathfinder.graph.model import Graph, NodeId
from pathfinder.search.base import Exploration, SearchAlgorithm
from pathfinder.search.result import Step


class DijkstraSearch(SearchAlgorithm):
    """
    Uniform-cost search from the source.

    Optimal for non-negative weights. Stops as soon as the destination is
    popped, so nodes farther than the destination are never finalized.
    Each successful relaxation emits a step carrying the new distance.
    """

    @property
    def key(self) -> str:
        return "dijkstra"

    @property
    def name(self) -> str:
        return "Dijkstra"

    @property
    def complexity(self) -> str:
        return "O((V + E) log V)"

    @property
    def optimal(self) -> bool:
        return True

    def _explore(
        self,
        graph: Graph,
        adjacency: AdjacencyIndex,
        source: NodeId,
        destination: NodeId,
    ) -> Exploration:
        dist: dict[NodeId, float] = {node_id: math.inf for node_id in adjacency}
        dist[source] = 0
        came_from: dict[NodeId, NodeId] = {}
        processed: set[NodeId] = set()
        visited: list[NodeId] = []
        steps: list[Step] = []

        queue: MinHeap[NodeId] = MinHeap()
        queue.push(0, source)

        while queue:
            cost, u = queue.pop()
            if u in processed:
                continue  # stale entry
            processed.add(u)
            visited.append(u)

            if u == destination:
                break

            for v, weight in adjacency[u]:
                alt = cost + weight
                if alt < dist[v]:
                    dist[v] = alt
                    came_from[v] = u
                    queue.push(alt, v)
                    steps.append(Step(u, v, weight, current_dist=alt))

        reached = dist[destination] != math.inf
        return Exploration(
            path=reconstruct_path(came_from, source, destination),
            distance=dist[destination] if reached else UNREACHABLE_DISTANCE,
            visited=visited,
            steps=steps,
        )
