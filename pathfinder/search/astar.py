"""
A* search guided by straight-line distance to the destination.
"""

from __future__ import annotations

import math

from pathfinder.config import ASTAR_HEURISTIC_SCALE, UNREACHABLE_DISTANCE
from pathfinder.graph.adjacency import AdjacencyIndex, reconstruct_path
from pathfinder.graph.heap import MinHeap
from pathfinder.graph.model import Graph, NodeId
from pathfinder.search.base import Exploration, SearchAlgorithm
from pathfinder.search.result import Step


class AStarSearch(SearchAlgorithm):
    """
    A* ordering the queue by f = g + h.

    h(n) is the euclidean distance from n to the destination divided by
    the heuristic scale. Optimality holds only while h never exceeds the
    true remaining cost, which depends on how the caller's weights relate
    to node coordinates. Expanded nodes go into a closed set and are
    never relaxed again.
    """

    def __init__(self, heuristic_scale: float = ASTAR_HEURISTIC_SCALE) -> None:
        """
        Initialize A*.

        Args:
            heuristic_scale: Coordinate units per unit of edge weight
        """
        self._heuristic_scale = heuristic_scale

    @property
    def key(self) -> str:
        return "astar"

    @property
    def name(self) -> str:
        return "A*"

    @property
    def complexity(self) -> str:
        return "O((V + E) log V)"

    @property
    def optimal(self) -> bool:
        return True

    def heuristic(self, graph: Graph, node_id: NodeId, destination: NodeId) -> float:
        """Scaled straight-line distance; 0 if either node is unknown."""
        node = graph.get_node(node_id)
        target = graph.get_node(destination)
        if node is None or target is None:
            return 0.0
        return math.hypot(node.x - target.x, node.y - target.y) / self._heuristic_scale

    def _explore(
        self,
        graph: Graph,
        adjacency: AdjacencyIndex,
        source: NodeId,
        destination: NodeId,
    ) -> Exploration:
        g_score: dict[NodeId, float] = {node_id: math.inf for node_id in adjacency}
        g_score[source] = 0
        came_from: dict[NodeId, NodeId] = {}
        closed: set[NodeId] = set()
        visited: list[NodeId] = []
        steps: list[Step] = []

        queue: MinHeap[NodeId] = MinHeap()
        queue.push(self.heuristic(graph, source, destination), source)

        while queue:
            _, u = queue.pop()
            if u in closed:
                continue
            closed.add(u)
            visited.append(u)

            if u == destination:
                break

            for v, weight in adjacency[u]:
                if v in closed:
                    continue
                tentative = g_score[u] + weight
                if tentative < g_score[v]:
                    came_from[v] = u
                    g_score[v] = tentative
                    f_score = tentative + self.heuristic(graph, v, destination)
                    queue.push(f_score, v)
                    steps.append(Step(u, v, weight, f_score=f_score))

        reached = g_score[destination] != math.inf
        return Exploration(
            path=reconstruct_path(came_from, source, destination),
            distance=g_score[destination] if reached else UNREACHABLE_DISTANCE,
            visited=visited,
            steps=steps,
        )
