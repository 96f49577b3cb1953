"""
Breadth-first search: fewest hops, weights ignored while searching.
"""

from __future__ import annotations

from collections import deque

from pathfinder.graph.adjacency import AdjacencyIndex, path_distance, reconstruct_path
from pathfinder.graph.model import Graph, NodeId
from pathfinder.search.base import Exploration, SearchAlgorithm
from pathfinder.search.result import Step


class BreadthFirstSearch(SearchAlgorithm):
    """
    FIFO traversal marking nodes seen when they are enqueued.

    Finds the path with the fewest edges, which need not be the lightest;
    the reported distance is the weight of that path.
    """

    @property
    def key(self) -> str:
        return "bfs"

    @property
    def name(self) -> str:
        return "BFS"

    @property
    def complexity(self) -> str:
        return "O(V + E)"

    def _explore(
        self,
        graph: Graph,
        adjacency: AdjacencyIndex,
        source: NodeId,
        destination: NodeId,
    ) -> Exploration:
        queue = deque([source])
        seen = {source}
        came_from: dict[NodeId, NodeId] = {}
        visited: list[NodeId] = []
        steps: list[Step] = []

        while queue:
            u = queue.popleft()
            visited.append(u)

            if u == destination:
                break

            for v, weight in adjacency[u]:
                if v not in seen:
                    seen.add(v)
                    came_from[v] = u
                    queue.append(v)
                    steps.append(Step(u, v, weight))

        path = reconstruct_path(came_from, source, destination)
        return Exploration(
            path=path,
            distance=path_distance(graph, path),
            visited=visited,
            steps=steps,
        )
