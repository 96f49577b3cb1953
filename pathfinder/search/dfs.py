"""
Depth-first search with an explicit stack. Not optimal.
"""

from __future__ import annotations

from pathfinder.graph.adjacency import AdjacencyIndex, path_distance, reconstruct_path
from pathfinder.graph.model import Graph, NodeId
from pathfinder.search.base import Exploration, SearchAlgorithm
from pathfinder.search.result import Step


class DepthFirstSearch(SearchAlgorithm):
    """
    Stack-based traversal; a node is finalized when first popped.

    Predecessors are recorded when a neighbor is pushed, not when it is
    popped. A node pushed twice before its first pop keeps the predecessor
    of the most recent push, so the reconstructed path follows the last
    discoverer.
    """

    @property
    def key(self) -> str:
        return "dfs"

    @property
    def name(self) -> str:
        return "DFS"

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
        stack = [source]
        seen: set[NodeId] = set()
        came_from: dict[NodeId, NodeId] = {}
        visited: list[NodeId] = []
        steps: list[Step] = []

        while stack:
            u = stack.pop()
            if u in seen:
                continue
            seen.add(u)
            visited.append(u)

            if u == destination:
                break

            for v, weight in adjacency[u]:
                if v not in seen:
                    came_from[v] = u
                    stack.append(v)
                    steps.append(Step(u, v, weight))

        path = reconstruct_path(came_from, source, destination)
        return Exploration(
            path=path,
            distance=path_distance(graph, path),
            visited=visited,
            steps=steps,
        )
