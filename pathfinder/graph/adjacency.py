"""
Adjacency index and path helpers shared by every search algorithm.
"""

from __future__ import annotations

import logging
from typing import Mapping

from pathfinder.config import UNREACHABLE_DISTANCE
from pathfinder.graph.model import Graph, NodeId

logger = logging.getLogger(__name__)

AdjacencyIndex = dict[NodeId, list[tuple[NodeId, float]]]


def build_adjacency(graph: Graph) -> AdjacencyIndex:
    """
    Build the bidirectional adjacency index for a graph.

    Every node gets an entry, possibly empty. Each edge contributes
    (to, weight) to its from-node and (from, weight) to its to-node, in
    edge order; that order is what the searches iterate and therefore
    the order their steps are emitted in.

    Edges with an endpoint that is not in the node set are dropped.
    """
    adjacency: AdjacencyIndex = {node.id: [] for node in graph.nodes}

    for edge in graph.edges:
        if edge.from_id not in adjacency or edge.to_id not in adjacency:
            logger.debug(
                f"Dropping edge {edge.id!r}: endpoint missing "
                f"({edge.from_id!r} -> {edge.to_id!r})"
            )
            continue
        adjacency[edge.from_id].append((edge.to_id, edge.weight))
        adjacency[edge.to_id].append((edge.from_id, edge.weight))

    return adjacency


def reconstruct_path(
    came_from: Mapping[NodeId, NodeId],
    source: NodeId,
    destination: NodeId,
) -> list[NodeId]:
    """
    Walk the predecessor map back from destination.

    Returns:
        [destination] when source == destination, the node ids from
        source to destination when the destination was reached, and []
        when it never was.
    """
    if destination not in came_from and source != destination:
        return []

    path = [destination]
    current = destination
    while current in came_from:
        current = came_from[current]
        path.append(current)

    return list(reversed(path))


def path_distance(graph: Graph, path: list[NodeId]) -> float:
    """
    Total weight of the edges along a path.

    Used by BFS and DFS, which do not track weighted distance while
    searching. Each consecutive pair uses the first edge (in edge order)
    joining it. Returns UNREACHABLE_DISTANCE for an empty path.
    """
    if not path:
        return UNREACHABLE_DISTANCE

    first_edge: dict[frozenset, float] = {}
    for edge in graph.edges:
        first_edge.setdefault(frozenset((edge.from_id, edge.to_id)), edge.weight)

    distance: float = 0
    for a, b in zip(path, path[1:]):
        distance += first_edge.get(frozenset((a, b)), 0)
    return distance
