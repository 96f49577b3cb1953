"""
Random connected graph generator for demos and benchmarks.
"""

from __future__ import annotations

import logging
import random
import string

from pathfinder.config import (
    CANVAS_HEIGHT,
    CANVAS_PADDING,
    CANVAS_WIDTH,
    DEFAULT_NODE_COUNT,
    EXTRA_EDGE_RATIO,
    GENERATED_ID_LENGTH,
    MAX_EDGE_WEIGHT,
    MIN_EDGE_WEIGHT,
)
from pathfinder.graph.model import Edge, Graph, Node, label_for_index

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def _random_id(rng: random.Random) -> str:
    return "".join(rng.choices(_ID_ALPHABET, k=GENERATED_ID_LENGTH))


def _random_weight(rng: random.Random) -> int:
    return rng.randint(MIN_EDGE_WEIGHT, MAX_EDGE_WEIGHT)


def generate_random_graph(
    node_count: int = DEFAULT_NODE_COUNT,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> Graph:
    """
    Generate a connected weighted graph.

    Nodes are scattered over the canvas and labeled A, B, C, ... A random
    spanning tree (node i joined to a uniformly chosen earlier node)
    guarantees connectivity; floor(node_count * EXTRA_EDGE_RATIO) further
    attempts then add edges between random distinct pairs that are not
    already joined. Attempts that hit a self pair or an existing edge are
    skipped, so the final edge count varies.

    Args:
        node_count: Number of nodes (0 gives an empty graph)
        seed: Random seed for reproducibility (ignored if rng is given)
        rng: Random instance to draw from

    Returns:
        Graph with node_count nodes and at least node_count - 1 edges
    """
    rng = rng or random.Random(seed)
    nodes: list[Node] = []
    edges: list[Edge] = []

    for i in range(node_count):
        nodes.append(
            Node(
                id=_random_id(rng),
                x=CANVAS_PADDING + rng.random() * (CANVAS_WIDTH - 2 * CANVAS_PADDING),
                y=CANVAS_PADDING + rng.random() * (CANVAS_HEIGHT - 2 * CANVAS_PADDING),
                label=label_for_index(i),
            )
        )

    # Spanning tree
    for i in range(1, node_count):
        j = rng.randrange(i)
        edges.append(Edge(_random_id(rng), nodes[j].id, nodes[i].id, _random_weight(rng)))

    # Extra edges
    connected = {frozenset((edge.from_id, edge.to_id)) for edge in edges}
    for _ in range(int(node_count * EXTRA_EDGE_RATIO)):
        i = rng.randrange(node_count)
        j = rng.randrange(node_count)
        if i == j:
            continue
        pair = frozenset((nodes[i].id, nodes[j].id))
        if pair in connected:
            continue
        connected.add(pair)
        edges.append(Edge(_random_id(rng), nodes[i].id, nodes[j].id, _random_weight(rng)))

    logger.debug(f"Generated random graph: {len(nodes)} nodes, {len(edges)} edges")
    return Graph(tuple(nodes), tuple(edges))
