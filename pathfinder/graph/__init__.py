"""
Graph module.

Provides the graph model and the pieces every search shares:
- Node, Edge, Graph: Value objects
- build_adjacency: Bidirectional adjacency index
- reconstruct_path / path_distance: Path helpers
- MinHeap: Lazy-deletion priority queue
- generate_random_graph: Connected demo graphs
- load_graph / save_graph: JSON and msgpack files
"""

from pathfinder.graph.adjacency import (
    AdjacencyIndex,
    build_adjacency,
    path_distance,
    reconstruct_path,
)
from pathfinder.graph.generator import generate_random_graph
from pathfinder.graph.heap import MinHeap
from pathfinder.graph.io import load_graph, save_graph
from pathfinder.graph.model import Edge, Graph, Node, NodeId, label_for_index

__all__ = [
    "AdjacencyIndex",
    "Edge",
    "Graph",
    "MinHeap",
    "Node",
    "NodeId",
    "build_adjacency",
    "generate_random_graph",
    "label_for_index",
    "load_graph",
    "path_distance",
    "reconstruct_path",
    "save_graph",
]
