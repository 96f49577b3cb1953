"""
Graph value objects: nodes with plane positions, weighted undirected edges.

The dict form produced by Graph.to_dict() / accepted by Graph.from_dict()
is the structure external collaborators (editors, saved routes, remote
callers) hand to the engine:

    {"nodes": [{"id", "x", "y", "label"}], "edges": [{"id", "from", "to", "weight"}]}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Hashable, Iterable

logger = logging.getLogger(__name__)

NodeId = Hashable


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes:
        id: Opaque unique identifier
        x: Horizontal position (used by the A* heuristic)
        y: Vertical position
        label: Display string, not used by the searches
    """

    id: NodeId
    x: float
    y: float
    label: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y, "label": self.label}


@dataclass(frozen=True)
class Edge:
    """
    An undirected weighted edge.

    Attributes:
        id: Edge identifier
        from_id: One endpoint
        to_id: The other endpoint
        weight: Positive traversal cost (same in both directions)
    """

    id: str
    from_id: NodeId
    to_id: NodeId
    weight: float

    def joins(self, a: NodeId, b: NodeId) -> bool:
        """Whether this edge connects a and b, in either direction."""
        return (self.from_id == a and self.to_id == b) or (
            self.from_id == b and self.to_id == a
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "from": self.from_id,
            "to": self.to_id,
            "weight": self.weight,
        }


def label_for_index(index: int) -> str:
    """
    Spreadsheet-style label for the index-th node: A..Z, AA, AB, ...

    >>> label_for_index(0), label_for_index(25), label_for_index(26)
    ('A', 'Z', 'AA')
    """
    label = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        label = chr(65 + rem) + label
    return label


@dataclass
class Graph:
    """
    A set of nodes and undirected edges.

    Connectivity is not enforced; disconnected components simply have
    no path between them. Treat instances as immutable: the edit helpers
    (add_node, remove_node, ...) return new graphs.

    Raises:
        ValueError: If two nodes share an id
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    _by_id: dict[NodeId, Node] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.nodes = tuple(self.nodes)
        self.edges = tuple(self.edges)
        self._by_id = {}
        for node in self.nodes:
            if node.id in self._by_id:
                raise ValueError(f"Duplicate node id: {node.id!r}")
            self._by_id[node.id] = node

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.nodes)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._by_id

    def get_node(self, node_id: NodeId) -> Node | None:
        """Return the node with this id, or None."""
        return self._by_id.get(node_id)

    def label_for(self, node_id: NodeId) -> str:
        """Display label for a node id, falling back to the id itself."""
        node = self._by_id.get(node_id)
        if node is None or not node.label:
            return str(node_id)
        return node.label

    def labels_for(self, path: Iterable[NodeId]) -> list[str]:
        return [self.label_for(node_id) for node_id in path]

    def find_by_label(self, label: str) -> Node | None:
        """First node carrying this label, or None."""
        for node in self.nodes:
            if node.label == label:
                return node
        return None

    def has_edge_between(self, a: NodeId, b: NodeId) -> bool:
        return any(edge.joins(a, b) for edge in self.edges)

    # -------------------------------------------------------------------------
    # Edit helpers (return new graphs)
    # -------------------------------------------------------------------------

    def _next_id(self, prefix: str, existing: Iterable[Any]) -> str:
        taken = set(existing)
        i = len(taken)
        while f"{prefix}{i}" in taken:
            i += 1
        return f"{prefix}{i}"

    def add_node(
        self,
        x: float,
        y: float,
        label: str | None = None,
        node_id: NodeId | None = None,
    ) -> Graph:
        """Add a node; the label defaults to the next letter (A, B, C, ...)."""
        if node_id is None:
            node_id = self._next_id("n", self._by_id)
        if label is None:
            label = label_for_index(len(self.nodes))
        return Graph(self.nodes + (Node(node_id, x, y, label),), self.edges)

    def add_edge(
        self,
        from_id: NodeId,
        to_id: NodeId,
        weight: float = 1,
        edge_id: str | None = None,
    ) -> Graph:
        """Add an undirected edge. Endpoints are not validated."""
        if edge_id is None:
            edge_id = self._next_id("e", (edge.id for edge in self.edges))
        return Graph(self.nodes, self.edges + (Edge(edge_id, from_id, to_id, weight),))

    def move_node(self, node_id: NodeId, x: float, y: float) -> Graph:
        nodes = tuple(
            replace(node, x=x, y=y) if node.id == node_id else node
            for node in self.nodes
        )
        return Graph(nodes, self.edges)

    def remove_node(self, node_id: NodeId) -> Graph:
        """Remove a node and every edge touching it."""
        return Graph(
            tuple(node for node in self.nodes if node.id != node_id),
            tuple(
                edge
                for edge in self.edges
                if edge.from_id != node_id and edge.to_id != node_id
            ),
        )

    def remove_edge(self, edge_id: str) -> Graph:
        return Graph(self.nodes, tuple(edge for edge in self.edges if edge.id != edge_id))

    # -------------------------------------------------------------------------
    # Dict conversion
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Graph:
        """
        Build a graph from {"nodes": [...], "edges": [...]}.

        Edges may omit "id" (remote callers only send from/to/weight);
        one is generated from the edge position. Nodes may omit "label".
        """
        nodes = tuple(
            Node(
                id=raw["id"],
                x=float(raw.get("x", 0.0)),
                y=float(raw.get("y", 0.0)),
                label=str(raw.get("label", "")),
            )
            for raw in data.get("nodes") or []
        )
        edges = tuple(
            Edge(
                id=str(raw.get("id") or f"e{i}"),
                from_id=raw["from"],
                to_id=raw["to"],
                weight=raw.get("weight", 1),
            )
            for i, raw in enumerate(data.get("edges") or [])
        )
        logger.debug(f"Loaded graph with {len(nodes)} nodes and {len(edges)} edges")
        return cls(nodes, edges)
