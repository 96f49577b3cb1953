"""
Search result dataclasses: the exploration trace and the final outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathfinder.graph.model import Graph, NodeId


@dataclass(frozen=True)
class Step:
    """
    One exploration event, in the order the search produced it.

    Attributes:
        from_id: Node being expanded
        to_id: Neighbor that was relaxed or discovered
        weight: Weight of the edge between them
        kind: Event tag (only "explore" today)
        current_dist: Dijkstra's new tentative distance for to_id
        f_score: A*'s new f = g + h for to_id
    """

    from_id: NodeId
    to_id: NodeId
    weight: float
    kind: str = "explore"
    current_dist: float | None = None
    f_score: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "from": self.from_id,
            "to": self.to_id,
            "weight": self.weight,
            "kind": self.kind,
        }
        if self.current_dist is not None:
            data["currentDist"] = self.current_dist
        if self.f_score is not None:
            data["fScore"] = self.f_score
        return data


@dataclass
class SearchResult:
    """
    Complete record of one search.

    Attributes:
        path: Node ids from source to destination ([] if unreachable)
        distance: Total path weight, or -1 if unreachable
        visited: Node ids in the order they were finalized
        steps: Exploration trace for replay
        execution_time_ms: Wall-clock time (informational)
        complexity: Static complexity label for the algorithm
        algorithm: Display name
    """

    path: list[NodeId]
    distance: float
    visited: list[NodeId] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    execution_time_ms: float = 0.0
    complexity: str = ""
    algorithm: str = ""

    @property
    def found(self) -> bool:
        """Whether a path to the destination exists."""
        return bool(self.path)

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, None if unreachable."""
        return len(self.path) - 1 if self.path else None

    def path_labels(self, graph: Graph) -> list[str]:
        return graph.labels_for(self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "distance": self.distance,
            "visited": list(self.visited),
            "steps": [step.to_dict() for step in self.steps],
            "executionTime": self.execution_time_ms,
            "complexity": self.complexity,
            "algorithm": self.algorithm,
        }
