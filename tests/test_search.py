"""
Unit tests for the four search algorithms.
"""

import math
from dataclasses import replace

import pytest

from pathfinder.config import ALGORITHM_KEYS
from pathfinder.graph import Edge, Graph, Node, generate_random_graph
from pathfinder.search import (
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    DijkstraSearch,
    get_algorithm,
    run_algorithm,
)


def shrink(graph: Graph, factor: float = 100.0) -> Graph:
    """Scale coordinates down so the A* heuristic stays below any edge weight."""
    nodes = tuple(replace(n, x=n.x / factor, y=n.y / factor) for n in graph.nodes)
    return Graph(nodes, graph.edges)


class TestSquareScenario:
    """The four-node square: A-B-C costs 2, A-D-C costs 6."""

    def test_dijkstra_finds_cheapest_path(self, square_graph):
        """Dijkstra should return A-B-C with distance 2."""
        result = run_algorithm("dijkstra", square_graph, "A", "C")
        assert result.path == ["A", "B", "C"]
        assert result.distance == 2

    def test_dijkstra_trace(self, square_graph):
        """Steps follow relaxation order and carry the new distance."""
        result = run_algorithm("dijkstra", square_graph, "A", "C")
        assert [(s.from_id, s.to_id, s.current_dist) for s in result.steps] == [
            ("A", "B", 1),
            ("A", "D", 5),
            ("B", "C", 2),
        ]
        assert result.visited == ["A", "B", "C"]
        assert all(s.kind == "explore" and s.f_score is None for s in result.steps)

    def test_astar_matches_dijkstra(self, square_graph):
        """A* should find the same path and report g, not f."""
        result = run_algorithm("astar", square_graph, "A", "C")
        assert result.path == ["A", "B", "C"]
        assert result.distance == 2

    def test_astar_trace_carries_f_score(self, square_graph):
        """f = g + euclidean / 50."""
        result = run_algorithm("astar", square_graph, "A", "C")
        f_scores = [s.f_score for s in result.steps]
        assert f_scores == pytest.approx([1.2, 5.2, 2.0])
        assert all(s.current_dist is None for s in result.steps)

    def test_bfs(self, square_graph):
        """BFS visits level by level and sums the weights of its path."""
        result = run_algorithm("bfs", square_graph, "A", "C")
        assert result.visited == ["A", "B", "D", "C"]
        assert result.path == ["A", "B", "C"]
        assert result.distance == 2

    def test_dfs_is_suboptimal(self, square_graph):
        """DFS dives through D first and returns the expensive route."""
        result = run_algorithm("dfs", square_graph, "A", "C")
        assert result.path == ["A", "D", "C"]
        assert result.distance == 6
        assert result.visited == ["A", "D", "C"]
        assert [(s.from_id, s.to_id) for s in result.steps] == [
            ("A", "B"),
            ("A", "D"),
            ("D", "C"),
        ]

    def test_metadata(self, square_graph):
        """Each result carries the algorithm's display name and complexity."""
        expected = {
            "dijkstra": ("Dijkstra", "O((V + E) log V)"),
            "astar": ("A*", "O((V + E) log V)"),
            "bfs": ("BFS", "O(V + E)"),
            "dfs": ("DFS", "O(V + E)"),
        }
        for key, (name, complexity) in expected.items():
            result = run_algorithm(key, square_graph, "A", "C")
            assert result.algorithm == name
            assert result.complexity == complexity
            assert result.execution_time_ms >= 0


class TestHopGraph:
    """Heavy direct edge versus a light detour."""

    def test_bfs_prefers_fewest_hops(self, hop_graph):
        """BFS takes the direct edge and reports its weight."""
        result = run_algorithm("bfs", hop_graph, "S", "T")
        assert result.path == ["S", "T"]
        assert result.distance == 10

    def test_dijkstra_prefers_light_detour(self, hop_graph):
        """Dijkstra takes the three light edges."""
        result = run_algorithm("dijkstra", hop_graph, "S", "T")
        assert result.path == ["S", "X", "Y", "T"]
        assert result.distance == 3

    def test_dfs_keeps_last_discoverer(self, hop_graph):
        """T is discovered from S, then again from Y; the later predecessor wins."""
        result = run_algorithm("dfs", hop_graph, "S", "T")
        discoveries = [s.from_id for s in result.steps if s.to_id == "T"]
        assert discoveries == ["S", "Y"]
        assert result.path == ["S", "X", "Y", "T"]
        assert result.distance == 3


class TestEdgeCases:
    """Degenerate inputs resolve to normal result values."""

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    def test_source_equals_destination(self, algorithm, square_graph):
        """Path is the single node and distance is zero."""
        result = run_algorithm(algorithm, square_graph, "B", "B")
        assert result.path == ["B"]
        assert result.distance == 0
        assert result.found

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    def test_isolated_node(self, algorithm, isolated_graph):
        """Single node with no edges: path of length 1, no steps."""
        result = run_algorithm(algorithm, isolated_graph, "solo", "solo")
        assert len(result.path) == 1
        assert result.distance == 0
        assert result.steps == []

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    def test_disconnected(self, algorithm, disconnected_graph):
        """No connecting edge means no path."""
        result = run_algorithm(algorithm, disconnected_graph, "A", "B")
        assert result.path == []
        assert result.distance == -1
        assert not result.found
        assert result.hops is None

    def test_found_follows_path_not_distance(self):
        """A path weighing exactly -1 still counts as found."""
        graph = Graph((Node("A", 0, 0, "A"), Node("B", 1, 0, "B")), (Edge("ab", "A", "B", -1),))
        result = run_algorithm("dijkstra", graph, "A", "B")
        assert result.path == ["A", "B"]
        assert result.distance == -1
        assert result.found
        assert result.hops == 1

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    def test_missing_endpoint(self, algorithm, square_graph):
        """Unknown ids are unreachable, not errors."""
        for source, destination in [("A", "ZZZ"), ("ZZZ", "A"), ("ZZZ", "ZZZ")]:
            result = run_algorithm(algorithm, square_graph, source, destination)
            assert result.path == []
            assert result.distance == -1
            assert result.visited == []
            assert result.steps == []

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    def test_dangling_edge_ignored(self, algorithm):
        """Edges to unknown nodes are dropped, the rest still works."""
        graph = Graph(
            nodes=(Node("A", 0, 0, "A"), Node("B", 1, 0, "B")),
            edges=(Edge("ghost", "A", "nowhere", 1), Edge("ab", "A", "B", 2)),
        )
        result = run_algorithm(algorithm, graph, "A", "B")
        assert result.path == ["A", "B"]
        assert result.distance == 2
        assert all("nowhere" not in (s.from_id, s.to_id) for s in result.steps)


class TestProperties:
    """Properties that must hold on arbitrary connected graphs."""

    @pytest.mark.parametrize("seed", range(10))
    def test_optimal_algorithms_agree(self, seed):
        """Dijkstra and A* report the same distance when h is admissible."""
        graph = shrink(generate_random_graph(12, seed=seed))
        for source in graph.nodes[:3]:
            for target in graph.nodes:
                dijkstra = DijkstraSearch().search(graph, source.id, target.id)
                astar = AStarSearch().search(graph, source.id, target.id)
                assert astar.distance == pytest.approx(dijkstra.distance)

    @pytest.mark.parametrize("seed", range(10))
    def test_unweighted_algorithms_never_beat_dijkstra(self, seed):
        """BFS and DFS distances are at least the optimum; BFS has the fewest hops."""
        graph = generate_random_graph(12, seed=seed)
        source, target = graph.nodes[0].id, graph.nodes[-1].id
        best = DijkstraSearch().search(graph, source, target)
        bfs = BreadthFirstSearch().search(graph, source, target)
        dfs = DepthFirstSearch().search(graph, source, target)

        assert bfs.distance >= best.distance
        assert dfs.distance >= best.distance
        assert bfs.hops <= best.hops
        assert bfs.hops <= dfs.hops

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    @pytest.mark.parametrize("seed", range(5))
    def test_visited_has_no_duplicates(self, algorithm, seed):
        """Each node is finalized at most once."""
        graph = generate_random_graph(15, seed=seed)
        result = run_algorithm(algorithm, graph, graph.nodes[0].id, graph.nodes[-1].id)
        assert len(result.visited) == len(set(result.visited))

    @pytest.mark.parametrize("algorithm", ALGORITHM_KEYS)
    @pytest.mark.parametrize("seed", range(5))
    def test_path_is_walkable(self, algorithm, seed):
        """Consecutive path nodes are joined by an edge and the path ends correctly."""
        graph = generate_random_graph(15, seed=seed)
        source, target = graph.nodes[0].id, graph.nodes[-1].id
        result = run_algorithm(algorithm, graph, source, target)
        assert result.path[0] == source
        assert result.path[-1] == target
        for a, b in zip(result.path, result.path[1:]):
            assert graph.has_edge_between(a, b)

    def test_searches_are_repeatable(self, square_graph):
        """Same input, same trace."""
        first = run_algorithm("astar", square_graph, "A", "C")
        second = run_algorithm("astar", square_graph, "A", "C")
        assert first.steps == second.steps
        assert first.visited == second.visited


class TestRegistry:
    """Test algorithm lookup."""

    def test_get_known(self):
        """Keys map to the right classes, case-insensitively."""
        assert isinstance(get_algorithm("dijkstra"), DijkstraSearch)
        assert isinstance(get_algorithm("AStar"), AStarSearch)
        assert isinstance(get_algorithm("bfs"), BreadthFirstSearch)
        assert isinstance(get_algorithm("dfs"), DepthFirstSearch)

    def test_unknown_raises(self):
        """Unknown names list what is available."""
        with pytest.raises(ValueError, match="Available"):
            get_algorithm("bellman-ford")

    def test_astar_kwargs(self, square_graph):
        """A huge scale turns A* into Dijkstra ordering."""
        astar = get_algorithm("astar", heuristic_scale=1e12)
        assert astar.heuristic(square_graph, "A", "C") == pytest.approx(math.hypot(10, 10) / 1e12)

        scaled = astar.search(square_graph, "A", "C")
        reference = run_algorithm("dijkstra", square_graph, "A", "C")
        assert [(s.from_id, s.to_id) for s in scaled.steps] == [(s.from_id, s.to_id) for s in reference.steps]
        assert scaled.visited == reference.visited

    def test_optimal_flags(self):
        """Only Dijkstra and A* claim optimality."""
        assert [get_algorithm(k).optimal for k in ALGORITHM_KEYS] == [True, True, False, False]


class TestResultSerialization:
    """Test the dict form handed to external consumers."""

    def test_dijkstra_step_dict(self, square_graph):
        """Dijkstra steps expose currentDist, not fScore."""
        data = run_algorithm("dijkstra", square_graph, "A", "C").to_dict()
        assert data["steps"][0] == {
            "from": "A",
            "to": "B",
            "weight": 1,
            "kind": "explore",
            "currentDist": 1,
        }
        assert data["distance"] == 2
        assert data["algorithm"] == "Dijkstra"
        assert "executionTime" in data

    def test_astar_step_dict(self, square_graph):
        """A* steps expose fScore."""
        step = run_algorithm("astar", square_graph, "A", "C").to_dict()["steps"][0]
        assert "fScore" in step
        assert "currentDist" not in step

    def test_path_labels(self):
        """Labels replace opaque ids."""
        graph = Graph(
            nodes=(Node("x1", 0, 0, "Home"), Node("x2", 1, 0, "Work")),
            edges=(Edge("e", "x1", "x2", 4),),
        )
        result = run_algorithm("bfs", graph, "x1", "x2")
        assert result.path_labels(graph) == ["Home", "Work"]
