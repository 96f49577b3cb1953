"""
Unit tests for algorithm comparison and random-graph statistics.
"""

import pytest

from pathfinder.benchmark import (
    benchmark_random_graphs,
    compare_algorithms,
    comparison_rows,
    pick_winner,
)
from pathfinder.graph import generate_random_graph
from pathfinder.search import SearchResult


def make_result(name: str, distance: float, time_ms: float) -> SearchResult:
    return SearchResult(path=[], distance=distance, execution_time_ms=time_ms, algorithm=name)


@pytest.fixture(scope="module")
def stats():
    return {s.algorithm: s for s in benchmark_random_graphs(node_count=8, trials=10, seed=3)}


class TestCompareAlgorithms:
    """Test compare_algorithms."""

    def test_runs_all_in_order(self, square_graph):
        results = compare_algorithms(square_graph, "A", "C")
        assert [r.algorithm for r in results] == ["Dijkstra", "A*", "BFS", "DFS"]
        assert [r.distance for r in results] == [2, 2, 2, 6]

    def test_subset(self, square_graph):
        results = compare_algorithms(square_graph, "A", "C", algorithms=("dfs", "bfs"))
        assert [r.algorithm for r in results] == ["DFS", "BFS"]

    def test_parallel_matches_sequential(self):
        """Searches are independent, so threads change nothing but timing."""
        graph = generate_random_graph(20, seed=11)
        source, target = graph.nodes[0].id, graph.nodes[-1].id
        sequential = compare_algorithms(graph, source, target)
        parallel = compare_algorithms(graph, source, target, parallel=True)

        for a, b in zip(sequential, parallel):
            assert a.algorithm == b.algorithm
            assert a.path == b.path
            assert a.steps == b.steps

    def test_unknown_algorithm(self, square_graph):
        with pytest.raises(ValueError):
            compare_algorithms(square_graph, "A", "C", algorithms=("dijkstra", "greedy"))

    def test_rows(self, square_graph):
        rows = comparison_rows(compare_algorithms(square_graph, "A", "C"), square_graph)
        dfs = rows[-1]
        assert dfs.algorithm == "DFS"
        assert dfs.path_labels == ["A", "D", "C"]
        assert dfs.visited == 3
        assert dfs.steps == 3


class TestPickWinner:
    """Test winner selection: shortest, then fastest."""

    def test_empty(self):
        assert pick_winner([]) is None

    def test_shortest_and_fastest(self):
        results = [
            make_result("DFS", 6, 0.5),
            make_result("Dijkstra", 2, 0.2),
            make_result("A*", 2, 0.1),
        ]
        assert pick_winner(results).algorithm == "A*"

    def test_shorter_but_slower_does_not_displace(self):
        """Both distance and time must be no worse than the current best."""
        results = [make_result("DFS", 6, 0.1), make_result("Dijkstra", 2, 0.3)]
        assert pick_winner(results).algorithm == "DFS"

    def test_skips_unreachable(self):
        results = [make_result("Dijkstra", -1, 0.01), make_result("BFS", 4, 0.2)]
        assert pick_winner(results).algorithm == "BFS"

    def test_nothing_found_falls_back_to_first(self):
        results = [make_result("Dijkstra", -1, 0.3), make_result("BFS", -1, 0.1)]
        assert pick_winner(results).algorithm == "Dijkstra"


class TestBenchmarkRandomGraphs:
    """Test benchmark_random_graphs."""

    def test_all_algorithms_reported(self, stats):
        assert set(stats) == {"Dijkstra", "A*", "BFS", "DFS"}
        assert all(s.trials == 10 for s in stats.values())

    def test_dijkstra_is_reference(self, stats):
        assert stats["Dijkstra"].mean_distance_ratio == pytest.approx(1.0)
        assert stats["Dijkstra"].optimal_rate == pytest.approx(1.0)

    def test_unweighted_never_better(self, stats):
        assert stats["BFS"].mean_distance_ratio >= 1.0
        assert stats["DFS"].mean_distance_ratio >= 1.0

    def test_timings_non_negative(self, stats):
        for s in stats.values():
            assert s.mean_time_ms >= 0
            assert s.std_time_ms >= 0
            assert s.mean_visited >= 1

    def test_seed_reproducible(self):
        first = benchmark_random_graphs(node_count=6, trials=4, seed=9)
        second = benchmark_random_graphs(node_count=6, trials=4, seed=9)
        assert [s.mean_distance_ratio for s in first] == [s.mean_distance_ratio for s in second]
        assert [s.mean_steps for s in first] == [s.mean_steps for s in second]

    @pytest.mark.parametrize("node_count,trials", [(1, 5), (5, 0)])
    def test_invalid_arguments(self, node_count, trials):
        with pytest.raises(ValueError):
            benchmark_random_graphs(node_count=node_count, trials=trials)
