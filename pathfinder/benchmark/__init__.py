"""
Benchmark module.

Provides infrastructure for comparing the search algorithms:
- compare_algorithms: Run every algorithm on one problem
- pick_winner: Shortest, then fastest, result
- comparison_rows: Table-ready summary
- benchmark_random_graphs: Statistics over many random graphs
"""

from pathfinder.benchmark.compare import (
    ComparisonRow,
    compare_algorithms,
    comparison_rows,
    pick_winner,
)
from pathfinder.benchmark.metrics import AlgorithmStats, benchmark_random_graphs

__all__ = [
    "AlgorithmStats",
    "ComparisonRow",
    "benchmark_random_graphs",
    "compare_algorithms",
    "comparison_rows",
    "pick_winner",
]
