"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from pathfinder.animation import ManualScheduler
from pathfinder.graph import Edge, Graph, Node


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def square_graph() -> Graph:
    """
    Four nodes on a square; the cheap route A-B-C beats A-D-C.

        A(0,0) --1-- B(10,0)
          |            |
          5            1
          |            |
        D(0,10) --1-- C(10,10)
    """
    return Graph(
        nodes=(
            Node("A", 0, 0, "A"),
            Node("B", 10, 0, "B"),
            Node("C", 10, 10, "C"),
            Node("D", 0, 10, "D"),
        ),
        edges=(
            Edge("ab", "A", "B", 1),
            Edge("bc", "B", "C", 1),
            Edge("ad", "A", "D", 5),
            Edge("dc", "D", "C", 1),
        ),
    )


@pytest.fixture
def hop_graph() -> Graph:
    """Direct heavy edge S-T versus a light three-hop detour S-X-Y-T."""
    return Graph(
        nodes=(
            Node("S", 0, 0, "S"),
            Node("X", 1, 0, "X"),
            Node("Y", 2, 0, "Y"),
            Node("T", 3, 0, "T"),
        ),
        edges=(
            Edge("st", "S", "T", 10),
            Edge("sx", "S", "X", 1),
            Edge("xy", "X", "Y", 1),
            Edge("yt", "Y", "T", 1),
        ),
    )


@pytest.fixture
def isolated_graph() -> Graph:
    """Single node, no edges."""
    return Graph(nodes=(Node("solo", 5, 5, "A"),))


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two nodes with no edge between them."""
    return Graph(nodes=(Node("A", 0, 0, "A"), Node("B", 10, 0, "B")))


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Virtual-clock scheduler for deterministic replays."""
    return ManualScheduler()
