"""
Pathfinder search engine.

Runs Dijkstra, A*, BFS and DFS over weighted undirected graphs and
records every exploration step so the search can be replayed.
"""

__version__ = "0.1.0"
