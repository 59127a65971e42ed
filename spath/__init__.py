"""spath: shortest paths over weights drawn from an ordered monoid.

The engines accept any weight type that provides an identity, an associative
``append`` and a total order. Graphs are read through the ``ValueGraph``
capability; ``NxValueGraph`` adapts NetworkX graphs.

Primary API:
    find_shortest_path() - Shortest path between two vertices, any engine
    single_source_shortest_paths() - Bellman-Ford from one vertex
    all_pairs_shortest_paths() - Floyd-Warshall over every vertex pair
    ShortestPathQuery, solve() - Validated query and its dispatch
    WeightedPath, AllPairsShortestPaths - Results

Example:
    import networkx as nx
    from spath import NxValueGraph, find_shortest_path

    g = nx.Graph()
    g.add_edge(1, 3, weight=9)
    g.add_edge(3, 6, weight=2)
    g.add_edge(6, 5, weight=9)

    path = find_shortest_path(NxValueGraph(g), 1, 5, algorithm="bidirectional-dijkstra")
    path.vertices  # (1, 3, 6, 5)
    path.weight    # 20
"""

from __future__ import annotations

from spath import logging
from spath._version import __version__
from spath.algorithms.astar import astar
from spath.algorithms.bellman_ford import bellman_ford
from spath.algorithms.bidirectional import bidirectional_dijkstra
from spath.algorithms.dijkstra import dijkstra
from spath.algorithms.floyd_warshall import floyd_warshall
from spath.config import SOLVER_CONFIG, SolverConfig
from spath.exceptions import NegativeWeightCycleError, PathNotFoundError
from spath.graph.value_graph import NxValueGraph, ValueGraph
from spath.model.all_pairs import AllPairsShortestPaths
from spath.model.path import WeightedPath
from spath.solver.paths import (
    ShortestPathQuery,
    all_pairs_shortest_paths,
    find_shortest_path,
    single_source_shortest_paths,
    solve,
)
from spath.types.base import Algorithm
from spath.types.monoid import (
    DECIMAL_WEIGHTS,
    FLOAT_WEIGHTS,
    FRACTION_WEIGHTS,
    INT_WEIGHTS,
    AdditiveMonoid,
    LexicographicMonoid,
    OrderedMonoid,
)

__all__ = [
    # Version
    "__version__",
    # Graphs
    "ValueGraph",
    "NxValueGraph",
    # Weights
    "OrderedMonoid",
    "AdditiveMonoid",
    "LexicographicMonoid",
    "FLOAT_WEIGHTS",
    "INT_WEIGHTS",
    "DECIMAL_WEIGHTS",
    "FRACTION_WEIGHTS",
    # Engines
    "dijkstra",
    "bidirectional_dijkstra",
    "astar",
    "bellman_ford",
    "floyd_warshall",
    # Solver (primary API)
    "Algorithm",
    "ShortestPathQuery",
    "solve",
    "find_shortest_path",
    "single_source_shortest_paths",
    "all_pairs_shortest_paths",
    # Results
    "WeightedPath",
    "AllPairsShortestPaths",
    # Errors
    "PathNotFoundError",
    "NegativeWeightCycleError",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Logging
    "logging",
]
