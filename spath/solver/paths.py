"""Shortest-path queries validated up front and dispatched to an engine.

A ``ShortestPathQuery`` gathers everything an engine needs: the graph, the
edge-to-weight function, the weight monoid, the algorithm and, depending on
the algorithm, a source, a target and a heuristic. Every required input is
checked when the query is built, so an invalid query never starts a search.

Example:
    >>> import networkx as nx
    >>> from spath.graph import NxValueGraph
    >>> from spath.types.monoid import INT_WEIGHTS
    >>> g = nx.DiGraph()
    >>> g.add_edge("A", "B", weight=2)
    >>> g.add_edge("B", "C", weight=3)
    >>> find_shortest_path(NxValueGraph(g), "A", "C", monoid=INT_WEIGHTS).weight
    5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from spath.algorithms.astar import astar
from spath.algorithms.bellman_ford import bellman_ford
from spath.algorithms.bidirectional import bidirectional_dijkstra
from spath.algorithms.common import require, require_vertex, resolve_weight_func
from spath.algorithms.dijkstra import dijkstra
from spath.algorithms.floyd_warshall import floyd_warshall
from spath.graph.value_graph import ValueGraph
from spath.logging import get_logger
from spath.model.all_pairs import AllPairsShortestPaths
from spath.model.path import WeightedPath
from spath.types.base import Algorithm, Heuristic, Vertex, WeightFunc
from spath.types.monoid import FLOAT_WEIGHTS, OrderedMonoid

logger = get_logger(__name__)

_SINGLE_TARGET = (
    Algorithm.DIJKSTRA,
    Algorithm.BIDIRECTIONAL_DIJKSTRA,
    Algorithm.A_STAR,
)


@dataclass(frozen=True)
class ShortestPathQuery:
    """Inputs of one shortest-path computation.

    Attributes:
        graph: Graph to search.
        algorithm: Engine to run; strings are parsed with
            ``Algorithm.from_string``.
        monoid: Weight operations.
        weight_func: Edge-to-weight extraction; None means edge values are
            weights.
        source: Start vertex; required by every engine but Floyd-Warshall.
        target: Goal vertex; required by Dijkstra, bidirectional Dijkstra
            and A*.
        heuristic: ``heuristic(vertex, goal)``; required by A*.
        check_non_negative: Per-query override of
            ``SOLVER_CONFIG.check_non_negative_weights``.

    Raises:
        ValueError: If a required input is missing or invalid.
    """

    graph: ValueGraph
    algorithm: Union[Algorithm, str]
    monoid: OrderedMonoid
    weight_func: Optional[WeightFunc] = None
    source: Optional[Vertex] = None
    target: Optional[Vertex] = None
    heuristic: Optional[Heuristic] = None
    check_non_negative: Optional[bool] = None

    def __post_init__(self) -> None:
        require(self.graph, "Shortest path can not be calculated on a null graph.")
        require(self.algorithm, "An algorithm must be selected.")
        if isinstance(self.algorithm, str):
            object.__setattr__(self, "algorithm", Algorithm.from_string(self.algorithm))
        elif not isinstance(self.algorithm, Algorithm):
            raise ValueError(f"Unknown algorithm '{self.algorithm}'.")
        require(
            self.monoid,
            f"{self.algorithm.name} can not be applied using null weight operations.",
        )
        resolve_weight_func(self.weight_func)

        if self.algorithm.needs_source:
            require_vertex(self.graph, self.source, "source")
        if self.algorithm.needs_target:
            require_vertex(self.graph, self.target, "target")
        if self.algorithm is Algorithm.A_STAR:
            require(self.heuristic, "A* algorithm can not be applied using a null heuristic.")
            if not callable(self.heuristic):
                raise ValueError("A* heuristic must be callable.")


def solve(query: ShortestPathQuery) -> Union[WeightedPath, AllPairsShortestPaths]:
    """Run the engine selected by ``query``.

    Returns:
        A ``WeightedPath`` for Dijkstra, bidirectional Dijkstra and A*; an
        ``AllPairsShortestPaths`` for Bellman-Ford and Floyd-Warshall.

    Raises:
        PathNotFoundError: If a single-target engine cannot reach the target.
        NegativeWeightCycleError: If Bellman-Ford finds a negative cycle.
    """
    algorithm = query.algorithm
    logger.debug("Solving %s query", algorithm.name)

    if algorithm is Algorithm.DIJKSTRA:
        return dijkstra(
            query.graph,
            query.source,
            query.target,
            query.monoid,
            query.weight_func,
            check_non_negative=query.check_non_negative,
        )
    if algorithm is Algorithm.BIDIRECTIONAL_DIJKSTRA:
        return bidirectional_dijkstra(
            query.graph,
            query.source,
            query.target,
            query.monoid,
            query.weight_func,
            check_non_negative=query.check_non_negative,
        )
    if algorithm is Algorithm.A_STAR:
        return astar(
            query.graph,
            query.source,
            query.target,
            query.monoid,
            query.heuristic,
            query.weight_func,
            check_non_negative=query.check_non_negative,
        )
    if algorithm is Algorithm.BELLMAN_FORD:
        return bellman_ford(query.graph, query.source, query.monoid, query.weight_func)
    return floyd_warshall(query.graph, query.monoid, query.weight_func)


def find_shortest_path(
    graph: ValueGraph,
    source: Vertex,
    target: Vertex,
    *,
    algorithm: Union[Algorithm, str] = Algorithm.DIJKSTRA,
    monoid: OrderedMonoid = FLOAT_WEIGHTS,
    weight_func: Optional[WeightFunc] = None,
    heuristic: Optional[Heuristic] = None,
    check_non_negative: Optional[bool] = None,
) -> WeightedPath:
    """Return the shortest path between two vertices.

    Args:
        graph: Graph to search.
        source: Start vertex.
        target: Goal vertex.
        algorithm: Any engine. All-pairs engines are run from ``source`` (or
            over every pair) and the requested pair is looked up.
        monoid: Weight operations; floats by default.
        weight_func: Edge-to-weight extraction; edges are weights if None.
        heuristic: Required by A*.
        check_non_negative: Override of the global negative-weight scan.

    Raises:
        ValueError: If a required input is missing or invalid.
        PathNotFoundError: If ``target`` is unreachable from ``source``.
        NegativeWeightCycleError: If Bellman-Ford finds a negative cycle.
    """
    query = ShortestPathQuery(
        graph=graph,
        algorithm=algorithm,
        monoid=monoid,
        weight_func=weight_func,
        source=source,
        target=target,
        heuristic=heuristic,
        check_non_negative=check_non_negative,
    )
    if query.algorithm in _SINGLE_TARGET:
        return solve(query)
    if not query.algorithm.needs_source:
        require_vertex(graph, source, "source")
    require_vertex(graph, target, "target")
    result = solve(query)
    if source == target:
        return WeightedPath((source,), (), query.monoid.identity())
    return result.find_shortest_path(source, target)


def single_source_shortest_paths(
    graph: ValueGraph,
    source: Vertex,
    *,
    monoid: OrderedMonoid = FLOAT_WEIGHTS,
    weight_func: Optional[WeightFunc] = None,
) -> AllPairsShortestPaths:
    """Run Bellman-Ford from ``source``.

    Raises:
        ValueError: If a required input is missing or invalid.
        NegativeWeightCycleError: If a negative cycle is reachable from ``source``.
    """
    return solve(
        ShortestPathQuery(
            graph=graph,
            algorithm=Algorithm.BELLMAN_FORD,
            monoid=monoid,
            weight_func=weight_func,
            source=source,
        )
    )


def all_pairs_shortest_paths(
    graph: ValueGraph,
    *,
    monoid: OrderedMonoid = FLOAT_WEIGHTS,
    weight_func: Optional[WeightFunc] = None,
) -> AllPairsShortestPaths:
    """Run Floyd-Warshall over every ordered vertex pair.

    Raises:
        ValueError: If a required input is missing or invalid.
    """
    return solve(
        ShortestPathQuery(
            graph=graph,
            algorithm=Algorithm.FLOYD_WARSHALL,
            monoid=monoid,
            weight_func=weight_func,
        )
    )
