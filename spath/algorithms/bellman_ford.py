"""Single-source Bellman-Ford.

Tolerates negative edge weights. After ``|V| - 1`` relaxation passes over
every edge, one verification pass looks for an edge that can still be
relaxed; such an edge proves a negative-weight cycle reachable from the
source and aborts the run with ``NegativeWeightCycleError``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from spath.algorithms.common import (
    directed_edges,
    edge_between,
    require,
    require_vertex,
    resolve_weight_func,
)
from spath.algorithms.distances import ShortestDistances
from spath.algorithms.predecessors import PredecessorGraph
from spath.exceptions import NegativeWeightCycleError
from spath.graph.value_graph import ValueGraph
from spath.logging import get_logger
from spath.model.all_pairs import AllPairsShortestPaths
from spath.types.base import EdgeValue, Vertex, WeightFunc
from spath.types.monoid import OrderedMonoid

logger = get_logger(__name__)


def bellman_ford(
    graph: ValueGraph,
    source: Vertex,
    monoid: OrderedMonoid,
    weight_func: Optional[WeightFunc] = None,
) -> AllPairsShortestPaths:
    """Compute shortest paths from ``source`` to every reachable vertex.

    Undirected edges are relaxed in both directions.

    Args:
        graph: Graph to search.
        source: Start vertex.
        monoid: Weight operations.
        weight_func: Edge-to-weight extraction; edges are weights if None.

    Returns:
        An ``AllPairsShortestPaths`` holding the ``(source, v)`` distance and
        path for each vertex ``v`` reachable from ``source``. Unreachable
        vertices are simply absent.

    Raises:
        ValueError: If an input is missing or ``source`` is not in the graph.
        NegativeWeightCycleError: If a negative-weight cycle is reachable
            from ``source``.
    """
    require(graph, "Shortest path can not be calculated on a null graph.")
    require_vertex(graph, source, "source")
    require(
        monoid, "Bellman-Ford algorithm can not be applied using null weight operations."
    )
    weight_func = resolve_weight_func(weight_func)

    distances = ShortestDistances(monoid)
    distances.set_weight(source, monoid.identity())
    predecessors = PredecessorGraph(monoid, weight_func)

    edges: List[Tuple[Vertex, Vertex, EdgeValue]] = [
        (u, v, edge_between(graph, u, v)) for u, v in directed_edges(graph)
    ]

    passes = max(graph.order() - 1, 0)
    for i in range(passes):
        relaxed = False
        for u, v, edge in edges:
            if not distances.already_visited(u):
                continue
            tentative = monoid.append(distances.get_weight(u), weight_func(edge))
            if distances.improves(v, tentative):
                distances.set_weight(v, tentative)
                predecessors.add_predecessor(v, u, edge)
                relaxed = True
        if not relaxed:
            logger.debug("Bellman-Ford converged after %d of %d passes", i + 1, passes)
            break

    for u, v, edge in edges:
        if not distances.already_visited(u):
            continue
        tentative = monoid.append(distances.get_weight(u), weight_func(edge))
        if distances.improves(v, tentative):
            raise NegativeWeightCycleError(v)

    result = AllPairsShortestPaths(monoid)
    for target in graph.nodes():
        if target == source or not distances.already_visited(target):
            continue
        result._add_shortest_distance(source, target, distances.get_weight(target))
        result._add_shortest_path(source, target, predecessors.build_path(source, target))

    logger.debug(
        "Bellman-Ford from '%s' reached %d of %d vertices",
        source,
        len(distances),
        graph.order(),
    )
    return result
