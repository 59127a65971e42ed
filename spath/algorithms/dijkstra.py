"""Single-source, single-target Dijkstra search.

All edge weights must compare at or above the monoid identity. The
precondition is not checked unless requested through ``check_non_negative``
or ``SOLVER_CONFIG.check_non_negative_weights``.
"""

from __future__ import annotations

from typing import Optional

from spath.algorithms.common import (
    check_non_negative_weights,
    edge_between,
    outgoing,
    require,
    require_vertex,
    resolve_weight_func,
)
from spath.algorithms.distances import Frontier, ShortestDistances
from spath.algorithms.predecessors import PredecessorGraph
from spath.exceptions import PathNotFoundError
from spath.graph.value_graph import ValueGraph
from spath.logging import get_logger
from spath.model.path import WeightedPath
from spath.types.base import Vertex, WeightFunc
from spath.types.monoid import OrderedMonoid

logger = get_logger(__name__)


def dijkstra(
    graph: ValueGraph,
    source: Vertex,
    target: Vertex,
    monoid: OrderedMonoid,
    weight_func: Optional[WeightFunc] = None,
    *,
    check_non_negative: Optional[bool] = None,
) -> WeightedPath:
    """Find the shortest path from ``source`` to ``target``.

    Args:
        graph: Graph to search.
        source: Start vertex.
        target: Goal vertex.
        monoid: Weight operations.
        weight_func: Edge-to-weight extraction; edges are weights if None.
        check_non_negative: Scan for negative weights first; None defers to
            the global solver configuration.

    Returns:
        The shortest weighted path. Its vertex sequence is ``[source]`` when
        ``source == target``.

    Raises:
        ValueError: If an input is missing or a vertex is not in the graph.
        PathNotFoundError: If ``target`` is unreachable from ``source``.
    """
    require(graph, "Shortest path can not be calculated on a null graph.")
    require_vertex(graph, source, "source")
    require_vertex(graph, target, "target")
    require(monoid, "Dijkstra algorithm can not be applied using null weight operations.")
    weight_func = resolve_weight_func(weight_func)
    check_non_negative_weights(graph, monoid, weight_func, check_non_negative)

    distances = ShortestDistances(monoid)
    distances.set_weight(source, monoid.identity())

    unsettled = Frontier(distances)
    unsettled.push(source)

    predecessors = PredecessorGraph(monoid, weight_func)

    logger.debug("Dijkstra from '%s' to '%s'", source, target)
    while unsettled:
        vertex = unsettled.pop()

        if vertex == target:
            logger.debug(
                "Dijkstra reached '%s' after settling %d vertices",
                target,
                len(unsettled.settled),
            )
            return predecessors.build_path(source, target)

        vertex_weight = distances.get_weight(vertex)
        for v in outgoing(graph, vertex):
            if unsettled.is_settled(v):
                continue
            edge = edge_between(graph, vertex, v)
            tentative = monoid.append(vertex_weight, weight_func(edge))
            if distances.improves(v, tentative):
                distances.set_weight(v, tentative)
                unsettled.push(v)
                predecessors.add_predecessor(v, vertex, edge)

    logger.debug(
        "Dijkstra exhausted %d vertices without reaching '%s'",
        len(unsettled.settled),
        target,
    )
    raise PathNotFoundError(source, target)
