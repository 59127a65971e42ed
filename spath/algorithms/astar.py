"""A* search.

Dijkstra's search with the frontier ordered by the f-score
``append(g, heuristic(v, goal))`` instead of the accumulated distance ``g``.
The heuristic must be admissible (never overestimate the remaining weight to
the goal) and consistent for the returned path to be optimal; neither
property is verified. A heuristic returning the identity everywhere turns A*
back into Dijkstra.
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
from spath.types.base import Heuristic, Vertex, WeightFunc
from spath.types.monoid import OrderedMonoid

logger = get_logger(__name__)


def astar(
    graph: ValueGraph,
    start: Vertex,
    goal: Vertex,
    monoid: OrderedMonoid,
    heuristic: Heuristic,
    weight_func: Optional[WeightFunc] = None,
    *,
    check_non_negative: Optional[bool] = None,
) -> WeightedPath:
    """Find the shortest path from ``start`` to ``goal`` guided by ``heuristic``.

    Args:
        graph: Graph to search.
        start: Start vertex.
        goal: Goal vertex.
        monoid: Weight operations.
        heuristic: ``heuristic(vertex, goal)`` estimating the remaining weight.
        weight_func: Edge-to-weight extraction; edges are weights if None.
        check_non_negative: Scan for negative weights first; None defers to
            the global solver configuration.

    Raises:
        ValueError: If an input is missing or a vertex is not in the graph.
        PathNotFoundError: If ``goal`` is unreachable from ``start``.
    """
    require(graph, "Shortest path can not be calculated on a null graph.")
    require_vertex(graph, start, "source")
    require_vertex(graph, goal, "target")
    require(monoid, "A* algorithm can not be applied using null weight operations.")
    require(heuristic, "A* algorithm can not be applied using a null heuristic.")
    if not callable(heuristic):
        raise ValueError("A* heuristic must be callable.")
    weight_func = resolve_weight_func(weight_func)
    check_non_negative_weights(graph, monoid, weight_func, check_non_negative)

    # Cost from start along best known path.
    g_scores = ShortestDistances(monoid)
    g_scores.set_weight(start, monoid.identity())

    # Estimated total cost from start to goal through each vertex.
    f_scores = ShortestDistances(monoid)
    f_scores.set_weight(start, monoid.append(monoid.identity(), heuristic(start, goal)))

    open_set = Frontier(f_scores)
    open_set.push(start)

    predecessors = PredecessorGraph(monoid, weight_func)

    logger.debug("A* from '%s' to '%s'", start, goal)
    while open_set:
        current = open_set.pop()

        if current == goal:
            logger.debug(
                "A* reached '%s' after settling %d vertices",
                goal,
                len(open_set.settled),
            )
            return predecessors.build_path(start, goal)

        current_g = g_scores.get_weight(current)
        for v in outgoing(graph, current):
            if open_set.is_settled(v):
                continue
            edge = edge_between(graph, current, v)
            tentative_g = monoid.append(current_g, weight_func(edge))
            if g_scores.improves(v, tentative_g):
                predecessors.add_predecessor(v, current, edge)
                g_scores.set_weight(v, tentative_g)
                f_scores.set_weight(v, monoid.append(tentative_g, heuristic(v, goal)))
                open_set.push(v)

    raise PathNotFoundError(start, goal)
