"""Bidirectional Dijkstra search.

A forward search from ``source`` and a backward search from ``target`` (over
reversed edges) advance in lock-step, one settled vertex per side and round.
The best combined weight seen so far, and the vertex where the two searches
met, are tracked. Before each round the search stops once the sum of both
frontier minima reaches the best combined weight: no path through unsettled
vertices can be lighter than that.

Edge weights must compare at or above the monoid identity.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from spath.algorithms.common import (
    check_non_negative_weights,
    edge_between,
    incoming,
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
from spath.types.base import EdgeValue, Vertex, WeightFunc
from spath.types.monoid import OrderedMonoid

logger = get_logger(__name__)


class _SearchSide:
    """Distance table, frontier and predecessor tree of one search direction.

    Args:
        root: Vertex the side starts from.
        neighbors: Vertices one hop away in this side's direction.
        edge_to: Edge value between an expanded vertex and a neighbor.
    """

    def __init__(
        self,
        root: Vertex,
        monoid: OrderedMonoid,
        weight_func: WeightFunc,
        neighbors: Callable[[Vertex], Iterable[Vertex]],
        edge_to: Callable[[Vertex, Vertex], EdgeValue],
    ) -> None:
        self.distances = ShortestDistances(monoid)
        self.distances.set_weight(root, monoid.identity())
        self.frontier = Frontier(self.distances)
        self.frontier.push(root)
        self.predecessors = PredecessorGraph(monoid, weight_func)
        self._monoid = monoid
        self._weight_func = weight_func
        self._neighbors = neighbors
        self._edge_to = edge_to

    def min_distance(self) -> Any:
        return self.distances.get_weight(self.frontier.peek())

    def expand(self, other: _SearchSide, meeting: _Meeting) -> None:
        """Settle the closest vertex and relax its edges."""
        monoid = self._monoid
        vertex = self.frontier.pop()
        vertex_weight = self.distances.get_weight(vertex)
        if vertex in other.distances:
            meeting.offer(vertex, vertex_weight, other.distances.get_weight(vertex))

        for v in self._neighbors(vertex):
            if self.frontier.is_settled(v):
                continue
            edge = self._edge_to(vertex, v)
            tentative = monoid.append(vertex_weight, self._weight_func(edge))
            if self.distances.improves(v, tentative):
                self.distances.set_weight(v, tentative)
                self.frontier.push(v)
                self.predecessors.add_predecessor(v, vertex, edge)
            if v in other.distances:
                meeting.offer(
                    v, self.distances.get_weight(v), other.distances.get_weight(v)
                )


class _Meeting:
    """Best combined weight found so far and the vertex it goes through."""

    def __init__(self, monoid: OrderedMonoid) -> None:
        self._monoid = monoid
        self.best: Any = None
        self.vertex: Optional[Vertex] = None

    @property
    def found(self) -> bool:
        return self.best is not None

    def offer(self, vertex: Vertex, own_weight: Any, other_weight: Any) -> None:
        candidate = self._monoid.append(own_weight, other_weight)
        if self.best is None or self._monoid.compare(candidate, self.best) < 0:
            self.best = candidate
            self.vertex = vertex


def bidirectional_dijkstra(
    graph: ValueGraph,
    source: Vertex,
    target: Vertex,
    monoid: OrderedMonoid,
    weight_func: Optional[WeightFunc] = None,
    *,
    check_non_negative: Optional[bool] = None,
) -> WeightedPath:
    """Find the shortest path from ``source`` to ``target`` searching from both ends.

    Args:
        graph: Graph to search.
        source: Start vertex.
        target: Goal vertex.
        monoid: Weight operations.
        weight_func: Edge-to-weight extraction; edges are weights if None.
        check_non_negative: Scan for negative weights first; None defers to
            the global solver configuration.

    Returns:
        A shortest weighted path. Its weight equals the one Dijkstra finds,
        though the vertices may differ among equal-weight alternatives.

    Raises:
        ValueError: If an input is missing or a vertex is not in the graph.
        PathNotFoundError: If ``target`` is unreachable from ``source``.
    """
    require(graph, "Shortest path can not be calculated on a null graph.")
    require_vertex(graph, source, "source")
    require_vertex(graph, target, "target")
    require(
        monoid,
        "Bidirectional Dijkstra algorithm can not be applied using null weight operations.",
    )
    weight_func = resolve_weight_func(weight_func)
    check_non_negative_weights(graph, monoid, weight_func, check_non_negative)

    if source == target:
        return PredecessorGraph(monoid, weight_func).build_path(source, target)

    forward = _SearchSide(
        source,
        monoid,
        weight_func,
        lambda v: outgoing(graph, v),
        lambda vertex, v: edge_between(graph, vertex, v),
    )
    backward = _SearchSide(
        target,
        monoid,
        weight_func,
        lambda v: incoming(graph, v),
        lambda vertex, v: edge_between(graph, v, vertex),
    )
    meeting = _Meeting(monoid)

    logger.debug("Bidirectional Dijkstra from '%s' to '%s'", source, target)
    while forward.frontier and backward.frontier:
        if meeting.found:
            bound = monoid.append(forward.min_distance(), backward.min_distance())
            if monoid.compare(bound, meeting.best) >= 0:
                logger.debug(
                    "Frontiers crossed the best candidate through '%s'", meeting.vertex
                )
                break

        forward.expand(backward, meeting)
        if backward.frontier:
            backward.expand(forward, meeting)

    if not meeting.found:
        raise PathNotFoundError(source, target)

    logger.debug(
        "Bidirectional Dijkstra settled %d forward and %d backward vertices",
        len(forward.frontier.settled),
        len(backward.frontier.settled),
    )
    return forward.predecessors.build_bidirectional_path(
        source, meeting.vertex, target, backward.predecessors
    )
