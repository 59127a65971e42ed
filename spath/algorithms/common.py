"""Helpers shared by the shortest-path engines."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

from spath.config import SOLVER_CONFIG
from spath.graph.value_graph import ValueGraph
from spath.types.base import EdgeValue, Vertex, WeightFunc, edges_are_weights
from spath.types.monoid import OrderedMonoid


def require(value: Any, message: str) -> Any:
    """Return ``value`` unless it is None.

    Raises:
        ValueError: With ``message`` if ``value`` is None.
    """
    if value is None:
        raise ValueError(message)
    return value


def require_vertex(graph: ValueGraph, v: Vertex, role: str) -> Vertex:
    """Check that ``v`` is given and belongs to ``graph``.

    Raises:
        ValueError: If ``v`` is None or not a vertex of ``graph``.
    """
    require(v, f"Shortest path can not be calculated with a null {role}.")
    if not graph.has_node(v):
        raise ValueError(f"{role.capitalize()} vertex '{v}' is not in the graph.")
    return v


def resolve_weight_func(weight_func: Optional[WeightFunc]) -> WeightFunc:
    """Default to treating edge values as weights."""
    if weight_func is None:
        return edges_are_weights
    if not callable(weight_func):
        raise ValueError("Function to calculate edges weight must be callable.")
    return weight_func


def edge_between(graph: ValueGraph, u: Vertex, v: Vertex) -> EdgeValue:
    """Return the edge value from ``u`` to ``v``, which must exist.

    Raises:
        ValueError: If the graph reports adjacency without an edge value.
    """
    edge = graph.edge_value(u, v)
    if edge is None:
        raise ValueError(f"Graph reports '{u}' -> '{v}' adjacent but has no edge value.")
    return edge


def outgoing(graph: ValueGraph, v: Vertex) -> Iterable[Vertex]:
    """Vertices reachable from ``v`` over one edge."""
    if graph.is_directed():
        return graph.successors(v)
    return graph.adjacent_nodes(v)


def incoming(graph: ValueGraph, v: Vertex) -> Iterable[Vertex]:
    """Vertices with an edge into ``v``."""
    if graph.is_directed():
        return graph.predecessors(v)
    return graph.adjacent_nodes(v)


def directed_edges(graph: ValueGraph) -> Iterable[Tuple[Vertex, Vertex]]:
    """Yield every edge as an ordered pair; undirected edges in both directions."""
    directed = graph.is_directed()
    for u, v in graph.edges():
        yield u, v
        if not directed:
            yield v, u


def check_non_negative_weights(
    graph: ValueGraph,
    monoid: OrderedMonoid,
    weight_func: WeightFunc,
    enabled: Optional[bool] = None,
) -> None:
    """Reject edges weighing less than the identity.

    Args:
        graph: Graph to scan.
        monoid: Weight operations.
        weight_func: Edge-to-weight extraction.
        enabled: Run the scan; None defers to
            ``SOLVER_CONFIG.check_non_negative_weights``.

    Raises:
        ValueError: On the first edge with a negative weight.
    """
    if enabled is None:
        enabled = SOLVER_CONFIG.check_non_negative_weights
    if not enabled:
        return
    identity = monoid.identity()
    for u, v in graph.edges():
        weight = weight_func(edge_between(graph, u, v))
        if monoid.compare(weight, identity) < 0:
            raise ValueError(
                f"Negative weight {weight!r} found on edge '{u}' -> '{v}'; "
                "use Bellman-Ford for graphs with negative weights."
            )
