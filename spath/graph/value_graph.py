"""Read-only graph capability and its NetworkX adapter.

The engines never touch a concrete graph type. They consume the small set of
queries described by :class:`ValueGraph`: the vertex and edge sets, per-vertex
adjacency in both directions, the value stored on the edge between two
vertices, and whether the graph is directed.

:class:`NxValueGraph` exposes a NetworkX ``Graph`` or ``DiGraph`` through
that protocol without copying it.
"""

from __future__ import annotations

from typing import (
    Any,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

import networkx as nx

from spath.types.base import EdgeValue, Vertex


@runtime_checkable
class ValueGraph(Protocol):
    """Queries the shortest-path engines run against a graph.

    For undirected graphs ``successors``, ``predecessors`` and
    ``adjacent_nodes`` all return the symmetric adjacency, ``edges`` yields
    each undirected edge once, and ``edge_value`` is symmetric.
    """

    def nodes(self) -> Iterable[Vertex]: ...

    def edges(self) -> Iterable[Tuple[Vertex, Vertex]]: ...

    def successors(self, v: Vertex) -> Iterable[Vertex]: ...

    def predecessors(self, v: Vertex) -> Iterable[Vertex]: ...

    def adjacent_nodes(self, v: Vertex) -> Iterable[Vertex]: ...

    def edge_value(self, u: Vertex, v: Vertex) -> Optional[EdgeValue]: ...

    def is_directed(self) -> bool: ...

    def order(self) -> int: ...

    def has_node(self, v: Vertex) -> bool: ...


class NxValueGraph:
    """Expose a NetworkX graph as a :class:`ValueGraph`.

    The adapter holds a reference to the wrapped graph; it never mutates it.
    Callers must not mutate the graph while an engine is running on it.

    Args:
        graph: A ``networkx.Graph`` or ``networkx.DiGraph``.
        value_attr: Edge attribute holding the edge value. If None, the
            whole edge attribute dict is the edge value.

    Raises:
        ValueError: If ``graph`` is a multigraph or not a NetworkX graph.
            ``edge_value`` raises ValueError for an existing edge that lacks
            ``value_attr``.

    Example:
        >>> g = nx.DiGraph()
        >>> g.add_edge("A", "B", weight=3)
        >>> NxValueGraph(g).edge_value("A", "B")
        3
    """

    def __init__(self, graph: nx.Graph, value_attr: Optional[str] = "weight") -> None:
        if not isinstance(graph, nx.Graph):
            raise ValueError(
                f"Expected a NetworkX graph, got '{type(graph).__name__}'."
            )
        if graph.is_multigraph():
            raise ValueError(
                "Multigraphs are not supported: the edge value between two "
                "vertices must be unique."
            )
        self._graph = graph
        self._value_attr = value_attr

    @property
    def nx_graph(self) -> nx.Graph:
        """Return the wrapped NetworkX graph."""
        return self._graph

    def nodes(self) -> Iterator[Vertex]:
        return iter(self._graph.nodes)

    def edges(self) -> Iterator[Tuple[Vertex, Vertex]]:
        return iter(self._graph.edges())

    def successors(self, v: Vertex) -> Iterator[Vertex]:
        if self._graph.is_directed():
            return self._graph.successors(v)
        return self._graph.neighbors(v)

    def predecessors(self, v: Vertex) -> Iterator[Vertex]:
        if self._graph.is_directed():
            return self._graph.predecessors(v)
        return self._graph.neighbors(v)

    def adjacent_nodes(self, v: Vertex) -> Iterator[Vertex]:
        if self._graph.is_directed():
            return iter(nx.all_neighbors(self._graph, v))
        return self._graph.neighbors(v)

    def edge_value(self, u: Vertex, v: Vertex) -> Optional[EdgeValue]:
        data = self._graph.get_edge_data(u, v)
        if data is None:
            return None
        if self._value_attr is None:
            return data
        try:
            return data[self._value_attr]
        except KeyError:
            raise ValueError(
                f"Edge '{u}' -> '{v}' has no '{self._value_attr}' attribute."
            ) from None

    def is_directed(self) -> bool:
        return self._graph.is_directed()

    def order(self) -> int:
        return self._graph.number_of_nodes()

    def has_node(self, v: Vertex) -> bool:
        return self._graph.has_node(v)

    def __contains__(self, v: Any) -> bool:
        return self.has_node(v)

    def __repr__(self) -> str:
        kind = "directed" if self.is_directed() else "undirected"
        return (
            f"NxValueGraph({kind}, nodes={self._graph.number_of_nodes()}, "
            f"edges={self._graph.number_of_edges()})"
        )
