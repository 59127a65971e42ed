"""Predecessor graph recorded during a search, and path reconstruction.

Each vertex has at most one parent at a time: recording a new parent replaces
the previous one. Parents are only recorded on strict improvements, so the
structure is a tree rooted at the search source.

Two reconstruction contracts exist:

- ``build_path(source, target)`` walks parent links back from ``target``.
- ``build_bidirectional_path(source, meet, target, backward)`` joins this
  (forward) tree, rooted at ``source``, with a backward tree rooted at
  ``target`` through the meeting vertex ``meet``.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from spath.exceptions import PathNotFoundError
from spath.model.path import WeightedPath
from spath.types.base import EdgeValue, Vertex, WeightFunc
from spath.types.monoid import OrderedMonoid


class PredecessorGraph:
    """Mapping of vertex to ``(parent, edge)`` for one engine run.

    Args:
        monoid: Weight operations used to aggregate built paths.
        weight_func: Edge-to-weight extraction.
    """

    def __init__(self, monoid: OrderedMonoid, weight_func: WeightFunc) -> None:
        self._monoid = monoid
        self._weight_func = weight_func
        self._parents: Dict[Vertex, Tuple[Vertex, EdgeValue]] = {}

    def add_predecessor(self, v: Vertex, parent: Vertex, edge: EdgeValue) -> None:
        """Record ``parent`` (reached through ``edge``) as the parent of ``v``."""
        self._parents[v] = (parent, edge)

    def get_predecessor(self, v: Vertex) -> Tuple[Vertex, EdgeValue]:
        return self._parents[v]

    def is_empty(self) -> bool:
        return not self._parents

    def __contains__(self, v: Vertex) -> bool:
        return v in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def _walk_to_root(
        self, root: Vertex, start: Vertex
    ) -> Tuple[List[Vertex], List[EdgeValue]]:
        """Follow parent links from ``start`` until ``root``.

        Returns vertices ``[start, ..., root]`` and the edges between them.

        Raises:
            PathNotFoundError: If the chain stops before reaching ``root``.
        """
        vertices = [start]
        edges: List[EdgeValue] = []
        current = start
        # A chain longer than the number of recorded parents must be cyclic.
        for _ in range(len(self._parents)):
            if current == root:
                return vertices, edges
            link = self._parents.get(current)
            if link is None:
                break
            current, edge = link
            vertices.append(current)
            edges.append(edge)
        if current == root:
            return vertices, edges
        raise PathNotFoundError(root, start)

    def _make_path(self, vertices: List[Vertex], edges: List[EdgeValue]) -> WeightedPath:
        weight = self._monoid.fold(self._weight_func(edge) for edge in edges)
        return WeightedPath(tuple(vertices), tuple(edges), weight)

    def build_path(self, source: Vertex, target: Vertex) -> WeightedPath:
        """Reconstruct the path from ``source`` to ``target``.

        Raises:
            PathNotFoundError: If ``target`` has no parent chain reaching ``source``.
        """
        try:
            vertices, edges = self._walk_to_root(source, target)
        except PathNotFoundError:
            raise PathNotFoundError(source, target) from None
        vertices.reverse()
        edges.reverse()
        return self._make_path(vertices, edges)

    def build_bidirectional_path(
        self,
        source: Vertex,
        meet: Vertex,
        target: Vertex,
        backward: PredecessorGraph,
    ) -> WeightedPath:
        """Join this forward tree and a backward tree at ``meet``.

        Args:
            source: Root of this (forward) tree.
            meet: Vertex reached by both searches.
            target: Root of ``backward``.
            backward: Tree grown from ``target`` along reversed edges; the
                parent of a vertex there is its next hop toward ``target``.

        Raises:
            PathNotFoundError: If either half does not connect through ``meet``.
        """
        try:
            head_vertices, head_edges = self._walk_to_root(source, meet)
            tail_vertices, tail_edges = backward._walk_to_root(target, meet)
        except PathNotFoundError:
            raise PathNotFoundError(source, target) from None
        head_vertices.reverse()
        head_edges.reverse()
        # ``meet`` closes the head and opens the tail.
        vertices = head_vertices + tail_vertices[1:]
        return self._make_path(vertices, head_edges + tail_edges)
