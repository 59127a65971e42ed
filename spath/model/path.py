"""Immutable weighted path returned by the shortest-path engines.

A ``WeightedPath`` stores the vertex sequence, the edge values connecting
consecutive vertices and the aggregated weight (the monoid fold of the edge
weights). Equality compares all three.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator, Optional, Tuple

from spath.types.base import EdgeValue, Vertex, WeightFunc, edges_are_weights
from spath.types.monoid import OrderedMonoid


@dataclass(frozen=True)
class WeightedPath:
    """Represents a single path between two vertices.

    Attributes:
        vertices: Vertices in traversal order; never empty.
        edges: Edge values, ``edges[i]`` connecting ``vertices[i]`` to
            ``vertices[i + 1]``.
        weight: Aggregated weight of the path.
    """

    vertices: Tuple[Vertex, ...]
    edges: Tuple[EdgeValue, ...]
    weight: Any

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and check their lengths agree."""
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "edges", tuple(self.edges))
        if not self.vertices:
            raise ValueError("A path must contain at least one vertex.")
        if len(self.edges) != len(self.vertices) - 1:
            raise ValueError(
                f"A path of {len(self.vertices)} vertices needs "
                f"{len(self.vertices) - 1} edges, got {len(self.edges)}."
            )

    def __getitem__(self, idx: int) -> Vertex:
        return self.vertices[idx]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def source(self) -> Vertex:
        """Return the first vertex of the path."""
        return self.vertices[0]

    @property
    def target(self) -> Vertex:
        """Return the last vertex of the path."""
        return self.vertices[-1]

    @property
    def order(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    @property
    def size(self) -> int:
        """Number of edges."""
        return len(self.edges)

    @cached_property
    def vertex_set(self) -> frozenset:
        return frozenset(self.vertices)

    def connections(self) -> Iterator[Tuple[Vertex, EdgeValue, Vertex]]:
        """Yield ``(head, edge, tail)`` for each edge along the path."""
        for i, edge in enumerate(self.edges):
            yield self.vertices[i], edge, self.vertices[i + 1]

    def reweigh(
        self,
        monoid: OrderedMonoid,
        weight_func: Optional[WeightFunc] = None,
    ) -> Any:
        """Fold the edge weights again, independently of ``weight``.

        Args:
            monoid: Weight operations.
            weight_func: Edge-to-weight extraction; edges are weights if None.

        Returns:
            The monoid fold of the weights of ``edges``.
        """
        weight_func = weight_func or edges_are_weights
        return monoid.fold(weight_func(edge) for edge in self.edges)

    def __repr__(self) -> str:
        return f"WeightedPath({list(self.vertices)}, weight={self.weight!r})"
