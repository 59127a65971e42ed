"""Shortest distances and paths indexed by ordered vertex pairs.

``AllPairsShortestPaths`` is produced by Floyd-Warshall (every pair) and by
Bellman-Ford (pairs rooted at the search source). Engines populate it through
the private ``_add_*`` methods; once returned to the caller it is only read.

Self-pairs are never stored: their distance is always the monoid identity and
asking for their path raises ``PathNotFoundError``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from spath.exceptions import PathNotFoundError
from spath.model.path import WeightedPath
from spath.types.base import Vertex
from spath.types.monoid import OrderedMonoid

VertexPair = Tuple[Vertex, Vertex]


class AllPairsShortestPaths:
    """Mapping of ordered vertex pairs to shortest distances and paths.

    Args:
        monoid: Weight operations, used for self-pair distances.
    """

    def __init__(self, monoid: OrderedMonoid) -> None:
        self._monoid = monoid
        self._paths: Dict[VertexPair, WeightedPath] = {}
        self._distances: Dict[VertexPair, Any] = {}

    def _add_shortest_path(
        self, source: Vertex, target: Vertex, path: WeightedPath
    ) -> None:
        if source is None or target is None:
            raise ValueError("Impossible to add a shortest path with a null endpoint.")
        if path is None:
            raise ValueError("Impossible to add a null path.")
        self._paths[(source, target)] = path

    def _add_shortest_distance(self, source: Vertex, target: Vertex, distance: Any) -> None:
        if source is None or target is None:
            raise ValueError("Impossible to add a shortest distance with a null endpoint.")
        if distance is None:
            raise ValueError("Impossible to add a null shortest distance.")
        self._distances[(source, target)] = distance

    def find_shortest_path(self, source: Vertex, target: Vertex) -> WeightedPath:
        """Return the shortest path from ``source`` to ``target``.

        Raises:
            PathNotFoundError: If no path is recorded for the pair.
        """
        path = self._paths.get((source, target))
        if path is None:
            raise PathNotFoundError(source, target)
        return path

    def get_shortest_distance(self, source: Vertex, target: Vertex) -> Optional[Any]:
        """Return the shortest distance, or None when the pair is unreachable.

        The distance of a vertex to itself is always the monoid identity.
        """
        if source == target:
            return self._monoid.identity()
        return self._distances.get((source, target))

    def has_shortest_distance(self, source: Vertex, target: Vertex) -> bool:
        if source == target:
            return True
        return (source, target) in self._distances

    def has_shortest_path(self, source: Vertex, target: Vertex) -> bool:
        return (source, target) in self._paths

    @property
    def distances(self) -> Mapping[VertexPair, Any]:
        """Read-only view of the stored (non-self) distances."""
        return MappingProxyType(self._distances)

    @property
    def paths(self) -> Mapping[VertexPair, WeightedPath]:
        """Read-only view of the stored paths."""
        return MappingProxyType(self._paths)

    def __len__(self) -> int:
        return len(self._distances)

    def __str__(self) -> str:
        return str(self._distances)

    def __repr__(self) -> str:
        return (
            f"AllPairsShortestPaths(distances={len(self._distances)}, "
            f"paths={len(self._paths)})"
        )
