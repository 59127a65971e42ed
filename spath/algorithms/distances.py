"""Per-run distance table and the priority frontier ordered by it.

``ShortestDistances`` maps visited vertices to their best known weight. A
vertex without an entry is unvisited, which is distinct from a vertex visited
with the identity weight.

``Frontier`` is a binary heap of vertices keyed by a ``ShortestDistances``
table. Decrease-key is handled by lazy deletion: a vertex is pushed again each
time its distance improves, and entries whose key no longer matches the
authoritative table (or whose vertex was already settled) are discarded when
they reach the top. Equal keys pop in insertion order.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from spath.types.base import Vertex
from spath.types.monoid import OrderedMonoid, sort_key


class ShortestDistances:
    """Mapping of vertex to best known weight for one engine run."""

    def __init__(self, monoid: OrderedMonoid) -> None:
        self._monoid = monoid
        self._weights: Dict[Vertex, Any] = {}

    @property
    def monoid(self) -> OrderedMonoid:
        return self._monoid

    def already_visited(self, v: Vertex) -> bool:
        return v in self._weights

    def get_weight(self, v: Vertex) -> Any:
        """Return the current estimate for ``v``.

        Raises:
            KeyError: If ``v`` was never visited.
        """
        return self._weights[v]

    def set_weight(self, v: Vertex, weight: Any) -> None:
        self._weights[v] = weight

    def compare(self, u: Vertex, v: Vertex) -> int:
        """Order two vertices by their current estimates.

        Unvisited vertices sort after visited ones.
        """
        u_visited = u in self._weights
        v_visited = v in self._weights
        if u_visited and v_visited:
            return self._monoid.compare(self._weights[u], self._weights[v])
        return v_visited - u_visited

    def improves(self, v: Vertex, weight: Any) -> bool:
        """True if ``v`` is unvisited or ``weight`` is strictly below its estimate."""
        if v not in self._weights:
            return True
        return self._monoid.compare(weight, self._weights[v]) < 0

    def as_dict(self) -> Dict[Vertex, Any]:
        return dict(self._weights)

    def __contains__(self, v: Vertex) -> bool:
        return v in self._weights

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._weights)


class Frontier:
    """Min-priority queue of unsettled vertices keyed by a distance table.

    Popping a vertex settles it; settled vertices are never returned again.
    """

    def __init__(self, distances: ShortestDistances) -> None:
        self._distances = distances
        self._key = sort_key(distances.monoid)
        self._heap: List[Tuple[Any, int, Any, Vertex]] = []
        self._counter = count()
        self.settled: Set[Vertex] = set()

    def push(self, v: Vertex) -> None:
        """Admit ``v`` with its current distance as priority."""
        weight = self._distances.get_weight(v)
        heappush(self._heap, (self._key(weight), next(self._counter), weight, v))

    def _discard_stale(self) -> None:
        monoid = self._distances.monoid
        heap = self._heap
        while heap:
            _, _, weight, v = heap[0]
            if v in self.settled or monoid.compare(
                weight, self._distances.get_weight(v)
            ) != 0:
                heappop(heap)
                continue
            return

    def peek(self) -> Optional[Vertex]:
        """Return the minimum unsettled vertex without removing it, or None."""
        self._discard_stale()
        if not self._heap:
            return None
        return self._heap[0][3]

    def pop(self) -> Vertex:
        """Remove, settle and return the minimum unsettled vertex.

        Raises:
            IndexError: If the frontier is empty.
        """
        self._discard_stale()
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        v = heappop(self._heap)[3]
        self.settled.add(v)
        return v

    def is_settled(self, v: Vertex) -> bool:
        return v in self.settled

    def __bool__(self) -> bool:
        self._discard_stale()
        return bool(self._heap)
