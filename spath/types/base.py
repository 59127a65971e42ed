"""Base aliases and enums for the shortest-path engines."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Hashable, TypeVar

#: Opaque vertex identity.
Vertex = Hashable

#: Opaque edge value, as returned by ``ValueGraph.edge_value``.
EdgeValue = Any

#: Element of an ordered monoid.
Weight = TypeVar("Weight")

#: Extracts the weight of an edge from its edge value.
WeightFunc = Callable[[EdgeValue], Any]

#: Estimates the remaining weight from a vertex to the goal (A* only).
Heuristic = Callable[[Vertex, Vertex], Any]


def edges_are_weights(edge_value: EdgeValue) -> EdgeValue:
    """Weight function for graphs whose edge values already are weights."""
    return edge_value


class Algorithm(IntEnum):
    """Shortest-path engines selectable through the solver."""

    DIJKSTRA = 1
    BIDIRECTIONAL_DIJKSTRA = 2
    A_STAR = 3
    BELLMAN_FORD = 4
    FLOYD_WARSHALL = 5

    @property
    def needs_source(self) -> bool:
        """True for every engine except all-pairs Floyd-Warshall."""
        return self is not Algorithm.FLOYD_WARSHALL

    @property
    def needs_target(self) -> bool:
        """True for the single-source, single-target engines."""
        return self in (
            Algorithm.DIJKSTRA,
            Algorithm.BIDIRECTIONAL_DIJKSTRA,
            Algorithm.A_STAR,
        )

    @property
    def returns_all_pairs(self) -> bool:
        """True when the engine produces an ``AllPairsShortestPaths``."""
        return not self.needs_target

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse a string into an Algorithm enum value.

        Args:
            value: Case-insensitive name; dashes and spaces are accepted as
                underscores (e.g., "dijkstra", "Bellman-Ford", "a_star").

        Returns:
            The corresponding Algorithm enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        normalized = value.strip().upper().replace("-", "_").replace(" ", "_")
        if normalized in ("ASTAR", "A*"):
            normalized = "A_STAR"
        try:
            return cls[normalized]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None
