"""Exceptions raised by the shortest-path engines.

Argument errors (missing or invalid inputs) are reported with the built-in
``ValueError``. The classes below describe the two domain outcomes a search
can end with.
"""

from __future__ import annotations

from typing import Hashable, Optional


class PathNotFoundError(LookupError):
    """No path connects ``source`` to ``target``.

    This is an expected outcome on disconnected inputs, raised when the
    reachable search space is exhausted or when an all-pairs result is
    queried for a pair it does not hold.
    """

    def __init__(
        self,
        source: Hashable,
        target: Hashable,
        message: Optional[str] = None,
    ) -> None:
        self.source = source
        self.target = target
        if message is None:
            message = f"Path from '{source}' to '{target}' doesn't exist"
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class NegativeWeightCycleError(ValueError):
    """A negative-weight cycle is reachable from the search source.

    Attributes:
        vertex: A vertex on, or reachable from, the offending cycle.
    """

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"Graph contains a negative-weight cycle in vertex '{vertex}'")
