"""High-level entry points selecting and running a shortest-path engine."""

from spath.solver.paths import (
    ShortestPathQuery,
    all_pairs_shortest_paths,
    find_shortest_path,
    single_source_shortest_paths,
    solve,
)

__all__ = [
    "ShortestPathQuery",
    "all_pairs_shortest_paths",
    "find_shortest_path",
    "single_source_shortest_paths",
    "solve",
]
