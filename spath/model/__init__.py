"""Result types returned by the shortest-path engines."""

from spath.model.all_pairs import AllPairsShortestPaths
from spath.model.path import WeightedPath

__all__ = ["AllPairsShortestPaths", "WeightedPath"]
