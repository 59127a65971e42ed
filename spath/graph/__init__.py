"""Graph capability consumed by the engines.

This package provides the read-only `ValueGraph` protocol and the
`NxValueGraph` adapter exposing a NetworkX graph through it.
"""

from spath.graph.value_graph import NxValueGraph, ValueGraph

__all__ = ["NxValueGraph", "ValueGraph"]
