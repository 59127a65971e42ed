"""All-pairs Floyd-Warshall.

Distances start from the direct edges (both directions for undirected
graphs) and are improved through every intermediate vertex ``k``. Each
improvement of ``(i, j)`` records ``k`` as the witness of that pair. Paths are
then rebuilt for every pair with a known distance by splitting the pair at its
witness until only direct edges remain.

Negative edge weights are allowed, negative cycles are not: they are neither
detected nor reported, and the resulting distances are meaningless.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from spath.algorithms.common import edge_between, require, resolve_weight_func
from spath.algorithms.predecessors import PredecessorGraph
from spath.config import SOLVER_CONFIG
from spath.exceptions import PathNotFoundError
from spath.graph.value_graph import ValueGraph
from spath.logging import get_logger
from spath.model.all_pairs import AllPairsShortestPaths, VertexPair
from spath.types.base import Vertex, WeightFunc
from spath.types.monoid import OrderedMonoid

logger = get_logger(__name__)


def floyd_warshall(
    graph: ValueGraph,
    monoid: OrderedMonoid,
    weight_func: Optional[WeightFunc] = None,
) -> AllPairsShortestPaths:
    """Compute shortest distances and paths between every ordered vertex pair.

    Args:
        graph: Graph to analyse.
        monoid: Weight operations.
        weight_func: Edge-to-weight extraction; edges are weights if None.

    Returns:
        An ``AllPairsShortestPaths`` with a distance and a path for each
        connected ordered pair of distinct vertices.

    Raises:
        ValueError: If an input is missing.
    """
    require(graph, "Shortest path can not be calculated on a null graph.")
    require(
        monoid,
        "Floyd-Warshall algorithm can not be applied using null weight operations.",
    )
    weight_func = resolve_weight_func(weight_func)

    nodes: List[Vertex] = list(graph.nodes())
    dist: Dict[VertexPair, Any] = {}
    witness: Dict[VertexPair, Vertex] = {}

    directed = graph.is_directed()
    for u, v in graph.edges():
        if u == v:
            continue
        weight = weight_func(edge_between(graph, u, v))
        dist[(u, v)] = weight
        if not directed:
            dist[(v, u)] = weight

    for k in nodes:
        for i in nodes:
            if i == k or (i, k) not in dist:
                continue
            d_ik = dist[(i, k)]
            for j in nodes:
                if j == i or j == k or (k, j) not in dist:
                    continue
                candidate = monoid.append(d_ik, dist[(k, j)])
                current = dist.get((i, j))
                if current is None or monoid.compare(candidate, current) < 0:
                    dist[(i, j)] = candidate
                    witness[(i, j)] = k

    result = AllPairsShortestPaths(monoid)
    for (source, target), distance in dist.items():
        result._add_shortest_distance(source, target, distance)

    budget = SOLVER_CONFIG.reconstruction_budget(len(nodes))
    for source in nodes:
        for target in nodes:
            if source == target or (source, target) not in dist:
                continue
            predecessors = _reconstruct(
                graph, monoid, weight_func, source, target, witness, budget
            )
            if predecessors is None or predecessors.is_empty():
                continue
            try:
                path = predecessors.build_path(source, target)
            except PathNotFoundError:
                logger.warning(
                    "Witnesses of '%s' -> '%s' do not form a simple path; skipping it",
                    source,
                    target,
                )
                continue
            if path.size > 0:
                result._add_shortest_path(source, target, path)

    logger.debug(
        "Floyd-Warshall over %d vertices: %d distances, %d paths",
        len(nodes),
        len(result.distances),
        len(result.paths),
    )
    return result


def _reconstruct(
    graph: ValueGraph,
    monoid: OrderedMonoid,
    weight_func: WeightFunc,
    source: Vertex,
    target: Vertex,
    witness: Dict[VertexPair, Vertex],
    budget: int,
) -> Optional[PredecessorGraph]:
    """Expand ``(source, target)`` into direct edges recorded as predecessors.

    Pairs are split at their witness with an explicit stack; left halves are
    processed first. Returns None if more than ``budget`` splits are needed.

    Raises:
        ValueError: If a pair without a witness has no edge value.
    """
    predecessors = PredecessorGraph(monoid, weight_func)
    stack: List[Tuple[Vertex, Vertex]] = [(source, target)]
    steps = 0
    while stack:
        steps += 1
        if steps > budget:
            logger.warning(
                "Aborted path reconstruction from '%s' to '%s' after %d steps; "
                "the graph likely contains a negative-weight cycle",
                source,
                target,
                budget,
            )
            return None
        i, j = stack.pop()
        k = witness.get((i, j))
        if k is None:
            predecessors.add_predecessor(j, i, edge_between(graph, i, j))
            continue
        stack.append((k, j))
        stack.append((i, k))
    return predecessors
