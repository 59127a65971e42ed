import networkx as nx
import pytest

from spath.graph import NxValueGraph


def _build(graph, weighted_edges):
    for u, v, w in weighted_edges:
        graph.add_edge(u, v, weight=w)
    return NxValueGraph(graph)


SCENARIO_B_EDGES = [
    (1, 6, 14),
    (1, 3, 9),
    (1, 2, 7),
    (2, 3, 10),
    (2, 4, 15),
    (3, 6, 2),
    (3, 4, 11),
    (4, 5, 6),
    (6, 5, 9),
]


@pytest.fixture
def scenario_b():
    # Undirected, weights:
    #
    #   1-2 [7]   1-3 [9]   1-6 [14]  2-3 [10]  2-4 [15]
    #   3-4 [11]  3-6 [2]   4-5 [6]   6-5 [9]
    #
    # 1 -> 5 is 20 via 1-3-6-5.
    return _build(nx.Graph(), SCENARIO_B_EDGES)


@pytest.fixture
def scenario_b_directed():
    # Same weights as scenario_b, every edge oriented as listed.
    # 1 -> 5 is 20 via 1-3-6-5; vertex 5 has no outgoing edges.
    return _build(nx.DiGraph(), SCENARIO_B_EDGES)


@pytest.fixture
def scenario_a():
    # Directed with negative weights and a zero-weight cycle
    # 1 -> 4 -> 3 -> 2 -> 5 -> 1, no negative cycle.
    #
    #   1 ─[6]─► 2 ─[5]─► 3      2 ─[-4]─► 5 ─[2]─► 1
    #   1 ─[7]─► 4 ─[-3]─► 3     3 ─[-2]─► 2
    #   2 ─[8]─► 4 ─[9]─► 5      5 ─[7]─► 3
    #
    # Bellman-Ford from 1: 3 is 4 via 1-4-3.
    return _build(
        nx.DiGraph(),
        [
            (1, 2, 6),
            (1, 4, 7),
            (2, 3, 5),
            (2, 5, -4),
            (2, 4, 8),
            (3, 2, -2),
            (4, 3, -3),
            (4, 5, 9),
            (5, 3, 7),
            (5, 1, 2),
        ],
    )


@pytest.fixture
def disconnected_pair():
    #  A     B
    g = nx.Graph()
    g.add_node("A")
    g.add_node("B")
    return NxValueGraph(g)


@pytest.fixture
def disconnected_pair_directed():
    #  A     B
    g = nx.DiGraph()
    g.add_node("A")
    g.add_node("B")
    return NxValueGraph(g)


@pytest.fixture
def one_way():
    #     [1]      [1]
    #  A───────►B───────►C
    return _build(nx.DiGraph(), [("A", "B", 1), ("B", "C", 1)])


@pytest.fixture
def negative_cycle():
    #     [1]      [-3]
    #  A───────►B───────►C
    #  ▲                 │
    #  └───────[1]───────┘
    #
    # Plus S ─[1]─► A, so the cycle is reachable from S.
    return _build(
        nx.DiGraph(),
        [("S", "A", 1), ("A", "B", 1), ("B", "C", -3), ("C", "A", 1)],
    )


@pytest.fixture
def square_equal_cost():
    # Metric:
    #      [1]        [1]
    #   A──────►B──────►D
    #   │               ▲
    #   │ [1]       [1] │
    #   └──────►C───────┘
    #
    # Two paths A -> D of weight 2.
    return _build(
        nx.DiGraph(), [("A", "B", 1), ("B", "D", 1), ("A", "C", 1), ("C", "D", 1)]
    )


@pytest.fixture
def grid_with_wall():
    # 5x5 grid, vertices are (row, col), unit weights between 4-neighbours.
    # Column 2 is a wall except at row 4, so (0, 0) -> (0, 4) must detour:
    #
    #   S . # . G
    #   . . # . .
    #   . . # . .
    #   . . # . .
    #   . . . . .
    #
    # Shortest weight is 12.
    g = nx.Graph()
    size = 5
    for r in range(size):
        for c in range(size):
            g.add_node((r, c))
    for r in range(size):
        for c in range(size):
            for dr, dc in ((0, 1), (1, 0)):
                rr, cc = r + dr, c + dc
                if rr >= size or cc >= size:
                    continue
                if (c == 2 and r < 4) or (cc == 2 and rr < 4):
                    continue
                g.add_edge((r, c), (rr, cc), weight=1)
    return NxValueGraph(g)


@pytest.fixture
def manhattan():
    def heuristic(v, goal):
        return abs(v[0] - goal[0]) + abs(v[1] - goal[1])

    return heuristic


@pytest.fixture
def labeled_links():
    # Edge values are link records; weights come from their "cost" field.
    #
    #        cost 2       cost 2
    #   NYC ───────► CHI ───────► SFO
    #    │                         ▲
    #    └─────────cost 5──────────┘
    g = nx.DiGraph()
    g.add_edge("NYC", "CHI", link={"name": "nyc-chi", "cost": 2, "hops": 1})
    g.add_edge("CHI", "SFO", link={"name": "chi-sfo", "cost": 2, "hops": 1})
    g.add_edge("NYC", "SFO", link={"name": "nyc-sfo", "cost": 5, "hops": 1})
    return NxValueGraph(g, value_attr="link")
