import logging
from decimal import Decimal

import networkx as nx
import pytest

from spath.algorithms.dijkstra import dijkstra
from spath.config import SOLVER_CONFIG
from spath.exceptions import PathNotFoundError
from spath.graph import NxValueGraph
from spath.types.monoid import (
    DECIMAL_WEIGHTS,
    FLOAT_WEIGHTS,
    INT_WEIGHTS,
    LexicographicMonoid,
)


class TestDijkstra:
    def test_undirected_scenario(self, scenario_b):
        path = dijkstra(scenario_b, 1, 5, INT_WEIGHTS)
        assert path.weight == 20
        assert path.vertices == (1, 3, 6, 5)
        assert path.edges == (9, 2, 9)

    def test_undirected_edges_work_both_ways(self, scenario_b):
        path = dijkstra(scenario_b, 5, 1, INT_WEIGHTS)
        assert path.weight == 20
        assert path.vertices == (5, 6, 3, 1)

    def test_directed_respects_orientation(self, scenario_b_directed):
        assert dijkstra(scenario_b_directed, 1, 5, INT_WEIGHTS).weight == 20
        with pytest.raises(PathNotFoundError) as exc:
            dijkstra(scenario_b_directed, 5, 1, INT_WEIGHTS)
        assert exc.value.source == 5
        assert exc.value.target == 1

    @pytest.mark.parametrize("fixture", ["disconnected_pair", "disconnected_pair_directed"])
    def test_disconnected_raises(self, request, fixture):
        graph = request.getfixturevalue(fixture)
        with pytest.raises(PathNotFoundError, match="Path from 'A' to 'B' doesn't exist"):
            dijkstra(graph, "A", "B", FLOAT_WEIGHTS)

    def test_source_equals_target(self, scenario_b):
        path = dijkstra(scenario_b, 3, 3, INT_WEIGHTS)
        assert path.vertices == (3,)
        assert path.edges == ()
        assert path.weight == 0

    def test_path_weight_is_fold_of_edges(self, scenario_b):
        path = dijkstra(scenario_b, 2, 5, INT_WEIGHTS)
        assert path.reweigh(INT_WEIGHTS) == path.weight
        assert path.weight == 21

    def test_weight_func_on_labeled_edges(self, labeled_links):
        path = dijkstra(
            labeled_links, "NYC", "SFO", INT_WEIGHTS, lambda link: link["cost"]
        )
        assert path.weight == 4
        assert path.vertices == ("NYC", "CHI", "SFO")
        assert [link["name"] for link in path.edges] == ["nyc-chi", "chi-sfo"]

    def test_lexicographic_weights_break_cost_ties_by_hops(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", weight=1)
        g.add_edge("B", "C", weight=1)
        g.add_edge("A", "C", weight=2)
        monoid = LexicographicMonoid(INT_WEIGHTS, INT_WEIGHTS)

        path = dijkstra(NxValueGraph(g), "A", "C", monoid, lambda w: (w, 1))
        assert path.vertices == ("A", "C")
        assert path.weight == (2, 1)

    def test_decimal_weights(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", weight=Decimal("0.1"))
        g.add_edge("B", "C", weight=Decimal("0.2"))
        g.add_edge("A", "C", weight=Decimal("0.31"))

        path = dijkstra(NxValueGraph(g), "A", "C", DECIMAL_WEIGHTS)
        assert path.vertices == ("A", "B", "C")
        assert path.weight == Decimal("0.3")

    def test_missing_weight_attribute_is_reported(self):
        g = nx.Graph()
        g.add_edge("A", "B")
        with pytest.raises(ValueError, match="has no 'weight' attribute"):
            dijkstra(NxValueGraph(g), "A", "B", FLOAT_WEIGHTS)


class TestDijkstraArguments:
    def test_null_graph(self):
        with pytest.raises(ValueError, match="null graph"):
            dijkstra(None, 1, 5, INT_WEIGHTS)

    def test_null_source(self, scenario_b):
        with pytest.raises(ValueError, match="null source"):
            dijkstra(scenario_b, None, 5, INT_WEIGHTS)

    def test_null_target(self, scenario_b):
        with pytest.raises(ValueError, match="null target"):
            dijkstra(scenario_b, 1, None, INT_WEIGHTS)

    def test_unknown_vertex(self, scenario_b):
        with pytest.raises(ValueError, match="Target vertex '42' is not in the graph"):
            dijkstra(scenario_b, 1, 42, INT_WEIGHTS)

    def test_null_monoid(self, scenario_b):
        with pytest.raises(ValueError, match="null weight operations"):
            dijkstra(scenario_b, 1, 5, None)

    def test_weight_func_must_be_callable(self, scenario_b):
        with pytest.raises(ValueError, match="must be callable"):
            dijkstra(scenario_b, 1, 5, INT_WEIGHTS, weight_func="weight")


class TestNonNegativeCheck:
    @pytest.fixture
    def with_negative_edge(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", weight=2)
        g.add_edge("B", "C", weight=-1)
        return NxValueGraph(g)

    def test_not_checked_by_default(self, with_negative_edge):
        path = dijkstra(with_negative_edge, "A", "C", INT_WEIGHTS)
        assert path.weight == 1

    def test_checked_on_request(self, with_negative_edge):
        with pytest.raises(ValueError, match="Negative weight -1 found on edge 'B' -> 'C'"):
            dijkstra(with_negative_edge, "A", "C", INT_WEIGHTS, check_non_negative=True)

    def test_checked_through_global_config(self, with_negative_edge):
        SOLVER_CONFIG.check_non_negative_weights = True
        with pytest.raises(ValueError, match="use Bellman-Ford"):
            dijkstra(with_negative_edge, "A", "C", INT_WEIGHTS)

    def test_explicit_override_beats_global_config(self, with_negative_edge):
        SOLVER_CONFIG.check_non_negative_weights = True
        path = dijkstra(
            with_negative_edge, "A", "C", INT_WEIGHTS, check_non_negative=False
        )
        assert path.vertices == ("A", "B", "C")


def test_debug_trace_logged(scenario_b, caplog):
    caplog.set_level(logging.DEBUG, logger="spath")
    dijkstra(scenario_b, 1, 5, INT_WEIGHTS)
    messages = [r.getMessage() for r in caplog.records]
    assert "Dijkstra from '1' to '5'" in messages
    assert any(m.startswith("Dijkstra reached '5' after settling") for m in messages)
