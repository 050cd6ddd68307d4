"""Unit tests for point-in-time networkx snapshots."""

from __future__ import annotations

from datetime import date

import pytest

from tielog.graph import build_active_graph, graph_metrics

JAN_1 = date(2014, 1, 1)
FEB_1 = date(2014, 2, 1)
MAR_1 = date(2014, 3, 1)


@pytest.fixture
def linked(populated_network):
    populated_network.establish_link({"a", "b"}, JAN_1)
    populated_network.establish_link({"b", "c"}, JAN_1)
    populated_network.establish_link({"d", "e"}, FEB_1)
    populated_network.tear_down_link({"a", "b"}, MAR_1)
    return populated_network


class TestBuildActiveGraph:
    def test_only_active_links_become_edges(self, linked):
        G = build_active_graph(linked.index, FEB_1)
        assert {frozenset(e) for e in G.edges} == {frozenset("ab"), frozenset("bc"), frozenset("de")}

        G = build_active_graph(linked.index, MAR_1)
        assert {frozenset(e) for e in G.edges} == {frozenset("bc"), frozenset("de")}

    def test_edges_carry_history(self, linked):
        G = build_active_graph(linked.index, FEB_1)
        assert G.edges["a", "b"]["events"] == [JAN_1, MAR_1]
        assert G.edges["a", "b"]["first_event"] == JAN_1

    def test_network_snapshot_includes_every_member(self, linked):
        """Members without active links are isolated nodes."""
        G = linked.active_graph(JAN_1)
        assert set(G.nodes) == set("abcdef")
        assert G.degree("f") == 0


class TestGraphMetrics:
    def test_metrics(self, linked):
        metrics = linked.graph_metrics(FEB_1)

        assert metrics["node_count"] == 6
        assert metrics["edge_count"] == 3
        assert metrics["connected_components"] == 3
        assert metrics["largest_component_size"] == 3
        assert metrics["average_degree"] == 1.0
        assert metrics["density"] == pytest.approx(3 / 15)

    def test_empty_graph(self, network):
        metrics = network.graph_metrics(JAN_1)
        assert metrics["node_count"] == 0
        assert metrics["connected_components"] == 0
        assert graph_metrics(network.active_graph(JAN_1)) == metrics
