"""Unit tests for the BeanGraph model."""

import pytest

from beangraph.core.graph import UNKNOWN_SOURCE, BeanGraph
from beangraph.core.types import Edge, Node, NodeGroup


class TestBeanGraph:
    def test_out_edges_keep_declaration_order(self, graph_factory):
        graph = graph_factory({"A": ["D", "B", "C"], "B": [], "C": [], "D": []})
        assert [e.target for e in graph.out_edges("A")] == ["D", "B", "C"]

    def test_out_edges_of_unknown_node(self, cycle_graph):
        assert cycle_graph.out_edges("nope") == []

    def test_sequence_id_lookup(self, cycle_graph):
        assert cycle_graph.sequence_id_of("B") == "2"
        assert cycle_graph.sequence_id_of("nope") == ""

    def test_node_ids_sorted(self, graph_factory):
        graph = graph_factory({"zeta": ["alpha"], "beta": []})
        assert graph.node_ids() == ["alpha", "beta", "zeta"]

    def test_describe(self, sample_report):
        from beangraph.core.builder import build_graph
        from beangraph.core.types import RawReport

        graph = build_graph(RawReport.model_validate(sample_report))
        assert graph.describe("beanB") == "file [/app/BeanB.class]"
        assert graph.describe("com.acme.Missing") == UNKNOWN_SOURCE
        assert graph.describe("nope") == UNKNOWN_SOURCE

    def test_find_cycle(self, cycle_graph, graph_factory):
        assert sorted(cycle_graph.find_cycle()) == ["A", "B", "C"]
        assert graph_factory({"A": ["B"], "B": []}).find_cycle() == []

    def test_stats(self, cycle_graph):
        stats = cycle_graph.get_stats()
        assert stats["total_nodes"] == 3
        assert stats["total_edges"] == 3
        assert stats["has_cycle"] is True
        assert stats["nodes_by_group"] == {"other": 3}

    def test_rejects_dangling_edge(self):
        node = Node(id="a", sequence_id=1, group=NodeGroup.OTHER)
        with pytest.raises(ValueError):
            BeanGraph([node], [Edge(source="a", target="b", weight=1)])

    def test_rejects_duplicate_node(self):
        node = Node(id="a", sequence_id=1, group=NodeGroup.OTHER)
        with pytest.raises(ValueError):
            BeanGraph([node, node])
