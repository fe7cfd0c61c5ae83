"""Unit tests for dependency highlighting."""

import pytest

from beangraph.analysis.highlight import HighlightEngine, highlight


class TestHighlightEngine:
    @pytest.fixture
    def diamond(self, graph_factory):
        """A -> B -> D, A -> C -> D"""
        return graph_factory({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []})

    def test_direct_only(self, diamond):
        result = HighlightEngine(diamond).highlight("A", transitive=False)
        assert [(e.source, e.target) for e in result.edges] == [("A", "B"), ("A", "C")]
        assert result.nodes == ["A", "B", "C"]

    def test_transitive_depth_first_order(self, diamond):
        result = HighlightEngine(diamond).highlight("A", transitive=True)
        assert [(e.source, e.target) for e in result.edges] == [
            ("A", "B"), ("B", "D"), ("A", "C"), ("C", "D"),
        ]
        assert result.nodes == ["A", "B", "D", "C"]

    def test_cycle_terminates_and_marks_each_edge_once(self, cycle_graph):
        result = highlight(cycle_graph, "A", transitive=True)
        keys = [e.render_key for e in result.edges]
        assert sorted(keys) == ["l1_2", "l2_3", "l3_1"]
        assert len(keys) == len(set(keys))

    def test_self_dependency(self, graph_factory):
        graph = graph_factory({"A": ["A", "B"], "B": []})
        result = highlight(graph, "A", transitive=True)
        assert [(e.source, e.target) for e in result.edges] == [("A", "A"), ("A", "B")]

    def test_long_chain_does_not_recurse(self, graph_factory):
        depth = 5000
        beans = {f"n{i}": [f"n{i + 1}"] for i in range(depth)}
        beans[f"n{depth}"] = []
        result = highlight(graph_factory(beans), "n0", transitive=True)
        assert len(result.edges) == depth

    def test_downstream_only(self, diamond):
        result = highlight(diamond, "B", transitive=True)
        assert [(e.source, e.target) for e in result.edges] == [("B", "D")]

    def test_unknown_selection_is_noop(self, diamond):
        result = highlight(diamond, "nope", transitive=True)
        assert result.edges == []
        assert result.nodes == []
        assert result.is_empty

    def test_placeholder_selection_marks_only_node(self, sample_report):
        from beangraph.core.builder import build_graph
        from beangraph.core.types import RawReport

        graph = build_graph(RawReport.model_validate(sample_report))
        result = highlight(graph, "com.acme.Missing", transitive=True)
        assert result.edges == []
        assert result.nodes == ["com.acme.Missing"]

    def test_render_keys(self, diamond):
        result = highlight(diamond, "A")
        assert result.render_keys == {"l1_2", "l1_3"}
