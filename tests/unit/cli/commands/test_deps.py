"""
Unit tests for the 'deps' command.
"""

import json

import pytest
from click.testing import CliRunner

from beangraph.cli.commands.deps import build_tree
from beangraph.cli.main import main


class TestDepsCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_direct_tree(self, runner, report_file):
        result = runner.invoke(main, ["deps", str(report_file), "beanA"])
        assert result.exit_code == 0, result.output
        assert "beanB" in result.output
        assert "com.acme.Missing" not in result.output

    def test_transitive_tree(self, runner, report_file):
        result = runner.invoke(main, ["deps", str(report_file), "beanA", "--transitive"])
        assert result.exit_code == 0, result.output
        assert "com.acme.Missing" in result.output
        assert "(external)" in result.output

    def test_json(self, runner, report_file):
        result = runner.invoke(main, ["deps", str(report_file), "beanA", "-t", "--json"])
        data = json.loads(result.output)["data"]
        assert [e["render_key"] for e in data["edges"]] == ["l1_2", "l2_4", "l1_3"]
        assert data["transitive"] is True

    def test_unknown_bean(self, runner, report_file):
        result = runner.invoke(main, ["deps", str(report_file), "ghost"])
        assert result.exit_code == 1
        assert "Bean not found" in result.output

    def test_tree_marks_repeated_nodes(self, cycle_graph):
        from beangraph.analysis.highlight import highlight

        result = highlight(cycle_graph, "A", transitive=True)
        tree = build_tree(cycle_graph, "A", result.edges)
        # A -> B -> C -> (A again)
        node = tree
        depth = 0
        while node.children:
            node = node.children[0]
            depth += 1
        assert depth == 3
        assert "↺" in str(node.label)

