"""
Unit tests for the 'nodes' command.
"""

import json

import pytest
from click.testing import CliRunner

from beangraph.cli.main import main


class TestNodesCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def listed(self, runner, *args):
        result = runner.invoke(main, ["nodes", *args, "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "success"
        return payload["data"]

    def test_sorted_listing(self, runner, report_file):
        ids = [n["id"] for n in self.listed(runner, str(report_file))]
        assert ids == [
            "beanA",
            "beanB",
            "com.acme.Missing",
            "org.springframework.core.env.Environment",
        ]

    def test_child_only_beans_are_not_listed(self, runner, report_file):
        ids = [n["id"] for n in self.listed(runner, str(report_file))]
        assert "onlyInChild" not in ids

    def test_json_node_fields(self, runner, report_file):
        by_id = {n["id"]: n for n in self.listed(runner, str(report_file))}
        missing = by_id["com.acme.Missing"]
        assert missing["placeholder"] is True
        assert missing["group"] == 0
        assert missing["resource"] is None
        assert by_id["org.springframework.core.env.Environment"]["group"] == 2
        assert by_id["beanA"]["sequence_id"] == 1

    def test_without_placeholders(self, runner, report_file):
        nodes = self.listed(runner, str(report_file), "--no-placeholders")
        assert [n["id"] for n in nodes] == [
            "beanA",
            "beanB",
            "org.springframework.core.env.Environment",
        ]
        assert not any(n["placeholder"] for n in nodes)

    def test_table(self, runner, report_file):
        result = runner.invoke(main, ["nodes", str(report_file), "--no-placeholders"])
        assert result.exit_code == 0, result.output
        assert "Beans (3)" in result.output
        assert "beanA" in result.output
        assert "com.acme.Missing" not in result.output

    def test_table_order(self, runner, tmp_path, report_factory):
        path = tmp_path / "beans.json"
        path.write_text(json.dumps(report_factory({"zeta": [], "alpha": [], "mid": []})))
        result = runner.invoke(main, ["nodes", str(path)])
        assert result.exit_code == 0, result.output
        out = result.output
        assert out.index("alpha") < out.index("mid") < out.index("zeta")

    def test_invalid_report_json_mode(self, runner, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"contexts": {}}')
        result = runner.invoke(main, ["nodes", str(bad), "--json"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "error"
        assert payload["error"]["type"] == "ReportFormatError"
