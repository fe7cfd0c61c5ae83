"""
Unit tests for the 'stats' command.
"""

import json

import pytest
from click.testing import CliRunner

from beangraph.cli.main import main


class TestStatsCommand:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def cycle_file(self, tmp_path, report_factory):
        path = tmp_path / "cycle.json"
        path.write_text(json.dumps(report_factory({"A": ["B"], "B": ["A"]})))
        return path

    def test_json(self, runner, report_file):
        result = runner.invoke(main, ["stats", str(report_file), "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "success"
        data = payload["data"]
        assert data["total_nodes"] == 4
        assert data["total_edges"] == 3
        assert data["placeholders"] == 1
        assert data["nodes_by_group"] == {"other": 2, "spring": 1, "placeholder": 1}
        assert data["has_cycle"] is False
        assert data["cycle"] == []

    def test_table_without_cycle(self, runner, report_file):
        result = runner.invoke(main, ["stats", str(report_file)])
        assert result.exit_code == 0, result.output
        assert "Placeholders" in result.output
        assert "No dependency cycles" in result.output

    def test_json_reports_cycle(self, runner, cycle_file):
        result = runner.invoke(main, ["stats", str(cycle_file), "--json"])
        data = json.loads(result.output)["data"]
        assert data["has_cycle"] is True
        assert sorted(data["cycle"]) == ["A", "B"]

    def test_prints_cycle_chain(self, runner, cycle_file):
        cycle = json.loads(runner.invoke(main, ["stats", str(cycle_file), "--json"]).output)["data"]["cycle"]
        first, second = cycle

        result = runner.invoke(main, ["stats", str(cycle_file)])
        assert result.exit_code == 0, result.output
        assert "Dependency cycle" in result.output
        assert f"{first} → {second} → {first}" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["stats", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "Cannot read report" in result.output
