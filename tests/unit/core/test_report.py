"""Unit tests for report parsing and validation."""

import json

import pytest

from beangraph.core.exceptions import ReportFormatError, ReportParseError, ReportReadError
from beangraph.core.report import load_report, parse_and_validate
from beangraph.core.result import Err, Ok


class TestParseAndValidate:
    def test_valid_report(self, sample_text):
        result = parse_and_validate(sample_text)
        assert isinstance(result, Ok)
        report = result.unwrap()
        assert set(report.contexts) == {"application", "child"}
        assert report.contexts["child"].parent_id == "application"
        assert "beanA" in report.application_beans

    def test_unknown_bean_fields_are_ignored(self, sample_text):
        report = parse_and_validate(sample_text).unwrap()
        bean = report.application_beans["beanA"]
        assert not hasattr(bean, "scope")

    def test_missing_dependencies_default_to_empty(self):
        text = json.dumps({"contexts": {"application": {"beans": {"a": {"resource": "r"}}}}})
        report = parse_and_validate(text).unwrap()
        assert report.application_beans["a"].dependencies == []

    def test_not_json(self):
        result = parse_and_validate("{not json")
        assert not result.is_ok()
        assert isinstance(result.error, ReportParseError)

    @pytest.mark.parametrize("payload", [
        {},
        {"contexts": {}},
        {"contexts": []},
        {"contexts": None},
        [1, 2, 3],
    ])
    def test_missing_or_empty_contexts(self, payload):
        result = parse_and_validate(json.dumps(payload))
        assert isinstance(result, Err)
        assert isinstance(result.error, ReportFormatError)
        assert "Invalid format" in str(result.error)

    def test_schema_violation(self):
        text = json.dumps({"contexts": {"application": {"beans": {"a": {"dependencies": "nope"}}}}})
        result = parse_and_validate(text)
        assert isinstance(result.error, ReportFormatError)

    def test_unwrap_err_raises_the_rejection(self):
        with pytest.raises(ReportParseError):
            parse_and_validate("").unwrap()


class TestLoadReport:
    def test_load_from_file(self, report_file):
        assert load_report(report_file).is_ok()

    def test_missing_file(self, tmp_path):
        result = load_report(tmp_path / "nope.json")
        assert isinstance(result.error, ReportReadError)
        assert str(result.error).startswith("Cannot read report")
        assert "not valid JSON" not in str(result.error)
