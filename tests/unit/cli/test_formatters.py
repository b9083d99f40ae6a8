"""Tests for CLI output formatting."""

import json

import yaml

from pattern_catalog.cli.formatters import format_output

RUN_DATA = {
    "examples": [
        {"name": "factory", "status": "ok", "lines": ["Created product: Product A"], "error": None},
        {
            "name": "broken",
            "status": "failed",
            "lines": [],
            "error": {"error_code": "INTERNAL_ERROR", "message": "RuntimeError: boom"},
        },
    ]
}

LIST_DATA = {
    "patterns": [
        {"name": "adapter", "category": "structural", "summary": "Convert interfaces"},
        {"name": "abstract-factory", "category": "creational", "summary": "Families of objects"},
    ]
}


class TestFormatOutput:
    """Test format_output for each format."""

    def test_text_run_results(self):
        output = format_output(RUN_DATA, "text")

        assert output == (
            "== factory ==\n"
            "  Created product: Product A\n"
            "\n"
            "== broken ==\n"
            "  ERROR [INTERNAL_ERROR]: RuntimeError: boom"
        )

    def test_text_listing_is_aligned(self):
        lines = format_output(LIST_DATA, "text").splitlines()

        assert lines[0].startswith("adapter           structural")
        assert lines[1].startswith("abstract-factory  creational")

    def test_text_empty(self):
        assert format_output({"examples": []}, "text") == "No examples run."
        assert format_output({"patterns": []}, "text") == "No patterns registered."

    def test_json(self):
        assert json.loads(format_output(RUN_DATA, "json")) == RUN_DATA

    def test_yaml_keeps_key_order(self):
        output = format_output(LIST_DATA, "yaml")

        assert yaml.safe_load(output) == LIST_DATA
        assert output.index("name") < output.index("category")

    def test_table_contains_rows(self):
        output = format_output(LIST_DATA, "table")

        assert "abstract-factory" in output
        assert "creational" in output
        assert "Category" in output

    def test_table_run_results_show_errors(self):
        output = format_output(RUN_DATA, "table")

        assert "INTERNAL_ERROR" in output
        assert "failed" in output

    def test_unknown_structure_falls_back_to_json(self):
        assert json.loads(format_output({"other": 1}, "table")) == {"other": 1}
