"""Tests for the CLI entry point."""

import json
from unittest.mock import patch

import pytest

from pattern_catalog.cli.main import main, parse_args

pytestmark = pytest.mark.usefixtures("restore_root_logger")


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self):
        args = parse_args([])

        assert args.names == []
        assert args.list is False
        assert args.format is None
        assert args.config is None

    def test_names_and_options(self):
        args = parse_args(["factory", "proxy", "--format", "json", "--log-level", "DEBUG"])

        assert args.names == ["factory", "proxy"]
        assert args.format == "json"
        assert args.log_level == "DEBUG"

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            parse_args(["--format", "xml"])


class TestMain:
    """Test main() exit codes and output."""

    def test_run_one_example(self, capsys):
        exit_code = main(["factory"])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out == (
            "== factory ==\n"
            "  Created product: Product A\n"
            "  Created product: Product B\n"
        )

    def test_missing_example_exits_non_zero(self, capsys):
        exit_code = main(["missing"])

        assert exit_code == 1
        assert "Error: Pattern example 'missing' not found" in capsys.readouterr().out

    def test_missing_example_is_reported_once(self, capsys):
        assert main(["missing"]) == 1

        captured = capsys.readouterr()
        assert captured.out == "Error: Pattern example 'missing' not found\n"
        assert captured.err == ""

    def test_quiet_suppresses_error_message(self, capsys):
        assert main(["missing", "--quiet"]) == 1
        assert capsys.readouterr().out == ""

    def test_run_all_prints_every_example(self, capsys):
        exit_code = main([])

        out = capsys.readouterr().out
        assert exit_code == 0
        for name in ["abstract-factory", "decorator", "singleton"]:
            assert f"== {name} ==" in out
        assert "  Description: Simple Coffee, Milk, Sugar" in out

    def test_json_format(self, capsys):
        assert main(["decorator", "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["examples"][0]["lines"] == ["Cost: $8", "Description: Simple Coffee, Milk, Sugar"]

    def test_list(self, capsys):
        assert main(["--list", "--format", "json"]) == 0

        patterns = json.loads(capsys.readouterr().out)["patterns"]
        assert len(patterns) == 10
        assert patterns[0] == {
            "name": "abstract-factory",
            "category": "creational",
            "summary": "Create families of related objects without naming their concrete classes",
        }

    def test_list_named_examples(self, capsys):
        assert main(["--list", "proxy", "factory", "--format", "json"]) == 0

        patterns = json.loads(capsys.readouterr().out)["patterns"]
        assert [pattern["name"] for pattern in patterns] == ["factory", "proxy"]

    def test_list_unknown_name_exits_non_zero(self, capsys):
        assert main(["--list", "missing"]) == 1
        assert "Error: Pattern example 'missing' not found" in capsys.readouterr().out

    def test_failing_example_exits_non_zero(self, capsys):
        with patch("pattern_catalog.catalog.proxy.Proxy.request", side_effect=RuntimeError("boom")):
            exit_code = main(["proxy", "adapter"])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "ERROR [INTERNAL_ERROR]: RuntimeError: boom" in out
        assert "Adaptee's specific request" in out

    def test_config_file_sets_default_format(self, capsys, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"runner": {"default_format": "json"}}))

        assert main(["adapter", "--config", str(config)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["examples"][0]["name"] == "adapter"

    def test_invalid_config_exits_non_zero(self, capsys, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"runner": {"default_format": "xml"}}))

        assert main(["--config", str(config)]) == 1
        assert "Invalid configuration" in capsys.readouterr().out
