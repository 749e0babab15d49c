"""Unit tests for the jsxrules CLI."""

import json

import pytest
from typer.testing import CliRunner

from jsxrules import __version__
from jsxrules.cli import app

LIST_JSX = "<List>\n  <Item />\n</List>\n"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Temporary working directory with a component and a rules file."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "List.jsx").write_text(LIST_JSX, encoding="utf-8")
    (tmp_path / "rules.json").write_text(
        json.dumps({"children": {"List": {"min": 2}}}), encoding="utf-8"
    )
    return tmp_path


class TestValidateCommand:
    """Test validate command."""

    def test_invalid_component_json(self, runner, workspace):
        result = runner.invoke(app, ["validate", "List.jsx", "--rules", "rules.json", "--format", "json"])

        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert report["file"] == "List.jsx"
        assert report["valid"] is False
        assert report["errors"] == ["List: needs at least 2 children, got 1"]
        assert report["issues"][0]["rule"] == "children"

    def test_valid_component(self, runner, workspace):
        (workspace / "ok.json").write_text(json.dumps({"paths": ["List", "List>Item"]}), encoding="utf-8")
        result = runner.invoke(app, ["validate", "List.jsx", "-r", "ok.json"])

        assert result.exit_code == 0
        assert "VALID" in result.stdout

    def test_table_output_lists_issues(self, runner, workspace):
        result = runner.invoke(app, ["validate", "List.jsx", "-r", "rules.json"])

        assert result.exit_code == 1
        assert "INVALID" in result.stdout
        assert "children" in result.stdout

    def test_markdown_output(self, runner, workspace):
        result = runner.invoke(app, ["validate", "List.jsx", "-r", "rules.json", "-f", "markdown"])

        assert result.exit_code == 1
        assert "# Validation Report" in result.stdout
        assert "**Status:** invalid" in result.stdout
        assert "- **children** List: needs at least 2 children, got 1" in result.stdout

    def test_rules_from_config_file(self, runner, workspace):
        (workspace / ".jsxrules.json").write_text(json.dumps({
            "rules": {"props": {"List": ["items"]}},
            "output": {"format": "json"},
        }), encoding="utf-8")

        result = runner.invoke(app, ["validate", "List.jsx"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["errors"] == ["List: missing props items"]

    def test_stdin_input(self, runner, workspace):
        result = runner.invoke(
            app, ["validate", "-", "-r", "rules.json", "-f", "json"],
            input="<List><Item /><Item /></List>",
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["valid"] is True

    def test_parse_error_exit_code(self, runner, workspace):
        (workspace / "Broken.jsx").write_text("<List><Item></List>", encoding="utf-8")
        result = runner.invoke(app, ["validate", "Broken.jsx", "-r", "rules.json"])

        assert result.exit_code == 2
        assert "Parse error" in result.stdout

    def test_missing_file(self, runner, workspace):
        result = runner.invoke(app, ["validate", "Absent.jsx"])

        assert result.exit_code == 2
        assert "Cannot read" in result.stdout

    def test_invalid_rules_file(self, runner, workspace):
        (workspace / "bad.json").write_text(json.dumps({"sequence": {"List": []}}), encoding="utf-8")
        result = runner.invoke(app, ["validate", "List.jsx", "-r", "bad.json"])

        assert result.exit_code == 2
        assert "Invalid rules" in result.stdout

    def test_invalid_format(self, runner, workspace):
        result = runner.invoke(app, ["validate", "List.jsx", "-f", "xml"])

        assert result.exit_code == 2
        assert "Invalid format" in result.stdout


class TestInspectionCommands:
    """Test paths and tree commands."""

    def test_paths(self, runner, workspace):
        (workspace / "App.jsx").write_text(
            "<App><Header /><Main><Content /></Main><Footer /></App>", encoding="utf-8"
        )
        result = runner.invoke(app, ["paths", "App.jsx"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "App", "App>Header", "App>Main", "App>Main>Content", "App>Footer",
        ]

    def test_tree_json(self, runner, workspace):
        (workspace / "App.jsx").write_text('<App foo="bar"><Child /></App>', encoding="utf-8")
        result = runner.invoke(app, ["tree", "App.jsx", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"path": "App", "name": "App", "props": ["foo"], "childCount": 1, "children": ["Child"]},
            {"path": "App>Child", "name": "Child", "props": [], "childCount": 0, "children": []},
        ]

    def test_tree_table(self, runner, workspace):
        result = runner.invoke(app, ["tree", "List.jsx"])

        assert result.exit_code == 0
        assert "List>Item" in result.stdout


class TestGlobalOptions:
    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"jsxrules version {__version__}" in result.stdout

    def test_invalid_log_level(self, runner, workspace):
        result = runner.invoke(app, ["--log-level", "loud", "paths", "List.jsx"])
        assert result.exit_code == 2
        assert "Invalid log level" in result.stdout
