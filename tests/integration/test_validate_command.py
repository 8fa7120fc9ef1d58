"""Integration tests for the validate CLI command.

These tests verify the validate command end-to-end:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Catalog and wall advisories are displayed as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from panelize.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_minimal.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_full_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_full.json")])

        assert result.exit_code == 0

    def test_catalog_source_resolved_next_to_config(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "catalog_source.json")]
        )

        assert result.exit_code == 0

    def test_missing_catalog_source(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "missing_catalog.json")]
        )

        assert result.exit_code == 1
        assert "catalog.source" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 5, Column" in result.output
        assert "Validation failed" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "colour" in result.output

    def test_valid_config_with_warnings(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "catalog.panels[0]" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_output_includes_validating_message(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_minimal.json")])

        assert "Validating" in result.output


class TestValidateCommandWithTempFiles:
    """Tests that create temporary files for validation."""

    def test_bad_vertex_count(self, runner: CliRunner, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.json"
        config_file.write_text(
            '{"schema_version": "1.0", "walls": [{"vertices": [[0, 0], [1, 0]]}]}'
        )

        result = runner.invoke(app, ["validate", str(config_file)])

        assert result.exit_code == 1
        assert "walls[0].vertices" in result.output

    def test_no_walls_warns(self, runner: CliRunner, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.json"
        config_file.write_text('{"schema_version": "1.0"}')

        result = runner.invoke(app, ["validate", str(config_file)])

        assert result.exit_code == 2
        assert "No wall shapes given" in result.output
