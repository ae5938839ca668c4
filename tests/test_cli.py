"""Tests for the scenepop command-line interface."""

import json

import pytest
from click.testing import CliRunner

from scenepop.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestPlacementsCommand:
    """Test the placements listing."""

    def test_lists_all_nodes(self, runner):
        """Test that every tree node appears in the table."""
        result = runner.invoke(main, ["placements"])
        assert result.exit_code == 0
        for i in range(10):
            assert f"tree{i}" in result.output
        assert "-65.37" in result.output

    def test_config_prefix(self, runner, tmp_path):
        """Test that the configured prefix names the nodes."""
        config = tmp_path / "scenepop.json"
        config.write_text(json.dumps({"node_prefix": "oak"}))

        result = runner.invoke(main, ["placements", "--config", str(config)])
        assert result.exit_code == 0
        assert "oak0" in result.output
        assert "tree0" not in result.output


class TestMatrixCommand:
    """Test the local matrix display."""

    def test_shows_translation(self, runner):
        """Test that the matrix carries the record's position."""
        result = runner.invoke(main, ["matrix", "0"])
        assert result.exit_code == 0
        assert "tree0" in result.output
        assert "-65.3700" in result.output
        assert "-40.3800" in result.output

    def test_index_out_of_range(self, runner):
        """Test that an unknown index is a usage error."""
        result = runner.invoke(main, ["matrix", "10"])
        assert result.exit_code == 2
        assert "between 0 and 9" in result.output
