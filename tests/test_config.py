"""Tests for PlacementConfig."""

import json

import pytest
from pydantic import ValidationError

from scenepop.core.config import PlacementConfig


class TestPlacementConfig:
    """Test configuration defaults, validation and file round trips."""

    def test_defaults(self):
        """Test default settings."""
        cfg = PlacementConfig.default()
        assert cfg.node_prefix == "tree"
        assert cfg.completion_message == "Script has executed"

    def test_empty_prefix_rejected(self):
        """Test that an empty node prefix is rejected."""
        with pytest.raises(ValidationError):
            PlacementConfig(node_prefix="")

    def test_save_and_load(self, tmp_path):
        """Test saving and loading a configuration."""
        path = tmp_path / "nested" / "scenepop.json"
        PlacementConfig(node_prefix="pine", completion_message="placed").to_file(path)

        loaded = PlacementConfig.from_file(path)
        assert loaded.node_prefix == "pine"
        assert loaded.completion_message == "placed"

    def test_file_format(self, tmp_path):
        """Test that the file is plain JSON with the expected keys."""
        path = tmp_path / "scenepop.json"
        PlacementConfig().to_file(path)

        data = json.loads(path.read_text())
        assert data == {
            "node_prefix": "tree",
            "completion_message": "Script has executed",
        }

    def test_partial_file(self, tmp_path):
        """Test that missing keys fall back to defaults."""
        path = tmp_path / "scenepop.json"
        path.write_text(json.dumps({"node_prefix": "oak"}))

        loaded = PlacementConfig.from_file(path)
        assert loaded.node_prefix == "oak"
        assert loaded.completion_message == "Script has executed"
