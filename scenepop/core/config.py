"""Configuration management for scenepop.

Configuration can be loaded from JSON files or constructed programmatically.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class PlacementConfig(BaseModel):
    """Settings for a scene population run."""

    node_prefix: str = Field(
        default="tree",
        min_length=1,
        description="Prefix of the node names; record i targets prefix + str(i)"
    )
    completion_message: str = Field(
        default="Script has executed",
        description="Message written to stdout when a run finishes"
    )

    @classmethod
    def from_file(cls, path: Path | str) -> PlacementConfig:
        """Load configuration from a JSON file."""
        path = Path(path)
        with open(path) as f:
            data = json.load(f)
        return cls.model_validate(data)

    def to_file(self, path: Path | str) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    @classmethod
    def default(cls) -> PlacementConfig:
        """Create a default configuration."""
        return cls()
