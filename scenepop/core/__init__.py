"""Core modules for scenepop."""

from .config import PlacementConfig

__all__ = ["PlacementConfig"]
