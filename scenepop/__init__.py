"""scenepop - Scene population for a host 3D engine.

Places the engine's pre-built tree nodes at fixed positions, orientations
and scales through the scene manager the engine hands over.
"""

__version__ = "0.1.0"

from .core.config import PlacementConfig
from .scene.placement import TREE_PLACEMENTS, PlacementRecord, populate_scene
from .scene.transform import LocalTransform

__all__ = [
    "PlacementConfig",
    "TREE_PLACEMENTS",
    "PlacementRecord",
    "populate_scene",
    "LocalTransform",
]
