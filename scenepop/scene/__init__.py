"""Scene population for engine-owned scene graphs.

This module provides the placement records, the script that applies them
to named scene nodes, and the local transform model they describe.
"""

from .engine import Degrees, SceneManager, SceneNode, identity_matrix3, vector3
from .placement import (
    TREE_PLACEMENTS,
    PlacementRecord,
    node_name,
    placement_plan,
    populate_scene,
)
from .transform import LocalTransform

__all__ = [
    "Degrees",
    "SceneManager",
    "SceneNode",
    "identity_matrix3",
    "vector3",
    "TREE_PLACEMENTS",
    "PlacementRecord",
    "node_name",
    "placement_plan",
    "populate_scene",
    "LocalTransform",
]
