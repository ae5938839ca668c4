"""Placement of pre-existing scene nodes.

The host engine creates the nodes (``tree0`` .. ``tree9``) and hands its
scene manager over; this module moves, orients and scales each of them
according to a fixed list of placement records.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import BaseModel, Field

from ..core.config import PlacementConfig
from .engine import Degrees, SceneManager, SceneNode, identity_matrix3
from .transform import LocalTransform

logger = logging.getLogger(__name__)


class PlacementRecord(BaseModel):
    """Where and how one node is placed.

    Attributes:
        position: Local XYZ position
        pitch: Pitch in degrees, applied first
        roll: Roll in degrees, applied after pitch
        scale: Uniform scale factor
    """

    position: tuple[float, float, float]
    pitch: float = 0.0
    roll: float = 0.0
    scale: float = Field(default=1.0, gt=0.0)

    model_config = {"frozen": True}

    @property
    def transform(self) -> LocalTransform:
        """Local transform a node has after this record is applied."""
        return LocalTransform(
            position=self.position,
            pitch=self.pitch,
            roll=self.roll,
            scale=self.scale,
        )

    def apply(self, node: SceneNode) -> None:
        """Set the node's position, orientation and scale.

        Rotation is reset to identity before pitching and rolling, so
        applying the same record twice leaves the node unchanged.
        """
        x, y, z = self.position
        node.set_local_position(x, y, z)
        node.set_local_rotation(identity_matrix3())
        node.pitch(Degrees(self.pitch))
        node.roll(Degrees(self.roll))
        node.set_local_scale(self.scale, self.scale, self.scale)


def _record(x: float, y: float, z: float, pitch: float, roll: float, scale: float) -> PlacementRecord:
    return PlacementRecord(position=(x, y, z), pitch=pitch, roll=roll, scale=scale)


TREE_PLACEMENTS: tuple[PlacementRecord, ...] = (
    _record(-65.37, -3, -40.38, -90, -45, 1),
    _record(-60.37, -3, -27.38, -90, -45, 1),
    _record(-68.37, -3, 10.38, -90, -45, 1),
    _record(-65.37, -3, 20.38, -90, -45, 1),
    _record(-40.37, -3, 10.38, -90, -45, 1),
    _record(45.37, -3, -67.38, -90, -45, 1),
    _record(50.37, -3, -67.38, -90, -45, 1),
    _record(68.37, -3, -67.38, -90, -45, 1),
    _record(10.37, -6, -67.38, -90, 45, 2),
    _record(5.37, -6, -47.38, -90, 45, 2),
)


def node_name(prefix: str, index: int) -> str:
    """Name of the node targeted by the record at ``index``."""
    return f"{prefix}{index}"


def placement_plan(
    placements: Sequence[PlacementRecord] = TREE_PLACEMENTS,
    prefix: str = "tree",
) -> list[tuple[str, PlacementRecord]]:
    """Pair each record with the name of the node it targets, in order."""
    return [(node_name(prefix, i), record) for i, record in enumerate(placements)]


def populate_scene(
    sm: SceneManager | None,
    placements: Sequence[PlacementRecord] = TREE_PLACEMENTS,
    config: PlacementConfig | None = None,
) -> int:
    """Apply every placement record to its node in the scene.

    Lookup failures raised by the scene manager are not caught.

    Args:
        sm: Scene manager handed over by the host engine. When None,
            no node is touched.
        placements: Records to apply; record i targets prefix + str(i)
        config: Run settings (node prefix, completion message)

    Returns:
        Number of nodes placed
    """
    cfg = config or PlacementConfig.default()
    placed = 0

    if sm is not None:
        for name, record in placement_plan(placements, cfg.node_prefix):
            node = sm.get_scene_node(name)
            record.apply(node)
            logger.debug(f"Placed {name}: {record.transform!r}")
            placed += 1
    else:
        logger.debug("No scene manager supplied, skipping placement")

    print(cfg.completion_message)
    return placed
