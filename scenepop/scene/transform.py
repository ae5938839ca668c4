"""Local transform description for placed scene nodes.

Provides LocalTransform, the position + pitch/roll + uniform scale a
placement gives a node, with conversion to rotation and 4x4 homogeneous
transformation matrices. The engine computes the real transform; this model
describes what it should end up as.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, Field
from scipy.spatial.transform import Rotation


class LocalTransform(BaseModel):
    """Local transformation: position + pitch/roll + uniform scale.

    Attributes:
        position: XYZ position relative to the parent node
        pitch: Rotation about the local X axis in degrees (applied first)
        roll: Rotation about the local Z axis in degrees (applied second)
        scale: Uniform scale factor, used on all three axes
    """

    position: tuple[float, float, float] = Field(
        default=(0.0, 0.0, 0.0),
        description="XYZ position relative to the parent"
    )
    pitch: float = Field(default=0.0, description="Pitch in degrees")
    roll: float = Field(default=0.0, description="Roll in degrees")
    scale: float = Field(
        default=1.0,
        gt=0.0,
        description="Uniform scale factor"
    )

    model_config = {"frozen": True}

    def rotation(self) -> Rotation:
        """Orientation reached from identity by pitching then rolling.

        Both rotations are about the node's own axes, so the sequence is
        intrinsic: R = Rx(pitch) @ Rz(roll).
        """
        return Rotation.from_euler("XZ", [self.pitch, self.roll], degrees=True)

    def rotation_matrix(self) -> NDArray[np.float64]:
        """Return the 3x3 local rotation matrix."""
        return self.rotation().as_matrix()

    def to_matrix(self) -> NDArray[np.float64]:
        """Convert to 4x4 homogeneous transformation matrix.

        The transformation order is: Scale -> Rotate -> Translate
        This means the matrix is built as: T @ R @ S

        Returns:
            4x4 transformation matrix
        """
        s = np.eye(4, dtype=np.float64)
        s[0, 0] = s[1, 1] = s[2, 2] = self.scale

        r = np.eye(4, dtype=np.float64)
        r[:3, :3] = self.rotation_matrix()

        t = np.eye(4, dtype=np.float64)
        t[:3, 3] = self.position

        return t @ r @ s

    def apply_to_points(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Apply transformation to an Nx3 array of points.

        Args:
            points: Nx3 array of XYZ coordinates in the node's local frame

        Returns:
            Transformed Nx3 array of points in the parent's frame
        """
        matrix = self.to_matrix()

        ones = np.ones((len(points), 1), dtype=np.float64)
        homogeneous = np.hstack([points, ones])

        transformed = (matrix @ homogeneous.T).T
        return transformed[:, :3]

    @classmethod
    def identity(cls) -> LocalTransform:
        """Return identity transform (no transformation)."""
        return cls()

    def __repr__(self) -> str:
        return (
            f"LocalTransform(pos={self.position}, pitch={self.pitch:.1f}, "
            f"roll={self.roll:.1f}, scale={self.scale:.2f})"
        )
