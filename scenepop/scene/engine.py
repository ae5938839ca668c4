"""Capability surface of the host engine's scene manager.

The scene graph, its nodes and their math all belong to the host engine.
Placement code only sees the handful of operations described here, plus the
value constructors it needs to call them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Degrees:
    """An angle expressed in degrees."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))

    def to_radians(self) -> float:
        return math.radians(self.value)

    def __float__(self) -> float:
        return self.value


def vector3(x: float, y: float, z: float) -> NDArray[np.float64]:
    """Create a 3-vector."""
    return np.array([x, y, z], dtype=np.float64)


def identity_matrix3() -> NDArray[np.float64]:
    """Create a 3x3 identity matrix."""
    return np.eye(3, dtype=np.float64)


@runtime_checkable
class SceneNode(Protocol):
    """A named node holding a local transform.

    pitch and roll rotate about the node's local X and Z axes respectively,
    composing onto the current local rotation.
    """

    def set_local_position(self, x: float, y: float, z: float) -> None: ...

    def set_local_rotation(self, matrix: NDArray[np.float64]) -> None: ...

    def pitch(self, angle: Degrees) -> None: ...

    def roll(self, angle: Degrees) -> None: ...

    def set_local_scale(self, x: float, y: float, z: float) -> None: ...


@runtime_checkable
class SceneManager(Protocol):
    """Lookup of scene nodes by name.

    get_scene_node raises when no node has the given name; the exception
    type is up to the engine.
    """

    def get_scene_node(self, name: str) -> SceneNode: ...
