"""World transform: scale, rotation and translation of one object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from hoshiyoke.matrix import Matrix4x4, make_affine_matrix
from hoshiyoke.vector import Vector3


@dataclass(eq=False)
class WorldTransform:
    """Local scale, rotation and translation plus the world matrix built from them."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)
    mat_world: Matrix4x4 = field(default_factory=Matrix4x4.identity)
    parent: Optional[WorldTransform] = None

    def update_matrix(self) -> None:
        """Rebuild the world matrix from scale, rotation and translation."""
        self.mat_world = make_affine_matrix(self.scale, self.rotation, self.translation)