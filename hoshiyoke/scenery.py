"""Decorative objects: the rotating backdrop and the title model."""

from __future__ import annotations

from hoshiyoke.transform import WorldTransform
from hoshiyoke.vector import Vector3

BACKDROP_SPIN = 0.02
BACKDROP_HEIGHT = -15.0


class Backdrop:
    """The sky dome behind the stages; it slowly turns around Y."""

    model_name = "Haikei"

    def __init__(self) -> None:
        self.world_transform = WorldTransform()

    def update(self) -> None:
        """Rebuild the matrix, then turn a little and sit below the play field."""
        wt = self.world_transform
        wt.update_matrix()
        wt.rotation = Vector3(wt.rotation.x, wt.rotation.y - BACKDROP_SPIN, wt.rotation.z)
        wt.translation = Vector3(wt.translation.x, BACKDROP_HEIGHT, wt.translation.z)


class TitleModel:
    """The static logo model shown on the title screen."""

    model_name = "title"

    def __init__(self) -> None:
        self.world_transform = WorldTransform()

    def update(self) -> None:
        """Keep the world matrix in step with the transform; the model never moves."""
        self.world_transform.update_matrix()