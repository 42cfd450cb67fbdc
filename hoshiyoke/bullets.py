"""Projectiles fired by the player and the enemies."""

from __future__ import annotations

from typing import ClassVar, Optional

from hoshiyoke.transform import WorldTransform
from hoshiyoke.vector import Vector3

LIFE_TIME = 60 * 5


class Bullet:
    """A projectile that moves by a fixed velocity each frame and expires."""

    texture: ClassVar[str] = "Red.png"
    forced_velocity: ClassVar[Optional[Vector3]] = None
    initial_rotation_y: ClassVar[float] = 0.0

    def __init__(self, position: Vector3, velocity: Vector3) -> None:
        self.world_transform = WorldTransform(
            translation=position, rotation=Vector3(0.0, self.initial_rotation_y, 0.0)
        )
        self.velocity = velocity if self.forced_velocity is None else self.forced_velocity
        self.death_timer = LIFE_TIME
        self._dead = False

    @property
    def is_dead(self) -> bool:
        return self._dead

    @property
    def world_position(self) -> Vector3:
        return self.world_transform.translation

    def update(self) -> None:
        """Count down the lifetime, move one frame and rebuild the world matrix."""
        self.death_timer -= 1
        if self.death_timer <= 0:
            self._dead = True
        self.world_transform.translation = self.world_transform.translation + self.velocity
        self.world_transform.update_matrix()

    def on_collision(self) -> None:
        """Mark the bullet as spent after a hit."""
        self._dead = True


class PlayerBullet(Bullet):
    """The player's shot in the side-on stages; always travels along +X."""

    forced_velocity = Vector3(1.0, 0.0, 0.0)


class EnemyBullet(Bullet):
    """An enemy shot in the side-on stages."""


class PlayerBullet3D(Bullet):
    """The player's shot in the depth stage; always travels along +Z."""

    forced_velocity = Vector3(0.0, 0.0, 1.0)


class EnemyBullet3D(Bullet):
    """An enemy shot in the depth stage, turned a quarter around Y."""

    texture = "Blue.png"
    initial_rotation_y = 3.1412 / 2.0