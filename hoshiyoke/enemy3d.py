"""The enemy star in the depth stage."""

from __future__ import annotations

import random
from typing import Any, Optional

from hoshiyoke.bullets import EnemyBullet3D
from hoshiyoke.enemy import MAX_HP, Phase, RandomSource, clamp, hp_texture_name
from hoshiyoke.matrix import make_affine_matrix
from hoshiyoke.transform import WorldTransform
from hoshiyoke.vector import Vector3

FIRE_INTERVAL = 10
FIXED_Z = 20.0
MOVE_LIMIT_X = 34.0
MOVE_LIMIT_Y = 18.0
SPIN_STEP = 3.1412 / 2.0
APPROACH_LIMIT = 10.0
LEAVE_LIMIT = -10.0

NORMAL_BULLET_SPEED = 1.0
FAST_BULLET_SPEED = 3.0
FAST_BULLET_INTERVAL = 3
OUTSIDE_Z = 60.0
RANDOM_RANGE_X = 15.0
RANDOM_RANGE_Y = 10.0


class Enemy3D:
    """Wanders randomly and sends bullets at the player from deep in the screen."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.world_transform = WorldTransform()
        self.phase = Phase.APPROACH
        self.hp = MAX_HP
        self.fire_timer = 0
        self.fire_count = 0
        self.player: Any = None
        self._bullets: list[EnemyBullet3D] = []
        self._dead = False
        self._finished = False

    @property
    def bullets(self) -> tuple[EnemyBullet3D, ...]:
        return tuple(self._bullets)

    @property
    def world_position(self) -> Vector3:
        return self.world_transform.translation

    @property
    def is_dead(self) -> bool:
        return self._dead

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def hp_texture(self) -> Optional[str]:
        """Image of the health bar for the current hit points."""
        return hp_texture_name(self.hp)

    def update(self) -> None:
        """Advance one frame: spin, fire on schedule, move bullets and wander."""
        self._bullets = [bullet for bullet in self._bullets if not bullet.is_dead]

        wt = self.world_transform
        wt.translation = Vector3(wt.translation.x, wt.translation.y, FIXED_Z)
        wt.mat_world = make_affine_matrix(wt.scale, wt.rotation, wt.translation)
        wt.translation = Vector3(
            clamp(wt.translation.x, MOVE_LIMIT_X),
            clamp(wt.translation.y, MOVE_LIMIT_Y),
            wt.translation.z,
        )
        wt.rotation = Vector3(
            wt.rotation.x, wt.rotation.y + SPIN_STEP, wt.rotation.z + SPIN_STEP
        )

        self.approach()

        for bullet in self._bullets:
            bullet.update()

        random_x = (self.rng.random() - 0.5) * 2.0
        random_y = (self.rng.random() - 0.5) * 2.0
        approach_move = Vector3(random_x, random_y, 0.0)
        leave_move = Vector3(-random_x, -random_y, 0.0)

        if self.phase is Phase.LEAVE:
            wt.translation = wt.translation - leave_move
            if wt.translation.x < LEAVE_LIMIT or wt.translation.y < LEAVE_LIMIT:
                self.phase = Phase.APPROACH
        else:
            wt.translation = wt.translation + approach_move
            if wt.translation.x > APPROACH_LIMIT or wt.translation.y > APPROACH_LIMIT:
                self.phase = Phase.LEAVE

    def fire(self) -> None:
        """Launch one bullet from a random point far into the screen."""
        x = self.rng.random() * 2.0 * RANDOM_RANGE_X - RANDOM_RANGE_X
        y = self.rng.random() * 2.0 * RANDOM_RANGE_Y - RANDOM_RANGE_Y
        fast = self.fire_count % FAST_BULLET_INTERVAL == 0
        speed = FAST_BULLET_SPEED if fast else NORMAL_BULLET_SPEED
        self._bullets.append(
            EnemyBullet3D(Vector3(x, y, OUTSIDE_Z), Vector3(0.0, 0.0, -speed))
        )
        self.fire_count += 1

    def approach(self) -> None:
        """Count frames and fire once the interval is reached."""
        self.fire_timer += 1
        if self.fire_timer == FIRE_INTERVAL:
            self.fire()
            self.fire_timer = 0

    def on_collision(self) -> None:
        """Lose a hit point; at zero the enemy dies and the stage ends."""
        self.hp -= 1
        if self.hp <= 0:
            self.hp = 0
            self._dead = True
            self._finished = True