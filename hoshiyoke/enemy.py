"""The enemy star in the side-on stages."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Optional, Protocol

from hoshiyoke.bullets import EnemyBullet
from hoshiyoke.player import Combatant, clamp
from hoshiyoke.transform import WorldTransform
from hoshiyoke.vector import Vector3

__all__ = [
    "Enemy",
    "Phase",
    "RandomSource",
    "clamp",
    "hp_texture_name",
]

MAX_HP = 30
FIRE_INTERVAL = 60
FIXED_X = 30.0
MOVE_LIMIT_X = 34.0
MOVE_LIMIT_Y = 18.0
APPROACH_STEP = Vector3(0.0, 0.8, 0.0)
LEAVE_STEP = Vector3(0.0, 0.8, 0.0)
APPROACH_TOP = 10.0
LEAVE_BOTTOM = -8.0

NORMAL_BULLET_SPEED = 0.5
FAST_BULLET_SPEED = 1.0
BULLETS_PER_FIRE = 4
FAST_BULLET_PROBABILITY = 0.3
RANDOM_RANGE_X = 5.0
RANDOM_RANGE_Y = 20.0


class RandomSource(Protocol):
    """Anything that yields floats in [0, 1] from ``random()``."""

    def random(self) -> float: ...


class Phase(Enum):
    """Movement phase of an enemy."""

    APPROACH = "Approach"
    LEAVE = "Leave"


def hp_texture_name(hp: int) -> Optional[str]:
    """The health-bar image for the given hit points, or None when none is shown."""
    if 0 < hp <= MAX_HP:
        return f"HP/enemyHp{hp}.png"
    return None


class Enemy(Combatant):
    """Bobs up and down at the right edge and sprays bullets to the left."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        super().__init__(MAX_HP, WorldTransform())
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.phase = Phase.APPROACH
        self.fire_timer = 0
        self.fire_count = 0
        self.player: Any = None

    @property
    def hp_texture(self) -> Optional[str]:
        """Image of the health bar for the current hit points."""
        return hp_texture_name(self.hp)

    def _spread(self, half_range: float) -> float:
        return self.rng.random() * 2.0 * half_range - half_range

    def update(self) -> None:
        """Advance one frame: fire on schedule, move bullets and bob."""
        self._prune_bullets()
        position = self.world_position
        self._place(Vector3(FIXED_X, position.y, position.z), MOVE_LIMIT_X, MOVE_LIMIT_Y)

        self.approach()
        self._advance_bullets()

        wt = self.world_transform
        if self.phase is Phase.LEAVE:
            wt.translation = wt.translation - LEAVE_STEP
            if wt.translation.y < LEAVE_BOTTOM:
                self.phase = Phase.APPROACH
        else:
            wt.translation = wt.translation + APPROACH_STEP
            if wt.translation.y > APPROACH_TOP:
                self.phase = Phase.LEAVE

    def fire(self) -> None:
        """Launch a volley of bullets scattered around the enemy."""
        origin = self.world_transform.translation
        for _ in range(BULLETS_PER_FIRE):
            offset_x = self._spread(RANDOM_RANGE_X)
            offset_y = self._spread(RANDOM_RANGE_Y)
            position = Vector3(origin.x + offset_x, origin.y + offset_y, origin.z)
            fast = self.rng.random() < FAST_BULLET_PROBABILITY
            speed = FAST_BULLET_SPEED if fast else NORMAL_BULLET_SPEED
            self._bullets.append(EnemyBullet(position, Vector3(-speed, 0.0, 0.0)))
        self.fire_count += 1

    def approach(self) -> None:
        """Count frames and fire once the interval is reached."""
        self.fire_timer += 1
        if self.fire_timer == FIRE_INTERVAL:
            self.fire()
            self.fire_timer = 0

    def on_collision(self) -> None:
        """Lose a hit point; at zero the enemy dies and the stage ends."""
        self._take_hit()