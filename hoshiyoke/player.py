"""The player's ship in the side-on stages, and what every fighter shares."""

from __future__ import annotations

from typing import Any, ClassVar

from hoshiyoke.bullets import PlayerBullet
from hoshiyoke.keyboard import Key, Keyboard
from hoshiyoke.matrix import make_affine_matrix, transform_normal
from hoshiyoke.transform import WorldTransform
from hoshiyoke.vector import Vector3

CHARACTER_SPEED = 0.2
MOVE_LIMIT_X = 34.0
MOVE_LIMIT_Y = 18.0
FIRE_COOLDOWN = 10
BULLET_SPEED = 1.0
START_X = -30.0


def clamp(value: float, limit: float) -> float:
    """Clamp value into [-limit, limit]."""
    return min(max(value, -limit), limit)


class Combatant:
    """Something with hit points, a world transform and bullets of its own."""

    def __init__(self, hp: int, world_transform: WorldTransform) -> None:
        self.world_transform = world_transform
        self.hp = hp
        self._bullets: list[Any] = []
        self._dead = False
        self._finished = False

    @property
    def bullets(self) -> tuple[Any, ...]:
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

    def _prune_bullets(self) -> None:
        self._bullets = [bullet for bullet in self._bullets if not bullet.is_dead]

    def _advance_bullets(self) -> None:
        for bullet in self._bullets:
            bullet.update()

    def _place(self, translation: Vector3, limit_x: float, limit_y: float) -> None:
        """Move to translation, rebuild the world matrix, then clamp the position."""
        wt = self.world_transform
        wt.translation = translation
        wt.mat_world = make_affine_matrix(wt.scale, wt.rotation, wt.translation)
        wt.translation = Vector3(
            clamp(translation.x, limit_x), clamp(translation.y, limit_y), translation.z
        )

    def _take_hit(self) -> bool:
        """Lose a hit point; return True when that was the last one."""
        self.hp -= 1
        if self.hp > 0:
            return False
        self.hp = 0
        self._dead = True
        self._finished = True
        return True


class Player(Combatant):
    """Moves up and down with W/S and fires with space."""

    bullet_type: ClassVar[type] = PlayerBullet

    def __init__(self, keyboard: Keyboard) -> None:
        super().__init__(1, self._initial_transform())
        self.keyboard = keyboard
        self.fire_cooldown = 0
        self._health_flag = False

    @staticmethod
    def _initial_transform() -> WorldTransform:
        return WorldTransform(translation=Vector3(START_X, 0.0, 0.0))

    @property
    def is_health(self) -> bool:
        """True once the player has been hit fatally."""
        return self._health_flag

    def _axis(self, negative: Key, positive: Key) -> float:
        if self.keyboard.push_key(negative):
            return -CHARACTER_SPEED
        if self.keyboard.push_key(positive):
            return CHARACTER_SPEED
        return 0.0

    def _movement(self) -> Vector3:
        return Vector3(0.0, self._axis(Key.S, Key.W), 0.0)

    def _ready_to_fire(self) -> bool:
        return self.keyboard.push_key(Key.SPACE) and self.fire_cooldown <= 0

    def _fire_if_ready(self) -> None:
        if not self._dead:
            self.attack()

    def _launch(self) -> None:
        velocity = transform_normal(
            Vector3(0.0, 0.0, BULLET_SPEED), self.world_transform.mat_world
        )
        self._bullets.append(self.bullet_type(self.world_transform.translation, velocity))
        self.fire_cooldown = FIRE_COOLDOWN

    def update(self) -> None:
        """Advance one frame: move, clamp, fire and move bullets."""
        self._prune_bullets()
        self._place(self.world_position + self._movement(), MOVE_LIMIT_X, MOVE_LIMIT_Y)
        if self.fire_cooldown > 0:
            self.fire_cooldown -= 1
        self._fire_if_ready()
        self._advance_bullets()

    def attack(self) -> None:
        """Fire a bullet if space is held and the cooldown has run out."""
        if self._ready_to_fire():
            self._launch()

    def on_collision(self) -> None:
        """Lose a hit point; at zero the player dies and the stage ends."""
        if self._take_hit():
            self._health_flag = True