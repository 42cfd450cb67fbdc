import random
from types import SimpleNamespace

import pytest

from hoshiyoke.bullets import EnemyBullet3D
from hoshiyoke.enemy import MAX_HP, Phase
from hoshiyoke.enemy3d import (
    FIRE_INTERVAL,
    FIXED_Z,
    OUTSIDE_Z,
    SPIN_STEP,
    Enemy3D,
)


def make_enemy(value=0.5):
    return Enemy3D(SimpleNamespace(random=lambda: value))


def test_full_hp_then_death():
    enemy = make_enemy()
    assert enemy.hp_texture == "HP/enemyHp30.png"
    for _ in range(MAX_HP):
        enemy.on_collision()
    assert (enemy.is_dead, enemy.is_finished, enemy.hp) == (True, True, 0)
    assert enemy.hp_texture is None


def test_approach_fires_one_bullet_per_interval():
    enemy = make_enemy()
    for _ in range(FIRE_INTERVAL - 1):
        enemy.approach()
    assert enemy.bullets == ()
    enemy.approach()
    assert len(enemy.bullets) == 1
    assert enemy.fire_timer == 0


def test_fire_speed_follows_count():
    enemy = make_enemy()
    for _ in range(4):
        enemy.fire()
    speeds = [b.velocity.z for b in enemy.bullets]
    assert speeds == [pytest.approx(v) for v in (-3.0, -1.0, -1.0, -3.0)]
    assert all(isinstance(b, EnemyBullet3D) for b in enemy.bullets)


def test_fire_origin_is_deep_in_screen():
    enemy = make_enemy()
    enemy.fire()
    position = enemy.bullets[0].world_position
    assert (position.x, position.y) == (pytest.approx(0.0), pytest.approx(0.0))
    assert position.z == OUTSIDE_Z


def test_fire_positions_stay_in_range():
    enemy = Enemy3D(random.Random(11))
    for _ in range(20):
        enemy.fire()
    assert all(
        -15.0 <= b.world_position.x <= 15.0 and -10.0 <= b.world_position.y <= 10.0
        for b in enemy.bullets
    )


def test_update_pins_z_and_spins():
    enemy = make_enemy()
    enemy.update()
    rotation = enemy.world_transform.rotation
    assert enemy.world_position.z == FIXED_Z
    assert (rotation.y, rotation.z) == (pytest.approx(SPIN_STEP), pytest.approx(SPIN_STEP))
    assert enemy.world_position.x == pytest.approx(0.0)


def test_update_leaves_after_passing_limit():
    enemy = make_enemy(1.0)
    for _ in range(30):
        enemy.update()
        if enemy.phase is Phase.LEAVE:
            break
    assert enemy.phase is Phase.LEAVE
    assert enemy.world_position.x > 10.0 or enemy.world_position.y > 10.0


def test_update_removes_dead_bullets():
    enemy = make_enemy()
    enemy.fire()
    enemy.bullets[0].on_collision()
    enemy.update()
    assert enemy.bullets == ()