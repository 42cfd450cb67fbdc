import random
from types import SimpleNamespace

import pytest

from hoshiyoke.bullets import EnemyBullet
from hoshiyoke.enemy import (
    BULLETS_PER_FIRE,
    FIRE_INTERVAL,
    FIXED_X,
    MAX_HP,
    Enemy,
    Phase,
    hp_texture_name,
)


def fixed_rng(value):
    return SimpleNamespace(random=lambda: value)


@pytest.fixture
def enemy():
    return Enemy(fixed_rng(0.5))


def test_hit_points_run_down_to_death(enemy):
    assert enemy.hp == MAX_HP
    assert enemy.hp_texture == "HP/enemyHp30.png"
    for _ in range(MAX_HP - 1):
        enemy.on_collision()
    assert not enemy.is_dead
    enemy.on_collision()
    assert enemy.is_dead and enemy.is_finished
    enemy.on_collision()
    assert enemy.hp == 0
    assert enemy.hp_texture is None


@pytest.mark.parametrize(
    "hp, expected", [(1, "HP/enemyHp1.png"), (0, None), (MAX_HP + 1, None)]
)
def test_hp_texture_name_bounds(hp, expected):
    assert hp_texture_name(hp) == expected


def test_approach_fires_on_interval(enemy):
    for _ in range(FIRE_INTERVAL - 1):
        enemy.approach()
    assert enemy.bullets == ()
    enemy.approach()
    assert len(enemy.bullets) == BULLETS_PER_FIRE
    assert (enemy.fire_timer, enemy.fire_count) == (0, 1)


@pytest.mark.parametrize(
    "value, x, y, speed",
    [(0.5, 0.0, 0.0, -0.5), (0.0, -5.0, -20.0, -1.0)],
)
def test_fire_places_and_speeds_bullets(value, x, y, speed):
    shooter = Enemy(fixed_rng(value))
    shooter.fire()
    assert all(isinstance(b, EnemyBullet) for b in shooter.bullets)
    for bullet in shooter.bullets:
        assert bullet.world_position.x == pytest.approx(x)
        assert bullet.world_position.y == pytest.approx(y)
        assert bullet.velocity.x == pytest.approx(speed)
        assert (bullet.velocity.y, bullet.velocity.z) == (0.0, 0.0)


def test_fire_positions_stay_in_range():
    shooter = Enemy(random.Random(7))
    for _ in range(10):
        shooter.fire()
    assert shooter.fire_count == 10
    for bullet in shooter.bullets:
        assert -5.0 <= bullet.world_position.x <= 5.0
        assert -20.0 <= bullet.world_position.y <= 20.0
        assert bullet.velocity.x in (pytest.approx(-1.0), pytest.approx(-0.5))


def test_same_seed_same_volley():
    volleys = []
    for _ in range(2):
        shooter = Enemy(random.Random(3))
        shooter.fire()
        volleys.append([b.world_position for b in shooter.bullets])
    assert volleys[0] == volleys[1]


def test_update_pins_x_and_moves_up(enemy):
    enemy.update()
    assert enemy.world_position.x == FIXED_X
    assert enemy.world_position.y == pytest.approx(0.8)
    assert enemy.phase is Phase.APPROACH


def test_update_switches_phases(enemy):
    seen_leave = False
    for _ in range(200):
        previous = enemy.phase
        enemy.update()
        if previous is Phase.APPROACH and enemy.phase is Phase.LEAVE:
            assert enemy.world_position.y > 10.0
            seen_leave = True
        if previous is Phase.LEAVE and enemy.phase is Phase.APPROACH:
            assert enemy.world_position.y < -8.0
    assert seen_leave


def test_update_removes_dead_bullets(enemy):
    enemy.fire()
    for bullet in enemy.bullets:
        bullet.on_collision()
    enemy.update()
    assert enemy.bullets == ()