# hoshiyoke

Game logic for a small arcade game about dodging stars. A ship shoots at a
star while the star sprays bullets back; one hit downs the ship, thirty hits
destroy the star.

Nothing here draws to a screen or plays sound. Every object is advanced one
frame at a time by calling its `update()` method, and keyboard input is fed
in as the set of keys held down in each frame.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install .[test]
pytest
```

## Modules

- `hoshiyoke.vector` – `Vector2`, `Vector3` (with `+`, `-`, unary `-`,
  `*` and `/` by a number), `AABB`, and the helpers `lerp`, `ease_in_out`,
  `leap`, `is_collision`, `dot`, `length` and `normalize` (the zero vector
  normalizes to itself).
- `hoshiyoke.matrix` – an immutable `Matrix4x4` (row-vector convention,
  `a @ b` multiplies) and `multiply`, `make_scale_matrix`,
  `make_translate_matrix`, `make_rotate_x_matrix`, `make_rotate_y_matrix`,
  `make_rotate_z_matrix`, `make_affine_matrix`, `transform` (raises
  `ValueError` when the resulting w is zero), `transform_normal` and
  `player_affine_matrix`.
- `hoshiyoke.transform` – `WorldTransform`: scale, rotation, translation
  and the world matrix rebuilt by `update_matrix()`.
- `hoshiyoke.keyboard` – `Key` scan codes (1, 2, 3, W, A, S, D, Space) and
  `Keyboard`, whose `update(pressed)` takes the keys held this frame and
  answers `push_key` (held) and `trigger_key` (went down this frame).
- `hoshiyoke.bullets` – `Bullet` and its kinds `PlayerBullet` (always flies
  along +X), `EnemyBullet`, `PlayerBullet3D` (always flies along +Z) and
  `EnemyBullet3D`. A bullet lives 300 frames or until `on_collision()`.
- `hoshiyoke.player` – `Player`, the side-on ship: starts at x = -30, moves
  up and down with W and S at 0.2 per frame, stays within ±34 by ±18, and
  fires with Space at most once every ten frames. `is_health` turns true
  once it has been hit fatally.
- `hoshiyoke.enemy` – `Enemy`, the side-on star: held at x = 30, bobs up and
  down between its `Phase` values, and every 60 frames fires four bullets
  scattered around itself, each fast with a 30 % chance. Takes an optional
  random source.
- `hoshiyoke.enemy3d` – `Enemy3D`, the star of the depth stage: held at
  z = 20, spins and wanders at random, and every 10 frames sends one bullet
  from z = 60 towards the player, every third one fast.
- `hoshiyoke.scenery` – `Backdrop`, the slowly turning sky, and
  `TitleModel`, the static title logo.
- `hoshiyoke.scenes` – `TitleScene`, `GameOverScene` and `GameClearScene`
  (finish when Space goes down) and `SelectScene` (records 1, 2 or 3 via
  `is_one`, `is_two`, `is_three`).

## Example

```python
import random

from hoshiyoke.enemy import Enemy
from hoshiyoke.keyboard import Key, Keyboard
from hoshiyoke.matrix import make_affine_matrix, transform
from hoshiyoke.player import Player
from hoshiyoke.vector import Vector3, normalize

m = make_affine_matrix(Vector3(1, 1, 1), Vector3(0, 0, 0), Vector3(5, 0, 0))
print(transform(Vector3(1, 2, 3), m))   # Vector3(x=6.0, y=2.0, z=3.0)
print(normalize(Vector3(3, 0, 4)))      # Vector3(x=0.6, y=0.0, z=0.8)

keyboard = Keyboard()
player = Player(keyboard)
keyboard.update({Key.W, Key.SPACE})
player.update()
print(player.world_position, len(player.bullets))

enemy = Enemy(random.Random(0))
for _ in range(60):
    enemy.update()
print(len(enemy.bullets))               # 4
```

## What this package does not do

- There is no command to start the game and no main loop that moves from
  the title screen through stage select into a stage and on to game over or
  game clear; the scenes exist, but nothing switches between them.
- There is no stage object that runs a player and an enemy together and
  checks their bullets against each other; callers do that themselves.
- There is no ship for the depth stage; only `Enemy3D` and the 3D bullets
  are provided for it.
- There is no window, rendering, sprite drawing or audio playback. Texture
  and music file names are kept only as attributes.