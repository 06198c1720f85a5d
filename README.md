# templegame

A small side-scrolling action game built on pygame. It opens on a title
screen; pressing a start button fades into the forest stage, where you
control a player who can run, jump, attack and roll while patrolling
Scarerun enemies walk back and forth. A separate debug scene shows three
of the wandering boss, Vaillant.

## Installing

```
pip install .
```

The game loads its images, sounds and font from a `resource/` directory
relative to the working directory:

```
resource/images/title/j1.png ... j4.png
resource/images/player/idle/03_idle.png
resource/images/player/run/run_288_45_8.png
resource/images/player/attack1/atk_288_45.png
resource/images/player/jump_up/jump_up2.png
resource/images/player/roll/roll_288_45_7.png
resource/images/stage/stage1/2forest.png
resource/images/enemy/scarerun/idle.png
resource/images/enemy_boss/vaillant/idle.png, walk.png
resource/images/ui/...
resource/sounds/decision_button.mp3
resource/fonts/PressStart2P-Regular.ttf
```

The player, stage, enemy and boss sprite sheets and the title font file
are required: if one cannot be loaded the game stops, prints the error and
exits with status -1. The title backgrounds, the overlay images and the
decision sound are optional and are simply not drawn or played when
missing. Text is rendered with pygame's default font.

## Playing

```
templegame
```

Controls:

| Action            | Keyboard          | Gamepad   |
|-------------------|-------------------|-----------|
| Start game        | Enter             | A         |
| Skip title fade   | Enter again       | B         |
| Move              | A / D, ← / →      | D-pad     |
| Jump              | Space             | A         |
| Attack            | E                 | X         |
| Roll (avoid)      | Q                 | B         |
| Boss debug scene  | 1 (on title)      |           |
| Back to title     | 0 (in boss scene) |           |
| Quit              | Esc               |           |

Closing the window also quits. Holding F with 3 or 6 switches the frame
limit between 30 and 60 FPS. Pressing S while idle costs the player 10 hit
points; with E held, holding 0 or 1 empties or reduces an enemy's hit
points.

## Using the pieces

The building blocks can be used on their own:

```python
from templegame.vector2d import Vector2D
from templegame.collision import Collision, ObjectType

a = Collision()
a.is_blocking = True
a.object_type = ObjectType.PLAYER
a.radius = 25.0

b = Collision()
b.is_blocking = True
b.radius = 20.0

print(a.check_collision(b))           # True: both capsules sit at the origin
print(Vector2D(3.0, 4.0).length())    # 5.0
```

- `templegame.vector2d.Vector2D` – mutable 2D vector; division by a
  near-zero value gives the zero vector, and `Vector2D.distance` returns
  the squared distance.
- `templegame.collision.Collision` – box and capsule collision data;
  `check_collision` never hits a non-blocking partner.
- `templegame.input.InputCtrl` – per-frame key, button, stick and mouse
  state (`KeyState.PRESS`, `PRESSED`, `RELEASE`); `update` takes the held
  inputs directly, `update_from_pygame` reads the devices.
- `templegame.resources.ResourceManager` – loads each image, sprite sheet
  or sound once and hands out integer handles; `Canvas` draws those handles
  and simple shapes onto a pygame surface.
- `templegame.config.FrameTimer` and `FpsCounter` – frame delta timing and
  frame-rate limiting, both accepting injected clocks.
- `templegame.scene_base.SceneBase` – keeps objects ordered by z layer,
  updates them, tests collisions between movable objects and their
  partners, and removes objects queued with `destroy_object`.
- `templegame.scene_manager.SceneManager` – switches between
  `TitleScene`, `InGameScene` and `DebugBossScene`; `main` starts the game.

## What it does not do

- There is no result, restart or game-over screen. `SceneType.RESULT` and
  `SceneType.RE_START` have no scene, and switching to them raises an
  error. When the player's hit points reach zero it stops acting but stays
  on screen.
- The overlay is static: the hit-point bar does not shrink, the timer
  always reads `00:00`, and the buff icons are always shown. There are no
  buffs, items or scoring.
- The `Flotte` enemy exists but does nothing and is not placed in any scene.
- Player attacks do not damage enemies.

## Running the tests

```
pip install .[test]
pytest
```