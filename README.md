# pizzeria-engine

Game logic for a small pizzeria stealth game, driven one frame at a time.
Every subsystem takes plain values, such as a frame's delta time, a focus
flag and a mouse position. It returns data a renderer would draw: rectangles,
source offsets and overlay descriptions. You can run the whole loop headless
and test it.

## Modules

- `pizzeria_engine.vector` provides `Vector2`, an immutable 2D vector. It has
  `length`, `normalized`, `angle`, `rotated_about` and `boss_direction`. The
  module also has a `clamp` helper.
- `pizzeria_engine.keys` provides the `Key` and `KeyState` enums and
  `KeyManager`.
  - `KeyManager` tracks per-frame key transitions (`TAP`, `HOLD`, `AWAY`,
    `NONE`) from a `poll(key) -> bool` callable.
  - Losing focus releases every key.
  - `disable_arrow_keys` ignores the arrow keys. `disable_all_keys` ignores
    the arrows, space and Z.
- `pizzeria_engine.animation` provides `AnimFrame`, `Animation` and `Animator`.
  - These are sprite-sheet animations that advance with time and are played
    once or repeated.
  - `Animation.blit_rect` gives the destination and source rectangles of the
    current frame.
- `pizzeria_engine.collider` provides `BoxCollider`. It is an axis-aligned box
  that follows its owner and forwards enter, stay and exit callbacks.
- `pizzeria_engine.collision` provides `CollisionManager`, which checks
  registered pairs of object groups.
  - `is_collision` tests two boxes.
  - `push_box` moves the second box's owner out along the axis of least
    overlap.
- `pizzeria_engine.entity` provides `GameObject`, the abstract base for scene
  objects. Subclasses implement `update(game)`.
- `pizzeria_engine.events` provides `EventManager`. It queues object creation,
  object deletion and scene changes until `update(world)`. A scene change
  discards the events queued behind it.
- `pizzeria_engine.boss_manager` provides `BossManager` and the twelve
  `PATROL_PATHS`. It decides when the boss shows at the window, when he
  enters, and which path he walks.
- `pizzeria_engine.boss` provides `Boss` and `BossState`.
  - The boss has an idle / patrol / find / done state machine.
  - He detects a resting player within range and costs trust at the caught
    frame.
  - He pushes the player away on contact.
- `pizzeria_engine.camera` provides `CameraManager`, which queues overlay
  effects: `focused_on`, `focused_out`, `fade_in`, `all_black` and
  `shine_light`. `render()` returns an `Overlay` describing the veil's alpha,
  its transparent hole or the light quad.
- `pizzeria_engine.hud` provides `BarUI` (a 0–100 gauge with `fill_rects`) and
  `Arrow` (a blinking sprite with `source_offset`).
- `pizzeria_engine.menu` provides `Button`, `ButtonFunction` and `CutScene`.
  - A button changes scene, opens a pause menu from a factory, or closes its
    parent.
  - The cut scene turns pages by mouse drag or arrow keys and lays out page
    blits with `page_layout`.
- `pizzeria_engine.game` provides `GameProcess` and `Palette`.
  - `GameProcess` owns the managers and runs one frame per
    `progress(delta_time, focused, mouse_pos)`.
  - `progress` returns the world's rendered result and the camera overlay.

## Example

```python
from pizzeria_engine.keys import Key, KeyManager, KeyState
from pizzeria_engine.vector import Vector2

pressed = {Key.SPACE}
keys = KeyManager(poll=lambda key: key in pressed)

keys.update(focused=True, mouse_pos=Vector2(10.0, 20.0))
assert keys.is_key_state(Key.SPACE, KeyState.TAP)

keys.update(focused=True, mouse_pos=Vector2(10.0, 20.0))
assert keys.key_state(Key.SPACE) is KeyState.HOLD
```

A frame of the game loop needs a world object. The world supplies `groups`,
`update(game)`, `final_update(delta_time)`, `render()`,
`add_object(obj, group)` and `change_scene(scene)`:

```python
import random

from pizzeria_engine.game import GameProcess
from pizzeria_engine.vector import Vector2


class World:
    groups = {}

    def update(self, game): pass
    def final_update(self, delta_time): pass
    def render(self): return "frame"
    def add_object(self, obj, group): pass
    def change_scene(self, scene): pass


game = GameProcess((1920, 1080), World(), poll=lambda key: False, rng=random.Random(1))
image, overlay = game.progress(1 / 60, True, Vector2())
assert image == "frame" and overlay is None
```

## What the package does not do

- It opens no window and draws nothing. The renderer is left to the caller.
- It loads no textures, fonts or sounds, and plays no audio. `GameProcess.sound`
  is `None` until you assign an object with `play(name, channel, volume)` and
  `pause_boss()`. The boss needs it.
- It contains no scenes, player or stage. The world, the player
  (`pos`, `is_resting`) and the stage (`player`, `add_trust`, window
  animations, `spawn_boss`) are protocols for the caller to implement.
- It has no command-line entry point.

## Tests

```
pip install -e ".[test]"
pytest
```