# roomcrawl

The game-logic core of a top-down room crawler. It has no rendering and no
window attached. Every piece is plain Python with no third-party
dependencies. You drive it by calling its `tick` methods from your own loop,
or from tests. The render-related methods compute numbers such as positions
and alpha values, and your code does the drawing.

## Modules

- `roomcrawl.core`
  - `Vec2` is an immutable 2D vector. It supports `+`, `-`, `*` and `/` by a scalar, and unary minus. Its methods are `length()`, `normalized()` and `dot()`.
  - `Base` is an object with a `name` and a unique `id`. `copy()` keeps the name and gives the copy a new id.
  - `Component` is an abstract base class with a `kind`, an `owner` and `final_tick(dt)`.
- `roomcrawl.assets`
  - `AssetManager` caches assets for each `AssetType` (texture, sprite, flipbook, sound).
    - `load(kind, key, relative_path)` calls a loader function that you supply for that type. It does this only the first time a key is asked for.
    - `create(kind, key, factory)` and `add(kind, key, asset)` register new assets. They raise `DuplicateAssetError` if the key is already taken.
  - `Flipbook` is an ordered list of sprites.
  - `check_ext(ext, path)` returns the path with the extension added, or with a wrong extension replaced.
- `roomcrawl.fsm`
  - `FSM` is a component that holds named `State` objects. `change_state(key)` calls `exit()` on the old state and `enter()` on the new one. `final_tick(dt)` runs the current state. `current_state_name()` reports the name of the current state.
- `roomcrawl.collision`
  - `CollisionManager(layer_count)` keeps a symmetric on/off matrix of layer pairs, changed with `toggle`, `is_checked` and `clear`.
  - `tick(colliders_for_layer)` tests the colliders of every checked pair. The boxes are axis-aligned and centred on `final_pos` with size `scale`. It calls `begin_overlap`, `overlap` and `end_overlap` on the colliders. A pair whose owner `is_dead` ends its overlap.
  - `is_collision` and `collision_id` are also available on their own.
- `roomcrawl.keys`
  - `KeyManager.tick(focused, pressed, mouse_pos)` moves each `Key` through the `KeyState` values `NONE`, `TAP`, `PRESSED` and `RELEASED`.
  - While the window has no focus, held keys are released and the mouse is moved off screen to `(-1, -1)`.
  - The helpers are `tapped`, `held`, `released` and `is_mouse_off_screen(resolution)`.
- `roomcrawl.camera`
  - `Camera(resolution)` converts positions between world and screen with `render_pos` and `real_pos`.
  - It can follow a target that has a `pos`, and it pans with U/H/J/K when you pass a `KeyManager`.
  - `start_oscillation` makes the camera shake vertically.
  - `post_process_effect` queues `PostProcess` effects (`FADE_IN`, `FADE_OUT`, `HEART`). `effect_alpha(dt)` returns the effect and its blend alpha for the frame, then advances it.
  - `DebugRenderer` keeps `DebugInfo` shapes for their duration. The C key switches the display on and off. Shapes added while the display is off are ignored.
- `roomcrawl.flipbook_player`
  - `FlipbookPlayer` holds flipbooks in numbered slots. `play(index, fps, repeat, inversion)` starts one, and `final_tick(dt)` moves frames forward at that FPS.
  - If repeat is on, the flipbook loops. Otherwise it stops on the last frame and sets `finished`.
  - `set_hitted` together with `hit_alpha(dt)` gives the alpha of a 0.3 s hit flash.
- `roomcrawl.level`
  - `Level(layer_count)` groups objects and colliders by layer. It runs `begin`, `tick`, `final_tick` and `render` on them. `render` also drops objects that are dead.
  - `LevelManager(levels, start)` runs the current level. `change_level` ends the current level and begins the next one.
- `roomcrawl.charger`
  - The Charger enemy walks in straight lines. When it hits an obstacle (`hit_obstacle`) it turns left or right. When the target is within 350 units and lined up on an axis, it charges.
  - Its behaviour is split into the states `ChargerIdleState`, `ChargerAttackState` and `ChargerDeathState`. The death state marks the charger dead 0.5 s after it dies.
  - The pure helpers are `turn`, `direction_force`, `detect_charge`, `move_animation` and `attack_animation`.
- `roomcrawl.guided`
  - Helpers for a homing missile: `find_target` picks the nearest living candidate in range, `steer` turns the velocity toward the target and returns a speed scale, and `rotate` and `is_clockwise` are also provided.
- `roomcrawl.hud`
  - `heart_slots(max_hp, cur_hp)` lists `Heart.FULL`, `HALF` and `EMPTY`, at two hit points per heart.
  - `heart_positions` lays those hearts out from left to right.
  - `Button` calls a callback and a delegate when `click()` is called. `contains(point)` tests whether a point is inside it.

## Install

```
pip install .
```

## Examples

```python
from roomcrawl.core import Vec2
from roomcrawl.fsm import FSM, State

class Idle(State):
    def enter(self):
        print("idle")

fsm = FSM()
fsm.add_state("Idle", Idle())
fsm.change_state("Idle")            # prints "idle"
print(fsm.current_state_name())     # Idle
print(Vec2(3.0, 4.0).length())      # 5.0
```

```python
from roomcrawl.keys import Key, KeyManager, KeyState

keys = KeyManager()
keys.tick(True, {Key.SPACE})
assert keys.state(Key.SPACE) is KeyState.TAP
keys.tick(True, {Key.SPACE})
assert keys.state(Key.SPACE) is KeyState.PRESSED
keys.tick(True)
assert keys.state(Key.SPACE) is KeyState.RELEASED
```

```python
from roomcrawl.charger import Charger, turn

charger = Charger()
charger.begin()
print(charger.fsm.current_state_name())  # Idle
print(charger.steer())                   # Vec2(x=0.0, y=2000.0)
print(turn("D", "L"))                    # R
```

```python
from roomcrawl.hud import heart_slots

# 5 hit points out of 6: two full hearts and one half heart
print(heart_slots(6, 5))
```

## What it does not do

- It draws nothing and opens no window.
- It reads no images, sound or level files. `AssetManager` only calls the loader functions you give it.
- It plays no audio.
- It ships no game levels, no player character and no command to start a game. You build those on top of these pieces.

## Tests

```
pip install .[test]
pytest
```