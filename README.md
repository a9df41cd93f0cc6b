# zeroengine

A small 2D game engine built around an entity-component system. It needs
Python 3.10 or later and Pillow, which it uses to read image files.

## What is in it

| Module | Contents |
| --- | --- |
| `zeroengine.geometry` | `Vec2`, `Rect`, `clamp`, `lerp`, `random_range`, `angle`, `length` |
| `zeroengine.types` | `Team`, `UnitType`, `BulletType`, `MAX_ENTITIES`, `MAX_COMPONENTS` |
| `zeroengine.logger` | timestamped, coloured console logging |
| `zeroengine.timing` | `TimeManager` (frame delta time) |
| `zeroengine.input` | `InputManager`, `KeyState`, key codes such as `VK_LEFT` |
| `zeroengine.ecs` | `Component`, `ComponentArray`, `ComponentManager`, `EntityIDManager` |
| `zeroengine.scene` | `Entity`, `GameObject`, `Scene`, `SceneManager` |
| `zeroengine.transform` | `Transform` and the `Affine` matrix it uses |
| `zeroengine.textures` | `Texture`, `TextureManager`, `TextureLoadError` |
| `zeroengine.sprite` | `Sprite2DRenderer`, `UIImageRenderer`, `UIHp`, `DrawCall` |
| `zeroengine.physics` | `BoxCollider`, `RectCollider`, `RigidBody2D`, `deg_to_rad`, `rad_to_deg` |
| `zeroengine.collision` | `ColliderManager`, `AABBDirection`, `eval_aabb`, `eval_obb`, `intersection_depth`, `resolve_aabb` |
| `zeroengine.animation` | `SpriteAnimation`, `AnimationController`, `AnimOper`, `StateNode`, `StateGroup`, `AnimationNode`, `ParamKind` |
| `zeroengine.engine` | `Engine`, the shared engine and its frame loop |

## What it does not do

The engine opens no window, plays no sound and draws no pixels. Each
rendered frame ends as a list of `DrawCall` objects (texture, source
rectangle, transform matrix, colour) in `Engine.frame`, which is passed to
`Engine.presenter` if you set one. Keyboard and cursor state likewise come
from a callable you provide as `Engine.input_source`. There is no
command-line program; you drive the engine from your own code.

## The frame loop

`Engine.instance()` returns the single shared engine. After
`register(app_name, width, height, full_screen)` and `initialize()`, which
creates fresh scene, time, texture and input managers, `main_loop()` runs
frames until `close()` is called, then calls `release()` and returns 0:

1. `start` – advance the clock, read input from `input_source`, start
   components that have not started yet;
2. `update` – update started, active components, then rebuild the scene's
   collider pairs if it has a collider manager;
3. `late_update` – late-update started components, then test collider pairs;
4. `render` – render started, active components into `frame` and pass it to
   `presenter`;
5. `end_scene` – run end-of-frame hooks, remove destroyed entities and switch
   to a pending scene.

```python
from zeroengine.engine import Engine
from zeroengine.scene import GameObject, Scene
from zeroengine.sprite import Sprite2DRenderer


class TitleScene(Scene):
    def init(self):
        super().init()
        logo = GameObject(self)
        logo.add_component(Sprite2DRenderer).set_texture("images/logo.png")


engine = Engine.instance()
engine.register("Demo", 1280, 720)
engine.initialize()
engine.scene_manager.change_scene(TitleScene())
engine.input_source = lambda: ({"A", 0x25}, (640.0, 360.0))
engine.presenter = lambda draw_calls: engine.close()
engine.main_loop()
```

`SceneManager.change_scene` starts a scene at once when none is running;
otherwise the new scene replaces the current one at the end of the frame.
It raises `TypeError` for anything that is not a `Scene`.

## Scenes, entities and components

`Scene.init()` creates the scene's component and entity-id managers and
registers `Transform` and `Sprite2DRenderer`. Any other component type must
be registered with `register_component` before it is added to an entity.

An `Entity` is created in the scene passed to it, or in the engine's current
scene. A `GameObject` always gets a `Transform` as `transform`:

```python
from zeroengine.physics import RigidBody2D
from zeroengine.scene import GameObject, Scene

scene = Scene()
scene.init()
scene.register_component(RigidBody2D)

player = GameObject(scene)
player.name = "player"
body = player.add_component(RigidBody2D)
assert player.get_component(RigidBody2D) is body
assert scene.find_game_object("player") is player
```

An entity holds at most one component of each type. `Entity.destroy()`
marks it for removal at the end of the frame; a `Transform` whose parent's
owner has been destroyed destroys its own owner too. Lookups that fail
raise `KeyError`.

## Geometry

```python
from zeroengine.geometry import Rect, Vec2, lerp

button = Rect.from_size(120, 40)
on_screen = button.offset(Vec2(600, 320))
on_screen.contains(Vec2(650, 340))   # True
on_screen.width()                    # 120.0

lerp(Vec2(0, 0), Vec2(10, 10), 0.5)  # Vec2(x=5.0, y=5.0)
```

`Rect` keeps integer coordinates, truncating floats. `Rect.contains` is
strict: points on an edge are outside. `lerp` limits its factor to at most 1.

## Input

`InputManager.update(pressed_keys, cursor_pos)` takes the keys held this
frame, as key codes (0–255) or single characters, and the cursor position.
`key_state(key)` compares them with the previous frame and returns
`KeyState.DOWN` (just pressed), `PRESS` (held), `UP` (just released) or
`NONE`.

## Physics and collision

`RigidBody2D.late_update` adds gravity to a body's velocity and moves its
owner by velocity × delta time; a strict body (`is_strict`) is stopped
instead. `BoxCollider` fits itself each update to its owner's transform and
sprite size, so its owner needs a `Sprite2DRenderer`.

To have collisions tested, give the scene a `ColliderManager` and register
`BoxCollider`:

```python
from zeroengine.collision import ColliderManager
from zeroengine.physics import BoxCollider
from zeroengine.scene import Scene

scene = Scene()
scene.collider_manager = ColliderManager(scene)
scene.init()
scene.register_component(BoxCollider)
```

Each frame the manager pairs every box collider with every other one, tests
each pair (an axis-aligned test when neither box is rotated, a
separating-axis test otherwise) and calls `on_collision_enter`,
`on_collision_stay`, `on_collision_exit` — or the `on_trigger_*` variants
when either collider has `is_trigger` set. On a first solid contact the
two owners' `RigidBody2D` velocities are adjusted, so both owners need one.

## Animation state machine

`SpriteAnimation` plays a list of textures at `fps` frames per second,
looping unless `is_loop` is false. `add_textures(root, count)` loads
`root/1.png` to `root/<count>.png`.

An `AnimationController` holds named animation nodes. Transitions from one
node to another are guarded by conditions (`StateNode`, compared with an
`AnimOper`: greater, less, equals, not equals) collected in a `StateGroup`.
A transition whose group has exit time set waits until the current
animation has reached its end; each late update the first eligible target,
by name, whose conditions all hold is entered.

1. create the `SpriteAnimation` objects and give them frames;
2. declare parameters with `add_parameter(key, int | float | bool, value)`
   (or a `ParamKind`, including `ParamKind.TRIGGER`);
3. add nodes with `add_animation_node`;
4. add transitions with `add_state` (and `set_has_exit_time` if needed);
5. choose the first node with `set_entry_node`.

At run time, change parameters with `set_int`, `set_float`, `set_bool` and
`set_trigger`. Unknown nodes or parameters raise `KeyError`, a duplicate
node name `ValueError`. Each render the current frame's texture is set on
the owner's `Sprite2DRenderer`.

## Logging

```python
from zeroengine import logger

logger.info("loaded %d textures", 12)
logger.error("missing file: %s", "stage.png")
logger.set_debug(True)
logger.debug("collider pairs: %d", 6)
```

Every line starts with a `[YYYY-MM-DD hh:mm:ss]` timestamp. Errors go to
standard error, everything else to standard output. Debug output is shown
only while debugging is enabled.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e ".[test]"
pytest
```