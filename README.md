# enginecore

A small 2D game engine core in plain Python, with no third-party
dependencies. It provides:

- `Vector2`, `Vector3` and `Vertex` value types (`enginecore.vectors`)
- game objects holding at most one component of each kind: `Transform`,
  `Rigidbody`, `BoxCollider2D`, `Mesh` and `Script`
  (`enginecore.components`), plus `read_mesh_file` / `write_mesh_file`
  for the binary mesh format
- a `Physics` step that integrates rigidbodies (with optional gravity of
  9.81) and pushes apart overlapping axis-aligned boxes, bouncing their
  velocities by each body's restitution (`enginecore.physics`)
- an observer-based event system: `Event`, `EventName`, `EventType`,
  `Key`, `Observer` and `Subject` (`enginecore.events`)
- `ScriptBehaviour`, the base class for user scripts, and `Controller`,
  a script that moves its rigidbody with W/A/S/D
  (`enginecore.behaviour`, `enginecore.controller`)
- a binary scene format: `write_scene` / `read_scene` on streams and
  `save_scene` / `load_scene` on files (`enginecore.serialization`)
- an orthographic `Camera` and the `ortho` projection helper
  (`enginecore.camera`)
- `Application`, which owns the game objects and runs scripts and physics
  frame by frame (`enginecore.application`)
- coloured console logging with `log` and `LogLevel` (`enginecore.logger`)

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from enginecore.application import Application
from enginecore.components import BoxCollider2D, Rigidbody, Transform
from enginecore.vectors import Vector3

app = Application()
ball = app.create_game_object("Ball")
ball.add_component(Rigidbody).gravity = True
ball.add_component(BoxCollider2D)

floor = app.create_game_object("Floor")
floor.get_component(Transform).position = Vector3(0, -3, 0)
floor.add_component(Rigidbody)
floor.add_component(BoxCollider2D).stationary = True

app.run(frames=120, delta_time=1 / 60)
print(ball.get_component(Transform).position)
```

`add_component` returns the component of that kind now on the object, so
adding a kind twice gives back the existing one.

Input is fed in through `Application.handle_key(key)`. The event goes to
every script's `on_event`; `Key.ESC` makes `run` stop.

```python
from enginecore.components import Script
from enginecore.controller import Controller
from enginecore.events import Key

player = app.create_game_object("Player")
player.add_component(Rigidbody)
controller = Controller()
controller.attach(player)
player.add_component(Script).set_behaviour(controller)

app.handle_key(Key.D)
app.step(1 / 60)  # the player moves right at speed 5 for this frame
```

Scenes are written to and read from binary files. Script components store
only their name; when reading, `script_loader` is called with that name and
may return a behaviour to install (or `None`):

```python
from enginecore.serialization import load_scene, save_scene

save_scene(app.game_objects, "level.cn")
objects = load_scene("level.cn", script_loader=None)
```

The application's default loader knows only the built-in `Controller`.

## Command line

The `enginecore` command creates an `Application`, optionally loads a
scene, runs the main loop and optionally saves the scene afterwards:

```
enginecore --scene level.cn --frames 600 --delta-time 0.016 --save out.cn
```

- `--scene PATH`: scene file to load
- `--frames N`: number of frames to run; without it the loop runs until
  interrupted with Ctrl+C
- `--delta-time SECONDS`: fixed time step; without it each frame uses the
  wall-clock time since the previous one
- `--save PATH`: write the scene here when the loop ends

## What it does not do

There is no window, no rendering and no editor. `Mesh` holds vertex, index
and colour data and reads and writes mesh files, but nothing draws it, and
`Camera` only computes a projection matrix. Keyboard input is not read from
any device; keys reach the engine only through `handle_key`. Scripts are
Python `ScriptBehaviour` subclasses supplied by a loader function; script
source files are neither generated nor compiled.