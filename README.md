# roflocraft

A small first-person block world. A flat grid of unit cubes is generated
around the origin. The player falls onto it under gravity, walks with the
keyboard and looks around with the mouse. The player is an axis-aligned box
that collides with the cubes. On a hit it is pushed back along the axis of
least overlap, and its speed on that axis is set to zero.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
roflocraft --shader-dir path/to/shaders
```

The program loads `vertex_shader.glsl` and `fragment_shader.glsl` from the
directory given by `--shader-dir`. Without the option it looks in
`shaders/` under the current directory. If either file is missing, or the
shaders fail to compile or link, it prints an error and exits with status 1.

The program asks for an OpenGL 3.3 window of 800×600 and captures the
cursor. The shaders must meet these requirements:

- The vertex shader takes the cube's vertex position as a `vec3` attribute
  at location 0.
- It may declare the `mat4` uniforms `modelM`, `viewM` and `projM`. The
  program sets each uniform that the shader declares.

Controls:

- `W` / `S`: walk forward and back along the direction you face, in the
  horizontal plane
- `A` / `D`: strafe left and right
- mouse: look around (pitch is clamped to ±89°)

The world steps at a fixed 1/60 s per tick.

## Using the pieces

The simulation runs without a window, so you can drive it from code:

```python
from roflocraft.grid import Grid
from roflocraft.player import Player
from roflocraft.world import World

grid = Grid.flat(5, 5)
world = World([grid], Player((0.0, 5.0, 0.0)))

for _ in range(120):
    world.update(1 / 60)

print(world.player.position)
```

Module overview:

- `roflocraft.cube`: `Cube`, a positioned box.
  - `model_matrix()` returns its 4×4 translation.
  - `draw(program)` renders it with a linked pyglet shader program.
- `roflocraft.camera`: `Camera`, with `handle_mouse(xpos, ypos)` and
  `update()`. Also `front_vector(yaw, pitch)` and
  `look_at(eye, target, up)`.
- `roflocraft.grid`: `Grid`, a list of cubes. `Grid.flat(width, length)`
  builds a layer at height zero. Negative dimensions raise `ValueError`.
- `roflocraft.player`: `Player` and `CollisionInfo`.
  - `Player` offers `handle_key`, `update(dt, grids)`, `check_collision`,
    `detect_collision`, `separate_collision` and `resolve_impulse`.
  - `KeyAction` gives the press, release and repeat codes that
    `handle_key` takes.
- `roflocraft.world`: `World`, which steps its player against its grids.
- `roflocraft.shaders`: `load_shader_source`, `create_shader(path,
  shader_type)`, `create_shader_program(vertex_path, fragment_path)` and
  `ShaderError`. Each function raises `ShaderError` when a file cannot be
  read or a shader fails to compile or link.
- `roflocraft.app`: `perspective(fov_degrees, aspect, near, far)` and
  `main()`.

## What it does not do

- No GLSL shader files come with the package. You must supply your own.
- The world is a single flat 5×5 grid. You cannot place or remove blocks.
- The player cannot jump, and the world is not saved.