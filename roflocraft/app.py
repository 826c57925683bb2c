"""Window, input handling and the render loop."""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

import numpy as np

from roflocraft.camera import HEIGHT, WIDTH
from roflocraft.grid import Grid
from roflocraft.player import KeyAction, Player
from roflocraft.shaders import ShaderError, create_shader_program
from roflocraft.world import World

TITLE = "ROFLO CRAFT WWW"
FRAME_TIME = 1.0 / 60
FIELD_OF_VIEW = 90.0
NEAR_PLANE = 0.1
FAR_PLANE = 1000.0
CLEAR_COLOR = (0.1, 0.6, 0.8, 1.0)


def perspective(fov_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection matrix mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = focal / aspect
    matrix[1, 1] = focal
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def _key_code(symbol: int) -> int:
    """Map a window key symbol to the upper-case character code the player uses."""
    if ord("a") <= symbol <= ord("z"):
        return symbol - ord("a") + ord("A")
    return symbol


def _upload_matrix(program, name: str, matrix: np.ndarray) -> None:
    """Set a mat4 uniform in column-major order; missing uniforms are ignored."""
    if name not in program.uniforms:
        return
    values = np.asarray(matrix, dtype=np.float32).flatten(order="F")
    program[name] = tuple(float(value) for value in values)


def main(argv=None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="roflocraft", description="A small block world.")
    parser.add_argument(
        "--shader-dir",
        type=Path,
        default=Path("shaders"),
        help="directory holding vertex_shader.glsl and fragment_shader.glsl",
    )
    args = parser.parse_args(argv)

    vertex_path = args.shader_dir / "vertex_shader.glsl"
    fragment_path = args.shader_dir / "fragment_shader.glsl"
    for path in (vertex_path, fragment_path):
        if not path.is_file():
            print(f"shader file not found: {path}", file=sys.stderr)
            return 1

    import pyglet
    from pyglet import gl

    config = gl.Config(major_version=3, minor_version=3, depth_size=24, double_buffer=True)
    try:
        window = pyglet.window.Window(WIDTH, HEIGHT, TITLE, config=config)
    except pyglet.window.NoSuchConfigException as exc:
        print(f"could not create window: {exc}", file=sys.stderr)
        return 1

    try:
        program = create_shader_program(vertex_path, fragment_path)
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        window.close()
        return 1

    window.set_exclusive_mouse(True)
    gl.glViewport(0, 0, *window.get_framebuffer_size())
    gl.glEnable(gl.GL_DEPTH_TEST)

    world = World([Grid.flat(5, 5)], Player((0.0, 5.0, 0.0)))
    projection = perspective(FIELD_OF_VIEW, WIDTH / HEIGHT, NEAR_PLANE, FAR_PLANE)
    cursor = [float(WIDTH // 2), float(HEIGHT // 2)]

    @window.event
    def on_key_press(symbol, modifiers):
        world.player.handle_key(_key_code(symbol), KeyAction.PRESS)

    @window.event
    def on_key_release(symbol, modifiers):
        world.player.handle_key(_key_code(symbol), KeyAction.RELEASE)

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        # Screen y grows downward for the camera, upward for the window.
        cursor[0] += dx
        cursor[1] -= dy
        world.player.camera.handle_mouse(cursor[0], cursor[1])

    @window.event
    def on_draw():
        gl.glClearColor(*CLEAR_COLOR)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        program.use()
        _upload_matrix(program, "viewM", world.player.camera.view_matrix)
        _upload_matrix(program, "projM", projection)
        for grid in world.grids:
            for cube in grid.cubes:
                program.use()
                _upload_matrix(program, "modelM", cube.model_matrix())
                cube.draw(program)

    pyglet.clock.schedule_interval(lambda _elapsed: world.update(FRAME_TIME), FRAME_TIME)
    pyglet.app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())