import numpy as np
import pytest

from roflocraft.cube import Cube
from roflocraft.grid import Grid
from roflocraft.player import MOVE_SPEED, KeyAction, Player


def _near_cube():
    return Cube((2, 2, 2))


def _far_cube():
    return Cube((50, 50, 50))


def test_initial_state():
    player = Player((0, 5, 0))
    assert np.allclose(player.speed, np.zeros(3))
    assert np.allclose(player.acceleration, [0, -9.8, 0])
    assert np.allclose(player.camera.position, player.position)
    assert np.allclose(player.size, [1, 2, 1])


def test_handle_key_press_and_release():
    player = Player((0, 0, 0))
    player.handle_key(ord("W"), KeyAction.PRESS)
    assert ord("W") in player.pressed
    player.handle_key(ord("W"), KeyAction.REPEAT)
    assert ord("W") in player.pressed
    player.handle_key(ord("W"), KeyAction.RELEASE)
    assert ord("W") not in player.pressed


def test_gravity_without_ground():
    player = Player((0, 5, 0))
    dt = 1 / 60
    player.update(dt, [])
    assert np.allclose(player.position, [0, 5, 0])
    assert player.speed[1] == pytest.approx(-9.8 * dt)
    player.update(dt, [])
    assert player.position[1] < 5


def test_forward_movement_is_horizontal():
    player = Player((0, 5, 0))
    player.handle_key(ord("W"), KeyAction.PRESS)
    player.update(0.0, [])
    moved = player.position - np.array([0, 5, 0])
    assert np.linalg.norm(moved) == pytest.approx(MOVE_SPEED)
    assert moved[1] == pytest.approx(0.0)
    assert np.dot(moved, player.camera.direction) > 0


def test_strafe_keys_are_opposite():
    left = Player((0, 0, 0))
    right = Player((0, 0, 0))
    left.handle_key(ord("A"), KeyAction.PRESS)
    right.handle_key(ord("D"), KeyAction.PRESS)
    left.update(0.0, [])
    right.update(0.0, [])
    assert np.allclose(left.position, -right.position)


def test_camera_follows_player():
    player = Player((0, 5, 0))
    player.handle_key(ord("S"), KeyAction.PRESS)
    player.update(0.0, [])
    assert np.allclose(player.camera.position, player.position)


def test_detect_collision_none_for_empty_list():
    assert Player((0, 0, 0)).detect_collision([]) is None


def test_detect_collision_none_for_far_cube():
    assert Player((2, 2, 2)).detect_collision([_far_cube()]) is None


def test_detect_collision_finds_overlapping_cube():
    player = Player((2, 2, 2))
    info = player.detect_collision([_far_cube(), _near_cube()])
    assert info is not None
    assert info.index == 1
    assert info.axis in (0, 1, 2)
    squares = info.overlap ** 2
    assert squares[info.axis] == pytest.approx(squares.min(), abs=0.01)


def test_separate_collision_moves_along_axis_only():
    player = Player((2, 2, 2))
    info = player.detect_collision([_near_cube()])
    before = player.position.copy()
    player.separate_collision(info)
    for axis in range(3):
        if axis == info.axis:
            assert player.position[axis] == pytest.approx(before[axis] - info.overlap[axis])
        else:
            assert player.position[axis] == before[axis]


def test_resolve_impulse_zeroes_axis_speed():
    player = Player((2, 2, 2))
    player.speed = np.array([1.0, -2.0, 3.0])
    info = player.detect_collision([_near_cube()])
    player.resolve_impulse(info)
    assert player.speed[info.axis] == 0.0
    assert np.count_nonzero(player.speed) == 2


def test_check_collision_with_grid():
    player = Player((2, 2, 2))
    player.speed = np.array([1.0, 1.0, 1.0])
    info = player.detect_collision([_near_cube()])
    before = player.position.copy()
    player.check_collision([Grid([_near_cube()])])
    assert player.speed[info.axis] == 0.0
    assert player.position[info.axis] == pytest.approx(before[info.axis] - info.overlap[info.axis])