import numpy as np
import pytest

from roflocraft.app import _key_code, main, perspective


def _project(matrix, point):
    clip = matrix @ np.array([*point, 1.0])
    return clip[:3] / clip[3]


def test_perspective_near_plane_maps_to_minus_one():
    proj = perspective(90.0, 800 / 600, 0.1, 1000.0)
    ndc = _project(proj, (0.0, 0.0, -0.1))
    assert ndc[2] == pytest.approx(-1.0)


def test_perspective_far_plane_maps_to_plus_one():
    proj = perspective(90.0, 800 / 600, 0.1, 1000.0)
    ndc = _project(proj, (0.0, 0.0, -1000.0))
    assert ndc[2] == pytest.approx(1.0)


def test_perspective_frustum_edge_maps_to_unit_square():
    # With a 90 degree field of view the frustum edge at depth d lies at height d.
    proj = perspective(90.0, 1.0, 0.1, 100.0)
    ndc = _project(proj, (5.0, 5.0, -5.0))
    assert ndc[0] == pytest.approx(1.0)
    assert ndc[1] == pytest.approx(1.0)


def test_perspective_aspect_scales_x_only():
    wide = perspective(60.0, 2.0, 1.0, 10.0)
    square = perspective(60.0, 1.0, 1.0, 10.0)
    assert wide[0, 0] == pytest.approx(square[0, 0] / 2.0)
    assert wide[1, 1] == pytest.approx(square[1, 1])


def test_perspective_w_row_takes_negated_depth():
    proj = perspective(45.0, 1.5, 0.5, 50.0)
    assert list(proj[3]) == [0.0, 0.0, -1.0, 0.0]


def test_perspective_depth_is_monotonic():
    proj = perspective(90.0, 1.0, 0.1, 1000.0)
    depths = [_project(proj, (0.0, 0.0, -z))[2] for z in (0.2, 1.0, 10.0, 500.0)]
    assert depths == sorted(depths)


def test_perspective_zero_aspect_raises():
    with pytest.raises(ValueError):
        perspective(90.0, 0.0, 0.1, 100.0)


def test_perspective_equal_planes_raises():
    with pytest.raises(ValueError):
        perspective(90.0, 1.0, 5.0, 5.0)


@pytest.mark.parametrize("letter", ["w", "a", "s", "d"])
def test_key_code_maps_letters_to_upper_case(letter):
    assert _key_code(ord(letter)) == ord(letter.upper())


def test_key_code_leaves_other_symbols():
    assert _key_code(ord(" ")) == ord(" ")


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--shader-dir" in capsys.readouterr().out


def test_main_missing_shaders_fails(tmp_path, capsys):
    assert main(["--shader-dir", str(tmp_path)]) == 1
    assert "vertex_shader.glsl" in capsys.readouterr().err


def test_main_missing_fragment_shader_fails(tmp_path, capsys):
    (tmp_path / "vertex_shader.glsl").write_text("void main() {}", encoding="utf-8")
    assert main(["--shader-dir", str(tmp_path)]) == 1
    assert "fragment_shader.glsl" in capsys.readouterr().err