import math

import numpy as np
import pytest

from rubikscube.camera import Camera


def _project(matrix, point):
    v = matrix @ np.array([*point, 1.0])
    return v[:3] / v[3]


def _transform(matrix, point):
    return (matrix @ np.array([*point, 1.0]))[:3]


def test_new_camera_has_identity_matrices():
    cam = Camera()
    assert np.allclose(cam.projection, np.identity(4))
    assert np.allclose(cam.view, np.identity(4))


def test_orthographic_maps_box_to_ndc():
    cam = Camera()
    cam.set_orthographic_projection(-2.0, 3.0, -1.0, 4.0, 0.5, 10.0)
    assert np.allclose(_project(cam.projection, (-2.0, -1.0, 0.5)), [-1.0, -1.0, 0.0])
    assert np.allclose(_project(cam.projection, (3.0, 4.0, 10.0)), [1.0, 1.0, 1.0])


def test_perspective_depth_range():
    cam = Camera()
    cam.set_perspective_projection(1.0, 1.5, 0.1, 10.0)
    assert _project(cam.projection, (0.0, 0.0, 0.1))[2] == pytest.approx(0.0, abs=1e-9)
    assert _project(cam.projection, (0.0, 0.0, 10.0))[2] == pytest.approx(1.0)


def test_perspective_field_of_view_edges():
    fovy, aspect, z = 1.0, 1.5, 2.0
    cam = Camera()
    cam.set_perspective_projection(fovy, aspect, 0.1, 10.0)
    half_height = z * math.tan(fovy / 2)
    ndc = _project(cam.projection, (half_height * aspect, half_height, z))
    assert ndc[0] == pytest.approx(1.0)
    assert ndc[1] == pytest.approx(1.0)


def test_perspective_w_is_depth():
    cam = Camera()
    cam.set_perspective_projection(0.8, 1.0, 0.1, 10.0)
    clip = cam.projection @ np.array([0.3, -0.2, 4.0, 1.0])
    assert clip[3] == pytest.approx(4.0)


def test_perspective_rejects_epsilon_aspect():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.set_perspective_projection(1.0, float(np.finfo(np.float32).eps), 0.1, 10.0)


def test_view_direction_moves_position_to_origin_and_looks_down_z():
    position = (1.0, 2.0, 3.0)
    direction = np.array([0.5, -1.0, 2.0])
    cam = Camera()
    cam.set_view_direction(position, direction)
    assert np.allclose(_transform(cam.view, position), 0.0)
    ahead = _transform(cam.view, np.array(position) + direction)
    assert np.allclose(ahead, [0.0, 0.0, np.linalg.norm(direction)])


def test_view_direction_rotation_is_orthonormal():
    cam = Camera()
    cam.set_view_direction((0.0, 0.0, 0.0), (1.0, 2.0, -0.5))
    rot = cam.view[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3))


def test_view_direction_default_up():
    a, b = Camera(), Camera()
    a.set_view_direction((1.0, 0.0, 0.0), (0.2, 0.3, 1.0))
    b.set_view_direction((1.0, 0.0, 0.0), (0.2, 0.3, 1.0), (0.0, -1.0, 0.0))
    assert np.allclose(a.view, b.view)


def test_view_target_matches_view_direction():
    position = np.array([-1.0, -2.0, 2.0])
    target = np.array([0.0, 0.0, 2.5])
    a, b = Camera(), Camera()
    a.set_view_target(position, target)
    b.set_view_direction(position, target - position)
    assert np.allclose(a.view, b.view)


def test_view_yxz_without_rotation_is_translation():
    position = (0.5, -1.0, 2.0)
    cam = Camera()
    cam.set_view_yxz(position, (0.0, 0.0, 0.0))
    assert np.allclose(cam.view[:3, :3], np.identity(3))
    assert np.allclose(_transform(cam.view, position), 0.0)


def test_view_yxz_is_proper_rotation():
    cam = Camera()
    cam.set_view_yxz((0.0, 0.0, -2.5), (0.4, 1.2, -0.3))
    rot = cam.view[:3, :3]
    assert np.allclose(rot @ rot.T, np.identity(3))
    assert np.linalg.det(rot) == pytest.approx(1.0)
    assert np.allclose(_transform(cam.view, (0.0, 0.0, -2.5)), 0.0)


def test_matrix_properties_are_copies():
    cam = Camera()
    cam.set_perspective_projection(1.0, 1.0, 0.1, 10.0)
    proj = cam.projection
    proj[:] = 0.0
    assert cam.projection[3, 2] == pytest.approx(1.0)