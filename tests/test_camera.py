import math
import pytest
import numpy as np
from flyview.api.camera import (
    Camera, CameraUniform, Euler, OPENGL_TO_GPU_MATRIX,
    build_view_projection, forward_vector, look_to_rh, perspective, basis_vectors,
)

def _project(matrix, point):
    clip = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return clip[:3] / clip[3]

@pytest.mark.parametrize("yaw", [0.0, 30.0, 90.0, 135.0, -60.0, 270.0, 725.0])
def test_forward_is_horizontal_at_zero_pitch(yaw):
    forward = forward_vector(0.0, yaw)
    assert abs(forward[1]) < 1e-9
    assert math.isclose(forward[0], math.sin(math.radians(yaw)), abs_tol=1e-9)
    assert math.isclose(forward[2], math.cos(math.radians(yaw)), abs_tol=1e-9)

def test_positive_pitch_looks_down():
    forward = forward_vector(30.0, 0.0)
    assert forward[1] < 0
    assert math.isclose(np.linalg.norm(forward), 1.0)

def test_basis_is_orthonormal():
    forward, right, up = basis_vectors(20.0, 75.0)
    for v in (forward, right, up):
        assert math.isclose(np.linalg.norm(v), 1.0, rel_tol=1e-9)
    assert abs(np.dot(forward, right)) < 1e-9
    assert abs(np.dot(forward, up)) < 1e-9
    assert abs(np.dot(right, up)) < 1e-9

def test_depth_correction_maps_near_to_zero_and_far_to_one():
    znear, zfar = 0.1, 100.0
    proj = perspective(45.0, 1.5, znear, zfar)

    near_clip = _project(proj, (0, 0, -znear))
    far_clip = _project(proj, (0, 0, -zfar))
    assert math.isclose(near_clip[2], -1.0, abs_tol=1e-9)
    assert math.isclose(far_clip[2], 1.0, abs_tol=1e-9)

    corrected = OPENGL_TO_GPU_MATRIX @ proj
    assert math.isclose(_project(corrected, (0, 0, -znear))[2], 0.0, abs_tol=1e-9)
    assert math.isclose(_project(corrected, (0, 0, -zfar))[2], 1.0, abs_tol=1e-6)

def test_look_to_moves_eye_to_origin():
    eye = (1.0, 2.0, 3.0)
    view = look_to_rh(eye, (0.0, 0.0, 1.0))
    assert np.allclose(view @ np.array([1.0, 2.0, 3.0, 1.0]), (0, 0, 0, 1))
    # Right-handed: the viewing direction becomes -Z.
    assert np.allclose(view @ np.array([1.0, 2.0, 4.0, 1.0]), (0, 0, -1, 1))

def test_view_projection_centers_point_ahead():
    cam = Camera(position=(0, 0, -5), direction=(0, 0, 0), aspect=16 / 9)
    matrix = build_view_projection(cam)
    assert matrix.dtype == np.float32
    ndc = _project(matrix.astype(float), (0, 0, 0))
    assert np.allclose(ndc[:2], (0, 0), atol=1e-6)
    assert 0.0 < ndc[2] < 1.0

def test_view_projection_follows_yaw():
    cam = Camera(position=(0, 0, 0), direction=(0, 90, 0), aspect=1.0)
    ndc = _project(build_view_projection(cam).astype(float), (5, 0, 0))
    assert np.allclose(ndc[:2], (0, 0), atol=1e-6)
    assert 0.0 < ndc[2] < 1.0

def test_degenerate_input_propagates_without_error():
    cam = Camera(aspect=0.0)
    matrix = build_view_projection(cam)
    assert not np.all(np.isfinite(matrix))

def test_rotate_is_additive():
    cam = Camera(direction=(10, 20, 0))
    cam.rotate(Euler(5, -30, 0))
    assert cam.direction == Euler(15, -10, 0)
    assert cam.pitch == 15 and cam.yaw == -10 and cam.roll == 0

def test_pose_does_not_clamp_pitch():
    cam = Camera()
    cam.rotate(Euler(120, 0, 0))
    assert cam.pitch == 120

def test_uniform_defaults_to_identity():
    uniform = CameraUniform()
    assert np.array_equal(uniform.view_proj, np.identity(4, dtype='f4'))
    assert len(uniform.to_bytes()) == CameraUniform.NBYTES

def test_uniform_bytes_are_column_major():
    uniform = CameraUniform()
    uniform.update_view_proj(Camera(position=(1, 2, 3), direction=(10, 40, 0)))
    data = np.frombuffer(uniform.to_bytes(), dtype='f4')
    assert len(data) == 16
    # The first four floats are the first column.
    assert np.array_equal(data[:4], uniform.view_proj[:, 0])
    assert np.array_equal(data.reshape(4, 4).T, uniform.view_proj)

def test_uniform_is_recomputed_every_update():
    cam = Camera(position=(0, 0, -5))
    uniform = CameraUniform()
    uniform.update_view_proj(cam)
    first = uniform.view_proj.copy()
    cam.position += (1, 0, 0)
    uniform.update_view_proj(cam)
    assert not np.array_equal(first, uniform.view_proj)
