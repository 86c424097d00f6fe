import numpy as np
import pytest
from flyview.api.camera import Camera, basis_vectors, forward_vector
from flyview.api.controller import CameraController
from flyview.api.events import Key, KeyboardInput, CursorMoved

def press(controller, key):
    return controller.process_input_event(KeyboardInput(key, True))

def release(controller, key):
    return controller.process_input_event(KeyboardInput(key, False))

def test_forward_moves_by_speed_along_forward():
    controller = CameraController(speed=0.5)
    cam = Camera(direction=(20, 35, 0))
    press(controller, Key.W)
    controller.tick(cam)
    assert np.allclose(cam.position, 0.5 * forward_vector(20, 35))

def test_forward_wins_over_right():
    forward_only = Camera(direction=(10, 60, 0))
    both = Camera(direction=(10, 60, 0))

    c1 = CameraController(speed=1.0)
    press(c1, Key.W)
    c1.tick(forward_only)

    c2 = CameraController(speed=1.0)
    press(c2, Key.W)
    press(c2, Key.D)
    c2.tick(both)

    assert np.allclose(both.position, forward_only.position)

@pytest.mark.parametrize("held, expected_sign, axis", [
    ([Key.S, Key.D], -1, 0),
    ([Key.D, Key.A], 1, 1),
    ([Key.A], -1, 1),
])
def test_horizontal_priority_order(held, expected_sign, axis):
    controller = CameraController(speed=1.0)
    cam = Camera(direction=(0, 30, 0))
    for key in held:
        press(controller, key)
    controller.tick(cam)
    forward, right, _ = basis_vectors(0, 30)
    expected = expected_sign * (forward, right)[axis]
    assert np.allclose(cam.position, expected)

def test_up_wins_over_down_and_combines_with_horizontal():
    controller = CameraController(speed=1.0)
    cam = Camera(direction=(0, 90, 0))
    press(controller, Key.SPACE)
    press(controller, Key.LEFT_SHIFT)
    press(controller, Key.RIGHT)
    controller.tick(cam)
    # At yaw 90: right is -Z and up is +Y.
    assert np.allclose(cam.position, (0, 1, -1))

def test_down_moves_along_negative_up():
    controller = CameraController(speed=2.0)
    cam = Camera()
    press(controller, Key.LEFT_SHIFT)
    controller.tick(cam)
    assert np.allclose(cam.position, (0, -2, 0))

def test_no_flags_no_motion():
    cam = Camera(position=(1, 2, 3))
    CameraController().tick(cam)
    assert np.allclose(cam.position, (1, 2, 3))

def test_press_release_twice_restores_flag():
    controller = CameraController()
    for _ in range(2):
        assert press(controller, Key.UP) is True
        assert controller.is_forward_pressed is True
        assert release(controller, Key.UP) is True
        assert controller.is_forward_pressed is False

def test_unmapped_key_is_not_consumed():
    controller = CameraController()
    assert press(controller, Key.UNKNOWN) is False
    assert press(controller, Key.ESCAPE) is False
    assert not any([
        controller.is_up_pressed, controller.is_down_pressed,
        controller.is_forward_pressed, controller.is_backward_pressed,
        controller.is_left_pressed, controller.is_right_pressed,
    ])

def test_non_keyboard_event_is_not_consumed():
    controller = CameraController()
    assert controller.process_input_event(CursorMoved(0, (1.0, 2.0))) is False

@pytest.mark.parametrize("key, flag", [
    (Key.W, 'is_forward_pressed'), (Key.UP, 'is_forward_pressed'),
    (Key.S, 'is_backward_pressed'), (Key.DOWN, 'is_backward_pressed'),
    (Key.A, 'is_left_pressed'), (Key.LEFT, 'is_left_pressed'),
    (Key.D, 'is_right_pressed'), (Key.RIGHT, 'is_right_pressed'),
    (Key.SPACE, 'is_up_pressed'), (Key.LEFT_SHIFT, 'is_down_pressed'),
])
def test_bindings(key, flag):
    controller = CameraController()
    press(controller, key)
    assert getattr(controller, flag) is True
