import pytest
from unittest.mock import MagicMock
from flyview.api.camera import Camera

@pytest.fixture
def camera():
    return Camera(position=(0, 0, 0), aspect=800 / 600)

@pytest.fixture
def fake_window():
    """Stands in for the GLFW window: no events, fixed framebuffer size."""
    window = MagicMock()
    window.inner_size.return_value = (800, 600)
    window.poll.return_value = []
    return window

@pytest.fixture
def fake_state(fake_window, camera):
    """Render collaborator that consumes no input and renders successfully."""
    state = MagicMock()
    state.window.return_value = fake_window
    state.input.return_value = False
    state.camera = camera
    state.size = (800, 600)
    return state
