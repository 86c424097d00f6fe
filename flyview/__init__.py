from .api.camera import Camera, CameraUniform, Euler, build_view_projection
from .api.controller import CameraController
from .api.mouselook import MouseLook
from .api.io import Mesh, load_model
from .api.loop import EventLoop
from .api.viewer import view
