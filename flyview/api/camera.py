import math
from collections import namedtuple
import numpy as np

DEFAULT_FOVY = 45.0
DEFAULT_ZNEAR = 0.1
DEFAULT_ZFAR = 100.0

WORLD_UP = np.array([0.0, 1.0, 0.0])

# Remaps clip depth from [-1, 1] to [0, 1]: z' = 0.5 * z + 0.5 * w.
OPENGL_TO_GPU_MATRIX = np.array([
    [1.0, 0.0, 0.0, 0.0],
    [0.0, 1.0, 0.0, 0.0],
    [0.0, 0.0, 0.5, 0.5],
    [0.0, 0.0, 0.0, 1.0],
], dtype=float)

Euler = namedtuple('Euler', ['pitch', 'yaw', 'roll'])
Euler.__doc__ = "Pitch, yaw and roll angles in degrees."


def _normalize(v):
    with np.errstate(divide='ignore', invalid='ignore'):
        return v / np.linalg.norm(v)

def forward_vector(pitch: float, yaw: float) -> np.ndarray:
    """Unit view direction for pitch/yaw given in degrees."""
    p, y = math.radians(pitch), math.radians(yaw)
    return _normalize(np.array([math.cos(p) * math.sin(y), -math.sin(p), math.cos(p) * math.cos(y)]))

def right_vector(yaw: float) -> np.ndarray:
    y = math.radians(yaw)
    return _normalize(np.array([math.cos(y), 0.0, -math.sin(y)]))

def basis_vectors(pitch: float, yaw: float):
    """Returns (forward, right, up) for the given orientation."""
    forward = forward_vector(pitch, yaw)
    right = right_vector(yaw)
    return forward, right, np.cross(forward, right)

def look_to_rh(eye, direction, up=WORLD_UP) -> np.ndarray:
    """Right-handed view matrix looking from `eye` along `direction`."""
    eye = np.asarray(eye, dtype=float)
    f = _normalize(np.asarray(direction, dtype=float))
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    return np.array([
        [s[0], s[1], s[2], -np.dot(eye, s)],
        [u[0], u[1], u[2], -np.dot(eye, u)],
        [-f[0], -f[1], -f[2], np.dot(eye, f)],
        [0.0, 0.0, 0.0, 1.0],
    ])

def perspective(fovy: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    """Right-handed perspective matrix with [-1, 1] clip depth. `fovy` is in degrees."""
    fovy, aspect, znear, zfar = np.float64(fovy), np.float64(aspect), np.float64(znear), np.float64(zfar)
    with np.errstate(divide='ignore', invalid='ignore'):
        f = 1.0 / np.tan(np.radians(fovy) / 2.0)
        return np.array([
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (zfar + znear) / (znear - zfar), (2.0 * zfar * znear) / (znear - zfar)],
            [0.0, 0.0, -1.0, 0.0],
        ])


class Camera:
    """A free-flying camera: a pose plus the perspective frustum."""
    def __init__(self, position=(0.0, 0.0, 0.0), direction=(0.0, 0.0, 0.0), aspect=16 / 9,
                 fovy=DEFAULT_FOVY, znear=DEFAULT_ZNEAR, zfar=DEFAULT_ZFAR):
        """
        Initializes the camera.

        Args:
            position (tuple, optional): World-space position. Defaults to the origin.
            direction (tuple, optional): (pitch, yaw, roll) in degrees. Yaw 0 looks
                                         down +Z; positive pitch looks down.
            aspect (float, optional): Width over height of the viewport.
            fovy (float, optional): Vertical field of view in degrees. Defaults to 45.
            znear (float, optional): Near clip plane distance.
            zfar (float, optional): Far clip plane distance.
        """
        self.position = np.array(position, dtype=float)
        self.direction = Euler(*(float(a) for a in direction))
        self.aspect = aspect
        self.fovy = fovy
        self.znear = znear
        self.zfar = zfar

    @property
    def pitch(self):
        return self.direction.pitch

    @property
    def yaw(self):
        return self.direction.yaw

    @property
    def roll(self):
        return self.direction.roll

    def rotate(self, delta: Euler):
        """Adds `delta` to the current orientation."""
        self.direction = Euler(
            self.direction.pitch + delta.pitch,
            self.direction.yaw + delta.yaw,
            self.direction.roll + delta.roll,
        )

    def __repr__(self):
        return f"Camera(position={self.position.tolist()}, direction={tuple(self.direction)})"


def build_view_projection(camera: Camera) -> np.ndarray:
    """
    Builds the view-projection matrix for `camera`.

    The result is in the [0, 1] clip depth convention expected by the
    uniform record. Degenerate input (pitch at +-90, zero aspect) is not
    validated and yields NaN or inf entries.
    """
    forward = forward_vector(camera.pitch, camera.yaw)
    view = look_to_rh(camera.position, forward, WORLD_UP)
    proj = perspective(camera.fovy, camera.aspect, camera.znear, camera.zfar)
    with np.errstate(invalid='ignore', over='ignore'):
        return (OPENGL_TO_GPU_MATRIX @ proj @ view).astype('f4')


class CameraUniform:
    """The view-projection matrix laid out for a std140 `mat4` uniform block."""
    NBYTES = 64

    def __init__(self):
        self.view_proj = np.identity(4, dtype='f4')

    def update_view_proj(self, camera: Camera):
        self.view_proj = build_view_projection(camera)

    def to_bytes(self) -> bytes:
        """Column-major float32 bytes, no padding."""
        return self.view_proj.astype('f4').tobytes(order='F')
