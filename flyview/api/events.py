from enum import Enum
from dataclasses import dataclass
from typing import Tuple

# GLFW reports a single pointer, so every cursor event carries this id.
POINTER_DEVICE_ID = 0

class Key(Enum):
    """Physical keys the viewer binds. Everything else arrives as UNKNOWN."""
    W = 'w'
    A = 'a'
    S = 's'
    D = 'd'
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'
    SPACE = 'space'
    LEFT_SHIFT = 'left_shift'
    LEFT_ALT = 'left_alt'
    ESCAPE = 'escape'
    UNKNOWN = 'unknown'

class GrabMode(Enum):
    NONE = 'none'
    CONFINED = 'confined'

class CursorGrabError(RuntimeError):
    """Raised when the window system cannot apply a cursor grab mode."""


@dataclass(frozen=True)
class CloseRequested:
    pass

@dataclass(frozen=True)
class KeyboardInput:
    key: Key
    pressed: bool

@dataclass(frozen=True)
class CursorEntered:
    device_id: int

@dataclass(frozen=True)
class CursorLeft:
    device_id: int

@dataclass(frozen=True)
class CursorMoved:
    device_id: int
    position: Tuple[float, float]

@dataclass(frozen=True)
class Resized:
    size: Tuple[int, int]

@dataclass(frozen=True)
class ScaleFactorChanged:
    scale_factor: float

@dataclass(frozen=True)
class RedrawRequested:
    pass
