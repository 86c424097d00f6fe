from .camera import Camera, basis_vectors
from .events import Key, KeyboardInput

DEFAULT_SPEED = 0.05

KEY_BINDINGS = {
    Key.SPACE: 'is_up_pressed',
    Key.LEFT_SHIFT: 'is_down_pressed',
    Key.W: 'is_forward_pressed',
    Key.UP: 'is_forward_pressed',
    Key.S: 'is_backward_pressed',
    Key.DOWN: 'is_backward_pressed',
    Key.A: 'is_left_pressed',
    Key.LEFT: 'is_left_pressed',
    Key.D: 'is_right_pressed',
    Key.RIGHT: 'is_right_pressed',
}

class CameraController:
    """
    Keyboard-driven movement for a free-flying camera.

    Key events only record which directions are held. `tick` then moves the
    camera once per frame along the basis of its current orientation.
    """
    def __init__(self, speed: float = DEFAULT_SPEED):
        """
        Args:
            speed (float, optional): Distance moved per tick, in world units.
        """
        self.speed = speed
        self.is_up_pressed = False
        self.is_down_pressed = False
        self.is_forward_pressed = False
        self.is_backward_pressed = False
        self.is_left_pressed = False
        self.is_right_pressed = False

    def process_input_event(self, event) -> bool:
        """Updates the held flag bound to the event's key. Returns True if the key is bound."""
        if not isinstance(event, KeyboardInput):
            return False
        flag = KEY_BINDINGS.get(event.key)
        if flag is None:
            return False
        setattr(self, flag, event.pressed)
        return True

    def tick(self, camera: Camera):
        """
        Moves `camera` by at most one horizontal and one vertical step.

        Horizontal directions are checked in the order forward, backward,
        right, left and only the first held one applies. Up wins over down.
        """
        forward, right, up = basis_vectors(camera.pitch, camera.yaw)

        if self.is_forward_pressed:
            camera.position += forward * self.speed
        elif self.is_backward_pressed:
            camera.position -= forward * self.speed
        elif self.is_right_pressed:
            camera.position += right * self.speed
        elif self.is_left_pressed:
            camera.position -= right * self.speed

        if self.is_up_pressed:
            camera.position += up * self.speed
        elif self.is_down_pressed:
            camera.position -= up * self.speed

    update_camera = tick
