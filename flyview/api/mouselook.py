import sys
from .camera import Camera, Euler
from .events import GrabMode, CursorGrabError

DEFAULT_SENSITIVITY = 1.0
PITCH_LIMIT = 89.0

class MouseLook:
    """
    Turns absolute cursor positions into camera rotation.

    The cursor is confined to the window instead of read as raw relative
    motion, so deltas are rebuilt from consecutive positions. Entering the
    window resets the baseline so the first move yields no rotation.
    """
    def __init__(self, window, sensitivity: float = DEFAULT_SENSITIVITY, pitch_limit: float = PITCH_LIMIT):
        self.window = window
        self.sensitivity = sensitivity
        self.pitch_limit = pitch_limit
        self.tracked_device = None
        self.last_position = None

    def cursor_entered(self, device_id):
        if self.tracked_device is not None:
            return
        try:
            self.window.set_cursor_grab(GrabMode.CONFINED)
            print("INFO: Cursor confined to window. Press Left Alt to release.")
        except CursorGrabError as e:
            print(f"WARNING: Could not confine cursor: {e}", file=sys.stderr)
        self.tracked_device = device_id
        self.last_position = None

    def cursor_left(self, device_id):
        # Confinement is only released explicitly, see `release`.
        pass

    def cursor_moved(self, device_id, position, camera: Camera):
        """Returns the additive rotation for this move, or None for untracked devices."""
        if self.tracked_device is None or device_id != self.tracked_device:
            return None

        old_x, old_y = self.last_position if self.last_position is not None else position
        new_x, new_y = position
        self.last_position = (new_x, new_y)

        yaw_delta = (new_x - old_x) * -self.sensitivity
        pitch_delta = (new_y - old_y) * self.sensitivity

        # An out-of-range pitch is never pulled in, only kept from going further out.
        lower = min(-self.pitch_limit, camera.pitch)
        upper = max(self.pitch_limit, camera.pitch)
        target_pitch = min(max(camera.pitch + pitch_delta, lower), upper)
        return Euler(target_pitch - camera.pitch, yaw_delta, 0.0)

    def release(self):
        """Releases the cursor confinement. Mouse-look keeps tracking the device."""
        try:
            self.window.set_cursor_grab(GrabMode.NONE)
        except CursorGrabError as e:
            print(f"WARNING: Could not release cursor: {e}", file=sys.stderr)
