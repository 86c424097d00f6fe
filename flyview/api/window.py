from .events import (
    Key, GrabMode, CursorGrabError, POINTER_DEVICE_ID,
    CloseRequested, KeyboardInput, CursorEntered, CursorLeft, CursorMoved,
    Resized, ScaleFactorChanged, RedrawRequested,
)

DEFAULT_TITLE = "flyview (Left Alt to release mouse)"

_GLFW_KEYS = {
    'KEY_W': Key.W, 'KEY_A': Key.A, 'KEY_S': Key.S, 'KEY_D': Key.D,
    'KEY_UP': Key.UP, 'KEY_DOWN': Key.DOWN, 'KEY_LEFT': Key.LEFT, 'KEY_RIGHT': Key.RIGHT,
    'KEY_SPACE': Key.SPACE, 'KEY_LEFT_SHIFT': Key.LEFT_SHIFT,
    'KEY_LEFT_ALT': Key.LEFT_ALT, 'KEY_ESCAPE': Key.ESCAPE,
}

# CURSOR_CAPTURED needs GLFW 3.4.
_GLFW_GRAB_MODES = {
    GrabMode.NONE: 'CURSOR_NORMAL',
    GrabMode.CONFINED: 'CURSOR_CAPTURED',
}

def translate_key(glfw_key) -> Key:
    import glfw
    for name, key in _GLFW_KEYS.items():
        if getattr(glfw, name) == glfw_key:
            return key
    return Key.UNKNOWN


class Window:
    """
    A GLFW window that queues its input as window events.

    GLFW delivers input through callbacks during `glfw.poll_events()`. The
    callbacks here only append events to a queue, which `poll` drains so the
    event loop sees them in arrival order.
    """
    def __init__(self, width=1280, height=720, title=DEFAULT_TITLE):
        import glfw
        if not glfw.init(): raise RuntimeError("Could not initialize GLFW")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, True)

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle: glfw.terminate(); raise RuntimeError("Could not create GLFW window.")
        glfw.make_context_current(self.handle)
        glfw.swap_interval(1)

        self.events = []
        self.redraw_requested = False
        self._install_callbacks()

    def _install_callbacks(self):
        import glfw
        glfw.set_window_close_callback(self.handle, self._on_close)
        glfw.set_key_callback(self.handle, self._on_key)
        glfw.set_cursor_enter_callback(self.handle, self._on_cursor_enter)
        glfw.set_cursor_pos_callback(self.handle, self._on_cursor_pos)
        glfw.set_framebuffer_size_callback(self.handle, self._on_framebuffer_size)
        glfw.set_window_content_scale_callback(self.handle, self._on_content_scale)

    def _on_close(self, handle):
        self.events.append(CloseRequested())

    def _on_key(self, handle, key, scancode, action, mods):
        import glfw
        self.events.append(KeyboardInput(translate_key(key), action != glfw.RELEASE))

    def _on_cursor_enter(self, handle, entered):
        if entered: self.events.append(CursorEntered(POINTER_DEVICE_ID))
        else: self.events.append(CursorLeft(POINTER_DEVICE_ID))

    def _on_cursor_pos(self, handle, x, y):
        self.events.append(CursorMoved(POINTER_DEVICE_ID, (x, y)))

    def _on_framebuffer_size(self, handle, width, height):
        self.events.append(Resized((width, height)))

    def _on_content_scale(self, handle, xscale, yscale):
        self.events.append(ScaleFactorChanged(xscale))

    def poll(self):
        """Pumps GLFW and returns the pending events, redraw last."""
        import glfw
        glfw.poll_events()
        events, self.events = self.events, []
        if self.redraw_requested:
            self.redraw_requested = False
            events.append(RedrawRequested())
        return events

    def request_redraw(self):
        self.redraw_requested = True

    def inner_size(self):
        import glfw
        return glfw.get_framebuffer_size(self.handle)

    def set_cursor_grab(self, mode: GrabMode):
        import glfw
        value = getattr(glfw, _GLFW_GRAB_MODES[mode], None)
        if value is None:
            raise CursorGrabError(f"Grab mode '{mode.value}' is not supported by this GLFW build.")
        try:
            glfw.set_input_mode(self.handle, glfw.CURSOR, value)
        except glfw.GLFWError as e:
            raise CursorGrabError(str(e)) from e

    def swap_buffers(self):
        import glfw
        glfw.swap_buffers(self.handle)

    def close(self):
        import glfw
        glfw.destroy_window(self.handle)
        glfw.terminate()
