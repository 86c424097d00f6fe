import os
import sys
from .camera import Camera
from .controller import CameraController, DEFAULT_SPEED
from .io import load_model
from .loop import EventLoop
from .mouselook import MouseLook, DEFAULT_SENSITIVITY
from .window import Window, DEFAULT_TITLE

def view(model_path, texture=None, width=1280, height=720, speed=DEFAULT_SPEED,
         sensitivity=DEFAULT_SENSITIVITY, position=(0.0, 0.0, -5.0), watch=False, title=DEFAULT_TITLE):
    """
    Opens a window and flies a camera around a model.

    W/A/S/D or the arrow keys move, Space and Left Shift move up and down,
    the mouse looks around once the cursor enters the window. Left Alt
    releases the cursor, Escape quits.

    Args:
        model_path (str): Model file to display.
        texture (str, optional): Image sampled with the model's texture coordinates.
        width (int, optional): Window width in pixels. Defaults to 1280.
        height (int, optional): Window height in pixels. Defaults to 720.
        speed (float, optional): Movement per frame in world units.
        sensitivity (float, optional): Degrees of rotation per pixel of cursor motion.
        position (tuple, optional): Starting camera position.
        watch (bool, optional): Recompile shaders when files in glsl/ change.
        title (str, optional): Window title.

    Example:
        >>> from flyview import view
        >>> view("utahteapot.obj")
    """
    from .render import RenderState

    try:
        mesh = load_model(model_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: Failed to load model '{model_path}': {e}", file=sys.stderr)
        return

    if not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY") and sys.platform == 'linux':
        print("WARNING: No display detected. Window creation may fail.", file=sys.stderr)

    window = None
    state = None
    try:
        window = Window(width, height, title)
        fb_width, fb_height = window.inner_size()
        camera = Camera(position=position, aspect=fb_width / max(fb_height, 1))
        state = RenderState(window, mesh, camera=camera, controller=CameraController(speed), texture=texture, watch=watch)
        EventLoop(state, MouseLook(window, sensitivity)).run()
    except Exception as e:
        print(f"ERROR: Failed to launch window: {e}", file=sys.stderr)
    finally:
        if state: state.release()
        if window: window.close()
