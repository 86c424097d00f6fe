import sys
from .events import (
    Key, CloseRequested, KeyboardInput, CursorEntered, CursorLeft, CursorMoved,
    Resized, ScaleFactorChanged, RedrawRequested,
)
from .mouselook import MouseLook
from .render import SurfaceLost, SurfaceOutdated, SurfaceOutOfMemory, SurfaceTimeout

class EventLoop:
    """
    Dispatches window events to the camera, the controller and the renderer.

    Every event is offered to `state.input` first. Events it consumes get no
    further handling here. After each batch of events a redraw is requested,
    so frames are produced as fast as the window delivers them.
    """
    def __init__(self, state, mouse_look: MouseLook = None):
        self.state = state
        self.window = state.window()
        self.mouse_look = mouse_look if mouse_look else MouseLook(self.window)
        self.running = True

    def exit(self):
        self.running = False

    def handle(self, event):
        if self.state.input(event):
            return

        if isinstance(event, CursorEntered):
            self.mouse_look.cursor_entered(event.device_id)
        elif isinstance(event, CursorLeft):
            self.mouse_look.cursor_left(event.device_id)
        elif isinstance(event, CursorMoved):
            delta = self.mouse_look.cursor_moved(event.device_id, event.position, self.state.camera)
            if delta is not None:
                self.state.cam_dir(delta)
        elif isinstance(event, CloseRequested) or (isinstance(event, KeyboardInput) and event.key == Key.ESCAPE):
            self.exit()
        elif isinstance(event, KeyboardInput) and event.key == Key.LEFT_ALT:
            self.mouse_look.release()
        elif isinstance(event, Resized):
            self.state.resize(event.size)
        elif isinstance(event, ScaleFactorChanged):
            self.state.resize(self.window.inner_size())
        elif isinstance(event, RedrawRequested):
            self.redraw()

    def redraw(self):
        self.state.update()
        try:
            self.state.render()
        except (SurfaceLost, SurfaceOutdated):
            self.state.resize(self.state.size)
        except SurfaceOutOfMemory as e:
            print(f"ERROR: Out of GPU memory, exiting: {e}", file=sys.stderr)
            self.exit()
        except SurfaceTimeout:
            pass

    def run_once(self):
        """Handles one batch of pending events, then requests the next frame."""
        for event in self.window.poll():
            self.handle(event)
            if not self.running:
                return
        self.window.request_redraw()

    def run(self):
        self.window.request_redraw()
        while self.running:
            self.run_once()
