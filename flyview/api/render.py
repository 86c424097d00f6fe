import sys
from enum import Enum
from pathlib import Path
from .camera import Camera, CameraUniform, Euler
from .controller import CameraController
from .io import Mesh, GLSL_DIR, get_shader_source, load_all_glsl, load_texture

try:
    from watchdog.observers import Observer
    from watchdog.events import FileSystemEventHandler
    WATCHDOG_AVAILABLE = True
except ImportError:
    WATCHDOG_AVAILABLE = False

CAMERA_BLOCK_BINDING = 0
CLEAR_COLOR = (0.1, 0.12, 0.15)

class SurfaceError(RuntimeError):
    """Base class for per-frame presentation failures."""

class SurfaceLost(SurfaceError):
    pass

class SurfaceOutdated(SurfaceError):
    pass

class SurfaceOutOfMemory(SurfaceError):
    pass

class SurfaceTimeout(SurfaceError):
    pass

class SurfaceState(Enum):
    READY = 'ready'
    NEEDS_RECONFIGURE = 'needs_reconfigure'
    FATAL = 'fatal'


class RenderState:
    """
    Owns the GL context, the mesh buffers and the camera uniform buffer.

    The mesh is passed in at construction; nothing else feeds geometry to
    the renderer. `render` reports presentation problems by raising one of
    the `SurfaceError` subclasses and records the outcome in `surface_state`.
    """
    def __init__(self, window, mesh: Mesh, camera: Camera = None, controller: CameraController = None,
                 texture=None, watch=False):
        """
        Args:
            window (Window): The window whose GL context is current.
            mesh (Mesh): Geometry to draw.
            camera (Camera, optional): Defaults to a camera five units back on -Z.
            controller (CameraController, optional): Defaults to the default speed.
            texture (str, optional): Image file sampled with the mesh's texture
                                     coordinates. Defaults to plain white.
            watch (bool, optional): Recompile shaders when a .glsl file changes.
        """
        import moderngl
        self._window = window
        self.size = self.configured_size = tuple(window.inner_size())
        width, height = self.size
        self.camera = camera if camera else Camera(position=(0.0, 0.0, -5.0), aspect=width / max(height, 1))
        self.controller = controller if controller else CameraController()
        self.uniform = CameraUniform()
        self.surface_state = SurfaceState.READY
        self.watching = watch and WATCHDOG_AVAILABLE
        self.reload_pending = False
        self.observer = None

        self.ctx = moderngl.create_context()
        self.ctx.enable(moderngl.DEPTH_TEST)
        self.ctx.viewport = (0, 0, width, height)

        self.camera_buffer = self.ctx.buffer(self.uniform.to_bytes())
        self.vbo = self.ctx.buffer(mesh.vertex_data().tobytes())
        self.ibo = self.ctx.buffer(mesh.indices.tobytes())
        self.texture = self._create_texture(texture)

        self.program = None
        self.program = self._compile_shader()
        if self.program is None:
            raise RuntimeError("Initial shader compilation failed.")
        self.vao = self._create_vertex_array()

        if watch and not WATCHDOG_AVAILABLE:
            print("INFO: Shader hot-reloading disabled. `watchdog` not installed. Run 'pip install watchdog'.")
        self._start_watcher()

    def window(self):
        return self._window

    def _create_texture(self, path):
        if path is None:
            return self.ctx.texture((1, 1), 4, b'\xff\xff\xff\xff')
        size, data = load_texture(path)
        texture = self.ctx.texture(size, 4, data)
        texture.build_mipmaps()
        return texture

    def _compile_shader(self):
        """Compiles the mesh program. Returns the previous program on failure."""
        import moderngl
        try:
            prog = self.ctx.program(
                vertex_shader=get_shader_source('mesh_vertex'),
                fragment_shader=get_shader_source('mesh_fragment'),
            )
        except (moderngl.Error, FileNotFoundError) as e:
            print(f"ERROR: Shader compilation failed. Details:\n{e}", file=sys.stderr)
            return self.program

        prog['Camera'].binding = CAMERA_BLOCK_BINDING
        try: prog['u_texture'].value = 0
        except KeyError: pass
        print("INFO: Shader compiled successfully.")
        return prog

    def _create_vertex_array(self):
        return self.ctx.vertex_array(
            self.program,
            [(self.vbo, '3f 2f', 'in_position', 'in_tex_coords')],
            index_buffer=self.ibo,
            index_element_size=4,
        )

    def _reload_shaders(self):
        print("INFO: Shader change detected. Reloading...")
        load_all_glsl(reload=True)
        new_prog = self._compile_shader()
        if new_prog is not self.program:
            self.vao.release()
            self.program.release()
            self.program = new_prog
            self.vao = self._create_vertex_array()

    def _start_watcher(self):
        if not self.watching: return
        class ChangeHandler(FileSystemEventHandler):
            def __init__(self, renderer): self.renderer = renderer
            def on_modified(self, event):
                if str(event.src_path).endswith('.glsl'): self.renderer.reload_pending = True
        self.observer = Observer()
        self.observer.schedule(ChangeHandler(self), str(GLSL_DIR), recursive=False)
        self.observer.daemon = True
        self.observer.start()
        print(f"INFO: Watching '{Path(GLSL_DIR).name}/' for shader changes...")

    def input(self, event) -> bool:
        return self.controller.process_input_event(event)

    def cam_dir(self, delta: Euler):
        self.camera.rotate(delta)

    def update(self):
        if self.reload_pending:
            self.reload_pending = False
            self._reload_shaders()
        self.controller.tick(self.camera)
        self.uniform.update_view_proj(self.camera)
        self.camera_buffer.write(self.uniform.to_bytes())

    def resize(self, size):
        width, height = size
        if width <= 0 or height <= 0:
            return
        self.size = self.configured_size = (width, height)
        self.camera.aspect = width / height
        self.ctx.viewport = (0, 0, width, height)
        self.surface_state = SurfaceState.READY

    def render(self):
        import moderngl
        width, height = self._window.inner_size()
        if width == 0 or height == 0:
            raise SurfaceTimeout("Framebuffer has zero size.")
        if (width, height) != self.configured_size:
            # `size` follows the framebuffer; the viewport catches up in `resize`.
            self.size = (width, height)
            self.surface_state = SurfaceState.NEEDS_RECONFIGURE
            raise SurfaceOutdated(f"Framebuffer is {width}x{height}, configured for {self.configured_size[0]}x{self.configured_size[1]}.")

        self.ctx.clear(*CLEAR_COLOR, depth=1.0)
        self.camera_buffer.bind_to_uniform_block(CAMERA_BLOCK_BINDING)
        self.texture.use(0)
        self.vao.render(mode=moderngl.TRIANGLES)

        error = self.ctx.error
        if error == 'GL_OUT_OF_MEMORY':
            self.surface_state = SurfaceState.FATAL
            raise SurfaceOutOfMemory(error)
        if error == 'GL_CONTEXT_LOST':
            self.surface_state = SurfaceState.NEEDS_RECONFIGURE
            raise SurfaceLost(error)

        self._window.swap_buffers()
        self.surface_state = SurfaceState.READY

    def release(self):
        if self.observer:
            self.observer.stop()
        for resource in (self.vao, self.program, self.vbo, self.ibo, self.camera_buffer, self.texture):
            resource.release()
